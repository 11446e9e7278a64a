"""
Application lifecycle policy.

This module owns the allowed status transitions of an application and
the generation of its reference code.
"""
import logging
import random
import uuid
from typing import Any, Dict, FrozenSet, Optional, Tuple

from pb_portal.domains import Application, ApplicationStatus, now_millis
from pb_portal.exceptions import InvalidTransitionError

logger = logging.getLogger(__name__)

# Fields fixed at creation
IMMUTABLE_FIELDS = ("id", "ref", "createdAt")

# Keyed by (status, stage); stage only matters for drafts
_TRANSITIONS: Dict[Tuple[ApplicationStatus, Optional[int]], FrozenSet[ApplicationStatus]] = {
    (ApplicationStatus.DRAFT, 1): frozenset({ApplicationStatus.SUBMITTED_STAGE1}),
    (ApplicationStatus.SUBMITTED_STAGE1, None): frozenset({ApplicationStatus.INVITED_STAGE2}),
    (ApplicationStatus.INVITED_STAGE2, None): frozenset({ApplicationStatus.DRAFT}),
    (ApplicationStatus.DRAFT, 2): frozenset({ApplicationStatus.SUBMITTED_STAGE2}),
    (ApplicationStatus.SUBMITTED_STAGE2, None): frozenset({ApplicationStatus.FINALIST}),
}


class ApplicationLifecycle:
    """Rules for moving an application between statuses."""

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize the lifecycle policy.

        Args:
            rng: Random source for reference numbers, injectable for tests
        """
        self.rng = rng or random.Random()

    def generate_ref(self, area: str) -> str:
        """Generate a reference code such as PB-BLA-123."""
        area_code = area[:3].upper()
        return f"PB-{area_code}-{self.rng.randint(100, 999)}"

    def allowed_targets(self, app: Application) -> FrozenSet[ApplicationStatus]:
        stage = app.stage if app.status == ApplicationStatus.DRAFT else None
        return _TRANSITIONS.get((app.status, stage), frozenset())

    def can_transition(self, app: Application, target: ApplicationStatus) -> bool:
        return ApplicationStatus(target) in self.allowed_targets(app)

    def ensure_transition(self, app: Application, target: ApplicationStatus) -> None:
        """Raise InvalidTransitionError unless app may move to target."""
        if not self.can_transition(app, target):
            label = app.status.value
            if app.status == ApplicationStatus.DRAFT:
                label = f"{label} (stage {app.stage})"
            raise InvalidTransitionError(
                f"Cannot move application {app.id or '(new)'} from "
                f"{label} to {ApplicationStatus(target).value}"
            )

    def transition_updates(self, app: Application, target: ApplicationStatus) -> Dict[str, Any]:
        """Validate a transition and return the fields it changes."""
        self.ensure_transition(app, target)
        target = ApplicationStatus(target)
        updates: Dict[str, Any] = {"status": target.value}
        if app.status == ApplicationStatus.INVITED_STAGE2:
            # Stage 2 editing re-enters draft on the same record
            updates["stage"] = 2
        if target == ApplicationStatus.SUBMITTED_STAGE1 and not app.ref:
            if not app.area:
                raise ValueError("An area is required to submit Stage 1")
            updates["ref"] = self.generate_ref(app.area)
        logger.info(
            f"Application {app.id}: {app.status.value} -> {target.value}")
        return updates

    def new_submission(self, draft: Application) -> Application:
        """Stamp a draft as a freshly created Stage 1 submission."""
        if not draft.area:
            raise ValueError("An area is required to submit Stage 1")
        return draft.model_copy(update={
            "id": f"app_{uuid.uuid4().hex}",
            "created_at": now_millis(),
            "status": ApplicationStatus.SUBMITTED_STAGE1,
            "stage": 1,
            "ref": self.generate_ref(draft.area),
        })

    def check_update(self, existing: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Raise InvalidTransitionError if updates change status off the allowed path.

        Args:
            existing: Stored application document
            updates: Partial update in stored field names
        """
        target = updates.get("status")
        if target is None or target == existing.get("status"):
            return
        self.ensure_transition(Application.from_document(existing), target)

    @staticmethod
    def protect_immutable(existing: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
        """Drop changes to fields that are fixed once set."""
        kept = dict(updates)
        for field in IMMUTABLE_FIELDS:
            if field not in kept:
                continue
            if existing.get(field) is not None and kept[field] != existing[field]:
                logger.debug(
                    f"Ignoring change to immutable field {field} of {existing.get('id')}")
                del kept[field]
            elif field == "id":
                del kept[field]
        return kept
