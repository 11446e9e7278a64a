"""
Client interface for the PB Portal.

This module provides the API a UI layer uses: the data access service
plus the application workflow, scoring and review helpers built on it.
"""

import json
import importlib.util
from typing import Any, Dict, List, Optional

from pb_portal.domains import (
    ALL_AREAS,
    REVIEWABLE_STATUSES,
    Application,
    ApplicationStatus,
    Role,
    Score,
    ScoreSummary,
    User,
)
from pb_portal.factories.portal_factory import PortalFactory


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from a JSON file or a Python file defining `config`."""
    with open(config_path, "r") as f:
        if config_path.endswith(".json"):
            return json.load(f)
    spec = importlib.util.spec_from_file_location("config", config_path)
    config_module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(config_module)
    return config_module.config


class PortalClient:
    """Entry point for UI code."""

    def __init__(self, config_path: str = None, config: Dict[str, Any] = None):
        """Initialize the portal from a config file or dictionary.

        Args:
            config_path: Path to configuration file (JSON or Python)
            config: Configuration dictionary
        """
        if config is None and not config_path:
            raise ValueError("Either config or config_path must be provided")

        if config_path:
            config = load_config(config_path)

        services = PortalFactory.create_from_config(config)
        self.api = services.api
        self.lifecycle = services.lifecycle
        self.scoring = services.scoring
        self.seeder = services.seeder
        self.identity = services.identity

    # --- applicant workflow ---

    def start_stage1(self, user: User) -> Application:
        """New unsaved Stage 1 draft owned by user."""
        return Application(
            user_id=user.uid,
            status=ApplicationStatus.DRAFT,
            stage=1,
            form_data={"budgetBreakdown": []},
        )

    async def submit_stage1(self, draft: Application) -> Application:
        """Submit a Stage 1 form, creating the application if it is new."""
        if not draft.id:
            self.lifecycle.ensure_transition(draft, ApplicationStatus.SUBMITTED_STAGE1)
            return await self.api.create_application(draft)

        stored = await self.api.get_application(draft.id)
        updates = draft.to_document()
        updates.update(self.lifecycle.transition_updates(
            stored, ApplicationStatus.SUBMITTED_STAGE1))
        await self.api.update_application(draft.id, updates)
        return await self.api.get_application(draft.id)

    async def invite_to_stage2(self, app_id: str) -> Application:
        return await self._advance(app_id, ApplicationStatus.INVITED_STAGE2)

    async def begin_stage2(self, app_id: str) -> Application:
        """Re-open an invited application as a Stage 2 draft."""
        return await self._advance(app_id, ApplicationStatus.DRAFT)

    async def submit_stage2(self, app_id: str, updates: Optional[Dict[str, Any]] = None) -> Application:
        """Submit Stage 2 fields on top of the Stage 1 record."""
        stored = await self.api.get_application(app_id)
        fields = dict(updates or {})
        fields.update(self.lifecycle.transition_updates(
            stored, ApplicationStatus.SUBMITTED_STAGE2))
        await self.api.update_application(app_id, fields)
        return await self.api.get_application(app_id)

    async def mark_finalist(self, app_id: str) -> Application:
        return await self._advance(app_id, ApplicationStatus.FINALIST)

    async def _advance(self, app_id: str, target: ApplicationStatus) -> Application:
        stored = await self.api.get_application(app_id)
        await self.api.update_application(
            app_id, self.lifecycle.transition_updates(stored, target))
        return await self.api.get_application(app_id)

    async def applications_for(self, user: User) -> List[Application]:
        """Applications owned by an applicant."""
        return [a for a in await self.api.get_applications() if a.user_id == user.uid]

    # --- committee ---

    async def review_queue(self, user: User) -> List[Application]:
        """Applications a committee member can review, in their area."""
        area = ALL_AREAS if user.role == Role.ADMIN else user.area
        apps = await self.api.get_applications(area)
        return [a for a in apps if a.status in REVIEWABLE_STATUSES]

    async def scores_for(self, scorer_id: str) -> List[Score]:
        return [s for s in await self.api.get_scores() if s.scorer_id == scorer_id]

    async def score_application(
        self,
        app_id: str,
        scorer: User,
        ratings: Dict[str, int],
        notes: Optional[Dict[str, str]] = None,
        is_final: bool = True,
    ) -> Score:
        """Build and save a scorer's evaluation, replacing any earlier one."""
        existing = next(
            (s for s in await self.scores_for(scorer.uid) if s.app_id == app_id), None)
        score = self.scoring.build_score(
            app_id, scorer, ratings, notes=notes, is_final=is_final, existing=existing)
        await self.api.save_score(score)
        return score

    def summarize(self, score: Score) -> ScoreSummary:
        return self.scoring.summarize_score(score)

    # --- admin ---

    async def overview(self) -> Dict[str, Any]:
        """Totals for the admin dashboard."""
        users = await self.api.get_users()
        apps = await self.api.get_applications()
        settings = await self.api.get_portal_settings()
        by_status = {status.value: 0 for status in ApplicationStatus}
        for app in apps:
            by_status[app.status.value] += 1
        return {
            "users": len(users),
            "committee_members": sum(1 for u in users if u.role == Role.COMMITTEE),
            "applications": len(apps),
            "submitted": sum(1 for a in apps if "Submitted" in a.status.value),
            "by_status": by_status,
            "settings": settings,
        }

    async def seed_database(self) -> Dict[str, int]:
        return await self.seeder.seed_database()
