"""
Seeding service implementation.

Bulk-loads the demo fixtures, default settings and the scoring rubric
into the durable backend as one atomic batch.
"""
import logging
from typing import Any, Dict, List, Optional

from pb_portal.domains import SCORING_CRITERIA, PortalSettings, ScoringCriterion
from pb_portal.exceptions import ConfigurationError
from pb_portal.fixtures import DEMO_APPS, DEMO_USERS
from pb_portal.interfaces import BatchOperation, DataStorageProvider
from pb_portal.services.remote_access import APPLICATIONS, CONFIG, SETTINGS, SETTINGS_ID, USERS

logger = logging.getLogger(__name__)


class SeedingService:
    """Service for one-time population of the portal database."""

    def __init__(
        self,
        storage: Optional[DataStorageProvider],
        users: Optional[List[Dict[str, Any]]] = None,
        applications: Optional[List[Dict[str, Any]]] = None,
        criteria: Optional[List[ScoringCriterion]] = None,
    ):
        """Initialize the seeding service.

        Args:
            storage: Durable document storage, None in local mock mode
            users: Fixture users, with plaintext passwords
            applications: Fixture applications
            criteria: Scoring rubric to store for reference
        """
        self.storage = storage
        self.users = users if users is not None else DEMO_USERS
        self.applications = applications if applications is not None else DEMO_APPS
        self.criteria = criteria if criteria is not None else SCORING_CRITERIA

    def build_batch(self) -> List[BatchOperation]:
        """Build the writes for a full seed."""
        operations = []
        for user in self.users:
            profile = {k: v for k, v in user.items() if k != "password"}
            operations.append(BatchOperation(
                op="set", collection=USERS, id=user["uid"], data=profile))

        for app in self.applications:
            operations.append(BatchOperation(
                op="set", collection=APPLICATIONS, id=app["id"], data=dict(app)))

        operations.append(BatchOperation(
            op="set", collection=SETTINGS, id=SETTINGS_ID,
            data=PortalSettings().to_document()))
        operations.append(BatchOperation(
            op="set", collection=CONFIG, id="scoringCriteria",
            data={"items": [c.to_document() for c in self.criteria]}))
        return operations

    async def seed_database(self) -> Dict[str, int]:
        """Write every fixture in one batch.

        Returns:
            Number of documents written per collection

        Raises:
            ConfigurationError: If no durable backend is configured
        """
        if self.storage is None:
            raise ConfigurationError(
                "Cannot seed in local mode. Set mode to 'remote' and configure mongo.")

        logger.info("Starting seed")
        operations = self.build_batch()
        self.storage.commit_batch(operations)

        counts: Dict[str, int] = {}
        for operation in operations:
            counts[operation.collection] = counts.get(operation.collection, 0) + 1
        logger.info(f"Database seeded: {counts}")
        return counts
