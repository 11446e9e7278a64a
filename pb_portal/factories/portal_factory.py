"""
Factory for creating and wiring components of the PB Portal.

This module handles the creation and dependency injection for the
data access service and the services around it. The backend is chosen
here, once, from configuration.
"""

import logging
from typing import Any, Dict, NamedTuple, Optional

# Service imports
from pb_portal.interfaces import DataAccessService, IdentityProvider
from pb_portal.services.lifecycle import ApplicationLifecycle
from pb_portal.services.local_access import LocalAccessService
from pb_portal.services.remote_access import RemoteAccessService
from pb_portal.services.scoring import ScoringService
from pb_portal.services.seeding import SeedingService

# Adapter imports
from pb_portal.adapters.identity_adapter import MongoIdentityAdapter
from pb_portal.adapters.json_store_adapter import JsonFileStore
from pb_portal.adapters.mongodb_adapter import MongoDBAdapter

from pb_portal.domains import DEFAULT_LOGIN_DOMAIN
from pb_portal.exceptions import ConfigurationError

# Setup logger for this module
logger = logging.getLogger(__name__)

MODES = ("local", "remote")


class PortalServices(NamedTuple):
    """The wired portal components."""
    api: DataAccessService
    lifecycle: ApplicationLifecycle
    scoring: ScoringService
    seeder: SeedingService
    identity: Optional[IdentityProvider] = None


class PortalFactory:
    """Factory for creating and wiring components of the PB Portal."""

    @staticmethod
    def create_mongo_adapter(mongo_config: Dict[str, Any]) -> MongoDBAdapter:
        if "connection_string" not in mongo_config:
            raise ConfigurationError("MongoDB connection string is required.")
        if "database" not in mongo_config:
            raise ConfigurationError("MongoDB database name is required.")
        return MongoDBAdapter(
            connection_string=mongo_config["connection_string"],
            database_name=mongo_config["database"],
            transactions=mongo_config.get("transactions", True),
        )

    @staticmethod
    def create_from_config(config: Dict[str, Any]) -> PortalServices:
        """Create the portal from configuration.

        Args:
            config: Configuration dictionary

        Returns:
            Wired portal services
        """
        mode = config.get("mode", "local")
        if mode not in MODES:
            raise ConfigurationError(
                f"Unknown mode '{mode}', expected one of {', '.join(MODES)}.")

        login_domain = config.get("login_domain", DEFAULT_LOGIN_DOMAIN)
        lifecycle = ApplicationLifecycle()
        scoring = ScoringService()

        if mode == "remote":
            if "mongo" not in config:
                raise ConfigurationError("Remote mode requires a 'mongo' section.")
            db_adapter = PortalFactory.create_mongo_adapter(config["mongo"])
            identity = MongoIdentityAdapter(
                db_adapter,
                bcrypt_rounds=config.get("identity", {}).get("bcrypt_rounds", 12),
            )
            api = RemoteAccessService(
                storage=db_adapter,
                identity=identity,
                lifecycle=lifecycle,
                login_domain=login_domain,
            )
            logger.info(
                f"Using remote backend, database: {config['mongo']['database']}")
            return PortalServices(
                api=api,
                lifecycle=lifecycle,
                scoring=scoring,
                seeder=SeedingService(db_adapter),
                identity=identity,
            )

        local_config = config.get("local", {})
        store = JsonFileStore(local_config.get("path"))
        api = LocalAccessService(
            store=store,
            lifecycle=lifecycle,
            login_domain=login_domain,
            auto_seed=local_config.get("auto_seed", True),
        )
        if local_config.get("path"):
            logger.info(f"Using local backend at {local_config['path']}")
        else:
            logger.info("Using in-memory local backend")
        return PortalServices(
            api=api,
            lifecycle=lifecycle,
            scoring=scoring,
            seeder=SeedingService(None),
        )
