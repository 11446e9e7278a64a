"""
PB Portal - core of a participatory-budgeting grant portal.

This package provides the data access facade (local mock or remote
database), the application lifecycle, committee scoring and the seeding
routine used by the portal UI.
"""

# Client interface (main entry point)
from pb_portal.client.portal import PortalClient

# Factory for wiring the portal from configuration
from pb_portal.factories.portal_factory import PortalFactory, PortalServices

# Service interface and errors
from pb_portal.interfaces.services.data_access import DataAccessService
from pb_portal.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DuplicateAccountError,
    InvalidTransitionError,
    NotFoundError,
    PortalError,
    ProfileMissingError,
    UnsupportedOperationError,
)

# Package metadata
__all__ = [
    # Main client interface
    "PortalClient",
    # Factories
    "PortalFactory",
    "PortalServices",
    # Services
    "DataAccessService",
    # Errors
    "AuthenticationError",
    "ConfigurationError",
    "DuplicateAccountError",
    "InvalidTransitionError",
    "NotFoundError",
    "PortalError",
    "ProfileMissingError",
    "UnsupportedOperationError",
]
