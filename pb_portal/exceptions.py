"""
Error taxonomy for the PB Portal core.

The message of each error is what the calling UI shows to the user.
"""
from typing import Optional

from pb_portal.domains.users import User


class PortalError(Exception):
    """Base class for all portal errors."""


class AuthenticationError(PortalError):
    """Credentials were rejected."""


class DuplicateAccountError(PortalError):
    """An account with this email already exists."""


class ProfileMissingError(PortalError):
    """Authentication succeeded but no profile document exists.

    Carries a minimal synthesized profile that login falls back to.
    """

    def __init__(self, uid: str, fallback: Optional[User] = None):
        super().__init__(f"No profile stored for user {uid}")
        self.uid = uid
        self.fallback = fallback


class UnsupportedOperationError(PortalError):
    """The active backend cannot perform this operation."""


class ConfigurationError(PortalError, ValueError):
    """Configuration is invalid or the required backend mode is not active."""


class NotFoundError(PortalError, LookupError):
    """The record targeted by an update or delete does not exist."""

    def __init__(self, collection: str, record_id: str):
        super().__init__(f"{collection} record not found: {record_id}")
        self.collection = collection
        self.record_id = record_id


class InvalidTransitionError(PortalError, ValueError):
    """An application status change the lifecycle does not allow."""
