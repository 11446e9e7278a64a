from abc import ABC, abstractmethod
from typing import Optional


class IdentityProvider(ABC):
    """Interface for credential stores backing remote login."""

    @abstractmethod
    def authenticate(self, handle: str, secret: str) -> str:
        """Verify credentials and return the user id.

        Raises AuthenticationError on bad credentials.
        """
        pass

    @abstractmethod
    def create_identity(
        self,
        handle: str,
        secret: str,
        uid: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> str:
        """Create credentials and return the user id.

        Raises DuplicateAccountError if the handle is taken.
        """
        pass

    @abstractmethod
    def get_display_name(self, uid: str) -> Optional[str]:
        """Display name recorded with the identity, if any."""
        pass
