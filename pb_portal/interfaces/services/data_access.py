"""
Data access service interface.

One facade over the configured backend. The UI layer talks to this
contract and never to a backend directly.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pb_portal.domains import Application, PortalSettings, Score, User


class DataAccessService(ABC):
    """Interface for portal data access."""

    @abstractmethod
    async def login(self, identifier: str, password: str) -> User:
        """Authenticate by email or username and return the profile."""
        pass

    @abstractmethod
    async def register(self, email: str, password: str, name: str) -> User:
        """Create an applicant account."""
        pass

    @abstractmethod
    async def get_applications(self, area: Optional[str] = None) -> List[Application]:
        """Get applications, optionally filtered by area."""
        pass

    @abstractmethod
    async def create_application(self, draft: Application) -> Application:
        """Persist a new Stage 1 submission."""
        pass

    @abstractmethod
    async def get_application(self, app_id: str) -> Application:
        """Get one application. Raises NotFoundError when absent."""
        pass

    @abstractmethod
    async def update_application(self, app_id: str, updates: Dict[str, Any]) -> None:
        """Merge fields into an existing application."""
        pass

    @abstractmethod
    async def delete_application(self, app_id: str) -> None:
        """Hard-delete an application."""
        pass

    @abstractmethod
    async def save_score(self, score: Score) -> None:
        """Upsert a score keyed by (appId, scorerId)."""
        pass

    @abstractmethod
    async def get_scores(self) -> List[Score]:
        """Get all scores."""
        pass

    @abstractmethod
    async def reset_user_scores(self, scorer_id: str) -> int:
        """Delete every score by one scorer atomically."""
        pass

    @abstractmethod
    async def get_portal_settings(self) -> PortalSettings:
        """Get the global settings, defaults if never stored."""
        pass

    @abstractmethod
    async def update_portal_settings(self, settings: PortalSettings) -> None:
        """Overwrite the global settings."""
        pass

    @abstractmethod
    async def get_users(self) -> List[User]:
        """Get all user profiles."""
        pass

    @abstractmethod
    async def update_user_profile(self, uid: str, updates: Dict[str, Any]) -> User:
        """Merge profile fields and return the stored profile."""
        pass

    @abstractmethod
    async def delete_user(self, uid: str) -> None:
        """Hard-delete a profile without cascading."""
        pass

    @abstractmethod
    async def update_user(self, user: User) -> None:
        """Merge a full user record into the stored one."""
        pass

    @abstractmethod
    async def admin_create_user(self, user: User, password: str) -> User:
        """Create another user's account with credentials."""
        pass
