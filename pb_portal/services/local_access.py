"""
Local data access service.

Runs the portal against the flat local store, for demos and development.
Credentials live in the stored user records; they are stripped from
every returned profile.
"""
import logging
import uuid
from typing import Any, Dict, List, Optional

from pb_portal.domains import (
    DEFAULT_LOGIN_DOMAIN,
    Application,
    PortalSettings,
    Role,
    Score,
    User,
    login_handle,
    merge_documents,
)
from pb_portal.exceptions import AuthenticationError, DuplicateAccountError, NotFoundError
from pb_portal.fixtures import DEMO_APPS, DEMO_USERS
from pb_portal.interfaces import DataAccessService, KeyValueStoreProvider
from pb_portal.services.lifecycle import ApplicationLifecycle

logger = logging.getLogger(__name__)

USERS_KEY = "users"
APPS_KEY = "apps"
SCORES_KEY = "scores"
SETTINGS_KEY = "portalSettings"


class LocalAccessService(DataAccessService):
    """Data access over the local key-value store."""

    def __init__(
        self,
        store: KeyValueStoreProvider,
        lifecycle: Optional[ApplicationLifecycle] = None,
        login_domain: str = DEFAULT_LOGIN_DOMAIN,
        auto_seed: bool = True,
    ):
        """Initialize the local service.

        Args:
            store: Local key-value store
            lifecycle: Lifecycle policy used to stamp new applications
            login_domain: Domain appended to bare usernames at login
            auto_seed: Fill empty users/apps from the demo fixtures
        """
        self.store = store
        self.lifecycle = lifecycle or ApplicationLifecycle()
        self.login_domain = login_domain
        self.auto_seed = auto_seed

    # --- storage helpers ---

    def _user_records(self) -> List[Dict[str, Any]]:
        records = self.store.get_list(USERS_KEY)
        if not records and self.auto_seed:
            logger.warning("Local user store empty, loading demo users")
            self.store.set_list(USERS_KEY, DEMO_USERS)
            records = self.store.get_list(USERS_KEY)
        return records

    def _app_records(self) -> List[Dict[str, Any]]:
        if self.auto_seed and not self.store.has_key(APPS_KEY):
            logger.warning("Local application store empty, loading demo applications")
            self.store.set_list(APPS_KEY, DEMO_APPS)
        return self.store.get_list(APPS_KEY)

    @staticmethod
    def _find(records: List[Dict[str, Any]], field: str, value: str) -> int:
        for idx, record in enumerate(records):
            if record.get(field) == value:
                return idx
        return -1

    def _email_taken(self, records: List[Dict[str, Any]], email: str) -> bool:
        email = email.strip().lower()
        return any(r.get("email", "").lower() == email for r in records)

    # --- auth ---

    async def login(self, identifier: str, password: str) -> User:
        handle = login_handle(identifier, self.login_domain)
        name = identifier.strip().lower()
        for record in self._user_records():
            matches_id = (
                record.get("email", "").lower() == handle
                or (record.get("username") or "").lower() == name
            )
            if matches_id and record.get("password") == password:
                return User.from_document(record)
        raise AuthenticationError("Invalid credentials")

    async def register(self, email: str, password: str, name: str) -> User:
        records = self._user_records()
        if self._email_taken(records, email):
            raise DuplicateAccountError(f"An account already exists for {email}")
        user = User(
            uid=f"user_{uuid.uuid4().hex}",
            email=email,
            display_name=name,
            role=Role.APPLICANT,
        )
        records.append({**user.to_document(), "password": password})
        self.store.set_list(USERS_KEY, records)
        logger.info(f"Registered applicant {user.uid}")
        return user

    # --- applications ---

    async def get_applications(self, area: Optional[str] = None) -> List[Application]:
        apps = [Application.from_document(r) for r in self._app_records()]
        return [app for app in apps if app.visible_in(area)]

    async def get_application(self, app_id: str) -> Application:
        records = self._app_records()
        idx = self._find(records, "id", app_id)
        if idx == -1:
            raise NotFoundError("applications", app_id)
        return Application.from_document(records[idx])

    async def create_application(self, draft: Application) -> Application:
        app = self.lifecycle.new_submission(draft)
        records = self._app_records()
        records.append(app.to_document())
        self.store.set_list(APPS_KEY, records)
        logger.info(f"Created application {app.id} ({app.ref})")
        return app

    async def update_application(self, app_id: str, updates: Dict[str, Any]) -> None:
        records = self._app_records()
        idx = self._find(records, "id", app_id)
        if idx == -1:
            raise NotFoundError("applications", app_id)
        fields = self.lifecycle.protect_immutable(
            records[idx], Application.document_fields(updates))
        self.lifecycle.check_update(records[idx], fields)
        merged = merge_documents(records[idx], fields)
        Application.from_document(merged)
        records[idx] = merged
        self.store.set_list(APPS_KEY, records)

    async def delete_application(self, app_id: str) -> None:
        records = self._app_records()
        remaining = [r for r in records if r.get("id") != app_id]
        if len(remaining) == len(records):
            raise NotFoundError("applications", app_id)
        self.store.set_list(APPS_KEY, remaining)

    # --- scores ---

    async def save_score(self, score: Score) -> None:
        records = self.store.get_list(SCORES_KEY)
        doc = score.to_document()
        for idx, record in enumerate(records):
            if record.get("appId") == score.app_id and record.get("scorerId") == score.scorer_id:
                records[idx] = doc
                break
        else:
            records.append(doc)
        self.store.set_list(SCORES_KEY, records)

    async def get_scores(self) -> List[Score]:
        return [Score.from_document(r) for r in self.store.get_list(SCORES_KEY)]

    async def reset_user_scores(self, scorer_id: str) -> int:
        records = self.store.get_list(SCORES_KEY)
        remaining = [r for r in records if r.get("scorerId") != scorer_id]
        self.store.set_list(SCORES_KEY, remaining)
        return len(records) - len(remaining)

    # --- settings ---

    async def get_portal_settings(self) -> PortalSettings:
        stored = self.store.get_first(SETTINGS_KEY)
        return PortalSettings.from_document(stored) if stored else PortalSettings()

    async def update_portal_settings(self, settings: PortalSettings) -> None:
        # Stored as a single-element array
        self.store.set_list(SETTINGS_KEY, [settings.to_document()])

    # --- users ---

    async def get_users(self) -> List[User]:
        return [User.from_document(r) for r in self._user_records()]

    def _merge_user(self, uid: str, fields: Dict[str, Any]) -> User:
        records = self._user_records()
        idx = self._find(records, "uid", uid)
        if idx == -1:
            raise NotFoundError("users", uid)
        fields = {k: v for k, v in fields.items() if k not in ("uid", "password")}
        merged = {**records[idx], **fields}
        user = User.from_document(merged)
        records[idx] = merged
        self.store.set_list(USERS_KEY, records)
        return user

    async def update_user_profile(self, uid: str, updates: Dict[str, Any]) -> User:
        return self._merge_user(uid, User.document_fields(updates))

    async def delete_user(self, uid: str) -> None:
        records = self._user_records()
        remaining = [r for r in records if r.get("uid") != uid]
        if len(remaining) == len(records):
            raise NotFoundError("users", uid)
        self.store.set_list(USERS_KEY, remaining)

    async def update_user(self, user: User) -> None:
        self._merge_user(user.uid, user.to_document())

    async def admin_create_user(self, user: User, password: str) -> User:
        if not password:
            raise ValueError("Password is required for new users")
        records = self._user_records()
        if self._email_taken(records, user.email):
            raise DuplicateAccountError(f"An account already exists for {user.email}")
        created = user.model_copy(update={"uid": f"user_{uuid.uuid4().hex}"})
        records.append({**created.to_document(), "password": password})
        self.store.set_list(USERS_KEY, records)
        logger.info(f"Admin created user {created.uid}")
        return created
