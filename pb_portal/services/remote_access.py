"""
Remote data access service.

Runs the portal against a shared document database, with logins checked
by an identity provider.
"""
import logging
from typing import Any, Dict, List, Optional

from pb_portal.domains import (
    ALL_AREAS,
    CROSS_AREA,
    DEFAULT_LOGIN_DOMAIN,
    Application,
    PortalSettings,
    Role,
    Score,
    User,
    login_handle,
    merge_documents,
)
from pb_portal.exceptions import (
    DuplicateAccountError,
    NotFoundError,
    ProfileMissingError,
    UnsupportedOperationError,
)
from pb_portal.interfaces import (
    BatchOperation,
    DataAccessService,
    DataStorageProvider,
    IdentityProvider,
)
from pb_portal.services.lifecycle import ApplicationLifecycle

logger = logging.getLogger(__name__)

USERS = "users"
APPLICATIONS = "applications"
SCORES = "scores"
SETTINGS = "portalSettings"
SETTINGS_ID = "global"
CONFIG = "config"


class RemoteAccessService(DataAccessService):
    """Data access over a document database and identity provider."""

    def __init__(
        self,
        storage: DataStorageProvider,
        identity: IdentityProvider,
        lifecycle: Optional[ApplicationLifecycle] = None,
        login_domain: str = DEFAULT_LOGIN_DOMAIN,
    ):
        """Initialize the remote service.

        Args:
            storage: Document storage provider
            identity: Identity provider for credentials
            lifecycle: Lifecycle policy used to stamp new applications
            login_domain: Domain appended to bare usernames at login
        """
        self.storage = storage
        self.identity = identity
        self.lifecycle = lifecycle or ApplicationLifecycle()
        self.login_domain = login_domain

    # --- auth ---

    async def login(self, identifier: str, password: str) -> User:
        handle = login_handle(identifier, self.login_domain)
        uid = self.identity.authenticate(handle, password)
        try:
            return self._load_profile(uid, handle)
        except ProfileMissingError as e:
            logger.warning(f"Login for {uid} has no profile, using fallback")
            return e.fallback

    def _load_profile(self, uid: str, handle: str) -> User:
        doc = self.storage.get_document(USERS, uid)
        if doc is None:
            fallback = User(
                uid=uid,
                email=handle,
                role=Role.APPLICANT,
                display_name=self.identity.get_display_name(uid) or "User",
            )
            raise ProfileMissingError(uid, fallback=fallback)
        return User.from_document(doc)

    async def register(self, email: str, password: str, name: str) -> User:
        email = email.strip().lower()
        # Seeded profiles may exist before their identities are provisioned
        if self.storage.query_documents(USERS, "email", email):
            raise DuplicateAccountError(f"An account already exists for {email}")
        uid = self.identity.create_identity(email, password, display_name=name)
        user = User(uid=uid, email=email, display_name=name, role=Role.APPLICANT)
        self.storage.set_document(USERS, uid, user.to_document())
        logger.info(f"Registered applicant {uid}")
        return user

    # --- applications ---

    async def get_applications(self, area: Optional[str] = None) -> List[Application]:
        if not area or area == ALL_AREAS:
            docs = self.storage.get_all_documents(APPLICATIONS)
        else:
            docs = self.storage.query_documents(APPLICATIONS, "area", area)
            if area != CROSS_AREA:
                seen = {d.get("id") for d in docs}
                docs += [
                    d for d in self.storage.query_documents(APPLICATIONS, "area", CROSS_AREA)
                    if d.get("id") not in seen
                ]
        return [Application.from_document(d) for d in docs]

    async def get_application(self, app_id: str) -> Application:
        doc = self.storage.get_document(APPLICATIONS, app_id)
        if doc is None:
            raise NotFoundError(APPLICATIONS, app_id)
        return Application.from_document(doc)

    async def create_application(self, draft: Application) -> Application:
        app = self.lifecycle.new_submission(draft)
        self.storage.set_document(APPLICATIONS, app.id, app.to_document())
        logger.info(f"Created application {app.id} ({app.ref})")
        return app

    async def update_application(self, app_id: str, updates: Dict[str, Any]) -> None:
        existing = self.storage.get_document(APPLICATIONS, app_id)
        if existing is None:
            raise NotFoundError(APPLICATIONS, app_id)
        fields = self.lifecycle.protect_immutable(
            existing, Application.document_fields(updates))
        self.lifecycle.check_update(existing, fields)
        Application.from_document(merge_documents(existing, fields))
        self.storage.set_document(APPLICATIONS, app_id, fields, merge=True)

    async def delete_application(self, app_id: str) -> None:
        if not self.storage.delete_document(APPLICATIONS, app_id):
            raise NotFoundError(APPLICATIONS, app_id)

    # --- scores ---

    async def save_score(self, score: Score) -> None:
        self.storage.set_document(SCORES, score.document_id, score.to_document())

    async def get_scores(self) -> List[Score]:
        return [Score.from_document(d) for d in self.storage.get_all_documents(SCORES)]

    async def reset_user_scores(self, scorer_id: str) -> int:
        scores = [
            Score.from_document(d)
            for d in self.storage.query_documents(SCORES, "scorerId", scorer_id)
        ]
        self.storage.commit_batch([
            BatchOperation(op="delete", collection=SCORES, id=s.document_id)
            for s in scores
        ])
        logger.info(f"Reset {len(scores)} scores for {scorer_id}")
        return len(scores)

    # --- settings ---

    async def get_portal_settings(self) -> PortalSettings:
        doc = self.storage.get_document(SETTINGS, SETTINGS_ID)
        return PortalSettings.from_document(doc) if doc else PortalSettings()

    async def update_portal_settings(self, settings: PortalSettings) -> None:
        self.storage.set_document(SETTINGS, SETTINGS_ID, settings.to_document())

    # --- users ---

    async def get_users(self) -> List[User]:
        return [User.from_document(d) for d in self.storage.get_all_documents(USERS)]

    def _merge_user(self, uid: str, fields: Dict[str, Any]) -> User:
        existing = self.storage.get_document(USERS, uid)
        if existing is None:
            raise NotFoundError(USERS, uid)
        fields = {k: v for k, v in fields.items() if k not in ("uid", "password")}
        User.from_document({**existing, **fields})
        self.storage.set_document(USERS, uid, fields, merge=True)
        return User.from_document(self.storage.get_document(USERS, uid))

    async def update_user_profile(self, uid: str, updates: Dict[str, Any]) -> User:
        return self._merge_user(uid, User.document_fields(updates))

    async def delete_user(self, uid: str) -> None:
        if not self.storage.delete_document(USERS, uid):
            raise NotFoundError(USERS, uid)

    async def update_user(self, user: User) -> None:
        self._merge_user(user.uid, user.to_document())

    async def admin_create_user(self, user: User, password: str) -> User:
        raise UnsupportedOperationError(
            "Admins cannot create login accounts from the portal when it runs "
            "against the remote database. Provision the account server-side "
            "with `pb-portal provision-identities` or the identity console."
        )
