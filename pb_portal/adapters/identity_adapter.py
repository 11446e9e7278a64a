"""
Identity adapter for the PB Portal.

Stores login credentials as bcrypt hashes in an `identities` collection
alongside the portal documents.
"""
import logging
import uuid
from typing import Optional

import bcrypt
from pymongo.errors import DuplicateKeyError

from pb_portal.adapters.mongodb_adapter import MongoDBAdapter
from pb_portal.exceptions import AuthenticationError, DuplicateAccountError
from pb_portal.interfaces.providers.identity import IdentityProvider

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a password against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


class MongoIdentityAdapter(IdentityProvider):
    """MongoDB implementation of IdentityProvider."""

    def __init__(self, db_adapter: MongoDBAdapter, bcrypt_rounds: int = 12):
        """Initialize the adapter.

        Args:
            db_adapter: MongoDB adapter whose database holds the identities
            bcrypt_rounds: bcrypt cost factor for new hashes
        """
        self.db = db_adapter
        self.collection = "identities"
        self.bcrypt_rounds = bcrypt_rounds

        self.db.db[self.collection].create_index("handle", unique=True)

    def authenticate(self, handle: str, secret: str) -> str:
        doc = self.db.db[self.collection].find_one({"handle": handle.lower()})
        if not doc or not verify_password(secret, doc.get("passwordHash", "")):
            raise AuthenticationError("Invalid email or password")
        return doc["_id"]

    def create_identity(
        self,
        handle: str,
        secret: str,
        uid: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> str:
        if not secret:
            raise ValueError("Password is required")
        handle = handle.lower()
        identities = self.db.db[self.collection]
        if identities.find_one({"handle": handle}):
            raise DuplicateAccountError(f"An account already exists for {handle}")

        uid = uid or f"user_{uuid.uuid4().hex}"
        doc = {
            "_id": uid,
            "handle": handle,
            "passwordHash": hash_password(secret, self.bcrypt_rounds),
        }
        if display_name:
            doc["displayName"] = display_name

        try:
            identities.insert_one(doc)
        except DuplicateKeyError:
            raise DuplicateAccountError(f"An account already exists for {handle}")

        logger.info(f"Created identity {uid}")
        return uid

    def get_display_name(self, uid: str) -> Optional[str]:
        doc = self.db.db[self.collection].find_one({"_id": uid})
        return doc.get("displayName") if doc else None
