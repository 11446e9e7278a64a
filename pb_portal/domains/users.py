"""
User domain models.

These models define portal accounts and their roles.
"""
from enum import Enum
from typing import Optional

from pydantic import Field, model_validator

from pb_portal.domains.base import PortalModel


class Role(str, Enum):
    """Role of a portal user."""
    APPLICANT = "applicant"
    COMMITTEE = "committee"
    ADMIN = "admin"


class User(PortalModel):
    """Portal user profile."""
    uid: str = Field(..., description="Unique identifier")
    email: str = Field(..., description="Login email, unique")
    username: Optional[str] = Field(
        None, description="Alternate login identifier")
    display_name: str = Field(
        "User", alias="displayName", description="Display name")
    role: Role = Field(Role.APPLICANT, description="Portal role")
    area: Optional[str] = Field(
        None, description="Assigned area, required for committee members")
    bio: Optional[str] = Field(None, description="Short biography")
    phone: Optional[str] = Field(None, description="Contact phone")
    address: Optional[str] = Field(None, description="Postal address")
    role_description: Optional[str] = Field(
        None, alias="roleDescription", description="Free-text role description")
    photo_url: Optional[str] = Field(
        None, alias="photoUrl", description="Profile photo URL or data URI")

    @model_validator(mode="after")
    def committee_needs_area(self) -> "User":
        if self.role == Role.COMMITTEE and not self.area:
            raise ValueError("Committee members must be assigned an area")
        return self


DEFAULT_LOGIN_DOMAIN = "committee.local"


def login_handle(identifier: str, domain: str = DEFAULT_LOGIN_DOMAIN) -> str:
    """Canonical login handle for an email or a bare username."""
    handle = identifier.strip().lower()
    if "@" not in handle:
        handle = f"{handle}@{domain}"
    return handle
