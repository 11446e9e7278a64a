"""
Application domain models.

An application moves through a two-stage process: a Stage 1 Expression of
Interest, then (if invited) a Stage 2 full proposal.
"""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from pb_portal.domains.base import PortalModel

AREAS: List[str] = [
    "Blaenavon",
    "Thornhill & Upper Cwmbran",
    "Trevethin, Penygarn & St. Cadocs",
]

# Matches every area filter
CROSS_AREA = "Cross-Area"

ALL_AREAS = "All"


class ApplicationStatus(str, Enum):
    """Lifecycle status of an application."""
    DRAFT = "Draft"
    SUBMITTED_STAGE1 = "Submitted-Stage1"
    INVITED_STAGE2 = "Invited-Stage2"
    SUBMITTED_STAGE2 = "Submitted-Stage2"
    FINALIST = "Finalist"


# Statuses a committee member can see and score
REVIEWABLE_STATUSES = (
    ApplicationStatus.SUBMITTED_STAGE1,
    ApplicationStatus.INVITED_STAGE2,
    ApplicationStatus.SUBMITTED_STAGE2,
    ApplicationStatus.FINALIST,
)


class Application(PortalModel):
    """Grant application, partial while in draft."""
    id: Optional[str] = Field(None, description="Unique identifier")
    user_id: str = Field(..., alias="userId",
                         description="ID of the owning applicant")
    org_name: str = Field("", alias="orgName", description="Organisation name")
    applicant_name: str = Field(
        "", alias="applicantName", description="Applicant contact name")
    area: Optional[str] = Field(
        None, description="Area applied for, or Cross-Area")
    project_title: str = Field(
        "", alias="projectTitle", description="Project title")
    summary: str = Field("", description="Project summary")
    total_cost: float = Field(
        0, alias="totalCost", description="Total project cost")
    amount_requested: float = Field(
        0, alias="amountRequested", description="Amount of funding requested")
    form_data: Dict[str, Any] = Field(
        default_factory=dict, alias="formData",
        description="Stage-specific form fields, opaque to the core")
    status: ApplicationStatus = Field(
        ApplicationStatus.DRAFT, description="Lifecycle status")
    stage: int = Field(
        1, ge=1, le=2, description="Form stage a draft belongs to")
    ref: Optional[str] = Field(None, description="Reference code")
    created_at: Optional[int] = Field(
        None, alias="createdAt", description="Creation time, epoch ms")
    document_url: Optional[str] = Field(
        None, alias="documentUrl", description="Link to an external document")
    submission_method: str = Field(
        "digital", alias="submissionMethod", description="digital or upload")

    @field_validator("area")
    @classmethod
    def known_area(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in AREAS and value != CROSS_AREA:
            raise ValueError(f"Unknown area: {value}")
        return value

    def visible_in(self, area: Optional[str]) -> bool:
        """Whether this application shows under an area filter."""
        if not area or area == ALL_AREAS:
            return True
        return self.area == area or self.area == CROSS_AREA
