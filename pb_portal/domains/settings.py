"""
Portal settings domain model.
"""
from pydantic import Field

from pb_portal.domains.base import PortalModel


class PortalSettings(PortalModel):
    """Global switches for what applicants and committee members can see."""
    stage1_visible: bool = Field(
        True, alias="stage1Visible", description="Stage 1 (EOI) open")
    stage2_visible: bool = Field(
        False, alias="stage2Visible", description="Stage 2 (full) open")
    voting_open: bool = Field(
        False, alias="votingOpen", description="Scoring open to committee")
