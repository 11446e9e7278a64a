"""
Tests for the PortalClient.

This module drives the applicant, committee and admin workflows end to
end against the in-memory local backend.
"""
import json

import pytest

from pb_portal.client.portal import PortalClient, load_config
from pb_portal.domains import ApplicationStatus
from pb_portal.exceptions import ConfigurationError, InvalidTransitionError

# ---------------------
# Fixtures
# ---------------------


@pytest.fixture
def client():
    """Return a client over a fresh in-memory local store."""
    return PortalClient(config={"mode": "local"})


@pytest.fixture
def config_file(tmp_path):
    """Return a JSON config file for a file-backed local store."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "mode": "local",
        "local": {"path": str(tmp_path / "portal.json")},
    }))
    return str(path)

# ---------------------
# Configuration
# ---------------------


class TestConfiguration:
    """Tests for building the client."""

    def test_requires_config(self):
        with pytest.raises(ValueError):
            PortalClient()

    def test_from_json_file(self, config_file):
        client = PortalClient(config_path=config_file)
        assert client.api.store.path.endswith("portal.json")
        assert client.identity is None

    def test_load_python_config(self, tmp_path):
        path = tmp_path / "settings.py"
        path.write_text('config = {"mode": "local", "login_domain": "panel.example.org"}\n')
        assert load_config(str(path)) == {"mode": "local", "login_domain": "panel.example.org"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PortalClient(config_path=str(tmp_path / "absent.json"))

# ---------------------
# Applicant Workflow
# ---------------------


class TestApplicationWorkflow:
    """Tests for moving an application through both stages."""

    @pytest.mark.asyncio
    async def test_full_lifecycle(self, client):
        applicant = await client.api.login("applicant@example.com", "applicant123")
        draft = client.start_stage1(applicant).model_copy(update={
            "area": "Blaenavon",
            "org_name": "Blaenavon Walkers",
            "project_title": "Heritage Trail",
            "form_data": {"budgetBreakdown": [{"item": "Signs", "cost": 400}]},
        })
        assert draft.status == ApplicationStatus.DRAFT

        submitted = await client.submit_stage1(draft)
        assert submitted.status == ApplicationStatus.SUBMITTED_STAGE1
        assert submitted.ref.startswith("PB-BLA-")
        ref = submitted.ref

        invited = await client.invite_to_stage2(submitted.id)
        assert invited.status == ApplicationStatus.INVITED_STAGE2

        reopened = await client.begin_stage2(submitted.id)
        assert reopened.status == ApplicationStatus.DRAFT
        assert reopened.stage == 2

        stage2 = await client.submit_stage2(
            submitted.id, {"formData": {"marmotPrinciples": ["Ensure a healthy standard of living"]}})
        assert stage2.status == ApplicationStatus.SUBMITTED_STAGE2
        assert stage2.ref == ref
        # Stage 1 fields layered under Stage 2
        assert stage2.form_data["budgetBreakdown"] == [{"item": "Signs", "cost": 400}]
        assert stage2.form_data["marmotPrinciples"] == ["Ensure a healthy standard of living"]

        finalist = await client.mark_finalist(submitted.id)
        assert finalist.status == ApplicationStatus.FINALIST

        owned = await client.applications_for(applicant)
        assert submitted.id in {a.id for a in owned}

    @pytest.mark.asyncio
    async def test_submit_stage1_needs_area(self, client):
        applicant = await client.api.login("applicant@example.com", "applicant123")
        with pytest.raises(ValueError):
            await client.submit_stage1(client.start_stage1(applicant))

    @pytest.mark.asyncio
    async def test_resubmitting_stage1_rejected(self, client):
        existing = await client.api.get_application("app_demo_1")
        with pytest.raises(InvalidTransitionError):
            await client.submit_stage1(existing)

    @pytest.mark.asyncio
    async def test_cannot_skip_stages(self, client):
        with pytest.raises(InvalidTransitionError):
            await client.mark_finalist("app_demo_1")
        app = await client.api.get_application("app_demo_1")
        assert app.status == ApplicationStatus.SUBMITTED_STAGE1

    @pytest.mark.asyncio
    async def test_stage2_submit_requires_stage2_draft(self, client):
        with pytest.raises(InvalidTransitionError):
            await client.submit_stage2("app_demo_2", {"summary": "Too early"})

# ---------------------
# Committee
# ---------------------


class TestCommittee:
    """Tests for review and scoring."""

    @pytest.mark.asyncio
    async def test_review_queue_for_member(self, client):
        member = await client.api.login("louise.white", "committee123")
        queue = await client.review_queue(member)
        assert {a.id for a in queue} == {"app_demo_1", "app_demo_2"}

    @pytest.mark.asyncio
    async def test_review_queue_for_admin(self, client):
        admin = await client.api.login("admin", "admin123")
        assert len(await client.review_queue(admin)) == 4

    @pytest.mark.asyncio
    async def test_review_queue_skips_drafts(self, client):
        admin = await client.api.login("admin", "admin123")
        await client.invite_to_stage2("app_demo_1")
        await client.begin_stage2("app_demo_1")
        assert "app_demo_1" not in {a.id for a in await client.review_queue(admin)}

    @pytest.mark.asyncio
    async def test_score_application_replaces_earlier(self, client):
        member = await client.api.login("gareth.jones", "committee123")

        await client.score_application("app_demo_3", member, {"community_need": 1},
                                       is_final=False)
        score = await client.score_application(
            "app_demo_3", member, {"community_need": 3, "deliverability": 3},
            notes={"deliverability": "Clear plan"})

        scores = await client.scores_for(member.uid)
        assert len(scores) == 1
        assert scores[0].total == 6
        assert scores[0].is_final is True
        assert client.summarize(score).weighted_percent == 40

# ---------------------
# Admin
# ---------------------


class TestAdmin:
    """Tests for admin helpers."""

    @pytest.mark.asyncio
    async def test_overview(self, client):
        overview = await client.overview()

        assert overview["users"] == 6
        assert overview["committee_members"] == 3
        assert overview["applications"] == 4
        assert overview["submitted"] == 2
        assert overview["by_status"]["Finalist"] == 1
        assert overview["by_status"]["Draft"] == 0
        assert overview["settings"].stage1_visible is True

    @pytest.mark.asyncio
    async def test_seed_in_local_mode(self, client):
        with pytest.raises(ConfigurationError):
            await client.seed_database()
