"""
Tests for the ScoringService.

This module tests raw and weighted totals, rating validation and how
scores are built for saving.
"""
import pytest
from hypothesis import given, strategies as st

from pb_portal.domains import SCORING_CRITERIA, Role, Score, ScoringCriterion, User
from pb_portal.exceptions import ConfigurationError
from pb_portal.services.scoring import ScoringService, round_half_up

# ---------------------
# Fixtures
# ---------------------


@pytest.fixture
def three_criteria():
    """Return a small rubric weighted 40/30/30."""
    return [
        ScoringCriterion(id="need", name="Need", weight=40),
        ScoringCriterion(id="impact", name="Impact", weight=30),
        ScoringCriterion(id="value", name="Value", weight=30),
    ]


@pytest.fixture
def scoring_service():
    """Return a scoring service using the standard rubric."""
    return ScoringService()


@pytest.fixture
def scorer():
    """Return a committee member who scores applications."""
    return User(uid="user_gareth_jones", email="gareth.jones@committee.local",
                display_name="Gareth Jones", role=Role.COMMITTEE,
                area="Thornhill & Upper Cwmbran")

# ---------------------
# Totals
# ---------------------


def test_weighted_example(three_criteria):
    service = ScoringService(three_criteria)
    summary = service.summarize({"need": 3, "impact": 1, "value": 0})

    assert summary.raw_total == 4
    assert summary.weighted_percent == 50
    assert summary.passes


def test_all_max_is_100(scoring_service):
    summary = scoring_service.summarize({c.id: 3 for c in SCORING_CRITERIA})
    assert summary.raw_total == 18
    assert summary.weighted_percent == 100


def test_missing_ratings_count_as_zero(scoring_service):
    summary = scoring_service.summarize({})
    assert summary.raw_total == 0
    assert summary.weighted_percent == 0
    assert not summary.passes


def test_unknown_criteria_ignored(scoring_service):
    summary = scoring_service.summarize({"not_a_criterion": 3})
    assert summary.raw_total == 0


def test_partial_weighting(scoring_service):
    # community_need is weighted 25: 2/3 * 25 = 16.67
    summary = scoring_service.summarize({"community_need": 2})
    assert summary.weighted_percent == 17


@pytest.mark.parametrize("value", [-1, 4])
def test_out_of_range_rating_rejected(scoring_service, value):
    with pytest.raises(ValueError):
        scoring_service.summarize({"community_need": value})


def test_weights_must_sum_to_100():
    with pytest.raises(ConfigurationError):
        ScoringService([ScoringCriterion(id="a", name="A", weight=60)])


def test_max_raw_total(scoring_service, three_criteria):
    assert scoring_service.max_raw_total == 18
    assert ScoringService(three_criteria).max_raw_total == 9


@pytest.mark.parametrize("value,expected", [(2.5, 3), (0.5, 1), (49.5, 50), (49.49, 49), (0, 0)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


ratings_strategy = st.fixed_dictionaries(
    {c.id: st.integers(min_value=0, max_value=3) for c in SCORING_CRITERIA})


@given(ratings_strategy)
def test_totals_stay_in_bounds(ratings):
    summary = ScoringService().summarize(ratings)
    assert 0 <= summary.raw_total <= 18
    assert 0 <= summary.weighted_percent <= 100
    assert summary.raw_total == sum(ratings.values())


@given(ratings_strategy, st.sampled_from([c.id for c in SCORING_CRITERIA]))
def test_raising_a_rating_never_lowers_percent(ratings, criterion_id):
    service = ScoringService()
    before = service.summarize(ratings).weighted_percent
    raised = dict(ratings)
    raised[criterion_id] = min(3, raised[criterion_id] + 1)
    assert service.summarize(raised).weighted_percent >= before

# ---------------------
# Building Scores
# ---------------------


def test_build_score(scoring_service, scorer):
    score = scoring_service.build_score(
        "app_demo_3", scorer, {"community_need": 3, "deliverability": 2},
        notes={"community_need": "Strong evidence"})

    assert score.app_id == "app_demo_3"
    assert score.scorer_id == "user_gareth_jones"
    assert score.scorer_name == "Gareth Jones"
    assert score.total == 5
    assert score.is_final is True
    assert score.notes == {"community_need": "Strong evidence"}
    assert score.document_id == "app_demo_3_user_gareth_jones"


def test_build_score_keeps_existing_scorer(scoring_service):
    admin = User(uid="user_admin", email="admin@committee.local",
                 display_name="Portal Administrator", role=Role.ADMIN)
    existing = Score(app_id="app_demo_1", scorer_id="user_louise_white",
                     scorer_name="Louise White", scores={"community_need": 1})

    score = scoring_service.build_score(
        "app_demo_1", admin, {"community_need": 2}, existing=existing)

    assert score.scorer_id == "user_louise_white"
    assert score.scorer_name == "Louise White"
    assert score.scores == {"community_need": 2}


def test_summarize_score(scoring_service):
    score = Score(app_id="a", scorer_id="s", scores={c.id: 3 for c in SCORING_CRITERIA})
    assert scoring_service.summarize_score(score).weighted_percent == 100
