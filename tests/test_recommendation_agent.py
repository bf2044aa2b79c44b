import pytest

from factories import make_candidate
from team_formation.agents.recommendation_agent import RecommendationAgent
from team_formation.utils.models import Review


@pytest.fixture
def agent():
    return RecommendationAgent()


def test_top_tier_reasons(agent):
    candidate = make_candidate("a", ["php", "js"], rating=4.7, completed=12)

    assert agent.explain(candidate, agent.match_percentage(candidate, ["php", "js"])) == [
        "High skill match for the required skills",
        "Excellent rating from past clients",
        "Experienced with 12 completed projects",
    ]


def test_second_tier_reasons(agent):
    candidate = make_candidate("a", ["php"], rating=4.0, completed=5)

    assert agent.explain(candidate, agent.match_percentage(candidate, ["php", "js"])) == [
        "Moderate skill match for some required skills",
        "Very good rating from past clients",
        "Has successfully completed 5 projects",
    ]


def test_no_reasons_below_thresholds(agent):
    candidate = make_candidate("a", ["php"], rating=3.9, completed=4)

    assert agent.match_percentage(candidate, ["php", "js", "css"]) == 33
    assert agent.explain(candidate, 33) == []


def test_match_percentage_rounds_half_up(agent):
    candidate = make_candidate("a", ["s0"])
    assert agent.match_percentage(candidate, [f"s{i}" for i in range(8)]) == 13
    assert agent.match_percentage(candidate, []) == 0


def test_orders_by_match_then_rating_then_experience(agent):
    pool = [
        make_candidate("low_match", ["php"], rating=5, completed=20),
        make_candidate("full_match_junior", ["php", "js"], rating=4, completed=1),
        make_candidate("full_match_senior", ["php", "js"], rating=4, completed=9),
        make_candidate("full_match_star", ["php", "js"], rating=4.9, completed=0),
    ]

    recommendations = agent.recommend(pool, ["php", "js"], limit=3)

    assert [r.candidate.id for r in recommendations] == [
        "full_match_star", "full_match_senior", "full_match_junior"
    ]
    assert recommendations[0].match_percentage == 100
    assert recommendations[0].matching_skills == {"php", "js"}
    assert recommendations[0].score == pytest.approx(20 + 24.5)


def test_attaches_recent_reviews(agent):
    review = Review(candidate_id="a", rating=5, review_text="Great")
    pool = [make_candidate("a", ["php"]), make_candidate("b", ["php"])]

    recommendations = agent.recommend(
        pool, ["php"], review_lookup=lambda cid: [review] if cid == "a" else []
    )

    assert recommendations[0].recent_reviews == [review]
    assert recommendations[1].recent_reviews == []
