import pytest

from factories import make_candidate
from team_formation.agents.scoring_agent import ScoringAgent


def test_score_adds_skill_rating_experience_and_availability(scoring_agent):
    a = make_candidate("A", ["php"], rating=5, completed=12, available=True)
    b = make_candidate("B", ["js"], rating=3, completed=1, available=False)

    assert scoring_agent.score(a, ["php", "js"]) == 70
    assert scoring_agent.score(b, ["php", "js"]) == 27


def test_experience_term_is_capped(scoring_agent):
    assert scoring_agent.experience_points_for(4) == 8
    assert scoring_agent.experience_points_for(10) == 20
    assert scoring_agent.experience_points_for(50) == 20

    veteran = make_candidate("V", completed=50)
    assert scoring_agent.score(veteran, []) == 20


def test_fractional_ratings_are_kept(scoring_agent):
    candidate = make_candidate("C", rating=4.5)
    assert scoring_agent.score(candidate, ["php"]) == pytest.approx(22.5)


def test_score_candidate_reports_matching_skills(scoring_agent):
    candidate = make_candidate("C", ["go", "php", "sql"])
    scored = scoring_agent.score_candidate(candidate, ["sql", "php", "js"])

    assert scored.matching_skills == {"php", "sql"}
    assert scored.score == 20


def test_rank_keeps_candidates_without_matching_skills(scoring_agent):
    outsider = make_candidate("Z", ["cobol"], rating=1)
    insider = make_candidate("A", ["php"])

    ranked = scoring_agent.rank_candidates([outsider, insider], ["php"])

    assert [r.candidate.id for r in ranked] == ["A", "Z"]
    assert ranked[1].matching_skills == set()


def test_rank_breaks_ties_by_candidate_id(scoring_agent):
    pool = [make_candidate(cid, ["php"], rating=4) for cid in ("c", "a", "b")]

    ranked = scoring_agent.rank_candidates(pool, ["php"])

    assert [r.candidate.id for r in ranked] == ["a", "b", "c"]


def test_custom_weights():
    agent = ScoringAgent(weights={"availability": 0, "skill_match": 1})
    candidate = make_candidate("A", ["php"], available=True)
    assert agent.score(candidate, ["php"]) == 1
