import pytest

from factories import make_candidate
from team_formation.agents.existing_team_agent import ExistingTeamAgent
from team_formation.utils.models import ExistingTeam


@pytest.fixture
def teams():
    return [
        ExistingTeam(team_id="2", name="Design", members=[make_candidate("c", ["css"], rating=4)]),
        ExistingTeam(team_id="1", name="Web", members=[
            make_candidate("a", ["php"], rating=5),
            make_candidate("b", ["js"], rating=3),
        ]),
        ExistingTeam(team_id="3", name="Empty"),
    ]


def test_scores_by_skill_match_and_rating(teams):
    ranked = ExistingTeamAgent().rank_existing_teams(teams, ["php", "js"])

    assert [t.team_id for t in ranked] == ["1", "2", "3"]
    assert ranked[0].skill_match_percentage == 100
    assert ranked[0].average_rating == 4
    assert ranked[0].score == pytest.approx(94)
    assert ranked[1].score == pytest.approx(24)
    assert ranked[2].score == 0


def test_empty_requirements_score_on_rating_only(teams):
    ranked = ExistingTeamAgent().rank_existing_teams(teams, [])

    assert [t.team_id for t in ranked] == ["1", "2", "3"]
    assert all(t.skill_match_percentage == 0 for t in ranked)
    assert [t.score for t in ranked] == [pytest.approx(24), pytest.approx(24), 0]


def test_partial_match():
    team = ExistingTeam(team_id="t", members=[make_candidate("a", ["php", "go"], rating=0)])

    scored = ExistingTeamAgent().score_team(team, ["php", "js", "css", "sql"])

    assert scored.skill_match_percentage == 25
    assert scored.score == pytest.approx(17.5)
    assert scored.aggregate_skills == {"php", "go"}


def test_returns_top_five_by_default():
    many = [
        ExistingTeam(team_id=str(i), members=[make_candidate(f"m{i}", ["php"], rating=i % 6)])
        for i in range(8)
    ]

    ranked = ExistingTeamAgent().rank_existing_teams(many, ["php"])

    assert len(ranked) == 5
    assert [t.team_id for t in ranked] == ["5", "4", "3", "2", "1"]
    assert len(ExistingTeamAgent().rank_existing_teams(many, ["php"], limit=2)) == 2


def test_ranking_is_deterministic(teams):
    agent = ExistingTeamAgent()
    first = agent.rank_existing_teams(teams, ["php", "css"])
    second = agent.rank_existing_teams(list(reversed(teams)), ["php", "css"])

    assert [t.team_id for t in first] == [t.team_id for t in second]


def test_weight_overrides_merge_with_defaults(teams):
    ranked = ExistingTeamAgent(weights={"rating": 0}).rank_existing_teams(teams, ["php", "js"])

    assert ranked[0].team_id == "1"
    assert ranked[0].score == pytest.approx(70)
    assert ranked[1].score == 0
