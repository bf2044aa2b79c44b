import pytest

from factories import make_candidate
from team_formation.agents.optimizer_agent import OptimizerAgent


@pytest.fixture
def optimizer():
    return OptimizerAgent()


@pytest.fixture
def php_and_js(scoring_agent):
    a = make_candidate("A", ["php"], rating=5, completed=12, available=True)
    b = make_candidate("B", ["js"], rating=3, completed=1, available=False)
    return scoring_agent.rank_candidates([b, a], ["php", "js"])


def ids(team):
    return [m.candidate.id for m in team.members]


def test_fills_both_seats_to_cover_both_skills(optimizer, php_and_js):
    assert [r.score for r in php_and_js] == [70, 27]

    team = optimizer.build_team(php_and_js, 2, ["php", "js"])

    assert ids(team) == ["A", "B"]
    assert team.skill_coverage == 1.0
    assert team.uncovered_skills == set()


def test_repair_replaces_singleton_that_misses_a_skill(optimizer, php_and_js):
    team = optimizer.build_team(php_and_js, 1, ["php", "js"])

    assert ids(team) == ["B"]
    assert team.uncovered_skills == {"php"}


def test_empty_pool_gives_empty_team(optimizer):
    team = optimizer.build_team([], 3, ["php"])

    assert team.members == []
    assert team.uncovered_skills == {"php"}
    assert team.skill_coverage == 0.0
    assert team.average_rating == 0.0


def test_non_positive_team_size_gives_empty_team(optimizer, php_and_js):
    assert optimizer.build_team(php_and_js, 0, ["php", "js"]).members == []


@pytest.mark.parametrize("team_size,expected_size", [(1, 1), (2, 1), (3, 2), (4, 2), (5, 3)])
def test_empty_requirements_stop_at_half_size(optimizer, scoring_agent, team_size, expected_size):
    pool = [make_candidate(f"c{i}", ["php"], rating=i % 5) for i in range(8)]
    ranked = scoring_agent.rank_candidates(pool, [])

    team = optimizer.build_team(ranked, team_size, [])

    assert len(team.members) == expected_size
    assert team.skill_coverage == 0.0


def test_stops_early_once_covered_and_half_full(optimizer, scoring_agent):
    pool = [
        make_candidate("A", ["php"], rating=5),
        make_candidate("B", ["go"], rating=4),
        make_candidate("C", ["go"], rating=3),
        make_candidate("D", ["go"], rating=2),
    ]
    ranked = scoring_agent.rank_candidates(pool, ["php"])

    team = optimizer.build_team(ranked, 4, ["php"])

    assert ids(team) == ["A", "B"]


def test_repair_swaps_lowest_scorers_for_missing_skills(optimizer, scoring_agent):
    pool = [
        make_candidate("X", ["a"], rating=5, completed=10, available=True),    # 70
        make_candidate("Y", ["a"], rating=4.8, completed=10, available=True),  # 69
        make_candidate("Z", ["a"], rating=4.6, completed=10, available=True),  # 68
        make_candidate("B", ["b"], rating=1),                                   # 15
        make_candidate("C", ["c"], rating=0.5),                                 # 12.5
    ]
    ranked = scoring_agent.rank_candidates(pool, ["a", "b", "c"])

    team = optimizer.build_team(ranked, 3, ["a", "b", "c"])

    assert ids(team) == ["X", "B", "C"]
    assert team.skill_coverage == 1.0
    assert team.match_percentage == 100


def test_repair_leaves_skill_uncovered_when_nobody_has_it(optimizer, scoring_agent):
    pool = [make_candidate("A", ["php"], rating=5), make_candidate("B", ["php"], rating=4)]
    ranked = scoring_agent.rank_candidates(pool, ["php", "go"])

    team = optimizer.build_team(ranked, 2, ["php", "go"])

    assert ids(team) == ["A", "B"]
    assert team.uncovered_skills == {"go"}
    assert team.skill_coverage == 0.5
    assert team.match_percentage == 50


def test_team_never_exceeds_requested_size(optimizer, scoring_agent):
    required = ["a", "b", "c", "d"]
    pool = [make_candidate(f"c{i}", [required[i % 4]], rating=(i * 7) % 6) for i in range(12)]
    ranked = scoring_agent.rank_candidates(pool, required)

    for team_size in range(1, 8):
        assert len(optimizer.build_team(ranked, team_size, required).members) <= team_size


def test_build_team_is_deterministic(optimizer, scoring_agent):
    required = ["a", "b", "c"]
    pool = [make_candidate(f"c{i}", [required[i % 3]], rating=4) for i in range(9)]

    first = optimizer.build_team(scoring_agent.rank_candidates(pool, required), 2, required)
    second = optimizer.build_team(scoring_agent.rank_candidates(list(reversed(pool)), required), 2, required)

    assert ids(first) == ids(second)


def test_team_aggregates(optimizer, php_and_js):
    team = optimizer.build_team(php_and_js, 2, ["php", "js"])

    assert team.average_rating == 4.0
    assert team.total_score == 97
    assert team.combined_skills == {"php", "js"}
    assert team.model_dump(mode="json")["uncovered_skills"] == []
