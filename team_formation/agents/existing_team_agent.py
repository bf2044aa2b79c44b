"""
Existing Team Agent for ranking already formed teams against a project
"""

import logging
from typing import Dict, Iterable, List, Optional

from team_formation.utils.models import ExistingTeam, ExistingTeamCandidate
from team_formation.utils.skills import SkillSet, coverage_ratio, normalize
from team_formation.config.settings import EXISTING_TEAM_WEIGHTS, EXISTING_TEAM_LIMIT

logger = logging.getLogger(__name__)


class ExistingTeamAgent:
    """
    Agent for scoring pre-formed teams by skill coverage and member rating
    """

    def __init__(self, weights: Optional[Dict[str, float]] = None):
        """
        Initialize the existing team agent

        Args:
            weights: Optional weights for the skill match and rating terms
        """
        logger.info("Initializing ExistingTeamAgent")
        self.weights = {**EXISTING_TEAM_WEIGHTS, **(weights or {})}

    def score_team(self, team: ExistingTeam, required_skills) -> ExistingTeamCandidate:
        """
        Score one team

        Args:
            team: Team roster
            required_skills: Skills the project requires

        Returns:
            Scored view of the team
        """
        required = normalize(required_skills)

        aggregate_skills = SkillSet()
        for member in team.members:
            aggregate_skills = aggregate_skills.union(member.skills)

        skill_match_percentage = coverage_ratio(aggregate_skills, required) * 100

        average_rating = 0.0
        if team.members:
            average_rating = sum(m.rating for m in team.members) / len(team.members)

        score = (skill_match_percentage * self.weights["skill_match"] +
                 average_rating * self.weights["rating"])

        return ExistingTeamCandidate(
            team_id=team.team_id,
            name=team.name,
            members=team.members,
            aggregate_skills=aggregate_skills,
            skill_match_percentage=skill_match_percentage,
            average_rating=average_rating,
            score=score
        )

    def rank_existing_teams(self, teams: Iterable[ExistingTeam], required_skills,
                            limit: int = EXISTING_TEAM_LIMIT) -> List[ExistingTeamCandidate]:
        """
        Rank teams by score and keep the best ``limit``

        Ties are broken by team id.
        """
        required = normalize(required_skills)
        scored = [self.score_team(team, required) for team in teams]
        scored.sort(key=lambda t: (-t.score, t.team_id))

        logger.info(f"Ranked {len(scored)} existing teams, returning top {min(limit, len(scored))}")
        return scored[:limit]
