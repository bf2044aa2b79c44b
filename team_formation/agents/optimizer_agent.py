"""
Optimizer Agent for assembling the single best team for a project
"""

import logging
import math
from typing import List, Sequence

from team_formation.agents.scoring_agent import ranking_key
from team_formation.utils.models import ScoredCandidate, Team
from team_formation.utils.skills import SkillSet, normalize

logger = logging.getLogger(__name__)


class OptimizerAgent:
    """
    Agent for building a bounded-size team that maximizes score while
    trying to cover every required skill
    """

    def __init__(self):
        """Initialize the optimizer agent"""
        logger.info("Initializing OptimizerAgent")

    def build_team(self, ranked_candidates: Sequence[ScoredCandidate], team_size: int,
                   required_skills) -> Team:
        """
        Build a team with a greedy fill followed by a repair pass

        Args:
            ranked_candidates: Scored candidates, highest score first
            team_size: Maximum number of members
            required_skills: Skills the project requires

        Returns:
            Team, possibly undersized or with uncovered skills
        """
        required = normalize(required_skills)

        if team_size < 1 or not ranked_candidates:
            logger.info("No candidates or seats available, returning empty team")
            return Team(members=[], required_skills=required)

        team, covered_skills = self._greedy_fill(ranked_candidates, team_size, required)

        uncovered = required.difference(covered_skills)
        if uncovered and len(team) >= team_size:
            team = self._repair(team, ranked_candidates, uncovered)

        team.sort(key=ranking_key)
        result = Team(members=team, required_skills=required)

        logger.info(f"Built team of {len(result.members)}/{team_size} "
                    f"covering {len(result.covered_skills)}/{len(required)} skills")
        if result.uncovered_skills:
            logger.info(f"Skills left uncovered: {result.uncovered_skills.to_list()}")
        return result

    def _greedy_fill(self, ranked_candidates: Sequence[ScoredCandidate], team_size: int,
                     required: SkillSet):
        """
        Add candidates in ranking order until the team is full, or until
        every skill is covered and at least half the seats are filled
        """
        half_size = math.ceil(team_size / 2)
        team: List[ScoredCandidate] = []
        covered_skills = SkillSet()

        for ranked in ranked_candidates:
            if len(team) >= team_size:
                break

            team.append(ranked)
            covered_skills = covered_skills.union(ranked.matching_skills)

            if covered_skills.issuperset(required) and len(team) >= half_size:
                logger.debug(f"Skills covered with {len(team)} members, stopping early")
                break

        return team, covered_skills

    def _repair(self, team: List[ScoredCandidate], ranked_candidates: Sequence[ScoredCandidate],
                uncovered: SkillSet) -> List[ScoredCandidate]:
        """
        Swap the lowest-scoring members for candidates with uncovered skills

        Skills nobody in the pool has stay uncovered.
        """
        # Lowest score first; among equal scores the member ranked last goes first
        team = sorted(team, key=ranking_key, reverse=True)

        for skill in uncovered:
            team_ids = {member.candidate.id for member in team}
            replacement = next(
                (ranked for ranked in ranked_candidates
                 if skill in ranked.matching_skills and ranked.candidate.id not in team_ids),
                None
            )
            if replacement is None:
                logger.debug(f"No candidate available for skill {skill!r}")
                continue

            evicted = team.pop(0)
            team.append(replacement)
            logger.info(f"Replaced {evicted.candidate.id} with {replacement.candidate.id} "
                        f"to cover {skill!r}")

        return team
