"""
Team Builder Agent for proposing several alternative teams from a candidate pool
"""

import logging
from typing import Dict, List, Optional, Sequence, Set

from team_formation.utils.models import ScoredCandidate, TeamProposal
from team_formation.utils.skills import SkillSet, normalize
from team_formation.config.settings import DEFAULT_RECOMMENDATION_TEAM_SIZE, DEFAULT_TEAM_PROPOSAL_LIMIT

logger = logging.getLogger(__name__)


def _by_rating(candidates: Sequence[ScoredCandidate]) -> List[ScoredCandidate]:
    return sorted(candidates, key=lambda c: (-c.candidate.rating, c.candidate.id))


class TeamBuilderAgent:
    """
    Agent for building competing team proposals

    Candidates are bucketed by their primary skill, the first required
    skill they match. Each proposal takes the best-rated candidate from
    every bucket, then fills remaining seats with candidates bringing
    missing skills, then with the best-rated leftovers. A candidate is
    claimed by at most one proposal.
    """

    def __init__(self):
        """Initialize the team builder agent"""
        logger.info("Initializing TeamBuilderAgent")

    def group_by_primary_skill(self, pool: Sequence[ScoredCandidate],
                               required_skills) -> Dict[str, List[ScoredCandidate]]:
        """
        Bucket candidates by the first required skill they match

        Args:
            pool: Scored candidate pool
            required_skills: Skills the project requires, in priority order

        Returns:
            Mapping of skill to candidates, best rated first
        """
        required = normalize(required_skills)
        groups: Dict[str, List[ScoredCandidate]] = {}

        for scored in pool:
            primary_skill = next((s for s in required if s in scored.candidate.skills), None)
            if primary_skill is None:
                continue
            groups.setdefault(primary_skill, []).append(scored)

        return {skill: _by_rating(members) for skill, members in groups.items()}

    def build_teams(self, pool: Sequence[ScoredCandidate], required_skills,
                    team_size: int = DEFAULT_RECOMMENDATION_TEAM_SIZE,
                    limit: int = DEFAULT_TEAM_PROPOSAL_LIMIT) -> List[TeamProposal]:
        """
        Build up to ``limit`` alternative teams of up to ``team_size`` members

        Args:
            pool: Scored candidate pool, in directory order
            required_skills: Skills the project requires, in priority order
            team_size: Seats per team
            limit: Maximum number of proposals

        Returns:
            Team proposals in the order they were built
        """
        required = normalize(required_skills)
        logger.info(f"Building up to {limit} teams of {team_size} from {len(pool)} candidates")

        if team_size < 1 or limit < 1:
            return []

        groups = self.group_by_primary_skill(pool, required)
        claimed: Set[str] = set()
        proposals: List[TeamProposal] = []

        while len(proposals) < limit and groups:
            members: List[ScoredCandidate] = []
            team_skills = SkillSet()

            def add(member: ScoredCandidate) -> None:
                nonlocal team_skills
                members.append(member)
                claimed.add(member.candidate.id)
                team_skills = team_skills.union(member.candidate.skills)

            # One member per required skill, most important skill first
            for skill in required:
                if len(members) >= team_size:
                    break
                member = self._take_best(groups.get(skill, []), claimed)
                if member is not None:
                    add(member)

            # Fill remaining seats, preferring candidates with missing skills
            while len(members) < team_size:
                remaining = self._remaining(groups, claimed)
                if not remaining:
                    break

                missing = required.difference(team_skills)
                member = None
                if missing:
                    member = next((c for c in remaining if c.matching_skills.intersect(missing)), None)
                if member is None:
                    member = remaining[0]
                add(member)

            groups = self._prune(groups, claimed)

            if members:
                proposal = TeamProposal(
                    team_id=f"team_{len(proposals)}",
                    members=members,
                    required_skills=required
                )
                proposals.append(proposal)
                logger.info(f"Proposed {proposal.team_id}: {proposal.member_ids} "
                            f"covering {proposal.coverage_label}")

        return proposals

    @staticmethod
    def _take_best(group: Sequence[ScoredCandidate], claimed: Set[str]) -> Optional[ScoredCandidate]:
        return next((c for c in group if c.candidate.id not in claimed), None)

    @staticmethod
    def _remaining(groups: Dict[str, List[ScoredCandidate]], claimed: Set[str]) -> List[ScoredCandidate]:
        seen: Set[str] = set()
        remaining = []
        for members in groups.values():
            for scored in members:
                candidate_id = scored.candidate.id
                if candidate_id in claimed or candidate_id in seen:
                    continue
                seen.add(candidate_id)
                remaining.append(scored)
        return _by_rating(remaining)

    @staticmethod
    def _prune(groups: Dict[str, List[ScoredCandidate]], claimed: Set[str]) -> Dict[str, List[ScoredCandidate]]:
        pruned = {}
        for skill, members in groups.items():
            unclaimed = [c for c in members if c.candidate.id not in claimed]
            if unclaimed:
                pruned[skill] = unclaimed
        return pruned
