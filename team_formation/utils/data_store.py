"""
In-memory project store, freelancer directory, team registry and review store
"""

import logging
from typing import Dict, Iterable, List, Optional

from team_formation.utils.errors import TeamNotFoundError
from team_formation.utils.models import Candidate, ExistingTeam, ProjectRequirement, Review
from team_formation.utils.skills import normalize

logger = logging.getLogger(__name__)


class MatchingDataStore:
    """
    Materialized collections the matching engine reads from

    The engine never queries a store directly; the orchestrator pulls finite
    collections from here and hands them to the agents.
    """

    def __init__(self,
                 projects: Optional[Iterable[ProjectRequirement]] = None,
                 candidates: Optional[Iterable[Candidate]] = None,
                 teams: Optional[Iterable[ExistingTeam]] = None,
                 reviews: Optional[Iterable[Review]] = None):
        self.projects: Dict[str, ProjectRequirement] = {p.project_id: p for p in projects or []}
        self.candidates: Dict[str, Candidate] = {c.id: c for c in candidates or []}
        self.teams: Dict[str, ExistingTeam] = {t.team_id: t for t in teams or []}
        self.reviews: List[Review] = list(reviews or [])

        logger.info(f"Data store holds {len(self.projects)} projects, "
                    f"{len(self.candidates)} candidates, {len(self.teams)} teams")

    def get_project(self, project_id) -> Optional[ProjectRequirement]:
        return self.projects.get(str(project_id))

    def get_candidate(self, candidate_id) -> Optional[Candidate]:
        return self.candidates.get(str(candidate_id))

    def find_candidates_by_skills(self, skills, limit: Optional[int] = None) -> List[Candidate]:
        """
        Find active, verified candidates with at least one matching skill

        A candidate matches when one of their skills contains a required
        skill as a substring, so "React" also pulls in "React Native"
        developers. Scoring later uses exact matches only.

        Args:
            skills: Required skills
            limit: Optional maximum number of candidates

        Returns:
            Matching candidates in directory order
        """
        required = normalize(skills)
        if not required:
            return []

        matches = []
        for candidate in self.candidates.values():
            if not (candidate.is_active and candidate.is_verified):
                continue
            if any(req in skill for req in required for skill in candidate.skills):
                matches.append(candidate)
                if limit is not None and len(matches) >= limit:
                    break

        logger.debug(f"Directory returned {len(matches)} candidates for {required.to_list()}")
        return matches

    def get_existing_teams(self) -> List[ExistingTeam]:
        return list(self.teams.values())

    def get_team_members(self, team_id) -> List[Candidate]:
        team = self.teams.get(str(team_id))
        if team is None:
            raise TeamNotFoundError(team_id)
        return list(team.members)

    def get_recent_reviews(self, candidate_id, limit: int = 2) -> List[Review]:
        """Most recent reviews for a candidate, newest first"""
        candidate_reviews = [r for r in self.reviews if r.candidate_id == str(candidate_id)]
        candidate_reviews.sort(key=lambda r: r.created_at, reverse=True)
        return candidate_reviews[:limit]
