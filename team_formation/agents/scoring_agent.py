"""
Scoring Agent for rating candidates against a project's required skills
"""

import logging
from typing import Dict, Iterable, List, Optional

from team_formation.utils.models import Candidate, ScoredCandidate
from team_formation.utils.skills import normalize
from team_formation.config.settings import (
    SKILL_MATCH_POINTS,
    RATING_MULTIPLIER,
    EXPERIENCE_POINTS_PER_PROJECT,
    EXPERIENCE_POINTS_CAP,
    AVAILABILITY_POINTS
)

logger = logging.getLogger(__name__)


def ranking_key(scored: ScoredCandidate):
    """Sort key for score descending, candidate id ascending on ties"""
    return (-scored.score, scored.candidate.id)


class ScoringAgent:
    """
    Agent for scoring and ranking candidates with an additive point model
    """

    def __init__(self, weights: Optional[Dict[str, float]] = None):
        """
        Initialize the scoring agent

        Args:
            weights: Optional overrides for the point values
        """
        logger.info("Initializing ScoringAgent")
        weights = weights or {}
        self.skill_match_points = weights.get("skill_match", SKILL_MATCH_POINTS)
        self.rating_multiplier = weights.get("rating", RATING_MULTIPLIER)
        self.experience_points = weights.get("experience", EXPERIENCE_POINTS_PER_PROJECT)
        self.experience_cap = weights.get("experience_cap", EXPERIENCE_POINTS_CAP)
        self.availability_points = weights.get("availability", AVAILABILITY_POINTS)

    def experience_points_for(self, completed_project_count: int) -> float:
        return min(completed_project_count * self.experience_points, self.experience_cap)

    def score(self, candidate: Candidate, required_skills) -> float:
        """
        Calculate a candidate's desirability for a project

        Args:
            candidate: Candidate to score
            required_skills: Skills the project requires

        Returns:
            Score (skill match + rating + capped experience + availability)
        """
        required = normalize(required_skills)

        score = 0
        for skill in required:
            if skill in candidate.skills:
                score += self.skill_match_points

        score += candidate.rating * self.rating_multiplier
        score += self.experience_points_for(candidate.completed_project_count)

        if candidate.is_available:
            score += self.availability_points

        return score

    def score_candidate(self, candidate: Candidate, required_skills) -> ScoredCandidate:
        required = normalize(required_skills)
        return ScoredCandidate(
            candidate=candidate,
            score=self.score(candidate, required),
            matching_skills=candidate.skills.intersect(required)
        )

    def rank_candidates(self, candidates: Iterable[Candidate], required_skills) -> List[ScoredCandidate]:
        """
        Score every candidate and sort by score

        Candidates without any matching skill are kept; the directory is
        responsible for pre-filtering the pool.

        Args:
            candidates: Candidate pool
            required_skills: Skills the project requires

        Returns:
            Scored candidates, highest score first
        """
        required = normalize(required_skills)
        ranked = [self.score_candidate(c, required) for c in candidates]
        ranked.sort(key=ranking_key)

        logger.info(f"Ranked {len(ranked)} candidates against {len(required)} required skills")
        if ranked:
            logger.debug(f"Top candidate {ranked[0].candidate.id} scored {ranked[0].score}")
        return ranked
