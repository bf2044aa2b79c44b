"""
Recommendation Agent for ranking individual freelancers and explaining why
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from team_formation.agents.scoring_agent import ScoringAgent
from team_formation.utils.models import Candidate, FreelancerRecommendation, Review
from team_formation.utils.skills import coverage_ratio, normalize, round_percentage
from team_formation.config.settings import (
    DEFAULT_FREELANCER_LIMIT,
    RECOMMENDATION_THRESHOLDS
)

logger = logging.getLogger(__name__)


class RecommendationAgent:
    """
    Agent for recommending individual freelancers with human-readable reasons
    """

    def __init__(self, scoring_agent: Optional[ScoringAgent] = None,
                 thresholds: Optional[Dict[str, float]] = None):
        """
        Initialize the recommendation agent

        Args:
            scoring_agent: Scorer used to annotate recommendations
            thresholds: Optional overrides for the reason thresholds
        """
        logger.info("Initializing RecommendationAgent")
        self.scoring_agent = scoring_agent or ScoringAgent()
        self.thresholds = {**RECOMMENDATION_THRESHOLDS, **(thresholds or {})}

    def match_percentage(self, candidate: Candidate, required_skills) -> int:
        return round_percentage(coverage_ratio(candidate.skills, required_skills) * 100)

    def explain(self, candidate: Candidate, match_percentage: int) -> List[str]:
        """
        Generate the reasons a freelancer is recommended

        Args:
            candidate: Recommended candidate
            match_percentage: Share of required skills the candidate has

        Returns:
            Reasons covering skill match, rating and track record
        """
        reasons = []

        if match_percentage >= self.thresholds["high_match"]:
            reasons.append("High skill match for the required skills")
        elif match_percentage >= self.thresholds["moderate_match"]:
            reasons.append("Moderate skill match for some required skills")

        if candidate.rating >= self.thresholds["excellent_rating"]:
            reasons.append("Excellent rating from past clients")
        elif candidate.rating >= self.thresholds["very_good_rating"]:
            reasons.append("Very good rating from past clients")

        completed = candidate.completed_project_count
        if completed >= self.thresholds["experienced_projects"]:
            reasons.append(f"Experienced with {completed} completed projects")
        elif completed >= self.thresholds["proven_projects"]:
            reasons.append(f"Has successfully completed {completed} projects")

        return reasons

    def recommend(self, candidates: Iterable[Candidate], required_skills,
                  limit: int = DEFAULT_FREELANCER_LIMIT,
                  review_lookup: Optional[Callable[[str], List[Review]]] = None) -> List[FreelancerRecommendation]:
        """
        Rank freelancers by skill match, rating and completed projects

        Args:
            candidates: Candidate pool
            required_skills: Skills the project requires
            limit: Maximum number of recommendations
            review_lookup: Optional callable returning recent reviews for a candidate id

        Returns:
            Recommendations, best first
        """
        required = normalize(required_skills)

        ranked = sorted(
            ((self.match_percentage(c, required), c) for c in candidates),
            key=lambda pair: (-pair[0], -pair[1].rating, -pair[1].completed_project_count, pair[1].id)
        )

        recommendations = []
        for percentage, candidate in ranked[:limit]:
            scored = self.scoring_agent.score_candidate(candidate, required)
            recommendations.append(FreelancerRecommendation(
                candidate=candidate,
                score=scored.score,
                match_percentage=percentage,
                matching_skills=scored.matching_skills,
                recommendation_reasons=self.explain(candidate, percentage),
                recent_reviews=review_lookup(candidate.id) if review_lookup else []
            ))

        logger.info(f"Recommended {len(recommendations)} freelancers")
        return recommendations
