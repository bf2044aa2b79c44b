"""
Orchestrator for the team formation engine
"""

import json
import logging
from typing import Any, Dict, List

from team_formation.agents.scoring_agent import ScoringAgent
from team_formation.agents.sizing_agent import SizingAgent
from team_formation.agents.optimizer_agent import OptimizerAgent
from team_formation.agents.team_builder_agent import TeamBuilderAgent
from team_formation.agents.existing_team_agent import ExistingTeamAgent
from team_formation.agents.recommendation_agent import RecommendationAgent
from team_formation.utils.data_store import MatchingDataStore
from team_formation.utils.errors import ProjectNotFoundError
from team_formation.utils.models import (
    ExistingTeamCandidate,
    FreelancerRecommendation,
    ProjectRequirement,
    Team,
    TeamProposal
)
from team_formation.utils.skills import SkillSet, normalize
from team_formation.config.settings import (
    BEST_TEAM_POOL_LIMIT,
    DEFAULT_FREELANCER_LIMIT,
    DEFAULT_RECOMMENDATION_TEAM_SIZE,
    DEFAULT_TEAM_PROPOSAL_LIMIT,
    EXISTING_TEAM_LIMIT,
    POOL_SIZE_MULTIPLIER,
    RECENT_REVIEW_LIMIT
)

logger = logging.getLogger(__name__)


class MatchingOrchestrator:
    """
    Orchestrator for the matching engine

    Pulls finite collections from the data store and coordinates the
    scoring, sizing, optimizer, team builder, existing team and
    recommendation agents. Every call is independent; nothing is cached
    between requests.
    """

    def __init__(self, data_store: MatchingDataStore):
        """
        Initialize the matching orchestrator

        Args:
            data_store: Project store, freelancer directory, team registry and review store
        """
        logger.info("Initializing MatchingOrchestrator")

        self.data_store = data_store

        # Initialize agents
        self.scoring_agent = ScoringAgent()
        self.sizing_agent = SizingAgent()
        self.optimizer_agent = OptimizerAgent()
        self.team_builder_agent = TeamBuilderAgent()
        self.existing_team_agent = ExistingTeamAgent()
        self.recommendation_agent = RecommendationAgent(scoring_agent=self.scoring_agent)

    def _get_project(self, project_id) -> ProjectRequirement:
        project = self.data_store.get_project(project_id)
        if project is None:
            logger.error(f"Project not found: {project_id}")
            raise ProjectNotFoundError(project_id)
        return project

    def _resolve_skills(self, project: ProjectRequirement, required_skills) -> SkillSet:
        skills = normalize(required_skills)
        if not skills:
            logger.debug(f"Using stored requirements for project {project.project_id}")
            skills = project.required_skills
        return skills

    def find_best_team(self, project_id, team_size: int = 0, required_skills=None) -> Team:
        """
        Find the single best team for a project

        Args:
            project_id: Project to staff
            team_size: Desired team size; 0 or less estimates one from the project
            required_skills: Skills to cover; empty uses the project's stored list

        Returns:
            Best team
        """
        logger.info(f"Finding best team for project {project_id}")

        project = self._get_project(project_id)

        if team_size <= 0:
            team_size = self.sizing_agent.estimate_team_size(project)

        skills = self._resolve_skills(project, required_skills)

        candidates = sorted(
            self.data_store.find_candidates_by_skills(skills),
            key=lambda c: (-c.rating, c.id)
        )[:BEST_TEAM_POOL_LIMIT]
        ranked = self.scoring_agent.rank_candidates(candidates, skills)

        return self.optimizer_agent.build_team(ranked, team_size, skills)

    def get_team_recommendations(self, project_id, required_skills=None,
                                 team_size: int = DEFAULT_RECOMMENDATION_TEAM_SIZE,
                                 limit: int = DEFAULT_TEAM_PROPOSAL_LIMIT) -> List[TeamProposal]:
        """
        Propose several alternative teams for a project

        Args:
            project_id: Project to staff
            required_skills: Skills to cover, most important first
            team_size: Seats per team
            limit: Maximum number of proposals

        Returns:
            Team proposals
        """
        logger.info(f"Getting team recommendations for project {project_id}")

        project = self._get_project(project_id)
        skills = self._resolve_skills(project, required_skills)

        pool = sorted(
            self.data_store.find_candidates_by_skills(skills),
            key=lambda c: (-c.rating, -c.completed_project_count, c.id)
        )[:team_size * POOL_SIZE_MULTIPLIER]

        scored_pool = [self.scoring_agent.score_candidate(c, skills) for c in pool]
        return self.team_builder_agent.build_teams(scored_pool, skills, team_size=team_size, limit=limit)

    def get_freelancer_recommendations(self, project_id, required_skills=None,
                                       limit: int = DEFAULT_FREELANCER_LIMIT) -> List[FreelancerRecommendation]:
        """
        Recommend individual freelancers for a project

        Args:
            project_id: Project to staff
            required_skills: Skills to match
            limit: Maximum number of recommendations

        Returns:
            Recommendations with reasons and recent reviews
        """
        logger.info(f"Getting freelancer recommendations for project {project_id}")

        project = self._get_project(project_id)
        skills = self._resolve_skills(project, required_skills)

        candidates = self.data_store.find_candidates_by_skills(skills)
        return self.recommendation_agent.recommend(
            candidates,
            skills,
            limit=limit,
            review_lookup=lambda candidate_id: self.data_store.get_recent_reviews(
                candidate_id, limit=RECENT_REVIEW_LIMIT
            )
        )

    def find_existing_teams(self, project_id, limit: int = EXISTING_TEAM_LIMIT) -> List[ExistingTeamCandidate]:
        """
        Rank pre-formed teams for a project

        Args:
            project_id: Project to staff
            limit: Maximum number of teams

        Returns:
            Best matching existing teams
        """
        logger.info(f"Finding existing teams for project {project_id}")

        project = self._get_project(project_id)
        teams = self.data_store.get_existing_teams()

        return self.existing_team_agent.rank_existing_teams(teams, project.required_skills, limit=limit)

    def get_matches(self, project_id) -> Dict[str, Any]:
        """
        Get the matches shown when a project is created or viewed

        Projects that want more than one person get team proposals,
        everyone else gets individual freelancer recommendations.
        """
        project = self._get_project(project_id)

        if project.desired_team_size and project.desired_team_size > 1:
            proposals = self.get_team_recommendations(
                project_id, project.required_skills, team_size=project.desired_team_size
            )
            return {"type": "teams", "matches": [p.model_dump(mode="json") for p in proposals]}

        recommendations = self.get_freelancer_recommendations(project_id, project.required_skills)
        return {"type": "freelancers", "matches": [r.model_dump(mode="json") for r in recommendations]}

    @staticmethod
    def save_results(results: Any, output_path: str) -> None:
        """
        Save results to a JSON file

        Args:
            results: Pydantic model, list of models or plain data
            output_path: Path to output file
        """
        logger.info(f"Saving results to {output_path}")

        if isinstance(results, list):
            data = [r.model_dump(mode="json") if hasattr(r, "model_dump") else r for r in results]
        elif hasattr(results, "model_dump"):
            data = results.model_dump(mode="json")
        else:
            data = results

        with open(output_path, 'w') as f:
            json.dump(data, f, indent=2)

        logger.info(f"Results saved to {output_path}")
