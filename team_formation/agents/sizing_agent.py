"""
Sizing Agent for recommending a team size from a project's scope
"""

import logging

from team_formation.utils.models import ProjectRequirement
from team_formation.config.settings import (
    BUDGET_THRESHOLDS,
    DURATION_THRESHOLDS,
    SKILL_COUNT_THRESHOLDS,
    MIN_TEAM_SIZE,
    MAX_TEAM_SIZE
)

logger = logging.getLogger(__name__)


class SizingAgent:
    """Agent for estimating how many people a project needs"""

    def __init__(self, max_team_size: int = MAX_TEAM_SIZE):
        logger.info("Initializing SizingAgent")
        self.max_team_size = max_team_size

    @staticmethod
    def _thresholds_crossed(value: float, thresholds) -> int:
        return sum(1 for threshold in thresholds if value > threshold)

    def estimate_team_size(self, project: ProjectRequirement) -> int:
        """
        Estimate a team size from budget, duration and skill count

        Every threshold a dimension exceeds adds one seat, so a budget over
        10000 adds two. The result is capped at the maximum team size.

        Args:
            project: Project requirement

        Returns:
            Recommended team size
        """
        team_size = MIN_TEAM_SIZE
        team_size += self._thresholds_crossed(project.budget, BUDGET_THRESHOLDS)
        team_size += self._thresholds_crossed(project.duration_days, DURATION_THRESHOLDS)
        team_size += self._thresholds_crossed(len(project.required_skills), SKILL_COUNT_THRESHOLDS)

        estimate = min(team_size, self.max_team_size)
        logger.info(f"Estimated team size {estimate} for project {project.project_id}")
        return estimate
