"""
Exceptions raised by the team formation engine
"""


class MatchingError(Exception):
    """Base class for matching errors"""


class ProjectNotFoundError(MatchingError, LookupError):
    """The referenced project does not exist in the project store"""

    def __init__(self, project_id):
        self.project_id = project_id
        super().__init__(f"Project not found: {project_id}")


class TeamNotFoundError(MatchingError, LookupError):
    """The referenced team does not exist in the team registry"""

    def __init__(self, team_id):
        self.team_id = team_id
        super().__init__(f"Team not found: {team_id}")
