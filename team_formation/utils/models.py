"""
Data models for the team formation engine
"""

from typing import List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator

from team_formation.utils.skills import SkillSet, coverage_ratio, round_percentage


def _coerce_id(value):
    return value if value is None else str(value)


class ProjectRequirement(BaseModel):
    """What a project needs from the team"""
    project_id: str
    title: str = Field(default="")
    required_skills: SkillSet = Field(default_factory=SkillSet)
    budget: float = Field(default=0.0)
    duration_days: int = Field(default=0)
    desired_team_size: Optional[int] = Field(default=None)

    @field_validator("project_id", mode="before")
    @classmethod
    def _project_id_as_str(cls, value):
        return _coerce_id(value)

    @field_validator("budget", "duration_days", mode="before")
    @classmethod
    def _missing_as_zero(cls, value):
        return 0 if value is None or value == "" else value


class Candidate(BaseModel):
    """A worker from the freelancer directory"""
    id: str
    name: str = Field(default="")
    skills: SkillSet = Field(default_factory=SkillSet)
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    completed_project_count: int = Field(default=0, ge=0)
    is_available: bool = Field(default=False)
    hourly_rate: Optional[float] = Field(default=None)
    location: str = Field(default="")
    is_active: bool = Field(default=True)
    is_verified: bool = Field(default=True)

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value):
        return _coerce_id(value)

    @field_validator("rating", "completed_project_count", mode="before")
    @classmethod
    def _missing_as_zero(cls, value):
        return 0 if value is None or value == "" else value


class ScoredCandidate(BaseModel):
    """A candidate annotated with its desirability for one project"""
    candidate: Candidate
    score: float
    matching_skills: SkillSet = Field(default_factory=SkillSet)

    @property
    def id(self) -> str:
        return self.candidate.id

    @property
    def rating(self) -> float:
        return self.candidate.rating


class Team(BaseModel):
    """Selected team with aggregate metrics derived from its members"""
    members: List[ScoredCandidate] = Field(default_factory=list)
    required_skills: SkillSet = Field(default_factory=SkillSet)

    @computed_field
    @property
    def combined_skills(self) -> SkillSet:
        skills = SkillSet()
        for member in self.members:
            skills = skills.union(member.candidate.skills)
        return skills

    @computed_field
    @property
    def covered_skills(self) -> SkillSet:
        return self.required_skills.intersect(self.combined_skills)

    @computed_field
    @property
    def uncovered_skills(self) -> SkillSet:
        return self.required_skills.difference(self.combined_skills)

    @computed_field
    @property
    def average_rating(self) -> float:
        if not self.members:
            return 0.0
        return sum(m.candidate.rating for m in self.members) / len(self.members)

    @computed_field
    @property
    def total_score(self) -> float:
        return float(sum(m.score for m in self.members))

    @computed_field
    @property
    def skill_coverage(self) -> float:
        """Fraction of required skills covered, 0.0 when nothing is required"""
        return coverage_ratio(self.combined_skills, self.required_skills)

    @computed_field
    @property
    def match_percentage(self) -> int:
        return round_percentage(self.skill_coverage * 100)

    @property
    def member_ids(self) -> List[str]:
        return [m.candidate.id for m in self.members]


class TeamProposal(Team):
    """One of several alternative teams offered for a project"""
    team_id: str

    @computed_field
    @property
    def coverage_label(self) -> str:
        return f"{len(self.covered_skills)}/{len(self.required_skills)}"

    @computed_field
    @property
    def rounded_average_rating(self) -> float:
        """Average rating rounded half up to one decimal"""
        return round_percentage(self.average_rating * 10) / 10


class ExistingTeam(BaseModel):
    """Roster of an already formed team"""
    team_id: str
    name: str = Field(default="")
    members: List[Candidate] = Field(default_factory=list)

    @field_validator("team_id", mode="before")
    @classmethod
    def _team_id_as_str(cls, value):
        return _coerce_id(value)


class ExistingTeamCandidate(BaseModel):
    """Existing team scored against a project's requirements"""
    team_id: str
    name: str = Field(default="")
    members: List[Candidate] = Field(default_factory=list)
    aggregate_skills: SkillSet = Field(default_factory=SkillSet)
    skill_match_percentage: float = Field(default=0.0)
    average_rating: float = Field(default=0.0)
    score: float = Field(default=0.0)


class Review(BaseModel):
    """Client review left for a freelancer"""
    candidate_id: str
    rating: float = Field(default=0.0)
    review_text: str = Field(default="")
    reviewer_name: str = Field(default="")
    created_at: str = Field(default="")

    @field_validator("candidate_id", mode="before")
    @classmethod
    def _candidate_id_as_str(cls, value):
        return _coerce_id(value)


class FreelancerRecommendation(BaseModel):
    """Individual freelancer recommended for a project, with reasons"""
    candidate: Candidate
    score: float
    match_percentage: int
    matching_skills: SkillSet = Field(default_factory=SkillSet)
    recommendation_reasons: List[str] = Field(default_factory=list)
    recent_reviews: List[Review] = Field(default_factory=list)
