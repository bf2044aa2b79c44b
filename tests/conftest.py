import copy

import pytest

from team_formation.agents.preprocessing_agent import PreprocessingAgent
from team_formation.agents.scoring_agent import ScoringAgent
from team_formation.pipeline.orchestrator import MatchingOrchestrator

SAMPLE_DATA = {
    "projects": [
        {"id": 1, "title": "Marketplace redesign", "required_skills": ["PHP", "JavaScript", "CSS", "MySQL"],
         "budget": 12000, "duration_days": 60, "team_size": 3},
        {"id": 2, "title": "Landing page", "required_skills": "HTML, CSS",
         "budget": 800, "duration_days": 7, "team_size": 1},
    ],
    "freelancers": [
        {"id": 101, "name": "Amara Osei", "skills": ["PHP", "MySQL", "Laravel"], "rating": 4.8,
         "completed_projects": 14, "is_available": True},
        {"id": 102, "name": "Jonas Berg", "skills": ["JavaScript", "React", "CSS"], "rating": 4.2,
         "completed_projects": 6, "is_available": True},
        {"id": 103, "name": "Lucia Ferraro", "skills": ["CSS", "HTML", "Figma"], "rating": 4.6,
         "completed_projects": 3, "is_available": False},
        {"id": 104, "name": "Dev Patel", "skills": ["PHP", "JavaScript"], "rating": 3.9,
         "completed_projects": 11, "is_available": True},
        {"id": 105, "name": "Mei Lin", "skills": ["MySQL", "PostgreSQL"], "rating": 4.4,
         "completed_projects": 8, "is_available": False},
        {"id": 106, "name": "Sam Carter", "skills": ["HTML", "CSS", "JavaScript"], "rating": 3.5,
         "completed_projects": 2, "is_available": True},
        {"id": 107, "name": "Rosa Diaz", "skills": ["PHP", "CSS"], "rating": 4.9,
         "completed_projects": 20, "is_available": True, "is_verified": False},
    ],
    "teams": [
        {"id": 1, "name": "Full Stack Crew", "member_ids": [101, 102]},
        {"id": 2, "name": "Frontend Studio", "member_ids": [103, 106]},
        {"id": 3, "name": "Data Desk", "member_ids": [105]},
    ],
    "reviews": [
        {"candidate_id": 101, "rating": 5, "review_text": "Shipped ahead of schedule.",
         "reviewer_name": "client_jane", "created_at": "2024-03-02 10:15:00"},
        {"candidate_id": 101, "rating": 4.5, "review_text": "Solid database work.",
         "reviewer_name": "client_omar", "created_at": "2024-05-19 16:40:00"},
        {"candidate_id": 101, "rating": 5, "review_text": "Great communication.",
         "reviewer_name": "client_li", "created_at": "2023-11-08 09:00:00"},
        {"candidate_id": 102, "rating": 4, "review_text": "Clean React components.",
         "reviewer_name": "client_jane", "created_at": "2024-01-12 12:30:00"},
    ],
}


@pytest.fixture
def sample_data():
    return copy.deepcopy(SAMPLE_DATA)


@pytest.fixture
def data_store(sample_data):
    return PreprocessingAgent().build_store(sample_data)


@pytest.fixture
def orchestrator(data_store):
    return MatchingOrchestrator(data_store)


@pytest.fixture
def scoring_agent():
    return ScoringAgent()
