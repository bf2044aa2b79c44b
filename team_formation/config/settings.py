"""
Configuration settings for the team formation engine
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Candidate scoring (additive point model)
SKILL_MATCH_POINTS = 10            # Per required skill the candidate has
RATING_MULTIPLIER = 5              # Rating is on a 0-5 scale
EXPERIENCE_POINTS_PER_PROJECT = 2
EXPERIENCE_POINTS_CAP = 20
AVAILABILITY_POINTS = 15

# Team size estimation: each threshold crossed adds one seat
BUDGET_THRESHOLDS = (5000, 10000)
DURATION_THRESHOLDS = (30, 90)     # Days
SKILL_COUNT_THRESHOLDS = (3, 6)
MIN_TEAM_SIZE = 1
MAX_TEAM_SIZE = 5

# Existing team ranking
EXISTING_TEAM_WEIGHTS = {
    "skill_match": 0.7,   # Applied to the 0-100 skill match percentage
    "rating": 6.0         # Applied to the 0-5 average member rating
}
EXISTING_TEAM_LIMIT = 5

# Best team candidate pool, highest rated first
BEST_TEAM_POOL_LIMIT = 50

# Multi-team recommendations
POOL_SIZE_MULTIPLIER = 5
DEFAULT_RECOMMENDATION_TEAM_SIZE = 3
DEFAULT_TEAM_PROPOSAL_LIMIT = 3

# Individual freelancer recommendations
DEFAULT_FREELANCER_LIMIT = 5
RECENT_REVIEW_LIMIT = 2
RECOMMENDATION_THRESHOLDS = {
    "high_match": 80,
    "moderate_match": 50,
    "excellent_rating": 4.5,
    "very_good_rating": 4.0,
    "experienced_projects": 10,
    "proven_projects": 5
}

# General settings
PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_DATA_PATH = Path(os.getenv("TEAM_FORMATION_DATA_PATH", PROJECT_ROOT / "matching_data.json"))
DEFAULT_OUTPUT_PATH = PROJECT_ROOT / "matching_results.json"
LOG_FILE = os.getenv("TEAM_FORMATION_LOG_FILE", "team_formation.log")
LOG_LEVEL = os.getenv("TEAM_FORMATION_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
