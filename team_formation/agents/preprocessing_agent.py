"""
Preprocessing Agent for loading projects, freelancers, teams and reviews
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from team_formation.utils.data_store import MatchingDataStore
from team_formation.utils.models import Candidate, ExistingTeam, ProjectRequirement, Review

logger = logging.getLogger(__name__)

CSV_FILES = {
    "projects": "projects.csv",
    "freelancers": "freelancers.csv",
    "teams": "teams.csv",
    "reviews": "reviews.csv"
}


def _first(raw_data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = raw_data.get(key)
        if value is not None:
            return value
    return default


def _as_id(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def _as_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "y", "available")
    return bool(value)


class PreprocessingAgent:
    """
    Preprocessing Agent for turning raw JSON or CSV records into a
    MatchingDataStore
    """

    def __init__(self):
        """Initialize the preprocessing agent"""
        logger.info("Initializing PreprocessingAgent")

    def load(self, path) -> MatchingDataStore:
        """
        Load a data store from a JSON file or a directory of CSV files

        Args:
            path: Path to the JSON file or CSV directory

        Returns:
            Populated data store
        """
        path = Path(path)
        if path.is_dir():
            return self.process_csv_directory(path)
        if path.suffix.lower() == '.json':
            return self.process_json_file(path)
        raise ValueError(f"Unsupported data source: {path}")

    def process_json_file(self, file_path) -> MatchingDataStore:
        """
        Process a JSON document with projects, freelancers, teams and reviews

        Args:
            file_path: Path to the JSON file

        Returns:
            Populated data store
        """
        logger.info(f"Processing JSON file: {file_path}")

        try:
            with open(file_path, 'r') as f:
                raw_data = json.load(f)

            store = self.build_store(raw_data)
            logger.info(f"Processed {len(store.candidates)} freelancers from JSON")
            return store

        except Exception as e:
            logger.error(f"Error processing JSON file: {e}")
            raise

    def process_csv_directory(self, directory) -> MatchingDataStore:
        """
        Process a directory holding projects.csv, freelancers.csv, teams.csv
        and reviews.csv; missing files are treated as empty

        Args:
            directory: Directory containing the CSV files

        Returns:
            Populated data store
        """
        logger.info(f"Processing CSV directory: {directory}")

        try:
            raw_data = {}
            for section, file_name in CSV_FILES.items():
                csv_path = Path(directory) / file_name
                if not csv_path.exists():
                    logger.warning(f"No {file_name} in {directory}")
                    raw_data[section] = []
                    continue

                df = pd.read_csv(csv_path)
                df = df.astype(object).where(pd.notna(df), None)
                raw_data[section] = df.to_dict(orient="records")

            store = self.build_store(raw_data)
            logger.info(f"Processed {len(store.candidates)} freelancers from CSV")
            return store

        except Exception as e:
            logger.error(f"Error processing CSV directory: {e}")
            raise

    def build_store(self, raw_data: Dict[str, List[Dict[str, Any]]]) -> MatchingDataStore:
        projects = [self._process_project(p) for p in raw_data.get("projects", [])]
        candidates = [self._process_candidate(c) for c in raw_data.get("freelancers", [])]
        candidates_map = {c.id: c for c in candidates}
        teams = [self._process_team(t, candidates_map) for t in raw_data.get("teams", [])]
        reviews = [self._process_review(r) for r in raw_data.get("reviews", [])]

        return MatchingDataStore(projects=projects, candidates=candidates, teams=teams, reviews=reviews)

    def _process_project(self, raw_data: Dict[str, Any]) -> ProjectRequirement:
        """
        Process a single project record

        Args:
            raw_data: Raw project data

        Returns:
            Structured ProjectRequirement
        """
        team_size = _first(raw_data, 'team_size', 'desired_team_size')
        return ProjectRequirement(
            project_id=_as_id(_first(raw_data, 'id', 'project_id')),
            title=_first(raw_data, 'title', default=''),
            required_skills=_first(raw_data, 'required_skills', 'skills_required'),
            budget=_first(raw_data, 'budget', default=0),
            duration_days=_first(raw_data, 'duration_days', 'duration', default=0),
            desired_team_size=int(team_size) if team_size is not None else None
        )

    def _process_candidate(self, raw_data: Dict[str, Any]) -> Candidate:
        """
        Process a single freelancer record

        Args:
            raw_data: Raw freelancer data

        Returns:
            Structured Candidate
        """
        return Candidate(
            id=_as_id(_first(raw_data, 'id', 'freelancer_id', 'user_id')),
            name=_first(raw_data, 'name', 'username', default=''),
            skills=raw_data.get('skills'),
            rating=_first(raw_data, 'rating', default=0),
            completed_project_count=_first(raw_data, 'completed_project_count', 'completed_projects', default=0),
            is_available=_as_bool(_first(raw_data, 'is_available', 'availability')),
            hourly_rate=raw_data.get('hourly_rate'),
            location=_first(raw_data, 'location', default=''),
            is_active=_as_bool(_first(raw_data, 'is_active', 'active_status'), default=True),
            is_verified=_as_bool(raw_data.get('is_verified'), default=True)
        )

    def _process_team(self, raw_data: Dict[str, Any], candidates_map: Dict[str, Candidate]) -> ExistingTeam:
        """
        Process a single team record, resolving member ids against the
        freelancer directory
        """
        team_id = _as_id(_first(raw_data, 'id', 'team_id'))
        member_ids = _first(raw_data, 'member_ids', 'members', default=[])
        if isinstance(member_ids, str):
            member_ids = [m.strip() for m in member_ids.split(',') if m.strip()]
        elif not isinstance(member_ids, list):
            # A single numeric id read from CSV
            member_ids = [member_ids]

        members = []
        for member_id in member_ids:
            candidate = candidates_map.get(_as_id(member_id))
            if candidate is None:
                logger.warning(f"Team {team_id} references unknown freelancer {member_id}")
                continue
            members.append(candidate)

        return ExistingTeam(team_id=team_id, name=_first(raw_data, 'name', default=''), members=members)

    def _process_review(self, raw_data: Dict[str, Any]) -> Review:
        return Review(
            candidate_id=_as_id(_first(raw_data, 'candidate_id', 'reviewee_id', 'freelancer_id')),
            rating=_first(raw_data, 'rating', default=0),
            review_text=_first(raw_data, 'review_text', default=''),
            reviewer_name=_first(raw_data, 'reviewer_name', default=''),
            created_at=str(_first(raw_data, 'created_at', default=''))
        )
