"""
FastAPI application for the team formation engine.
This exposes the matching functionality through a REST API.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from team_formation.agents.preprocessing_agent import PreprocessingAgent
from team_formation.pipeline.orchestrator import MatchingOrchestrator
from team_formation.utils.errors import MatchingError, ProjectNotFoundError, TeamNotFoundError
from team_formation.config.settings import (
    DEFAULT_DATA_PATH,
    DEFAULT_FREELANCER_LIMIT,
    DEFAULT_RECOMMENDATION_TEAM_SIZE,
    DEFAULT_TEAM_PROPOSAL_LIMIT,
    EXISTING_TEAM_LIMIT,
    LOG_FILE,
    LOG_FORMAT,
    LOG_LEVEL
)

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
    handlers=[
        logging.FileHandler(LOG_FILE),
        logging.StreamHandler()
    ]
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

# Create FastAPI app
app = FastAPI(
    title="Team Formation API",
    description="API for recommending freelancers and teams for projects",
    version=API_VERSION,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Adjust in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class StatusResponse(BaseModel):
    status: str
    version: str
    data_path: str


_orchestrator: Optional[MatchingOrchestrator] = None


def get_orchestrator() -> MatchingOrchestrator:
    """Load the data store on first use and share it between requests"""
    global _orchestrator
    if _orchestrator is None:
        logger.info(f"Loading matching data from {DEFAULT_DATA_PATH}")
        data_store = PreprocessingAgent().load(DEFAULT_DATA_PATH)
        _orchestrator = MatchingOrchestrator(data_store)
    return _orchestrator


def _dump(results) -> Any:
    if isinstance(results, dict):
        return results
    if isinstance(results, list):
        return [r.model_dump(mode="json") for r in results]
    return results.model_dump(mode="json")


def _handle(call, *args, **kwargs):
    try:
        return _dump(call(*args, **kwargs))
    except (ProjectNotFoundError, TeamNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except MatchingError as e:
        logger.exception(f"Matching error: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Error in {call.__name__}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


# Routes
@app.get("/", response_model=StatusResponse)
async def root():
    """Get API status"""
    return {
        "status": "running",
        "version": API_VERSION,
        "data_path": str(DEFAULT_DATA_PATH)
    }


@app.get("/projects/{project_id}/best-team")
def best_team(project_id: str,
              team_size: int = Query(0, ge=0),
              skills: str = Query(""),
              orchestrator: MatchingOrchestrator = Depends(get_orchestrator)) -> Dict[str, Any]:
    """
    Get the single best team for a project.

    A team size of 0 lets the engine estimate one from the project's
    budget, duration and skill count. Empty skills fall back to the
    project's stored requirements.
    """
    return _handle(orchestrator.find_best_team, project_id, team_size=team_size, required_skills=skills)


@app.get("/projects/{project_id}/team-recommendations")
def team_recommendations(project_id: str,
                         skills: str = Query(""),
                         team_size: int = Query(DEFAULT_RECOMMENDATION_TEAM_SIZE, ge=1),
                         limit: int = Query(DEFAULT_TEAM_PROPOSAL_LIMIT, ge=1),
                         orchestrator: MatchingOrchestrator = Depends(get_orchestrator)) -> List[Dict[str, Any]]:
    """Get several alternative teams for a project."""
    return _handle(orchestrator.get_team_recommendations, project_id, skills,
                   team_size=team_size, limit=limit)


@app.get("/projects/{project_id}/freelancer-recommendations")
def freelancer_recommendations(project_id: str,
                               skills: str = Query(""),
                               limit: int = Query(DEFAULT_FREELANCER_LIMIT, ge=1),
                               orchestrator: MatchingOrchestrator = Depends(get_orchestrator)) -> List[Dict[str, Any]]:
    """Get individual freelancers for a project, with the reasons they were picked."""
    return _handle(orchestrator.get_freelancer_recommendations, project_id, skills, limit=limit)


@app.get("/projects/{project_id}/existing-teams")
def existing_teams(project_id: str,
                   limit: int = Query(EXISTING_TEAM_LIMIT, ge=1),
                   orchestrator: MatchingOrchestrator = Depends(get_orchestrator)) -> List[Dict[str, Any]]:
    """Get the existing teams that best fit a project."""
    return _handle(orchestrator.find_existing_teams, project_id, limit=limit)


@app.get("/projects/{project_id}/matches")
def matches(project_id: str,
            orchestrator: MatchingOrchestrator = Depends(get_orchestrator)) -> Dict[str, Any]:
    """Get team proposals or freelancer recommendations, depending on the project's team size."""
    return _handle(orchestrator.get_matches, project_id)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
