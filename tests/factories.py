from team_formation.utils.models import Candidate


def make_candidate(candidate_id, skills=(), rating=0.0, completed=0, available=False, **kwargs):
    return Candidate(
        id=candidate_id,
        skills=list(skills),
        rating=rating,
        completed_project_count=completed,
        is_available=available,
        **kwargs
    )
