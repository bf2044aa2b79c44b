#!/usr/bin/env python3
"""
Team Formation Engine
Main entry point for the application
"""

import sys
import logging
import argparse
from pathlib import Path

from team_formation.agents.preprocessing_agent import PreprocessingAgent
from team_formation.pipeline.orchestrator import MatchingOrchestrator
from team_formation.config.settings import (
    DEFAULT_DATA_PATH,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_FREELANCER_LIMIT,
    DEFAULT_RECOMMENDATION_TEAM_SIZE,
    DEFAULT_TEAM_PROPOSAL_LIMIT,
    EXISTING_TEAM_LIMIT,
    LOG_FILE,
    LOG_FORMAT,
    LOG_LEVEL
)

logger = logging.getLogger(__name__)

MODES = ("best-team", "team-recommendations", "freelancers", "existing-teams")


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(LOG_FILE),
            logging.StreamHandler()
        ]
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Team Formation Engine")

    # Data options
    parser.add_argument("--data", type=str, default=str(DEFAULT_DATA_PATH),
                        help=f"Path to a JSON data file or CSV directory (default: {DEFAULT_DATA_PATH})")
    parser.add_argument("--output", type=str, default=str(DEFAULT_OUTPUT_PATH),
                        help=f"Path to output file (default: {DEFAULT_OUTPUT_PATH})")

    # Matching options
    parser.add_argument("--project-id", type=str, required=True,
                        help="Project to find matches for")
    parser.add_argument("--mode", type=str, choices=MODES, default="best-team",
                        help="What to compute (default: best-team)")
    parser.add_argument("--team-size", type=int, default=None,
                        help="Team size; best-team estimates one when omitted "
                             f"(team-recommendations default: {DEFAULT_RECOMMENDATION_TEAM_SIZE})")
    parser.add_argument("--skills", type=str, default="",
                        help="Comma-separated required skills (default: the project's own)")
    parser.add_argument("--limit", type=int, default=None,
                        help="Maximum number of results (defaults depend on mode)")

    # Execution options
    parser.add_argument("--save-only", action="store_true",
                        help="Save results without displaying")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable verbose output")
    return parser


def run(args, orchestrator: MatchingOrchestrator):
    """Run the selected mode and return its result"""
    if args.mode == "best-team":
        return orchestrator.find_best_team(args.project_id, team_size=args.team_size or 0,
                                           required_skills=args.skills)
    if args.mode == "team-recommendations":
        return orchestrator.get_team_recommendations(
            args.project_id, args.skills,
            team_size=args.team_size or DEFAULT_RECOMMENDATION_TEAM_SIZE,
            limit=args.limit or DEFAULT_TEAM_PROPOSAL_LIMIT
        )
    if args.mode == "freelancers":
        return orchestrator.get_freelancer_recommendations(
            args.project_id, args.skills, limit=args.limit or DEFAULT_FREELANCER_LIMIT
        )
    return orchestrator.find_existing_teams(args.project_id, limit=args.limit or EXISTING_TEAM_LIMIT)


def display(mode: str, result) -> None:
    """Print a readable summary of a result"""
    print("\n" + "=" * 80)
    print(mode.replace("-", " ").upper().center(80))
    print("=" * 80 + "\n")

    if mode == "best-team":
        _display_team(result)
    elif mode == "team-recommendations":
        for proposal in result:
            print(f"{proposal.team_id} (coverage {proposal.coverage_label}, "
                  f"average rating {proposal.rounded_average_rating})")
            _display_team(proposal)
    elif mode == "freelancers":
        for i, rec in enumerate(result, 1):
            candidate = rec.candidate
            print(f"{i}. {candidate.name or candidate.id} (Match: {rec.match_percentage}%, "
                  f"Rating: {candidate.rating:.1f})")
            print(f"   Matching skills: {', '.join(rec.matching_skills) or 'None'}")
            for reason in rec.recommendation_reasons:
                print(f"   - {reason}")
            print("-" * 80)
    else:
        for i, team in enumerate(result, 1):
            print(f"{i}. {team.name or team.team_id} (Score: {team.score:.2f})")
            print(f"   Skill match: {team.skill_match_percentage:.0f}%")
            print(f"   Average rating: {team.average_rating:.2f}")
            print(f"   Members: {', '.join(m.name or m.id for m in team.members) or 'None'}")
            print("-" * 80)


def _display_team(team) -> None:
    if not team.members:
        print("No team members selected")
    for i, member in enumerate(team.members, 1):
        candidate = member.candidate
        skills = ", ".join(candidate.skills) if candidate.skills else "No listed skills"
        print(f"{i}. {candidate.name or candidate.id} (Score: {member.score:.1f})")
        print(f"   Rating: {candidate.rating:.1f}, Completed projects: {candidate.completed_project_count}")
        print(f"   Skills: {skills}")
    print(f"\nSkill coverage: {team.match_percentage}%")
    if team.uncovered_skills:
        print(f"Uncovered skills: {', '.join(team.uncovered_skills)}")
    print("-" * 80)


def main(argv=None):
    """Main function"""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    # Check if data source exists
    if not Path(args.data).exists():
        logger.error(f"Data file not found: {args.data}")
        return 1

    try:
        print(f"Loading data from: {args.data}")
        print(f"Project: {args.project_id}")
        print(f"Mode: {args.mode}")

        data_store = PreprocessingAgent().load(args.data)
        orchestrator = MatchingOrchestrator(data_store)

        result = run(args, orchestrator)
        orchestrator.save_results(result, args.output)

        if not args.save_only:
            display(args.mode, result)

        print(f"\nResults saved to {args.output}")
        return 0

    except Exception as e:
        logger.exception(f"Error running team formation engine: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
