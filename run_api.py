#!/usr/bin/env python3
"""
Start the team formation API with uvicorn.

The data source and log file are passed to the app through the same
environment variables settings.py reads, so they also reach reload workers.
"""

import argparse
import logging
import os

import uvicorn


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the Team Formation API")
    parser.add_argument("--host", type=str, default="127.0.0.1",
                        help="Interface to listen on (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000,
                        help="Port to listen on (default: 8000)")
    parser.add_argument("--data", type=str, default=None,
                        help="JSON data file or CSV directory to serve matches from")
    parser.add_argument("--log-file", type=str, default=None,
                        help="File the API writes its log to")
    parser.add_argument("--reload", action="store_true",
                        help="Restart the server when source files change")
    parser.add_argument("--log-level", type=str, default="info",
                        choices=["debug", "info", "warning", "error", "critical"],
                        help="Log level (default: info)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if args.data:
        os.environ["TEAM_FORMATION_DATA_PATH"] = os.path.abspath(args.data)
    if args.log_file:
        os.environ["TEAM_FORMATION_LOG_FILE"] = args.log_file
    os.environ["TEAM_FORMATION_LOG_LEVEL"] = args.log_level.upper()

    logging.basicConfig(level=getattr(logging, args.log_level.upper()))

    print(f"Serving matches from {os.environ.get('TEAM_FORMATION_DATA_PATH', 'the default data file')}")
    print(f"Team Formation API listening on http://{args.host}:{args.port} (docs at /docs)")

    uvicorn.run(
        "team_formation.api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level
    )


if __name__ == "__main__":
    main()
