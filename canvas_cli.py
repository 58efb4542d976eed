"""Command-line entry point for querying Canvas courses and assignments over GraphQL."""

import argparse
import logging
import sys
from typing import List, Optional

from canvas_api import CanvasAPIError, CanvasGraphQLClient, __version__
from config import CANVAS_GRAPHQL_URL, CANVAS_ACTIVE_TERM, LOG_LEVEL
from constants import EXIT_OK, EXIT_FAILURE, EXIT_INTERRUPTED
from services.canvas_service import FilterOptions, list_assignments, list_courses

logger = logging.getLogger("canvasgraphql")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="canvasgraphql", description="Canvas GraphQL application")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-t", "--token", required=True, help="Canvas API Token")
    parser.add_argument("--endpoint", default=CANVAS_GRAPHQL_URL,
                        help="Canvas GraphQL endpoint (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log more details to stderr (repeat for debug output)")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    courses = subparsers.add_parser("list-courses", help="Lists courses")
    courses.add_argument("--active", action="store_true", help="List only active courses")
    courses.add_argument("--no-active", action="store_true", help="List non active courses")

    assignments = subparsers.add_parser("list-assignments", help="Lists assignments for a given course")
    assignments.add_argument("course_name", metavar="COURSE_NAME", help="Course name")
    assignments.add_argument("--active", action="store_true", help="List only active assignments")
    assignments.add_argument("--no-active", action="store_true", help="List non active assignments")

    return parser


def configure_logging(verbosity: int) -> None:
    level = logging.getLevelName(LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = min(level, logging.INFO)
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run_command(args: argparse.Namespace) -> List[str]:
    client = CanvasGraphQLClient(args.token, args.endpoint)
    options = FilterOptions(active=args.active, no_active=args.no_active, active_term=CANVAS_ACTIVE_TERM)

    if args.command == "list-courses":
        return list_courses(client, options)
    return list_assignments(client, args.course_name, options)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        lines = run_command(args)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return EXIT_FAILURE
    except CanvasAPIError as e:
        logger.error("Unable to complete %s: %s", args.command, e)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED

    for line in lines:
        print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
