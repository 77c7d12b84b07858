"""
Command-Line Interface for the degree progress engine.

Checks a comma-separated course list against one major's requirements.
Anything not given on the command line is asked for interactively.

    python -m ontrack --major computer_science --courses "CS 135, CS 136"
    python -m ontrack --list-majors
    python -m ontrack                      # prompts for major and courses
"""

import argparse
import json
import logging
import sys

from .config import LOG_LEVEL, LOG_FORMAT
from .advisor import ProgressAdvisor
from .errors import CourseNotFound, OnTrackError
from .ui import TerminalDisplay


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ontrack",
        description="Check a course list against a major's graduation requirements",
    )
    parser.add_argument("--major", help="Major id (rule file name without .json)")
    parser.add_argument("--courses", help='Comma-separated course list, e.g. "MATH 135, CS 136"')
    parser.add_argument("--data-dir", help="Data folder (default: ONTRACK_DATA_DIR or ./data)")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON instead of tables")
    parser.add_argument("--list-majors", action="store_true", help="List available majors and exit")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _prompt(label: str, default: str = "") -> str:
    try:
        value = input(f"{TerminalDisplay.BOLD}{label}{TerminalDisplay.RESET}").strip()
    except EOFError:
        value = ""
    return value or default


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else LOG_LEVEL,
        format=LOG_FORMAT,
    )

    advisor = ProgressAdvisor(data_dir=args.data_dir)

    try:
        if args.list_majors:
            TerminalDisplay.print_majors(advisor.list_majors())
            return 0

        major = args.major
        if not major:
            majors = advisor.list_majors()
            TerminalDisplay.print_majors(majors)
            major = _prompt("Major: ", majors[0] if majors else "")
        courses = args.courses if args.courses is not None else _prompt("Courses (comma-separated): ")

        if args.json:
            progress = advisor.check(major, courses)
            print(json.dumps(progress.to_dict(), indent=2))
            return 0

        return 0 if advisor.run(major, courses) is not None else 1

    except CourseNotFound as e:
        # only reachable in --json mode; run() prints its own message
        print(json.dumps({"error": str(e), "unknown_courses": e.codes}, indent=2))
        return 1
    except OnTrackError as e:
        print(f"{TerminalDisplay.RED}Error: {e}{TerminalDisplay.RESET}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
