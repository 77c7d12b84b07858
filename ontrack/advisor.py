"""
Progress Advisor - Main Orchestrator.

This module contains the ProgressAdvisor class that connects the
engine layer to the presentation layer.
"""

from .data import DataLoader
from .engines import MajorProgressEngine
from .errors import CourseNotFound
from .ui import TerminalDisplay


def parse_course_list(text: str) -> list:
    """
    Split a free-text, comma-separated course list.

    Each entry is trimmed and uppercased; empty entries are dropped.
    "math 135, cs 136 ,," -> ["MATH 135", "CS 136"]
    """
    if not text:
        return []
    return [part.strip().upper() for part in text.split(",") if part.strip()]


class ProgressAdvisor:
    """
    Main interface for the degree progress system.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    This class connects the engine layer to the presentation layer:

    1. Receives user input (major id, free-text course list)
    2. Checks every course exists in the catalog
    3. Calls MajorProgressEngine to get the evaluation (pure data)
    4. Passes that data to the display

    For a web front end, call check() and render progress.to_dict().

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        advisor = ProgressAdvisor()
        progress = advisor.check("computer_science", "CS 135, CS 136, MATH 135")
        advisor.run("computer_science", "CS 135, CS 136, MATH 135")
    """

    def __init__(self, data_dir=None, display=None):
        # Shared loader: catalog, breadth config and graph are loaded once
        self.loader = DataLoader(data_dir)
        self.engine = MajorProgressEngine(self.loader)
        self.display = display or TerminalDisplay()

    def check(self, major_id: str, course_text: str):
        """
        Evaluate a free-text course list against a major.

        Raises:
            CourseNotFound: some entered course isn't in the catalog
            RuleFileMissing / MalformedRule: the major's data can't be loaded
        """
        courses = parse_course_list(course_text)
        self.loader.catalog.require_all(courses)
        return self.engine.evaluate(major_id, courses)

    def run(self, major_id: str, course_text: str):
        """
        Evaluate and print. Unknown courses are reported instead of evaluated.

        Returns:
            MajorProgress, or None when the course list had unknown codes
        """
        try:
            progress = self.check(major_id, course_text)
        except CourseNotFound as e:
            self.display.print_unknown_courses(e.codes)
            return None
        self.display.print_progress(progress)
        return progress

    def list_majors(self) -> list:
        """List all majors with rule documents."""
        return self.loader.list_available_majors()
