"""
Terminal Display Implementation.

Console rendering of MajorProgress results. Apart from the CLI's --json
output, nothing else in the ontrack package prints.

A web or PDF front end would replace this class with one exposing the
same method signatures.
"""

from ..models import (
    MajorProgress,
    RequirementResult,
    CommunicationResult,
    BreadthResult,
    DepthResult,
)


class TerminalDisplay:
    """
    Pretty terminal output for evaluation results.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), render templates from MajorProgress.to_dict().

    2. FOR API RESPONSE:
       Skip the display entirely and return MajorProgress.to_dict() as JSON.

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_RED = "\033[41m"

    SECTION_TITLES = {
        "required_courses": "Required Courses",
        "elective_requirement": "Electives",
        "additional_requirement": "Additional Requirements",
    }

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def status_badge(cls, satisfied: bool) -> str:
        """Return a colored status badge."""
        if satisfied:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ COMPLETE {cls.RESET}"
        return f"{cls.BG_RED}{cls.WHITE} ✗ MISSING {cls.RESET}"

    @classmethod
    def _mark(cls, met: bool) -> str:
        return f"{cls.GREEN}✓{cls.RESET}" if met else f"{cls.RED}✗{cls.RESET}"

    @classmethod
    def _codes(cls, courses: list, limit: int = 6) -> str:
        codes = [c.code for c in courses[:limit]]
        text = ", ".join(codes)
        if len(courses) > limit:
            text += f" {cls.DIM}(+{len(courses) - limit} more){cls.RESET}"
        return text

    @classmethod
    def print_unknown_courses(cls, codes: list):
        """Print the error shown when the student entered non-existent courses."""
        cls.print_header("COURSE CHECK: ERROR")
        print(f"\n  {cls.RED}One or more courses you entered do not exist. Please check and try again.{cls.RESET}")
        for code in codes:
            print(f"    • {code}")

    @classmethod
    def print_progress(cls, progress: MajorProgress):
        """Print a complete major progress evaluation."""
        cls.print_header(f"MAJOR PROGRESS: {progress.program.replace('_', ' ').upper()}")
        print(f"\n  {cls.BOLD}Overall Status:{cls.RESET} {cls.status_badge(progress.overall_met)}")

        for key, results in progress.sections.items():
            cls.print_subheader(cls.SECTION_TITLES.get(key, key))
            for i, result in enumerate(results, 1):
                cls._print_requirement(i, result)

        if progress.communication is not None:
            cls.print_communication(progress.communication)
        if progress.breadth is not None:
            cls.print_breadth(progress.breadth)
        if progress.depth is not None:
            cls.print_depth(progress.depth)
        print()

    @classmethod
    def _print_requirement(cls, num: int, result: RequirementResult, indent: str = "  "):
        print(f"\n{indent}{cls._mark(result.met)} {cls.BOLD}{num}. {result.description}{cls.RESET}")
        if result.courses_taken:
            print(f"{indent}   {cls.GREEN}Taken:{cls.RESET} {cls._codes(result.courses_taken)}")
        if result.courses_remaining and not result.met:
            print(f"{indent}   {cls.RED}Remaining:{cls.RESET} {cls._codes(result.courses_remaining)}")

        for i, group in enumerate(result.group_results):
            label = chr(65 + i)
            chosen = f" {cls.GREEN}← satisfies{cls.RESET}" if i == result.satisfied_by_group else ""
            print(f"{indent}   {cls.CYAN}Option {label}:{cls.RESET}{chosen}")
            cls._print_requirement(label, group, indent + "      ")

    @classmethod
    def print_communication(cls, result: CommunicationResult):
        cls.print_subheader("Communication Requirement")
        for name, list_result in result.lists.items():
            title = list_result.description or name
            print(f"\n  {cls.BOLD}{title}{cls.RESET}")
            taken = cls._codes(list_result.courses_taken) or f"{cls.DIM}(none){cls.RESET}"
            print(f"     {cls.GREEN}Taken:{cls.RESET} {taken}")
        for option in result.options:
            print(f"  {cls._mark(option['met'])} {option['description']}")

    @classmethod
    def print_breadth(cls, result: BreadthResult):
        cls.print_subheader("Breadth Requirement")
        print(f"\n  {cls.BOLD}Status:{cls.RESET} {cls.status_badge(result.satisfied)}")
        print(f"\n  {cls.BOLD}{'CATEGORY':<20} {'PROGRESS':<10} {'COURSES'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")
        for name, status in result.categories.items():
            color = cls.GREEN if status.met else (cls.YELLOW if status.taken else cls.RED)
            courses = ", ".join(status.taken) or f"{cls.DIM}(none){cls.RESET}"
            print(f"  {color}{name:<20}{cls.RESET} {status.progress:<10} {courses}")
        if result.note:
            print(f"\n  {cls.DIM}{result.note}{cls.RESET}")

    @classmethod
    def print_depth(cls, result: DepthResult):
        cls.print_subheader("Depth Requirement")
        print(f"\n  {cls.BOLD}Status:{cls.RESET} {cls.status_badge(result.ok)}")
        if result.option == 1:
            print(f"  Option 1: {len(result.courses)} {result.subject} courses ({', '.join(result.courses)})")
        elif result.option == 2:
            print(f"  Option 2: prerequisite chain {' → '.join(result.chain)}")
        else:
            print(f"  {cls.DIM}No subject has 3 courses with one at the 300 level, "
                  f"or a 3-course prerequisite chain.{cls.RESET}")
        if result.note:
            print(f"\n  {cls.DIM}{result.note}{cls.RESET}")

    @classmethod
    def print_majors(cls, majors: list):
        cls.print_header("AVAILABLE MAJORS")
        for major in majors:
            print(f"    • {major}")
        print()
