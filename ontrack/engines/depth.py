"""
Depth Analyzer.

This module decides whether a student's courses show concentration in one
subject.
"""

import logging

from ..config import DEPTH_MIN_COURSES, DEPTH_MIN_LEVEL, DEPTH_CHAIN_LENGTH
from ..models import DepthResult, compact_code, subject_of, level_of
from .breadth import BreadthClassifier, countable_courses

logger = logging.getLogger(__name__)


class DepthAnalyzer:
    """
    Checks the depth requirement two ways.

    OPTION 1 (course count):
        3 or more courses in one subject, at least one at the 300 level.
        The first subject (in the student's order) that qualifies wins.

    OPTION 2 (prerequisite chain):
        3 courses in one subject where each one is a listed prerequisite of
        the one before it, e.g. MATH 237 -> MATH 136 -> MATH 106.
        Tried only when Option 1 found nothing.

    Only breadth-eligible subjects count. A subject that appears in none of
    the breadth lists can't satisfy depth however many courses it has.

    The chain search is greedy: start courses in the student's order,
    prerequisites in the order the graph stores them, first chain found is
    returned. A different input order can give a different valid chain.
    """

    def __init__(self, breadth_config: dict, prereq_graph: dict):
        self.breadth = BreadthClassifier(breadth_config)
        self.graph = prereq_graph

    def analyze(self, course_codes) -> DepthResult:
        """
        Args:
            course_codes: Student course codes in any spelling

        Returns:
            DepthResult(ok=True, option=1|2, ...) or DepthResult(ok=False)
        """
        eligible = self.breadth.eligible_subjects

        by_subject = {}
        for code in countable_courses(course_codes, self.breadth.excluded_subjects):
            by_subject.setdefault(subject_of(code), []).append(code)

        candidates = []
        for subject, courses in by_subject.items():
            if subject not in eligible:
                logger.debug("Skipping subject %s (not breadth-eligible)", subject)
                continue
            candidates.append((subject, courses))

        for subject, courses in candidates:
            if len(courses) >= DEPTH_MIN_COURSES and any(level_of(c) >= DEPTH_MIN_LEVEL for c in courses):
                return DepthResult(ok=True, option=1, subject=subject, courses=list(courses))

        for subject, courses in candidates:
            chain = self._find_chain(courses)
            if chain:
                return DepthResult(ok=True, option=2, subject=subject, chain=chain)

        return DepthResult(ok=False)

    def _find_chain(self, courses: list):
        group = {compact_code(c) for c in courses}

        def dfs(path):
            if len(path) == DEPTH_CHAIN_LENGTH:
                return path
            for pre in self.graph.get(path[-1], []):
                if pre not in group or pre in path:
                    continue
                found = dfs(path + [pre])
                if found:
                    return found
            return None

        for course in courses:
            chain = dfs([compact_code(course)])
            if chain:
                return chain
        return None
