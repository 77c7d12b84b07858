"""
Major Progress Engine.

This module handles evaluating a student against one major's complete rule
document: the requirement lists plus the communication, breadth and depth
requirements.
"""

import logging

from ..config import BREADTH_NOTE, DEPTH_NOTE
from ..models import (
    CommunicationListResult,
    CommunicationResult,
    MajorProgress,
    compact_code,
)
from ..models.requirement import (
    REQUIREMENT_LIST_KEYS,
    COMMUNICATION_KEY,
    BREADTH_KEY,
    DEPTH_KEY,
)
from ..data import DataLoader
from .breadth import BreadthClassifier
from .depth import DepthAnalyzer
from .range_resolver import dedupe_courses
from .requirements import RequirementEvaluator

logger = logging.getLogger(__name__)

_BREADTH_CONFIG_KEYS = ("humanities", "social_sciences", "pure_sciences", "applied_sciences")


class MajorProgressEngine:
    """
    Evaluates a student's course list against a major's rule document.

    WALK ORDER:
    -----------
    Top-level keys are processed in the order the rule document lists them.
    required_courses, elective_requirement and additional_requirement go
    through the RequirementEvaluator and share ONE consumed set, so a course
    credited to a required course can't also fill an elective slot.

    The communication, breadth and depth keys have their own handlers:
    - communication: per-list taken/remaining plus count options
    - breadth: BreadthClassifier over the whole course list
    - depth: DepthAnalyzer over the whole course list

    EXCLUSIONS:
    -----------
    The major's excluded_courses are stripped from every candidate list and
    from the course list given to breadth/depth, for this major only.

    Every call starts from a fresh consumed set, so evaluating the same
    input twice gives the same result.
    """

    def __init__(self, data_loader: DataLoader):
        self.loader = data_loader

    def evaluate(self, major_id: str, student_courses) -> MajorProgress:
        """
        Evaluate a student against a major.

        Args:
            major_id: Rule file name without ".json"
            student_courses: Course codes, already split and uppercased

        Returns:
            MajorProgress with one entry per top-level key of the rule file
        """
        rules = self.loader.load_major_rules(major_id)
        excluded = rules.excluded_codes
        courses = [c for c in student_courses if compact_code(c) not in excluded]

        evaluator = RequirementEvaluator(self.loader.catalog)
        consumed = set()
        progress = MajorProgress(program=major_id)

        for key in rules.order:
            if key in REQUIREMENT_LIST_KEYS:
                progress.sections[key] = evaluator.evaluate(
                    rules.sections[key], courses, consumed, excluded
                )
            elif key == COMMUNICATION_KEY:
                progress.communication = self.evaluate_communication(
                    rules.communication, courses, excluded
                )
            elif key == BREADTH_KEY:
                progress.breadth = self.evaluate_breadth(rules.breadth_source, courses)
            elif key == DEPTH_KEY:
                progress.depth = self.evaluate_depth(rules.depth_source, courses)

        logger.debug("Evaluated %s: %d course(s) credited", major_id, len(consumed))
        return progress

    def evaluate_communication(self, rule, student_courses, excluded_codes=()) -> CommunicationResult:
        """
        Check each named communication list, then each option.

        An option holds when every (list, count) pair it requires has at
        least `count` courses taken from that list.
        """
        student = {compact_code(c) for c in student_courses}
        lists = {}
        for name, comm_list in rule.lists.items():
            valid = dedupe_courses(comm_list.courses, excluded_codes)
            lists[name] = CommunicationListResult(
                description=comm_list.description,
                courses_taken=[c for c in valid if c.key in student],
                courses_remaining=[c for c in valid if c.key not in student],
            )

        options = []
        for option in rule.options:
            met = all(len(lists[list_name].courses_taken) >= count for list_name, count in option.requires)
            options.append({"description": option.description, "met": met})

        return CommunicationResult(lists=lists, options=options)

    def _breadth_config(self, source) -> dict:
        """
        Breadth subject lists for a major.

        The source document replaces breadth.json when it carries its own
        category lists; a description-only source falls back to breadth.json.
        """
        if source:
            data = self.loader.load_requirement_source(source)
            if any(k in data for k in _BREADTH_CONFIG_KEYS):
                return data
        return self.loader.breadth_config

    def _note(self, source, default: str) -> str:
        if source:
            data = self.loader.load_requirement_source(source)
            if data.get("description"):
                return f"{data['description']} {default}"
        return default

    def evaluate_breadth(self, source, student_courses):
        result = BreadthClassifier(self._breadth_config(source)).classify(student_courses)
        result.note = self._note(source, BREADTH_NOTE)
        return result

    def evaluate_depth(self, source, student_courses):
        analyzer = DepthAnalyzer(self._breadth_config(source), self.loader.prereq_graph)
        result = analyzer.analyze(student_courses)
        result.note = self._note(source, DEPTH_NOTE)
        return result
