"""
Breadth Classifier.

This module buckets a student's courses into the four breadth categories.
It works on subject prefixes only and is independent of the major's rule
tree.
"""

import logging

from ..config import (
    LIST_I_EXCLUSIONS,
    BREADTH_CATEGORIES,
    DEFAULT_BREADTH_NEEDED,
    DEFAULT_BREADTH_UNITS,
)
from ..models import BreadthCategoryStatus, BreadthResult, normalize_code, subject_of

logger = logging.getLogger(__name__)


def countable_courses(course_codes, excluded_subjects) -> list:
    """
    Normalize codes and drop the ones that never count for breadth/depth.

    Two kinds of course are dropped:
    - any course whose subject is in breadth.json's excluded_subjects
    - the Communication List I courses (fixed, not configurable)

    Repeated codes are kept once, in first-seen order.
    """
    kept = []
    for raw in course_codes:
        code = normalize_code(raw)
        if not code:
            continue
        subject = subject_of(code)
        if subject in excluded_subjects:
            logger.debug("Skipping %s (excluded subject)", code)
            continue
        if code in LIST_I_EXCLUSIONS:
            logger.debug("Skipping %s (Communication List I exclusion)", code)
            continue
        if code not in kept:
            kept.append(code)
    return kept


class BreadthClassifier:
    """
    Classifies courses into humanities / social sciences / pure sciences /
    applied sciences.

    OVERLAP RULE:
    -------------
    Some subjects (e.g., PHYS) are listed as both pure and applied science.
    Those courses are held back and handed out afterwards: pure sciences is
    filled to its required count first, then applied sciences. Once both are
    full, extra overlap courses still land in applied sciences. An overlap
    course is never counted in both.

    Humanities and social sciences are counted directly from subject
    membership.
    """

    def __init__(self, breadth_config: dict):
        self.subjects = {
            name: set(breadth_config.get(name, []) or [])
            for name in BREADTH_CATEGORIES
        }
        self.excluded_subjects = set(breadth_config.get("excluded_subjects", []) or [])

        overrides = breadth_config.get("needed", {}) or {}
        self.needed = {
            name: int(overrides.get(name, DEFAULT_BREADTH_NEEDED[name]))
            for name in BREADTH_CATEGORIES
        }

    @property
    def eligible_subjects(self) -> set:
        """Union of all four category subject sets."""
        eligible = set()
        for subjects in self.subjects.values():
            eligible |= subjects
        return eligible

    def classify(self, course_codes) -> BreadthResult:
        """
        Classify a student's courses.

        Args:
            course_codes: Student course codes in any spelling

        Returns:
            BreadthResult with per-category status and a " | "-joined description
        """
        categories = {
            name: BreadthCategoryStatus(
                name=name,
                needed=self.needed[name],
                units=DEFAULT_BREADTH_UNITS[name],
            )
            for name in BREADTH_CATEGORIES
        }
        pure = self.subjects["pure_sciences"]
        applied = self.subjects["applied_sciences"]

        overlap = []
        for code in countable_courses(course_codes, self.excluded_subjects):
            subject = subject_of(code)

            if subject in self.subjects["humanities"]:
                categories["humanities"].taken.append(code)
            if subject in self.subjects["social_sciences"]:
                categories["social_sciences"].taken.append(code)

            if subject in pure and subject in applied:
                overlap.append(code)
            else:
                if subject in pure:
                    categories["pure_sciences"].taken.append(code)
                if subject in applied:
                    categories["applied_sciences"].taken.append(code)

        pure_status = categories["pure_sciences"]
        for code in overlap:
            if len(pure_status.taken) < pure_status.needed:
                pure_status.taken.append(code)
            else:
                categories["applied_sciences"].taken.append(code)

        for status in categories.values():
            status.met = len(status.taken) >= status.needed

        return BreadthResult(
            satisfied=all(s.met for s in categories.values()),
            categories=categories,
            description=" | ".join(s.status for s in categories.values()),
        )
