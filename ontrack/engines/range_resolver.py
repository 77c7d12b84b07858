"""
Course Range Resolver.

This module expands the abstract course selectors found in rule files into
concrete catalog courses.
"""

import logging
import re

from ..models import Course, compact_code, subject_of, level_of
from ..data import CourseCatalog

logger = logging.getLogger(__name__)

_RANGE_START_RE = re.compile(r"^([A-Z]+)\s*(\d+)")
_DIGITS_RE = re.compile(r"\d+")
_LEVEL_RE = re.compile(r"^([A-Z]+)(\d?)$")


class CourseRangeResolver:
    """
    Expands course selectors into an ordered, deduplicated course list.

    SELECTORS:
    ----------
    range:           "MATH135-MATH138"  codes starting with MATH, numbered 135..138
                                        ("CS100-CS199" also takes CSE 100)
                     "MATH135-138"      same (end prefix is optional)
                     "CS245"            exactly that course
    level_ranges:    "AFM3"             AFM 300..399
                     "CS"               any CS course
    patterns:        same meaning as level_ranges (older rule files)
    category_ranges: "CO"               any CO course, but not COMM/COOP

    ORDERING:
    ---------
    Matches are collected range -> level/pattern -> category -> explicit
    courses, each in catalog order. The first occurrence of a code wins and
    excluded codes are dropped last.

    Tokens that don't fit the expected shape are skipped, not raised: rule
    authors often leave placeholder or half-filled fields.
    """

    def __init__(self, catalog: CourseCatalog):
        self.catalog = catalog

    def resolve(self, requirement, excluded_codes=()) -> list:
        """
        Resolve every course selector on a requirement.

        Args:
            requirement: Requirement with range/level_ranges/patterns/
                category_ranges/courses fields
            excluded_codes: Codes (any spelling) that must never be returned

        Returns:
            List of Course, deduplicated, in deterministic order
        """
        matches = []
        for token in requirement.range:
            matches.extend(self._match_range(token))
        for token in list(requirement.level_ranges) + list(requirement.patterns):
            matches.extend(self._match_level(token))
        for token in requirement.category_ranges:
            matches.extend(self._match_category(token))
        matches.extend(requirement.courses)

        return dedupe_courses(matches, excluded_codes)

    def _match_range(self, token: str) -> list:
        token = token.upper().strip()
        if "-" not in token:
            course = self.catalog.get(token)
            if course is None:
                logger.debug("Range entry %r is not a catalog course; ignored", token)
                return []
            return [course]

        start, _, end = token.partition("-")
        m = _RANGE_START_RE.match(start.strip())
        end_num = _DIGITS_RE.search(end)
        if not m or not end_num:
            logger.debug("Unresolvable range %r; ignored", token)
            return []

        prefix = m.group(1)
        low, high = int(m.group(2)), int(end_num.group(0))
        return [
            c for c in self.catalog
            if c.key.startswith(prefix) and low <= level_of(c.code) <= high
        ]

    def _match_level(self, token: str) -> list:
        m = _LEVEL_RE.match(compact_code(token))
        if not m:
            logger.debug("Unresolvable level range %r; ignored", token)
            return []

        prefix, digit = m.group(1), m.group(2)
        if not digit:
            return [c for c in self.catalog if subject_of(c.code) == prefix]

        low = int(digit) * 100
        high = low + 99
        return [
            c for c in self.catalog
            if subject_of(c.code) == prefix and low <= level_of(c.code) <= high
        ]

    def _match_category(self, token: str) -> list:
        prefix = compact_code(token)
        if not prefix.isalpha():
            logger.debug("Unresolvable category range %r; ignored", token)
            return []
        # "CS" must not pick up "CSE 100": a digit has to follow the prefix
        return [
            c for c in self.catalog
            if c.key.startswith(prefix) and c.key[len(prefix):len(prefix) + 1].isdigit()
        ]


def dedupe_courses(courses, excluded_codes=()) -> list:
    """Drop repeated and excluded codes, keeping the first occurrence."""
    excluded = {compact_code(c) for c in excluded_codes}
    seen = set()
    unique = []
    for course in courses:
        key = course.key
        if key in seen or key in excluded:
            continue
        seen.add(key)
        unique.append(course)
    return unique


def course_for_code(catalog: CourseCatalog, code: str) -> Course:
    """Catalog entry for a code, or a title-less Course if it isn't listed."""
    return catalog.get(code) or Course(code=code.upper().strip())
