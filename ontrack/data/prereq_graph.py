"""
Prerequisite graph builder.

Turns the scraped prereqs.json document

    {"MATH 237": {"prereq_text": "...", "prereq_codes": ["MATH 136"], ...}}

into an adjacency mapping keyed by compact codes:

    {"MATH237": ["MATH136"]}

Courses that were never scraped simply have no entry. Callers must treat a
missing entry as "no known prerequisites".
"""

import logging
import re

from ..models import compact_code, normalize_code

logger = logging.getLogger(__name__)

_PREREQ_CODE_RE = re.compile(r"\b([A-Z]{2,5})\s*([0-9]{2,3}[A-Z]?)\b")


def extract_course_codes(text: str, exclude: str = None) -> list:
    """
    Pull course codes out of free prerequisite text.

    "Prereq: MATH 136 or MATH146; Not open to CS students" -> ["MATH 136", "MATH 146"]

    Codes come back normalized, deduplicated, in order of first mention.
    `exclude` drops a self-reference (pages often repeat their own code).
    """
    if not text:
        return []
    skip = compact_code(exclude) if exclude else None
    codes = []
    seen = set()
    for m in _PREREQ_CODE_RE.finditer(text.upper()):
        code = normalize_code(f"{m.group(1)} {m.group(2)}")
        key = compact_code(code)
        if key == skip or key in seen:
            continue
        seen.add(key)
        codes.append(code)
    return codes


def build_prereq_graph(scraped: dict) -> dict:
    """
    Build course -> [prerequisite] adjacency from a scrape result.

    Uses `prereq_codes` when the scraper recorded them and falls back to
    extracting codes from `prereq_text` otherwise.
    """
    graph = {}
    for raw_code, entry in (scraped or {}).items():
        code = compact_code(raw_code)
        if not code:
            continue
        if not isinstance(entry, dict):
            logger.debug("Skipping prerequisite entry for %s: not an object", raw_code)
            continue

        codes = entry.get("prereq_codes")
        if codes is None:
            codes = extract_course_codes(entry.get("prereq_text", ""), exclude=raw_code)

        prereqs = []
        for pre in codes:
            key = compact_code(pre)
            if key and key != code and key not in prereqs:
                prereqs.append(key)
        graph[code] = prereqs

    logger.debug("Prerequisite graph built with %d courses", len(graph))
    return graph
