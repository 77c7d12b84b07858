"""
Configuration constants for the degree progress engine.

This module contains all configuration values and constants used throughout
the engine. Centralizing these makes it easy to adjust behavior as program
policies change.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location, or ONTRACK_DATA_DIR)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = Path(os.getenv("ONTRACK_DATA_DIR", str(BASE_DIR / "data")))

# Sub-folder names are kept relative so DataLoader can re-root them
COURSE_DATA_SUBDIR = "course-data"
REQUIREMENTS_SUBDIR = "requirements"

CATALOG_FILENAME = "courses.json"
PREREQS_FILENAME = "prereqs.json"
COURSE_LINKS_FILENAME = "course-links.json"
BREADTH_FILENAME = "breadth.json"

COURSE_DATA_DIR = DATA_DIR / COURSE_DATA_SUBDIR
REQUIREMENTS_DIR = DATA_DIR / REQUIREMENTS_SUBDIR


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.getenv("ONTRACK_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# =============================================================================
# BREADTH / DEPTH POLICY
# =============================================================================

# Communication List I courses never count toward breadth or depth,
# whatever breadth.json says. This list is fixed by the faculty, not the
# per-program rule files.
LIST_I_EXCLUSIONS = frozenset({
    "COMMST 100",
    "COMMST 223",
    "ENGL 109",
    "ENGL 129R",
    "EMLS 129R",
    "EMLS 101R",
    "EMLS 102R",
})

# Order matters: it is the order categories are reported in
BREADTH_CATEGORIES = (
    "humanities",
    "social_sciences",
    "pure_sciences",
    "applied_sciences",
)

# Course counts needed per category (breadth.json may override under "needed")
DEFAULT_BREADTH_NEEDED = {
    "humanities": 2,
    "social_sciences": 2,
    "pure_sciences": 1,
    "applied_sciences": 1,
}

# Unit weights, reported alongside each category
DEFAULT_BREADTH_UNITS = {
    "humanities": 1.0,
    "social_sciences": 1.0,
    "pure_sciences": 0.5,
    "applied_sciences": 0.5,
}

# Depth Option 1: N courses in one subject, at least one at this level or above
DEPTH_MIN_COURSES = 3
DEPTH_MIN_LEVEL = 300

# Depth Option 2: a prerequisite chain of this many distinct courses
DEPTH_CHAIN_LENGTH = 3

BREADTH_NOTE = (
    "Breadth is checked against subject lists only. "
    "Confirm course eligibility with an academic advisor."
)
DEPTH_NOTE = (
    "Depth is estimated from subject counts and scraped prerequisites. "
    "Confirm with an academic advisor before relying on it."
)


# =============================================================================
# SCRAPING
# =============================================================================

SCRAPER_USER_AGENT = "OnTrackScraper/1.0 (+edu noncommercial)"
SCRAPER_TIMEOUT = 30
