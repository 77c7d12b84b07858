"""
Data loading and caching.

This module handles loading all required data files with caching to prevent
repeated file I/O across evaluations.
"""

import json
import logging
from pathlib import Path

from ..config import (
    COURSE_DATA_DIR,
    REQUIREMENTS_DIR,
    COURSE_DATA_SUBDIR,
    REQUIREMENTS_SUBDIR,
    CATALOG_FILENAME,
    PREREQS_FILENAME,
    BREADTH_FILENAME,
)
from ..errors import MalformedRule, RuleFileMissing
from ..models import MajorRuleSet
from ..models.requirement import REQUIREMENT_LIST_KEYS
from .catalog import CourseCatalog
from .prereq_graph import build_prereq_graph

logger = logging.getLogger(__name__)


def read_json(path: Path):
    """
    Read one JSON document.

    Raises RuleFileMissing if the file doesn't exist and MalformedRule if
    it isn't valid JSON. Both are fatal for the caller.
    """
    if not path.exists():
        raise RuleFileMissing(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise MalformedRule(f"{path}: {e}") from e


class DataLoader:
    """
    Loads and caches all required data files.

    WHY CACHING: The catalog, breadth config and prerequisite graph never
    change while the process runs. Loading them once lets every request
    share the same read-only objects.

    WHY LAZY LOADING: Properties only load files when first accessed.
    Evaluating a major without a depth requirement never reads prereqs.json.

    DATA SOURCES:
    - course-data/courses.json: course catalog ({code, title} list)
    - course-data/prereqs.json: scraped prerequisites
    - requirements/<major>.json: one rule document per major
    - requirements/breadth.json: breadth subject lists

    Usage:
        loader = DataLoader()
        rules = loader.load_major_rules("computer_science")
        graph = loader.prereq_graph
    """

    def __init__(self, data_dir=None):
        if data_dir is None:
            self.course_data_dir = COURSE_DATA_DIR
            self.requirements_dir = REQUIREMENTS_DIR
        else:
            self.course_data_dir = Path(data_dir) / COURSE_DATA_SUBDIR
            self.requirements_dir = Path(data_dir) / REQUIREMENTS_SUBDIR

        # Private cache variables - None means "not loaded yet"
        self._catalog = None
        self._prereq_graph = None
        self._majors_cache = {}   # Keyed by major id
        self._source_cache = {}   # Keyed by source filename (breadth.json, depth.json, ...)

    @property
    def catalog(self) -> CourseCatalog:
        """Course catalog used for existence checks and range resolution."""
        if self._catalog is None:
            records = read_json(self.course_data_dir / CATALOG_FILENAME)
            self._catalog = CourseCatalog.from_records(records)
            logger.debug("Loaded catalog with %d courses", len(self._catalog))
        return self._catalog

    @property
    def breadth_config(self) -> dict:
        """Subject lists per breadth category plus excluded subjects."""
        return self.load_requirement_source(BREADTH_FILENAME)

    @property
    def prereq_graph(self) -> dict:
        """
        Compact course code -> compact prerequisite codes.

        A missing prereqs.json gives an empty graph: depth Option 2 then
        never succeeds, but nothing else is affected.
        """
        if self._prereq_graph is None:
            path = self.course_data_dir / PREREQS_FILENAME
            try:
                scraped = read_json(path)
            except RuleFileMissing:
                logger.warning("No prerequisite data at %s; prerequisite chains disabled", path)
                scraped = {}
            if not isinstance(scraped, dict):
                raise MalformedRule(f"{path}: expected an object keyed by course code")
            self._prereq_graph = build_prereq_graph(scraped)
        return self._prereq_graph

    def load_requirement_source(self, filename: str) -> dict:
        """
        Load a document named by a rule file's `source` field.

        Args:
            filename: File name inside the requirements folder (e.g., "breadth.json")
        """
        if filename not in self._source_cache:
            if Path(filename).name != filename:
                raise RuleFileMissing(self.requirements_dir / filename)
            data = read_json(self.requirements_dir / filename)
            if not isinstance(data, dict):
                raise MalformedRule(f"{filename}: expected a JSON object")
            self._source_cache[filename] = data
        return self._source_cache[filename]

    def load_major_rules(self, major_id: str) -> MajorRuleSet:
        """
        Load and parse the rule document for a major.

        Args:
            major_id: Rule file name without ".json" (e.g., "computer_science")

        Returns:
            MajorRuleSet, parsed once and cached
        """
        if major_id not in self._majors_cache:
            # major ids come from user input; never let them leave the folder
            if not major_id or Path(major_id).name != major_id:
                raise RuleFileMissing(self.requirements_dir / f"{major_id}.json")
            data = read_json(self.requirements_dir / f"{major_id}.json")
            self._majors_cache[major_id] = MajorRuleSet.parse(major_id, data)
            logger.debug("Loaded rules for %s", major_id)
        return self._majors_cache[major_id]

    def list_available_majors(self) -> list:
        """
        List every major with a rule document.

        Scans the requirements folder and keeps documents that actually hold
        requirement lists (skipping breadth.json and other source files).
        """
        majors = []
        for f in self.requirements_dir.glob("*.json"):
            try:
                data = read_json(f)
            except MalformedRule:
                logger.warning("Skipping unreadable rule file %s", f)
                continue
            if isinstance(data, dict) and any(k in data for k in REQUIREMENT_LIST_KEYS):
                majors.append(f.stem)
        return sorted(majors)
