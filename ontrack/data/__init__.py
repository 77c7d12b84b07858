"""
Data loading module.

This package handles all file I/O: the catalog, rule documents, breadth
configuration and the prerequisite graph.
"""

from .catalog import CourseCatalog
from .loader import DataLoader, read_json
from .prereq_graph import build_prereq_graph, extract_course_codes

__all__ = [
    "CourseCatalog",
    "DataLoader",
    "read_json",
    "build_prereq_graph",
    "extract_course_codes",
]
