"""
Evaluation engines.

This package contains all the engines that perform the core business logic
of the degree progress system.
"""

from .range_resolver import CourseRangeResolver
from .breadth import BreadthClassifier
from .depth import DepthAnalyzer
from .requirements import RequirementEvaluator, create_description
from .major_progress import MajorProgressEngine

__all__ = [
    "CourseRangeResolver",
    "BreadthClassifier",
    "DepthAnalyzer",
    "RequirementEvaluator",
    "create_description",
    "MajorProgressEngine",
]
