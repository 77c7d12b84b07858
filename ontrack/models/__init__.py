"""
Data models for the degree progress engine.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import Course, normalize_code, compact_code, subject_of, level_of
from .requirement import (
    RequirementType,
    Requirement,
    CommunicationList,
    CommunicationOption,
    CommunicationRule,
    MajorRuleSet,
)
from .audit import (
    RequirementResult,
    CommunicationListResult,
    CommunicationResult,
    BreadthCategoryStatus,
    BreadthResult,
    DepthResult,
    MajorProgress,
)

__all__ = [
    # Course model + code helpers
    "Course",
    "normalize_code",
    "compact_code",
    "subject_of",
    "level_of",
    # Rule models
    "RequirementType",
    "Requirement",
    "CommunicationList",
    "CommunicationOption",
    "CommunicationRule",
    "MajorRuleSet",
    # Results
    "RequirementResult",
    "CommunicationListResult",
    "CommunicationResult",
    "BreadthCategoryStatus",
    "BreadthResult",
    "DepthResult",
    "MajorProgress",
]
