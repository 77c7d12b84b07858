"""
OnTrack Degree Progress Package
===============================

Checks a student's completed courses against a university major's
graduation requirements.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                           ENGINE LAYER                                   │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐  │
│  │ DataLoader  │  │ CourseCatalog   │  │ CourseRangeResolver         │  │
│  │  (I/O)      │  │ PrereqGraph     │  │ (rule course selectors)     │  │
│  └─────────────┘  └─────────────────┘  └─────────────────────────────┘  │
│                                                                         │
│  ┌────────────────────┐ ┌──────────────────┐ ┌───────────────────────┐  │
│  │ BreadthClassifier  │ │ DepthAnalyzer    │ │ RequirementEvaluator  │  │
│  │ (4 categories)     │ │ (count / chain)  │ │ (recursive rule tree) │  │
│  └────────────────────┘ └──────────────────┘ └───────────────────────┘  │
│                                                                         │
│                       MajorProgressEngine                               │
│            (walks one major's rule document top-down)                   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│  TerminalDisplay (console tables) / MajorProgress.to_dict() (JSON)     │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                       ProgressAdvisor                                    │
│          (Orchestrator - connects engine to presentation)               │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

ontrack/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── errors.py            # Exception hierarchy
├── advisor.py           # ProgressAdvisor orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── course.py        # Course + code normalization helpers
│   ├── requirement.py   # RequirementType, Requirement, MajorRuleSet
│   └── audit.py         # RequirementResult, BreadthResult, DepthResult, ...
│
├── data/                # Data loading
│   ├── loader.py        # DataLoader
│   ├── catalog.py       # CourseCatalog
│   └── prereq_graph.py  # build_prereq_graph, extract_course_codes
│
├── engines/             # Evaluation engines
│   ├── range_resolver.py
│   ├── breadth.py
│   ├── depth.py
│   ├── requirements.py
│   └── major_progress.py
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from ontrack import ProgressAdvisor

    advisor = ProgressAdvisor()
    progress = advisor.check("computer_science", "CS 135, CS 136, MATH 135")
    print(progress.to_dict())

Running from command line:

    python -m ontrack --major computer_science --courses "CS 135, CS 136"

"""

# Version
__version__ = "2.0.0"

# Main exports
from .advisor import ProgressAdvisor, parse_course_list
from .cli import main

# Model exports (for programmatic use)
from .models import (
    Course,
    RequirementType,
    Requirement,
    MajorRuleSet,
    RequirementResult,
    CommunicationResult,
    BreadthResult,
    DepthResult,
    MajorProgress,
    normalize_code,
    compact_code,
)

# Engine exports (for advanced use)
from .engines import (
    CourseRangeResolver,
    BreadthClassifier,
    DepthAnalyzer,
    RequirementEvaluator,
    MajorProgressEngine,
)

# Data exports
from .data import DataLoader, CourseCatalog, build_prereq_graph

# Errors
from .errors import OnTrackError, CourseNotFound, RuleFileMissing, MalformedRule

# UI exports
from .ui import TerminalDisplay

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "ProgressAdvisor",
    "parse_course_list",
    "main",
    # Models
    "Course",
    "RequirementType",
    "Requirement",
    "MajorRuleSet",
    "RequirementResult",
    "CommunicationResult",
    "BreadthResult",
    "DepthResult",
    "MajorProgress",
    "normalize_code",
    "compact_code",
    # Engines
    "CourseRangeResolver",
    "BreadthClassifier",
    "DepthAnalyzer",
    "RequirementEvaluator",
    "MajorProgressEngine",
    # Data
    "DataLoader",
    "CourseCatalog",
    "build_prereq_graph",
    # Errors
    "OnTrackError",
    "CourseNotFound",
    "RuleFileMissing",
    "MalformedRule",
    # UI
    "TerminalDisplay",
]
