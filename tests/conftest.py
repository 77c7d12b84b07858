"""
Shared fixtures: a small catalog, breadth config and prerequisite graph,
plus a throwaway data folder laid out the way DataLoader expects.
"""

import json

import pytest

from ontrack.data import CourseCatalog, DataLoader
from ontrack.models import Course


CATALOG_CODES = [
    ("CS 135", "Designing Functional Programs"),
    ("CS 136", "Elementary Algorithm Design"),
    ("CS 136L", "Tools and Techniques"),
    ("CS 145", "Designing Functional Programs (Advanced)"),
    ("CS 146", "Elementary Algorithm Design (Advanced)"),
    ("CS 240", "Data Structures"),
    ("CS 241", "Sequential Programs"),
    ("CS 341", "Algorithms"),
    ("CS 350", "Operating Systems"),
    ("CS 486", "Artificial Intelligence"),
    ("CSE 100", "Computing for Science"),
    ("CO 250", "Optimization"),
    ("CO 342", "Graph Theory"),
    ("COMM 101", "Business Communication"),
    ("MATH 106", "Applied Linear Algebra"),
    ("MATH 135", "Algebra"),
    ("MATH 136", "Linear Algebra 1"),
    ("MATH 137", "Calculus 1"),
    ("MATH 138", "Calculus 2"),
    ("MATH 237", "Calculus 3"),
    ("MATH 239", "Combinatorics"),
    ("STAT 230", "Probability"),
    ("STAT 231", "Statistics"),
    ("AFM 101", "Financial Accounting"),
    ("AFM 301", "Corporate Finance"),
    ("AFM 341", "Accounting Information Systems"),
    ("AFM 401", "Advanced Accounting"),
    ("ECON 101", "Microeconomics"),
    ("ECON 102", "Macroeconomics"),
    ("PHIL 145", "Critical Thinking"),
    ("HIST 110", "Global History"),
    ("ENGL 109", "Academic Writing"),
    ("ENGL 210E", "Technical Communication"),
    ("COMMST 100", "Interpersonal Communication"),
    ("PHYS 121", "Mechanics"),
    ("PHYS 122", "Waves"),
    ("BIOL 130", "Cell Biology"),
]

BREADTH_CONFIG = {
    "humanities": ["PHIL", "HIST", "ENGL", "COMMST"],
    "social_sciences": ["ECON", "AFM"],
    "pure_sciences": ["BIOL", "PHYS"],
    "applied_sciences": ["PHYS"],
    "excluded_subjects": ["CS", "MATH", "STAT", "CO"],
}

PREREQS = {
    "MATH 237": {"prereq_text": "Prereq: MATH 136", "prereq_codes": ["MATH 136"]},
    "MATH 136": {"prereq_text": "Prereq: MATH 106", "prereq_codes": ["MATH 106"]},
    "PHYS 122": {"prereq_text": "Prereq: PHYS 121", "prereq_codes": ["PHYS 121"]},
}


@pytest.fixture
def catalog():
    return CourseCatalog([Course(code, title) for code, title in CATALOG_CODES])


@pytest.fixture
def breadth_config():
    return json.loads(json.dumps(BREADTH_CONFIG))


@pytest.fixture
def prereq_graph():
    return {"MATH237": ["MATH136"], "MATH136": ["MATH106"], "PHYS122": ["PHYS121"]}


def _course(code):
    return {"code": code}


SAMPLE_MAJOR = {
    "program": "Sample Major",
    "excluded_courses": [{"code": "CS 136L"}, {"code": "AFM 401"}],
    "required_courses": [
        {
            "type": "one_group_required",
            "groups": [
                {"type": "all_required", "courses": [_course("CS 135"), _course("CS 136")]},
                {"type": "all_required", "courses": [_course("CS 145"), _course("CS 146")]},
            ],
        },
        {"type": "all_required", "courses": [_course("MATH 135"), _course("MATH 136")]},
        {"type": "one_required", "courses": [_course("STAT 230"), _course("STAT 231")]},
    ],
    "elective_requirement": [
        {"type": "range_required", "count": 2, "level_ranges": ["CS3", "CS4"]},
        {"type": "range_required", "count": 1, "level_ranges": ["AFM"]},
        {"type": "n_required", "count": 1, "range": ["MATH135-MATH239"]},
    ],
    "communication_requirement": {
        "list1": {"description": "List I", "courses": [_course("COMMST 100"), _course("ENGL 109")]},
        "list2": {"description": "List II", "courses": [_course("ENGL 210E")]},
        "options": [
            {"description": "Two from List I", "requires": [{"list": "list1", "count": 2}]},
            {
                "description": "One from each list",
                "requires": [{"list": "list1", "count": 1}, {"list": "list2", "count": 1}],
            },
        ],
    },
    "breadth_requirement": {"source": "breadth.json"},
    "depth_requirement": {"source": "depth.json"},
}


@pytest.fixture
def data_dir(tmp_path):
    """A complete data folder: catalog, prereqs, breadth, depth and one major."""
    course_dir = tmp_path / "course-data"
    req_dir = tmp_path / "requirements"
    course_dir.mkdir()
    req_dir.mkdir()

    catalog_records = [{"code": code, "title": title} for code, title in CATALOG_CODES]
    (course_dir / "courses.json").write_text(json.dumps(catalog_records))
    (course_dir / "prereqs.json").write_text(json.dumps(PREREQS))
    (req_dir / "breadth.json").write_text(json.dumps(BREADTH_CONFIG))
    (req_dir / "depth.json").write_text(json.dumps({"description": "Depth in one subject."}))
    (req_dir / "sample_major.json").write_text(json.dumps(SAMPLE_MAJOR))
    return tmp_path


@pytest.fixture
def loader(data_dir):
    return DataLoader(data_dir)
