"""
Requirement rule models.

A major's rule document is a JSON tree. This module turns it into typed
values once, up front, so the evaluator never has to probe raw dicts:

    RequirementType    closed set of requirement tags
    Requirement        one node of the rule tree
    CommunicationList  a named course list of the communication requirement
    CommunicationOption a way of satisfying the communication requirement
    CommunicationRule  lists + options
    MajorRuleSet       the whole document for one major

Anything with an unknown tag or a wrongly-typed field raises MalformedRule
here, before any evaluation starts.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..errors import MalformedRule
from .course import Course


class RequirementType(Enum):
    """
    Requirement tags used in the rule files.

    ALL_REQUIRED:       every listed course
    ONE_REQUIRED:       any one listed course
    RANGE_REQUIRED:     `count` courses from range/level/category selectors
    N_REQUIRED:         `count` courses from selectors, optionally including `required`
    ONE_GROUP_REQUIRED: any one of the nested `groups`
    LIST1_REQUIRED:     two courses from communication List I (older rule files)
    LIST1_LIST2:        every nested requirement met (older rule files)
    """
    ALL_REQUIRED = "all_required"
    ONE_REQUIRED = "one_required"
    RANGE_REQUIRED = "range_required"
    N_REQUIRED = "n_required"
    ONE_GROUP_REQUIRED = "one_group_required"
    LIST1_REQUIRED = "list1_required"
    LIST1_LIST2 = "list1+list2_required"

    @property
    def count_bounded(self) -> bool:
        return self in (RequirementType.RANGE_REQUIRED, RequirementType.N_REQUIRED)


# Top-level keys of a major document that hold requirement lists,
# in the order they are normally written
REQUIREMENT_LIST_KEYS = ("required_courses", "elective_requirement", "additional_requirement")
COMMUNICATION_KEY = "communication_requirement"
BREADTH_KEY = "breadth_requirement"
DEPTH_KEY = "depth_requirement"


def _string_list(data: dict, key: str, where: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise MalformedRule(f"{where}: '{key}' must be a list of strings")
    return [v.strip() for v in value]


def _course_list(data: dict, key: str, where: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedRule(f"{where}: '{key}' must be a list of courses")
    courses = []
    for entry in value:
        if not isinstance(entry, (dict, str)):
            raise MalformedRule(f"{where}: bad course entry {entry!r}")
        course = Course.from_dict(entry)
        if not course.code:
            raise MalformedRule(f"{where}: course entry without a code")
        courses.append(course)
    return courses


@dataclass
class Requirement:
    """
    One node of a major's rule tree.

    Only the fields meaningful for `type` are populated; the rest keep
    their empty defaults.
    """
    type: RequirementType
    description: Optional[str] = None
    courses: list = field(default_factory=list)        # Course objects
    count: Optional[int] = None
    required: list = field(default_factory=list)       # course codes
    range: list = field(default_factory=list)          # "MATH135-MATH138", "CS245"
    level_ranges: list = field(default_factory=list)   # "AFM3", "CS"
    category_ranges: list = field(default_factory=list)  # "CO"
    patterns: list = field(default_factory=list)       # same meaning as level_ranges
    groups: list = field(default_factory=list)         # nested Requirement (one_group_required)
    requirements: list = field(default_factory=list)   # nested Requirement (list1+list2_required)

    @property
    def min_count(self) -> int:
        """How many courses a count-bounded requirement needs (defaults to 1)."""
        return self.count if self.count is not None else 1

    @classmethod
    def parse(cls, data, where: str = "requirement") -> "Requirement":
        if not isinstance(data, dict):
            raise MalformedRule(f"{where}: expected an object, got {type(data).__name__}")

        tag = data.get("type")
        try:
            req_type = RequirementType(tag)
        except ValueError:
            raise MalformedRule(f"{where}: unknown requirement type {tag!r}") from None

        count = data.get("count")
        if count is not None:
            try:
                count = int(count)
            except (TypeError, ValueError):
                raise MalformedRule(f"{where}: 'count' must be an integer") from None

        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise MalformedRule(f"{where}: 'description' must be a string")

        groups = []
        if req_type == RequirementType.ONE_GROUP_REQUIRED:
            raw_groups = data.get("groups")
            if not isinstance(raw_groups, list) or not raw_groups:
                raise MalformedRule(f"{where}: one_group_required needs a non-empty 'groups' list")
            groups = [cls.parse(g, f"{where}.groups[{i}]") for i, g in enumerate(raw_groups)]

        nested = []
        if req_type == RequirementType.LIST1_LIST2:
            raw_nested = data.get("requirements")
            if not isinstance(raw_nested, list) or not raw_nested:
                raise MalformedRule(f"{where}: {tag} needs a non-empty 'requirements' list")
            nested = [cls.parse(r, f"{where}.requirements[{i}]") for i, r in enumerate(raw_nested)]

        return cls(
            type=req_type,
            description=description,
            courses=_course_list(data, "courses", where),
            count=count,
            required=_string_list(data, "required", where),
            range=_string_list(data, "range", where),
            level_ranges=_string_list(data, "level_ranges", where),
            category_ranges=_string_list(data, "category_ranges", where),
            patterns=_string_list(data, "patterns", where),
            groups=groups,
            requirements=nested,
        )


@dataclass
class CommunicationList:
    name: str
    description: str
    courses: list  # Course objects


@dataclass
class CommunicationOption:
    """
    One way to satisfy the communication requirement.

    `requires` is a list of (list_name, count) pairs; every pair must hold.
    """
    description: str
    requires: list


@dataclass
class CommunicationRule:
    lists: dict     # name -> CommunicationList, in document order
    options: list   # CommunicationOption

    @classmethod
    def parse(cls, data, where: str = COMMUNICATION_KEY) -> "CommunicationRule":
        if not isinstance(data, dict):
            raise MalformedRule(f"{where}: expected an object")

        lists = {}
        for name, value in data.items():
            if name == "options":
                continue
            if not isinstance(value, dict):
                raise MalformedRule(f"{where}.{name}: expected an object with 'courses'")
            lists[name] = CommunicationList(
                name=name,
                description=value.get("description", "") or "",
                courses=_course_list(value, "courses", f"{where}.{name}"),
            )

        options = []
        raw_options = data.get("options") or []
        if not isinstance(raw_options, list):
            raise MalformedRule(f"{where}: 'options' must be a list")
        for i, opt in enumerate(raw_options):
            if not isinstance(opt, dict):
                raise MalformedRule(f"{where}.options[{i}]: expected an object")
            raw_requires = opt.get("requires") or []
            if not isinstance(raw_requires, list):
                raise MalformedRule(f"{where}.options[{i}]: 'requires' must be a list")
            requires = []
            for req in raw_requires:
                if not isinstance(req, dict):
                    raise MalformedRule(f"{where}.options[{i}]: bad requires entry {req!r}")
                list_name = req.get("list")
                if list_name not in lists:
                    raise MalformedRule(f"{where}.options[{i}]: unknown list {list_name!r}")
                try:
                    count = int(req.get("count", 1))
                except (TypeError, ValueError):
                    raise MalformedRule(f"{where}.options[{i}]: 'count' must be an integer") from None
                requires.append((list_name, count))
            options.append(CommunicationOption(description=opt.get("description", "") or "", requires=requires))

        return cls(lists=lists, options=options)


@dataclass
class MajorRuleSet:
    """
    Parsed rule document for one major.

    `sections` keeps the requirement lists in the order they appear in the
    document, because that order decides which requirement gets to consume
    a course first.
    """
    major_id: str
    excluded_courses: list = field(default_factory=list)   # Course objects
    sections: dict = field(default_factory=dict)           # key -> [Requirement]
    communication: Optional[CommunicationRule] = None
    breadth_source: Optional[str] = None
    depth_source: Optional[str] = None
    order: list = field(default_factory=list)              # top-level keys, document order

    @property
    def excluded_codes(self) -> set:
        return {c.key for c in self.excluded_courses}

    @classmethod
    def parse(cls, major_id: str, data) -> "MajorRuleSet":
        if not isinstance(data, dict):
            raise MalformedRule(f"{major_id}: rule document must be a JSON object")

        rules = cls(major_id=major_id)
        rules.excluded_courses = _course_list(data, "excluded_courses", major_id)

        for key, value in data.items():
            if key in REQUIREMENT_LIST_KEYS:
                if not isinstance(value, list):
                    raise MalformedRule(f"{major_id}.{key}: expected a list of requirements")
                rules.sections[key] = [
                    Requirement.parse(r, f"{major_id}.{key}[{i}]") for i, r in enumerate(value)
                ]
            elif key == COMMUNICATION_KEY:
                rules.communication = CommunicationRule.parse(value, f"{major_id}.{key}")
            elif key in (BREADTH_KEY, DEPTH_KEY):
                source = value.get("source") if isinstance(value, dict) else None
                if key == BREADTH_KEY:
                    rules.breadth_source = source
                else:
                    rules.depth_source = source
            else:
                # program, excluded_courses, notes, ... are not walked
                continue
            rules.order.append(key)

        return rules
