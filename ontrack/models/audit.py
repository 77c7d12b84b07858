"""
Evaluation result data models.

Contains dataclasses for representing the results of a major progress
evaluation. Every result has a to_dict() so the presentation layer can
render or serialize it without knowing the classes.
"""

from dataclasses import dataclass, field
from typing import Optional


def _courses(courses: list) -> list:
    return [c.to_dict() for c in courses]


@dataclass
class RequirementResult:
    """
    Result of evaluating a single requirement.

    courses_taken holds only courses credited to THIS requirement (not
    already consumed by an earlier one). courses_remaining is every
    candidate the student hasn't taken, regardless of consumption.

    For one_group_required, satisfied_by_group is the index of the first
    subgroup that was fully met, and group_results holds each subgroup's
    own result.
    """
    description: str
    type: str
    courses_taken: list       # Course objects
    courses_remaining: list   # Course objects
    met: bool
    satisfied_by_group: Optional[int] = None
    group_results: list = field(default_factory=list)

    def to_dict(self) -> dict:
        data = {
            "description": self.description,
            "type": self.type,
            "courses_taken": _courses(self.courses_taken),
            "courses_remaining": _courses(self.courses_remaining),
            "met": self.met,
        }
        if self.group_results:
            data["satisfied_by_group"] = self.satisfied_by_group
            data["groups"] = [g.to_dict() for g in self.group_results]
        return data


@dataclass
class CommunicationListResult:
    description: str
    courses_taken: list
    courses_remaining: list

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "courses_taken": _courses(self.courses_taken),
            "courses_remaining": _courses(self.courses_remaining),
        }


@dataclass
class CommunicationResult:
    lists: dict      # name -> CommunicationListResult
    options: list    # [{"description": str, "met": bool}]

    @property
    def met(self) -> bool:
        # Lists without options are informational only
        if not self.options:
            return True
        return any(o["met"] for o in self.options)

    def to_dict(self) -> dict:
        return {
            "lists": {name: r.to_dict() for name, r in self.lists.items()},
            "options": [dict(o) for o in self.options],
            "met": self.met,
        }


@dataclass
class BreadthCategoryStatus:
    """
    Progress in one breadth category.

    Example for humanities with one course:
        needed: 2, taken: ["PHIL 145"], met: False
        status: "humanities in progress (1/2, need 1 more)"
    """
    name: str
    needed: int
    units: float
    taken: list = field(default_factory=list)  # normalized course codes
    met: bool = False

    @property
    def remaining(self) -> int:
        return max(0, self.needed - len(self.taken))

    @property
    def progress(self) -> str:
        return f"{len(self.taken)}/{self.needed}"

    @property
    def status(self) -> str:
        if self.met:
            return f"{self.name} satisfied ({self.progress})"
        return f"{self.name} in progress ({self.progress}, need {self.remaining} more)"

    def to_dict(self) -> dict:
        return {
            "needed": self.needed,
            "units": self.units,
            "taken": list(self.taken),
            "met": self.met,
            "remaining": self.remaining,
            "progress": self.progress,
            "status": self.status,
        }


@dataclass
class BreadthResult:
    satisfied: bool
    categories: dict   # name -> BreadthCategoryStatus, in BREADTH_CATEGORIES order
    description: str
    note: str = ""

    def to_dict(self) -> dict:
        return {
            "satisfied": self.satisfied,
            "description": self.description,
            "categories": {name: c.to_dict() for name, c in self.categories.items()},
            "note": self.note,
        }


@dataclass
class DepthResult:
    """
    Outcome of the depth check.

    option 1 fills `courses` (the qualifying subject's courses);
    option 2 fills `chain` (compact codes, start course first).
    """
    ok: bool
    option: Optional[int] = None
    subject: Optional[str] = None
    courses: list = field(default_factory=list)
    chain: list = field(default_factory=list)
    note: str = ""

    def to_dict(self) -> dict:
        data = {"ok": self.ok}
        if self.option is not None:
            data["option"] = self.option
            data["subject"] = self.subject
        if self.option == 1:
            data["courses"] = list(self.courses)
        elif self.option == 2:
            data["chain"] = list(self.chain)
        if self.note:
            data["note"] = self.note
        return data


@dataclass
class MajorProgress:
    """
    Complete evaluation of one student against one major.

    sections maps each requirement-list key (required_courses,
    elective_requirement, ...) to its list of RequirementResult.
    """
    program: str
    sections: dict = field(default_factory=dict)
    communication: Optional[CommunicationResult] = None
    breadth: Optional[BreadthResult] = None
    depth: Optional[DepthResult] = None

    @property
    def overall_met(self) -> bool:
        checks = [r.met for results in self.sections.values() for r in results]
        if self.communication is not None:
            checks.append(self.communication.met)
        if self.breadth is not None:
            checks.append(self.breadth.satisfied)
        if self.depth is not None:
            checks.append(self.depth.ok)
        return all(checks)

    def to_dict(self) -> dict:
        data = {"program": self.program}
        for key, results in self.sections.items():
            data[key] = [r.to_dict() for r in results]
        if self.communication is not None:
            data["communication_requirement"] = self.communication.to_dict()
        if self.breadth is not None:
            data["breadth_requirement"] = self.breadth.to_dict()
        if self.depth is not None:
            data["depth_requirement"] = self.depth.to_dict()
        data["overall_met"] = self.overall_met
        return data
