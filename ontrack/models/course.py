"""
Course data model and course-code helpers.

Course codes show up in several spellings ("math 237", "MATH237",
"MATH 237"). Everything in the engine compares codes through the helpers
here so that the spelling never matters.
"""

import re
from dataclasses import dataclass

_CODE_RE = re.compile(r"^([A-Z]{2,10})\s*0*([0-9]{2,3}[A-Z]{0,2})$")
_SUBJECT_RE = re.compile(r"^[A-Z]+")
_NUMBER_RE = re.compile(r"\d+")


def normalize_code(code: str) -> str:
    """
    Canonical display form: "SUBJECT NNN[LETTER]".

    "math237" -> "MATH 237", "ENGL 129r" -> "ENGL 129R".
    Codes that don't look like a course code come back uppercased and trimmed.
    """
    if not code:
        return ""
    s = code.upper().strip()
    m = _CODE_RE.match(s)
    if not m:
        return s
    return f"{m.group(1)} {m.group(2)}"


def compact_code(code: str) -> str:
    """Key form used for lookups and graph nodes: "MATH 237" -> "MATH237"."""
    if not code:
        return ""
    return re.sub(r"\s+", "", code).upper()


def subject_of(code: str) -> str:
    """Leading alphabetic prefix of a code ("MATH 237" -> "MATH")."""
    m = _SUBJECT_RE.match(compact_code(code))
    return m.group(0) if m else ""


def level_of(code: str) -> int:
    """First number embedded in a code, or 0 when there is none."""
    m = _NUMBER_RE.search(code or "")
    return int(m.group(0)) if m else 0


@dataclass(frozen=True)
class Course:
    """
    A single catalog course.

    Attributes:
        code: Course code as it appears in the catalog (e.g., "MATH 237")
        title: Human-readable course title
    """
    code: str
    title: str = ""

    @property
    def key(self) -> str:
        """Compact code used for every comparison."""
        return compact_code(self.code)

    @classmethod
    def from_dict(cls, data) -> "Course":
        """Build from a rule-file entry, which may be a dict or a bare code."""
        if isinstance(data, str):
            return cls(code=data.strip())
        return cls(code=str(data.get("code", "")).strip(), title=data.get("title", "") or "")

    def to_dict(self) -> dict:
        return {"code": self.code, "title": self.title}
