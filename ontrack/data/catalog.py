"""
Course catalog.

Read-only snapshot of every course the university offers. Used for the
up-front existence check on student input and by the range resolver.
"""

from ..errors import CourseNotFound, MalformedRule
from ..models import Course, compact_code


class CourseCatalog:
    """
    Immutable code -> Course lookup that keeps the catalog file's order.

    Iteration order matters: the range resolver returns matches in catalog
    order, so two evaluations over the same catalog always agree.
    """

    def __init__(self, courses):
        self._courses = []
        self._by_key = {}
        for course in courses:
            key = course.key
            if not key or key in self._by_key:
                continue
            self._by_key[key] = course
            self._courses.append(course)

    @classmethod
    def from_records(cls, records) -> "CourseCatalog":
        """Build from the parsed courses.json list of {code, title}."""
        if not isinstance(records, list):
            raise MalformedRule("Course catalog must be a JSON list of {code, title}")
        courses = []
        for rec in records:
            if not isinstance(rec, dict) or not rec.get("code"):
                raise MalformedRule(f"Bad catalog entry: {rec!r}")
            courses.append(Course.from_dict(rec))
        return cls(courses)

    def __iter__(self):
        return iter(self._courses)

    def __len__(self) -> int:
        return len(self._courses)

    def __contains__(self, code) -> bool:
        return compact_code(code) in self._by_key

    def get(self, code):
        """Catalog entry for a code in any spelling, or None."""
        return self._by_key.get(compact_code(code))

    def missing(self, codes) -> list:
        """Codes (as given) that aren't in the catalog, in input order."""
        return [code for code in codes if compact_code(code) not in self._by_key]

    def exists_all(self, codes) -> bool:
        """True when every code is a real course."""
        return not self.missing(codes)

    def require_all(self, codes):
        """Raise CourseNotFound listing every unknown code."""
        unknown = self.missing(codes)
        if unknown:
            raise CourseNotFound(unknown)
