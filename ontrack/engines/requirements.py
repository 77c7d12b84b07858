"""
Requirement Evaluator.

This module walks a list of requirements (recursively, for grouped ones)
and checks each against the student's courses.
"""

from ..models import RequirementType, RequirementResult, compact_code
from ..data import CourseCatalog
from .range_resolver import CourseRangeResolver, dedupe_courses, course_for_code


def create_description(req) -> str:
    """
    Human-readable description of a requirement.

    An explicit `description` always wins. Otherwise one is generated from
    the type, e.g. "Complete one of CS 135, CS 145".
    """
    if req.description:
        return req.description

    t = req.type
    if t == RequirementType.ONE_GROUP_REQUIRED:
        group_descs = [d for d in (create_description(g) for g in req.groups) if d]
        if group_descs:
            return " or ".join(group_descs)
        return "Complete one of the following options"
    if t == RequirementType.LIST1_REQUIRED:
        return "Complete 2 courses from list 1"
    if t == RequirementType.LIST1_LIST2:
        return "Complete one course from list 1 and one from list 2"

    codes = ", ".join(c.code for c in req.courses)
    if t == RequirementType.ALL_REQUIRED:
        return f"Complete all of {codes}"
    if t == RequirementType.ONE_REQUIRED:
        return f"Complete one of {codes}"

    # range_required / n_required
    if codes:
        desc = f"Complete {req.min_count} of {codes}"
    else:
        parts = []
        if req.range:
            parts.append(", ".join(req.range))
        prefixes = list(req.level_ranges) + list(req.patterns) + list(req.category_ranges)
        if prefixes:
            parts.append(f"any course starting with {' or '.join(prefixes)}")
        if parts:
            desc = f"Complete {req.min_count} from {', or '.join(parts)}"
        else:
            desc = f"Complete {req.min_count} courses"
    if req.required:
        desc += f" (must include {', '.join(req.required)})"
    return desc


class RequirementEvaluator:
    """
    Evaluates requirement lists against a student's courses.

    REQUIREMENT TYPES:
    ------------------
    all_required:       met when no listed course is left
    one_required:       met when any listed course is taken
    range_required:     met when `count` candidates are taken
    n_required:         like range_required, and every `required` code is taken
    one_group_required: met when any one subgroup is met with nothing left
    list1_required:     met when two listed courses are taken
    list1+list2_required: met when every nested requirement is met

    CONSUMPTION:
    ------------
    A student course is credited to one requirement only. The caller passes
    a `consumed` set that this evaluator adds to as it goes; a later
    requirement can't count a course already in it. Count-bounded kinds only
    consume as many courses as they need, so a student's extra courses stay
    free for later requirements.

    courses_taken lists the courses credited to the requirement, so across
    a whole pass no course shows up as taken twice. `met` is still decided
    on every free candidate the student has.

    courses_remaining ignores consumption: it lists every candidate the
    student hasn't taken at all.
    """

    def __init__(self, catalog: CourseCatalog, resolver: CourseRangeResolver = None):
        self.catalog = catalog
        self.resolver = resolver or CourseRangeResolver(catalog)
        self._handlers = {
            RequirementType.ALL_REQUIRED: self._eval_all,
            RequirementType.ONE_REQUIRED: self._eval_one,
            RequirementType.RANGE_REQUIRED: self._eval_count,
            RequirementType.N_REQUIRED: self._eval_count,
            RequirementType.ONE_GROUP_REQUIRED: self._eval_groups,
            RequirementType.LIST1_REQUIRED: self._eval_list1,
            RequirementType.LIST1_LIST2: self._eval_nested,
        }
        missing = set(RequirementType) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No handler for {missing}")

    def evaluate(self, requirements, student_courses, consumed: set, excluded_codes=()) -> list:
        """
        Evaluate requirements in order.

        Args:
            requirements: List of Requirement
            student_courses: Student course codes (any spelling)
            consumed: Compact codes already credited; updated in place
            excluded_codes: The major's excluded course codes

        Returns:
            One RequirementResult per requirement, same order
        """
        student = {compact_code(c) for c in student_courses}
        excluded = {compact_code(c) for c in excluded_codes}
        return [self._evaluate_one(req, student, consumed, excluded) for req in requirements]

    def candidates(self, req, excluded: set) -> list:
        """Concrete courses that can satisfy a requirement, exclusions removed."""
        if req.type.count_bounded:
            merged = list(req.courses)
            merged.extend(self.resolver.resolve(req, excluded))
            merged.extend(course_for_code(self.catalog, code) for code in req.required)
            return dedupe_courses(merged, excluded)
        return dedupe_courses(req.courses, excluded)

    def _evaluate_one(self, req, student: set, consumed: set, excluded: set) -> RequirementResult:
        return self._handlers[req.type](req, student, consumed, excluded)

    def _split(self, req, student: set, consumed: set, excluded: set):
        valid = self.candidates(req, excluded)
        taken = [c for c in valid if c.key in student and c.key not in consumed]
        remaining = [c for c in valid if c.key not in student]
        return taken, remaining

    def _result(self, req, taken, remaining, met, **extra) -> RequirementResult:
        return RequirementResult(
            description=create_description(req),
            type=req.type.value,
            courses_taken=taken,
            courses_remaining=remaining,
            met=met,
            **extra,
        )

    def _eval_all(self, req, student, consumed, excluded):
        taken, remaining = self._split(req, student, consumed, excluded)
        consumed.update(c.key for c in taken)
        return self._result(req, taken, remaining, met=not remaining)

    def _eval_one(self, req, student, consumed, excluded):
        taken, remaining = self._split(req, student, consumed, excluded)
        # one course is enough; leave the rest for later requirements
        credited = taken[:1]
        consumed.update(c.key for c in credited)
        return self._result(req, credited, remaining, met=len(taken) >= 1)

    def _eval_list1(self, req, student, consumed, excluded):
        taken, remaining = self._split(req, student, consumed, excluded)
        credited = taken[:2]
        consumed.update(c.key for c in credited)
        return self._result(req, credited, remaining, met=len(taken) >= 2)

    def _eval_count(self, req, student, consumed, excluded):
        taken, remaining = self._split(req, student, consumed, excluded)
        needed = req.min_count
        taken_keys = {c.key for c in taken}
        required_keys = [compact_code(code) for code in req.required]

        met = len(taken) >= needed
        if req.type == RequirementType.N_REQUIRED and required_keys:
            met = met and all(k in taken_keys for k in required_keys)

        # Credit required codes first, then fill up to `count` in resolved order
        credited = [k for k in required_keys if k in taken_keys]
        for c in taken:
            if len(credited) >= needed:
                break
            if c.key not in credited:
                credited.append(c.key)
        consumed.update(credited)

        credited_courses = [c for c in taken if c.key in credited]
        return self._result(req, credited_courses, remaining, met=met)

    def _eval_groups(self, req, student, consumed, excluded):
        group_results = []
        satisfied_by = None
        for i, group in enumerate(req.groups):
            # Shares `consumed`, so one course can't count for two groups
            result = self._evaluate_one(group, student, consumed, excluded)
            group_results.append(result)
            if satisfied_by is None and result.met and not result.courses_remaining:
                satisfied_by = i

        taken = dedupe_courses(c for r in group_results for c in r.courses_taken)
        remaining = dedupe_courses(c for r in group_results for c in r.courses_remaining)
        return self._result(
            req, taken, remaining,
            met=satisfied_by is not None,
            satisfied_by_group=satisfied_by,
            group_results=group_results,
        )

    def _eval_nested(self, req, student, consumed, excluded):
        nested = [self._evaluate_one(r, student, consumed, excluded) for r in req.requirements]
        taken = dedupe_courses(c for r in nested for c in r.courses_taken)
        remaining = dedupe_courses(c for r in nested for c in r.courses_remaining)
        return self._result(req, taken, remaining, met=all(r.met for r in nested))
