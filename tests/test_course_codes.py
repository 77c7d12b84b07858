import pytest

from ontrack.errors import CourseNotFound, MalformedRule
from ontrack.data import CourseCatalog
from ontrack.models import Course, normalize_code, compact_code, subject_of, level_of


@pytest.mark.parametrize("raw,expected", [
    ("math237", "MATH 237"),
    ("MATH 237", "MATH 237"),
    ("  cs   136l ", "CS 136L"),
    ("ENGL 210e", "ENGL 210E"),
    ("not a code", "NOT A CODE"),
    ("", ""),
])
def test_normalize_code(raw, expected):
    assert normalize_code(raw) == expected


def test_compact_code_strips_all_whitespace():
    assert compact_code("math 237") == "MATH237"
    assert compact_code("CS  136 L") == "CS136L"


def test_subject_and_level():
    assert subject_of("MATH 237") == "MATH"
    assert subject_of("afm301") == "AFM"
    assert level_of("ENGL 210E") == 210
    assert level_of("COOP") == 0


def test_course_key_ignores_spelling():
    assert Course("math 135").key == Course("MATH135").key == "MATH135"


def test_catalog_lookup_any_spelling(catalog):
    assert "math135" in catalog
    assert catalog.get("MATH135").title == "Algebra"
    assert catalog.get("MATH 999") is None


def test_catalog_missing_keeps_input_order(catalog):
    assert catalog.missing(["CS 135", "FAKE 101", "MATH 135", "NOPE 1"]) == ["FAKE 101", "NOPE 1"]
    assert catalog.exists_all(["CS135", "math 136"])
    assert not catalog.exists_all(["CS 135", "FAKE 101"])


def test_require_all_raises_with_codes(catalog):
    with pytest.raises(CourseNotFound) as exc:
        catalog.require_all(["CS 135", "FAKE 101"])
    assert exc.value.codes == ["FAKE 101"]


def test_catalog_drops_duplicate_codes():
    catalog = CourseCatalog([Course("CS 135", "first"), Course("CS135", "second")])
    assert len(catalog) == 1
    assert catalog.get("CS 135").title == "first"


def test_catalog_from_records_rejects_bad_entries():
    with pytest.raises(MalformedRule):
        CourseCatalog.from_records({"code": "CS 135"})
    with pytest.raises(MalformedRule):
        CourseCatalog.from_records([{"title": "no code"}])
