"""
Tests for the requirement evaluator.

Covers each requirement type, cross-requirement consumption, exclusions,
grouped requirements and generated descriptions.
"""

import pytest

from ontrack.engines import RequirementEvaluator, create_description
from ontrack.errors import MalformedRule
from ontrack.models import Requirement, RequirementType


def req(data):
    return Requirement.parse(data)


def courses(*codes):
    return [{"code": c} for c in codes]


def codes(result_courses):
    return [c.code for c in result_courses]


@pytest.fixture
def evaluator(catalog):
    return RequirementEvaluator(catalog)


def test_all_required(evaluator):
    rule = req({"type": "all_required", "courses": courses("MATH 135", "MATH 136")})
    done, = evaluator.evaluate([rule], ["MATH 135", "MATH 136"], set())
    partial, = evaluator.evaluate([rule], ["MATH 135"], set())
    assert done.met
    assert not partial.met
    assert codes(partial.courses_taken) == ["MATH 135"]
    assert codes(partial.courses_remaining) == ["MATH 136"]


def test_one_required(evaluator):
    rule = req({"type": "one_required", "courses": courses("STAT 230", "STAT 231")})
    result, = evaluator.evaluate([rule], ["STAT231"], set())
    assert result.met
    assert codes(result.courses_taken) == ["STAT 231"]
    assert codes(result.courses_remaining) == ["STAT 230"]


def test_range_required_counts_resolved_courses(evaluator):
    rule = req({"type": "range_required", "count": 2, "level_ranges": ["CS3", "CS4"]})
    result, = evaluator.evaluate([rule], ["CS 341", "CS 486"], set())
    assert result.met
    assert codes(result.courses_taken) == ["CS 341", "CS 486"]
    assert codes(result.courses_remaining) == ["CS 350"]


def test_n_required_needs_required_codes(evaluator):
    rule = req({"type": "n_required", "count": 2, "range": ["CO250-CO499"],
                "category_ranges": ["STAT"], "required": ["CO 250"]})
    without, = evaluator.evaluate([rule], ["STAT 230", "STAT 231"], set())
    with_required, = evaluator.evaluate([rule], ["STAT 230", "CO 250"], set())
    assert not without.met
    assert with_required.met


def test_n_required_merges_courses_then_ranges_then_required(evaluator):
    rule = req({"type": "n_required", "count": 1, "courses": courses("PHIL 145"),
                "range": ["CO250-CO299"], "required": ["HIST 110", "CO 250"]})
    valid = evaluator.candidates(rule, set())
    assert codes(valid) == ["PHIL 145", "CO 250", "HIST 110"]


def test_count_bounded_consumes_only_count(evaluator):
    first = req({"type": "range_required", "count": 1, "level_ranges": ["AFM"]})
    second = req({"type": "range_required", "count": 1, "level_ranges": ["AFM3"]})
    consumed = set()
    r1, r2 = evaluator.evaluate([first, second], ["AFM 101", "AFM 301"], consumed)
    assert codes(r1.courses_taken) == ["AFM 101"]
    assert r2.met
    assert codes(r2.courses_taken) == ["AFM 301"]
    assert consumed == {"AFM101", "AFM301"}


def test_consumed_course_is_not_reused(evaluator):
    core = req({"type": "all_required", "courses": courses("MATH 135", "MATH 136")})
    elective = req({"type": "range_required", "count": 1, "range": ["MATH135-MATH138"]})
    r1, r2 = evaluator.evaluate([core, elective], ["MATH 135", "MATH 136"], set())
    assert r1.met
    assert not r2.met
    assert r2.courses_taken == []
    # remaining ignores consumption: only courses the student never took
    assert codes(r2.courses_remaining) == ["MATH 137", "MATH 138"]


def test_n_required_credits_required_code_before_resolved_order(evaluator):
    rule = req({"type": "n_required", "count": 1, "range": ["CO250-CO499"], "required": ["CO 342"]})
    result, = evaluator.evaluate([rule], ["CO 250", "CO 342"], set())
    assert result.met
    assert codes(result.courses_taken) == ["CO 342"]


def test_no_course_is_taken_twice_across_siblings(evaluator):
    rules = [
        req({"type": "one_required", "courses": courses("MATH 135", "MATH 136")}),
        req({"type": "range_required", "count": 1, "range": ["MATH135-MATH239"]}),
        req({"type": "n_required", "count": 2, "level_ranges": ["MATH"]}),
        req({"type": "all_required", "courses": courses("MATH 237")}),
    ]
    student = ["MATH 135", "MATH 136", "MATH 137", "MATH 237", "MATH 239"]
    results = evaluator.evaluate(rules, student, set())
    taken = [c.code for r in results for c in r.courses_taken]
    assert len(taken) == len(set(taken))
    assert taken == ["MATH 135", "MATH 136", "MATH 137", "MATH 237"]
    # all_required only looks at what is left to take
    assert results[3].met
    assert results[3].courses_taken == []


def test_one_required_leaves_extra_courses_free(evaluator):
    one = req({"type": "one_required", "courses": courses("STAT 230", "STAT 231")})
    other = req({"type": "one_required", "courses": courses("STAT 231")})
    r1, r2 = evaluator.evaluate([one, other], ["STAT 230", "STAT 231"], set())
    assert r1.met and r2.met


def test_excluded_courses_never_appear(evaluator):
    rule = req({"type": "range_required", "count": 1, "level_ranges": ["CS1"]})
    result, = evaluator.evaluate([rule], ["CS 136L", "CS 135"], set(), excluded_codes=["CS 136L"])
    assert "CS 136L" not in codes(result.courses_taken) + codes(result.courses_remaining)
    assert codes(result.courses_taken) == ["CS 135"]


def test_group_met_by_one_fully_satisfied_subgroup(evaluator):
    rule = req({
        "type": "one_group_required",
        "groups": [
            {"type": "all_required", "courses": courses("CS 135", "CS 136")},
            {"type": "all_required", "courses": courses("CS 145", "CS 146")},
        ],
    })
    result, = evaluator.evaluate([rule], ["CS 135", "CS 136", "CS 145"], set())
    assert result.met
    assert result.satisfied_by_group == 0
    assert codes(result.courses_taken) == ["CS 135", "CS 136", "CS 145"]
    assert codes(result.courses_remaining) == ["CS 146"]
    assert [g.met for g in result.group_results] == [True, False]


def test_group_not_met_when_every_subgroup_is_partial(evaluator):
    rule = req({
        "type": "one_group_required",
        "groups": [
            {"type": "all_required", "courses": courses("CS 135", "CS 136")},
            {"type": "all_required", "courses": courses("CS 145", "CS 146")},
        ],
    })
    result, = evaluator.evaluate([rule], ["CS 135", "CS 146"], set())
    assert not result.met
    assert result.satisfied_by_group is None


def test_groups_share_the_consumed_set(evaluator):
    rule = req({
        "type": "one_group_required",
        "groups": [
            {"type": "all_required", "courses": courses("MATH 135")},
            {"type": "all_required", "courses": courses("MATH 135", "MATH 136")},
        ],
    })
    result, = evaluator.evaluate([rule], ["MATH 135", "MATH 136"], set())
    second = result.group_results[1]
    assert codes(second.courses_taken) == ["MATH 136"]
    assert codes(result.courses_taken) == ["MATH 135", "MATH 136"]


def test_list1_and_nested_list_requirements(evaluator):
    list1 = req({"type": "list1_required", "courses": courses("ENGL 109", "COMMST 100")})
    both = req({
        "type": "list1+list2_required",
        "requirements": [
            {"type": "one_required", "courses": courses("ENGL 109", "COMMST 100")},
            {"type": "one_required", "courses": courses("ENGL 210E")},
        ],
    })
    r1, = evaluator.evaluate([list1], ["ENGL 109", "COMMST 100"], set())
    r2, = evaluator.evaluate([both], ["ENGL 109", "ENGL 210E"], set())
    assert r1.met
    assert r2.met
    assert codes(r2.courses_taken) == ["ENGL 109", "ENGL 210E"]


def test_evaluation_is_repeatable(evaluator):
    rules = [
        req({"type": "all_required", "courses": courses("MATH 135", "MATH 136")}),
        req({"type": "range_required", "count": 2, "range": ["MATH135-MATH239"]}),
    ]
    student = ["MATH 135", "MATH 136", "MATH 137", "MATH 239"]
    first = [r.to_dict() for r in evaluator.evaluate(rules, student, set())]
    second = [r.to_dict() for r in evaluator.evaluate(rules, student, set())]
    assert first == second


@pytest.mark.parametrize("data,expected", [
    ({"type": "all_required", "courses": courses("CS 135", "CS 136")}, "Complete all of CS 135, CS 136"),
    ({"type": "one_required", "courses": courses("STAT 230", "STAT 231")}, "Complete one of STAT 230, STAT 231"),
    ({"type": "n_required", "count": 2, "courses": courses("CO 250", "CO 342")}, "Complete 2 of CO 250, CO 342"),
    ({"type": "n_required", "count": 2, "courses": courses("CO 250", "CO 342"), "required": ["CO 250"]},
     "Complete 2 of CO 250, CO 342 (must include CO 250)"),
    ({"type": "range_required", "count": 3, "range": ["MATH135-MATH138"], "level_ranges": ["AFM3"]},
     "Complete 3 from MATH135-MATH138, or any course starting with AFM3"),
    ({"type": "range_required", "count": 1, "level_ranges": ["CS3"]},
     "Complete 1 from any course starting with CS3"),
    ({"type": "all_required", "description": "Core", "courses": courses("CS 135")}, "Core"),
    ({"type": "list1_required", "courses": courses("ENGL 109")}, "Complete 2 courses from list 1"),
])
def test_generated_descriptions(data, expected):
    assert create_description(req(data)) == expected


def test_group_description_joins_with_or():
    rule = req({
        "type": "one_group_required",
        "groups": [
            {"type": "all_required", "courses": courses("CS 135", "CS 136")},
            {"type": "all_required", "description": "The advanced stream", "courses": courses("CS 145")},
        ],
    })
    assert create_description(rule) == "Complete all of CS 135, CS 136 or The advanced stream"


def test_unknown_type_is_rejected():
    with pytest.raises(MalformedRule):
        req({"type": "some_required", "courses": courses("CS 135")})


def test_group_without_groups_is_rejected():
    with pytest.raises(MalformedRule):
        req({"type": "one_group_required"})


def test_count_must_be_integer():
    with pytest.raises(MalformedRule):
        req({"type": "range_required", "count": "two", "range": ["CS3"]})


def test_every_type_has_a_handler(evaluator):
    assert set(evaluator._handlers) == set(RequirementType)
