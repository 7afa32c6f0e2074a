"""Matching Schemas - boundary validation of matching problems and results.

Invariants:
    - Relation keys must be left elements
    - Duplicate left elements are rejected
    - JSON input with string keys validates and converts to frozensets for core
    - Int-labeled problems load from JSON and results survive a JSON round trip
"""

import pytest
from pydantic import ValidationError

from hallmatch.core.domain_types import TightSearchStrategy
from hallmatch.schemas.matching import BuildSummary, MatchingProblem, MatchingResult


# --- MatchingProblem ----------------------------------------------------------

def test_problem_accepts_int_and_str_elements():
    problem = MatchingProblem(
        left=[1, 2], right_universe=["a", "b"], relation={1: ["a"], 2: ["a", "b"]},
    )
    assert problem.partner_sets() == {1: frozenset({"a"}), 2: frozenset({"a", "b"})}


def test_problem_relation_defaults_to_empty():
    problem = MatchingProblem(left=[], right_universe=[])
    assert problem.relation == {}


def test_problem_rejects_relation_keys_outside_left():
    with pytest.raises(ValidationError, match="outside left"):
        MatchingProblem(left=[1], right_universe=["a"], relation={1: ["a"], 2: ["a"]})


def test_problem_rejects_duplicate_left_elements():
    with pytest.raises(ValidationError, match="duplicate"):
        MatchingProblem(left=[1, 1], right_universe=["a"], relation={})


def test_problem_from_json_uses_string_keys():
    problem = MatchingProblem.model_validate_json(
        '{"left": ["x", "y"], "right_universe": ["a", "b"],'
        ' "relation": {"x": ["a", "b"], "y": ["b"]}}'
    )
    assert problem.partner_sets() == {"x": frozenset({"a", "b"}), "y": frozenset({"b"})}


def test_problem_from_json_restores_int_keys():
    problem = MatchingProblem.model_validate_json(
        '{"left": [1, 2], "right_universe": ["a", "b"],'
        ' "relation": {"1": ["a"], "2": ["b"]}}'
    )
    assert problem.partner_sets() == {1: frozenset({"a"}), 2: frozenset({"b"})}


def test_problem_keeps_str_key_when_left_holds_the_string():
    problem = MatchingProblem(left=[1, "1"], right_universe=["a"], relation={"1": ["a"]})
    assert problem.relation == {"1": ["a"]}


def test_problem_from_json_still_rejects_unknown_keys():
    with pytest.raises(ValidationError, match="outside left"):
        MatchingProblem.model_validate_json(
            '{"left": [1], "right_universe": ["a"], "relation": {"3": ["a"]}}'
        )


# --- MatchingResult -----------------------------------------------------------

def test_result_summary_defaults_to_zero():
    result = MatchingResult(assignment={}, strategy=TightSearchStrategy.EXHAUSTIVE)
    assert result.summary == BuildSummary()


def test_result_serializes_strategy_as_value():
    result = MatchingResult(assignment={1: "a"}, strategy=TightSearchStrategy.ALTERNATING)
    dumped = result.model_dump(mode="json")
    assert dumped["strategy"] == "alternating"
    assert dumped["assignment"] == [{"left": 1, "right": "a"}]


def test_result_round_trips_int_elements_through_json():
    result = MatchingResult(
        assignment={1: "a", 2: 7}, strategy=TightSearchStrategy.EXHAUSTIVE,
        summary=BuildSummary(strict_steps=1, base1_steps=1),
    )
    loaded = MatchingResult.model_validate_json(result.model_dump_json())
    assert loaded.assignment == {1: "a", 2: 7}
    assert loaded.summary == result.summary


def test_result_python_dump_keeps_mapping():
    result = MatchingResult(assignment={1: "a"}, strategy=TightSearchStrategy.EXHAUSTIVE)
    assert result.model_dump()["assignment"] == {1: "a"}
