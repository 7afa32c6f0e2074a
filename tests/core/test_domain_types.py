"""Domain Types - verifies enum members and their serialized values.

Tests:
    - BuildBranch has exactly the four recursion states
    - TightSearchStrategy values match the configuration strings
    - Enums serialize to string values
"""

from hallmatch.core.domain_types import BuildBranch, TightSearchStrategy, ViolationKind


def test_build_branch_has_four_states():
    assert [b.value for b in BuildBranch] == ["base0", "base1", "strict", "tight"]


def test_tight_search_strategy_parses_from_string():
    assert TightSearchStrategy("exhaustive") is TightSearchStrategy.EXHAUSTIVE
    assert TightSearchStrategy("alternating") is TightSearchStrategy.ALTERNATING


def test_violation_kinds():
    assert set(ViolationKind) == {
        ViolationKind.EMPTY_NEIGHBORHOOD,
        ViolationKind.INSUFFICIENT_NEIGHBORHOOD,
    }


def test_enums_compare_equal_to_their_values():
    assert BuildBranch.STRICT == "strict"
    assert ViolationKind.EMPTY_NEIGHBORHOOD.value == "empty_neighborhood"
