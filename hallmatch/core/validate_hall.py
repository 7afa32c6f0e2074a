"""Hall Validation - checked counterparts to the unchecked builder.

Invariants:
    - All functions are PURE: no IO, no side effects
    - Return None / empty list on success, a description of the failure otherwise
    - find_hall_violation reports empty neighborhoods before aggregate shortfalls,
      and among aggregate shortfalls the smallest violating subset first
    - validate_hall_condition is exact but exponential (2^|left| subsets)

Design Decisions:
    - Return values (not exceptions): the shell decides whether a violation is an
      error, so tests and callers can inspect the witness directly
    - find_hall_violation_fast uses a maximum matching: same answer to "does a
      violation exist", possibly a different witness subset
"""

from dataclasses import dataclass
from typing import Iterable, Mapping

from hallmatch.core.alternating_paths import deficiency_witness, maximum_matching
from hallmatch.core.domain_types import ViolationKind
from hallmatch.core.finite_sets import iter_subsets, normalize_relation, ordered
from hallmatch.core.hall_oracle import HallConditionOracle


@dataclass(frozen=True)
class HallViolation:
    """A subset of left elements that reaches too few partners."""
    subset: frozenset
    neighborhood: frozenset
    kind: ViolationKind

    @property
    def deficiency(self) -> int:
        return len(self.neighborhood) - len(self.subset)


def _empty_neighborhood(left: list, relation: dict) -> HallViolation | None:
    for x in left:
        if not relation[x]:
            return HallViolation(frozenset({x}), frozenset(), ViolationKind.EMPTY_NEIGHBORHOOD)
    return None


def find_hall_violation(left: Iterable, relation: Mapping) -> HallViolation | None:
    """Smallest subset violating Hall's condition, by exhaustive search."""
    left = ordered(left)
    relation = normalize_relation(left, relation)
    empty = _empty_neighborhood(left, relation)
    if empty is not None:
        return empty

    oracle = HallConditionOracle(relation)
    for subset in iter_subsets(left, min_size=2):
        if not oracle.satisfies_locally(subset):
            return HallViolation(
                subset, oracle.neighborhood(subset),
                ViolationKind.INSUFFICIENT_NEIGHBORHOOD,
            )
    return None


def validate_hall_condition(left: Iterable, relation: Mapping) -> bool:
    """True iff every subset of left has |N(A)| >= |A| (exponential)."""
    return find_hall_violation(left, relation) is None


def find_hall_violation_fast(left: Iterable, relation: Mapping) -> HallViolation | None:
    """Some subset violating Hall's condition, via maximum matching (polynomial)."""
    left = ordered(left)
    relation = normalize_relation(left, relation)
    empty = _empty_neighborhood(left, relation)
    if empty is not None:
        return empty

    matching = maximum_matching(left, relation)
    if len(matching) == len(left):
        return None
    witness = deficiency_witness(left, relation, matching)
    return HallViolation(
        witness, HallConditionOracle(relation).neighborhood(witness),
        ViolationKind.INSUFFICIENT_NEIGHBORHOOD,
    )


def check_matching(left: Iterable, relation: Mapping, matching: Mapping) -> list[str]:
    """Problems with matching as a system of distinct representatives; [] if valid."""
    problems = []
    left = ordered(left)
    relation = normalize_relation(left, relation)
    owners: dict = {}
    for x in left:
        if x not in matching:
            problems.append(f"{x!r} is not assigned")
            continue
        y = matching[x]
        if y not in relation[x]:
            problems.append(f"{x!r} -> {y!r} is not an admissible partner")
        if y in owners:
            problems.append(f"{owners[y]!r} and {x!r} both assigned {y!r}")
        else:
            owners[y] = x
    extra = [x for x in matching if x not in relation]
    if extra:
        problems.append(f"assigned elements outside left: {ordered(extra)!r}")
    return problems


def is_valid_matching(left: Iterable, relation: Mapping, matching: Mapping) -> bool:
    return not check_matching(left, relation, matching)
