"""Matching Builder - constructive Hall's theorem: recursion on the size of the left set.

Invariants:
    - n = 0 returns {}; n = 1 returns the single element's first admissible partner
    - n >= 2 either removes one element and one partner (strict step) or splits the
      problem on a tight nonempty proper subset A (tight step)
    - Every subproblem has a strictly smaller left set, so the recursion
      terminates on any input
    - Subproblems run from an explicit work stack, depth-first, so input size is
      not bounded by the interpreter recursion limit
    - Each subproblem gets its own freshly built relation; the caller's mapping is
      never mutated
    - Whatever is returned is injective and respects the relation: strict steps remove
      b0 from every remaining partner set, tight steps remove N(A) from the outside

Design Decisions:
    - Hall's condition is a precondition, not checked here; on bad input the builder
      either still returns a valid matching or raises EmptyNeighborhoodError at the
      first element it cannot serve (use validate_hall for a named violating subset);
      remaining=True only when that element had partners in the original relation
    - Tight-subset search is pluggable: exhaustive (mirrors the proof, exponential) or
      alternating (closures under a perfect matching, polynomial); results differ only
      in which valid matching is produced
    - Tight-step subproblems are solved sequentially even though they are independent
"""

from typing import Iterable

from hallmatch.core.alternating_paths import find_tight_subset_alternating
from hallmatch.core.build_stats import BuildStats
from hallmatch.core.domain_types import (
    BuildBranch,
    L,
    Matching,
    NeighborRelation,
    R,
    TightSearchStrategy,
)
from hallmatch.core.errors import EmptyNeighborhoodError, ErrorContext
from hallmatch.core.finite_sets import (
    arbitrary_element,
    normalize_relation,
    remove_left_element,
    remove_partners,
    restrict_relation,
)
from hallmatch.core.hall_oracle import HallConditionOracle


class MatchingBuilder:
    """Builds a system of distinct representatives assuming Hall's condition."""

    def __init__(self, strategy: TightSearchStrategy | str = TightSearchStrategy.EXHAUSTIVE):
        self.strategy = TightSearchStrategy(strategy)
        self.stats = BuildStats()
        self._root: dict = {}

    def build(self, left: Iterable[L], relation: NeighborRelation) -> Matching:
        """Injective f with f(x) in relation[x] for every x in left."""
        self.stats.reset()
        left = frozenset(left)
        self._root = normalize_relation(left, relation)
        return self._build(left, self._root)

    def _build(self, left: frozenset, relation: dict) -> dict:
        matching: dict = {}
        # (left, relation, depth) subproblems; tight halves pushed outside-first
        pending = [(left, relation, 0)]
        while pending:
            left, relation, depth = pending.pop()

            if not left:
                self.stats.record(BuildBranch.BASE0, depth)
                continue

            if len(left) == 1:
                self.stats.record(BuildBranch.BASE1, depth)
                (only,) = left
                matching[only] = self._pick_partner(only, relation, depth)
                continue

            oracle = HallConditionOracle(relation)
            tight = self._find_tight_subset(left, relation, oracle)

            if tight is None:
                self.stats.record(BuildBranch.STRICT, depth)
                a0 = arbitrary_element(left)
                b0 = self._pick_partner(a0, relation, depth)
                matching[a0] = b0
                pending.append((left - {a0}, remove_left_element(relation, a0, b0), depth + 1))
                continue

            self.stats.record(BuildBranch.TIGHT, depth)
            partners = oracle.neighborhood(tight)
            pending.append((left - tight, remove_partners(relation, tight, partners), depth + 1))
            pending.append((tight, restrict_relation(relation, tight), depth + 1))
        return matching

    def _find_tight_subset(
        self, left: frozenset, relation: dict, oracle: HallConditionOracle,
    ) -> frozenset | None:
        if self.strategy == TightSearchStrategy.ALTERNATING:
            return find_tight_subset_alternating(left, relation)
        tight = oracle.find_tight_subset(left)
        self.stats.subsets_probed += oracle.probes
        return tight

    def _pick_partner(self, element, relation: dict, depth: int):
        partners = relation[element]
        if not partners:
            raise EmptyNeighborhoodError(
                element,
                ErrorContext(debug_info={"depth": depth}),
                remaining=bool(self._root.get(element)),
            )
        return arbitrary_element(partners)


def build_matching(
    left: Iterable[L],
    right_universe: Iterable[R],
    relation: NeighborRelation,
    *,
    strategy: TightSearchStrategy | str = TightSearchStrategy.EXHAUSTIVE,
) -> Matching:
    """Unchecked entry point: a matching of left into right_universe along relation.

    Precondition: Hall's condition holds for every subset of left. Partners
    outside right_universe are not admissible.
    """
    left = frozenset(left)
    admissible = normalize_relation(left, relation, right_universe)
    return MatchingBuilder(strategy).build(left, admissible)
