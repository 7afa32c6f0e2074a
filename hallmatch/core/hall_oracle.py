"""Hall Condition Oracle - neighborhood and deficiency queries over a fixed relation.

Invariants:
    - All queries are PURE functions of the relation and the candidate subset
    - deficiency(A) = |N(A)| - |A|; tight means exactly 0, locally satisfied means >= 0
    - find_tight_subset only probes nonempty proper subsets, smallest first

Design Decisions:
    - Class holding the relation rather than free functions: the builder probes many
      subsets against one relation and the probe counter lives with it
    - No caching of neighborhoods: subsets probed by the search are mostly distinct
"""

from typing import Iterable, Mapping

from hallmatch.core.finite_sets import nonempty_proper_subsets


class HallConditionOracle:
    """Answers Hall's-condition questions for subsets of one relation's left set."""

    def __init__(self, relation: Mapping):
        self.relation = relation
        self.probes = 0

    def neighborhood(self, subset: Iterable) -> frozenset:
        """N(A): union of admissible partners over A."""
        reached: set = set()
        for x in subset:
            reached |= self.relation.get(x, frozenset())
        return frozenset(reached)

    def deficiency(self, subset: Iterable) -> int:
        subset = frozenset(subset)
        return len(self.neighborhood(subset)) - len(subset)

    def is_tight(self, subset: Iterable) -> bool:
        """True iff |A| == |N(A)|."""
        return self.deficiency(subset) == 0

    def satisfies_locally(self, subset: Iterable) -> bool:
        """True iff |A| <= |N(A)|."""
        return self.deficiency(subset) >= 0

    def find_tight_subset(self, left: Iterable) -> frozenset | None:
        """First tight nonempty proper subset of left, or None (exponential)."""
        for candidate in nonempty_proper_subsets(left):
            self.probes += 1
            if self.is_tight(candidate):
                return candidate
        return None
