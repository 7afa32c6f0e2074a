"""Domain Types - type aliases and enums shared by every matching module.

Invariants:
    - Left and right elements are opaque and hashable, nothing else is assumed
    - A NeighborRelation is never mutated; restrictions build new mappings
    - A Matching is a plain dict from left elements to right elements
    - All valid states encoded as Enums - no raw string matching

Design Decisions:
    - TypeVar aliases over wrapper classes: callers pass ordinary dicts and sets
    - str Enums: serialize to JSON without custom encoders (log extras, error envelopes)
"""

from enum import Enum
from typing import Hashable, Mapping, TypeVar


# ─── Element Types ───────────────────────────────────────────────

L = TypeVar("L", bound=Hashable)
R = TypeVar("R", bound=Hashable)


# ─── Structural Aliases ──────────────────────────────────────────

NeighborRelation = Mapping[L, frozenset[R]]     # total over the left set
Matching = dict[L, R]                           # injective, f(x) in r(x)


# ─── Enums ───────────────────────────────────────────────────────

class BuildBranch(str, Enum):
    """Recursion states of the matching builder, keyed by left-set size."""
    BASE0 = "base0"
    BASE1 = "base1"
    STRICT = "strict"
    TIGHT = "tight"


class TightSearchStrategy(str, Enum):
    """How the inductive step locates a tight subset."""
    EXHAUSTIVE = "exhaustive"
    ALTERNATING = "alternating"


class ViolationKind(str, Enum):
    """Why Hall's condition fails for a subset."""
    EMPTY_NEIGHBORHOOD = "empty_neighborhood"
    INSUFFICIENT_NEIGHBORHOOD = "insufficient_neighborhood"
