"""Finite Sets - element selection, subset enumeration and relation rewriting.

Invariants:
    - All functions are PURE: inputs are never mutated, new frozensets/dicts returned
    - Iteration order is fixed for a given input (sorted when orderable, else by repr)
    - arbitrary_element is only called on sets known to be nonempty

Design Decisions:
    - "Arbitrary element" is the first element in the fixed order: correctness of the
      builder never depends on which element is chosen, only that one exists
    - Relations are rewritten by map/filter into fresh dicts instead of subtypes or views
"""

from itertools import combinations
from typing import Iterable, Iterator, Mapping


def ordered(items: Iterable) -> list:
    """Return items in a deterministic order."""
    items = list(items)
    try:
        return sorted(items)
    except TypeError:
        return sorted(items, key=repr)


def arbitrary_element(items: Iterable):
    """First element of a nonempty finite set in the fixed iteration order."""
    listed = ordered(items)
    if not listed:
        raise ValueError("arbitrary_element() of an empty set")
    return listed[0]


def iter_subsets(items: Iterable, min_size: int = 0, max_size: int | None = None) -> Iterator[frozenset]:
    """Subsets of items by increasing size, each size in lexicographic order."""
    listed = ordered(items)
    top = len(listed) if max_size is None else min(max_size, len(listed))
    for size in range(max(min_size, 0), top + 1):
        for combo in combinations(listed, size):
            yield frozenset(combo)


def nonempty_proper_subsets(items: Iterable) -> Iterator[frozenset]:
    """Subsets A with 0 < |A| < |items|, smallest first."""
    listed = ordered(items)
    return iter_subsets(listed, 1, len(listed) - 1)


def normalize_relation(left: Iterable, relation: Mapping, right_universe: Iterable | None = None) -> dict:
    """Total relation over left with frozenset partner sets.

    Elements of left absent from relation get an empty partner set. When a
    right universe is given, partners outside it are dropped.
    """
    universe = None if right_universe is None else frozenset(right_universe)
    normalized = {}
    for x in left:
        partners = frozenset(relation.get(x, ()))
        if universe is not None:
            partners = partners & universe
        normalized[x] = partners
    return normalized


def restrict_relation(relation: Mapping, subset: Iterable) -> dict:
    """r|_A - the relation restricted to the left elements in subset."""
    return {x: relation[x] for x in subset}


def remove_left_element(relation: Mapping, element, partner) -> dict:
    """Drop one left element and one partner: x -> r(x) minus partner, x != element."""
    return {x: partners - {partner} for x, partners in relation.items() if x != element}


def remove_partners(relation: Mapping, subset: Iterable, partners: frozenset) -> dict:
    """Outside problem of a split: x -> r(x) minus partners, for x not in subset."""
    excluded = frozenset(subset)
    return {x: r - partners for x, r in relation.items() if x not in excluded}
