"""Alternating Paths - maximum matching and polynomial Hall witnesses.

Invariants:
    - maximum_matching returns a maximum-cardinality matching (Hopcroft-Karp)
    - deficiency_witness is empty iff the matching covers every left element;
      for a maximum matching a nonempty witness Z has |N(Z)| < |Z|
    - Under a left-perfect matching M, the smallest tight set containing a is
      the closure of {a} under x -> M^-1(y) for y in r(x)

Design Decisions:
    - Dict-based pairings over index arrays: elements are arbitrary hashables
    - Augmenting search is iterative, so long alternating paths do not hit the
      interpreter recursion limit
    - Adjacency lists built in the fixed order of finite_sets.ordered so results
      are reproducible across runs
    - Used only as an opt-in locator/validator; the builder recursion is unchanged
"""

from collections import deque
from typing import Iterable, Mapping

from hallmatch.core.finite_sets import ordered

_INF = float("inf")


def maximum_matching(left: Iterable, relation: Mapping) -> dict:
    """Maximum-cardinality matching of left into its partners (Hopcroft-Karp)."""
    lefts = ordered(left)
    adjacency = {x: ordered(relation.get(x, ())) for x in lefts}
    pair_left: dict = {}
    pair_right: dict = {}
    dist: dict = {}

    def layer() -> float:
        # BFS from free left vertices; returns length of shortest augmenting path
        queue = deque()
        for x in lefts:
            if x in pair_left:
                dist[x] = _INF
            else:
                dist[x] = 0
                queue.append(x)
        shortest = _INF
        while queue:
            x = queue.popleft()
            if dist[x] >= shortest:
                continue
            for y in adjacency[x]:
                if y not in pair_right:
                    if shortest == _INF:
                        shortest = dist[x] + 1
                else:
                    other = pair_right[y]
                    if dist[other] == _INF:
                        dist[other] = dist[x] + 1
                        queue.append(other)
        return shortest

    def augment(root, shortest: float) -> bool:
        # DFS along the layers with an explicit stack; path holds the edges taken
        path: list = []
        branches = {root: iter(adjacency[root])}
        stack = [root]
        while stack:
            x = stack[-1]
            for y in branches[x]:
                if y not in pair_right:
                    if dist[x] + 1 == shortest:
                        path.append((x, y))
                        for px, py in path:
                            pair_left[px] = py
                            pair_right[py] = px
                        return True
                else:
                    other = pair_right[y]
                    if dist[other] == dist[x] + 1:
                        path.append((x, y))
                        branches[other] = iter(adjacency[other])
                        stack.append(other)
                        break
            else:
                dist[x] = _INF
                stack.pop()
                if path:
                    path.pop()
        return False

    while True:
        shortest = layer()
        if shortest == _INF:
            break
        for x in lefts:
            if x not in pair_left:
                augment(x, shortest)

    return dict(pair_left)


def deficiency_witness(left: Iterable, relation: Mapping, matching: Mapping) -> frozenset:
    """Left elements reachable by alternating paths from unmatched left elements."""
    matched_by = {y: x for x, y in matching.items()}
    free = [x for x in ordered(left) if x not in matching]
    reached = set(free)
    queue = deque(free)
    while queue:
        x = queue.popleft()
        for y in relation.get(x, ()):
            other = matched_by.get(y)
            if y in matched_by and other not in reached:
                reached.add(other)
                queue.append(other)
    return frozenset(reached)


def _closure(seed, relation: Mapping, matched_by: Mapping) -> frozenset | None:
    """Smallest tight set containing seed, or None if it reaches an unmatched partner."""
    closed = {seed}
    stack = [seed]
    while stack:
        x = stack.pop()
        for y in relation.get(x, ()):
            if y not in matched_by:
                return None
            other = matched_by[y]
            if other not in closed:
                closed.add(other)
                stack.append(other)
    return frozenset(closed)


def find_tight_subset_alternating(left: Iterable, relation: Mapping) -> frozenset | None:
    """First tight nonempty proper subset of left found by closures, or None.

    Returns None when no left-perfect matching exists; callers only rely on
    the result under Hall's condition.
    """
    lefts = ordered(left)
    matching = maximum_matching(lefts, relation)
    if len(matching) < len(lefts):
        return None
    matched_by = {y: x for x, y in matching.items()}
    for seed in lefts:
        closed = _closure(seed, relation, matched_by)
        if closed is not None and len(closed) < len(lefts):
            return closed
    return None
