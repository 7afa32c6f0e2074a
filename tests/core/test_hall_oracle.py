"""Hall Condition Oracle - tests for neighborhood and deficiency queries.

Tests cover:
    - neighborhood is the union of partner sets (empty for the empty subset)
    - deficiency / is_tight / satisfies_locally agree on |N(A)| - |A|
    - find_tight_subset returns the smallest tight proper subset, or None
    - probes count the candidates examined
"""

from hallmatch.core.hall_oracle import HallConditionOracle


def _oracle() -> HallConditionOracle:
    return HallConditionOracle({
        1: frozenset({"a", "b"}),
        2: frozenset({"a", "b"}),
        3: frozenset({"c"}),
        4: frozenset(),
    })


# ─── neighborhood ────────────────────────────────────────────────

def test_neighborhood_is_union_of_partners():
    assert _oracle().neighborhood({1, 3}) == frozenset({"a", "b", "c"})


def test_neighborhood_of_empty_subset_is_empty():
    assert _oracle().neighborhood(set()) == frozenset()


def test_neighborhood_of_element_without_partners_is_empty():
    assert _oracle().neighborhood({4}) == frozenset()


# ─── deficiency predicates ───────────────────────────────────────

def test_deficiency_counts_surplus_partners():
    oracle = _oracle()
    assert oracle.deficiency({1}) == 1
    assert oracle.deficiency({1, 2}) == 0
    assert oracle.deficiency({1, 2, 4}) == -1


def test_is_tight_when_deficiency_zero():
    oracle = _oracle()
    assert oracle.is_tight({1, 2})
    assert oracle.is_tight({3})
    assert not oracle.is_tight({1})


def test_satisfies_locally_when_deficiency_non_negative():
    oracle = _oracle()
    assert oracle.satisfies_locally({1, 2, 3})
    assert not oracle.satisfies_locally({4})
    assert not oracle.satisfies_locally({1, 2, 4})


def test_empty_subset_is_tight_and_satisfied():
    oracle = _oracle()
    assert oracle.is_tight(set())
    assert oracle.satisfies_locally(set())


# ─── find_tight_subset ───────────────────────────────────────────

def test_find_tight_subset_prefers_smallest():
    oracle = HallConditionOracle({
        1: frozenset({"a", "b"}),
        2: frozenset({"a", "b"}),
        3: frozenset({"c"}),
    })
    assert oracle.find_tight_subset({1, 2, 3}) == frozenset({3})


def test_find_tight_subset_finds_pair_when_no_singleton_is_tight():
    oracle = HallConditionOracle({
        1: frozenset({"a", "b"}),
        2: frozenset({"a", "b"}),
        3: frozenset({"a", "b", "c", "d"}),
    })
    assert oracle.find_tight_subset({1, 2, 3}) == frozenset({1, 2})


def test_find_tight_subset_returns_none_when_all_strict():
    oracle = HallConditionOracle({x: frozenset({"a", "b", "c"}) for x in (1, 2, 3)})
    assert oracle.find_tight_subset({1, 2, 3}) is None


def test_find_tight_subset_never_returns_whole_set():
    oracle = HallConditionOracle({1: frozenset({"a"}), 2: frozenset({"b"})})
    tight = oracle.find_tight_subset({1, 2})
    assert tight in (frozenset({1}), frozenset({2}))


def test_probes_count_examined_candidates():
    oracle = HallConditionOracle({x: frozenset({"a", "b", "c"}) for x in (1, 2, 3)})
    oracle.find_tight_subset({1, 2, 3})
    assert oracle.probes == 6
