"""Build Stats - tests for per-run counters and their flattened summary.

Tests cover:
    - New stats start at zero for every branch
    - record() counts branches and tracks maximum depth
    - reset() clears a previous run
    - compute_build_stats returns a flat dict of ints
"""

from hallmatch.core.build_stats import BuildStats, compute_build_stats
from hallmatch.core.domain_types import BuildBranch


def test_new_stats_are_zero():
    stats = BuildStats()
    assert all(count == 0 for count in stats.branch_counts.values())
    assert stats.max_depth == 0
    assert stats.subsets_probed == 0


def test_record_counts_branch_and_depth():
    stats = BuildStats()
    stats.record(BuildBranch.STRICT, 0)
    stats.record(BuildBranch.STRICT, 1)
    stats.record(BuildBranch.BASE1, 2)
    assert stats.branch_counts[BuildBranch.STRICT] == 2
    assert stats.branch_counts[BuildBranch.BASE1] == 1
    assert stats.max_depth == 2


def test_reset_clears_previous_run():
    stats = BuildStats()
    stats.record(BuildBranch.TIGHT, 3)
    stats.subsets_probed = 12
    stats.reset()
    assert stats.branch_counts[BuildBranch.TIGHT] == 0
    assert stats.max_depth == 0
    assert stats.subsets_probed == 0


def test_compute_build_stats_flattens_counters():
    stats = BuildStats()
    stats.record(BuildBranch.TIGHT, 0)
    stats.record(BuildBranch.BASE1, 1)
    stats.record(BuildBranch.BASE1, 1)
    stats.subsets_probed = 6
    assert compute_build_stats(stats) == {
        "base0_steps": 0,
        "base1_steps": 2,
        "strict_steps": 0,
        "tight_steps": 1,
        "max_depth": 1,
        "subsets_probed": 6,
    }
