"""Build Stats - counters describing one run of the matching builder.

Invariants:
    - Counters only grow during a run; reset() starts a fresh run
    - compute_build_stats returns a flat dict of integers (serializable as JSON)

Design Decisions:
    - Pure dataclass filled by the builder, flattened by a free function
      (ADR: the builder records, the shell presents)
"""

from dataclasses import dataclass, field

from hallmatch.core.domain_types import BuildBranch


@dataclass
class BuildStats:
    """Per-run recursion counters - pure dataclass, no IO."""

    # Steps taken per recursion state
    branch_counts: dict[BuildBranch, int] = field(
        default_factory=lambda: {branch: 0 for branch in BuildBranch},
    )

    # Deepest recursion level reached (root call is depth 0)
    max_depth: int = 0

    # Candidate subsets examined by the exhaustive tight-subset search
    subsets_probed: int = 0

    def record(self, branch: BuildBranch, depth: int) -> None:
        self.branch_counts[branch] += 1
        self.max_depth = max(self.max_depth, depth)

    def reset(self) -> None:
        for branch in BuildBranch:
            self.branch_counts[branch] = 0
        self.max_depth = 0
        self.subsets_probed = 0


def compute_build_stats(stats: BuildStats) -> dict:
    """Flatten BuildStats into a JSON-serializable dict. Pure, no IO."""
    return {
        "base0_steps": stats.branch_counts[BuildBranch.BASE0],
        "base1_steps": stats.branch_counts[BuildBranch.BASE1],
        "strict_steps": stats.branch_counts[BuildBranch.STRICT],
        "tight_steps": stats.branch_counts[BuildBranch.TIGHT],
        "max_depth": stats.max_depth,
        "subsets_probed": stats.subsets_probed,
    }
