"""hallmatch - systems of distinct representatives by the constructive Hall's theorem.

Unchecked construction lives in core/; the checked wrappers in services/ validate
Hall's condition first and name the violating subset when it fails.
"""

from hallmatch.core.domain_types import BuildBranch, TightSearchStrategy, ViolationKind
from hallmatch.core.errors import (
    EmptyNeighborhoodError,
    HallConditionViolatedError,
    HallMatchError,
    InvalidRelationError,
    MatchingVerificationError,
    ValidationLimitExceededError,
)
from hallmatch.core.hall_oracle import HallConditionOracle
from hallmatch.core.matching_builder import MatchingBuilder, build_matching
from hallmatch.core.validate_hall import (
    HallViolation,
    check_matching,
    find_hall_violation,
    find_hall_violation_fast,
    is_valid_matching,
    validate_hall_condition,
)
from hallmatch.services.solve_matching import (
    ensure_hall_condition,
    solve_matching,
    solve_problem,
)

__version__ = "1.0.0"

__all__ = [
    # construction
    "MatchingBuilder",
    "build_matching",
    "HallConditionOracle",

    # validation
    "HallViolation",
    "check_matching",
    "find_hall_violation",
    "find_hall_violation_fast",
    "is_valid_matching",
    "validate_hall_condition",

    # checked wrappers
    "ensure_hall_condition",
    "solve_matching",
    "solve_problem",

    # types
    "BuildBranch",
    "TightSearchStrategy",
    "ViolationKind",

    # errors
    "HallMatchError",
    "HallConditionViolatedError",
    "EmptyNeighborhoodError",
    "InvalidRelationError",
    "MatchingVerificationError",
    "ValidationLimitExceededError",
]
