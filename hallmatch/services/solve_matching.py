"""Solve Matching - checked wrapper around the core builder (imperative shell).

Invariants:
    - Input shape is checked before anything else (InvalidRelationError)
    - Hall's condition is validated before the builder runs; a violation is raised
      as HallConditionViolatedError / EmptyNeighborhoodError naming the subset
    - The unchecked builder is never invoked on input that failed validation
    - When verify_result is on, the returned matching has passed check_matching

Design Decisions:
    - Validator chosen by size: exhaustive (smallest violating subset) up to
      max_exhaustive_left, alternating-path witness above it
    - Settings injected as an optional argument, defaulting to get_settings(), so
      tests pass their own Settings without touching the environment
    - All logging for a run happens here; core/ stays silent
"""

import logging
from collections.abc import Iterable as IterableABC
from typing import Iterable, Mapping

from hallmatch.config import Settings, get_settings
from hallmatch.core.build_stats import BuildStats, compute_build_stats
from hallmatch.core.domain_types import ViolationKind
from hallmatch.core.errors import (
    EmptyNeighborhoodError,
    ErrorContext,
    HallConditionViolatedError,
    InvalidRelationError,
    MatchingVerificationError,
    ValidationLimitExceededError,
)
from hallmatch.core.finite_sets import normalize_relation
from hallmatch.core.matching_builder import MatchingBuilder
from hallmatch.core.validate_hall import (
    HallViolation,
    check_matching,
    find_hall_violation,
    find_hall_violation_fast,
)
from hallmatch.schemas.matching import BuildSummary, MatchingProblem, MatchingResult

logger = logging.getLogger(__name__)


def check_relation(left: frozenset, relation: Mapping) -> None:
    """Reject relations that do not describe left. Raises InvalidRelationError."""
    if not isinstance(relation, Mapping):
        raise InvalidRelationError(
            f"Neighbor relation must be a mapping, got {type(relation).__name__}",
        )
    for x, partners in relation.items():
        if x not in left:
            raise InvalidRelationError(
                f"Relation has an entry for {x!r}, which is not a left element",
                element=x,
            )
        if isinstance(partners, (str, bytes)) or not isinstance(partners, IterableABC):
            raise InvalidRelationError(
                f"Partners of {x!r} must be a collection, got {type(partners).__name__}",
                element=x,
            )


def find_violation(
    left: frozenset,
    relation: Mapping,
    settings: Settings,
    exhaustive: bool | None = None,
) -> HallViolation | None:
    """Run the validator chosen by size, or the one forced by exhaustive."""
    if exhaustive is None:
        exhaustive = len(left) <= settings.max_exhaustive_left
    elif exhaustive and len(left) > settings.max_exhaustive_left:
        raise ValidationLimitExceededError(len(left), settings.max_exhaustive_left)

    if exhaustive:
        return find_hall_violation(left, relation)
    return find_hall_violation_fast(left, relation)


def ensure_hall_condition(
    left: Iterable,
    relation: Mapping,
    settings: Settings | None = None,
    *,
    exhaustive: bool | None = None,
) -> None:
    """Raise if some subset of left violates Hall's condition; None otherwise."""
    settings = settings or get_settings()
    left = frozenset(left)
    violation = find_violation(left, relation, settings, exhaustive)
    if violation is None:
        return

    context = ErrorContext(left_size=len(left))
    if violation.kind == ViolationKind.EMPTY_NEIGHBORHOOD:
        (element,) = violation.subset
        error: HallConditionViolatedError = EmptyNeighborhoodError(element, context)
    else:
        error = HallConditionViolatedError(violation.subset, violation.neighborhood, context)
    logger.warning(
        "Hall's condition violated",
        extra={
            "error_code": error.code,
            "subset": error.context.subset,
            "left_size": len(left),
        },
    )
    raise error


def _solve(
    left: Iterable, right_universe: Iterable, relation: Mapping, settings: Settings,
) -> tuple[dict, BuildStats]:
    left = frozenset(left)
    right_universe = frozenset(right_universe)
    check_relation(left, relation)
    admissible = normalize_relation(left, relation, right_universe)
    ensure_hall_condition(left, admissible, settings)

    builder = MatchingBuilder(settings.tight_search)
    matching = builder.build(left, admissible)

    if settings.verify_result:
        problems = check_matching(left, admissible, matching)
        if problems:
            logger.error(
                "Built matching failed verification",
                extra={"error_code": "MATCHING_VERIFICATION_FAILED", "left_size": len(left)},
            )
            raise MatchingVerificationError(problems, ErrorContext(left_size=len(left)))

    logger.info(
        "Matching built",
        extra={
            "left_size": len(left),
            "right_size": len(right_universe),
            "strategy": builder.strategy.value,
            **compute_build_stats(builder.stats),
        },
    )
    return matching, builder.stats


def solve_matching(
    left: Iterable,
    right_universe: Iterable,
    relation: Mapping,
    settings: Settings | None = None,
) -> dict:
    """Checked build_matching: validated input in, verified matching out."""
    matching, _ = _solve(left, right_universe, relation, settings or get_settings())
    return matching


def solve_problem(problem: MatchingProblem, settings: Settings | None = None) -> MatchingResult:
    """solve_matching at the pydantic boundary."""
    settings = settings or get_settings()
    matching, stats = _solve(
        problem.left, problem.right_universe, problem.partner_sets(), settings,
    )
    return MatchingResult(
        assignment=matching,
        strategy=settings.tight_search,
        summary=BuildSummary(**compute_build_stats(stats)),
    )
