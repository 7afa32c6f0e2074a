"""Error Hierarchy - typed, categorized exceptions for all hallmatch failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Precondition errors name the violating subset whenever one is known
    - to_response() produces a JSON-serializable envelope
    - The unchecked builder raises only EmptyNeighborhoodError, and only on bad input

Design Decisions:
    - Single hierarchy with HallMatchError base: callers catch one type for all failures
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - EmptyNeighborhoodError subclasses HallConditionViolatedError: "no candidates at all"
      is the degenerate case of "insufficient candidates in aggregate"
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    PRECONDITION = "precondition"
    LIMIT = "limit"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    subset: list | None = None
    neighborhood: list | None = None
    left_size: int | None = None
    debug_info: dict[str, Any] | None = None


def _listed(items) -> list:
    """Stable list rendering of a set of elements for envelopes and messages."""
    items = list(items)
    try:
        return sorted(items)
    except TypeError:
        return sorted(items, key=repr)


class HallMatchError(Exception):
    """Base exception for all hallmatch errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_response(self) -> dict:
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "subset": self.context.subset,
                    "neighborhood": self.context.neighborhood,
                    "left_size": self.context.left_size,
                    "debug_info": self.context.debug_info,
                },
            }
        }


# ─── Precondition Errors ────────────────────────────────────────

class HallConditionViolatedError(HallMatchError):
    """Some subset of left elements reaches fewer partners than its size."""
    def __init__(
        self,
        subset,
        neighborhood,
        context: ErrorContext | None = None,
        code: str = "HALL_CONDITION_VIOLATED",
        message: str | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.subset = _listed(subset)
        ctx.neighborhood = _listed(neighborhood)
        if message is None:
            message = (
                f"Hall's condition fails for subset {ctx.subset}: "
                f"{len(ctx.subset)} elements but only {len(ctx.neighborhood)} "
                f"reachable partners {ctx.neighborhood}"
            )
        super().__init__(
            message, code, ErrorCategory.PRECONDITION, ErrorSeverity.ERROR, ctx,
        )
        self.subset = frozenset(subset)
        self.neighborhood = frozenset(neighborhood)


class EmptyNeighborhoodError(HallConditionViolatedError):
    """A left element has no admissible partner at all."""
    def __init__(self, element, context: ErrorContext | None = None, remaining: bool = False):
        if remaining:
            message = (
                f"Left element {element!r} has no admissible partners left "
                f"after earlier assignments"
            )
        else:
            message = f"Left element {element!r} has no admissible partners"
        super().__init__(
            {element}, frozenset(), context,
            code="EMPTY_NEIGHBORHOOD", message=message,
        )
        self.element = element
        self.remaining = remaining


# ─── Input Errors ───────────────────────────────────────────────

class InvalidRelationError(HallMatchError):
    """Neighbor relation does not describe the given left set."""
    def __init__(self, message: str, element=None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        if element is not None:
            ctx.debug_info = {**(ctx.debug_info or {}), "element": repr(element)}
        super().__init__(
            message, "INVALID_RELATION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.element = element


class ValidationLimitExceededError(HallMatchError):
    """Exhaustive Hall validation requested on a left set above the limit."""
    def __init__(self, left_size: int, limit: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.left_size = left_size
        super().__init__(
            f"Exhaustive validation of {left_size} left elements exceeds the "
            f"limit of {limit} (2^{left_size} subsets)",
            "VALIDATION_LIMIT_EXCEEDED", ErrorCategory.LIMIT,
            ErrorSeverity.WARNING, ctx,
        )
        self.left_size = left_size
        self.limit = limit


# ─── Internal Errors ────────────────────────────────────────────

class MatchingVerificationError(HallMatchError):
    """A built matching failed its injectivity or membership check."""
    def __init__(self, problems: list[str], context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {**(ctx.debug_info or {}), "problems": problems}
        super().__init__(
            f"Built matching failed verification: {'; '.join(problems)}",
            "MATCHING_VERIFICATION_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.problems = problems
