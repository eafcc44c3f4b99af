"""Execution context handed to probes by the scheduling framework."""

import math
from datetime import UTC, datetime, timedelta


class CheckContext:
    def __init__(self, deadline: datetime | None = None):
        if deadline is not None and deadline.tzinfo is None:
            raise ValueError("deadline must be timezone-aware")
        self.deadline = deadline

    @classmethod
    def background(cls) -> "CheckContext":
        """Context without a deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> "CheckContext":
        return cls(datetime.now(UTC) + timedelta(seconds=seconds))

    def remaining(self) -> timedelta | None:
        if self.deadline is None:
            return None
        return self.deadline - datetime.now(UTC)

    def __repr__(self) -> str:
        return f"CheckContext(deadline={self.deadline!r})"


def timeout_from_deadline(ctx: CheckContext) -> int:
    """Whole seconds left until the context deadline, rounded down.

    A deadline that already passed yields zero or a negative value.
    """
    remaining = ctx.remaining()
    if remaining is None:
        raise ValueError("context deadline is not set")
    return math.floor(remaining.total_seconds())
