"""Retry status records passed into and produced by every policy evaluation."""

from __future__ import annotations

from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

# Ints stay ints so large integer delays are stored exactly.
StoredDelay = Union[
    NonNegativeInt,
    Annotated[float, Field(ge=0, allow_inf_nan=False)],
]


class RetryStatus(BaseModel):
    """Immutable snapshot of a retry loop.

    A fresh status (``iter_number=0``, ``previous_delay=None``) means "about
    to make the first attempt". Each step of a retry loop derives a new
    status from the previous one; statuses are never modified in place.

    Attributes:
        iter_number: Number of attempts made so far.
        previous_delay: Delay decided at the status this one was derived
            from, or None for the initial status and for a stop decision.

    Example:
        >>> status = RetryStatus.start()
        >>> status.iter_number, status.previous_delay
        (0, None)
    """

    model_config = ConfigDict(frozen=True)

    iter_number: int = Field(default=0, ge=0)
    previous_delay: StoredDelay | None = None

    @classmethod
    def start(cls) -> RetryStatus:
        """Return the status a retry loop begins with."""
        return START_STATUS

    @property
    def is_terminal(self) -> bool:
        """True when this status records a decision to stop retrying.

        The initial status also has no previous delay but is never terminal.
        """
        return self.iter_number > 0 and self.previous_delay is None


START_STATUS = RetryStatus()
