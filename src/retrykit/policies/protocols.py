"""retrykit policy protocol.

A policy is any callable taking a RetryStatus and returning the next delay,
or None to stop. Primitives and combinators are plain closures; nothing in
the library depends on how a policy is built, only on this signature.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from retrykit.policies.status import RetryStatus

Delay = Union[int, float]


@runtime_checkable
class RetryPolicy(Protocol):
    """Protocol for retry decision functions.

    Implementations must be deterministic: calling a policy twice with equal
    statuses yields equal results. A return value of None is the only
    termination signal; 0 means "retry immediately".
    """

    def __call__(self, status: RetryStatus) -> Delay | None:
        """Decide the delay before the next attempt.

        Args:
            status: The current retry status.

        Returns:
            The delay before retrying, or None to stop retrying.
        """
        ...
