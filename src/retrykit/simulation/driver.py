"""Deterministic simulation of retry policies.

The driver enumerates the decisions a policy would make without waiting.
It exists for tests and documentation; a real retry loop sleeps the
returned delay and calls the policy itself.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator

from retrykit.policies.protocols import Delay, RetryPolicy
from retrykit.policies.status import START_STATUS, RetryStatus

logger = logging.getLogger(__name__)


def apply_policy(policy: RetryPolicy) -> Callable[[RetryStatus], RetryStatus]:
    """Build the single-step transition for a policy.

    The policy is evaluated against the input status, then the attempt
    counter is incremented.

    Args:
        policy: The policy making the decision.

    Returns:
        A function mapping a status to its successor.

    Example:
        >>> from retrykit import constant_delay
        >>> step = apply_policy(constant_delay(100))
        >>> step(START_STATUS)
        RetryStatus(iter_number=1, previous_delay=100)
    """

    def step(status: RetryStatus) -> RetryStatus:
        return RetryStatus(
            iter_number=status.iter_number + 1,
            previous_delay=policy(status),
        )

    return step


def iterate_policy(
    policy: RetryPolicy, start: RetryStatus = START_STATUS
) -> Iterator[RetryStatus]:
    """Lazily yield the statuses produced by repeatedly applying a policy.

    The first status whose previous_delay is None is yielded and ends the
    iteration. For a policy that never stops the iterator is infinite;
    bound it with itertools.islice.

    Args:
        policy: The policy to simulate.
        start: Status to start from.

    Yields:
        Successive statuses, starting with the one derived from ``start``.
    """
    step = apply_policy(policy)
    status = start
    while True:
        status = step(status)
        yield status
        if status.previous_delay is None:
            return


def dry_run(policy: RetryPolicy) -> tuple[RetryStatus, ...]:
    """Apply a policy until it stops, keeping every intermediate status.

    The terminal status, recording the decision to stop, is the last
    element. This never returns for a policy that never stops.

    Args:
        policy: The policy to simulate.

    Returns:
        The statuses in order, starting at iteration 1.
    """
    statuses = tuple(iterate_policy(policy))
    logger.debug("Dry run finished after %d steps", len(statuses))
    return statuses


def delays(statuses: Iterable[RetryStatus]) -> list[Delay | None]:
    """Project a sequence of statuses onto their decided delays."""
    return [status.previous_delay for status in statuses]
