"""Primitive retry policies.

Each constructor validates its arguments and returns a closure satisfying
the RetryPolicy protocol. The closures capture only their construction
arguments, so evaluating them has no side effects.
"""

from __future__ import annotations

import math
import sys
from typing import Any

from retrykit.exceptions import InvalidPolicyArgumentError

from .protocols import Delay, RetryPolicy
from .status import RetryStatus

MAX_DELAY: float = sys.float_info.max
"""Default saturation point for exponential_backoff."""


def check_delay(argument: str, value: Any) -> Delay:
    """Validate a delay-like constructor argument.

    Args:
        argument: Argument name used in the error message.
        value: The value to check.

    Returns:
        The value, unchanged.

    Raises:
        InvalidPolicyArgumentError: If the value is not a finite,
            non-negative number no larger than MAX_DELAY.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidPolicyArgumentError(argument, value, "must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidPolicyArgumentError(argument, value, "must be finite")
    if value < 0:
        raise InvalidPolicyArgumentError(argument, value, "must be non-negative")
    if value > MAX_DELAY:
        raise InvalidPolicyArgumentError(argument, value, "must not exceed MAX_DELAY")
    return value


def check_count(argument: str, value: Any) -> int:
    """Validate a non-negative integer constructor argument."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPolicyArgumentError(argument, value, "must be an integer")
    if value < 0:
        raise InvalidPolicyArgumentError(argument, value, "must be non-negative")
    return value


def constant_delay(delay: Delay) -> RetryPolicy:
    """Constant delay with unlimited retries.

    The status is ignored. Combine with limit_retries to terminate.

    Args:
        delay: Delay returned for every status. 0 means retry immediately.

    Returns:
        A policy that always returns ``delay``.

    Raises:
        InvalidPolicyArgumentError: If ``delay`` is negative or not finite.
    """
    check_delay("delay", delay)

    def policy(status: RetryStatus) -> Delay | None:
        return delay

    return policy


def limit_retries(max_attempts: int) -> RetryPolicy:
    """Retry immediately, but only up to ``max_attempts`` times.

    Args:
        max_attempts: Number of attempts after which retrying stops.
            0 means never retry.

    Returns:
        A policy returning 0 while ``status.iter_number < max_attempts``
        and None afterwards.

    Raises:
        InvalidPolicyArgumentError: If ``max_attempts`` is negative or not
            an integer.
    """
    check_count("max_attempts", max_attempts)

    def policy(status: RetryStatus) -> Delay | None:
        if status.iter_number >= max_attempts:
            return None
        return 0

    return policy


def _scaled(base_delay: Delay, exponent: int) -> Delay:
    if isinstance(base_delay, int):
        return base_delay * 2**exponent
    try:
        return math.ldexp(base_delay, exponent)
    except OverflowError:
        return math.inf


def _saturation_exponent(base_delay: Delay, ceiling: Delay) -> int | None:
    """Return the first exponent for which base_delay * 2**n exceeds ceiling."""
    if base_delay == 0:
        return None
    estimate = math.floor(math.log2(ceiling) - math.log2(base_delay)) - 1
    exponent = max(0, estimate)
    while _scaled(base_delay, exponent) <= ceiling:
        exponent += 1
    return exponent


def exponential_backoff(base_delay: Delay, ceiling: Delay = MAX_DELAY) -> RetryPolicy:
    """Grow the delay exponentially with the attempt count.

    The delay is ``base_delay * 2 ** status.iter_number``. The previous
    delay is ignored entirely. Once the exact value would exceed
    ``ceiling`` the policy returns ``ceiling``, so large attempt counts
    saturate instead of overflowing. Integer base delays give exact
    integer results below the ceiling.

    Args:
        base_delay: Delay for the first attempt (iteration 0).
        ceiling: Saturation value, defaults to the largest float.

    Returns:
        An unbounded exponential policy.

    Raises:
        InvalidPolicyArgumentError: If ``base_delay`` is negative or not
            finite, or ``ceiling`` is not a positive finite number.
    """
    check_delay("base_delay", base_delay)
    check_delay("ceiling", ceiling)
    if ceiling == 0:
        raise InvalidPolicyArgumentError("ceiling", ceiling, "must be positive")

    saturation = _saturation_exponent(base_delay, ceiling)

    def policy(status: RetryStatus) -> Delay | None:
        if saturation is None:
            return base_delay
        if status.iter_number >= saturation:
            return ceiling
        return _scaled(base_delay, status.iter_number)

    return policy
