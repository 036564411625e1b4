"""Policy combinators: functions that build new policies from existing ones.

Combinators depend only on the RetryPolicy call signature, so primitives
and the outputs of other combinators can be mixed freely. They are curried
to read left to right when used with pipe()::

    pipe(
        constant_delay(300),
        concat(exponential_backoff(200)),
        concat(limit_retries(5)),
        cap_delay(2000),
    )
"""

from __future__ import annotations

from typing import Callable

from .primitives import check_delay
from .protocols import Delay, RetryPolicy
from .status import RetryStatus

Combinator = Callable[[RetryPolicy], RetryPolicy]


def cap_delay(max_delay: Delay) -> Combinator:
    """Set an upper bound on any delay directed by the wrapped policy.

    Termination is left untouched: None from the wrapped policy stays None.

    Args:
        max_delay: Largest delay the resulting policy may return.

    Returns:
        A function wrapping a policy into its capped version.

    Raises:
        InvalidPolicyArgumentError: If ``max_delay`` is negative or not finite.
    """
    check_delay("max_delay", max_delay)

    def wrap(policy: RetryPolicy) -> RetryPolicy:
        def capped(status: RetryStatus) -> Delay | None:
            delay = policy(status)
            if delay is None:
                return None
            return min(max_delay, delay)

        return capped

    return wrap


def concat(second: RetryPolicy) -> Combinator:
    """Merge two policies evaluated at the same status.

    The larger of the two delays wins. If either policy returns None the
    merged policy returns None: stopping is contagious. Both policies are
    always evaluated.

    Args:
        second: Policy merged into the one passed to the returned function.

    Returns:
        A function taking the first policy and returning the merged policy.
    """

    def wrap(first: RetryPolicy) -> RetryPolicy:
        def merged(status: RetryStatus) -> Delay | None:
            delay1 = first(status)
            delay2 = second(status)
            if delay1 is None or delay2 is None:
                return None
            return max(delay1, delay2)

        return merged

    return wrap


def pipe(policy: RetryPolicy, *combinators: Combinator) -> RetryPolicy:
    """Apply combinators to a policy from left to right.

    ``pipe(p, f, g)`` is ``g(f(p))``.
    """
    for combinator in combinators:
        policy = combinator(policy)
    return policy
