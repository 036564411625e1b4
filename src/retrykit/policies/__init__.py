"""retrykit policy algebra.

- Status: RetryStatus, the immutable record every policy consumes
- Protocol: RetryPolicy, the single functional interface
- Primitives: constant_delay, limit_retries, exponential_backoff
- Combinators: cap_delay, concat, and the pipe() helper
"""

from .combinators import Combinator, cap_delay, concat, pipe
from .primitives import (
    MAX_DELAY,
    constant_delay,
    exponential_backoff,
    limit_retries,
)
from .protocols import Delay, RetryPolicy
from .status import START_STATUS, RetryStatus

__all__ = [
    # Status
    "RetryStatus",
    "START_STATUS",
    # Protocol
    "Delay",
    "RetryPolicy",
    # Primitives
    "MAX_DELAY",
    "constant_delay",
    "exponential_backoff",
    "limit_retries",
    # Combinators
    "Combinator",
    "cap_delay",
    "concat",
    "pipe",
]
