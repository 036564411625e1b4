"""retrykit - Composable, deterministic retry policies.

retrykit models retry policies as pure decision functions: given a
RetryStatus (attempts made so far and the delay decided last), a policy
returns the delay before the next attempt, or None to stop retrying.
Policies are built from primitives and combined with combinators; the
simulation driver enumerates their decisions without waiting.

Example:
    >>> from retrykit import (
    ...     cap_delay, concat, constant_delay, delays, dry_run,
    ...     exponential_backoff, limit_retries, pipe,
    ... )
    >>> policy = pipe(
    ...     constant_delay(300),
    ...     concat(exponential_backoff(200)),
    ...     concat(limit_retries(5)),
    ...     cap_delay(2000),
    ... )
    >>> delays(dry_run(policy))
    [300, 400, 800, 1600, 2000, None]
"""

from retrykit.config import (
    CapDelayConfig,
    ConcatConfig,
    ConstantDelayConfig,
    ExponentialBackoffConfig,
    LimitRetriesConfig,
    PolicyConfigLoader,
    PolicySpec,
    RetryConfig,
)
from retrykit.exceptions import (
    InvalidPolicyArgumentError,
    PolicyConfigError,
    PolicyNotFoundError,
    RetryKitError,
)
from retrykit.policies import (
    MAX_DELAY,
    START_STATUS,
    Combinator,
    Delay,
    RetryPolicy,
    RetryStatus,
    cap_delay,
    concat,
    constant_delay,
    exponential_backoff,
    limit_retries,
    pipe,
)
from retrykit.simulation import apply_policy, delays, dry_run, iterate_policy

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "RetryKitError",
    "InvalidPolicyArgumentError",
    "PolicyConfigError",
    "PolicyNotFoundError",
    # Status and protocol
    "RetryStatus",
    "START_STATUS",
    "Delay",
    "RetryPolicy",
    # Primitives
    "MAX_DELAY",
    "constant_delay",
    "limit_retries",
    "exponential_backoff",
    # Combinators
    "Combinator",
    "cap_delay",
    "concat",
    "pipe",
    # Simulation
    "apply_policy",
    "iterate_policy",
    "dry_run",
    "delays",
    # Config
    "PolicyConfigLoader",
    "PolicySpec",
    "RetryConfig",
    "CapDelayConfig",
    "ConcatConfig",
    "ConstantDelayConfig",
    "ExponentialBackoffConfig",
    "LimitRetriesConfig",
]
