"""retrykit exception types."""

from retrykit.exceptions.errors import (
    InvalidPolicyArgumentError,
    PolicyConfigError,
    PolicyNotFoundError,
    RetryKitError,
)

__all__ = [
    "RetryKitError",
    "InvalidPolicyArgumentError",
    "PolicyConfigError",
    "PolicyNotFoundError",
]
