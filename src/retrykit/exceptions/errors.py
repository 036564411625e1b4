"""retrykit exception types."""

from __future__ import annotations

from typing import Any


class RetryKitError(Exception):
    """Base exception for all retrykit errors."""

    pass


class InvalidPolicyArgumentError(RetryKitError, ValueError):
    """Raised when a policy constructor receives an unusable argument.

    Policies validate their arguments once, at construction time, so that
    evaluation never has to deal with negative delays or limits.
    """

    def __init__(self, argument: str, value: Any, reason: str) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"Invalid value for '{argument}': {value!r} ({reason})")


class PolicyConfigError(RetryKitError):
    """Raised when a policy configuration is invalid.

    This includes YAML parsing errors, unreadable files and schema
    validation failures.
    """

    pass


class PolicyNotFoundError(RetryKitError):
    """Raised when a named policy is not defined in a loaded configuration."""

    def __init__(self, policy_name: str, message: str | None = None) -> None:
        self.policy_name = policy_name
        if message is None:
            message = f"Policy '{policy_name}' not found in configuration"
        super().__init__(message)
