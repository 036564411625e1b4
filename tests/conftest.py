"""Shared pytest fixtures for retrykit tests."""

from __future__ import annotations

import pytest

from retrykit import (
    RetryPolicy,
    RetryStatus,
    cap_delay,
    concat,
    constant_delay,
    exponential_backoff,
    limit_retries,
    pipe,
)


@pytest.fixture
def statuses() -> list[RetryStatus]:
    """A spread of statuses with and without previous delays."""
    result = [RetryStatus.start()]
    for iter_number in range(1, 12):
        result.append(RetryStatus(iter_number=iter_number, previous_delay=None))
        result.append(
            RetryStatus(iter_number=iter_number, previous_delay=iter_number * 150)
        )
    return result


@pytest.fixture
def example_policy() -> RetryPolicy:
    """Constant 300, merged with backoff from 200, limited to 5, capped at 2000."""
    return pipe(
        constant_delay(300),
        concat(exponential_backoff(200)),
        concat(limit_retries(5)),
        cap_delay(2000),
    )


@pytest.fixture
def example_yaml_content() -> str:
    """YAML definition of the example policy plus a fast variant."""
    return """
version: "1.0"
policies:
  default:
    type: cap_delay
    max_delay: 2000
    policy:
      type: concat
      policies:
        - {type: constant_delay, delay: 300}
        - {type: exponential_backoff, base_delay: 200}
        - {type: limit_retries, max_attempts: 5}
  fast:
    type: concat
    policies:
      - {type: constant_delay, delay: 0}
      - {type: limit_retries, max_attempts: 2}
"""
