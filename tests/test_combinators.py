"""Tests for cap_delay, concat and pipe."""

from __future__ import annotations

import pytest

from retrykit import (
    InvalidPolicyArgumentError,
    RetryStatus,
    cap_delay,
    concat,
    constant_delay,
    exponential_backoff,
    limit_retries,
    pipe,
)


def never(status: RetryStatus) -> None:
    return None


class TestCapDelay:
    """Tests for cap_delay."""

    def test_caps_large_delays(self) -> None:
        """Delays above the cap are replaced by the cap."""
        assert cap_delay(500)(constant_delay(800))(RetryStatus()) == 500

    def test_keeps_small_delays(self) -> None:
        """Delays below the cap pass through."""
        assert cap_delay(500)(constant_delay(300))(RetryStatus()) == 300

    def test_propagates_stop(self) -> None:
        """None from the wrapped policy is not turned into a delay."""
        policy = cap_delay(500)(limit_retries(1))
        assert policy(RetryStatus(iter_number=1)) is None

    def test_equals_min_or_none(self, statuses) -> None:
        """cap_delay(m)(p)(s) is None or min(m, p(s))."""
        inner = pipe(exponential_backoff(50), concat(limit_retries(6)))
        policy = cap_delay(1000)(inner)
        for status in statuses:
            expected = inner(status)
            if expected is None:
                assert policy(status) is None
            else:
                assert policy(status) == min(1000, expected)

    def test_zero_cap(self) -> None:
        """A zero cap turns every delay into an immediate retry."""
        assert cap_delay(0)(constant_delay(300))(RetryStatus()) == 0

    def test_cap_above_max_delay_rejected(self) -> None:
        """Caps larger than MAX_DELAY fail at construction."""
        with pytest.raises(InvalidPolicyArgumentError) as exc_info:
            cap_delay(10**400)
        assert exc_info.value.argument == "max_delay"

    def test_negative_cap_rejected(self) -> None:
        """Negative caps fail at construction."""
        with pytest.raises(InvalidPolicyArgumentError):
            cap_delay(-1)


class TestConcat:
    """Tests for concat."""

    def test_larger_delay_wins(self) -> None:
        """When both policies continue, the slower one wins."""
        policy = concat(constant_delay(300))(exponential_backoff(200))
        assert policy(RetryStatus(iter_number=0)) == 300
        assert policy(RetryStatus(iter_number=1)) == 400

    def test_stop_from_first(self) -> None:
        """A stop from the first policy stops the merge."""
        policy = concat(constant_delay(300))(never)
        assert policy(RetryStatus()) is None

    def test_stop_from_second(self) -> None:
        """A stop from the second policy stops the merge."""
        policy = concat(never)(constant_delay(300))
        assert policy(RetryStatus()) is None

    def test_both_policies_evaluated(self) -> None:
        """The second policy runs even when the first already stopped."""
        seen: list[int] = []

        def recording(status: RetryStatus) -> int:
            seen.append(status.iter_number)
            return 1

        concat(recording)(never)(RetryStatus(iter_number=4))
        assert seen == [4]

    def test_matches_definition(self, statuses) -> None:
        """concat(p2)(p1)(s) is None if either is None, else the max."""
        p1 = exponential_backoff(20)
        p2 = pipe(constant_delay(100), concat(limit_retries(5)))
        policy = concat(p2)(p1)
        for status in statuses:
            d1, d2 = p1(status), p2(status)
            if d1 is None or d2 is None:
                assert policy(status) is None
            else:
                assert policy(status) == max(d1, d2)

    def test_associative(self, statuses) -> None:
        """Grouping of merges does not change decisions."""
        a, b, c = constant_delay(300), exponential_backoff(100), limit_retries(6)
        left = concat(c)(concat(b)(a))
        right = concat(concat(c)(b))(a)
        assert [left(s) for s in statuses] == [right(s) for s in statuses]


class TestNesting:
    """Combinators accept each other's outputs."""

    def test_concat_of_capped_policies(self) -> None:
        """Two capped policies merge like any other policies."""
        policy = concat(cap_delay(250)(exponential_backoff(100)))(
            cap_delay(150)(constant_delay(1000))
        )
        assert policy(RetryStatus(iter_number=0)) == 150
        assert policy(RetryStatus(iter_number=5)) == 250

    def test_cap_of_concat_chain(self) -> None:
        """Capping a merged chain caps the merged delay."""
        policy = cap_delay(600)(concat(limit_retries(2))(exponential_backoff(500)))
        assert policy(RetryStatus(iter_number=0)) == 500
        assert policy(RetryStatus(iter_number=1)) == 600
        assert policy(RetryStatus(iter_number=2)) is None


class TestPipe:
    """Tests for the pipe helper."""

    def test_no_combinators(self) -> None:
        """pipe(p) is p."""
        policy = constant_delay(5)
        assert pipe(policy) is policy

    def test_applies_left_to_right(self) -> None:
        """Later combinators wrap earlier results."""
        capped_then_merged = pipe(constant_delay(800), cap_delay(500), concat(constant_delay(700)))
        merged_then_capped = pipe(constant_delay(800), concat(constant_delay(700)), cap_delay(500))
        assert capped_then_merged(RetryStatus()) == 700
        assert merged_then_capped(RetryStatus()) == 500
