"""retrykit configuration models for declarative policy definitions.

Policies can be described as a tree of Pydantic models, usually parsed from
YAML. Every node carries a ``type`` tag and builds the matching primitive or
combinator:

    RetryConfig
    └── policies: Dict[str, PolicySpec]
        PolicySpec = ConstantDelayConfig
                   | LimitRetriesConfig
                   | ExponentialBackoffConfig
                   | CapDelayConfig   (wraps one PolicySpec)
                   | ConcatConfig     (merges one or more PolicySpecs)
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    field_validator,
)

from retrykit.exceptions import PolicyNotFoundError
from retrykit.policies import (
    MAX_DELAY,
    RetryPolicy,
    cap_delay,
    concat,
    constant_delay,
    exponential_backoff,
    limit_retries,
)


def normalize_type_name(value: str) -> str:
    """Normalize a policy type tag: 'Cap-Delay' -> 'cap_delay'."""
    return value.strip().lower().replace("-", "_")


class _PolicySpecBase(BaseModel):
    """Shared behaviour of all policy specification nodes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("type", mode="before", check_fields=False)
    @classmethod
    def parse_type(cls, v: Any) -> Any:
        """Allow case and dash variants of the type tag."""
        if isinstance(v, str):
            return normalize_type_name(v)
        return v

    @abstractmethod
    def build(self) -> RetryPolicy:
        """Build the policy described by this node."""
        ...

    @property
    def terminates(self) -> bool:
        """True if the built policy is guaranteed to stop eventually."""
        return False

    @property
    def never_retries(self) -> bool:
        """True if the built policy stops at the very first decision."""
        return False


class ConstantDelayConfig(_PolicySpecBase):
    """Configuration for constant_delay.

    Attributes:
        delay: Delay returned for every attempt.
    """

    type: Literal["constant_delay"] = "constant_delay"
    delay: float = Field(ge=0, allow_inf_nan=False)

    def build(self) -> RetryPolicy:
        return constant_delay(self.delay)


class LimitRetriesConfig(_PolicySpecBase):
    """Configuration for limit_retries.

    Attributes:
        max_attempts: Attempts after which retrying stops.
    """

    type: Literal["limit_retries"] = "limit_retries"
    max_attempts: int = Field(ge=0)

    def build(self) -> RetryPolicy:
        return limit_retries(self.max_attempts)

    @property
    def terminates(self) -> bool:
        return True

    @property
    def never_retries(self) -> bool:
        return self.max_attempts == 0


class ExponentialBackoffConfig(_PolicySpecBase):
    """Configuration for exponential_backoff.

    Attributes:
        base_delay: Delay for the first attempt.
        ceiling: Optional saturation value (defaults to the largest float).
    """

    type: Literal["exponential_backoff"] = "exponential_backoff"
    base_delay: float = Field(ge=0, allow_inf_nan=False)
    ceiling: float | None = Field(default=None, gt=0, allow_inf_nan=False)

    def build(self) -> RetryPolicy:
        ceiling = self.ceiling if self.ceiling is not None else MAX_DELAY
        return exponential_backoff(self.base_delay, ceiling)


class CapDelayConfig(_PolicySpecBase):
    """Configuration for cap_delay.

    Attributes:
        max_delay: Upper bound on delays.
        policy: The wrapped policy.
    """

    type: Literal["cap_delay"] = "cap_delay"
    max_delay: float = Field(ge=0, allow_inf_nan=False)
    policy: PolicySpec

    def build(self) -> RetryPolicy:
        return cap_delay(self.max_delay)(self.policy.build())

    @property
    def terminates(self) -> bool:
        return self.policy.terminates

    @property
    def never_retries(self) -> bool:
        return self.policy.never_retries


class ConcatConfig(_PolicySpecBase):
    """Configuration for concat.

    The listed policies are merged left to right: ``[p1, p2, p3]`` builds
    ``concat(p3)(concat(p2)(p1))``.

    Attributes:
        policies: Policies to merge (at least one).
    """

    type: Literal["concat"] = "concat"
    policies: list[PolicySpec] = Field(min_length=1)

    def build(self) -> RetryPolicy:
        first, *rest = [spec.build() for spec in self.policies]
        for policy in rest:
            first = concat(policy)(first)
        return first

    @property
    def terminates(self) -> bool:
        return any(spec.terminates for spec in self.policies)

    @property
    def never_retries(self) -> bool:
        return any(spec.never_retries for spec in self.policies)


def _spec_tag(value: Any) -> str | None:
    """Pick the union member from the (normalized) type tag."""
    if isinstance(value, dict):
        raw = value.get("type")
    else:
        raw = getattr(value, "type", None)
    if isinstance(raw, str):
        return normalize_type_name(raw)
    return None


PolicySpec = Annotated[
    Union[
        Annotated[ConstantDelayConfig, Tag("constant_delay")],
        Annotated[LimitRetriesConfig, Tag("limit_retries")],
        Annotated[ExponentialBackoffConfig, Tag("exponential_backoff")],
        Annotated[CapDelayConfig, Tag("cap_delay")],
        Annotated[ConcatConfig, Tag("concat")],
    ],
    Discriminator(_spec_tag),
]

CapDelayConfig.model_rebuild()
ConcatConfig.model_rebuild()


class RetryConfig(BaseModel):
    """Complete retry configuration.

    This is the root model for YAML policy definitions.

    Attributes:
        version: Configuration version string.
        policies: Mapping from policy name to its definition.
    """

    model_config = ConfigDict(extra="forbid")

    version: str = Field(default="1.0")
    policies: dict[str, PolicySpec] = Field(default_factory=dict)

    def build(self, name: str) -> RetryPolicy:
        """Build a named policy.

        Args:
            name: The policy name.

        Returns:
            The built policy.

        Raises:
            PolicyNotFoundError: If no policy is defined under this name.
        """
        if name not in self.policies:
            raise PolicyNotFoundError(
                name,
                f"Policy '{name}' not found. Available: {sorted(self.policies)}",
            )
        return self.policies[name].build()

    def build_all(self) -> dict[str, RetryPolicy]:
        """Build every defined policy, keyed by name."""
        return {name: spec.build() for name, spec in self.policies.items()}
