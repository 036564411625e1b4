"""retrykit configuration system for YAML policy definitions.

- Config Models: Pydantic models describing policies as a tree
- PolicyConfigLoader: Load and validate YAML configuration files

Example:
    >>> from retrykit.config import PolicyConfigLoader
    >>>
    >>> loader = PolicyConfigLoader()
    >>> config = loader.load_from_string('''
    ... policies:
    ...   quick:
    ...     type: concat
    ...     policies:
    ...       - {type: constant_delay, delay: 100}
    ...       - {type: limit_retries, max_attempts: 3}
    ... ''')
    >>> policy = config.build("quick")
"""

from .loader import PolicyConfigLoader
from .models import (
    CapDelayConfig,
    ConcatConfig,
    ConstantDelayConfig,
    ExponentialBackoffConfig,
    LimitRetriesConfig,
    PolicySpec,
    RetryConfig,
)

__all__ = [
    # Loader
    "PolicyConfigLoader",
    # Models
    "CapDelayConfig",
    "ConcatConfig",
    "ConstantDelayConfig",
    "ExponentialBackoffConfig",
    "LimitRetriesConfig",
    "PolicySpec",
    "RetryConfig",
]
