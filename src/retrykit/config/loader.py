"""retrykit configuration loader for YAML policy definitions.

This module provides the PolicyConfigLoader class that:
1. Reads and parses YAML configuration files
2. Transforms raw YAML into a validated RetryConfig
3. Checks the defined policies for names and termination
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from retrykit.exceptions import PolicyConfigError
from retrykit.policies import RetryPolicy

from .models import RetryConfig

logger = logging.getLogger(__name__)


class PolicyConfigLoader:
    """Loader for YAML retry policy configurations.

    Example:
        >>> loader = PolicyConfigLoader()
        >>> config = loader.load("retry.yaml")
        >>> errors = loader.validate(config)
        >>> if not errors:
        ...     policy = config.build("default")
    """

    def load(self, yaml_path: str | Path) -> RetryConfig:
        """Load and parse a YAML configuration file.

        Args:
            yaml_path: Path to the YAML configuration file.

        Returns:
            Validated RetryConfig instance.

        Raises:
            PolicyConfigError: If file cannot be read, parsed, or validated.
        """
        path = Path(yaml_path)

        try:
            with path.open("r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise PolicyConfigError(f"Configuration file not found: {path}") from e
        except yaml.YAMLError as e:
            raise PolicyConfigError(f"Invalid YAML in {path}: {e}") from e

        return self._parse_raw_config(raw_config, str(path))

    def load_from_string(self, yaml_content: str) -> RetryConfig:
        """Load configuration from a YAML string.

        Args:
            yaml_content: YAML configuration as a string.

        Returns:
            Validated RetryConfig instance.

        Raises:
            PolicyConfigError: If content cannot be parsed or validated.
        """
        try:
            raw_config = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise PolicyConfigError(f"Invalid YAML: {e}") from e

        return self._parse_raw_config(raw_config, "<string>")

    def load_policy(self, yaml_path: str | Path, name: str) -> RetryPolicy:
        """Load a configuration file and build one named policy from it.

        Raises:
            PolicyConfigError: If the file is invalid.
            PolicyNotFoundError: If the file does not define ``name``.
        """
        return self.load(yaml_path).build(name)

    def _parse_raw_config(self, raw_config: Any, source: str) -> RetryConfig:
        if not isinstance(raw_config, dict):
            raise PolicyConfigError(
                f"Configuration must be a YAML mapping, got {type(raw_config).__name__}"
            )

        policies_section = raw_config.get("policies", {})
        if not isinstance(policies_section, dict):
            raise PolicyConfigError(
                f"'policies' section in {source} must be a mapping"
            )

        try:
            config = RetryConfig.model_validate(raw_config)
        except ValidationError as e:
            raise PolicyConfigError(
                f"Configuration validation failed for {source}: {e}"
            ) from e

        logger.info(
            "Loaded %d retry policies from %s", len(config.policies), source
        )
        logger.debug("Policies in %s: %s", source, sorted(config.policies))
        return config

    def validate(self, config: RetryConfig) -> list[str]:
        """Validate a configuration beyond its schema.

        This method checks that:
        1. Policy names are non-empty and contain no whitespace
        2. Every policy is guaranteed to stop retrying eventually
        3. No policy stops before its first retry

        Args:
            config: The RetryConfig to validate.

        Returns:
            List of validation error messages. Empty list means valid.
        """
        errors: list[str] = []

        for name, spec in config.policies.items():
            if not name or any(ch.isspace() for ch in name):
                errors.append(
                    f"Invalid policy name {name!r}: names must be non-empty "
                    f"and contain no whitespace"
                )

            if not spec.terminates:
                errors.append(
                    f"Policy '{name}' never stops retrying. "
                    f"Merge it with limit_retries to bound the number of attempts."
                )
            elif spec.never_retries:
                errors.append(
                    f"Policy '{name}' never retries: it merges limit_retries "
                    f"with max_attempts=0"
                )

        return errors
