"""retrykit simulation driver."""

from retrykit.simulation.driver import apply_policy, delays, dry_run, iterate_policy

__all__ = [
    "apply_policy",
    "delays",
    "dry_run",
    "iterate_policy",
]
