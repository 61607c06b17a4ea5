"""Environment variable operations for optline."""

import os
import sys

TRUTHY_VALUES = ("1", "true", "yes", "on")


def debug_log(message: str) -> None:
    """Log debug message when OPTLINE_DEBUG=1 is set."""
    if EnvironmentHelper.is_enabled("OPTLINE_DEBUG"):
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for environment variable operations."""

    @staticmethod
    def is_enabled(var_name: str) -> bool:
        """Check if an environment variable is set to a truthy value."""
        return os.environ.get(var_name, "").strip().lower() in TRUTHY_VALUES

    @staticmethod
    def strict_required_enabled() -> bool:
        """Check if missing values for required options should be rejected."""
        enabled = EnvironmentHelper.is_enabled("OPTLINE_STRICT_REQUIRED")
        debug_log(f"strict_required_enabled: OPTLINE_STRICT_REQUIRED={enabled}")
        return enabled
