"""Path operations for optline."""

import sys
from pathlib import Path

DEFAULT_PROGRAM_NAME = "program"


class PathHelper:
    """Utility class for path operations."""

    @staticmethod
    def program_name(argv0: str | None = None) -> str:
        """Get the program name shown in usage text and diagnostics."""
        if argv0 is None:
            argv0 = sys.argv[0] if sys.argv else ""

        # Fall back when running from an interactive interpreter
        name = Path(argv0).name if argv0 else ""
        return name or DEFAULT_PROGRAM_NAME
