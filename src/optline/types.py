"""
Type aliases for optline.

This module provides centralized type definitions used throughout the library
to ensure consistency and maintainability.

Type Aliases:
    ArgsList: List of raw command-line tokens
    ValueList: Ordered values supplied for a single option
    KeyValueStore: Mapping of canonical option keys to their values
    ExitCode: Integer representing exit codes
    LongFormParts: Option and value halves of a long option token
"""

from typing import Dict, List, Tuple

ArgsList = List[str]
"""List of command-line tokens, excluding the program name."""

ValueList = List[str]
"""Values supplied for one option, in arrival order (e.g., ['a.txt', 'b.txt'])."""

KeyValueStore = Dict[str, ValueList]
"""Dictionary mapping canonical option keys to their values (e.g., {'verbose': []})."""

ExitCode = int
"""Integer representing process exit codes (0 for success, non-zero for errors)."""

LongFormParts = Tuple[str, str]
"""Result of splitting '--option=value' (e.g., ('--option', 'value'))."""
