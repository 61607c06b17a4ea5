"""
optline - declarative command-line option parsing

Declare the accepted options once, parse the argument vector into a
queryable store, and print a usage message.
"""

from .application import CommandLine
from .exceptions import (
    AmbiguousOptionFormError,
    MissingListArgumentError,
    OptlineError,
    RequiredArgumentMissingError,
    UnkeyableOptionError,
    UnknownOptionError,
)
from .option_table import Arity, OptionSpec, OptionTable
from .parse_result import ParseResult
from .parser import Parser, ParseStatus, ScanState
from .usage import print_usage, render_usage

__version__ = "1.0.0"

__all__ = [
    # Main entry points
    "Parser",
    "CommandLine",
    # Declarations
    "Arity",
    "OptionSpec",
    "OptionTable",
    # Results
    "ParseResult",
    "ParseStatus",
    "ScanState",
    # Usage
    "render_usage",
    "print_usage",
    # Errors
    "OptlineError",
    "UnknownOptionError",
    "MissingListArgumentError",
    "AmbiguousOptionFormError",
    "UnkeyableOptionError",
    "RequiredArgumentMissingError",
]
