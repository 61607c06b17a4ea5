#!/usr/bin/env python3
"""Command-line boundary for optline: argv sourcing, help and exit policy."""

import logging
import sys
from typing import Iterable, Optional

from .exceptions import OptlineError
from .option_table import Arity, OptionSpec, OptionTable
from .parser import Parser, ParseStatus
from .path_helper import PathHelper
from .types import ArgsList, ExitCode
from .usage import print_usage

DEMO_OPTIONS = OptionTable(
    [
        OptionSpec("-?", "--help", "", Arity.NONE, "Print program usage."),
        OptionSpec("-v", "--verbose", "", Arity.NONE, "Print more output."),
        OptionSpec("-o", "--output", "file", Arity.REQUIRED, "Write output to a file."),
        OptionSpec("-l", "--level", "n", Arity.OPTIONAL, "Set the log level."),
        OptionSpec("-i", "--include", "path", Arity.LIST, "Paths to include."),
    ]
)
"""Option table used by the 'optline' console script."""


class CommandLine:
    """Parses a process command line and applies the exit policy."""

    def __init__(
        self,
        options: OptionTable | Iterable[OptionSpec],
        program: Optional[str] = None,
        parser: Optional[Parser] = None,
    ):
        self.parser = parser or Parser(options)
        self.program = program or PathHelper.program_name()
        self.status: Optional[ParseStatus] = None

    def run(self, args: ArgsList) -> ExitCode:
        """Parse the arguments and return the exit code the process should use."""
        self.status = None
        try:
            self.status = self.parser.parse(args)
        except OptlineError as e:
            logging.error(f"{self.program}: {e}")
            return 1

        if self.status is ParseStatus.HELP_REQUESTED:
            print_usage(self.parser.options, self.program)
        return 0

    def parse_or_exit(self, args: Optional[ArgsList] = None) -> Parser:
        """
        Parse the process arguments, exiting on help or on error.

        Args:
            args: Tokens to parse; defaults to sys.argv[1:]

        Returns:
            The parser, ready to be queried
        """
        if args is None:
            args = sys.argv[1:]

        exit_code = self.run(args)
        if exit_code != 0 or self.status is ParseStatus.HELP_REQUESTED:
            sys.exit(exit_code)
        return self.parser


def main(args: Optional[ArgsList] = None) -> ExitCode:
    """Main entry point: parse with the demo options and print what was read."""
    cli = CommandLine(DEMO_OPTIONS)
    exit_code = cli.run(sys.argv[1:] if args is None else args)
    if exit_code == 0 and cli.status is ParseStatus.COMPLETE:
        for line in cli.parser.result.describe():
            print(line)
    return exit_code
