"""Command-line parsing engine for optline."""

from enum import Enum
from typing import Iterable, Sequence

from .environment_helper import EnvironmentHelper, debug_log
from .exceptions import (
    AmbiguousOptionFormError,
    MissingListArgumentError,
    RequiredArgumentMissingError,
    UnkeyableOptionError,
    UnknownOptionError,
)
from .option_table import Arity, OptionSpec, OptionTable
from .parse_result import ParseResult
from .path_helper import PathHelper
from .types import ValueList
from .usage import render_usage


class ParseStatus(Enum):
    """Successful outcomes of a parse."""

    COMPLETE = "complete"
    HELP_REQUESTED = "help_requested"


class ScanState(Enum):
    """Whether bare tokens are currently collected for a list option."""

    SCANNING = "scanning"
    ACCUMULATING_LIST = "accumulating_list"


class Parser:
    """Parses command-line tokens against an option table."""

    def __init__(
        self,
        options: OptionTable | Iterable[OptionSpec],
        strict_required: bool | None = None,
    ):
        if not isinstance(options, OptionTable):
            options = OptionTable(options)
        if strict_required is None:
            strict_required = EnvironmentHelper.strict_required_enabled()

        self.options = options
        self.strict_required = strict_required
        self.result = ParseResult()
        self.state = ScanState.SCANNING
        self.list_token: str | None = None

    def parse(self, tokens: Sequence[str]) -> ParseStatus:
        """
        Parse the tokens that follow the program name.

        Every token must be a declared option, except the values that follow
        short options and list options. Values for long options must be
        attached with '='.

        Returns:
            ParseStatus.HELP_REQUESTED as soon as the help option is seen,
            otherwise ParseStatus.COMPLETE

        Raises:
            UnknownOptionError: If a token matches no declared option
            MissingListArgumentError: If a list option has no value after it
            AmbiguousOptionFormError: If a matched token is neither form
            RequiredArgumentMissingError: In strict mode, if a required
                option has no value
        """
        self.result = ParseResult()
        self._stop_list()

        debug_log(f"parse: tokens={list(tokens)}")
        index = 0
        while index < len(tokens):
            token = tokens[index]
            if self._accumulate_list_value(token):
                index += 1
                continue

            spec = self.options.find(token)
            if spec is None:
                raise UnknownOptionError(token)

            if spec.arity is Arity.NONE and spec.is_help:
                debug_log(f"parse: help requested by '{token}'")
                self._stop_list()
                return ParseStatus.HELP_REQUESTED

            index += self._dispatch(spec, tokens, index)

        self._stop_list()
        return ParseStatus.COMPLETE

    def _accumulate_list_value(self, token: str) -> bool:
        """Store the token under the pending list option, if one is pending."""
        if self.state is not ScanState.ACCUMULATING_LIST:
            return False

        # The next recognized option ends the list
        if self.options.is_option(token):
            self._stop_list()
            return False

        self._record(self.list_token, token)
        return True

    def _start_list(self, token: str) -> None:
        self.state = ScanState.ACCUMULATING_LIST
        self.list_token = token

    def _stop_list(self) -> None:
        self.state = ScanState.SCANNING
        self.list_token = None

    def _dispatch(self, spec: OptionSpec, tokens: Sequence[str], index: int) -> int:
        """Handle the option at tokens[index] and return how many tokens it used."""
        token = tokens[index]
        next_token = tokens[index + 1] if index + 1 < len(tokens) else None

        if spec.arity is Arity.NONE:
            self._record_presence(token)
            return 1

        if spec.arity is Arity.LIST:
            # Help still wins over a list with no values
            if next_token is not None and self._is_help_token(next_token):
                return 1
            if next_token is None or self.options.is_option(next_token):
                raise MissingListArgumentError(token)
            self._start_list(token)
            return 1

        if self.options.is_long_form(spec, token):
            key_token, value = OptionTable.split_long(token)
            consumed = 1
        elif self.options.is_short_form(spec, token):
            key_token = token
            supplied = next_token is not None and not self.options.is_option(next_token)
            value = next_token if supplied else ""
            consumed = 2 if supplied else 1
        else:
            raise AmbiguousOptionFormError(token)

        if not value and spec.arity is Arity.REQUIRED and self.strict_required:
            raise RequiredArgumentMissingError(key_token)

        self._record(key_token, value)
        return consumed

    def _is_help_token(self, token: str) -> bool:
        spec = self.options.find(token)
        return spec is not None and spec.arity is Arity.NONE and spec.is_help

    def _key_for(self, token: str) -> str:
        key = self.options.canonical_key(token)
        if key is None:
            raise UnkeyableOptionError(token)
        return key

    def _record(self, token: str, value: str) -> None:
        self.result.add(self._key_for(token), value)

    def _record_presence(self, token: str) -> None:
        self.result.touch(self._key_for(token))

    def set(self, name: str, value: str) -> None:
        """Append a value for the named option, as if it had been parsed."""
        self._record(name, value)

    def has(self, name: str) -> bool:
        """Check if the named option was supplied."""
        key = self.options.canonical_key(name)
        return key is not None and key in self.result

    def get(self, name: str) -> str | None:
        """Return the first value of the named option, or None."""
        key = self.options.canonical_key(name)
        if key is None:
            return None
        return self.result.first(key)

    def get_all(self, name: str) -> ValueList:
        """Return every value supplied for the named option, in order."""
        key = self.options.canonical_key(name)
        if key is None:
            return []
        return list(self.result.get(key, []))

    def usage(self, program: str | None = None) -> str:
        """Render the usage message for this parser's options."""
        return render_usage(self.options, program or PathHelper.program_name())
