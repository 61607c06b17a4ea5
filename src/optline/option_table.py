"""Option declarations and lookup for optline."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from .types import LongFormParts

HELP_LONG_FORM = "--help"
HELP_SHORT_FORM = "-?"


class Arity(Enum):
    """How many values an option consumes."""

    NONE = "none"
    REQUIRED = "required"
    OPTIONAL = "optional"
    LIST = "list"


@dataclass(frozen=True)
class OptionSpec:
    """A single declared option.

    ``short_form`` looks like ``-v`` and ``long_form`` like ``--verbose``;
    either may be empty, but not both. ``value_name`` is only used when
    rendering usage text.
    """

    short_form: str = ""
    long_form: str = ""
    value_name: str = ""
    arity: Arity = Arity.NONE
    description: str = ""

    @property
    def key(self) -> str | None:
        """Result key: long form without '--', else short form without '-'."""
        if self.long_form:
            return self.long_form[2:]
        if self.short_form:
            return self.short_form[1:]
        return None

    @property
    def is_help(self) -> bool:
        """Check if this is the built-in help option."""
        return self.long_form == HELP_LONG_FORM or self.short_form == HELP_SHORT_FORM


class OptionTable:
    """Ordered, read-only catalog of the options a program accepts."""

    def __init__(self, options: Iterable[OptionSpec] = ()):
        self._options = tuple(options)

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __getitem__(self, index: int) -> OptionSpec:
        return self._options[index]

    @staticmethod
    def split_long(token: str) -> LongFormParts:
        """
        Split a long option token at the first '='.

        Returns ``(token, "")`` when there is no '=' in the token.
        """
        option, sep, value = token.partition("=")
        if not sep:
            return token, ""
        return option, value

    @staticmethod
    def extract_option(token: str) -> str:
        """Return the '--option' half of '--option=value'."""
        return OptionTable.split_long(token)[0]

    @staticmethod
    def is_short_form(spec: OptionSpec | None, token: str) -> bool:
        """Check if the token is the short form of the given option."""
        return bool(spec and spec.short_form and token == spec.short_form)

    @staticmethod
    def is_long_form(spec: OptionSpec | None, token: str) -> bool:
        """Check if the token is the long form of the given option, with or without '=value'."""
        if not spec or not spec.long_form:
            return False
        return token == spec.long_form or OptionTable.extract_option(token) == spec.long_form

    def find(self, token: str) -> OptionSpec | None:
        """Return the first declared option the token refers to."""
        for spec in self._options:
            if self.is_short_form(spec, token) or self.is_long_form(spec, token):
                return spec
        return None

    def is_option(self, token: str) -> bool:
        """Check if the token is a recognized short or long option."""
        return self.find(token) is not None

    def resolve(self, name: str) -> OptionSpec | None:
        """
        Find the option for a name that may or may not carry its dashes.

        Undashed names are tried as long options first ('--name'), then as
        short options ('-name').
        """
        if not name:
            return None
        if name.startswith("-"):
            return self.find(name)
        return self.find(f"--{name}") or self.find(f"-{name}")

    def canonical_key(self, name: str) -> str | None:
        """Convert an option name to the key used in parse results."""
        spec = self.resolve(name)
        return spec.key if spec else None
