"""Parse result container for optline."""

from typing import List

from .types import KeyValueStore


class ParseResult:
    """Class to hold the options that were supplied and their values."""

    def __init__(self, store: KeyValueStore | None = None):
        self.values_by_key: KeyValueStore = {
            key: list(values) for key, values in (store or {}).items()
        }

    def __contains__(self, key):
        """Allow checking if an option was supplied using 'in' operator."""
        return key in self.values_by_key

    def __getitem__(self, key):
        """Allow dictionary-style access to option values."""
        return self.values_by_key[key]

    def __len__(self):
        return len(self.values_by_key)

    def __eq__(self, other):
        """Allow comparison with a plain dictionary."""
        if isinstance(other, ParseResult):
            return self.values_by_key == other.values_by_key
        if isinstance(other, dict):
            return self.values_by_key == other
        return NotImplemented

    def __repr__(self):
        return f"ParseResult({self.values_by_key!r})"

    def add(self, key: str, value: str) -> None:
        """Append a value to the option's value list."""
        self.values_by_key.setdefault(key, []).append(value)

    def touch(self, key: str) -> None:
        """Mark an option as supplied without adding a value."""
        self.values_by_key.setdefault(key, [])

    def get(self, key, default=None):
        """Allow .get() method access to value lists."""
        return self.values_by_key.get(key, default)

    def first(self, key: str) -> str | None:
        """Return the first value for the key, or None if there is none."""
        values = self.values_by_key.get(key)
        return values[0] if values else None

    def keys(self):
        return self.values_by_key.keys()

    def values(self):
        return self.values_by_key.values()

    def items(self):
        return self.values_by_key.items()

    def describe(self) -> List[str]:
        """
        Render one 'key: value, value' line per supplied option.

        Useful to check that a command line was read the way it was meant to
        be. Options supplied without values render as 'key: '.
        """
        return [f"{key}: {', '.join(values)}" for key, values in self.items()]
