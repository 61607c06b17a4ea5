"""Usage text rendering for optline."""

from typing import Iterable

from .option_table import OptionSpec

ARGUMENT_NAME_LENGTH = 32
"""Width reserved for '=<value_name>', including the terminator slot."""


def format_argument(spec: OptionSpec) -> str:
    """Return '=<value_name>' for the option, or '' if it has no value name."""
    if not spec.value_name:
        return ""
    return f"=<{spec.value_name}>"[: ARGUMENT_NAME_LENGTH - 1]


def render_usage(options: Iterable[OptionSpec], program: str) -> str:
    """
    Render the program usage message.

    Options are listed in declaration order, each as a
    ``<short>, <long>[=<value_name>]`` line followed by its indented
    description.
    """
    lines = [f"Usage: {program} [option]...", "", "Options:"]
    for index, spec in enumerate(options):
        if index:
            lines.append("")
        lines.append(f"    {spec.short_form}, {spec.long_form}{format_argument(spec)}")
        lines.append(f"        {spec.description}")
    return "\n".join(lines) + "\n"


def print_usage(options: Iterable[OptionSpec], program: str) -> None:
    """Print the usage message to stdout."""
    print(render_usage(options, program), end="")
