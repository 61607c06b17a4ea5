import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys
    from pathlib import Path

    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


class SystemExitCalled(Exception):
    """Custom exception to simulate sys.exit behavior in tests"""

    def __init__(self, code):
        self.code = code
        super().__init__(f"sys.exit({code}) called")


@pytest.fixture
def mock_system_exit(mocker):
    """
    Fixture to mock sys.exit for testing exit behavior.

    Usage:
        def test_exit_behavior(mock_system_exit):
            with pytest.raises(SystemExitCalled) as exc_info:
                function_that_calls_sys_exit()
            assert exc_info.value.code == 1
    """

    def side_effect(code):
        raise SystemExitCalled(code)

    return mocker.patch("sys.exit", side_effect=side_effect)


@pytest.fixture
def option_table():
    """Fixture with one option of every arity, plus help."""
    from optline.option_table import Arity, OptionSpec, OptionTable

    return OptionTable(
        [
            OptionSpec("-?", "--help", "", Arity.NONE, "Print program usage."),
            OptionSpec("-f", "--flag", "", Arity.NONE, "A plain flag."),
            OptionSpec("-n", "--name", "name", Arity.REQUIRED, "A required value."),
            OptionSpec("-l", "--level", "n", Arity.OPTIONAL, "An optional value."),
            OptionSpec("-i", "--items", "item", Arity.LIST, "One or more items."),
            OptionSpec("-x", "", "", Arity.NONE, "Short form only."),
            OptionSpec("", "--long-only", "value", Arity.REQUIRED, "Long form only."),
        ]
    )


@pytest.fixture
def parser(option_table, monkeypatch):
    """Fixture for a non-strict parser over the sample option table."""
    from optline.parser import Parser

    monkeypatch.delenv("OPTLINE_STRICT_REQUIRED", raising=False)
    return Parser(option_table)
