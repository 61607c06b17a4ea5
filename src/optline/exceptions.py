"""Custom exceptions for optline."""


class OptlineError(Exception):
    """Base exception for optline errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnknownOptionError(OptlineError):
    """Raised when a token does not match any declared option."""

    def __init__(self, token: str):
        super().__init__(f"Invalid option '{token}'")
        self.token = token


class MissingListArgumentError(OptlineError):
    """Raised when a list option is not followed by at least one value."""

    def __init__(self, token: str):
        super().__init__(
            f"No argument after option '{token}' with list_argument type"
        )
        self.token = token


class AmbiguousOptionFormError(OptlineError):
    """Raised when a matched token is neither the long nor the short form."""

    def __init__(self, token: str):
        super().__init__(
            f"Unable to determine if '{token}' is a long or short option"
        )
        self.token = token


class UnkeyableOptionError(OptlineError):
    """Raised when no result key can be derived for an option."""

    def __init__(self, option: str):
        super().__init__(f"Unable to derive a key for option '{option}'")
        self.option = option


class RequiredArgumentMissingError(OptlineError):
    """Raised in strict mode when a required option is given no value."""

    def __init__(self, token: str):
        super().__init__(f"Option '{token}' requires an argument")
        self.token = token
