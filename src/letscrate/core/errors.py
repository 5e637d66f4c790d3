"""Error hierarchy for the client.

Fatal errors abort the run before any batch work starts; per-item errors
(`RemoteFailure`, `InvalidIdentifierFormat`, `InvalidPattern`) are reported
against one argument while the batch keeps going.
"""

from __future__ import annotations

from letscrate.core.domain.models import ResourceKind

RTFM_HINT = "Use the -h flag for help, or read the README."
LOGIN_HINT = 'Use the "-l" switch to specify your login credentials'


class LetsCrateError(Exception):
    """Base exception for every error the client reports to the user."""

    def __init__(self, message: str, argument: str = "") -> None:
        self.message = message
        self.argument = argument
        super().__init__(message)


class ConfigError(LetsCrateError):
    """Invalid command-line configuration, detected before any network call."""

    hint: str = RTFM_HINT


class TooManyActionsSelected(ConfigError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            "More than one action was selected. Please select only one action.",
            str(count),
        )


class MissingCredentials(ConfigError):
    hint = LOGIN_HINT

    def __init__(self) -> None:
        super().__init__("You need an account to use the LetsCrate API.", "NoLoginError")


class InvalidCredentialsFormat(ConfigError):
    def __init__(self, value: str) -> None:
        super().__init__(
            'Credentials invalid, please input them in the format "username:password"',
            value,
        )


class MissingCrateTarget(ConfigError):
    def __init__(self, action: str) -> None:
        super().__init__("This action needs a crate name or ID.", action)


class MissingArguments(ConfigError):
    def __init__(self, action: str) -> None:
        super().__init__("This action needs at least one name, ID or file.", action)


class InvalidIdentifierFormat(LetsCrateError):
    """A value that should be a 5 digit identifier is not one."""

    _MESSAGES = {
        ResourceKind.FILE: "A file ID is a 5 digit number. Use -a to list your files's IDs.",
        ResourceKind.CRATE: "A crate ID is a 5 digit number. Use -A to list your crates's IDs.",
    }

    def __init__(self, value: str, kind: ResourceKind) -> None:
        self.kind = kind
        super().__init__(self._MESSAGES[kind], value)


class ResolutionError(LetsCrateError):
    """Base for name-to-identifier resolution failures."""

    def __init__(self, message: str, query: str, kind: ResourceKind) -> None:
        self.query = query
        self.kind = kind
        super().__init__(message, query)


class NotFound(ResolutionError):
    def __init__(self, query: str, kind: ResourceKind) -> None:
        super().__init__(f"No {kind.plural} were found that match that name.", query, kind)


class Ambiguous(ResolutionError):
    def __init__(self, query: str, kind: ResourceKind) -> None:
        super().__init__(
            f"More than 1 {kind.value} matched that name. Please make your query more specific.",
            query,
            kind,
        )


class ResolutionMismatch(ResolutionError):
    """Exact resolution produced fewer identifiers than names, but not zero."""

    def __init__(self, query: str, kind: ResourceKind, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Only {found} of {expected} {kind.plural} could be matched by name. "
            "Pass either names or IDs, not both.",
            query,
            kind,
        )


class InvalidPattern(ResolutionError):
    def __init__(self, query: str, kind: ResourceKind, reason: str) -> None:
        super().__init__(f"Invalid regular expression ({reason}).", query, kind)


class RemoteFailure(LetsCrateError):
    """The service answered with a failure envelope (or could not be reached)."""
