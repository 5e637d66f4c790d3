"""Run options.

The flag parser hands the engine one explicit, validated record instead of a
loose bag of values. Validation happens here, before any transport exists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from letscrate.core.domain.models import Credentials, ResolutionPolicy
from letscrate.core.errors import (
    InvalidCredentialsFormat,
    MissingCrateTarget,
    MissingCredentials,
    TooManyActionsSelected,
)


class Action(str, Enum):
    TEST_CREDENTIALS = "test-credentials"
    UPLOAD_FILE = "upload-file"
    DELETE_FILE = "delete-file"
    LIST_FILES = "list-files"
    SHOW_FILE = "show-file"
    SEARCH_FILES = "search-files"
    CREATE_CRATE = "create-crate"
    LIST_CRATES = "list-crates"
    SEARCH_CRATES = "search-crates"
    RENAME_CRATE = "rename-crate"
    DELETE_CRATE = "delete-crate"


CRATE_TARGET_ACTIONS = frozenset({Action.UPLOAD_FILE, Action.RENAME_CRATE})


@dataclass
class RunOptions:
    """Everything one invocation needs, already validated."""

    action: Action
    credentials: Credentials
    arguments: list[str] = field(default_factory=list)
    crate_target: str | None = None
    policy: ResolutionPolicy = ResolutionPolicy.EXACT
    quiet: bool = False


def parse_credentials(login: str | None, fallback: Credentials | None = None) -> Credentials:
    if login is None:
        if fallback is None:
            raise MissingCredentials()
        return fallback
    credentials = Credentials.parse(login)
    if credentials is None:
        raise InvalidCredentialsFormat(login)
    return credentials


def build_run_options(
    selected: Sequence[Action],
    *,
    login: str | None,
    arguments: Sequence[str] = (),
    crate_target: str | None = None,
    regex: bool = False,
    quiet: bool = False,
    fallback_credentials: Credentials | None = None,
) -> RunOptions | None:
    """Validate the parsed flags; None means no action was selected.

    Order of checks: action count, then credentials, then crate target.
    """

    if len(selected) > 1:
        raise TooManyActionsSelected(len(selected))
    if not selected:
        return None

    action = selected[0]
    credentials = parse_credentials(login, fallback_credentials)

    if action in CRATE_TARGET_ACTIONS and not (crate_target or "").strip():
        raise MissingCrateTarget(action.value)

    return RunOptions(
        action=action,
        credentials=credentials,
        arguments=list(arguments),
        crate_target=crate_target if action in CRATE_TARGET_ACTIONS else None,
        policy=ResolutionPolicy.from_bool(regex),
        quiet=quiet,
    )
