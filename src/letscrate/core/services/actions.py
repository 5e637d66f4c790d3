"""Action registry.

A closed table: each selectable action maps to the remote call it makes per
argument and the formatter that renders the result, plus flags describing
what its positional arguments denote.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping

from letscrate.core.domain.models import ResourceKind
from letscrate.core.interfaces.transport import RawResponse
from letscrate.core.services import formatter
from letscrate.core.services.context import ActionRuntime
from letscrate.core.services.options import Action


class ArgumentKind(str, Enum):
    """What an action's positional arguments denote."""

    NONE = "none"
    CRATE_NAMES = "crate-names"
    FILE_IDENTIFIERS = "file-identifiers"

    @property
    def resource(self) -> ResourceKind | None:
        if self is ArgumentKind.CRATE_NAMES:
            return ResourceKind.CRATE
        if self is ArgumentKind.FILE_IDENTIFIERS:
            return ResourceKind.FILE
        return None


Invoke = Callable[[ActionRuntime, "str | None"], RawResponse]
Format = Callable[[ActionRuntime, RawResponse], None]


@dataclass(frozen=True)
class ActionSpec:
    invoke: Invoke
    format: Format
    requires: ArgumentKind = ArgumentKind.NONE
    takes_arguments: bool = True
    needs_arguments: bool = True
    crate_target: bool = False
    captures_names: bool = False


def _test_credentials(runtime: ActionRuntime, _: str | None) -> RawResponse:
    return runtime.api.authenticate()


def _upload_file(runtime: ActionRuntime, path: str | None) -> RawResponse:
    return runtime.api.upload_file(path or "", runtime.context.crate_id or "")


def _delete_file(runtime: ActionRuntime, file_id: str | None) -> RawResponse:
    return runtime.api.destroy_file(file_id or "")


def _list_files(runtime: ActionRuntime, _: str | None) -> RawResponse:
    return runtime.api.list_files()


def _show_file(runtime: ActionRuntime, file_id: str | None) -> RawResponse:
    return runtime.api.show_file(file_id or "")


def _search_files(runtime: ActionRuntime, name: str | None) -> RawResponse:
    return runtime.resolver.search(name or "", ResourceKind.FILE, runtime.options.policy)


def _create_crate(runtime: ActionRuntime, name: str | None) -> RawResponse:
    return runtime.api.add_crate(name or "")


def _list_crates(runtime: ActionRuntime, name: str | None) -> RawResponse:
    if name is None:
        return runtime.api.list_crates()
    return runtime.resolver.search(name, ResourceKind.CRATE, runtime.options.policy)


def _search_crates(runtime: ActionRuntime, name: str | None) -> RawResponse:
    return runtime.resolver.search(name or "", ResourceKind.CRATE, runtime.options.policy)


def _rename_crate(runtime: ActionRuntime, name: str | None) -> RawResponse:
    return runtime.api.rename_crate(runtime.context.crate_id or "", name or "")


def _delete_crate(runtime: ActionRuntime, crate_id: str | None) -> RawResponse:
    return runtime.api.destroy_crate(crate_id or "")


ACTIONS: Mapping[Action, ActionSpec] = {
    Action.TEST_CREDENTIALS: ActionSpec(
        invoke=_test_credentials,
        format=formatter.format_test_credentials,
        takes_arguments=False,
        needs_arguments=False,
    ),
    Action.UPLOAD_FILE: ActionSpec(
        invoke=_upload_file,
        format=formatter.format_upload_file,
        crate_target=True,
    ),
    Action.DELETE_FILE: ActionSpec(
        invoke=_delete_file,
        format=formatter.format_deleted,
        requires=ArgumentKind.FILE_IDENTIFIERS,
        captures_names=True,
    ),
    Action.LIST_FILES: ActionSpec(
        invoke=_list_files,
        format=formatter.format_list_files,
        takes_arguments=False,
        needs_arguments=False,
    ),
    Action.SHOW_FILE: ActionSpec(
        invoke=_show_file,
        format=formatter.format_show_file,
    ),
    Action.SEARCH_FILES: ActionSpec(
        invoke=_search_files,
        format=formatter.format_search_files,
    ),
    Action.CREATE_CRATE: ActionSpec(
        invoke=_create_crate,
        format=formatter.format_create_crate,
    ),
    Action.LIST_CRATES: ActionSpec(
        invoke=_list_crates,
        format=formatter.format_list_crates,
        needs_arguments=False,
    ),
    Action.SEARCH_CRATES: ActionSpec(
        invoke=_search_crates,
        format=formatter.format_search_crates,
    ),
    Action.RENAME_CRATE: ActionSpec(
        invoke=_rename_crate,
        format=formatter.format_rename_crate,
        crate_target=True,
        captures_names=True,
    ),
    Action.DELETE_CRATE: ActionSpec(
        invoke=_delete_crate,
        format=formatter.format_deleted,
        requires=ArgumentKind.CRATE_NAMES,
        captures_names=True,
    ),
}
