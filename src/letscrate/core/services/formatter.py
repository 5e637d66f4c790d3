"""Response formatting.

Each action has a formatter that reads the raw envelope, tells success from
failure and writes one display line (or block) per item. Failures are
reported against the argument the user typed, not the resolved identifier.
Delete and rename responses do not echo the old name, so those formatters
use the names captured in the `ActionContext` before the call.
"""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Any, Sequence, TypeVar

from pydantic import BaseModel, ValidationError

from letscrate.core.domain.models import Catalog, Crate, File, ResourceKind
from letscrate.core.errors import NotFound
from letscrate.core.interfaces.transport import RawResponse
from letscrate.core.services.catalog_cache import failure_message, is_failure
from letscrate.core.services.context import ActionRuntime
from letscrate.core.services.layout import error_text, info_line

logger = logging.getLogger(__name__)

VALID_CREDENTIALS = "The credentials are valid"
INVALID_CREDENTIALS = "The credentials are invalid"
EMPTY_CRATE = "* Crate is empty."
UNEXPECTED_RESPONSE = "Unexpected response from server."

ModelT = TypeVar("ModelT", bound=BaseModel)


def report_error(runtime: ActionRuntime, message: str, argument: str | None = None) -> None:
    context = runtime.context
    if argument is None:
        argument = context.current_argument(default=runtime.options.action.value)
    context.failures += 1
    logger.debug("item %d failed: %s <%s>", context.cursor, message, argument)
    runtime.sink.error_line(error_text(message, argument, runtime.sink.width))


def _check(runtime: ActionRuntime, response: RawResponse) -> bool:
    """Report a failure envelope; True when the response is a success."""

    if is_failure(response):
        report_error(runtime, failure_message(response))
        return False
    return True


def _payload(runtime: ActionRuntime, response: RawResponse, key: str, model: type[ModelT]) -> ModelT | None:
    raw: Any = response.get(key) if isinstance(response, dict) else None
    try:
        return model.model_validate(raw)
    except ValidationError:
        report_error(runtime, UNEXPECTED_RESPONSE)
        return None


def _info(runtime: ActionRuntime, name: str, short_code: str, identifier: str, *, prefix: str = "") -> None:
    runtime.sink.line(info_line(name, runtime.link(short_code), identifier, runtime.sink.width, prefix=prefix))


def format_test_credentials(runtime: ActionRuntime, response: RawResponse) -> None:
    if isinstance(response, dict) and "success" in response.values():
        runtime.sink.line(VALID_CREDENTIALS)
    else:
        report_error(runtime, INVALID_CREDENTIALS, f"User:{runtime.options.credentials.username}")


def format_upload_file(runtime: ActionRuntime, response: RawResponse) -> None:
    if not _check(runtime, response):
        return
    uploaded = _payload(runtime, response, "file", File)
    if uploaded is None:
        return
    local_name = PurePath(runtime.context.current_argument()).name or uploaded.name
    _info(runtime, local_name, uploaded.short_code, uploaded.id)


def format_deleted(runtime: ActionRuntime, response: RawResponse) -> None:
    if not _check(runtime, response):
        return
    runtime.sink.line(f"{runtime.context.current_name()} deleted")


def format_list_files(runtime: ActionRuntime, response: RawResponse) -> None:
    if not _check(runtime, response):
        return
    try:
        catalog = Catalog.model_validate({"crates": response.get("crates") or []})  # type: ignore[union-attr]
    except (AttributeError, ValidationError):
        report_error(runtime, UNEXPECTED_RESPONSE)
        return
    for crate in catalog.crates:
        _info(runtime, crate.name, crate.short_code, crate.id)
        if crate.files:
            for file in crate.files:
                _info(runtime, file.name, file.short_code, file.id, prefix="* ")
        else:
            runtime.sink.line(EMPTY_CRATE)
        runtime.sink.line("")


def format_show_file(runtime: ActionRuntime, response: RawResponse) -> None:
    if not _check(runtime, response):
        return
    item = _payload(runtime, response, "item", File)
    if item is not None:
        _info(runtime, item.name, item.short_code, item.id)


def _format_matches(runtime: ActionRuntime, matches: Sequence[Crate | File], kind: ResourceKind) -> None:
    query = runtime.context.current_argument()
    if not matches:
        report_error(runtime, NotFound(query, kind).message, query)
        return
    runtime.sink.line(f"{query}:", style="green")
    for entry in matches:
        _info(runtime, entry.name, entry.short_code, entry.id)
    runtime.sink.line("")


def format_search_files(runtime: ActionRuntime, response: RawResponse) -> None:
    _format_matches(runtime, response if isinstance(response, list) else [], ResourceKind.FILE)


def format_search_crates(runtime: ActionRuntime, response: RawResponse) -> None:
    _format_matches(runtime, response if isinstance(response, list) else [], ResourceKind.CRATE)


def format_create_crate(runtime: ActionRuntime, response: RawResponse) -> None:
    if not _check(runtime, response):
        return
    crate = _payload(runtime, response, "crate", Crate)
    if crate is not None:
        _info(runtime, crate.name, crate.short_code, crate.id)


def format_list_crates(runtime: ActionRuntime, response: RawResponse) -> None:
    # Filtering by name returns the search matches directly.
    if isinstance(response, list):
        format_search_crates(runtime, response)
        return
    if not _check(runtime, response):
        return
    try:
        catalog = Catalog.model_validate({"crates": response.get("crates") or []})
    except ValidationError:
        report_error(runtime, UNEXPECTED_RESPONSE)
        return
    for crate in catalog.crates:
        _info(runtime, crate.name, crate.short_code, crate.id)


def format_rename_crate(runtime: ActionRuntime, response: RawResponse) -> None:
    if not _check(runtime, response):
        return
    context = runtime.context
    old_name = context.target_name or context.crate_id or ""
    new_name = context.current_argument()
    crate_id = context.crate_id or ""
    if isinstance(response, dict) and isinstance(response.get("crate"), dict):
        crate = _payload(runtime, response, "crate", Crate)
        if crate is None:
            return
        new_name, crate_id = crate.name, crate.id
    runtime.sink.line(f"renamed {old_name} ({crate_id}) to {new_name}")
