"""Per-run state shared by the dispatcher, the actions and the formatter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from letscrate.adapters.letscrate_api import LetsCrateApi
    from letscrate.core.interfaces.display import DisplaySink
    from letscrate.core.services.catalog_cache import CatalogCache
    from letscrate.core.services.options import RunOptions
    from letscrate.core.services.resolver import Resolver


@dataclass
class ActionContext:
    """Cursor and captured names for one run.

    `arguments` is the list as typed; `resolved` is what the action is
    actually invoked with. `captured_names[i]` is the name of `resolved[i]`
    read from the catalog before a destructive call.
    """

    arguments: list[str] = field(default_factory=list)
    resolved: list[str] = field(default_factory=list)
    cursor: int = 0
    captured_names: list[str] = field(default_factory=list)
    crate_id: str | None = None
    target_name: str | None = None
    failures: int = 0

    def current_argument(self, default: str = "") -> str:
        """The argument to show the user for the item at the cursor."""

        i = self.cursor
        if len(self.arguments) == len(self.resolved) and i < len(self.arguments):
            return self.arguments[i]
        if i < len(self.captured_names) and self.captured_names[i]:
            return self.captured_names[i]
        if i < len(self.resolved):
            return self.resolved[i]
        return default

    def current_name(self) -> str:
        """Pre-mutation name of the item at the cursor."""

        i = self.cursor
        if i < len(self.captured_names) and self.captured_names[i]:
            return self.captured_names[i]
        return self.current_argument()


@dataclass
class ActionRuntime:
    """Collaborators handed to every action and formatter."""

    api: "LetsCrateApi"
    catalog: "CatalogCache"
    resolver: "Resolver"
    options: "RunOptions"
    sink: "DisplaySink"
    context: ActionContext
    share_url_base: str = "http://lts.cr/"

    def link(self, short_code: str) -> str:
        return f"{self.share_url_base}{short_code}"
