"""Rich console implementation of `DisplaySink`."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from letscrate.core.services.layout import ERROR_PREFIX


class ConsoleDisplay:
    """Result lines to stdout, error lines to stderr.

    Text is printed literally (no markup, no highlighting): file and crate
    names may contain square brackets.
    """

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
        *,
        width: int | None = None,
    ) -> None:
        self._console = console or Console(highlight=False, soft_wrap=True)
        self._err_console = err_console or Console(stderr=True, highlight=False, soft_wrap=True)
        self._width = width

    @property
    def width(self) -> int | None:
        if self._width is not None:
            return self._width
        if self._console.is_terminal:
            return self._console.width
        return None

    def line(self, text: str, *, style: str | None = None) -> None:
        self._console.print(Text(text, style=style or ""))

    def error_line(self, text: str) -> None:
        self._err_console.print(Text.assemble((ERROR_PREFIX, "bold red"), text))
