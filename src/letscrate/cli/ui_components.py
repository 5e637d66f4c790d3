"""CLI UI components (Rich).

Why separate components:
- Keeps command wiring apart from visual details.
- Fatal errors and the version banner look the same wherever they are raised.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from letscrate.core.config import API_VERSION, VERSION
from letscrate.core.errors import ConfigError, LetsCrateError
from letscrate.core.interfaces.display import DisplaySink
from letscrate.core.services.layout import error_text

BANNER = (
    "Usage: letscrate <-l username:password> [options] file1 file2 ...\n"
    "   or: letscrate <-l username:password> [options] name1 name2 ..."
)


def version_text() -> Text:
    title = Text(f"LetsCrate v{VERSION}", style="bold cyan")
    return Text.assemble(title, f" (API Version {API_VERSION})")


def print_fatal(display: DisplaySink, error: LetsCrateError, *, err_console: Console | None = None) -> None:
    """Report an error that aborts the run, plus a hint for configuration errors."""

    if error.argument:
        display.error_line(error_text(error.message, error.argument, display.width))
    else:
        display.error_line(error.message)
    if isinstance(error, ConfigError):
        console = err_console or Console(stderr=True, highlight=False)
        console.print(Text(error.hint, style="dim"))
