"""Command-line entry point.

Flag parsing lives here and nowhere else: the command turns flags into a
validated `RunOptions` and hands it to the dispatcher. Exactly one action
flag may be given per run.
"""

from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console

from letscrate.adapters.console_display import ConsoleDisplay
from letscrate.adapters.http_client import HttpTransport, build_client
from letscrate.adapters.letscrate_api import LetsCrateApi
from letscrate.cli.ui_components import BANNER, print_fatal, version_text
from letscrate.core.config import AppSettings
from letscrate.core.domain.models import Credentials
from letscrate.core.errors import LetsCrateError
from letscrate.core.log import configure_logging
from letscrate.core.services.dispatcher import Dispatcher
from letscrate.core.services.options import Action, build_run_options

app = typer.Typer(
    add_completion=False,
    help=BANNER,
    context_settings={"help_option_names": ["-h", "--help"]},
)

_console = Console()


def build_transport(settings: AppSettings) -> HttpTransport:
    return HttpTransport(build_client(settings))


def _settings_credentials(settings: AppSettings) -> Credentials | None:
    if settings.username and settings.password:
        return Credentials(username=settings.username, password=settings.password)
    return None


def _version_callback(value: bool) -> None:
    if value:
        _console.print(version_text())
        raise typer.Exit()


@app.command()
def run(
    ctx: typer.Context,
    arguments: Optional[List[str]] = typer.Argument(  # noqa: B008
        None,
        metavar="[NAME|ID|FILE]...",
        help="Files to upload, or names/IDs of files and crates.",
        show_default=False,
    ),
    login: Optional[str] = typer.Option(
        None, "--login", "-l", metavar="USERNAME:PASSWORD", help="Login with this username and password."
    ),
    upload: Optional[str] = typer.Option(
        None, "--upload", "-u", metavar="CRATE", help="Upload files to crate (name or ID).", rich_help_panel="Files"
    ),
    delete: bool = typer.Option(False, "--delete", "-d", help="Delete files with names.", rich_help_panel="Files"),
    list_files: bool = typer.Option(False, "--list", "-a", help="List all files by crate.", rich_help_panel="Files"),
    search: bool = typer.Option(False, "--search", "-s", help="Search for files with names.", rich_help_panel="Files"),
    show: bool = typer.Option(False, "--id", "-i", help="Show files with IDs.", rich_help_panel="Files"),
    new_crate: bool = typer.Option(
        False, "--newcrate", "-N", help="Create new crates with names.", rich_help_panel="Crates"
    ),
    list_crates: bool = typer.Option(
        False, "--listcrates", "-A", help="List all crates (or those matching names).", rich_help_panel="Crates"
    ),
    search_crates: bool = typer.Option(
        False, "--searchcrates", "-S", help="Search for crates with names.", rich_help_panel="Crates"
    ),
    rename: Optional[str] = typer.Option(
        None, "--renamecrate", "-R", metavar="CRATE", help="Rename crate to name.", rich_help_panel="Crates"
    ),
    delete_crate: bool = typer.Option(
        False, "--deletecrate", "-D", help="Delete crates with names.", rich_help_panel="Crates"
    ),
    regexp: bool = typer.Option(False, "--regexp", "-r", help="Treat all names as regular expressions."),
    test: bool = typer.Option(False, "--test", "-t", help="Only test the credentials."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print results."),
    debug: bool = typer.Option(False, "--debug", help="Verbose diagnostics on stderr."),
    version: bool = typer.Option(  # noqa: ARG001
        False, "--version", "-v", callback=_version_callback, is_eager=True, help="Output version."
    ),
) -> None:
    """LetsCrate command-line client."""

    settings = AppSettings()
    configure_logging("DEBUG" if debug else settings.log_level)
    display = ConsoleDisplay(width=settings.terminal_width)

    flags = (
        (Action.TEST_CREDENTIALS, test),
        (Action.UPLOAD_FILE, upload is not None),
        (Action.DELETE_FILE, delete),
        (Action.LIST_FILES, list_files),
        (Action.SEARCH_FILES, search),
        (Action.SHOW_FILE, show),
        (Action.CREATE_CRATE, new_crate),
        (Action.LIST_CRATES, list_crates),
        (Action.SEARCH_CRATES, search_crates),
        (Action.RENAME_CRATE, rename is not None),
        (Action.DELETE_CRATE, delete_crate),
    )
    selected = [action for action, enabled in flags if enabled]

    try:
        options = build_run_options(
            selected,
            login=login,
            arguments=arguments or [],
            crate_target=upload if upload is not None else rename,
            regex=regexp,
            quiet=quiet,
            fallback_credentials=_settings_credentials(settings),
        )
    except LetsCrateError as exc:
        print_fatal(display, exc)
        raise typer.Exit(1) from exc

    if options is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    with build_transport(settings) as transport:
        api = LetsCrateApi(transport, options.credentials)
        dispatcher = Dispatcher(api, display, share_url_base=settings.share_url_base)
        try:
            dispatcher.run(options)
        except LetsCrateError as exc:
            print_fatal(display, exc)
            raise typer.Exit(1) from exc
