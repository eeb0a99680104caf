"""Up command for moving to the parent directory.

This module provides `updir up` and its hidden shorthands `..`, `...`
and `......`. A separate process cannot change its parent shell's working
directory, so the resulting location is printed (``--print-path``) for
the shell functions emitted by `updir shell-init` to cd into.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from updir.cli.display import create_listing_table, print_navigation_result
from updir.core.config import ConfigError, UpdirConfig, load_config_or_default
from updir.navigation.confirm import select_confirm
from updir.navigation.listing import list_directory
from updir.navigation.models import NavigationStatus
from updir.navigation.navigator import navigate_up_levels
from updir.navigation.session import LocationSession
from updir.utils.formatting import console, print_error, print_warning

logger = logging.getLogger(__name__)

# Shorthand command name -> number of levels
ALIASES: dict[str, int] = {
    "..": 1,
    "...": 2,
    "......": 5,
}

PathOption = Annotated[
    Path | None,
    typer.Option(
        "--path",
        "-p",
        help="Start from this directory instead of the current one.",
        exists=True,
        file_okay=False,
    ),
]
ForceOption = Annotated[
    bool,
    typer.Option("--force", "-f", help="Skip confirmation prompt."),
]
DryRunOption = Annotated[
    bool,
    typer.Option("--dry-run", "-n", help="Show what would change without moving."),
]
NoListOption = Annotated[
    bool,
    typer.Option("--no-list", help="Do not list the new location."),
]
ShowAllOption = Annotated[
    bool,
    typer.Option("--all", "-a", help="Include hidden entries in the listing."),
]
PrintPathOption = Annotated[
    bool,
    typer.Option("--print-path", help="Print only the resulting location."),
]


def _load_settings() -> UpdirConfig:
    try:
        return load_config_or_default()
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e


def _print_listing(location: Path, *, show_hidden: bool, limit: int | None) -> None:
    try:
        entries = list_directory(location, show_hidden=show_hidden, limit=limit)
    except OSError as e:
        print_warning(escape(f"Cannot list {location}: {e}"))
        return
    console.print(create_listing_table(str(location), entries))


def run_up(
    ctx: typer.Context,
    levels: int,
    *,
    path: Path | None,
    force: bool,
    dry_run: bool,
    no_list: bool,
    show_all: bool,
    print_path: bool,
) -> None:
    """Navigate up and report the outcome.

    Exits with code 1 only when the location change itself fails.
    """
    settings = _load_settings()
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))

    session = LocationSession(path) if path is not None else LocationSession.from_cwd()
    confirm = select_confirm(force=force, dry_run=dry_run, ask=settings.confirm)
    result = navigate_up_levels(session, levels, confirm)
    logger.debug("Navigation finished: %s", result)

    if result.failed:
        print_navigation_result(result)
        raise typer.Exit(code=1)

    if print_path:
        typer.echo(str(result.location))
        return

    if not quiet or result.status != NavigationStatus.NAVIGATED:
        print_navigation_result(result)

    if dry_run or no_list or not settings.list_after:
        return

    _print_listing(
        Path(result.location),
        show_hidden=show_all or settings.show_hidden,
        limit=settings.list_limit,
    )


def up(
    ctx: typer.Context,
    levels: Annotated[
        int,
        typer.Argument(min=1, help="Number of levels to go up."),
    ] = 1,
    path: PathOption = None,
    force: ForceOption = False,
    dry_run: DryRunOption = False,
    no_list: NoListOption = False,
    show_all: ShowAllOption = False,
    print_path: PrintPathOption = False,
) -> None:
    """Change to the parent directory and list its contents.

    Each step asks for confirmation unless --force is given, confirmation
    is disabled in the config, or no terminal is attached.

    Examples:
        updir up                 # One level up, with confirmation
        updir up 3 -f            # Three levels up, no prompts
        updir up --dry-run       # Preview only
        cd "$(updir up --print-path -f)"
    """
    run_up(
        ctx,
        levels,
        path=path,
        force=force,
        dry_run=dry_run,
        no_list=no_list,
        show_all=show_all,
        print_path=print_path,
    )


def make_alias(levels: int) -> Callable[..., None]:
    """Build a shorthand command that goes up a fixed number of levels."""

    def alias(
        ctx: typer.Context,
        path: PathOption = None,
        force: ForceOption = False,
        dry_run: DryRunOption = False,
        no_list: NoListOption = False,
        show_all: ShowAllOption = False,
        print_path: PrintPathOption = False,
    ) -> None:
        run_up(
            ctx,
            levels,
            path=path,
            force=force,
            dry_run=dry_run,
            no_list=no_list,
            show_all=show_all,
            print_path=print_path,
        )

    alias.__doc__ = f"Go up {levels} level(s). Shorthand for `updir up {levels}`."
    return alias
