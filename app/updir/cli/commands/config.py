"""Config commands for inspecting and creating the settings file."""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from updir.core.config import ConfigError, UpdirConfig, load_config_or_default, save_config
from updir.core.paths import get_config_path
from updir.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize updir settings.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def path() -> None:
    """Print the settings file path."""
    typer.echo(str(get_config_path()))


@app.command()
def show() -> None:
    """Show the effective settings."""
    config_path = get_config_path()
    try:
        config = load_config_or_default(config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    source = str(config_path) if config_path.exists() else "defaults"
    table = Table(
        title=escape(f"Settings ({source})"),
        show_header=True,
        header_style="header",
        border_style="border",
    )
    table.add_column("Key", no_wrap=True)
    table.add_column("Value", style="info")
    table.add_column("Description", style="muted")

    for name, field in UpdirConfig.model_fields.items():
        value = getattr(config, name)
        table.add_row(name, "-" if value is None else str(value).lower(), field.description or "")

    console.print(table)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file with default values."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_info(
            escape(f"Settings file already exists: {config_path} (use --force to overwrite)")
        )
        return

    try:
        saved = save_config(UpdirConfig(), config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(escape(f"Settings written to {saved}"))
