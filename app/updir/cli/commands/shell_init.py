"""Shell integration for updir.

Prints shell functions named after the shorthand commands. Each one asks
`updir up --print-path` for the target and changes into it in the calling
shell, which updir itself cannot do.

Usage (bash/zsh):  eval "$(updir shell-init bash)"
Usage (fish):      updir shell-init fish | source
"""

from enum import Enum
from typing import Annotated

import typer

from updir.cli.commands.up import ALIASES


class Shell(str, Enum):
    """Supported shells."""

    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"


def _posix_function(name: str, levels: int) -> str:
    return (
        f"{name}() {{\n"
        "    local target\n"
        f'    target="$(command updir up {levels} --print-path "$@")" && cd -- "$target"\n'
        "}"
    )


def _fish_function(name: str, levels: int) -> str:
    return (
        f"function {name}\n"
        f"    set -l target (command updir up {levels} --print-path $argv)\n"
        "    and cd $target\n"
        "end"
    )


def render_shell_init(shell: Shell) -> str:
    """Build the integration script for a shell.

    Args:
        shell: Target shell.

    Returns:
        Script text defining one function per shorthand.
    """
    render = _fish_function if shell == Shell.FISH else _posix_function
    return "\n\n".join(render(name, levels) for name, levels in ALIASES.items()) + "\n"


def shell_init(
    shell: Annotated[
        Shell,
        typer.Argument(help="Shell to generate functions for.", case_sensitive=False),
    ] = Shell.BASH,
) -> None:
    """Print shell functions for `..`, `...` and `......`."""
    typer.echo(render_shell_init(shell), nl=False)
