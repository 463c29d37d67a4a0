# Copyright 2025 KTTC AI (https://github.com/kttc-ai)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Main CLI application entry point for transmem.

Running ``transmem`` without a command starts the interactive menu.
All commands are organized in separate modules under `transmem.cli.commands/`.
"""

from __future__ import annotations

import logging

import typer
from rich.markup import escape

from transmem import __version__
from transmem.cli.commands.memory import (
    add_source,
    add_translation,
    comments,
    languages,
    search,
    shell,
    stats,
)
from transmem.cli.ui import console, print_error
from transmem.utils.config import configure_logging

# Create main app
app = typer.Typer(
    name="transmem",
    help="transmem - Translation Memory for app strings\n\nSearch and maintain source strings, translator comments, and translations.",
    add_completion=False,
    rich_markup_mode="rich",
    invoke_without_command=True,
)

# Register commands
app.command()(shell)
app.command()(search)
app.command("add-source")(add_source)
app.command("add-translation")(add_translation)
app.command()(comments)
app.command()(languages)
app.command()(stats)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"transmem version: [bold cyan]{__version__}[/bold cyan]")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(  # noqa: ARG001 - Used by Typer callback
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show informational log messages"),
) -> None:
    """
    transmem - Translation Memory for app strings.

    Without a command, starts the interactive menu.
    """
    try:
        configure_logging(logging.INFO if verbose else None)
    except Exception as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1)

    if ctx.invoked_subcommand is None:
        shell(db=None, no_clear=False)


def run() -> None:
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    run()
