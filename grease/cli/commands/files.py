from __future__ import annotations

import typer

from grease.cli.commands._helpers import exit_on_error
from grease.cli.context import make_console, run_options
from grease.services.release import list_files as list_matching_files
from grease.services.release import validate_list_files


def list_files(
    ctx: typer.Context,
    args: list[str] | None = typer.Argument(None, metavar="GLOB_PATTERN", show_default=False),
) -> None:
    """Print out list of files found using the glob pattern.

    Takes a GLOB_PATTERN and prints out a list of the matching files. Use it
    to check a pattern before passing it to --assets or upload-assets.
    """
    console = make_console()
    options = run_options(ctx)
    request = exit_on_error(validate_list_files(args or []), console)
    exit_on_error(list_matching_files(request, console, debug=options.debug), console)
