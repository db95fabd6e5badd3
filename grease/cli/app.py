from __future__ import annotations

import typer

from grease import __version__
from grease.cli.commands.files import list_files
from grease.cli.commands.release import create_release, update_release, upload_assets
from grease.services.release import RunOptions


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Creates and updates releases on GitHub with assets.",
)


# Commands
app.command("create-release")(create_release)
app.command("update-release")(update_release)
app.command("upload-assets")(upload_assets)
app.command("list-files")(list_files)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        envvar="DEBUG",
        help="Prints out verbose statements about what grease is doing.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Prevents changes from being made; shows what would be done.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    ctx.obj = RunOptions(debug=debug, dry_run=dry_run)


def main() -> None:
    app()
