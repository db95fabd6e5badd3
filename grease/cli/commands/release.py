from __future__ import annotations

import typer

from grease.cli.commands._helpers import exit_on_error
from grease.cli.context import CLIContext, build_context
from grease.services.release import (
    ReleaseService,
    validate_create_release,
    validate_update_release,
    validate_upload_assets,
)

_TOKEN_HELP = "Used to authenticate the request with the GitHub API."
_ASSETS_HELP = "Uploads the assets at the given path (glob patterns enabled)."


def _service(cli: CLIContext) -> ReleaseService:
    return ReleaseService(client=cli.client, console=cli.console, options=cli.options)


def create_release(
    ctx: typer.Context,
    args: list[str] | None = typer.Argument(
        None, metavar="REPO TAG COMMITISH", show_default=False
    ),
    name: str | None = typer.Option(
        None, "--name", help='Sets the name of the release, e.g. "v0.4.0 - 2017-08-22".'
    ),
    notes: str | None = typer.Option(None, "--notes", help="Sets the body of the release notes."),
    draft: bool = typer.Option(False, "--draft", help="Marks the release as a draft."),
    prerelease: bool = typer.Option(
        False, "--pre-release", "--pre", help="Marks the release as a pre-release."
    ),
    assets: str | None = typer.Option(None, "--assets", help=_ASSETS_HELP),
    github_token: str | None = typer.Option(
        None, "--github-token", envvar="GITHUB_TOKEN", help=_TOKEN_HELP
    ),
) -> None:
    """Creates a release on GitHub.

    Creates a new GitHub release identified by TAG on the repository identified
    by REPO (owner/name) using the COMMITISH identifier.
    """
    cli = build_context(ctx)
    request = exit_on_error(
        validate_create_release(
            args or [],
            name=name,
            notes=notes,
            draft=draft,
            prerelease=prerelease,
            assets=assets,
            token=github_token,
        ),
        cli.console,
    )
    exit_on_error(_service(cli).create_release(request), cli.console)


def update_release(
    ctx: typer.Context,
    args: list[str] | None = typer.Argument(None, metavar="REPO TAG", show_default=False),
    name: str | None = typer.Option(None, "--name", help="Sets the name of the release."),
    notes: str | None = typer.Option(None, "--notes", help="Sets the body of the release notes."),
    draft: bool = typer.Option(False, "--draft", help="Marks the release as a draft."),
    prerelease: bool = typer.Option(
        False, "--pre-release", "--pre", help="Marks the release as a pre-release."
    ),
    assets: str | None = typer.Option(None, "--assets", help=_ASSETS_HELP),
    github_token: str | None = typer.Option(
        None, "--github-token", envvar="GITHUB_TOKEN", help=_TOKEN_HELP
    ),
) -> None:
    """Updates a release on GitHub.

    Updates the GitHub release identified by TAG on the repository identified by
    REPO based on the flags passed on the command line.
    """
    cli = build_context(ctx)
    request = exit_on_error(
        validate_update_release(
            args or [],
            name=name,
            notes=notes,
            draft=draft,
            prerelease=prerelease,
            assets=assets,
            token=github_token,
        ),
        cli.console,
    )
    exit_on_error(_service(cli).update_release(request), cli.console)


def upload_assets(
    ctx: typer.Context,
    args: list[str] | None = typer.Argument(
        None, metavar="REPO TAG GLOB_PATTERN", show_default=False
    ),
    github_token: str | None = typer.Option(
        None, "--github-token", envvar="GITHUB_TOKEN", help=_TOKEN_HELP
    ),
) -> None:
    """Uploads assets to an existing release on GitHub.

    Takes all files found using the glob pattern at GLOB_PATTERN and uploads
    them as assets for the GitHub release identified by TAG on the repository
    identified by REPO.
    """
    cli = build_context(ctx)
    request = exit_on_error(validate_upload_assets(args or [], token=github_token), cli.console)
    exit_on_error(_service(cli).upload_assets(request), cli.console)
