"""Release commands: validation, planning and sequential execution.

Each command runs in two phases. Validation turns raw positional arguments
and flags into an immutable request (or a usage error) without touching the
network. Execution takes that request, prints the plan, and, unless this is
a dry run, performs the GitHub calls in order followed by the asset upload
loop.

Only primary steps (lookup, create, update) can fail a command. Each asset
upload yields an ``AssetOutcome``; failed assets are reported and the loop
moves on.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from grease.core.errors import (
    GreaseError,
    IncorrectArgumentCount,
    MissingRequiredArgument,
    RemoteError,
)
from grease.core.result import Err, Ok, Result
from grease.github.http import HttpError
from grease.github.model import (
    AssetFile,
    ReleaseDescriptor,
    RepositoryIdentifier,
    parse_repository,
)
from grease.github.releases import ReleaseClient
from grease.output.console import ConsoleProtocol, Style
from grease.platform.files import find_files

__all__ = [
    "RunOptions",
    "CreateReleaseRequest",
    "UpdateReleaseRequest",
    "UploadAssetsRequest",
    "ListFilesRequest",
    "AssetOpenFailed",
    "AssetUploadFailed",
    "AssetOutcome",
    "ReleaseService",
    "validate_create_release",
    "validate_update_release",
    "validate_upload_assets",
    "validate_list_files",
    "list_files",
    "TOKEN_ARGUMENT",
]

TOKEN_ARGUMENT = "--github-token"


@dataclass(frozen=True, slots=True)
class RunOptions:
    debug: bool = False
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class CreateReleaseRequest:
    repo: RepositoryIdentifier
    release: ReleaseDescriptor
    assets: tuple[AssetFile, ...]
    token: str | None


@dataclass(frozen=True, slots=True)
class UpdateReleaseRequest:
    repo: RepositoryIdentifier
    release: ReleaseDescriptor
    assets: tuple[AssetFile, ...]
    token: str | None


@dataclass(frozen=True, slots=True)
class UploadAssetsRequest:
    repo: RepositoryIdentifier
    tag: str
    pattern: str
    assets: tuple[AssetFile, ...]
    token: str | None


@dataclass(frozen=True, slots=True)
class ListFilesRequest:
    pattern: str


@dataclass(frozen=True, slots=True)
class AssetOpenFailed:
    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class AssetUploadFailed:
    name: str
    cause: HttpError


AssetError = AssetOpenFailed | AssetUploadFailed


@dataclass(frozen=True, slots=True)
class AssetOutcome:
    asset: AssetFile
    error: AssetError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


def _expect_args(args: Sequence[str], expected: int) -> Result[None, IncorrectArgumentCount]:
    if len(args) != expected:
        return Err(IncorrectArgumentCount(expected=expected, received=len(args)))
    return Ok(None)


def _resolve_assets(pattern: str | None) -> Result[tuple[AssetFile, ...], GreaseError]:
    if not pattern:
        return Ok(())
    found = find_files(pattern)
    if isinstance(found, Err):
        return found
    return Ok(tuple(AssetFile.from_path(p) for p in found.value))


def _clean_token(token: str | None) -> str | None:
    if token is None:
        return None
    return token.strip() or None


def validate_create_release(
    args: Sequence[str],
    *,
    name: str | None = None,
    notes: str | None = None,
    draft: bool = False,
    prerelease: bool = False,
    assets: str | None = None,
    token: str | None = None,
) -> Result[CreateReleaseRequest, GreaseError]:
    """Validate ``REPO TAG COMMITISH`` and the release flags."""
    counted = _expect_args(args, 3)
    if isinstance(counted, Err):
        return counted

    repo = parse_repository(args[0])
    if isinstance(repo, Err):
        return repo

    resolved = _resolve_assets(assets)
    if isinstance(resolved, Err):
        return resolved

    release = ReleaseDescriptor(
        tag_name=args[1],
        target_commitish=args[2],
        name=name,
        body=notes,
        draft=draft,
        prerelease=prerelease,
    )
    return Ok(
        CreateReleaseRequest(
            repo=repo.value,
            release=release,
            assets=resolved.value,
            token=_clean_token(token),
        )
    )


def validate_update_release(
    args: Sequence[str],
    *,
    name: str | None = None,
    notes: str | None = None,
    draft: bool = False,
    prerelease: bool = False,
    assets: str | None = None,
    token: str | None = None,
) -> Result[UpdateReleaseRequest, GreaseError]:
    """Validate ``REPO TAG`` and the release flags."""
    counted = _expect_args(args, 2)
    if isinstance(counted, Err):
        return counted

    repo = parse_repository(args[0])
    if isinstance(repo, Err):
        return repo

    resolved = _resolve_assets(assets)
    if isinstance(resolved, Err):
        return resolved

    release = ReleaseDescriptor(
        tag_name=args[1],
        name=name,
        body=notes,
        draft=draft,
        prerelease=prerelease,
    )
    return Ok(
        UpdateReleaseRequest(
            repo=repo.value,
            release=release,
            assets=resolved.value,
            token=_clean_token(token),
        )
    )


def validate_upload_assets(
    args: Sequence[str],
    *,
    token: str | None = None,
) -> Result[UploadAssetsRequest, GreaseError]:
    """Validate ``REPO TAG GLOB_PATTERN``."""
    counted = _expect_args(args, 3)
    if isinstance(counted, Err):
        return counted

    repo = parse_repository(args[0])
    if isinstance(repo, Err):
        return repo

    pattern = args[2]
    resolved = _resolve_assets(pattern)
    if isinstance(resolved, Err):
        return resolved

    return Ok(
        UploadAssetsRequest(
            repo=repo.value,
            tag=args[1],
            pattern=pattern,
            assets=resolved.value,
            token=_clean_token(token),
        )
    )


def validate_list_files(args: Sequence[str]) -> Result[ListFilesRequest, GreaseError]:
    """Validate ``GLOB_PATTERN``."""
    counted = _expect_args(args, 1)
    if isinstance(counted, Err):
        return counted
    return Ok(ListFilesRequest(pattern=args[0]))


def list_files(
    request: ListFilesRequest, console: ConsoleProtocol, *, debug: bool = False
) -> Result[list[Path], GreaseError]:
    """Print every path matching the pattern. No remote interaction."""
    if debug:
        console.debug(f"Glob pattern is: {request.pattern}")
    found = find_files(request.pattern)
    if isinstance(found, Err):
        return found

    if not found.value:
        console.print("No matches found")
    for path in found.value:
        console.print(f"File match found: {path}")
    return found


# -----------------------------------------------------------------------------
# Execution
# -----------------------------------------------------------------------------


def _remote(operation: str) -> Callable[[HttpError], RemoteError]:
    def wrap(error: HttpError) -> RemoteError:
        return RemoteError(operation=operation, detail=str(error), status=error.status)

    return wrap


class ReleaseService:
    """Runs validated release requests against GitHub.

    In dry-run mode the plan is printed and the client is never called.
    """

    def __init__(
        self,
        *,
        client: ReleaseClient,
        console: ConsoleProtocol,
        options: RunOptions,
    ) -> None:
        self._client = client
        self._console = console
        self._options = options

    # -- plan output ----------------------------------------------------------

    def _debug(self, message: str) -> None:
        if self._options.debug:
            self._console.debug(message)

    def _show_plan(self) -> bool:
        return self._options.debug or self._options.dry_run

    def _print_repo(self, repo: RepositoryIdentifier, token: str | None) -> None:
        self._console.print(f"Repo: {repo.html_url}")
        self._console.print(f"Token: {'provided' if token else 'not provided'}", Style.DIM)

    def _print_release(self, release: ReleaseDescriptor) -> None:
        self._console.print(f"Tag: {release.tag_name}")
        if release.target_commitish is not None:
            self._console.print(f"Tag Commit: {release.target_commitish}")
        self._console.print(f"Release Name/Title: {release.name or ''}")
        self._console.print(f"Draft: {str(release.draft).lower()}")
        self._console.print(f"Pre-release: {str(release.prerelease).lower()}")
        self._console.print("-----Begin Release Notes-----", Style.DIM)
        self._console.print(release.body or "")
        self._console.print("-----End Release Notes-----", Style.DIM)

    def _print_assets(self, assets: Sequence[AssetFile]) -> None:
        if not assets:
            self._console.print("No assets found to upload")
            return
        self._console.print("The following assets will be uploaded:")
        for asset in assets:
            self._console.print(f"\t{asset.path} as {asset.name}")

    def _finish_dry_run(self) -> Result[list[AssetOutcome], GreaseError]:
        self._console.info("Dry run specified. Exiting.")
        return Ok([])

    def _require_token(self, token: str | None) -> Result[str, GreaseError]:
        if not token:
            return Err(MissingRequiredArgument(argument=TOKEN_ARGUMENT))
        return Ok(token)

    # -- commands -------------------------------------------------------------

    def create_release(
        self, request: CreateReleaseRequest
    ) -> Result[list[AssetOutcome], GreaseError]:
        self._debug("Preparing to create release")
        self._debug(f"GitHub repository owner is: {request.repo.owner}")
        self._debug(f"GitHub repository name is: {request.repo.name}")
        self._debug(f"Tag is: {request.release.tag_name}")
        self._debug(f"Tag commitish is: {request.release.target_commitish}")

        if self._show_plan():
            self._console.header("Will create release with the following settings...")
            self._print_repo(request.repo, request.token)
            self._print_release(request.release)
            self._print_assets(request.assets)

        if self._options.dry_run:
            return self._finish_dry_run()

        token = self._require_token(request.token)
        if isinstance(token, Err):
            return token

        created = self._client.create_release(request.repo, request.release, token.value)
        if isinstance(created, Err):
            return created.map_err(_remote("create release"))
        release_id = created.value

        self._console.success(f"Created release {request.release.tag_name} (id: {release_id})")
        self._debug("Preparing to upload any assets")
        return Ok(self.upload_all(request.repo, release_id, request.assets, token.value))

    def update_release(
        self, request: UpdateReleaseRequest
    ) -> Result[list[AssetOutcome], GreaseError]:
        self._debug("Preparing to update release")
        self._debug(f"GitHub repository owner is: {request.repo.owner}")
        self._debug(f"GitHub repository name is: {request.repo.name}")
        self._debug(f"Tag is: {request.release.tag_name}")

        if self._show_plan():
            self._console.header("Will update release with the following settings...")
            self._print_repo(request.repo, request.token)
            self._print_release(request.release)
            self._print_assets(request.assets)

        if self._options.dry_run:
            return self._finish_dry_run()

        token = self._require_token(request.token)
        if isinstance(token, Err):
            return token

        tag = request.release.tag_name
        found = self._client.get_release_id_by_tag(request.repo, tag, token.value)
        if isinstance(found, Err):
            return found.map_err(_remote(f"look up release {tag}"))
        release_id = found.value

        updated = self._client.update_release(
            request.repo, release_id, request.release, token.value
        )
        if isinstance(updated, Err):
            return updated.map_err(_remote("update release"))

        self._console.success(f"Updated release {tag} (id: {release_id})")
        self._debug("Preparing to upload any assets")
        return Ok(self.upload_all(request.repo, release_id, request.assets, token.value))

    def upload_assets(
        self, request: UploadAssetsRequest
    ) -> Result[list[AssetOutcome], GreaseError]:
        self._debug("Preparing to upload assets")
        self._debug(f"GitHub repository owner is: {request.repo.owner}")
        self._debug(f"GitHub repository name is: {request.repo.name}")
        self._debug(f"Tag is: {request.tag}")
        self._debug(f"Glob pattern is: {request.pattern}")

        if self._show_plan():
            self._console.header("Uploading assets with the following settings...")
            self._print_repo(request.repo, request.token)
            self._console.print(f"Tag: {request.tag}")
            self._print_assets(request.assets)

        if self._options.dry_run:
            return self._finish_dry_run()

        token = self._require_token(request.token)
        if isinstance(token, Err):
            return token

        found = self._client.get_release_id_by_tag(request.repo, request.tag, token.value)
        if isinstance(found, Err):
            return found.map_err(_remote(f"look up release {request.tag}"))

        return Ok(self.upload_all(request.repo, found.value, request.assets, token.value))

    # -- asset loop -----------------------------------------------------------

    def upload_all(
        self,
        repo: RepositoryIdentifier,
        release_id: int,
        assets: Sequence[AssetFile],
        token: str,
    ) -> list[AssetOutcome]:
        """Upload assets one at a time, collecting an outcome for each.

        A file that cannot be opened gets one warning line; a rejected
        upload gets one error line. Neither stops the loop.
        """
        outcomes: list[AssetOutcome] = []
        for asset in assets:
            outcome = self._upload_one(repo, release_id, asset, token)
            outcomes.append(outcome)

        if outcomes:
            uploaded = sum(1 for o in outcomes if o.ok)
            failed = len(outcomes) - uploaded
            summary = f"{uploaded} of {len(outcomes)} assets uploaded"
            if failed:
                self._console.print(f"{summary}, {failed} failed", Style.WARNING)
            else:
                self._console.print(summary, Style.DIM)
        return outcomes

    def _upload_one(
        self,
        repo: RepositoryIdentifier,
        release_id: int,
        asset: AssetFile,
        token: str,
    ) -> AssetOutcome:
        try:
            handle = asset.path.open("rb")
        except OSError as e:
            self._console.warning(f"Failed to open {asset.path}. Skipping.")
            return AssetOutcome(
                asset=asset, error=AssetOpenFailed(path=asset.path, reason=str(e))
            )

        with handle:
            size = os.fstat(handle.fileno()).st_size
            self._debug(f"Uploading asset at {asset.path} as {asset.name} ({size} bytes)")
            result = self._client.upload_asset(repo, release_id, handle, size, asset.name, token)

        if isinstance(result, Err):
            self._console.error(f"Error while uploading asset {asset.name}: {result.error}")
            return AssetOutcome(
                asset=asset, error=AssetUploadFailed(name=asset.name, cause=result.error)
            )

        self._console.success(f"Uploaded {asset.name}")
        return AssetOutcome(asset=asset)
