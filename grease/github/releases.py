"""GitHub Releases API operations.

Four calls, each a single synchronous round trip authenticated with a
caller-supplied token:

- look up a release id by tag
- create a release
- update a release
- upload an asset to a release

All methods return ``Result``; nothing is retried.
"""

from __future__ import annotations

import mimetypes
from typing import IO, TYPE_CHECKING, Any
from urllib.parse import quote

from grease.core.config import Settings
from grease.core.result import Err, Ok, Result
from grease.core.structured import get_int
from grease.github.http import HttpError

if TYPE_CHECKING:
    from grease.github.http import HttpClient
    from grease.github.model import ReleaseDescriptor, RepositoryIdentifier

__all__ = ["ReleaseClient", "API_VERSION", "content_type_for"]

API_VERSION = "2022-11-28"


def content_type_for(asset_name: str) -> str:
    """Guess the Content-Type GitHub will record for an asset."""
    guessed, _encoding = mimetypes.guess_type(asset_name, strict=False)
    return guessed or "application/octet-stream"


def _release_id(url: str, data: dict[str, Any]) -> Result[int, HttpError]:
    release_id = get_int(data, "id")
    if release_id is None:
        return Err(HttpError(url=url, status=0, message="Missing release id in response"))
    return Ok(release_id)


class ReleaseClient:
    """Client for the release endpoints of one GitHub API host.

    Example:
        >>> client = ReleaseClient(RealHttpClient(), Settings())
        >>> result = client.get_release_id_by_tag(repo, "v1.0.0", token)
        >>> if isinstance(result, Ok):
        ...     print(f"release id: {result.value}")
    """

    def __init__(self, http: HttpClient, settings: Settings) -> None:
        self._http = http
        self._settings = settings

    def _headers(self, token: str) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "User-Agent": self._settings.user_agent,
            "X-GitHub-Api-Version": API_VERSION,
        }

    def _releases_url(self, repo: RepositoryIdentifier) -> str:
        return f"{self._settings.api_url}/repos/{repo.owner}/{repo.name}/releases"

    def get_release_id_by_tag(
        self, repo: RepositoryIdentifier, tag: str, token: str
    ) -> Result[int, HttpError]:
        """Look up the id of the release attached to ``tag``.

        A missing release comes back as an HttpError with status 404, the
        same shape as any other failure.
        """
        url = f"{self._releases_url(repo)}/tags/{quote(tag, safe='')}"
        result = self._http.request_json("GET", url, headers=self._headers(token))
        if isinstance(result, Err):
            return result
        return _release_id(url, result.value)

    def create_release(
        self, repo: RepositoryIdentifier, descriptor: ReleaseDescriptor, token: str
    ) -> Result[int, HttpError]:
        """Create a release and return its id.

        Failures (tag conflict, bad credentials, network) are surfaced as
        reported by GitHub.
        """
        url = self._releases_url(repo)
        result = self._http.request_json(
            "POST",
            url,
            headers=self._headers(token),
            body=descriptor.to_create_payload(),
        )
        if isinstance(result, Err):
            return result
        return _release_id(url, result.value)

    def update_release(
        self,
        repo: RepositoryIdentifier,
        release_id: int,
        descriptor: ReleaseDescriptor,
        token: str,
    ) -> Result[int, HttpError]:
        """Edit an existing release; tag and commitish are not resent."""
        url = f"{self._releases_url(repo)}/{release_id}"
        result = self._http.request_json(
            "PATCH",
            url,
            headers=self._headers(token),
            body=descriptor.to_update_payload(),
        )
        if isinstance(result, Err):
            return result
        return _release_id(url, result.value)

    def upload_asset(
        self,
        repo: RepositoryIdentifier,
        release_id: int,
        stream: IO[bytes],
        size: int,
        asset_name: str,
        token: str,
    ) -> Result[None, HttpError]:
        """Stream ``size`` bytes from ``stream`` as a named release asset.

        GitHub rejects a name already used by another asset of the release.
        """
        url = (
            f"{self._settings.uploads_url}/repos/{repo.owner}/{repo.name}"
            f"/releases/{release_id}/assets?name={quote(asset_name, safe='')}"
        )
        headers = self._headers(token)
        headers["Content-Type"] = content_type_for(asset_name)
        result = self._http.upload(url, headers=headers, stream=stream, size=size)
        if isinstance(result, Err):
            return result
        return Ok(None)
