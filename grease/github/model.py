"""Value types for GitHub repositories, releases and release assets."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from grease.core.errors import BadArgument
from grease.core.result import Err, Ok, Result

__all__ = [
    "RepositoryIdentifier",
    "ReleaseDescriptor",
    "AssetFile",
    "parse_repository",
]


@dataclass(frozen=True, slots=True)
class RepositoryIdentifier:
    owner: str
    name: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def html_url(self) -> str:
        return f"https://github.com/{self.owner}/{self.name}"


def parse_repository(text: str) -> Result[RepositoryIdentifier, BadArgument]:
    """Split an ``owner/name`` string at its first slash.

    Both parts are returned unmodified; the name may itself contain slashes.
    """
    owner, sep, name = text.partition("/")
    if not sep:
        return Err(
            BadArgument(
                argument="REPO",
                reason="expected to be of the form owner/repo but found no /",
            )
        )
    if not owner:
        return Err(
            BadArgument(
                argument="REPO",
                reason="expected to be of the form owner/repo but owner portion was blank",
            )
        )
    if not name:
        return Err(
            BadArgument(
                argument="REPO",
                reason="expected to be of the form owner/repo but repo portion was blank",
            )
        )
    return Ok(RepositoryIdentifier(owner=owner, name=name))


@dataclass(frozen=True, slots=True)
class ReleaseDescriptor:
    """Desired state of a GitHub release.

    ``name`` and ``body`` are None when not given on the command line, and
    are then left out of the request so GitHub keeps its current value (or
    its default on creation).
    """

    tag_name: str
    target_commitish: str | None = None
    name: str | None = None
    body: str | None = None
    draft: bool = False
    prerelease: bool = False

    def to_create_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {"tag_name": self.tag_name}
        if self.target_commitish is not None:
            payload["target_commitish"] = self.target_commitish
        payload.update(self._mutable_fields())
        return payload

    def to_update_payload(self) -> dict[str, object]:
        # Tag and commitish are fixed once the release exists.
        return self._mutable_fields()

    def _mutable_fields(self) -> dict[str, object]:
        fields: dict[str, object] = {}
        if self.name is not None:
            fields["name"] = self.name
        if self.body is not None:
            fields["body"] = self.body
        fields["draft"] = self.draft
        fields["prerelease"] = self.prerelease
        return fields


@dataclass(frozen=True, slots=True)
class AssetFile:
    """A local file to upload, named after its final path segment."""

    path: Path
    name: str

    @classmethod
    def from_path(cls, path: Path) -> AssetFile:
        return cls(path=path, name=path.name)
