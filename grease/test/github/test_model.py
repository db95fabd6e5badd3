"""Tests for grease.github.model."""

from __future__ import annotations

from pathlib import Path

import pytest

from grease.core.errors import BadArgument
from grease.core.result import Err, Ok
from grease.github.model import (
    AssetFile,
    ReleaseDescriptor,
    RepositoryIdentifier,
    parse_repository,
)


class TestParseRepository:
    @pytest.mark.parametrize(
        ("text", "owner", "name"),
        [
            ("acme/widgets", "acme", "widgets"),
            ("a/b", "a", "b"),
            ("timberio/grease", "timberio", "grease"),
            ("my-org/my.repo_name", "my-org", "my.repo_name"),
        ],
    )
    def test_valid(self, text: str, owner: str, name: str) -> None:
        assert parse_repository(text) == Ok(RepositoryIdentifier(owner=owner, name=name))

    def test_name_keeps_everything_after_first_slash(self) -> None:
        result = parse_repository("acme/widgets/extra")

        assert result == Ok(RepositoryIdentifier(owner="acme", name="widgets/extra"))

    def test_parts_are_not_modified(self) -> None:
        result = parse_repository(" acme / widgets ")

        assert result == Ok(RepositoryIdentifier(owner=" acme ", name=" widgets "))

    def test_no_slash(self) -> None:
        result = parse_repository("widgets")

        assert isinstance(result, Err)
        assert result.error.argument == "REPO"
        assert "found no /" in result.error.reason

    @pytest.mark.parametrize("text", ["/widgets", "/", "//x"])
    def test_blank_owner(self, text: str) -> None:
        result = parse_repository(text)

        assert isinstance(result, Err)
        assert "owner portion was blank" in result.error.reason

    def test_blank_name(self) -> None:
        result = parse_repository("acme/")

        assert result == Err(
            BadArgument(
                argument="REPO",
                reason="expected to be of the form owner/repo but repo portion was blank",
            )
        )

    def test_empty_string(self) -> None:
        assert isinstance(parse_repository(""), Err)


class TestRepositoryIdentifier:
    def test_slug_and_url(self) -> None:
        repo = RepositoryIdentifier(owner="acme", name="widgets")

        assert repo.slug == "acme/widgets"
        assert repo.html_url == "https://github.com/acme/widgets"


class TestReleaseDescriptor:
    def test_create_payload_full(self) -> None:
        release = ReleaseDescriptor(
            tag_name="v1.0.0",
            target_commitish="main",
            name="v1.0.0",
            body="First release",
            draft=True,
            prerelease=False,
        )

        assert release.to_create_payload() == {
            "tag_name": "v1.0.0",
            "target_commitish": "main",
            "name": "v1.0.0",
            "body": "First release",
            "draft": True,
            "prerelease": False,
        }

    def test_create_payload_omits_unset_fields(self) -> None:
        release = ReleaseDescriptor(tag_name="v2.0.0")

        assert release.to_create_payload() == {
            "tag_name": "v2.0.0",
            "draft": False,
            "prerelease": False,
        }

    def test_empty_name_is_sent(self) -> None:
        """An explicit empty string differs from an unset flag."""
        release = ReleaseDescriptor(tag_name="v1", name="")

        assert release.to_create_payload()["name"] == ""

    def test_update_payload_never_resends_tag_or_commitish(self) -> None:
        release = ReleaseDescriptor(
            tag_name="v1.0.0",
            target_commitish="main",
            name="Renamed",
            prerelease=True,
        )

        payload = release.to_update_payload()

        assert payload == {"name": "Renamed", "draft": False, "prerelease": True}
        assert "tag_name" not in payload
        assert "target_commitish" not in payload


class TestAssetFile:
    def test_name_is_final_segment(self) -> None:
        asset = AssetFile.from_path(Path("dist/linux/grease-1.0.tar.gz"))

        assert asset.name == "grease-1.0.tar.gz"
        assert asset.path == Path("dist/linux/grease-1.0.tar.gz")
