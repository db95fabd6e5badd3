"""Tests for grease.core.config module."""

import pytest

from grease import __version__
from grease.core.config import (
    API_URL_ENV,
    DEFAULT_API_URL,
    DEFAULT_UPLOADS_URL,
    UPLOADS_URL_ENV,
    Settings,
    load_settings,
)
from grease.core.result import Err, Ok


class TestLoadSettings:
    def test_defaults_with_empty_environment(self) -> None:
        result = load_settings({})

        assert isinstance(result, Ok)
        assert result.value == Settings()
        assert result.value.api_url == DEFAULT_API_URL
        assert result.value.uploads_url == DEFAULT_UPLOADS_URL

    def test_user_agent_carries_version(self) -> None:
        assert Settings().user_agent == f"grease/{__version__}"

    def test_enterprise_urls(self) -> None:
        result = load_settings(
            {
                API_URL_ENV: "https://ghe.example.com/api/v3/",
                UPLOADS_URL_ENV: "https://ghe.example.com/api/uploads",
            }
        )

        assert isinstance(result, Ok)
        assert result.value.api_url == "https://ghe.example.com/api/v3"
        assert result.value.uploads_url == "https://ghe.example.com/api/uploads"

    def test_blank_value_falls_back_to_default(self) -> None:
        result = load_settings({API_URL_ENV: "   "})

        assert isinstance(result, Ok)
        assert result.value.api_url == DEFAULT_API_URL

    def test_rejects_non_http_url(self) -> None:
        result = load_settings({UPLOADS_URL_ENV: "ftp://example.com"})

        assert isinstance(result, Err)
        assert result.error.variable == UPLOADS_URL_ENV
        assert "http(s) URL" in result.error.message

    def test_reads_process_environment_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(API_URL_ENV, "http://localhost:8080")

        result = load_settings()

        assert isinstance(result, Ok)
        assert result.value.api_url == "http://localhost:8080"
