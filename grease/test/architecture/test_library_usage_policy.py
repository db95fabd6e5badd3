from __future__ import annotations

from ._utils import find_offenders, package_root


def test_direct_rich_imports_are_limited_to_console() -> None:
    offenders = find_offenders(package_root(), "rich", allowlist={"output/console.py"})

    assert not offenders, "Direct rich usage policy violations:\n" + "\n".join(offenders)


def test_network_access_is_limited_to_http_client() -> None:
    offenders = find_offenders(
        package_root(), "urllib.request", allowlist={"github/http.py"}
    )
    offenders += find_offenders(package_root(), "urllib.error", allowlist={"github/http.py"})

    assert not offenders, "Network usage policy violations:\n" + "\n".join(offenders)


def test_typer_is_limited_to_cli() -> None:
    root = package_root()
    offenders: list[str] = []
    for layer in ("core", "platform", "github", "output", "services"):
        offenders += find_offenders(root / layer, "typer")

    assert not offenders, "typer usage outside cli:\n" + "\n".join(offenders)
