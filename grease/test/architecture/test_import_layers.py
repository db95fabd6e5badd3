from __future__ import annotations

import pytest

from ._utils import find_offenders, package_root


@pytest.mark.parametrize("layer", ["core", "platform", "github", "output", "services"])
def test_library_layers_do_not_import_cli(layer: str) -> None:
    offenders = find_offenders(package_root() / layer, "grease.cli")

    assert not offenders, f"{layer} -> cli dependency violations:\n" + "\n".join(offenders)


@pytest.mark.parametrize("layer", ["core", "platform"])
def test_foundation_layers_do_not_import_services(layer: str) -> None:
    offenders = find_offenders(package_root() / layer, "grease.services")

    assert not offenders, f"{layer} -> services dependency violations:\n" + "\n".join(offenders)


def test_github_client_does_not_print() -> None:
    offenders = find_offenders(package_root() / "github", "grease.output")

    assert not offenders, "github -> output dependency violations:\n" + "\n".join(offenders)
