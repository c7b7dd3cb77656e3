"""Keep ``__init__conf__`` and the bundled logging defaults in step with pyproject.toml.

The LAYEREDCONF_* constants decide where host and user logging config files are
looked up; drift from the project metadata makes those files silently vanish.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import rtoml

from hello_world_plus import __init__conf__

PYPROJECT_PATH = Path(__file__).parent.parent / "pyproject.toml"


def _project_table() -> dict[str, Any]:
    return rtoml.load(PYPROJECT_PATH)["project"]


@pytest.mark.os_agnostic
def test_layeredconf_slug_is_the_hyphenated_project_name() -> None:
    """The slug names the Linux config directory (``~/.config/<slug>/``)."""
    project_name = _project_table()["name"]

    assert __init__conf__.LAYEREDCONF_SLUG == project_name.replace("_", "-")


@pytest.mark.os_agnostic
@pytest.mark.parametrize("constant", ["LAYEREDCONF_VENDOR", "LAYEREDCONF_APP"])
def test_layeredconf_vendor_and_app_are_not_blank(constant: str) -> None:
    """Vendor and app name the macOS and Windows config directories."""
    value = getattr(__init__conf__, constant)

    assert value.strip(), f"{constant} is empty"


@pytest.mark.os_agnostic
def test_version_matches_pyproject_toml() -> None:
    assert __init__conf__.version == _project_table()["version"]


@pytest.mark.os_agnostic
def test_name_matches_pyproject_toml() -> None:
    project_name = _project_table()["name"]

    assert __init__conf__.name.replace("-", "_") == project_name.replace("-", "_")

