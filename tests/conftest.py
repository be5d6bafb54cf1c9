"""Shared test fixtures."""

import pytest

from funcaptcha import DEFAULT_TABLE


@pytest.fixture
def flow_names():
    return ["Login", "Signup", "GroupJoin", "FollowUser", "WallPost", "GenericCaptcha"]


@pytest.fixture
def write_config(tmp_path):
    """Write a TOML file and return its path."""

    def _write(content: str):
        path = tmp_path / "config.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def default_table():
    return DEFAULT_TABLE
