"""Shared pytest fixtures for enum_x tests."""

from pathlib import Path

import pytest

from enum_x import Enum, Registry


@pytest.fixture
def test_enum():
    """Three values; the last one carries a 'number' format."""
    return Enum("test_enum", ["one", "two", {"value": "three", "number": "3"}])


@pytest.fixture
def simple_value(test_enum):
    return test_enum.values[0]


@pytest.fixture
def complex_value(test_enum):
    return test_enum.values[2]


@pytest.fixture
def registry():
    """An empty, isolated registry without load paths."""
    return Registry()


@pytest.fixture
def write_enums(tmp_path):
    """Return a helper writing YAML enum definitions to a temp file."""

    def _write(text: str, name: str = "enums.yml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def roles_registry(write_enums):
    path = write_enums(
        """roles: [admin, user, guest]
statuses: [draft, sent, returned]
kinds:
  - {value: draft, legacy: new}
  - sent
  - {value: returned, legacy: back}
"""
    )
    return Registry(load_paths=[path])
