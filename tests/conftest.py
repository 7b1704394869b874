"""Shared fixtures for validate-arguments tests."""

from __future__ import annotations

import pytest


@pytest.fixture()
def nested_schema():
    """Three levels deep, outermost field optional."""
    return {
        "thing": {
            "isa": {
                "nestedThing": {"isa": {"childOfNested": {"isa": "string"}}},
                "optionalThing": {"optional": True, "isa": "string"},
            },
            "optional": True,
        }
    }


@pytest.fixture()
def schema_file(tmp_path):
    """Write a schema file into a temp dir and return its path."""

    def _write(name: str, text: str):
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
