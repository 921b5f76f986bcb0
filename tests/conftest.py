"""Pytest configuration and fixtures for proto schema generator tests."""

from __future__ import annotations

import re

import pytest

from proto_schema_generator.config import GeneratorConfig
from proto_schema_generator.writer import generate

FIXED_TIMESTAMP = "Thu Jan 01 00:00:00 UTC 1970"

BLOCK_PATTERN = re.compile(r"^\t*(message|enum) (\w+)\{$", re.MULTILINE)


@pytest.fixture(scope="session")
def fixed_config() -> GeneratorConfig:
    """A configuration whose header timestamp never changes."""
    return GeneratorConfig(clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture(scope="session")
def render(fixed_config):
    """Generate the schema of a class with the fixed configuration."""

    def _render(root_type: type) -> str:
        return generate(root_type, fixed_config)

    return _render


def block_names(document: str) -> list[str]:
    """Names of all message and enum blocks in a document, in order of appearance."""
    return [match.group(2) for match in BLOCK_PATTERN.finditer(document)]
