"""Shared fixtures for beangen tests."""

from __future__ import annotations

import pytest

from beangen.codegen.core.config import load_config
from beangen.codegen.java import JavaGenerator


@pytest.fixture
def config():
    """Default configuration with a narrow banner so expected output stays readable."""
    return load_config({"banner_width": 40})


@pytest.fixture
def generator(config) -> JavaGenerator:
    return JavaGenerator(config)
