"""Shared pytest fixtures for houndstooth tests."""

from __future__ import annotations

import pytest
from jinja2 import Environment

from houndstooth.compiler.compiler import RenderUnit
from houndstooth.compiler.registry import ComponentRegistry
from houndstooth.runtime.template_renderer import create_jinja_env
from houndstooth.widgets.catalog import register_catalog


@pytest.fixture
def registry() -> ComponentRegistry:
    """Return a fresh, empty registry (never the process-wide one)."""
    return ComponentRegistry()


@pytest.fixture
def env() -> Environment:
    """Return a Jinja2 environment with the built-in templates only."""
    return create_jinja_env()


@pytest.fixture
def units(registry: ComponentRegistry, env: Environment) -> dict[str, RenderUnit]:
    """Return every catalog component compiled into the fresh registry."""
    return register_catalog(registry, env=env)
