"""Shared fixtures: every test starts with an empty composer cache and fresh settings."""

from __future__ import annotations

import pytest

from actionrole import RoleRegistry, clear_settings_cache, get_role_registry, reset_composer, set_role_registry


@pytest.fixture(autouse=True)
def clean_state() -> object:
    reset_composer()
    clear_settings_cache()
    yield
    reset_composer()
    clear_settings_cache()


@pytest.fixture
def scratch_registry() -> object:
    """Swap in an empty global role registry, restoring the real one afterwards."""
    original = get_role_registry()
    registry = RoleRegistry()
    set_role_registry(registry)
    yield registry
    set_role_registry(original)
