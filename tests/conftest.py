"""Pytest configuration for ray tracer tests.

Shared fixtures for building worlds. Every test gets its own World so that
shape ids and materials never leak between tests.
"""

import pytest

from geometry.world import World


@pytest.fixture
def world():
    """An empty world under the default light."""
    return World()


@pytest.fixture
def default_world():
    """Two concentric spheres under the default light."""
    return World.default_world()
