"""Pytest configuration and shared fixtures for layout tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from poolpave.domain.value_objects import Point


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared geometry fixtures
# =============================================================================


def rectangle(x: float, y: float, width: float, height: float) -> list[Point]:
    """Clockwise (y-down) rectangle outline."""
    return [
        Point(x, y),
        Point(x + width, y),
        Point(x + width, y + height),
        Point(x, y + height),
    ]


@pytest.fixture
def square_4m() -> list[Point]:
    """A 4000mm square paving boundary."""
    return rectangle(0, 0, 4000, 4000)


@pytest.fixture
def pool_6x3() -> list[Point]:
    """A 6000 x 3000mm rectangular pool outline, clockwise."""
    return rectangle(0, 0, 6000, 3000)


@pytest.fixture
def t_pool() -> list[Point]:
    """An 8-vertex T-shaped pool outline, clockwise (y-down)."""
    return [
        Point(0, 0),
        Point(6000, 0),
        Point(6000, 2000),
        Point(4000, 2000),
        Point(4000, 5000),
        Point(2000, 5000),
        Point(2000, 2000),
        Point(0, 2000),
    ]


# =============================================================================
# Configuration file fixtures
# =============================================================================


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write a configuration dict to a temporary JSON file."""

    def _write(data: dict[str, Any], name: str = "layout.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def coping_section() -> dict[str, Any]:
    return {
        "outline": [[0, 0], [6000, 0], [6000, 3000], [0, 3000]],
        "tile_width": 400,
        "tile_depth": 400,
        "grout_width": 5,
    }


@pytest.fixture
def paving_section() -> dict[str, Any]:
    return {
        "boundary": [[0, 0], [4000, 0], [4000, 4000], [0, 4000]],
        "paver_width": 400,
        "paver_height": 400,
    }
