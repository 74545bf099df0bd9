"""Shared test fixtures."""

from __future__ import annotations

import pytest

from crateshape.core import Direction, Edge, EdgeClass, Shape
from crateshape.render import RenderConfig


# Sample crate shapes (cell offsets, construction order)

SINGLE = [(0, 0)]
BAR_2X1 = [(0, 0), (1, 0)]
BAR_3X1 = [(-1, 0), (0, 0), (1, 0)]
ELL = [(0, 0), (1, 0), (0, 1)]
SQUARE_2X2 = [(0, 0), (1, 0), (0, 1), (1, 1)]
PLUS = [(0, 0), (1, 0), (-1, 0), (0, 1), (0, -1)]
# Ring around an empty (1, 1): four concave corners facing the hole
RING = [(0, 0), (1, 0), (2, 0), (0, 1), (2, 1), (0, 2), (1, 2), (2, 2)]


def sticky(x: int, y: int, direction: Direction) -> Edge:
    return Edge((x, y), direction, EdgeClass.STICKY)


@pytest.fixture
def single() -> Shape:
    return Shape(SINGLE)


@pytest.fixture
def bar() -> Shape:
    return Shape(BAR_2X1)


@pytest.fixture
def ell() -> Shape:
    return Shape(ELL)


@pytest.fixture
def config() -> RenderConfig:
    return RenderConfig(cell_size=8, border_size=1)


@pytest.fixture
def thick_config() -> RenderConfig:
    return RenderConfig(cell_size=12, border_size=2)
