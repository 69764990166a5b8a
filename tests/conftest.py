"""Shared test fixtures for codec tests."""

import pytest

from geojson_types import Position, dumps, parse


class PositionHelper:
    """Builds matching JSON text and Position values for 2D or 3D tests."""

    def __init__(self, dims: int):
        self.dims = dims

    def ps(self, number: int) -> str:
        values = [1.1 * number, 2.2 * number, 3.3 * number][: self.dims]
        return ", ".join(repr(v) for v in values)

    def p(self, number: int) -> Position:
        if self.dims == 2:
            return Position(1.1 * number, 2.2 * number)
        return Position(1.1 * number, 2.2 * number, 3.3 * number)


@pytest.fixture(params=[2, 3], ids=["2d", "3d"])
def positions(request):
    """Position helper, run once with 2D and once with 3D coordinates."""
    return PositionHelper(request.param)


@pytest.fixture
def round_trip():
    """Decode, encode, decode again and parse as the expected class."""

    def _round_trip(cls, text):
        first = parse(text)
        second = parse(dumps(first))
        assert second == first
        third = cls.parse(dumps(second))
        assert isinstance(third, cls)
        assert third == first
        return third

    return _round_trip


@pytest.fixture
def barcelona_bbox():
    """Barcelona Eixample bounding box (small area for testing)."""
    return (2.1600, 41.3850, 2.1750, 41.3950)
