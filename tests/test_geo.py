# ABOUTME: Tests for haversine distance.
# ABOUTME: Validates symmetry, zero distance, and known city-to-city distances.

import pytest

from gig_guide.geo import distance_km
from gig_guide.models import Coordinate

CBD = Coordinate(latitude=-37.8136, longitude=144.9631)
FITZROY = Coordinate(latitude=-37.7963, longitude=144.9778)
SYDNEY = Coordinate(latitude=-33.8688, longitude=151.2093)


class TestDistanceKm:
    """Tests for distance_km."""

    def test_same_point_is_zero(self) -> None:
        """Distance from a point to itself is zero."""
        assert distance_km(CBD, CBD) == 0.0

    def test_symmetric(self) -> None:
        """Distance does not depend on argument order."""
        assert distance_km(CBD, SYDNEY) == distance_km(SYDNEY, CBD)

    def test_cbd_to_fitzroy(self) -> None:
        """Short suburban distance is about 2.3 km."""
        assert distance_km(CBD, FITZROY) == pytest.approx(2.317, abs=0.01)

    def test_melbourne_to_sydney(self) -> None:
        """Melbourne to Sydney is roughly 714 km."""
        assert distance_km(CBD, SYDNEY) == pytest.approx(714, abs=5)

    def test_antipodes_do_not_exceed_half_circumference(self) -> None:
        """Opposite points give half the earth's circumference."""
        north = Coordinate(latitude=90, longitude=0)
        south = Coordinate(latitude=-90, longitude=0)
        assert distance_km(north, south) == pytest.approx(20015.1, abs=1)

    def test_crosses_antimeridian(self) -> None:
        """Longitudes either side of 180 are close together."""
        east = Coordinate(latitude=0, longitude=179.9)
        west = Coordinate(latitude=0, longitude=-179.9)
        assert distance_km(east, west) == pytest.approx(22.2, abs=0.1)
