import pytest

from campus_route.models.campus_models import GeoPoint, PixelPoint
from campus_route.utils.geo import InvalidCoordinate
from campus_route.utils.projection import MapProjection


@pytest.fixture
def projection(campus):
    return MapProjection(campus.anchors, campus.bounds)


def test_anchors_map_exactly_to_their_pixels(projection):
    assert projection.gps_to_pixel(18.5271557, 73.7276252) == PixelPoint(x=132.75, y=133.55)
    assert projection.gps_to_pixel(18.5180856, 73.7339646) == PixelPoint(x=2512.5, y=3776.5)


def test_pixel_to_gps_returns_anchor_coordinates(projection):
    top_left = projection.pixel_to_gps(132.75, 133.55)
    assert top_left.lat == pytest.approx(18.5271557, abs=1e-9)
    assert top_left.lng == pytest.approx(73.7276252, abs=1e-9)


@pytest.mark.parametrize(
    "lat, lng",
    [
        (18.5250, 73.7300),
        (18.5235, 73.7315),
        (18.5271557, 73.7339646),
        # outside the anchors: extrapolated, still invertible
        (18.5300, 73.7200),
        (18.5100, 73.7400),
    ],
)
def test_round_trip_within_a_micro_degree(projection, lat, lng):
    px = projection.gps_to_pixel(lat, lng)
    back = projection.pixel_to_gps(px.x, px.y)
    assert back.lat == pytest.approx(lat, abs=1e-6)
    assert back.lng == pytest.approx(lng, abs=1e-6)


def test_north_is_up_and_east_is_right(projection):
    centre = projection.gps_to_pixel(18.5250, 73.7300)
    north = projection.gps_to_pixel(18.5260, 73.7300)
    east = projection.gps_to_pixel(18.5250, 73.7310)
    assert north.y < centre.y
    assert north.x == pytest.approx(centre.x)
    assert east.x > centre.x
    assert east.y == pytest.approx(centre.y)


def test_campus_bounds(projection):
    assert projection.is_within_campus_bounds(GeoPoint(lat=18.5270, lng=73.7280))
    assert not projection.is_within_campus_bounds(GeoPoint(lat=0.0, lng=0.0))
    # edges are inclusive
    assert projection.is_within_campus_bounds(GeoPoint(lat=18.5280, lng=73.7250))
    assert not projection.is_within_campus_bounds(GeoPoint(lat=18.5281, lng=73.7300))


def test_project_maps_each_point(projection):
    points = [GeoPoint(lat=18.5271557, lng=73.7276252), GeoPoint(lat=18.5180856, lng=73.7339646)]
    assert projection.project(points) == [PixelPoint(x=132.75, y=133.55), PixelPoint(x=2512.5, y=3776.5)]


def test_invalid_input_raises(projection):
    with pytest.raises(InvalidCoordinate):
        projection.gps_to_pixel(float("nan"), 73.73)
    with pytest.raises(InvalidCoordinate):
        projection.gps_to_pixel(95.0, 73.73)
    with pytest.raises(InvalidCoordinate):
        projection.pixel_to_gps(float("inf"), 10.0)
    with pytest.raises(InvalidCoordinate):
        # far enough below the map to extrapolate past the south pole
        projection.pixel_to_gps(100.0, 1e12)
