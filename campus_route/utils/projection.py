# path: campus-route/campus_route/utils/projection.py

from __future__ import annotations

import math
from typing import Iterable, List

from campus_route.models.campus_models import AnchorPair, CampusBounds, GeoPoint, PixelPoint
from campus_route.utils.geo import InvalidCoordinate, check_coordinate


def _lerp(a: float, b: float, t: float) -> float:
    # Exact at t == 0 and t == 1, so anchors map onto themselves.
    return (1.0 - t) * a + t * b


class MapProjection:
    """
    Linear GPS <-> pixel mapping calibrated by two anchors.

    Each axis is interpolated independently (no rotation, no curvature), which
    holds only for an area as small as a campus. Points outside the anchors
    extrapolate; use ``is_within_campus_bounds`` to reject them.
    """

    def __init__(self, anchors: AnchorPair, bounds: CampusBounds):
        self.anchors = anchors
        self.bounds = bounds

    def gps_to_pixel(self, lat: float, lng: float) -> PixelPoint:
        lat, lng = check_coordinate(lat, lng)
        tl, br = self.anchors.top_left, self.anchors.bottom_right

        lat_range = tl.gps.lat - br.gps.lat
        lng_range = br.gps.lng - tl.gps.lng

        tx = (lng - tl.gps.lng) / lng_range
        ty = (tl.gps.lat - lat) / lat_range
        return PixelPoint(
            x=_lerp(tl.pixel.x, br.pixel.x, tx),
            y=_lerp(tl.pixel.y, br.pixel.y, ty),
        )

    def pixel_to_gps(self, x: float, y: float) -> GeoPoint:
        try:
            x = float(x)
            y = float(y)
        except (TypeError, ValueError) as e:
            raise InvalidCoordinate(f"pixel is not numeric: ({x!r}, {y!r})") from e
        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidCoordinate(f"pixel is not finite: ({x}, {y})")
        tl, br = self.anchors.top_left, self.anchors.bottom_right

        tx = (x - tl.pixel.x) / (br.pixel.x - tl.pixel.x)
        ty = (y - tl.pixel.y) / (br.pixel.y - tl.pixel.y)
        # Far-off pixels can extrapolate past the poles; GeoPoint.of rejects them.
        return GeoPoint.of(
            lat=_lerp(tl.gps.lat, br.gps.lat, ty),
            lng=_lerp(tl.gps.lng, br.gps.lng, tx),
        )

    def is_within_campus_bounds(self, point) -> bool:
        lat, lng = check_coordinate(point.lat, point.lng)
        return self.bounds.contains(lat, lng)

    def project(self, points: Iterable) -> List[PixelPoint]:
        return [self.gps_to_pixel(p.lat, p.lng) for p in points]
