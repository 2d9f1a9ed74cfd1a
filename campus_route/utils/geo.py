# path: campus-route/campus_route/utils/geo.py

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple
import math


EARTH_RADIUS_M = 6371000.0
DEFAULT_WALKING_SPEED_MPS = 1.4


class InvalidCoordinate(ValueError):
    """Raised for NaN/inf or out-of-range latitude/longitude values."""


def check_coordinate(lat: float, lng: float) -> Tuple[float, float]:
    try:
        lat = float(lat)
        lng = float(lng)
    except (TypeError, ValueError) as e:
        raise InvalidCoordinate(f"coordinate is not numeric: ({lat!r}, {lng!r})") from e
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise InvalidCoordinate(f"coordinate is not finite: ({lat}, {lng})")
    if not (-90.0 <= lat <= 90.0):
        raise InvalidCoordinate(f"lat out of range [-90,90]: {lat}")
    if not (-180.0 <= lng <= 180.0):
        raise InvalidCoordinate(f"lng out of range [-180,180]: {lng}")
    return lat, lng


def _latlng(point) -> Tuple[float, float]:
    return check_coordinate(point.lat, point.lng)


def haversine_m(a, b) -> float:
    """Great-circle distance in metres between two objects with ``lat``/``lng``."""
    a_lat, a_lng = _latlng(a)
    b_lat, b_lng = _latlng(b)

    phi1 = math.radians(a_lat)
    phi2 = math.radians(b_lat)
    dphi = math.radians(b_lat - a_lat)
    dlmb = math.radians(b_lng - a_lng)

    s = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    c = 2 * math.atan2(math.sqrt(s), math.sqrt(1 - s))
    return EARTH_RADIUS_M * c


def bearing_deg(a, b) -> float:
    # Initial bearing (forward azimuth), degrees true, [0,360)
    a_lat, a_lng = _latlng(a)
    b_lat, b_lng = _latlng(b)

    phi1 = math.radians(a_lat)
    phi2 = math.radians(b_lat)
    dlmb = math.radians(b_lng - a_lng)

    y = math.sin(dlmb) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dlmb)
    brng = (math.degrees(math.atan2(y, x)) + 360.0) % 360.0
    # -tiny + 360 can round to exactly 360.0
    return 0.0 if brng >= 360.0 else brng


def normalize_angle_deg(angle: float) -> float:
    """Wrap an angle difference into (-180, 180]."""
    while angle > 180.0:
        angle -= 360.0
    while angle <= -180.0:
        angle += 360.0
    return angle


def polyline_length_m(points: Sequence) -> float:
    total = 0.0
    for i in range(1, len(points)):
        total += haversine_m(points[i - 1], points[i])
    return total


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def walk_time_s(distance_m: float, speed_mps: float = DEFAULT_WALKING_SPEED_MPS) -> int:
    if speed_mps <= 0:
        raise ValueError(f"walking speed must be positive: {speed_mps}")
    return int(math.ceil(distance_m / speed_mps))


def segment_lengths_m(points: Iterable) -> List[float]:
    pts = list(points)
    return [haversine_m(pts[i - 1], pts[i]) for i in range(1, len(pts))]
