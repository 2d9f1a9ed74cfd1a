# path: campus-route/campus_route/services/guidance.py

from __future__ import annotations

from typing import Literal, Optional

from campus_route.utils.geo import haversine_m, normalize_angle_deg, round_half_up


AccuracyStatus = Literal["high", "medium", "low", "unknown"]

DEFAULT_ARRIVAL_THRESHOLD_M = 10.0
HIGH_ACCURACY_M = 5.0
MEDIUM_ACCURACY_M = 20.0
# Approximate for Pune, India
DEFAULT_MAGNETIC_DECLINATION_DEG = 2.5

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def check_proximity(position, destination, threshold_m: float = DEFAULT_ARRIVAL_THRESHOLD_M) -> bool:
    """True once ``position`` is within ``threshold_m`` of ``destination``."""
    if position is None or destination is None:
        return False
    return haversine_m(position, destination) <= threshold_m


def accuracy_status(accuracy_m: Optional[float]) -> AccuracyStatus:
    if accuracy_m is None:
        return "unknown"
    if accuracy_m <= HIGH_ACCURACY_M:
        return "high"
    if accuracy_m <= MEDIUM_ACCURACY_M:
        return "medium"
    return "low"


def compass_point(heading_deg: float) -> str:
    return COMPASS_POINTS[round_half_up((heading_deg % 360.0) / 45.0) % 8]


def relative_bearing(destination_bearing_deg: float, user_heading_deg: float) -> float:
    # >0: destination lies to the right of where the user faces
    return normalize_angle_deg(destination_bearing_deg - user_heading_deg)


def true_heading(magnetic_heading_deg: float, declination_deg: float = DEFAULT_MAGNETIC_DECLINATION_DEG) -> float:
    return (magnetic_heading_deg + declination_deg) % 360.0
