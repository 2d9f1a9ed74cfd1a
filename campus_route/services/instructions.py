# path: campus-route/campus_route/services/instructions.py

from __future__ import annotations

from typing import List, Sequence

from campus_route.models.route_models import Instruction
from campus_route.utils.geo import (
    DEFAULT_WALKING_SPEED_MPS,
    bearing_deg,
    normalize_angle_deg,
    segment_lengths_m,
    walk_time_s,
)


STRAIGHT_MAX_DEG = 30.0
TURN_MAX_DEG = 90.0

START_TEXT = "Start your journey"
DESTINATION_TEXT = "You have arrived at your destination"


def classify_turn(delta_deg: float) -> str:
    """Label a heading change; positive deltas turn clockwise (right)."""
    magnitude = abs(delta_deg)
    if magnitude <= STRAIGHT_MAX_DEG:
        return "Continue straight"
    side = "right" if delta_deg > 0 else "left"
    if magnitude <= TURN_MAX_DEG:
        return f"Turn {side}"
    return f"Turn sharp {side}"


def generate_turn_by_turn_instructions(
    points: Sequence,
    speed_mps: float = DEFAULT_WALKING_SPEED_MPS,
) -> List[Instruction]:
    """
    One instruction per transition along ``points`` ([start, *waypoints, end]).

    Interior points become ``turn`` instructions carrying the distance and
    duration of the segment leading into them. Nothing is merged, so a
    straight run over several waypoints yields several "Continue straight"
    entries.
    """
    if len(points) < 2:
        return []

    segments = segment_lengths_m(points)
    instructions = [
        Instruction(type="start", text=START_TEXT, distance_from_previous_m=0.0, duration_from_previous_s=0)
    ]

    for i in range(1, len(points) - 1):
        prev, current, nxt = points[i - 1], points[i], points[i + 1]
        delta = normalize_angle_deg(bearing_deg(current, nxt) - bearing_deg(prev, current))
        distance = segments[i - 1]
        instructions.append(
            Instruction(
                type="turn",
                text=classify_turn(delta),
                distance_from_previous_m=distance,
                duration_from_previous_s=walk_time_s(distance, speed_mps),
            )
        )

    final = segments[-1]
    instructions.append(
        Instruction(
            type="destination",
            text=DESTINATION_TEXT,
            distance_from_previous_m=final,
            duration_from_previous_s=walk_time_s(final, speed_mps),
        )
    )
    return instructions
