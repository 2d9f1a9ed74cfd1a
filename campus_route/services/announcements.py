# path: campus-route/campus_route/services/announcements.py

from __future__ import annotations

from typing import Optional

from campus_route.models.route_models import Instruction
from campus_route.utils.geo import round_half_up as _whole


def navigation_started(destination_name: str) -> str:
    return f"Navigation started to {destination_name}"


def navigation_cancelled() -> str:
    return "Navigation cancelled"


def destination_reached(destination_name: str) -> str:
    return f"You have arrived at your destination: {destination_name}"


def proximity_alert(destination_name: str, distance_m: float) -> str:
    return f"Approaching {destination_name}. {_whole(distance_m)} meters remaining"


def gps_lost() -> str:
    return "GPS signal lost. Please check your location settings"


def gps_restored() -> str:
    return "GPS signal restored"


def route_recalculating() -> str:
    return "Recalculating route"


def turn_instruction(direction: str, landmark: Optional[str] = None) -> str:
    if landmark:
        return f"{direction} towards {landmark}"
    return direction


def distance_update(distance_m: float, estimated_time_s: int) -> str:
    minutes = _whole(estimated_time_s / 60)
    return f"{_whole(distance_m)} meters remaining. Estimated time: {minutes} minutes"


def announce_instruction(instruction: Instruction, landmark: Optional[str] = None) -> str:
    """Speakable text for one step of a computed route."""
    if instruction.type != "turn":
        return instruction.text
    # the distance belongs to the segment walked before this turn
    text = turn_instruction(instruction.text, landmark)
    return f"In {_whole(instruction.distance_from_previous_m)} meters, {text[0].lower()}{text[1:]}"
