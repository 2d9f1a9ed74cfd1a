import pytest

from campus_route.models.campus_models import GeoPoint
from campus_route.models.route_models import Instruction
from campus_route.services import announcements
from campus_route.services.guidance import (
    accuracy_status,
    check_proximity,
    compass_point,
    relative_bearing,
    true_heading,
)


DESTINATION = GeoPoint(lat=18.5240, lng=73.7300)


def test_check_proximity():
    assert check_proximity(GeoPoint(lat=18.52405, lng=73.7300), DESTINATION)
    assert not check_proximity(GeoPoint(lat=18.5245, lng=73.7300), DESTINATION)
    assert check_proximity(GeoPoint(lat=18.5245, lng=73.7300), DESTINATION, threshold_m=60)
    assert not check_proximity(None, DESTINATION)
    assert not check_proximity(DESTINATION, None)


@pytest.mark.parametrize(
    "accuracy, expected",
    [(3, "high"), (5, "high"), (12.5, "medium"), (20, "medium"), (35, "low"), (None, "unknown")],
)
def test_accuracy_status(accuracy, expected):
    assert accuracy_status(accuracy) == expected


@pytest.mark.parametrize(
    "heading, expected",
    [(0, "N"), (22, "N"), (44, "NE"), (90, "E"), (180, "S"), (225, "SW"), (270, "W"), (350, "N"), (-90, "W"),
     (22.5, "NE"), (112.5, "SE"), (337.5, "N")],
)
def test_compass_point(heading, expected):
    assert compass_point(heading) == expected


def test_relative_and_true_heading():
    assert relative_bearing(10, 350) == 20
    assert relative_bearing(350, 10) == -20
    assert relative_bearing(180, 0) == 180
    assert true_heading(359) == pytest.approx(1.5)
    assert true_heading(90, declination_deg=-2.0) == 88


def test_announcement_texts():
    assert announcements.navigation_started("Main Library") == "Navigation started to Main Library"
    assert announcements.destination_reached("Main Library") == (
        "You have arrived at your destination: Main Library"
    )
    assert announcements.proximity_alert("Main Library", 42.5) == (
        "Approaching Main Library. 43 meters remaining"
    )
    assert announcements.distance_update(250.4, 180) == "250 meters remaining. Estimated time: 3 minutes"
    assert announcements.turn_instruction("Turn left") == "Turn left"
    assert announcements.turn_instruction("Turn left", "Cafeteria") == "Turn left towards Cafeteria"


def test_announce_instruction():
    turn = Instruction(type="turn", text="Turn left", distance_from_previous_m=120.6, duration_from_previous_s=87)
    assert announcements.announce_instruction(turn) == "In 121 meters, turn left"
    assert announcements.announce_instruction(turn, "Main Library") == (
        "In 121 meters, turn left towards Main Library"
    )

    arrive = Instruction(
        type="destination",
        text="You have arrived at your destination",
        distance_from_previous_m=30.0,
        duration_from_previous_s=22,
    )
    assert announcements.announce_instruction(arrive) == "You have arrived at your destination"
