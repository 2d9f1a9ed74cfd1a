# path: campus-route/campus_route/models/route_models.py

from __future__ import annotations

from typing import List, Literal
from pydantic import BaseModel, ConfigDict, Field, model_validator

from campus_route.models.campus_models import GeoPoint


InstructionType = Literal["start", "turn", "destination"]


class Instruction(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: InstructionType
    text: str
    distance_from_previous_m: float = Field(ge=0)
    duration_from_previous_s: int = Field(ge=0)


class Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: GeoPoint
    end: GeoPoint
    waypoints: List[GeoPoint] = Field(default_factory=list)
    total_distance_m: float = Field(ge=0)
    estimated_time_s: int = Field(ge=0)
    instructions: List[Instruction] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_instructions(self):
        if not self.instructions:
            return self
        if self.instructions[0].type != "start":
            raise ValueError("First instruction must be of type 'start'")
        if self.instructions[-1].type != "destination":
            raise ValueError("Last instruction must be of type 'destination'")
        return self

    def points(self) -> List[GeoPoint]:
        return [self.start, *self.waypoints, self.end]
