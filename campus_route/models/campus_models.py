# path: campus-route/campus_route/models/campus_models.py

from __future__ import annotations

import math
from typing import List, Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from campus_route.utils.geo import check_coordinate


RoadNodeType = Literal["intersection", "road"]


class GeoPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float

    @model_validator(mode="after")
    def validate_range(self):
        check_coordinate(self.lat, self.lng)
        return self

    @classmethod
    def of(cls, lat: float, lng: float) -> "GeoPoint":
        # InvalidCoordinate instead of pydantic's ValidationError
        lat, lng = check_coordinate(lat, lng)
        return cls(lat=lat, lng=lng)

    def rounded_key(self, decimals: int) -> tuple:
        return (round(self.lat, decimals), round(self.lng, decimals))


class PixelPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    @field_validator("x", "y")
    @classmethod
    def validate_finite(cls, v: float):
        if not math.isfinite(v):
            raise ValueError(f"pixel coordinate is not finite: {v}")
        return v


class RoadNode(GeoPoint):
    type: RoadNodeType = "road"

    def as_point(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lng=self.lng)


class Anchor(BaseModel):
    model_config = ConfigDict(frozen=True)

    pixel: PixelPoint
    gps: GeoPoint


class AnchorPair(BaseModel):
    model_config = ConfigDict(frozen=True)

    top_left: Anchor
    bottom_right: Anchor

    @model_validator(mode="after")
    def validate_orientation(self):
        tl, br = self.top_left, self.bottom_right
        if not tl.gps.lat > br.gps.lat:
            raise ValueError("top_left anchor must lie north of bottom_right")
        if not br.gps.lng > tl.gps.lng:
            raise ValueError("bottom_right anchor must lie east of top_left")
        if br.pixel.x == tl.pixel.x or br.pixel.y == tl.pixel.y:
            raise ValueError("anchor pixels must span a non-zero range on both axes")
        return self


class CampusBounds(BaseModel):
    model_config = ConfigDict(frozen=True)

    north: float = Field(ge=-90, le=90)
    south: float = Field(ge=-90, le=90)
    east: float = Field(ge=-180, le=180)
    west: float = Field(ge=-180, le=180)

    @model_validator(mode="after")
    def validate_extent(self):
        if self.north <= self.south:
            raise ValueError("north bound must be greater than south bound")
        if self.east <= self.west:
            raise ValueError("east bound must be greater than west bound")
        return self

    def contains(self, lat: float, lng: float) -> bool:
        return self.south <= lat <= self.north and self.west <= lng <= self.east


class CampusConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(default="campus", max_length=80)
    anchors: AnchorPair
    bounds: CampusBounds
    map_size: PixelPoint
    road_nodes: List[RoadNode] = Field(min_length=1)

    def intersections(self) -> List[RoadNode]:
        return [n for n in self.road_nodes if n.type == "intersection"]
