# path: campus-route/campus_route/services/route_calculator.py

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple

from campus_route.config import RouteSettings
from campus_route.models.campus_models import CampusConfig, GeoPoint, PixelPoint, RoadNode
from campus_route.models.route_models import Route
from campus_route.services.guidance import check_proximity
from campus_route.services.instructions import generate_turn_by_turn_instructions
from campus_route.services.route_cache import RouteCache
from campus_route.utils.geo import InvalidCoordinate, haversine_m, polyline_length_m, walk_time_s
from campus_route.utils.projection import MapProjection


logger = logging.getLogger(__name__)

CacheKey = Tuple[float, float, float, float]


def coerce_point(value: Any) -> GeoPoint:
    """Accept a GeoPoint, a (lat, lng) pair or a mapping/object with lat and lng."""
    if isinstance(value, GeoPoint):
        if isinstance(value, RoadNode):
            return value.as_point()
        return value
    if isinstance(value, Mapping):
        if "lat" not in value or "lng" not in value:
            raise InvalidCoordinate(f"point mapping needs 'lat' and 'lng': {value!r}")
        return GeoPoint.of(value["lat"], value["lng"])
    if isinstance(value, (tuple, list)):
        if len(value) != 2:
            raise InvalidCoordinate(f"point pair must be (lat, lng): {value!r}")
        return GeoPoint.of(value[0], value[1])
    if hasattr(value, "lat") and hasattr(value, "lng"):
        return GeoPoint.of(value.lat, value.lng)
    raise InvalidCoordinate(f"not a coordinate: {value!r}")


class RouteCalculator:
    """
    Heuristic campus router.

    Snaps start and end to their nearest road nodes and bridges them through
    at most one intersection. This is a one-hop guess, not a shortest-path
    search over the road network.
    """

    def __init__(
        self,
        campus: CampusConfig,
        settings: Optional[RouteSettings] = None,
        cache: Optional[RouteCache] = None,
    ):
        self.campus = campus
        self.settings = settings or RouteSettings()
        self.cache = cache if cache is not None else RouteCache(self.settings.cache_max_entries)
        self.projection = MapProjection(campus.anchors, campus.bounds)

    # ----------------
    # Coordinate helpers exposed to the map layer
    # ----------------
    def gps_to_pixel(self, lat: float, lng: float) -> PixelPoint:
        return self.projection.gps_to_pixel(lat, lng)

    def pixel_to_gps(self, x: float, y: float) -> GeoPoint:
        return self.projection.pixel_to_gps(x, y)

    def is_within_campus_bounds(self, point) -> bool:
        return self.projection.is_within_campus_bounds(coerce_point(point))

    def route_pixels(self, route: Route) -> List[PixelPoint]:
        return self.projection.project(route.points())

    # ----------------
    # Routing
    # ----------------
    def cache_key(self, start: GeoPoint, end: GeoPoint) -> CacheKey:
        decimals = self.settings.cache_key_decimals
        return (*start.rounded_key(decimals), *end.rounded_key(decimals))

    def nearest_road_point(self, point) -> RoadNode:
        point = coerce_point(point)
        nodes = self.campus.road_nodes
        nearest = nodes[0]
        min_distance = haversine_m(point, nearest)
        for node in nodes[1:]:
            distance = haversine_m(point, node)
            # strict: the first of equally near nodes wins
            if distance < min_distance:
                min_distance = distance
                nearest = node
        return nearest

    def best_intersection(self, start: GeoPoint, end: GeoPoint) -> Optional[RoadNode]:
        radius = self.settings.intersection_radius_m
        best = None
        best_total = None
        for node in self.campus.intersections():
            to_start = haversine_m(start, node)
            to_end = haversine_m(end, node)
            if to_start >= radius or to_end >= radius:
                continue
            total = to_start + to_end
            if best_total is None or total < best_total:
                best, best_total = node, total
        return best

    def calculate_route(self, start, end) -> Route:
        start = coerce_point(start)
        end = coerce_point(end)

        key = self.cache_key(start, end)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Route cache hit for %s", key)
            return cached

        route = self._build_route(start, end)
        self.cache.put(key, route)
        logger.debug(
            "Computed route %s: %d waypoints, %.1f m, %d s",
            key,
            len(route.waypoints),
            route.total_distance_m,
            route.estimated_time_s,
        )
        return route

    def clear_cache(self) -> None:
        self.cache.clear()

    def has_arrived(self, position, destination) -> bool:
        return check_proximity(
            coerce_point(position),
            coerce_point(destination),
            self.settings.arrival_threshold_m,
        )

    def _build_route(self, start: GeoPoint, end: GeoPoint) -> Route:
        speed = self.settings.walking_speed_mps
        if (start.lat, start.lng) == (end.lat, end.lng):
            return Route(
                start=start,
                end=end,
                waypoints=[],
                total_distance_m=0.0,
                estimated_time_s=0,
                instructions=generate_turn_by_turn_instructions([start, end], speed),
            )

        snap = self.settings.road_snap_threshold_m
        waypoints: List[GeoPoint] = []

        start_road = self.nearest_road_point(start)
        end_road = self.nearest_road_point(end)

        if haversine_m(start, start_road) > snap:
            waypoints.append(start_road.as_point())

        intersection = self.best_intersection(start, end)
        if intersection is not None:
            waypoints.append(intersection.as_point())

        if haversine_m(end, end_road) > snap:
            waypoints.append(end_road.as_point())

        points = [start, *waypoints, end]
        total = polyline_length_m(points)
        return Route(
            start=start,
            end=end,
            waypoints=waypoints,
            total_distance_m=total,
            estimated_time_s=walk_time_s(total, speed),
            instructions=generate_turn_by_turn_instructions(points, speed),
        )
