"""
Segment builder - stitches directions legs into one closed loop
"""
import logging
from typing import Callable, List, Optional, Sequence

from routes_c.config import settings
from routes_c.models.directions import PathAlternative, TravelMode
from routes_c.models.preferences import RoutePreferences
from routes_c.models.route import Coordinate, Route
from routes_c.services.map.directions_gateway import DirectionsGateway
from routes_c.services.map.errors import NoPathError, RateLimitError
from routes_c.services.route.errors import NoPathFound, RateLimited
from routes_c.services.route.geo import FEET_PER_MILE, meters_to_miles
from routes_c.services.route.rate_limiter import RateLimiter, rate_limiter
from routes_c.services.route.route_selector import select_preferred_alternative

logger = logging.getLogger(__name__)

Selector = Callable[
    [Sequence[PathAlternative], RoutePreferences], Optional[PathAlternative]
]


class SegmentBuilder:
    """Turns origin plus waypoints into a single stitched Route"""

    def __init__(
        self,
        gateway: DirectionsGateway,
        limiter: Optional[RateLimiter] = None,
        selector: Selector = select_preferred_alternative,
        grade_factor: Optional[float] = None,
    ):
        self.gateway = gateway
        self.limiter = limiter or rate_limiter
        self.selector = selector
        self.grade_factor = (
            settings.elevation_grade_factor if grade_factor is None else grade_factor
        )

    async def build_route(
        self,
        origin: Coordinate,
        waypoints: Sequence[Coordinate],
        preferences: RoutePreferences,
    ) -> Route:
        """
        Route origin -> waypoint 1 -> ... -> waypoint n -> origin.

        Raises:
            NoPathFound: Some leg has no usable path
            RateLimited: The provider signalled overload; no further legs are requested
        """
        stops = [origin, *waypoints, origin]
        points: List[Coordinate] = []
        total_miles = 0.0
        total_elevation_ft = 0.0

        for start, end in zip(stops, stops[1:]):
            leg = await self._route_leg(start, end, preferences)
            leg_miles = meters_to_miles(leg.distance_meters)

            # The first point of every later leg repeats the previous leg's last point
            points.extend(leg.geometry if not points else leg.geometry[1:])
            total_miles += leg_miles
            total_elevation_ft += self.estimate_elevation_gain(leg_miles)

        if points and points[-1] != points[0]:
            points.append(points[0])

        return Route(
            name=f"Loop {total_miles:.1f} mi",
            distance=total_miles,
            start_location=origin,
            route_points=points,
            elevation_gain=total_elevation_ft,
            route_type=preferences.primary_surface_type,
        )

    def estimate_elevation_gain(self, leg_miles: float) -> float:
        """Feet of climb assuming a constant average grade; not measured data."""
        return leg_miles * FEET_PER_MILE * self.grade_factor

    async def _route_leg(
        self, start: Coordinate, end: Coordinate, preferences: RoutePreferences
    ) -> PathAlternative:
        await self.limiter.acquire()
        try:
            alternatives = await self.gateway.route(
                start, end, mode=TravelMode.WALKING, want_alternates=True
            )
        except RateLimitError as e:
            raise RateLimited() from e
        except NoPathError as e:
            raise NoPathFound() from e

        selected = self.selector(alternatives, preferences)
        if selected is None:
            raise NoPathFound()
        return selected
