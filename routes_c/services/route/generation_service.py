import asyncio
import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from routes_c.config import settings
from routes_c.models.preferences import RoutePreferences
from routes_c.models.route import Coordinate, Route
from routes_c.services.map.directions_gateway import DirectionsGateway
from routes_c.services.map.google_directions_gateway import GoogleDirectionsGateway
from routes_c.services.route.errors import (
    AllAttemptsFailed,
    InvalidDistance,
    NoPathFound,
    RateLimited,
)
from routes_c.services.route.rate_limiter import RateLimiter
from routes_c.services.route.segment_builder import SegmentBuilder
from routes_c.services.route.waypoint_generator import generate_waypoints

logger = logging.getLogger(__name__)

SHORT_ROUTE_MILES = 2.0


@dataclass(frozen=True)
class Strategy:
    """Loop shape template"""

    name: str
    waypoint_count: int


TRIANGLE = Strategy("triangle", 2)
SQUARE = Strategy("square", 3)
PENTAGON = Strategy("pentagon", 4)


@dataclass
class Candidate:
    route: Route
    delta: float


def select_strategies(target_distance_miles: float) -> List[Strategy]:
    """Short loops stay simple; longer ones get more corners to avoid long thin shapes."""
    if target_distance_miles < SHORT_ROUTE_MILES:
        return [TRIANGLE, SQUARE]
    return [SQUARE, PENTAGON, TRIANGLE]


def dynamic_tolerance(target_distance_miles: float) -> float:
    """Acceptance threshold in miles, tightened proportionally for short targets"""
    return min(
        settings.distance_tolerance_miles,
        target_distance_miles * settings.distance_tolerance_fraction,
    )


class RouteGenerationService:
    """
    Route generation service - searches waypoint shapes for a loop matching the target distance
    """

    def __init__(
        self,
        gateway: Optional[DirectionsGateway] = None,
        limiter: Optional[RateLimiter] = None,
        builder: Optional[SegmentBuilder] = None,
        max_attempts: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        if builder is None:
            builder = SegmentBuilder(gateway or GoogleDirectionsGateway(), limiter=limiter)
        self.builder = builder
        self.max_attempts = (
            settings.max_attempts_per_strategy if max_attempts is None else max_attempts
        )
        self.rng = rng

    async def generate_route(
        self,
        origin: Coordinate,
        target_distance_miles: float,
        preferences: RoutePreferences,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Route:
        """
        Generate a closed loop from origin close to target_distance_miles.

        Steps:
        1. Pick loop shapes by target magnitude
        2. For each shape, try up to max_attempts waypoint rings of growing radius
        3. Keep the closest candidate; stop as soon as one lands within tolerance
        4. Fall back to the best candidate unless it is more than 30% off

        Raises:
            RateLimited: The provider is overloaded; the search stops at once
            AllAttemptsFailed: No attempt produced a route
            InvalidDistance: The best route is too far from the target
            asyncio.CancelledError: cancel_event was set between attempts
        """
        tolerance = dynamic_tolerance(target_distance_miles)
        best: Optional[Candidate] = None
        attempts = 0

        logger.info(
            "Generating %.2f mi loop from (%.5f, %.5f), tolerance %.2f mi",
            target_distance_miles,
            origin.latitude,
            origin.longitude,
            tolerance,
        )

        for strategy in select_strategies(target_distance_miles):
            for attempt_index in range(self.max_attempts):
                if cancel_event is not None and cancel_event.is_set():
                    logger.info("Generation cancelled after %d attempts", attempts)
                    raise asyncio.CancelledError()

                attempts += 1
                waypoints = generate_waypoints(
                    origin,
                    target_distance_miles,
                    strategy.waypoint_count,
                    attempt_index,
                    rng=self.rng,
                )

                try:
                    route = await self.builder.build_route(origin, waypoints, preferences)
                except RateLimited:
                    logger.warning(
                        "Rate limited on %s attempt %d, aborting search",
                        strategy.name,
                        attempt_index + 1,
                    )
                    raise
                except NoPathFound:
                    logger.warning(
                        "No path for %s attempt %d, discarding",
                        strategy.name,
                        attempt_index + 1,
                    )
                    continue
                except Exception as e:
                    logger.warning(
                        "Directions failed on %s attempt %d, discarding: %s",
                        strategy.name,
                        attempt_index + 1,
                        e,
                    )
                    continue

                delta = abs(route.distance - target_distance_miles)
                logger.debug(
                    "%s attempt %d: %.2f mi (delta %.2f)",
                    strategy.name,
                    attempt_index + 1,
                    route.distance,
                    delta,
                )

                if best is None or delta < best.delta:
                    best = Candidate(route=route, delta=delta)

                if delta <= tolerance:
                    logger.info(
                        "Accepted %.2f mi %s loop after %d attempts",
                        route.distance,
                        strategy.name,
                        attempts,
                    )
                    return route

        if best is None:
            logger.warning("All %d attempts failed", attempts)
            raise AllAttemptsFailed()

        if best.delta > target_distance_miles * settings.invalid_distance_fraction:
            logger.warning(
                "Best loop %.2f mi is too far from %.2f mi target",
                best.route.distance,
                target_distance_miles,
            )
            raise InvalidDistance()

        logger.info(
            "Returning best-effort %.2f mi loop (delta %.2f) after %d attempts",
            best.route.distance,
            best.delta,
            attempts,
        )
        return best.route
