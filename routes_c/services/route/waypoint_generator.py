import math
import random
from typing import List, Optional

from routes_c.models.route import Coordinate
from routes_c.services.route.geo import offset_coordinate

ANGLE_JITTER_RADIANS = 0.3
RADIUS_JITTER = (0.8, 1.2)
ATTEMPT_RADIUS_GROWTH = 0.15


def waypoint_radius(target_distance: float, waypoint_count: int, attempt_index: int) -> float:
    """Radius in miles for one attempt; later attempts probe larger loops."""
    radius = target_distance / (2.5 * (waypoint_count + 1))
    return radius * (1 + ATTEMPT_RADIUS_GROWTH * attempt_index)


def generate_waypoints(
    origin: Coordinate,
    target_distance: float,
    waypoint_count: int,
    attempt_index: int,
    rng: Optional[random.Random] = None,
) -> List[Coordinate]:
    """
    Place `waypoint_count` points in a rough ring around origin.

    The ring starts at a random bearing and every point is jittered in both
    bearing and radius, so the loop never comes out as a regular polygon.
    Output is random unless a seeded `rng` is passed.
    """
    rng = rng or random
    adjusted_radius = waypoint_radius(target_distance, waypoint_count, attempt_index)
    angle_step = 2 * math.pi / waypoint_count
    start_angle = rng.uniform(0, 2 * math.pi)

    waypoints = []
    for i in range(waypoint_count):
        angle = (
            start_angle
            + i * angle_step
            + rng.uniform(-ANGLE_JITTER_RADIANS, ANGLE_JITTER_RADIANS)
        )
        point_radius = adjusted_radius * rng.uniform(*RADIUS_JITTER)
        waypoints.append(offset_coordinate(origin, point_radius, angle))

    return waypoints
