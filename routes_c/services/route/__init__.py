# Route service package
from .errors import (
    AllAttemptsFailed,
    CooldownActive,
    InvalidDistance,
    LocationUnavailable,
    NoPathFound,
    RateLimited,
    RouteGenerationError,
)
from .generation_service import RouteGenerationService, dynamic_tolerance, select_strategies
from .gpx_export import gpx_filename, route_to_gpx, suggested_save_name
from .rate_limiter import RateLimiter, rate_limiter
from .route_selector import select_preferred_alternative
from .segment_builder import SegmentBuilder
from .waypoint_generator import generate_waypoints


__all__ = [
    "AllAttemptsFailed",
    "CooldownActive",
    "InvalidDistance",
    "LocationUnavailable",
    "NoPathFound",
    "RateLimited",
    "RouteGenerationError",
    "RouteGenerationService",
    "dynamic_tolerance",
    "select_strategies",
    "gpx_filename",
    "route_to_gpx",
    "suggested_save_name",
    "RateLimiter",
    "rate_limiter",
    "select_preferred_alternative",
    "SegmentBuilder",
    "generate_waypoints",
    ]
