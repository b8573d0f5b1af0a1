"""Error kinds surfaced by loop route generation."""
from typing import Optional


class RouteGenerationError(Exception):
    kind = "route_generation_failed"
    default_message = "Failed to generate route. Please try again."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NoPathFound(RouteGenerationError):
    kind = "no_route_found"
    default_message = "Couldn't find a path for that segment."


class AllAttemptsFailed(RouteGenerationError):
    kind = "all_attempts_failed"
    default_message = "Unable to build a route after several tries. Please try again."


class RateLimited(RouteGenerationError):
    kind = "rate_limited"
    default_message = "Too many requests. Please wait 60 seconds and try again."


class InvalidDistance(RouteGenerationError):
    kind = "invalid_distance"
    default_message = (
        "Unable to generate a route matching your requested distance. "
        "Try adjusting the distance or starting location."
    )


class LocationUnavailable(RouteGenerationError):
    kind = "location_unavailable"
    default_message = (
        "Unable to determine your location. Please enable location services."
    )


class CooldownActive(RateLimited):
    """New requests are rejected while a rate-limit cool-down is running."""

    def __init__(self, remaining_seconds: int) -> None:
        self.remaining_seconds = remaining_seconds
        super().__init__(
            f"Too many requests. Please wait {remaining_seconds} seconds and try again."
        )
