"""
Route generation session - single in-flight generation with rate-limit cool-down

Starting a new generation cancels the one in flight. After the provider
reports overload, new requests are rejected until the cool-down expires.
"""
import asyncio
import logging
import math
import time
from typing import Callable, Optional

from routes_c.config import settings
from routes_c.models.preferences import RoutePreferences
from routes_c.models.request import GenerateRouteRequest
from routes_c.models.route import Coordinate, Route
from routes_c.services.route.errors import (
    CooldownActive,
    LocationUnavailable,
    RateLimited,
    RouteGenerationError,
)
from routes_c.services.route.generation_service import RouteGenerationService

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[Route], None]
FailureCallback = Callable[[RouteGenerationError], None]


class GenerationHandle:
    """Handle on one running generation"""

    def __init__(self, task: "asyncio.Task[Route]", cancel_event: asyncio.Event):
        self._task = task
        self._cancel_event = cancel_event

    def cancel(self) -> None:
        """Stop before the next attempt; the in-flight directions call is left to finish."""
        self._cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def done(self) -> bool:
        return self._task.done()

    async def wait(self) -> Optional[Route]:
        """The generated route, or None if this generation was cancelled."""
        try:
            return await self._task
        except asyncio.CancelledError:
            if self._cancel_event.is_set() and self._task.done():
                return None
            raise


class RouteService:
    """
    Main route service - owns the current generation and the rate-limit cool-down
    """

    def __init__(
        self,
        generation_service: Optional[RouteGenerationService] = None,
        cooldown_s: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.generation_service = generation_service or RouteGenerationService()
        self.cooldown_s = settings.rate_limit_cooldown_s if cooldown_s is None else cooldown_s
        self._clock = clock
        self._current: Optional[GenerationHandle] = None
        self.rate_limited_until: Optional[float] = None

    @staticmethod
    def resolve_origin(
        current_location: Optional[Coordinate], preferences: RoutePreferences
    ) -> Coordinate:
        if not preferences.start_from_current_location and preferences.custom_start_location:
            return preferences.custom_start_location
        if current_location is None:
            raise LocationUnavailable()
        return current_location

    def cooldown_remaining(self) -> int:
        """Whole seconds left in the rate-limit cool-down, 0 when none is active"""
        if self.rate_limited_until is None:
            return 0
        remaining = self.rate_limited_until - self._clock()
        return max(0, math.ceil(remaining))

    def start_generation(
        self,
        request: GenerateRouteRequest,
        on_success: Optional[SuccessCallback] = None,
        on_failure: Optional[FailureCallback] = None,
    ) -> GenerationHandle:
        """
        Start a generation, superseding any in flight.

        Must be called from a running event loop.

        Raises:
            CooldownActive: A rate-limit cool-down is still running
            LocationUnavailable: No origin could be determined
        """
        remaining = self.cooldown_remaining()
        if remaining > 0:
            raise CooldownActive(remaining)

        origin = self.resolve_origin(request.current_location, request.preferences)

        self.cancel()

        cancel_event = asyncio.Event()
        task = asyncio.create_task(
            self._run(
                origin,
                request.target_distance_miles,
                request.preferences,
                cancel_event,
                on_success,
                on_failure,
            )
        )
        self._current = GenerationHandle(task, cancel_event)
        return self._current

    async def generate_route(self, request: GenerateRouteRequest) -> Optional[Route]:
        """Generate and wait; None means a newer request superseded this one."""
        handle = self.start_generation(request)
        return await handle.wait()

    def cancel(self) -> bool:
        """Cancel the in-flight generation, if any"""
        if self._current is None or self._current.done():
            return False
        logger.info("Cancelling in-flight route generation")
        self._current.cancel()
        return True

    async def _run(
        self,
        origin: Coordinate,
        target_distance_miles: float,
        preferences: RoutePreferences,
        cancel_event: asyncio.Event,
        on_success: Optional[SuccessCallback],
        on_failure: Optional[FailureCallback],
    ) -> Route:
        try:
            route = await self.generation_service.generate_route(
                origin, target_distance_miles, preferences, cancel_event=cancel_event
            )
        except RateLimited as e:
            self.rate_limited_until = self._clock() + self.cooldown_s
            logger.warning("Rate limited, rejecting new requests for %.0fs", self.cooldown_s)
            self._fail(e, cancel_event, on_failure)
            raise
        except RouteGenerationError as e:
            self._fail(e, cancel_event, on_failure)
            raise
        except Exception as e:
            logger.exception("Route generation error")
            error = RouteGenerationError()
            self._fail(error, cancel_event, on_failure)
            raise error from e

        # Cancelled while the final directions call was in flight
        if cancel_event.is_set():
            raise asyncio.CancelledError()

        if on_success is not None:
            on_success(route)
        return route

    @staticmethod
    def _fail(
        error: RouteGenerationError,
        cancel_event: asyncio.Event,
        on_failure: Optional[FailureCallback],
    ) -> None:
        if cancel_event.is_set():
            raise asyncio.CancelledError() from error
        if on_failure is not None:
            on_failure(error)
