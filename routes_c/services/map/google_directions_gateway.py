import logging
from typing import Any, Dict, List, Optional

import httpx
import polyline

from routes_c.config import settings
from routes_c.models.directions import PathAlternative, TravelMode
from routes_c.models.route import Coordinate
from routes_c.services.map.api_counter import ApiCallCounter, api_counter
from routes_c.services.map.directions_gateway import DirectionsGateway
from routes_c.services.map.errors import DirectionsError, NoPathError, RateLimitError

logger = logging.getLogger(__name__)

_FIELD_MASK = "routes.distanceMeters,routes.polyline.encodedPolyline"


class GoogleDirectionsGateway(DirectionsGateway):
    """Google Routes API directions implementation"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        counter: Optional[ApiCallCounter] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.google_maps_api_key
        self.routes_url = settings.routes_url
        self._client = client
        self._counter = counter or api_counter

        if not self.api_key:
            raise ValueError("Google Maps API Key is required")

    async def route(
        self,
        origin: Coordinate,
        destination: Coordinate,
        mode: TravelMode = TravelMode.WALKING,
        want_alternates: bool = True,
    ) -> List[PathAlternative]:
        # Check API call limit
        if not self._counter.can_make_call():
            raise RateLimitError(
                f"API call limit exceeded. Max calls per day: {self._counter.max_calls_per_day}"
            )

        body = self._build_routes_request_body(origin, destination, mode, want_alternates)

        try:
            if self._client is not None:
                response = await self._post(self._client, body)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._post(client, body)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._classify_status_error(e.response) from e
        except httpx.HTTPError as e:
            raise DirectionsError(f"Failed to get directions: {e}") from e
        finally:
            # Failed requests still count against the provider quota
            self._counter.record_call()

        try:
            return self._convert_routes_response(response.json())
        except (ValueError, IndexError, AttributeError, TypeError) as e:
            raise DirectionsError(f"Malformed Routes API response: {e}") from e

    async def _post(self, client: httpx.AsyncClient, body: Dict[str, Any]) -> httpx.Response:
        return await client.post(
            self.routes_url,
            headers={
                "Content-Type": "application/json",
                "X-Goog-Api-Key": self.api_key,
                "X-Goog-FieldMask": _FIELD_MASK,
            },
            json=body,
            timeout=settings.request_timeout_s,
        )

    @staticmethod
    def _build_routes_request_body(
        origin: Coordinate,
        destination: Coordinate,
        mode: TravelMode,
        want_alternates: bool,
    ) -> Dict[str, Any]:
        """Build request body for Google Routes API"""
        return {
            "origin": _waypoint(origin),
            "destination": _waypoint(destination),
            "travelMode": mode.value,
            "computeAlternativeRoutes": want_alternates,
            "polylineEncoding": "ENCODED_POLYLINE",
        }

    @staticmethod
    def _classify_status_error(response: httpx.Response) -> DirectionsError:
        status_text = ""
        message = ""
        try:
            body = response.json()
        except ValueError:
            body = None
        # Error bodies are not guaranteed to be {"error": {...}} objects
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            status_text = error.get("status", "")
            message = error.get("message", "")

        if response.status_code == 429 or status_text == "RESOURCE_EXHAUSTED":
            return RateLimitError("API quota exceeded")
        if response.status_code == 404 or status_text == "NOT_FOUND":
            return NoPathError(f"No route between points{_detail(message)}")
        if response.status_code == 403:
            return DirectionsError("API key invalid or Routes API not enabled")
        return DirectionsError(f"Routes API error: {response.status_code}{_detail(message)}")

    @staticmethod
    def _convert_routes_response(data: Dict[str, Any]) -> List[PathAlternative]:
        """Convert Routes API response to path alternatives"""
        alternatives = []
        for route in data.get("routes", []):
            encoded = route.get("polyline", {}).get("encodedPolyline", "")
            if not encoded:
                continue
            geometry = [
                Coordinate(latitude=lat, longitude=lng)
                for lat, lng in polyline.decode(encoded)
            ]
            alternatives.append(
                PathAlternative(
                    distance_meters=route.get("distanceMeters", 0),
                    geometry=geometry,
                )
            )

        if not alternatives:
            raise NoPathError("Routes API returned no usable route")

        logger.debug("Routes API returned %d alternative(s)", len(alternatives))
        return alternatives


def _waypoint(coordinate: Coordinate) -> Dict[str, Any]:
    return {
        "location": {
            "latLng": {
                "latitude": coordinate.latitude,
                "longitude": coordinate.longitude,
            }
        }
    }


def _detail(message: str) -> str:
    return f" - {message}" if message else ""
