from .api_counter import ApiCallCounter, api_counter
from .directions_gateway import DirectionsGateway
from .errors import DirectionsError, NoPathError, RateLimitError
from .google_directions_gateway import GoogleDirectionsGateway

__all__ = [
    "ApiCallCounter",
    "api_counter",
    "DirectionsGateway",
    "DirectionsError",
    "NoPathError",
    "RateLimitError",
    "GoogleDirectionsGateway",
]
