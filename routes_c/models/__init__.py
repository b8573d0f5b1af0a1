from .directions import PathAlternative, TravelMode
from .preferences import ElevationPreference, RoutePreferences
from .request import GenerateRouteRequest
from .response import ErrorResponse, GenerateRouteResponse
from .route import Coordinate, Route, SurfaceType

__all__ = [
    "Coordinate",
    "ElevationPreference",
    "ErrorResponse",
    "GenerateRouteRequest",
    "GenerateRouteResponse",
    "PathAlternative",
    "Route",
    "RoutePreferences",
    "SurfaceType",
    "TravelMode",
]
