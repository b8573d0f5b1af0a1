from typing import Optional
from pydantic import BaseModel, Field

from .preferences import RoutePreferences
from .route import Coordinate


class GenerateRouteRequest(BaseModel):
    current_location: Optional[Coordinate] = None
    target_distance_miles: float = Field(gt=0)
    preferences: RoutePreferences = RoutePreferences()
