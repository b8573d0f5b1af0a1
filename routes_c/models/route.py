"""
Route models produced by the loop generator
"""
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """WGS84 latitude/longitude pair in degrees"""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class SurfaceType(str, Enum):
    ROAD = "Road"
    TRAIL = "Trail"
    MIXED = "Mixed"

    @property
    def description(self) -> str:
        return _SURFACE_DESCRIPTIONS[self]


_SURFACE_DESCRIPTIONS = {
    SurfaceType.ROAD: "Primarily paved surfaces",
    SurfaceType.TRAIL: "Parks and nature paths",
    SurfaceType.MIXED: "Combination of both",
}


class Route(BaseModel):
    """Generated loop route"""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    distance: float  # Distance in miles
    start_location: Coordinate
    route_points: List[Coordinate]
    elevation_gain: float  # Estimated gain in feet
    route_type: SurfaceType = SurfaceType.ROAD
    is_favorite: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def description(self) -> str:
        return (
            f"Distance: {self.distance:.2f} miles, "
            f"Elevation Gain: {int(self.elevation_gain)} ft, "
            f"Type: {self.route_type.value}"
        )
