"""
Directions gateway models
"""
from enum import Enum
from typing import List

from pydantic import BaseModel

from .route import Coordinate


class TravelMode(str, Enum):
    WALKING = "WALK"


class PathAlternative(BaseModel):
    """One candidate path between two points as reported by the gateway"""

    distance_meters: float
    geometry: List[Coordinate]
