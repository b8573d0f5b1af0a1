"""
Caller preferences for a single route generation
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .route import Coordinate, SurfaceType


class ElevationPreference(str, Enum):
    """Advisory only, the generator does not act on it yet"""

    FLAT = "Flat"
    HILLY = "Hilly"
    MIXED = "Mixed"

    @property
    def description(self) -> str:
        return {
            ElevationPreference.FLAT: "Minimal elevation change",
            ElevationPreference.HILLY: "Significant hills",
            ElevationPreference.MIXED: "Moderate elevation",
        }[self]


class RoutePreferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    surface_types: List[SurfaceType] = [SurfaceType.ROAD]
    elevation: ElevationPreference = ElevationPreference.MIXED
    start_from_current_location: bool = True
    custom_start_location: Optional[Coordinate] = None

    @field_validator("surface_types")
    @classmethod
    def _default_surface_types(cls, value: List[SurfaceType]) -> List[SurfaceType]:
        # Never empty; drop duplicates but keep the caller's order
        unique = list(dict.fromkeys(value))
        return unique or [SurfaceType.ROAD]

    @property
    def primary_surface_type(self) -> SurfaceType:
        return self.surface_types[0]

    def toggle_surface_type(self, surface_type: SurfaceType) -> "RoutePreferences":
        """Return a copy with surface_type added, or removed if already selected."""
        if surface_type in self.surface_types:
            types = [t for t in self.surface_types if t != surface_type]
        else:
            types = [*self.surface_types, surface_type]
        return RoutePreferences.model_validate(
            {**self.model_dump(), "surface_types": types}
        )
