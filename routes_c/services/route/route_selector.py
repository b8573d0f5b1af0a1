from typing import Optional, Sequence

from routes_c.models.directions import PathAlternative
from routes_c.models.preferences import RoutePreferences
from routes_c.models.route import SurfaceType


def select_preferred_alternative(
    alternatives: Sequence[PathAlternative], preferences: RoutePreferences
) -> Optional[PathAlternative]:
    """
    Pick one alternative path for a leg according to the surface preference.

    The provider reports no surface data, so path length stands in for it:
    longer alternatives tend to wander through parks and trails, the shortest
    one tends to follow paved streets. Mixed or multiple preferences take the
    median-length alternative.
    """
    if not alternatives:
        return None
    if len(alternatives) == 1:
        return alternatives[0]

    surface_types = set(preferences.surface_types)
    if surface_types == {SurfaceType.TRAIL}:
        return max(alternatives, key=lambda alt: alt.distance_meters)
    if surface_types == {SurfaceType.ROAD}:
        return min(alternatives, key=lambda alt: alt.distance_meters)

    ordered = sorted(alternatives, key=lambda alt: alt.distance_meters)
    return ordered[len(ordered) // 2]
