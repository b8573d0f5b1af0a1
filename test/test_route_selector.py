from routes_c.models.directions import PathAlternative
from routes_c.models.preferences import RoutePreferences
from routes_c.models.route import Coordinate, SurfaceType
from routes_c.services.route.route_selector import select_preferred_alternative

A = Coordinate(latitude=1.0, longitude=1.0)
B = Coordinate(latitude=1.01, longitude=1.01)


def _alternatives(*distances):
    return [PathAlternative(distance_meters=d, geometry=[A, B]) for d in distances]


def _prefs(*types):
    return RoutePreferences(surface_types=list(types))


def test_trail_preference_takes_longest_alternative():
    selected = select_preferred_alternative(_alternatives(2.0, 3.0, 1.0), _prefs(SurfaceType.TRAIL))
    assert selected.distance_meters == 3.0


def test_road_preference_takes_shortest_alternative():
    selected = select_preferred_alternative(_alternatives(2.0, 3.0, 1.0), _prefs(SurfaceType.ROAD))
    assert selected.distance_meters == 1.0


def test_mixed_preference_takes_middle_alternative():
    selected = select_preferred_alternative(_alternatives(2.0, 3.0, 1.0), _prefs(SurfaceType.MIXED))
    assert selected.distance_meters == 2.0


def test_multiple_preferences_take_middle_alternative():
    prefs = _prefs(SurfaceType.ROAD, SurfaceType.TRAIL)
    selected = select_preferred_alternative(_alternatives(3.0, 1.0, 2.0), prefs)
    assert selected.distance_meters == 2.0


def test_middle_of_even_count_rounds_up():
    selected = select_preferred_alternative(
        _alternatives(4.0, 1.0, 3.0, 2.0), _prefs(SurfaceType.MIXED)
    )
    assert selected.distance_meters == 3.0


def test_single_alternative_is_returned_regardless_of_preference():
    only = _alternatives(5.0)
    assert select_preferred_alternative(only, _prefs(SurfaceType.TRAIL)) is only[0]


def test_no_alternatives_returns_none():
    assert select_preferred_alternative([], _prefs(SurfaceType.ROAD)) is None
