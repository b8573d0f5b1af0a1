import pytest
from pydantic import ValidationError

from routes_c.models.preferences import ElevationPreference, RoutePreferences
from routes_c.models.route import Coordinate, SurfaceType


def test_defaults_to_road_surface():
    prefs = RoutePreferences()
    assert prefs.surface_types == [SurfaceType.ROAD]
    assert prefs.elevation == ElevationPreference.MIXED
    assert prefs.start_from_current_location is True


def test_empty_surface_types_redefault_to_road():
    prefs = RoutePreferences(surface_types=[])
    assert prefs.surface_types == [SurfaceType.ROAD]


def test_duplicate_surface_types_are_collapsed():
    prefs = RoutePreferences(surface_types=["Trail", "Road", "Trail"])
    assert prefs.surface_types == [SurfaceType.TRAIL, SurfaceType.ROAD]
    assert prefs.primary_surface_type == SurfaceType.TRAIL


def test_toggle_adds_and_removes_surface_types():
    prefs = RoutePreferences().toggle_surface_type(SurfaceType.TRAIL)
    assert prefs.surface_types == [SurfaceType.ROAD, SurfaceType.TRAIL]

    prefs = prefs.toggle_surface_type(SurfaceType.ROAD)
    assert prefs.surface_types == [SurfaceType.TRAIL]


def test_removing_last_surface_type_redefaults_to_road():
    prefs = RoutePreferences(surface_types=[SurfaceType.TRAIL])
    assert prefs.toggle_surface_type(SurfaceType.TRAIL).surface_types == [SurfaceType.ROAD]


def test_toggle_keeps_other_fields():
    start = Coordinate(latitude=40.0, longitude=-74.0)
    prefs = RoutePreferences(
        elevation=ElevationPreference.HILLY,
        start_from_current_location=False,
        custom_start_location=start,
    ).toggle_surface_type(SurfaceType.MIXED)

    assert prefs.elevation == ElevationPreference.HILLY
    assert prefs.custom_start_location == start


def test_preferences_are_immutable():
    prefs = RoutePreferences()
    with pytest.raises(ValidationError):
        prefs.surface_types = [SurfaceType.TRAIL]


def test_coordinate_rejects_out_of_range_latitude():
    with pytest.raises(ValidationError):
        Coordinate(latitude=91.0, longitude=0.0)


def test_options_carry_display_descriptions():
    assert SurfaceType.ROAD.description == "Primarily paved surfaces"
    assert SurfaceType.TRAIL.description == "Parks and nature paths"
    assert ElevationPreference.FLAT.description == "Minimal elevation change"
    assert ElevationPreference.HILLY.description == "Significant hills"
    assert all(s.description for s in SurfaceType)
    assert all(e.description for e in ElevationPreference)
