"""Spherical geometry helpers in miles."""
import math

from routes_c.models.route import Coordinate

EARTH_RADIUS_MILES = 3958.8
METERS_PER_MILE = 1609.34
FEET_PER_MILE = 5280


def offset_coordinate(origin: Coordinate, miles: float, bearing: float) -> Coordinate:
    """Project a point `miles` away from origin along `bearing` (radians from north)."""
    d = miles / EARTH_RADIUS_MILES
    lat1 = math.radians(origin.latitude)
    lon1 = math.radians(origin.longitude)

    lat2 = math.asin(
        math.sin(lat1) * math.cos(d) + math.cos(lat1) * math.sin(d) * math.cos(bearing)
    )
    lon2 = lon1 + math.atan2(
        math.sin(bearing) * math.sin(d) * math.cos(lat1),
        math.cos(d) - math.sin(lat1) * math.sin(lat2),
    )

    # Normalise longitude to [-180, 180)
    lon_deg = (math.degrees(lon2) + 540) % 360 - 180
    return Coordinate(latitude=math.degrees(lat2), longitude=lon_deg)


def meters_to_miles(meters: float) -> float:
    return meters / METERS_PER_MILE
