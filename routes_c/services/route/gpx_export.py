"""
GPX export - one track, one segment, one point per route coordinate
"""
from datetime import datetime
from typing import Optional

import gpxpy.gpx

from routes_c.models.route import Route

GPX_CREATOR = "Routes-C App"


def route_to_gpx(route: Route) -> str:
    """Serialize a route as a GPX 1.1 document (lat/lon only, no elevation or per-point time)."""
    gpx = gpxpy.gpx.GPX()
    gpx.creator = GPX_CREATOR
    gpx.name = route.name
    gpx.description = route.description
    gpx.time = route.created_at

    gpx_track = gpxpy.gpx.GPXTrack(name=route.name)
    gpx.tracks.append(gpx_track)
    gpx_segment = gpxpy.gpx.GPXTrackSegment()
    gpx_track.segments.append(gpx_segment)

    for point in route.route_points:
        gpx_segment.points.append(
            gpxpy.gpx.GPXTrackPoint(latitude=point.latitude, longitude=point.longitude)
        )

    return gpx.to_xml(version="1.1")


def gpx_filename(route: Route) -> str:
    stem = "".join(
        ch for ch in route.name.replace(" ", "_") if ch.isalnum() or ch == "_"
    )
    return f"{stem or 'route'}.gpx"


def suggested_save_name(route: Route, now: Optional[datetime] = None) -> str:
    """Descriptive name used when the caller saves a generated route."""
    now = now or datetime.now()
    return f"{route.distance:.1f}mi {route.route_type.value} - {now:%Y-%m-%d %H:%M}"
