import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware

from routes_c.config import settings
from routes_c.models.request import GenerateRouteRequest
from routes_c.models.response import ErrorResponse, GenerateRouteResponse
from routes_c.models.route import Route
from routes_c.services.route.errors import CooldownActive, RouteGenerationError
from routes_c.services.route.gpx_export import gpx_filename, route_to_gpx
from routes_c.services.route_service import RouteService

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Routes-C API",
    description="Closed-loop running route generation API",
    version=settings.api_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_STATUS = {
    "no_route_found": 502,
    "all_attempts_failed": 502,
    "rate_limited": 429,
    "invalid_distance": 422,
    "location_unavailable": 400,
}

ERROR_RESPONSES = {
    status: {"model": ErrorResponse} for status in (400, 409, 422, 429, 500, 502)
}


@lru_cache
def get_route_service() -> RouteService:
    return RouteService()


def _error(e: RouteGenerationError) -> HTTPException:
    headers = None
    if isinstance(e, CooldownActive):
        headers = {"Retry-After": str(e.remaining_seconds)}
    elif e.kind == "rate_limited":
        headers = {"Retry-After": str(int(settings.rate_limit_cooldown_s))}
    return HTTPException(
        status_code=ERROR_STATUS.get(e.kind, 500),
        detail=ErrorResponse(error=e.kind, message=e.message).model_dump(),
        headers=headers,
    )


# main api
@app.post(
    "/api/v1/routes/generate",
    response_model=GenerateRouteResponse,
    responses=ERROR_RESPONSES,
)
async def generate_route(
    request: GenerateRouteRequest,
    route_service: RouteService = Depends(get_route_service),
):
    """Generate one loop route close to the requested distance"""
    try:
        route = await route_service.generate_route(request)
    except RouteGenerationError as e:
        raise _error(e)
    except Exception as e:
        logger.exception("Route generation failed")
        raise HTTPException(
            status_code=500,
            detail=ErrorResponse(
                error=RouteGenerationError.kind,
                message=RouteGenerationError.default_message,
            ).model_dump(),
        ) from e

    if route is None:
        raise HTTPException(
            status_code=409,
            detail=ErrorResponse(
                error="cancelled",
                message="Route generation was superseded by a newer request.",
            ).model_dump(),
        )
    return GenerateRouteResponse(route=route)


@app.delete("/api/v1/routes/generate")
async def cancel_generation(route_service: RouteService = Depends(get_route_service)):
    """Cancel the in-flight generation, if any"""
    return {"cancelled": route_service.cancel()}


@app.post("/api/v1/routes/gpx")
async def export_gpx(route: Route):
    """Export a generated route as a GPX track"""
    return Response(
        content=route_to_gpx(route),
        media_type="application/gpx+xml",
        headers={"Content-Disposition": f'attachment; filename="{gpx_filename(route)}"'},
    )


@app.get("/health")
async def health_check():
    """Health check"""
    return {"status": "healthy", "version": settings.api_version}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
