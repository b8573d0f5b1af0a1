"""
Response models for the route generation API
"""
from typing import Optional
from pydantic import BaseModel

from .route import Route


class GenerateRouteResponse(BaseModel):
    """Route generation response model"""
    success: bool = True
    message: str = "success"
    route: Optional[Route] = None


class ErrorResponse(BaseModel):
    """Error body returned for failed generations"""
    error: str
    message: str
