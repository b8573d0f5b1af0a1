"""Routes-C: closed-loop walking and running route generator."""

__version__ = "1.0.0"
