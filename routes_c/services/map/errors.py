"""Errors raised by directions gateways."""


class DirectionsError(Exception):
    """The directions provider failed for a reason other than the ones below."""


class NoPathError(DirectionsError):
    """The provider has no path between the requested pair of points."""


class RateLimitError(DirectionsError):
    """The provider (or the local quota) reported overload."""
