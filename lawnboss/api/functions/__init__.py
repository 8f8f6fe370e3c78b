"""Stand-alone HTTP functions."""

from lawnboss.api.functions.router import get_functions_router

__all__ = ["get_functions_router"]
