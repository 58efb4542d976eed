"""Canvas GraphQL client package for querying courses and assignments."""

from .client import CanvasGraphQLClient, CanvasAPIError, CanvasRequestError
from .endpoints import get_courses, get_assignments
from .models import ResponseParseError

__version__ = "0.1.0"

__all__ = [
    'CanvasGraphQLClient',
    'CanvasAPIError',
    'CanvasRequestError',
    'ResponseParseError',
    'get_courses',
    'get_assignments',
]
