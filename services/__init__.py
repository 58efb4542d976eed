"""Services package for business logic operations."""

from .canvas_service import FilterOptions, list_courses, list_assignments

__all__ = ['FilterOptions', 'list_courses', 'list_assignments']
