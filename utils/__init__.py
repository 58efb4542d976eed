"""Utilities package for helper functions."""

from .datetime_utils import (
    utc_now,
    parse_canvas_datetime,
    is_past_due,
)

__all__ = [
    'utc_now',
    'parse_canvas_datetime',
    'is_past_due',
]
