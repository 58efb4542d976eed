"""Canvas service layer: filters courses and assignments into printable lines."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional

from canvas_api.client import CanvasGraphQLClient
from canvas_api.endpoints import get_assignments, get_courses
from canvas_api.models import AssignmentNode, Course
from config import CANVAS_ACTIVE_TERM
from constants import (
    DEFAULT_TERM_NAME,
    COURSE_NOT_FOUND_MESSAGE,
    COURSE_NOT_UNIQUE_MESSAGE,
    COURSE_ID_MISSING_MESSAGE,
)
from utils.datetime_utils import is_past_due, parse_canvas_datetime, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterOptions:
    """Filter flags for one command invocation. `no_active` wins over `active`."""

    active: bool = False
    no_active: bool = False
    active_term: str = CANVAS_ACTIVE_TERM

    @property
    def wants_active(self) -> bool:
        return not self.no_active


# ========================================
# Courses
# ========================================

def select_courses(courses: Iterable[Course], options: FilterOptions) -> List[Course]:
    """Courses whose term matches the requested active/non-active state."""
    selected: List[Course] = []
    for course in courses:
        term_name = course.term_name
        if course.name is None or term_name is None:
            continue
        if term_name == DEFAULT_TERM_NAME:
            continue

        is_active = term_name == options.active_term
        if is_active == options.wants_active:
            selected.append(course)
    return selected


def list_courses(client: CanvasGraphQLClient, options: FilterOptions) -> List[str]:
    """Fetch courses and return the names passing the term filter."""
    return [course.name for course in select_courses(get_courses(client), options)]


# ========================================
# Assignments
# ========================================

def match_courses(courses: Iterable[Course], course_name: str) -> List[Course]:
    """Courses whose name contains `course_name`, ignoring case."""
    needle = course_name.lower()
    return [c for c in courses if c.name is not None and needle in c.name.lower()]


def select_assignments(
    nodes: Iterable[AssignmentNode], options: FilterOptions, now: datetime
) -> List[AssignmentNode]:
    """Assignments due at or after `now`, or strictly before it with `no_active`."""
    selected: List[AssignmentNode] = []
    for node in nodes:
        if node.name is None or node.due_at is None:
            continue
        try:
            due = parse_canvas_datetime(node.due_at)
        except ValueError as e:
            logger.warning("Failed to parse date %r for %r: %s", node.due_at, node.name, e)
            continue

        if is_past_due(due, now) != options.wants_active:
            selected.append(node)
    return selected


def format_assignment(node: AssignmentNode) -> str:
    return f"{node.name} due at {node.due_at}"


def list_assignments(
    client: CanvasGraphQLClient,
    course_name: str,
    options: FilterOptions,
    now: Optional[datetime] = None,
) -> List[str]:
    """
    Resolve `course_name` to a single course and return its filtered assignments.

    When the substring matches no course, several courses, or a course without
    an id, the returned lines explain why and no assignments are fetched.
    """
    matches = match_courses(get_courses(client), course_name)
    if not matches:
        return [COURSE_NOT_FOUND_MESSAGE]
    if len(matches) > 1:
        return [COURSE_NOT_UNIQUE_MESSAGE] + [course.name for course in matches]

    course = matches[0]
    if course.id is None:
        return [COURSE_ID_MISSING_MESSAGE]

    nodes = get_assignments(client, course.id)
    if now is None:
        now = utc_now()
    return [format_assignment(node) for node in select_assignments(nodes, options, now)]
