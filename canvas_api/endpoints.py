"""Canvas GraphQL endpoint functions."""

from typing import List

from .client import CanvasGraphQLClient, CanvasRequestError
from .models import AssignmentNode, Course, parse_assignments, parse_courses
from .queries import assignments_query, courses_query


def get_courses(client: CanvasGraphQLClient) -> List[Course]:
    """Fetch all courses visible to the token's user."""
    outcome = client.send_course_query(courses_query())
    if not outcome.ok:
        raise CanvasRequestError(outcome)
    return parse_courses(outcome.body)


def get_assignments(client: CanvasGraphQLClient, course_id: str) -> List[AssignmentNode]:
    """Fetch the assignment nodes of a Canvas course."""
    outcome = client.send_assignment_query(assignments_query(course_id))
    if not outcome.ok:
        raise CanvasRequestError(outcome)
    return parse_assignments(outcome.body)
