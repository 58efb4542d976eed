"""Typed views over the Canvas GraphQL course and assignment responses."""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .client import CanvasAPIError


class ResponseParseError(CanvasAPIError):
    """The response body is not a JSON object."""
    pass


@dataclass(frozen=True)
class Term:
    name: Optional[str] = None


@dataclass(frozen=True)
class Course:
    name: Optional[str] = None
    id: Optional[str] = None
    term: Optional[Term] = None

    @property
    def term_name(self) -> Optional[str]:
        return self.term.name if self.term else None


@dataclass(frozen=True)
class AssignmentNode:
    name: Optional[str] = None
    due_at: Optional[str] = None


def _load(raw: str) -> Dict[str, Any]:
    try:
        document = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise ResponseParseError(f"Malformed JSON response: {e}") from e
    if not isinstance(document, dict):
        raise ResponseParseError(f"Expected a JSON object, got {type(document).__name__}")
    return document


def _object(parent: Optional[Dict[str, Any]], key: str) -> Optional[Dict[str, Any]]:
    """Nested object under `key`, or None when absent, null or not an object."""
    if parent is None:
        return None
    value = parent.get(key)
    return value if isinstance(value, dict) else None


def _objects(parent: Optional[Dict[str, Any]], key: str) -> List[Dict[str, Any]]:
    """Objects of the list under `key`; an absent list is empty and null entries are skipped."""
    if parent is None:
        return []
    value = parent.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _string(obj: Dict[str, Any], key: str) -> Optional[str]:
    value = obj.get(key)
    if value is None:
        return None
    # Canvas ids are GraphQL ID scalars; tolerate numeric ones.
    return value if isinstance(value, str) else str(value)


def course_from_json(obj: Dict[str, Any]) -> Course:
    term_obj = _object(obj, "term")
    term = Term(name=_string(term_obj, "name")) if term_obj is not None else None
    return Course(name=_string(obj, "name"), id=_string(obj, "id"), term=term)


def assignment_from_json(obj: Dict[str, Any]) -> AssignmentNode:
    return AssignmentNode(name=_string(obj, "name"), due_at=_string(obj, "dueAt"))


def parse_courses(raw: str) -> List[Course]:
    """Courses from a `{data: {allCourses: [...]}}` response."""
    data = _object(_load(raw), "data")
    return [course_from_json(obj) for obj in _objects(data, "allCourses")]


def parse_assignments(raw: str) -> List[AssignmentNode]:
    """Assignment nodes from a `{data: {course: {assignmentsConnection: {nodes: [...]}}}}` response."""
    data = _object(_load(raw), "data")
    course = _object(data, "course")
    connection = _object(course, "assignmentsConnection")
    return [assignment_from_json(obj) for obj in _objects(connection, "nodes")]
