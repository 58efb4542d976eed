"""
Unit tests for the Canvas service layer.
Tests course term filtering, course resolution, and due-date filtering.
"""

import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock, patch

from canvas_api.models import AssignmentNode, Course, Term
from constants import COURSE_ID_MISSING_MESSAGE, COURSE_NOT_FOUND_MESSAGE, COURSE_NOT_UNIQUE_MESSAGE
from services.canvas_service import (
    FilterOptions,
    list_assignments,
    list_courses,
    match_courses,
    select_assignments,
    select_courses,
)

NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)

ACTIVE = FilterOptions(active=True, active_term="Spring 2024")
NON_ACTIVE = FilterOptions(no_active=True, active_term="Spring 2024")
DEFAULT = FilterOptions(active_term="Spring 2024")
BOTH = FilterOptions(active=True, no_active=True, active_term="Spring 2024")

COURSES = [
    Course("CS101 Intro", "1", Term("Spring 2024")),
    Course("CS102 Sandbox", "2", Term("Default Term")),
    Course("HIST 10", "3", Term("Fall 2023")),
    Course(None, "4", Term("Spring 2024")),
    Course("Orphan", "5", None),
    Course("Nameless Term", "6", Term(None)),
]


class TestSelectCourses(unittest.TestCase):
    """Test suite for term-based course filtering."""

    def names(self, options):
        return [c.name for c in select_courses(COURSES, options)]

    def test_active_lists_current_term(self):
        self.assertEqual(self.names(ACTIVE), ["CS101 Intro"])

    def test_default_behaves_like_active(self):
        self.assertEqual(self.names(DEFAULT), ["CS101 Intro"])

    def test_no_active_lists_other_terms(self):
        self.assertEqual(self.names(NON_ACTIVE), ["HIST 10"])

    def test_no_active_takes_precedence(self):
        self.assertEqual(self.names(BOTH), ["HIST 10"])

    def test_default_term_never_listed(self):
        for options in (ACTIVE, NON_ACTIVE, DEFAULT, BOTH):
            self.assertNotIn("CS102 Sandbox", self.names(options))

    def test_missing_name_or_term_never_listed(self):
        for options in (ACTIVE, NON_ACTIVE, DEFAULT, BOTH):
            names = self.names(options)
            self.assertNotIn(None, names)
            self.assertNotIn("Orphan", names)
            self.assertNotIn("Nameless Term", names)

    def test_active_term_is_configurable(self):
        options = FilterOptions(active=True, active_term="Fall 2023")
        self.assertEqual(self.names(options), ["HIST 10"])


class TestMatchCourses(unittest.TestCase):
    """Test suite for course name matching."""

    def test_case_insensitive_substring(self):
        self.assertEqual([c.id for c in match_courses(COURSES, "cs101")], ["1"])

    def test_multiple_matches_in_source_order(self):
        self.assertEqual([c.id for c in match_courses(COURSES, "CS")], ["1", "2"])

    def test_no_matches(self):
        self.assertEqual(match_courses(COURSES, "biology"), [])

    def test_nameless_courses_never_match(self):
        self.assertNotIn("4", [c.id for c in match_courses(COURSES, "")])


class TestSelectAssignments(unittest.TestCase):
    """Test suite for due-date filtering."""

    def setUp(self):
        self.nodes = [
            AssignmentNode("Past", "2024-02-01T00:00:00Z"),
            AssignmentNode("Exactly now", "2024-03-01T12:00:00Z"),
            AssignmentNode("Future", "2024-04-01T00:00:00-07:00"),
            AssignmentNode("No due date", None),
            AssignmentNode(None, "2024-04-01T00:00:00Z"),
            AssignmentNode("Fractional", "2024-04-01T00:00:00.000Z"),
        ]

    def names(self, options):
        return [n.name for n in select_assignments(self.nodes, options, NOW)]

    def test_default_keeps_now_and_future(self):
        with self.assertLogs('services.canvas_service', level='WARNING'):
            self.assertEqual(self.names(DEFAULT), ["Exactly now", "Future"])

    def test_no_active_keeps_strictly_past(self):
        with self.assertLogs('services.canvas_service', level='WARNING'):
            self.assertEqual(self.names(NON_ACTIVE), ["Past"])

    def test_unparseable_date_excluded_from_both(self):
        with self.assertLogs('services.canvas_service', level='WARNING') as logs:
            active = self.names(ACTIVE)
            non_active = self.names(NON_ACTIVE)
        self.assertNotIn("Fractional", active + non_active)
        self.assertTrue(any("Fractional" in message for message in logs.output))

    def test_offset_is_compared_as_instant(self):
        nodes = [AssignmentNode("West coast", "2024-03-01T04:30:00-08:00")]
        self.assertEqual(select_assignments(nodes, DEFAULT, NOW), nodes)
        self.assertEqual(select_assignments(nodes, NON_ACTIVE, NOW), [])


class TestListCommands(unittest.TestCase):
    """Test suite for the list-courses and list-assignments operations."""

    @patch('services.canvas_service.get_courses')
    def test_list_courses_returns_names(self, mock_get_courses):
        mock_get_courses.return_value = COURSES
        client = Mock()

        self.assertEqual(list_courses(client, ACTIVE), ["CS101 Intro"])
        mock_get_courses.assert_called_once_with(client)

    @patch('services.canvas_service.get_assignments')
    @patch('services.canvas_service.get_courses')
    def test_single_match_fetches_assignments(self, mock_get_courses, mock_get_assignments):
        mock_get_courses.return_value = COURSES
        mock_get_assignments.return_value = [
            AssignmentNode("HW1", "2024-03-02T00:00:00Z"),
            AssignmentNode("HW0", "2024-02-02T00:00:00Z"),
        ]
        client = Mock()

        lines = list_assignments(client, "intro", DEFAULT, now=NOW)

        mock_get_assignments.assert_called_once_with(client, "1")
        self.assertEqual(lines, ["HW1 due at 2024-03-02T00:00:00Z"])

    @patch('services.canvas_service.get_assignments')
    @patch('services.canvas_service.get_courses')
    def test_no_match_skips_fetch(self, mock_get_courses, mock_get_assignments):
        mock_get_courses.return_value = COURSES

        lines = list_assignments(Mock(), "biology", DEFAULT, now=NOW)

        self.assertEqual(lines, [COURSE_NOT_FOUND_MESSAGE])
        mock_get_assignments.assert_not_called()

    @patch('services.canvas_service.get_assignments')
    @patch('services.canvas_service.get_courses')
    def test_multiple_matches_lists_names(self, mock_get_courses, mock_get_assignments):
        mock_get_courses.return_value = COURSES

        lines = list_assignments(Mock(), "cs10", DEFAULT, now=NOW)

        self.assertEqual(lines, [COURSE_NOT_UNIQUE_MESSAGE, "CS101 Intro", "CS102 Sandbox"])
        mock_get_assignments.assert_not_called()

    @patch('services.canvas_service.get_assignments')
    @patch('services.canvas_service.get_courses')
    def test_missing_course_id(self, mock_get_courses, mock_get_assignments):
        mock_get_courses.return_value = [Course("Lonely", None, Term("Spring 2024"))]

        lines = list_assignments(Mock(), "lonely", DEFAULT, now=NOW)

        self.assertEqual(lines, [COURSE_ID_MISSING_MESSAGE])
        mock_get_assignments.assert_not_called()

    @patch('services.canvas_service.utc_now')
    @patch('services.canvas_service.get_assignments')
    @patch('services.canvas_service.get_courses')
    def test_now_defaults_to_current_utc(self, mock_get_courses, mock_get_assignments, mock_now):
        mock_get_courses.return_value = [COURSES[0]]
        mock_get_assignments.return_value = [AssignmentNode("HW1", "2024-03-01T12:00:01Z")]
        mock_now.return_value = NOW

        lines = list_assignments(Mock(), "cs101", NON_ACTIVE)

        self.assertEqual(lines, [])
        mock_now.assert_called_once_with()

    def test_filter_options_are_immutable(self):
        with self.assertRaises(AttributeError):
            DEFAULT.no_active = True


if __name__ == "__main__":
    unittest.main()
