"""GraphQL documents sent to the Canvas endpoint."""

COURSES_QUERY = (
    "query MyQuery {\n"
    "  allCourses {\n"
    "    name\n"
    "    id\n"
    "    term {\n"
    "      name\n"
    "    }\n"
    "  }\n"
    "}\n"
)

# Complete JSON request body; the course id is substituted verbatim, unescaped.
ASSIGNMENTS_ENVELOPE_TEMPLATE = (
    '{"query":"query myquery { course(id: \\"%s\\") '
    '{ assignmentsConnection { nodes { dueAt name } } } }"}'
)


def courses_query() -> str:
    """GraphQL document listing every course with its id and term name."""
    return COURSES_QUERY


def assignments_query(course_id: str) -> str:
    """JSON request body listing the assignment nodes of `course_id`."""
    return ASSIGNMENTS_ENVELOPE_TEMPLATE % course_id
