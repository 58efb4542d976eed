"""Application constants."""

# Term names
DEFAULT_TERM_NAME = "Default Term"

# Messages printed by list-assignments when course resolution stops early
COURSE_NOT_FOUND_MESSAGE = "Course could not be found with the course substring entered."
COURSE_NOT_UNIQUE_MESSAGE = "Matches are not unique"
COURSE_ID_MISSING_MESSAGE = "No course ID found."

# Process exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130
