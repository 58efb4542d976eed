"""Configuration management - loads environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

# Canvas GraphQL Configuration
CANVAS_GRAPHQL_URL = os.getenv("CANVAS_GRAPHQL_URL", "https://sjsu.instructure.com/api/graphql")
CANVAS_REQUEST_TIMEOUT = float(os.getenv("CANVAS_REQUEST_TIMEOUT", "30"))

# Term treated as the current semester by the --active/--no-active filters
CANVAS_ACTIVE_TERM = os.getenv("CANVAS_ACTIVE_TERM", "Spring 2024")

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
