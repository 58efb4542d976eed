"""Canvas GraphQL client for making authenticated requests."""

import json
import logging
from dataclasses import dataclass
from typing import Optional

import requests

from config import CANVAS_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class CanvasAPIError(Exception):
    """Custom exception for Canvas API errors."""
    pass


class CanvasRequestError(CanvasAPIError):
    """A GraphQL request did not produce a successful response."""

    def __init__(self, outcome: "QueryOutcome") -> None:
        super().__init__(f"Canvas GraphQL request failed: {outcome.describe()}")
        self.outcome = outcome


# ========================================
# Request Outcomes
# ========================================

@dataclass(frozen=True)
class QueryOutcome:
    """Result of one POST to the GraphQL endpoint."""

    ok = False

    @property
    def body(self) -> Optional[str]:
        return None

    def describe(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class StatusOutcome(QueryOutcome):
    status_code: int

    def describe(self) -> str:
        return f"{type(self).__name__} (HTTP {self.status_code})"


@dataclass(frozen=True)
class Informational(StatusOutcome):
    pass


@dataclass(frozen=True)
class Success(StatusOutcome):
    text: str = ""

    ok = True

    @property
    def body(self) -> Optional[str]:
        return self.text


@dataclass(frozen=True)
class Redirect(StatusOutcome):
    pass


@dataclass(frozen=True)
class ClientError(StatusOutcome):
    pass


@dataclass(frozen=True)
class ServerError(StatusOutcome):
    pass


@dataclass(frozen=True)
class UnknownStatus(StatusOutcome):
    pass


@dataclass(frozen=True)
class TransportFailure(QueryOutcome):
    reason: str

    def describe(self) -> str:
        return f"TransportFailure ({self.reason})"


def classify_response(response: requests.Response) -> QueryOutcome:
    """Map an HTTP response onto an outcome by its status-code family."""
    code = response.status_code
    family = code // 100

    if family == 1:
        logger.info("Informational response with status code %s: %s", code, response.text)
        return Informational(code)
    if family == 2:
        return Success(code, response.text)
    if family == 3:
        logger.info("Redirection response with status code: %s", code)
        return Redirect(code)
    if family == 4:
        logger.warning("Client error with status code: %s", code)
        return ClientError(code)
    if family == 5:
        logger.error("Server error with status code: %s", code)
        return ServerError(code)

    logger.error("Unexpected response status code: %s", code)
    return UnknownStatus(code)


# ========================================
# Client
# ========================================

class CanvasGraphQLClient:
    """Client for the Canvas LMS GraphQL endpoint."""

    def __init__(self, token: str, endpoint: str, timeout: float = CANVAS_REQUEST_TIMEOUT) -> None:
        """Initialize the client; token and endpoint must be non-empty."""
        if not token or not token.strip():
            raise ValueError("API token cannot be empty")
        if not endpoint or not endpoint.strip():
            raise ValueError("Endpoint URL cannot be empty")

        self.endpoint = endpoint
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json"
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.endpoint})"

    def send_course_query(self, query: str) -> QueryOutcome:
        """Wrap a GraphQL document in a {"query": ...} envelope and POST it."""
        return self._post(json.dumps({"query": query}))

    def send_assignment_query(self, envelope: str) -> QueryOutcome:
        """POST an already-built JSON request body."""
        return self._post(envelope)

    def _post(self, body: str) -> QueryOutcome:
        try:
            response = requests.post(
                self.endpoint,
                data=body.encode("utf-8"),
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error("I/O error during HTTP communication with %s: %s", self.endpoint, e)
            return TransportFailure(str(e))
        except KeyboardInterrupt:
            logger.error("HTTP request to %s was interrupted", self.endpoint)
            raise

        return classify_response(response)
