"""Host entry point for the discount function.

The host passes the GraphQL input query result as JSON bytes and expects the
function result as JSON bytes.
"""

import json
import logging
import sys

import structlog

from .errors import InvalidInputError
from .parsing import parse_run_input
from .evaluator import run
from .serialization import decision_to_dict


def configure_logging(level: int = logging.INFO) -> None:
    """Configure structlog with JSON rendering and ISO timestamps.

    Records go to stderr; stdout carries the function result.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def evaluate(request: dict) -> dict:
    """Run the function on a decoded request and return the result object."""
    return decision_to_dict(run(parse_run_input(request)))


def handle(input_bytes: bytes) -> bytes:
    """Handle a JSON-encoded request and return the JSON-encoded result."""
    try:
        request = json.loads(input_bytes)
    except (TypeError, ValueError) as e:
        raise InvalidInputError("request is not valid JSON", e) from e

    return json.dumps(evaluate(request)).encode("utf-8")
