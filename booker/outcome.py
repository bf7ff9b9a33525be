"""Response code classification."""

import enum
import logging

logger = logging.getLogger(__name__)

SUCCESS_CODES = frozenset({200, 201})


class Outcome(enum.Enum):
    SUCCESS = "success"
    FAILURE = "failure"


def classify(status_code: int) -> Outcome:
    """Classify a status code. Only 200 and 201 count as success."""
    return Outcome.SUCCESS if status_code in SUCCESS_CODES else Outcome.FAILURE


def log_response_code(status_code: int) -> Outcome:
    """Log the classification of a status code and return it."""
    outcome = classify(status_code)
    if outcome is Outcome.SUCCESS:
        logger.info("Api request is successful with code of: HTTP %s", status_code)
    else:
        logger.error("Request have failed with error code of: HTTP %s.", status_code)
    return outcome
