"""Classification of errors raised by ``httpx`` API clients.

Errors whose body carries an ``errorCode`` are handed back untouched so the
caller can map the code to UI copy; network failures and other HTTP errors
are logged and returned.
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network Error, Please Try Again"
NETWORK_ERROR_CODE = "ERR_NETWORK"


def _response_body(error: httpx.HTTPStatusError) -> dict[str, Any]:
    try:
        body = error.response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def api_error_code(error: object) -> str | None:
    """Return the ``errorCode`` field of an HTTP error response, if any."""
    if not isinstance(error, httpx.HTTPStatusError):
        return None
    return _response_body(error).get("errorCode") or None


def is_network_error(error: object) -> bool:
    if isinstance(error, (httpx.NetworkError, httpx.TimeoutException)):
        return True
    return getattr(error, "code", None) == NETWORK_ERROR_CODE


def handle_api_error(error: object) -> Any:
    """Log and return ``error`` when it came from an API call, else ``None``.

    Coded API errors are returned without logging. Network failures log a
    retry hint and HTTP status errors log the server's ``message`` field.
    """
    if api_error_code(error):
        return error

    if is_network_error(error):
        logger.error(NETWORK_ERROR_MESSAGE)
        return error

    if isinstance(error, httpx.HTTPStatusError):
        logger.error("%s", _response_body(error).get("message"))
        return error

    return None
