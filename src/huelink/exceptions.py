"""Exceptions for the huelink library.

Every failure that leaves a :class:`huelink.Bridge` coroutine is one of the
:class:`HueError` subclasses below. :func:`classify` is the single place where
foreign exceptions (httpx, pydantic, json) are mapped onto them.
"""

import enum
import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import pydantic

logger = logging.getLogger("huelink")


class ErrorKind(enum.IntEnum):
    """The closed set of error kinds, in order of precedence."""

    UNKNOWN = 0
    UNSUPPORTED_PLATFORM = 1
    URL_PARSE_FAILURE = 2
    NETWORK_ERROR = 3
    HTTP_ERROR = 4
    PARSING_FAILURE = 5


class HueError(Exception):
    """Base exception for all bridge related errors."""

    kind: ErrorKind = ErrorKind.UNKNOWN
    default_message = "Unknown error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(f"{self.kind.name}: {self.message}")


class UnknownError(HueError):
    """A failure that matched none of the specific kinds."""


class UnsupportedPlatformError(HueError):
    """The HTTP stack cannot serve the request on this platform."""

    kind = ErrorKind.UNSUPPORTED_PLATFORM
    default_message = "Request not supported by the HTTP transport"


class UrlParseFailure(HueError):
    """The bridge address and endpoint do not form a valid URL."""

    kind = ErrorKind.URL_PARSE_FAILURE
    default_message = "Failed to parse endpoint URL"


class NetworkError(HueError):
    """Connection refused, timeout, DNS or TLS failure."""

    kind = ErrorKind.NETWORK_ERROR
    default_message = "Network request error"


class HttpError(HueError):
    """The bridge answered with a status other than 200."""

    kind = ErrorKind.HTTP_ERROR

    def __init__(self, status_code: int, body: bytes = b""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP Error: {status_code}")


class ParsingFailure(HueError):
    """The response body could not be decoded into the expected shape."""

    kind = ErrorKind.PARSING_FAILURE
    default_message = "Failed to parse API response"


def _describe_validation_error(exc: pydantic.ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return f"{exc.title}: " + "; ".join(parts)


def classify(exc: BaseException) -> HueError:
    """Map any exception onto the huelink error taxonomy.

    Args:
        exc: The exception raised somewhere in the request pipeline

    Returns:
        A HueError instance; ``exc`` itself if it already is one
    """
    if isinstance(exc, HueError):
        return exc
    if isinstance(exc, httpx.UnsupportedProtocol):
        return UnsupportedPlatformError(str(exc) or None)
    if isinstance(exc, httpx.InvalidURL):
        return UrlParseFailure(str(exc) or None)
    if isinstance(exc, httpx.TransportError):
        return NetworkError(f"{type(exc).__name__}: {exc}")
    if isinstance(exc, httpx.HTTPStatusError):
        return HttpError(exc.response.status_code, exc.response.content)
    if isinstance(exc, pydantic.ValidationError):
        return ParsingFailure(_describe_validation_error(exc))
    if isinstance(exc, json.JSONDecodeError):
        return ParsingFailure(f"Invalid JSON: {exc}")
    if isinstance(exc, UnicodeDecodeError):
        return ParsingFailure(f"Response is not valid UTF-8: {exc}")
    return UnknownError(f"{type(exc).__name__}: {exc}")


@asynccontextmanager
async def classified() -> AsyncIterator[None]:
    """Re-raise any exception from the wrapped block as a HueError."""
    try:
        yield
    except HueError:
        raise
    except Exception as e:
        error = classify(e)
        logger.debug(f"Classified {type(e).__name__} as {error.kind.name}")
        raise error from e
