"""Request payload encoding and response decoding.

The bridge returns resource collections as JSON objects keyed by resource ID,
e.g. ``{"1": {...light...}, "2": {...light...}}``; :func:`decode_collection`
turns such an object into a ``dict[str, T]`` for any record type.
"""

import json
import logging
from functools import lru_cache
from typing import Any, TypeVar

import pydantic
from pydantic import TypeAdapter

from huelink.exceptions import ParsingFailure, UnknownError, classify
from huelink.link import (
    Linked,
    LinkErrorResponse,
    LinkOutcome,
    LinkRequired,
    LinkSuccessResponse,
)

logger = logging.getLogger("huelink")

T = TypeVar("T")

KeyedCollection = dict[str, T]


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _encode(payload: dict[str, Any]) -> bytes:
    try:
        return json.dumps(payload).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise UnknownError(f"Failed to encode request body: {e}") from e


def encode_link(device_type: str) -> bytes:
    """Payload for a pairing request: ``{"devicetype": <device_type>}``."""
    return _encode({"devicetype": device_type})


def encode_on(state: bool) -> bytes:
    """Payload to switch a light or group on or off: ``{"on": <state>}``."""
    return _encode({"on": state})


def decode(data: bytes, target: type[T] | Any) -> T:
    """Decode a JSON document into ``target``.

    Args:
        data: Raw response body
        target: A record class, or any type pydantic can validate
            (e.g. ``list[ModificationResult]``)

    Returns:
        The decoded value

    Raises:
        ParsingFailure: If the body is not valid JSON or does not match
    """
    try:
        return _adapter(target).validate_json(data)
    except pydantic.ValidationError as e:
        raise classify(e) from e


def decode_collection(data: bytes, element: type[T]) -> KeyedCollection[T]:
    """Decode a JSON object of ``{id: element}`` pairs.

    Each value is validated on its own; the first invalid element fails the
    whole collection. An empty object yields an empty dict.

    Args:
        data: Raw response body
        element: Record class of every value

    Returns:
        A dict mapping resource ID to decoded element

    Raises:
        ParsingFailure: If the body is not a JSON object or any element is invalid
    """
    try:
        document = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise classify(e) from e
    return decode_keyed(document, element)


def decode_keyed(document: Any, element: type[T]) -> KeyedCollection[T]:
    """Like :func:`decode_collection`, for an already parsed JSON value.

    Records use it for keyed collections nested in a response, such as the
    whitelist of ``GET /config``.
    """
    if not isinstance(document, dict):
        raise ParsingFailure(
            f"Expected a JSON object keyed by ID, got {type(document).__name__}"
        )
    adapter = _adapter(element)

    results: KeyedCollection[T] = {}
    for key, value in document.items():
        try:
            results[key] = adapter.validate_python(value)
        except pydantic.ValidationError as e:
            failure = classify(e)
            raise ParsingFailure(
                f"Element {key!r} of {getattr(element, '__name__', element)} collection: {failure.message}"
            ) from e

    logger.debug(f"Decoded {len(results)} {getattr(element, '__name__', element)} items")
    return results


def _try_decode(data: bytes, target: Any) -> Any | None:
    try:
        return _adapter(target).validate_json(data)
    except pydantic.ValidationError:
        return None


def is_link_required(data: bytes) -> bool:
    """Whether ``data`` is the bridge's "link button not pressed" answer."""
    errors = _try_decode(data, list[LinkErrorResponse])
    return bool(errors) and len(errors) == 1 and errors[0].is_link_request


def decode_link_response(data: bytes) -> LinkOutcome:
    """Decode the response to a pairing request.

    The error shape is tried first so that a "link button not pressed" answer
    is never mistaken for anything else, then the success shape.

    Raises:
        ParsingFailure: If the body is neither a link request nor a success
    """
    errors = _try_decode(data, list[LinkErrorResponse])
    if errors:
        if len(errors) == 1 and errors[0].is_link_request:
            return LinkRequired()
        descriptions = "; ".join(
            f"type {e.error.type}: {e.error.description}" for e in errors
        )
        raise ParsingFailure(f"Bridge rejected the link request ({descriptions})")

    successes = decode(data, list[LinkSuccessResponse])
    if not successes:
        raise ParsingFailure("Link response contained no username")
    return Linked(successes[0].success.username)
