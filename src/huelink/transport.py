"""HTTP round trips to the bridge.

The transport only knows about bytes and status codes; decoding the body is
left to :mod:`huelink.codec`.
"""

import logging

import httpx

from huelink.endpoint import username_segment
from huelink.exceptions import HttpError, NetworkError, UnsupportedPlatformError

logger = logging.getLogger("huelink")

METHODS = ("GET", "PUT", "POST")


def redact(url: httpx.URL | str, secret: str | None) -> str:
    """Mask ``secret`` (the username) in a URL for logging.

    The username is matched in the percent-encoded form URLs carry it in.
    """
    if not secret:
        return str(url)
    shown = str(httpx.URL(url))
    return shown.replace(f"/api/{username_segment(secret)}/", "/api/***/", 1)


class Transport:
    """Issues single HTTP requests over an ``httpx.AsyncClient``.

    A client passed in is borrowed and never closed here; without one, the
    transport creates a client with httpx's defaults and owns it.
    """

    def __init__(self, client: httpx.AsyncClient | None = None):
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def send(
        self,
        method: str,
        url: httpx.URL | str,
        body: bytes | None = None,
        secret: str | None = None,
    ) -> bytes:
        """Perform one request and return the body of a 200 response.

        Args:
            method: GET, PUT or POST
            url: Absolute request URL
            body: Optional raw JSON body
            secret: Username to mask in log lines

        Returns:
            The response body, unchanged

        Raises:
            UnsupportedPlatformError: If httpx cannot speak the URL's scheme
            NetworkError: If the request never got an HTTP response
            HttpError: If the status code is not 200
        """
        if method not in METHODS:
            raise ValueError(f"Unsupported method: {method}")

        headers = {"Content-Type": "application/json"} if body is not None else None
        shown = redact(url, secret)
        logger.debug(f"{method} {shown} {body!r}")

        try:
            response = await self._client.request(
                method, url, content=body, headers=headers
            )
        except httpx.UnsupportedProtocol as e:
            logger.debug(f"{method} {shown} not supported: {e}")
            raise UnsupportedPlatformError(str(e) or None) from e
        except httpx.TransportError as e:
            error = f"{method} Request to {shown} failed: {type(e).__name__}: {e}"
            logger.warning(error)
            raise NetworkError(error) from e

        if response.status_code != 200:
            logger.debug(
                f"{method} Request to {shown} failed with status code {response.status_code}"
            )
            raise HttpError(response.status_code, response.content)

        return response.content
