"""
HTTP transport for the GiveHub client.

The transport performs exactly one network call per ``send`` and reports
the raw status code and body. It never retries and never interprets the
status; classification belongs to the request pipeline.
"""

import logging
import os
from contextlib import ExitStack
from typing import Dict, Mapping, NamedTuple, Optional

import requests

from ..exceptions import TransportError

logger = logging.getLogger(__name__)


class TransportResponse(NamedTuple):
    """Raw result of one HTTP round-trip."""

    status_code: int
    body: str


class RequestsTransport:
    """
    Transport backed by a ``requests.Session``.

    Examples:
        >>> transport = RequestsTransport(timeout=10)
        >>> resp = transport.send("GET", "https://api.thegivehub.com/v1/campaigns/1", {})
        >>> resp.status_code
        200
    """

    def __init__(
        self,
        timeout: float = 30.0,
        http: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            timeout: Per-request timeout in seconds
            http: Pre-configured requests session (a new one is created if omitted)
        """
        self._timeout = timeout
        self._http = http or requests.Session()

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[str] = None,
        files: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        """
        Send one HTTP request.

        Args:
            method: HTTP method
            url: Absolute URL
            headers: Request headers
            body: Serialized request body, sent as-is
            files: Multipart fields mapped to local file paths. When given,
                ``body`` is ignored and the JSON content type is dropped so
                the multipart boundary can be set.

        Returns:
            TransportResponse with the status code and raw body text

        Raises:
            TransportError: If no HTTP response was obtained
        """
        send_headers: Dict[str, str] = dict(headers)

        with ExitStack() as stack:
            multipart = None
            if files:
                send_headers.pop("Content-Type", None)
                try:
                    multipart = {
                        field: (os.path.basename(path), stack.enter_context(open(path, "rb")))
                        for field, path in files.items()
                    }
                except OSError as e:
                    raise TransportError(f"Request failed: cannot read upload file: {e}") from e
                body = None

            logger.debug(f"{method} {url}")
            try:
                resp = self._http.request(
                    method,
                    url,
                    headers=send_headers,
                    data=body,
                    files=multipart,
                    timeout=self._timeout,
                    # 3xx responses are handed back to the pipeline as-is
                    allow_redirects=False,
                )
            except requests.RequestException as e:
                raise TransportError(f"Request failed: {e}") from e

        logger.debug(f"{method} {url} -> {resp.status_code}")
        return TransportResponse(resp.status_code, resp.text)

    def close(self) -> None:
        """Release pooled connections."""
        self._http.close()
