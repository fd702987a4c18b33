"""
Request pipeline for the GiveHub client.

Every API operation goes through ``RequestPipeline.execute``: it builds the
URL and headers from the session, encodes the body, dispatches through the
transport, classifies the response and performs the single
refresh-and-retry on an expired access token.
"""

import json
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from pydantic import BaseModel, field_validator

from ..exceptions import ApiError
from .session import Session
from .transport import TransportResponse

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "API Error"


class RequestOptions(BaseModel):
    """
    Per-call request options.

    Attributes:
        method: HTTP method, upper-cased
        body: JSON-serializable payload, omitted from the request when None
        files: Multipart fields mapped to local file paths; replaces the JSON body
    """

    method: str = "GET"
    body: Optional[Any] = None
    files: Optional[Dict[str, str]] = None

    @field_validator("method")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.upper()


def build_query(params: Optional[Mapping[str, Any]]) -> str:
    """
    Encode query parameters, keeping the order they were supplied in.

    None values are skipped, booleans are sent as 1/0, and nested mappings or
    lists are flattened into ``key[sub]`` / ``key[0]`` fields.

    Examples:
        >>> build_query({"campaignId": "c1", "status": "completed"})
        'campaignId=c1&status=completed'
        >>> build_query({"filter": {"tags": ["water", "health"]}})
        'filter%5Btags%5D%5B0%5D=water&filter%5Btags%5D%5B1%5D=health'
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in (params or {}).items():
        _flatten(str(key), value, pairs)
    return urlencode(pairs)


def _flatten(key: str, value: Any, pairs: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _flatten(f"{key}[{sub_key}]", sub_value, pairs)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{key}[{index}]", item, pairs)
    elif isinstance(value, bool):
        pairs.append((key, "1" if value else "0"))
    else:
        pairs.append((key, str(value)))


class RequestPipeline:
    """
    Builds, sends and classifies GiveHub API requests.

    The pipeline reads the session on every attempt, so a token refreshed
    between the first attempt and the retry is picked up by the retry.

    Examples:
        >>> pipeline = RequestPipeline(session, RequestsTransport())
        >>> pipeline.execute("/campaigns/abc123")
        {'id': 'abc123', ...}
    """

    def __init__(
        self,
        session: Session,
        transport: Any,
        refresh_handler: Optional[Callable[[], Any]] = None,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            session: Session shared with the Auth resource
            transport: Object with a ``send(method, url, headers, body, files)`` method
            refresh_handler: Called when a 401 can be recovered with the refresh token
        """
        self._session = session
        self._transport = transport
        self.refresh_handler = refresh_handler

    @property
    def session(self) -> Session:
        return self._session

    def execute(
        self,
        endpoint: str,
        options: Optional[RequestOptions] = None,
        allow_refresh: bool = True,
    ) -> Any:
        """
        Run one API operation.

        Args:
            endpoint: Server-relative path starting with '/', query string included
            options: Method, body and multipart overrides (GET with no body if omitted)
            allow_refresh: Whether a 401 may trigger the refresh-and-retry

        Returns:
            The decoded JSON response

        Raises:
            TransportError: If the transport could not obtain a response
            ApiError: If the final response has a status code >= 400
        """
        options = options or RequestOptions()

        response = self._send(endpoint, options)

        if (
            response.status_code == 401
            and allow_refresh
            and self._session.refresh_token
            and self.refresh_handler is not None
        ):
            logger.debug("Received 401, refreshing access token and retrying once")
            self.refresh_handler()
            response = self._send(endpoint, options)

        return self._classify(response)

    def build_headers(self) -> Dict[str, str]:
        """Return the headers for the next request."""
        headers = {
            "Content-Type": "application/json",
            "X-API-Key": self._session.api_key or "",
        }
        if self._session.access_token:
            headers["Authorization"] = f"Bearer {self._session.access_token}"
        return headers

    def _send(self, endpoint: str, options: RequestOptions) -> TransportResponse:
        url = self._session.build_url(endpoint)
        body = None
        if options.body is not None and not options.files:
            body = json.dumps(options.body)
        return self._transport.send(
            options.method,
            url,
            self.build_headers(),
            body=body,
            files=options.files,
        )

    def _classify(self, response: TransportResponse) -> Any:
        status = response.status_code
        text = response.body.strip() if response.body else ""

        data: Any = None
        if text:
            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                if status < 400:
                    raise ApiError(f"Invalid JSON response: {e}", status) from e

        if status >= 400:
            details = data if isinstance(data, dict) else None
            raise ApiError(_error_message(data), status, details=details)

        return data if data is not None else {}


def _error_message(data: Any) -> str:
    """Pick the message out of an error body: {"error": "..."} or {"error": {"message": "..."}}."""
    if not isinstance(data, dict):
        return DEFAULT_ERROR_MESSAGE
    error = data.get("error")
    if isinstance(error, str) and error:
        return error
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return DEFAULT_ERROR_MESSAGE
