"""
Base class for GiveHub API resources.

A resource maps each of its operations onto a single pipeline call with a
fixed method and endpoint template. Resources hold no state beyond the
pipeline they were given.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from ..core.pipeline import RequestOptions, RequestPipeline, build_query
from ..models import Payload, to_payload

logger = logging.getLogger(__name__)


class BaseResource:
    """
    Shared request helpers for all resources.

    Attributes:
        _pipeline: The client's request pipeline
    """

    def __init__(self, pipeline: RequestPipeline) -> None:
        self._pipeline = pipeline
        logger.debug(f"Initialized {self.__class__.__name__}")

    def _get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """GET ``path``; when ``params`` is not None, append ``?`` and the query."""
        if params is not None:
            path = f"{path}?{build_query(params)}"
        return self._pipeline.execute(path)

    def _send(
        self,
        method: str,
        path: str,
        payload: Optional[Payload] = None,
    ) -> Dict[str, Any]:
        body = to_payload(payload) if payload is not None else None
        return self._pipeline.execute(path, RequestOptions(method=method, body=body))

    def _upload(self, path: str, file_path: str) -> Dict[str, Any]:
        """POST a file as the multipart field ``media``."""
        return self._pipeline.execute(
            path, RequestOptions(method="POST", files={"media": str(file_path)})
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"
