"""Core functionality for the GiveHub client."""

from .credentials import CredentialManager
from .pipeline import RequestOptions, RequestPipeline, build_query
from .session import Session
from .transport import RequestsTransport, TransportResponse

__all__ = [
    "CredentialManager",
    "RequestOptions",
    "RequestPipeline",
    "RequestsTransport",
    "Session",
    "TransportResponse",
    "build_query",
]
