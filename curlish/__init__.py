"""curlish - A minimal, configurable HTTP client."""

from .config import ClientConfig
from .http import HttpClient, Opt, RequestsTransport, Response, Transport
from .schemas import TransportError

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "HttpClient",
    "Opt",
    "RequestsTransport",
    "Response",
    "Transport",
    "TransportError",
]
