"""
HTTP Client Module

Fluent HTTP client over a pluggable transport.
"""

from .client import HttpClient
from .options import Info, Opt
from .response import Response, parse_headers, parse_response
from .transport import RequestsTransport, Transport
from .url import ParsedURL, parse_url, unparse_url

__all__ = [
    "HttpClient",
    "Info",
    "Opt",
    "ParsedURL",
    "RequestsTransport",
    "Response",
    "Transport",
    "parse_headers",
    "parse_response",
    "parse_url",
    "unparse_url",
]
