"""
Test fixtures package for curlish tests.

Usage:
    from fixtures import FakeTransport, make_raw_response

    def test_something():
        raw, header_size = make_raw_response(headers=[("X-A", "1")], body=b"hi")
        transport = FakeTransport(raw=raw, header_size=header_size)
"""

from .transport_fixtures import (
    FakeTransport,
    make_raw_response,
    make_requests_response,
)

__all__ = [
    "FakeTransport",
    "make_raw_response",
    "make_requests_response",
]
