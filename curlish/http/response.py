"""
HTTP Response

The response value returned by HttpClient.execute(), and the parser that
builds it from raw transport output.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class Response:
    """
    Response from an HTTP request.

    `headers` is stored as a read-only view over a private copy.
    """
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def ok(self) -> bool:
        """Check if request was successful (2xx status)."""
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        """Get response body as text."""
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Parse response body as JSON."""
        return json.loads(self.body)


def parse_headers(block: bytes) -> dict[str, str]:
    """
    Parse a raw header block into a mapping.

    Lines without a colon (the status line, the blank separator line) are
    skipped. Each remaining line is split on its first colon; the value is
    trimmed and a later duplicate replaces an earlier one.
    """
    headers: dict[str, str] = {}
    for line in block.decode("iso-8859-1").split("\n"):
        if ":" not in line:
            continue
        name, _, value = line.partition(":")
        headers[name] = value.strip()
    return headers


def parse_response(raw: bytes, header_size: int, status_code: int) -> Response:
    """
    Build a Response from the raw output of a transport.

    The output must hold exactly one header block of `header_size` bytes
    followed by the body. A proxy that prepends its own header block, or an
    interim 1xx response, shifts the body out of place; transports are
    expected not to hand over such output.
    """
    return Response(
        status_code=int(status_code),
        headers=parse_headers(raw[:header_size]),
        body=raw[header_size:],
    )
