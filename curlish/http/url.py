"""
URL Decomposition

Splits an endpoint URL into its components and rebuilds it, so that an
explicit port can be handed to the transport separately from the URL.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterator, Mapping, Optional
from urllib.parse import urlencode, urlsplit


@dataclass(frozen=True)
class ParsedURL:
    """Components of a URL. Absent components are None."""
    scheme: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    user: Optional[str] = None
    password: Optional[str] = None
    path: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None

    def without_port(self) -> "ParsedURL":
        """Return a copy with the port removed."""
        return replace(self, port=None)


def _split_netloc(netloc: str) -> tuple[Optional[str], Optional[str], Optional[str], Optional[int]]:
    userinfo, at, hostport = netloc.rpartition("@")
    user = password = None
    if at:
        user, colon, pwd = userinfo.partition(":")
        if colon:
            password = pwd

    if hostport.startswith("["):
        # IPv6 literal: the port can only follow the closing bracket
        end = hostport.find("]")
        host, rest = (hostport, "") if end < 0 else (hostport[:end + 1], hostport[end + 1:])
        port_str = rest[1:] if rest.startswith(":") else None
    else:
        host, colon, port_str = hostport.rpartition(":")
        if not colon:
            host, port_str = hostport, None

    port = None
    if port_str is not None:
        if port_str.isdigit():
            port = int(port_str)
        elif port_str:
            # Not a port; keep it on the host and let the transport complain
            host = hostport

    return user, password, host or None, port


def parse_url(url: str) -> ParsedURL:
    """
    Decompose a URL string.

    Unlike `urlsplit().hostname`, the host keeps its original case so that
    `unparse_url(parse_url(url))` reproduces the input. A URL without
    `://` is read as starting with its host, so `localhost:8080/api` has
    host `localhost` and port 8080 rather than a scheme of `localhost`.

    Raises:
        ValueError: if `urlsplit` rejects the URL (e.g. an unclosed IPv6 bracket)
    """
    if "://" not in url and not url.startswith("//"):
        url = "//" + url
    parts = urlsplit(url)
    user, password, host, port = _split_netloc(parts.netloc)
    return ParsedURL(
        scheme=parts.scheme or None,
        host=host,
        port=port,
        user=user,
        password=password,
        path=parts.path or None,
        query=parts.query or None,
        fragment=parts.fragment or None,
    )


def unparse_url(parsed: ParsedURL) -> str:
    """Rebuild a URL string from its components."""
    scheme = f"{parsed.scheme}://" if parsed.scheme is not None else ""
    host = parsed.host if parsed.host is not None else ""
    port = f":{parsed.port}" if parsed.port is not None else ""
    user = parsed.user if parsed.user is not None else ""
    password = f":{parsed.password}" if parsed.password is not None else ""
    password = f"{password}@" if (user or password) else ""
    path = parsed.path if parsed.path is not None else ""
    query = f"?{parsed.query}" if parsed.query is not None else ""
    fragment = f"#{parsed.fragment}" if parsed.fragment is not None else ""

    return f"{scheme}{user}{password}{host}{port}{path}{query}{fragment}"


def _flatten_params(data: Any, prefix: Optional[str] = None) -> Iterator[tuple[str, Any]]:
    items = data.items() if isinstance(data, Mapping) else enumerate(data)
    for key, value in items:
        name = f"{prefix}[{key}]" if prefix is not None else str(key)
        if isinstance(value, (Mapping, list, tuple)):
            yield from _flatten_params(value, name)
        elif value is None:
            continue
        elif isinstance(value, bool):
            yield name, int(value)
        else:
            yield name, value


def build_query(params: Mapping[str, Any]) -> str:
    """
    Form-encode a mapping.

    Nested mappings and sequences become bracketed keys, so
    `{"a": {"b": 1}, "id": [1, 2]}` encodes as `a[b]=1&id[0]=1&id[1]=2`
    (brackets percent-escaped). None values are left out and booleans are
    sent as 1/0.
    """
    return urlencode(list(_flatten_params(params)))
