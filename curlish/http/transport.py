"""
Transport

The capability HttpClient drives, and its default implementation on top of
a `requests` session.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional, Protocol

import requests

from curlish.config import ClientConfig, get_default_config
from curlish.schemas.errors import ErrorCodes

from .options import Info, Opt, VERB_OPTIONS
from .url import parse_url, unparse_url

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """
    Network primitive driven by HttpClient.

    Contract:
    - `setopt` applies a directive immediately; a later value for the same
      directive replaces the earlier one, and selecting a verb replaces any
      previously selected verb.
    - `perform` blocks until the exchange completes. It returns the raw
      output (header block first when `Opt.HEADER` is on), or None/empty
      bytes on failure, in which case `error_message()` and `error_code()`
      describe the failure.
    - With `Opt.HEADER` on, the output holds exactly one header block
      followed by the body, and `getinfo(Info.HEADER_SIZE)` is its length.
    """

    def setopt(self, option: str, value: Any) -> None: ...

    def perform(self) -> Optional[bytes]: ...

    def getinfo(self, info: str) -> Any: ...

    def error_message(self) -> str: ...

    def error_code(self) -> int: ...

    def close(self) -> None: ...


# Checked in order: several requests exceptions subclass ConnectionError.
_ERROR_CODES: list[tuple[type[Exception], int]] = [
    (requests.exceptions.InvalidSchema, ErrorCodes.UNSUPPORTED_PROTOCOL),
    (requests.exceptions.MissingSchema, ErrorCodes.URL_MALFORMAT),
    (requests.exceptions.InvalidURL, ErrorCodes.URL_MALFORMAT),
    (requests.exceptions.ProxyError, ErrorCodes.COULDNT_RESOLVE_PROXY),
    (requests.exceptions.SSLError, ErrorCodes.SSL_CONNECT_ERROR),
    (requests.exceptions.Timeout, ErrorCodes.OPERATION_TIMEDOUT),
    (requests.exceptions.ConnectionError, ErrorCodes.COULDNT_CONNECT),
    (requests.exceptions.TooManyRedirects, ErrorCodes.TOO_MANY_REDIRECTS),
]

_HTTP_VERSIONS = {10: "HTTP/1.0", 11: "HTTP/1.1", 20: "HTTP/2"}

_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def error_code_for(exc: requests.RequestException) -> int:
    """Map a requests exception to its cURL-compatible error code."""
    for exc_type, code in _ERROR_CODES:
        if isinstance(exc, exc_type):
            return code
    return ErrorCodes.RECV_ERROR


def render_head(response: requests.Response) -> bytes:
    """Serialize the status line and headers of a response, CRLF-terminated."""
    version = _HTTP_VERSIONS.get(getattr(response.raw, "version", 11), "HTTP/1.1")
    lines = [f"{version} {response.status_code} {response.reason or ''}".rstrip()]

    # urllib3 keeps repeated headers apart; requests folds them together
    raw_headers = getattr(response.raw, "headers", None) or response.headers
    lines.extend(f"{name}: {value}" for name, value in raw_headers.items())

    return ("\r\n".join(lines) + "\r\n\r\n").encode("iso-8859-1", errors="replace")


class RequestsTransport:
    """
    Transport backed by a `requests.Session`.

    Directives follow cURL semantics where they differ from requests':
    - setting `Opt.BODY` selects POST unless a verb has been selected
      explicitly;
    - a body without a Content-Type header is sent as
      application/x-www-form-urlencoded;
    - redirects are not followed.

    Any directive that is not one of `Opt` is passed through as a keyword
    argument to `Session.request` (e.g. "headers", "cookies", "verify").
    One that `Session.request` does not accept fails the request with
    `ErrorCodes.UNKNOWN_OPTION`.
    """

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        self.config = config or get_default_config()
        self._session: Optional[requests.Session] = None

        self._url: Optional[str] = None
        self._port: Optional[int] = None
        self._method = "GET"
        self._verb_selected = False
        self._timeout: Optional[float] = None
        self._body: Optional[Any] = None
        self._include_header = False
        self._extra: dict[str, Any] = {}

        self._info: dict[str, Any] = {}
        self._error_message = ""
        self._error_code = ErrorCodes.OK

    def _get_session(self) -> requests.Session:
        """Lazy-load requests session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers["User-Agent"] = self.config.user_agent
            if self.config.proxy:
                self._session.proxies = {
                    "http": self.config.proxy,
                    "https": self.config.proxy,
                }
        return self._session

    def setopt(self, option: str, value: Any) -> None:
        if option in VERB_OPTIONS:
            self._method = VERB_OPTIONS[option] if value else "GET"
            self._verb_selected = True
        elif option == Opt.URL:
            self._url = value
        elif option == Opt.PORT:
            self._port = value
        elif option == Opt.TIMEOUT:
            self._timeout = value
        elif option == Opt.BODY:
            self._body = value
            if value is not None and not self._verb_selected:
                self._method = "POST"
        elif option == Opt.HEADER:
            self._include_header = bool(value)
        else:
            self._extra[option] = value

    def _request_url(self) -> str:
        url = self._url or ""
        if self._port is None:
            return url
        try:
            return unparse_url(replace(parse_url(url), port=self._port))
        except ValueError:
            return url

    def _request_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"allow_redirects": False}
        kwargs.update(self._extra)

        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        if self._body is not None:
            kwargs["data"] = self._body
            headers = dict(kwargs.get("headers") or {})
            if not any(name.lower() == "content-type" for name in headers):
                headers["Content-Type"] = _FORM_CONTENT_TYPE
            kwargs["headers"] = headers

        return kwargs

    def perform(self) -> Optional[bytes]:
        self._info = {}
        self._error_message = ""
        self._error_code = ErrorCodes.OK

        url = self._request_url()
        logger.debug(f"Performing {self._method} {url}")

        try:
            response = self._get_session().request(
                self._method, url, **self._request_kwargs()
            )
        except requests.RequestException as e:
            self._error_message = str(e)
            self._error_code = error_code_for(e)
            logger.debug(f"Request to {url} failed with code {self._error_code}: {e}")
            return None
        except TypeError as e:
            # An unknown pass-through option is rejected by Session.request
            self._error_message = str(e)
            self._error_code = ErrorCodes.UNKNOWN_OPTION
            logger.debug(f"Request to {url} rejected its options: {e}")
            return None

        head = render_head(response) if self._include_header else b""
        self._info = {
            Info.HEADER_SIZE: len(head),
            Info.RESPONSE_CODE: response.status_code,
        }
        return head + response.content

    def getinfo(self, info: str) -> Any:
        return self._info.get(info, 0)

    def error_message(self) -> str:
        return self._error_message

    def error_code(self) -> int:
        return self._error_code

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None
