"""
HTTP Client

Fluent request builder that drives a single transport handle and parses
what it returns.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from curlish.config import ClientConfig, get_default_config
from curlish.schemas.errors import TransportError

from .options import Info, Opt
from .response import Response, parse_response
from .transport import RequestsTransport, Transport
from .url import build_query, parse_url, unparse_url

logger = logging.getLogger(__name__)


class HttpClient:
    """
    Blocking HTTP client with chainable setters.

    Every setter is applied to the transport right away and returns the
    client, so a request reads as one expression:

        with HttpClient() as client:
            response = (
                client.set_endpoint("http://api.example.com:8080/items")
                .set_method("POST")
                .set_timeout(5)
                .set_body_params({"name": "widget"})
                .execute()
            )

    The client owns its transport exclusively. It is not thread-safe; use
    one client per thread.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        *,
        transport: Optional[Transport] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            url: Optional endpoint, applied through set_endpoint()
            transport: Transport to drive (defaults to RequestsTransport)
            config: Client defaults (defaults to get_default_config())
        """
        self.config = config or get_default_config()
        self.transport: Transport = transport or RequestsTransport(self.config)
        self._last_response: Optional[Response] = None
        self._closed = False

        if self.config.timeout is not None:
            self.set_timeout(self.config.timeout)
        if self.config.options:
            self.set_options(self.config.options)
        if url is not None:
            self.set_endpoint(url)

    def set_endpoint(self, url: str) -> "HttpClient":
        """Set the URL to call. An explicit port is handed over separately."""
        try:
            parsed = parse_url(url)
        except ValueError as e:
            # Unparseable; hand it over untouched and let execute() report it
            logger.debug(f"Passing unparseable endpoint through as-is: {e}")
            self.transport.setopt(Opt.PORT, None)
            self.transport.setopt(Opt.URL, url)
            return self

        self.transport.setopt(Opt.PORT, parsed.port)
        self.transport.setopt(Opt.URL, unparse_url(parsed.without_port()))
        return self

    def set_method(self, method: str) -> "HttpClient":
        """Select POST or PUT (case-insensitive); anything else selects GET."""
        opt = {
            "POST": Opt.POST,
            "PUT": Opt.PUT,
        }.get(method.upper(), Opt.HTTPGET)
        self.transport.setopt(opt, True)
        return self

    def set_timeout(self, timeout: int) -> "HttpClient":
        """Set the request timeout in seconds."""
        self.transport.setopt(Opt.TIMEOUT, timeout)
        return self

    def set_option(self, option: str, value: Any) -> "HttpClient":
        """Apply a single transport directive."""
        logger.debug(f"Setting transport option {option!r}")
        self.transport.setopt(option, value)
        return self

    def set_options(self, options: Mapping[str, Any]) -> "HttpClient":
        """Apply several transport directives, in order."""
        for option, value in options.items():
            self.set_option(option, value)
        return self

    def set_body_params(self, params: Mapping[str, Any]) -> "HttpClient":
        """
        Form-encode `params` as the request body.

        Nested mappings and lists are sent with bracketed keys (`a[b]=1`).

        No Content-Type header is added here; the transport decides.
        """
        self.transport.setopt(Opt.BODY, build_query(params))
        return self

    def execute(self) -> Response:
        """
        Perform the request.

        Returns:
            The parsed Response, also kept as `last_response`

        Raises:
            TransportError: if the transport produced no output
        """
        if self._closed:
            raise RuntimeError("Client is closed")

        self.transport.setopt(Opt.HEADER, True)
        result = self.transport.perform()

        if result:
            response = parse_response(
                result,
                self.transport.getinfo(Info.HEADER_SIZE),
                self.transport.getinfo(Info.RESPONSE_CODE),
            )
            logger.debug(f"Received HTTP {response.status_code} ({len(response.body)} body bytes)")
            self._last_response = response
            return response

        message = self.transport.error_message()
        code = self.transport.error_code()
        logger.warning(f"Transport failed with code {code}: {message}")
        raise TransportError(message, code)

    def get_last_response(self) -> Optional[Response]:
        """Return the response of the last successful execute(), if any."""
        return self._last_response

    @property
    def last_response(self) -> Optional[Response]:
        return self._last_response

    def close(self) -> None:
        """Release the transport."""
        if not self._closed:
            self._closed = True
            self.transport.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()
