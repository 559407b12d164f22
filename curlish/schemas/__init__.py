"""
Schemas

Error codes, error models and exceptions shared across the package.
"""

from .errors import (
    CurlishException,
    ErrorCodes,
    TransportError,
    TransportErrorModel,
)

__all__ = [
    "CurlishException",
    "ErrorCodes",
    "TransportError",
    "TransportErrorModel",
]
