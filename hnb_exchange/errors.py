"""Exceptions raised across the hnb_exchange pipeline."""

from __future__ import annotations


class HNBExchangeError(Exception):
    """Base error for the package."""


class InvalidArgument(HNBExchangeError, ValueError):
    """Raised when command-line inputs are malformed or conflict."""


class TransportError(HNBExchangeError, RuntimeError):
    """Raised when the HNB API host cannot be reached."""


class HttpStatusError(HNBExchangeError, RuntimeError):
    """Raised when the HNB API answers with a non-success status code."""

    def __init__(self, status_code: int, url: str, message: str | None = None) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message or f"HNB API responded with HTTP {status_code} for {url}")


class DecodeError(HNBExchangeError, ValueError):
    """Raised when the HNB API body does not match the expected shape."""


class MalformedNumber(DecodeError):
    """Raised when a localized decimal string cannot be parsed."""


class MalformedDate(DecodeError):
    """Raised when a ``yyyy-MM-dd`` date string cannot be parsed."""


class SchemaMismatch(DecodeError):
    """Raised when a field is missing or carries the wrong JSON type."""


__all__ = [
    "HNBExchangeError",
    "InvalidArgument",
    "TransportError",
    "HttpStatusError",
    "DecodeError",
    "MalformedNumber",
    "MalformedDate",
    "SchemaMismatch",
]
