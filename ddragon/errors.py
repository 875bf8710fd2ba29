"""Failure kinds raised by the Data Dragon cache.

Every fatal error carries the resource type, version and language it was
raised for (when known) so the HTTP layer can answer with something like
"no champion data for version 15.1.1 / fr_FR" instead of a bare 500.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

__all__ = [
    "DDragonError",
    "FetchFailure",
    "ReadFailure",
    "DecodeFailure",
    "NotFound",
    "InvalidQuery",
    "error_context",
]


class DDragonError(RuntimeError):
    """Base class for every failure surfaced by the catalog engine."""

    kind = "ddragon_error"

    def __init__(
        self,
        message: str,
        *,
        resource_type: Optional[str] = None,
        version: Optional[str] = None,
        language: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.resource_type = resource_type
        self.version = version
        self.language = language

    def context(self) -> dict:
        return {
            "resourceType": self.resource_type,
            "version": self.version,
            "language": self.language,
        }

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": self.message, **self.context()}


class FetchFailure(DDragonError):
    """Upstream GET failed, either a non-2xx status or a transport error."""

    kind = "fetch_failure"

    def __init__(self, url: str, message: str, *, status_code: Optional[int] = None, **ctx) -> None:
        super().__init__(message, **ctx)
        self.url = url
        self.status_code = status_code


class ReadFailure(DDragonError):
    """A cached file exists but could not be read."""

    kind = "read_failure"

    def __init__(self, path: str, message: str, **ctx) -> None:
        super().__init__(message, **ctx)
        self.path = path


class DecodeFailure(DDragonError):
    """JSON from the cache or from upstream did not parse."""

    kind = "decode_failure"

    def __init__(self, source: str, message: str, **ctx) -> None:
        super().__init__(message, **ctx)
        self.source = source


class NotFound(DDragonError):
    kind = "not_found"

    def __init__(self, key: str, message: Optional[str] = None, **ctx) -> None:
        super().__init__(message or f"no entry with key {key!r}", **ctx)
        self.key = key


class InvalidQuery(DDragonError):
    kind = "invalid_query"

    def __init__(self, query: str, message: Optional[str] = None, **ctx) -> None:
        super().__init__(message or f"invalid search query {query!r}", **ctx)
        self.query = query


@contextmanager
def error_context(
    resource_type: Optional[str] = None,
    version: Optional[str] = None,
    language: Optional[str] = None,
) -> Iterator[None]:
    """Fill in missing context on a DDragonError and re-raise it untouched."""
    try:
        yield
    except DDragonError as exc:
        if exc.resource_type is None:
            exc.resource_type = resource_type
        if exc.version is None:
            exc.version = version
        if exc.language is None:
            exc.language = language
        raise
