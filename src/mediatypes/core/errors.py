"""Errors raised while validating, parsing or comparing media types."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn


class MediaTypesError(Exception):
    """Base exception class for all mediatypes errors."""

    error_code: str = "mediatypes-error"
    title: str = "Media type error"

    @property
    def extra(self) -> dict[str, Any]:
        """Public diagnostic payload."""
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Structured problem report for this error."""
        return {"error": self.error_code, "title": self.title, "extra": self.extra}


class NotAMediaType(MediaTypesError, ValueError):
    """The input does not conform to the media type grammar."""

    error_code = "not-a-media-type"
    title = "Input is not a media type"

    def __init__(self, input: str) -> None:
        self.input = input
        super().__init__(f"Not a media type: `{input}`")

    @property
    def extra(self) -> dict[str, Any]:
        return {"input": self.input}


class MediaTypeMatchRegexIsBroken(MediaTypesError):
    """The configured grammar matched, but did not provide the expected named groups.

    This is a setup mistake in a custom grammar, not a problem with the input.
    """

    error_code = "media-type-match-regex-is-broken"
    title = "Media type match regex is broken"

    def __init__(self, pattern: str, missing: tuple[str, ...]) -> None:
        self.pattern = pattern
        self.missing = missing
        groups = ", ".join(f"`{name}`" for name in missing)
        super().__init__(f"Media type pattern `{pattern}` does not capture the required groups: {groups}")

    @property
    def extra(self) -> dict[str, Any]:
        return {"pattern": self.pattern, "missing": list(self.missing)}


OnError = Callable[[MediaTypesError], Any]


def raise_error(error: MediaTypesError) -> NoReturn:
    """Default error policy: propagate the error to the caller."""
    raise error
