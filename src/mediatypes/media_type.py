from __future__ import annotations

from mediatypes.content_type import ContentType, parse_content_type
from mediatypes.core import NOT_SET, NotSet
from mediatypes.core.errors import OnError, raise_error
from mediatypes.parsing import MediaTypeParts, parse_media_type
from mediatypes.validation import MEDIA_TYPE_REFINEMENT


class MediaType:
    """Value type for RFC 6838 media type strings.

    The raw string is validated on construction and kept exactly as given. Parsed parts and the
    content type are computed on first access and cached for the lifetime of the instance.
    """

    __slots__ = ("_value", "_parts", "_content_type")

    def __init__(self, value: str, on_error: OnError = raise_error) -> None:
        self._value: str = MEDIA_TYPE_REFINEMENT.enforce(value, on_error)
        self._parts: MediaTypeParts | NotSet = NOT_SET
        self._content_type: ContentType | NotSet = NOT_SET

    @property
    def value(self) -> str:
        return self._value

    def get_content_type(self) -> ContentType:
        """Get ``text/html`` from ``text/html; charset=UTF-8``."""
        # Pure function of `_value`, concurrent first calls can only store equal results
        if isinstance(self._content_type, NotSet):
            self._content_type = parse_content_type(self._value)
        return self._content_type

    def parse(self) -> MediaTypeParts:
        """Break this media type down into its individual parts."""
        if isinstance(self._parts, NotSet):
            self._parts = parse_media_type(self._value)
        return self._parts

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MediaType):
            return self._value == other._value
        if isinstance(other, str):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)
