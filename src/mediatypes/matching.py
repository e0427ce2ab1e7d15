from __future__ import annotations

from collections.abc import Iterable

from mediatypes.media_type import MediaType


def matches_content_type(media_type: MediaType, expected: Iterable[MediaType]) -> bool:
    """Check whether `media_type` has the same content type as any of the `expected` ones.

    Parameters are ignored on both sides: ``text/html; charset=UTF-8`` matches ``text/html; level=1``.
    """
    content_type = media_type.get_content_type()
    return any(candidate.get_content_type() == content_type for candidate in expected)
