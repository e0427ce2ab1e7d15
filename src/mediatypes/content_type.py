"""Content types: media types with their parameters removed."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NewType

from mediatypes.core.errors import MediaTypeMatchRegexIsBroken, NotAMediaType, OnError, raise_error
from mediatypes.grammar import CONTENT_TYPE_GROUP, Grammar, resolve_grammar

if TYPE_CHECKING:
    from mediatypes.media_type import MediaType

logger = logging.getLogger(__name__)

ContentType = NewType("ContentType", str)


def parse_content_type(value: str, on_error: OnError = raise_error, grammar: Grammar | None = None) -> ContentType:
    """Extract the content type from `value`.

    ``text/html; charset=UTF-8`` becomes ``text/html``. The result goes through the grammar's
    case converter as a whole.
    """
    grammar = resolve_grammar(grammar)
    match = grammar.match_regex.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        return on_error(NotAMediaType(value))
    # Read from its own group rather than re-assembling the parts, so a grammar where
    # the two disagree is caught here
    content_type = match.groupdict().get(CONTENT_TYPE_GROUP)
    if content_type is None:
        logger.debug("Pattern %r matched %r without populating %r", grammar.match_regex.pattern, value, CONTENT_TYPE_GROUP)
        return on_error(MediaTypeMatchRegexIsBroken(grammar.match_regex.pattern, (CONTENT_TYPE_GROUP,)))
    return ContentType(grammar.case_converter(content_type))


def content_type_from_media_type(
    media_type: MediaType, on_error: OnError = raise_error, grammar: Grammar | None = None
) -> ContentType:
    """Extract the content type from an already validated `MediaType`."""
    return parse_content_type(media_type.value, on_error=on_error, grammar=grammar)
