from __future__ import annotations

from mediatypes.core.errors import NotAMediaType, OnError, raise_error
from mediatypes.core.refined import Refinement
from mediatypes.grammar import Grammar, resolve_grammar


def is_media_type(value: str, grammar: Grammar | None = None) -> bool:
    """Check whether the whole `value` is an RFC 6838 media type."""
    if not isinstance(value, str):
        return False
    return resolve_grammar(grammar).match_regex.fullmatch(value) is not None


MEDIA_TYPE_REFINEMENT: Refinement[str] = Refinement(guard=is_media_type, make_error=NotAMediaType)


def must_be_media_type(value: str, on_error: OnError = raise_error) -> str:
    """Return `value` if it is a media type, otherwise report `NotAMediaType` via `on_error`."""
    return MEDIA_TYPE_REFINEMENT.check(value, on_error)
