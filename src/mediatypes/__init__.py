from __future__ import annotations

from mediatypes.config import MediaTypesConfig as Config
from mediatypes.content_type import ContentType, content_type_from_media_type, parse_content_type
from mediatypes.core.errors import (
    MediaTypeMatchRegexIsBroken,
    MediaTypesError,
    NotAMediaType,
    OnError,
    raise_error,
)
from mediatypes.core.version import MEDIATYPES_VERSION
from mediatypes.grammar import DEFAULT_GRAMMAR, MEDIA_TYPE_MATCH_RE, MEDIA_TYPE_PARAM_RE, Grammar
from mediatypes.matching import matches_content_type
from mediatypes.media_type import MediaType
from mediatypes.parsing import MediaTypeParts, parse_media_type
from mediatypes.validation import is_media_type, must_be_media_type

__version__ = MEDIATYPES_VERSION

__all__ = [
    "__version__",
    # Value types
    "MediaType",
    "MediaTypeParts",
    "ContentType",
    # Operations
    "is_media_type",
    "must_be_media_type",
    "parse_media_type",
    "parse_content_type",
    "content_type_from_media_type",
    "matches_content_type",
    # Grammar
    "Grammar",
    "DEFAULT_GRAMMAR",
    "MEDIA_TYPE_MATCH_RE",
    "MEDIA_TYPE_PARAM_RE",
    # Configuration
    "Config",
    # Errors
    "MediaTypesError",
    "NotAMediaType",
    "MediaTypeMatchRegexIsBroken",
    "OnError",
    "raise_error",
]
