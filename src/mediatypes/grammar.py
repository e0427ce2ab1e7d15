"""Regular expressions describing RFC 6838 media types.

The named groups are the interface between the grammar and the rest of the package:

- ``MEDIA_TYPE_MATCH_RE``: ``type``, ``tree``, ``subtype``, ``suffix`` and ``contentType``
  (everything before the parameters, separators included);
- ``MEDIA_TYPE_PARAM_RE``: ``parameterName``, ``parameterValueA`` (unquoted value) and
  ``parameterValueB`` (quoted value, without the quotes).

A custom grammar has to provide the same groups.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field, replace

CaseConverter = Callable[[str], str]

# RFC 7230 `tchar` without "." and "+", which separate the tree and the suffix from the subtype
_NAME = r"[A-Za-z0-9!#$%&'*^_`|~-]+"
# Full `tchar` set, used for parameter names and unquoted values
_TOKEN = r"[A-Za-z0-9!#$%&'*+.^_`|~-]+"
_QUOTED = r'"[^"\r\n]*"'
_OWS = r"[ \t]*"

_PARAMETER = rf"{_OWS};{_OWS}{_TOKEN}=(?:{_TOKEN}|{_QUOTED})"

MEDIA_TYPE_MATCH_PATTERN = (
    rf"^(?P<contentType>(?P<type>{_NAME})/(?:(?P<tree>{_NAME})\.)?"
    rf"(?P<subtype>{_NAME}(?:\.{_NAME})*)(?:\+(?P<suffix>{_NAME}))?)"
    rf"(?:{_PARAMETER})*{_OWS}$"
)
MEDIA_TYPE_PARAM_PATTERN = (
    rf"{_OWS};{_OWS}(?P<parameterName>{_TOKEN})="
    rf'(?:(?P<parameterValueA>{_TOKEN})|"(?P<parameterValueB>[^"\r\n]*)")'
)

MEDIA_TYPE_MATCH_RE = re.compile(MEDIA_TYPE_MATCH_PATTERN)
MEDIA_TYPE_PARAM_RE = re.compile(MEDIA_TYPE_PARAM_PATTERN)

# Groups that every successful structure match must populate
REQUIRED_PARTS_GROUPS = ("type", "subtype")
CONTENT_TYPE_GROUP = "contentType"


def preserve_case(value: str) -> str:
    return value


CASE_CONVERTERS: dict[str, CaseConverter] = {
    "lower": str.lower,
    "upper": str.upper,
    "preserve": preserve_case,
}


@dataclass(frozen=True)
class Grammar:
    """Patterns and the case-folding policy used by the parsing functions."""

    match_regex: re.Pattern[str] = field(default=MEDIA_TYPE_MATCH_RE)
    param_regex: re.Pattern[str] = field(default=MEDIA_TYPE_PARAM_RE)
    case_converter: CaseConverter = field(default=str.lower)

    def with_case_converter(self, case_converter: CaseConverter) -> Grammar:
        return replace(self, case_converter=case_converter)


DEFAULT_GRAMMAR = Grammar()


def resolve_grammar(grammar: Grammar | None) -> Grammar:
    if grammar is None:
        return DEFAULT_GRAMMAR
    return grammar
