"""Break an RFC 6838 media type down into its individual parts."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from mediatypes.core.errors import MediaTypeMatchRegexIsBroken, NotAMediaType, OnError, raise_error
from mediatypes.grammar import REQUIRED_PARTS_GROUPS, CaseConverter, Grammar, resolve_grammar

logger = logging.getLogger(__name__)


@dataclass
class MediaTypeParts:
    """Structural breakdown of a media type.

    For ``application/vnd.oai.openapi+json; version=3.0``:

        MediaTypeParts(type="application", subtype="oai.openapi", tree="vnd", suffix="json",
                       parameters={"version": "3.0"})

    ``parameters`` is ``None`` when the media type has no parameters at all.
    """

    type: str
    subtype: str
    tree: str | None
    suffix: str | None
    parameters: dict[str, str] | None

    __slots__ = ("type", "subtype", "tree", "suffix", "parameters")

    def __init__(
        self,
        type: str,
        subtype: str,
        *,
        tree: str | None = None,
        suffix: str | None = None,
        parameters: dict[str, str] | None = None,
    ) -> None:
        self.type = type
        self.subtype = subtype
        self.tree = tree
        self.suffix = suffix
        self.parameters = parameters

    def to_dict(self) -> dict[str, Any]:
        """Serialize, leaving out the optional parts that are absent."""
        data: dict[str, Any] = {"type": self.type}
        if self.tree is not None:
            data["tree"] = self.tree
        data["subtype"] = self.subtype
        if self.suffix is not None:
            data["suffix"] = self.suffix
        if self.parameters is not None:
            data["parameters"] = dict(self.parameters)
        return data


def parse_media_type(value: str, on_error: OnError = raise_error, grammar: Grammar | None = None) -> MediaTypeParts:
    """Parse `value` into `MediaTypeParts`.

    Type, tree, subtype, suffix and parameter names go through the grammar's case converter,
    parameter values are kept verbatim. When a parameter is repeated, the last value wins.
    """
    grammar = resolve_grammar(grammar)
    match = grammar.match_regex.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        return on_error(NotAMediaType(value))

    groups = match.groupdict()
    missing = tuple(name for name in REQUIRED_PARTS_GROUPS if groups.get(name) is None)
    if missing:
        logger.debug("Pattern %r matched %r without populating %s", grammar.match_regex.pattern, value, missing)
        return on_error(MediaTypeMatchRegexIsBroken(grammar.match_regex.pattern, missing))

    convert = grammar.case_converter
    parts = MediaTypeParts(type=convert(groups["type"]), subtype=convert(groups["subtype"]))
    if groups.get("tree") is not None:
        parts.tree = convert(groups["tree"])
    if groups.get("suffix") is not None:
        parts.suffix = convert(groups["suffix"])
    parts.parameters = _parse_parameters(grammar.param_regex, value, convert)
    return parts


def _parse_parameters(param_regex: re.Pattern[str], value: str, convert: CaseConverter) -> dict[str, str] | None:
    parameters: dict[str, str] | None = None
    for match in param_regex.finditer(value):
        groups = match.groupdict()
        name = groups.get("parameterName")
        if name is None:
            logger.debug(
                "Parameter pattern %r matched %r without populating `parameterName`", param_regex.pattern, value
            )
            break
        if parameters is None:
            parameters = {}
        # Values may be case-sensitive (e.g. `boundary`), only names are normalized
        parameter_value = groups.get("parameterValueA")
        if parameter_value is None:
            parameter_value = groups.get("parameterValueB") or ""
        parameters[convert(name)] = parameter_value
    return parameters
