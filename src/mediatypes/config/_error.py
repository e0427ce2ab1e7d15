from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from mediatypes.core.errors import MediaTypesError

if TYPE_CHECKING:
    from jsonschema import ValidationError


class ConfigError(MediaTypesError):
    """Invalid configuration."""

    error_code = "invalid-configuration"
    title = "Invalid configuration"

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> ConfigError:
        message = error.message
        if error.validator == "enum":
            message = _format_enum_error(error)
        elif error.validator == "type":
            message = _format_type_error(error)
        elif error.validator == "additionalProperties":
            message = _format_additional_properties_error(error)
        return cls(message)


def _format_enum_error(error: ValidationError) -> str:
    assert isinstance(error.validator_value, list)
    valid_values = sorted(error.validator_value)
    path = list(error.path)
    prop_name = path[-1] if path else "value"
    section = path_to_section_name(path[:-1])

    suggestion = ""
    if isinstance(error.instance, str):
        match = _find_closest_match(error.instance, valid_values)
        if match:
            suggestion = f" Did you mean '{match}'?"

    valid_values_str = ", ".join(repr(v) for v in valid_values)
    return (
        f"Error in {section} section:\n  Invalid value:\n\n"
        f"  - '{prop_name}' -> '{error.instance}' is not a valid value.{suggestion}\n\n"
        f"Valid values are: {valid_values_str}."
    )


def _format_type_error(error: ValidationError) -> str:
    expected = error.validator_value
    path = list(error.path)
    if not path:
        return f"Configuration must be a table, but got {type(error.instance).__name__}"
    section = path_to_section_name(path[:-1])
    actual = type(error.instance).__name__
    return (
        f"Error in {section} section:\n  Type error:\n\n"
        f"  - '{path[-1]}' -> Must be a {expected}, but got {actual}: {error.instance}"
    )


def _format_additional_properties_error(error: ValidationError) -> str:
    valid = list(error.schema.get("properties", {}))
    unknown = sorted(set(error.instance) - set(valid))
    valid_list = ", ".join(f"'{prop}'" for prop in valid)
    section = path_to_section_name(list(error.path))

    details = []
    for prop in unknown:
        match = _find_closest_match(prop, valid)
        if match:
            details.append(f"- '{prop}' -> Did you mean '{match}'?")
        else:
            details.append(f"- '{prop}'")

    return (
        f"Error in {section} section:\n  Unknown properties:\n\n"
        + "\n".join(f"  {detail}" for detail in details)
        + f"\n\nValid properties for {section} are: {valid_list}."
    )


def path_to_section_name(path: list[int | str]) -> str:
    """Convert a JSON path to a TOML-like section name."""
    if not path:
        return "root"

    return f"[{'.'.join(str(p) for p in path)}]"


def _find_closest_match(value: str, variants: list[str]) -> str | None:
    matches = difflib.get_close_matches(value, variants, n=1, cutoff=0.6)
    return matches[0] if matches else None
