import jsonschema.validators

from mediatypes.grammar import CASE_CONVERTERS

CONFIG_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "mediatypes configuration",
    "type": "object",
    "properties": {
        "case": {"enum": sorted(CASE_CONVERTERS)},
        "match-pattern": {"type": "string", "minLength": 1},
        "parameter-pattern": {"type": "string", "minLength": 1},
    },
    "additionalProperties": False,
}

CONFIG_VALIDATOR = jsonschema.validators.Draft202012Validator(CONFIG_SCHEMA)
