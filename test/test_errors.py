import pytest

from mediatypes import MediaTypeMatchRegexIsBroken, MediaTypesError, NotAMediaType, raise_error
from mediatypes.config import ConfigError


def test_not_a_media_type():
    error = NotAMediaType("text")
    assert isinstance(error, MediaTypesError)
    assert isinstance(error, ValueError)
    assert str(error) == "Not a media type: `text`"
    assert error.to_dict() == {
        "error": "not-a-media-type",
        "title": "Input is not a media type",
        "extra": {"input": "text"},
    }


def test_match_regex_is_broken():
    error = MediaTypeMatchRegexIsBroken("^.*$", ("type", "subtype"))
    assert not isinstance(error, ValueError)
    assert str(error) == "Media type pattern `^.*$` does not capture the required groups: `type`, `subtype`"
    assert error.to_dict() == {
        "error": "media-type-match-regex-is-broken",
        "title": "Media type match regex is broken",
        "extra": {"pattern": "^.*$", "missing": ["type", "subtype"]},
    }


def test_config_error():
    error = ConfigError("Invalid")
    assert isinstance(error, MediaTypesError)
    assert error.to_dict() == {"error": "invalid-configuration", "title": "Invalid configuration", "extra": {}}


def test_raise_error():
    error = NotAMediaType("text")
    with pytest.raises(NotAMediaType) as exc:
        raise_error(error)
    assert exc.value is error
