import threading

import pytest
from media_type_examples import CONTENT_TYPES, INVALID_MEDIA_TYPES, VALID_MEDIA_TYPES

from mediatypes import MediaType, NotAMediaType


@pytest.mark.parametrize("value", list(VALID_MEDIA_TYPES))
def test_accepts(value):
    assert MediaType(value).value == value


@pytest.mark.parametrize("value", INVALID_MEDIA_TYPES)
def test_rejects(value):
    with pytest.raises(NotAMediaType) as exc:
        MediaType(value)
    assert exc.value.input == value


def test_on_error_cannot_produce_an_invalid_instance():
    errors = []
    with pytest.raises(NotAMediaType):
        MediaType("text", on_error=errors.append)
    assert len(errors) == 1


def test_on_error_may_raise_its_own_exception():
    class Custom(Exception):
        pass

    def on_error(error):
        raise Custom(str(error)) from error

    with pytest.raises(Custom, match="Not a media type"):
        MediaType("text", on_error=on_error)


def test_raw_value_is_kept_as_is():
    value = "Text/HTML; Charset=UTF-8"
    media_type = MediaType(value)
    assert str(media_type) == value
    assert media_type.value == value


def test_can_be_used_as_a_string():
    assert f"{MediaType('text/plain')} is a media type" == "text/plain is a media type"


def test_repr():
    assert repr(MediaType("text/plain")) == "MediaType('text/plain')"


@pytest.mark.parametrize(("value", "expected"), list(VALID_MEDIA_TYPES.items()))
def test_parse(value, expected):
    assert MediaType(value).parse() == expected


def test_parse_is_cached():
    media_type = MediaType("application/vnd.tie-record+json")
    assert media_type.parse() is media_type.parse()


@pytest.mark.parametrize(("value", "expected"), list(CONTENT_TYPES.items()))
def test_get_content_type(value, expected):
    assert MediaType(value).get_content_type() == expected


def test_get_content_type_is_cached():
    media_type = MediaType("text/html; charset=UTF-8")
    first = media_type.get_content_type()
    assert media_type.get_content_type() is first


def test_concurrent_first_access():
    media_type = MediaType("application/vnd.oai.openapi+json; version=3.0")
    results = []

    def worker():
        results.append((media_type.get_content_type(), media_type.parse().to_dict()))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(results) == 8
    assert all(result == results[0] for result in results)


def test_equality():
    assert MediaType("text/plain") == MediaType("text/plain")
    assert MediaType("text/plain") == "text/plain"
    # Compared by raw value, not by content type
    assert MediaType("text/plain") != MediaType("Text/Plain")
    assert MediaType("text/plain") != MediaType("text/plain; charset=utf-8")
    assert MediaType("text/plain") != 42


def test_hashable():
    assert len({MediaType("text/plain"), MediaType("text/plain"), MediaType("text/html")}) == 2
    assert hash(MediaType("text/plain")) == hash("text/plain")


def test_no_new_attributes():
    media_type = MediaType("text/plain")
    with pytest.raises(AttributeError):
        media_type.extra = 1
    with pytest.raises(AttributeError):
        media_type.value = "text/html"
