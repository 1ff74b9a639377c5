import logging

import pytest

from urikit import InvalidArgument, InvalidBase
from urikit.vector import (
    ComponentRecord,
    MISSING_RECORD,
    url_absolute,
    url_escape,
    url_parse,
    url_relative,
    url_unescape,
)


class TestUrlAbsolute:
    def test_hadley_example(self):
        assert url_absolute([".", "..", "/", "/x"], "http://hadley.nz/a/b/c/d") == [
            "http://hadley.nz/a/b/c/",
            "http://hadley.nz/a/b/",
            "http://hadley.nz/",
            "http://hadley.nz/x",
        ]

    def test_single_string(self):
        assert url_absolute("g", "http://a/b/c/d") == ["http://a/b/c/g"]

    def test_base_as_one_element_list(self):
        assert url_absolute(["g"], ["http://a/b/c/d"]) == ["http://a/b/c/g"]

    @pytest.mark.parametrize("base", [["http://a/", "http://b/"], []])
    def test_base_must_be_scalar(self, base):
        with pytest.raises(InvalidArgument):
            url_absolute(["g"], base)

    def test_invalid_base(self):
        with pytest.raises(InvalidBase):
            url_absolute(["g"], "not a uri")

    def test_bad_element_does_not_abort_batch(self):
        assert url_absolute(["a", "not a uri", None, "b"], "http://h/") == [
            "http://h/a",
            None,
            None,
            "http://h/b",
        ]

    def test_empty_input(self):
        assert url_absolute([], "http://h/") == []

    def test_accepts_generator(self):
        assert url_absolute((r for r in ["x", "y"]), "http://h/") == ["http://h/x", "http://h/y"]


class TestUrlRelative:
    def test_hadley_examples(self):
        assert url_relative("http://hadley.nz/a/c", "http://hadley.nz/a/b") == ["c"]
        assert url_relative("http://hadley.nz/a/c", "http://hadley.nz/a/b/") == ["../c"]

    def test_vector(self):
        assert url_relative(["http://h/a/c", "https://h/a/c", None], "http://h/a/b") == [
            "c",
            "https://h/a/c",
            None,
        ]

    def test_base_must_be_scalar(self):
        with pytest.raises(InvalidArgument):
            url_relative(["http://h/a"], ["http://h/", "http://h/b"])


class TestUrlParse:
    def test_components(self):
        assert url_parse("http://had.co.nz:1234/?a=1&b=2#def") == [
            ComponentRecord(
                scheme="http",
                server="had.co.nz",
                port=1234,
                user="",
                path="/",
                query="a=1&b=2",
                fragment="def",
            )
        ]

    def test_absent_fields(self):
        assert url_parse("http://had.co.nz/") == [ComponentRecord("http", "had.co.nz", None, "", "/", "", "")]

    def test_user(self):
        assert url_parse("ftp://anon:pw@host/file")[0].user == "anon:pw"

    @pytest.mark.parametrize("url", ["http://h:0/", "http://h:abc/", "http://h:70000/", "http://h:/"])
    def test_port_missing(self, url):
        assert url_parse(url)[0].port is None

    def test_unparsable_row(self):
        rows = url_parse(["http://a/", "not a uri", None])
        assert len(rows) == 3
        assert rows[0].server == "a"
        assert rows[1] == MISSING_RECORD
        assert rows[2] == MISSING_RECORD
        assert rows[1].port is None

    def test_logs_unparsable_elements(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="urikit.vector"):
            url_parse(["ok:x", "not a uri"])
        assert "element 1" in caplog.text


class TestUrlEscape:
    def test_examples(self):
        assert url_escape("a b c") == ["a%20b%20c"]
        assert url_escape("a b c", "") == ["a%20b%20c"]

    def test_exceptions_as_one_element_list(self):
        assert url_escape(["a/b c"], ["/"]) == ["a/b%20c"]

    @pytest.mark.parametrize("exceptions", [["/", "?"], []])
    def test_exceptions_must_be_scalar(self, exceptions):
        with pytest.raises(InvalidArgument):
            url_escape(["a"], exceptions)

    def test_missing_element(self):
        assert url_escape(["a b", None]) == ["a%20b", None]

    def test_bytes_exceptions(self):
        assert url_escape(["a/b c"], b"/") == ["a/b%20c"]


class TestUrlUnescape:
    def test_examples(self):
        assert url_unescape(["a%20b%2fc", "%C2%B5"]) == ["a b/c", "µ"]

    def test_malformed_and_undecodable(self):
        assert url_unescape(["100%", "%FF", None]) == ["100%", None, None]

    def test_logs_undecodable_elements(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="urikit.vector"):
            url_unescape(["%FF"])
        assert "element 0" in caplog.text
