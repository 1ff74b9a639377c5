import string

import pytest

from urikit.codec import escape, unescape, unescape_to_bytes


class TestEscape:
    def test_spaces(self):
        assert escape("a b c") == "a%20b%20c"
        assert escape("a b c", "") == "a%20b%20c"

    def test_unreserved_untouched(self):
        assert escape("AZaz09-._~") == "AZaz09-._~"

    def test_reserved_escaped_uppercase(self):
        assert escape("a/b?c=d&e#f") == "a%2Fb%3Fc%3Dd%26e%23f"

    def test_exceptions(self):
        assert escape("a b/c", "/") == "a%20b/c"
        assert escape("a=1&b=2", "=&") == "a=1&b=2"

    def test_multibyte_is_escaped_per_byte(self):
        assert escape("µ") == "%C2%B5"
        assert escape("日") == "%E6%97%A5"

    def test_multibyte_exception_kept_whole(self):
        assert escape("µ²", "µ") == "µ%C2%B2"

    def test_bytes_input(self):
        assert escape(b"a b\xff") == "a%20b%FF"
        assert escape(b"a/b", "/") == "a/b"

    def test_percent_is_escaped(self):
        assert escape("100%") == "100%25"

    def test_alternate_encoding(self):
        assert escape("é", encoding="latin-1") == "%E9"


class TestUnescape:
    def test_basic(self):
        assert unescape("a%20b%2fc") == "a b/c"

    def test_two_byte_utf8(self):
        assert unescape("%C2%B5") == "µ"

    def test_plain_text(self):
        assert unescape("abc") == "abc"
        assert unescape("") == ""

    @pytest.mark.parametrize("text", ["100%", "%", "%4", "%zz", "%g1", "a%2"])
    def test_malformed_passes_through(self, text):
        assert unescape(text) == text

    def test_mixed_malformed_and_valid(self):
        assert unescape("%%41%4") == "%A%4"

    def test_invalid_utf8_is_none(self):
        assert unescape("%FF") is None
        assert unescape("%C2") is None

    def test_alternate_encoding(self):
        assert unescape("%E9", encoding="latin-1") == "é"

    def test_to_bytes_never_fails(self):
        assert unescape_to_bytes("%FF%fe") == b"\xff\xfe"
        assert unescape_to_bytes("µ") == "µ".encode("utf-8")

    def test_plus_is_not_space(self):
        assert unescape("a+b") == "a+b"


@pytest.mark.parametrize(
    "text",
    [
        string.printable.strip(),
        "a b c",
        "%41",
        "http://example.com/?q=a b&x=%",
        "",
    ],
)
def test_round_trip_printable_ascii(text):
    assert unescape(escape(text, "")) == text
