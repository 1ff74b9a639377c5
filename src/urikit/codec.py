"""Percent-encoding of URI text (RFC 3986 section 2.1).

Escaping always works on bytes: str input is encoded with DEFAULT_ENCODING first,
so a multi-byte character becomes several %XX triplets.

Unescaping is permissive. A "%" that is not followed by two hex digits is copied
through as-is ("100%", "%zz", "%4" all survive unchanged). The only failure is when
the decoded bytes are not valid text in the requested encoding (e.g. "%FF" under
UTF-8); unescape then returns None instead of guessing.
"""

import re

DEFAULT_ENCODING: str = "utf-8"

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
UNRESERVED: frozenset[int] = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~"
)

# pct-encoded = "%" HEXDIG HEXDIG
_PCT_ENCODED_PAT: re.Pattern[bytes] = re.compile(rb"%([0-9A-Fa-f]{2})")


def _to_bytes(data: str | bytes, encoding: str) -> bytes:
    if isinstance(data, bytes):
        return data
    return data.encode(encoding)


def _pct_encode(data: bytes) -> str:
    return "".join(f"%{b:02X}" for b in data)


def escape(data: str | bytes, exceptions: str | bytes = "", encoding: str = DEFAULT_ENCODING) -> str:
    """Percent-encode everything in data that is neither unreserved nor in exceptions.
    e.g. escape("a b/c", "/") == "a%20b/c"

    For str input, exceptions are matched per character, so escape("µ", "µ") == "µ".
    For bytes input they are matched per byte and only ASCII bytes can be exempted.
    """
    if isinstance(data, bytes):
        safe: frozenset[int] = UNRESERVED | frozenset(b for b in _to_bytes(exceptions, encoding) if b < 0x80)
        return "".join(chr(b) if b in safe else _pct_encode(bytes((b,))) for b in data)

    keep: set[str] = set(exceptions.decode(encoding) if isinstance(exceptions, bytes) else exceptions)
    return "".join(
        c if c in keep or (c.isascii() and ord(c) in UNRESERVED) else _pct_encode(c.encode(encoding))
        for c in data
    )


def unescape_to_bytes(data: str | bytes, encoding: str = DEFAULT_ENCODING) -> bytes:
    """Decode every well-formed %XX triplet; everything else is passed through."""
    return _PCT_ENCODED_PAT.sub(lambda m: bytes.fromhex(m[1].decode("ascii")), _to_bytes(data, encoding))


def unescape(data: str | bytes, encoding: str = DEFAULT_ENCODING) -> str | None:
    """Decode percent-encoded text, or return None if the result isn't valid in encoding.
    e.g. unescape("%C2%B5") == "µ"
    """
    try:
        return unescape_to_bytes(data, encoding).decode(encoding)
    except UnicodeDecodeError:
        return None
