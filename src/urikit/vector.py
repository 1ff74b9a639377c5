"""Index-aligned batch versions of the URI operations.

Every function takes a single string or an iterable of strings (None marks a
missing element) and returns a list of the same length. A bad element never
aborts the batch; it yields a missing value at its index. Parameters that must
be a single value (base, exceptions) raise InvalidArgument when given several.
"""

import logging

from typing import Iterable, NamedTuple

from . import codec
from .errors import InvalidArgument
from .uri import ParsedURI, parse
from .relative import relativize
from .resolution import parse_base, resolve

log = logging.getLogger(__name__)


class ComponentRecord(NamedTuple):
    """One row of url_parse output. Absent text fields are "", an absent port is None."""

    scheme: str
    server: str
    port: int | None
    user: str
    path: str
    query: str
    fragment: str

    @classmethod
    def from_parsed(cls, uri: ParsedURI) -> "ComponentRecord":
        return cls(
            scheme=uri.scheme or "",
            server=uri.host or "",
            # Port 0 is reported as missing, like an absent port.
            port=uri.port or None,
            user=uri.userinfo or "",
            path=uri.raw_path,
            query=uri.query or "",
            fragment=uri.fragment or "",
        )


MISSING_RECORD = ComponentRecord("", "", None, "", "", "", "")


def _as_vector(x: str | Iterable[str | None] | None) -> list[str | None]:
    if x is None or isinstance(x, str):
        return [x]
    return list(x)


def _scalar(name: str, value: str | bytes | Iterable[str]) -> str | bytes:
    if isinstance(value, (str, bytes)):
        return value
    values: list[str] = list(value)
    if len(values) != 1:
        raise InvalidArgument(f"`{name}` must be a single string, got {len(values)} values")
    return values[0]


def url_absolute(x: str | Iterable[str | None], base: str | Iterable[str]) -> list[str | None]:
    """Resolve each reference in x against base.

    >>> url_absolute([".", "..", "/", "/x"], "http://hadley.nz/a/b/c/d")
    ['http://hadley.nz/a/b/c/', 'http://hadley.nz/a/b/', 'http://hadley.nz/', 'http://hadley.nz/x']
    """
    b: ParsedURI = parse_base(_scalar("base", base))

    out: list[str | None] = []
    for i, ref in enumerate(_as_vector(x)):
        resolved: str | None = resolve(ref, b) if ref is not None else None
        if resolved is None and ref is not None:
            log.debug("url_absolute: element %d is not a URI-reference: %r", i, ref)
        out.append(resolved)
    return out


def url_relative(x: str | Iterable[str | None], base: str | Iterable[str]) -> list[str | None]:
    """Express each URL in x relative to base.

    >>> url_relative("http://hadley.nz/a/c", "http://hadley.nz/a/b/")
    ['../c']
    """
    base = _scalar("base", base)
    return [relativize(target, base) if target is not None else None for target in _as_vector(x)]


def url_parse(x: str | Iterable[str | None]) -> list[ComponentRecord]:
    """Split each URL in x into scheme, server, port, user, path, query and fragment."""
    out: list[ComponentRecord] = []
    for i, text in enumerate(_as_vector(x)):
        uri: ParsedURI | None = parse(text) if text is not None else None
        if uri is None:
            log.debug("url_parse: element %d is not a URI-reference: %r", i, text)
            out.append(MISSING_RECORD)
            continue
        out.append(ComponentRecord.from_parsed(uri))
    return out


def url_escape(x: str | Iterable[str | None], exceptions: str | bytes | Iterable[str] = "") -> list[str | None]:
    """Percent-encode each string in x, leaving the characters in exceptions alone.

    >>> url_escape("a b c")
    ['a%20b%20c']
    """
    exceptions = _scalar("exceptions", exceptions)
    return [codec.escape(text, exceptions) if text is not None else None for text in _as_vector(x)]


def url_unescape(x: str | Iterable[str | None]) -> list[str | None]:
    """Decode percent-encoded strings; None where the bytes are not valid text.

    >>> url_unescape(["a%20b%2fc", "%C2%B5"])
    ['a b/c', 'µ']
    """
    out: list[str | None] = []
    for i, text in enumerate(_as_vector(x)):
        decoded: str | None = codec.unescape(text) if text is not None else None
        if decoded is None and text is not None:
            log.debug("url_unescape: element %d does not decode to %s text: %r", i, codec.DEFAULT_ENCODING, text)
        out.append(decoded)
    return out
