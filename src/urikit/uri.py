"""urikit.uri
A lenient RFC 3986 URI-reference tokenizer.

The grammar below follows the layout of RFC 3986, but the character classes are
relaxed: anything that is not a delimiter is accepted inside a component, hosts
are not checked against DNS or IP syntax, and ports are only checked on access.
What is never accepted is whitespace, control characters, a second "#", or a
relative reference whose first segment contains ":".
"""

import dataclasses
import re

from typing import Self, Iterable

from .errors import UnparsableInput
from .paths import URIPath

# Each of these rules is a lenient version of one from RFC 3986 or 5234.

# ALPHA = %x41-5A / %x61-7A
_ALPHA: str = r"[A-Za-z]"

# DIGIT = %x30-39
_DIGIT: str = r"[0-9]"

# CTL = %x00-1F / %x7F, plus SP. Never valid anywhere in a URI-reference.
_CTL_SP: str = r"\x00-\x20\x7f"

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME: str = rf"(?P<scheme>{_ALPHA}(?:{_ALPHA}|{_DIGIT}|[+\-.])*)"

# userinfo = *( any char but gen-delims "/" "?" "#" "@" )
_USERINFO: str = rf"(?P<userinfo>[^/?#@{_CTL_SP}]*)"

# IP-literal = "[" *( any char but "]" and gen-delims ) "]"
_IP_LITERAL: str = rf"\[[^\]/?#@{_CTL_SP}]*\]"

# reg-name = *( any char but gen-delims )
_REG_NAME: str = rf"[^:/?#@\[\]{_CTL_SP}]*"

# host = IP-literal / reg-name
_HOST: str = rf"(?P<host>{_IP_LITERAL}|{_REG_NAME})"

# port = *( any char but gen-delims ), checked for digits when read
_PORT: str = rf"(?P<port>[^/?#@{_CTL_SP}]*)"

# authority = [ userinfo "@" ] host [ ":" port ]
_AUTHORITY: str = rf"(?:{_USERINFO}@)?{_HOST}(?::{_PORT})?"

# segment = *pchar
_SEGMENT: str = rf"[^/?#{_CTL_SP}]*"

# segment-nz = 1*pchar
_SEGMENT_NZ: str = rf"[^/?#{_CTL_SP}]+"

# segment-nz-nc = 1*( pchar but ":" )
_SEGMENT_NZ_NC: str = rf"[^:/?#{_CTL_SP}]+"

# path-abempty = *( "/" segment )
_PATH_ABEMPTY: str = rf"(?P<path_abempty>(?:/{_SEGMENT})*)"

# path-absolute = "/" [ segment-nz *( "/" segment ) ]
_PATH_ABSOLUTE: str = rf"(?P<path_absolute>/(?:{_SEGMENT_NZ}(?:/{_SEGMENT})*)?)"

# path-rootless = segment-nz *( "/" segment )
_PATH_ROOTLESS: str = rf"(?P<path_rootless>{_SEGMENT_NZ}(?:/{_SEGMENT})*)"

# path-noscheme = segment-nz-nc *( "/" segment )
_PATH_NOSCHEME: str = rf"(?P<path_noscheme>{_SEGMENT_NZ_NC}(?:/{_SEGMENT})*)"

# path-empty = 0<pchar>
_PATH_EMPTY: str = r"(?P<path_empty>)"

# query = *( pchar / "/" / "?" )
_QUERY: str = rf"(?P<query>[^#{_CTL_SP}]*)"

# fragment = *( pchar / "/" / "?" )
_FRAGMENT: str = rf"(?P<fragment>[^#{_CTL_SP}]*)"

# hier-part = "//" authority path-abempty / path-absolute / path-rootless / path-empty
_HIER_PART: str = rf"(?://{_AUTHORITY}{_PATH_ABEMPTY}|{_PATH_ABSOLUTE}|{_PATH_ROOTLESS}|{_PATH_EMPTY})"

# relative-part = "//" authority path-abempty / path-absolute / path-noscheme / path-empty
_RELATIVE_PART: str = rf"(?://{_AUTHORITY}{_PATH_ABEMPTY}|{_PATH_ABSOLUTE}|{_PATH_NOSCHEME}|{_PATH_EMPTY})"

# URI = scheme ":" hier-part [ "?" query ] [ "#" fragment ]
_URI: str = rf"\A{_SCHEME}:{_HIER_PART}(?:\?{_QUERY})?(?:#{_FRAGMENT})?\Z"
_URI_PAT: re.Pattern[str] = re.compile(_URI)

# relative-ref = relative-part [ "?" query ] [ "#" fragment ]
_RELATIVE_REF: str = rf"\A{_RELATIVE_PART}(?:\?{_QUERY})?(?:#{_FRAGMENT})?\Z"
_RELATIVE_REF_PAT: re.Pattern[str] = re.compile(_RELATIVE_REF)

_MAX_PORT: int = 65535


@dataclasses.dataclass(frozen=True)
class Authority:
    """userinfo@host:port"""

    user: str | None
    host: str
    raw_port: str | None

    @property
    def port(self: Self) -> int | None:
        return _port_number(self.raw_port)

    def __str__(self: Self) -> str:
        result: str = ""
        if self.user is not None:
            result += f"{self.user}@"
        result += self.host
        if self.raw_port is not None:
            result += f":{self.raw_port}"
        return result

    def same_as(self: Self, other: Self | None) -> bool:
        """Compare as RFC 3986 section 6.2.2.1 allows: the host is case-insensitive.

        Ports compare by number; a port that isn't a number only matches the same text.
        """
        if other is None:
            return False
        same_port: bool = self.port == other.port and (self.port is not None or self.raw_port == other.raw_port)
        return self.user == other.user and self.host.lower() == other.host.lower() and same_port


def _port_number(raw_port: str | None) -> int | None:
    if raw_port is None or not re.fullmatch(rf"{_DIGIT}+", raw_port):
        return None
    port: int = int(raw_port, base=10)
    if port > _MAX_PORT:
        return None
    return port


@dataclasses.dataclass(frozen=True)
class ParsedURI:
    """A URI-reference split into its raw, undecoded components. Use one of the parse_* functions to build it.

    The authority is present exactly when raw_host is not None, so "file:///x" has an
    authority with an empty host while "mailto:x" has none.
    """

    raw_scheme: str | None
    raw_userinfo: str | None
    raw_host: str | None
    raw_port: str | None
    raw_path: str
    raw_query: str | None
    raw_fragment: str | None

    @property
    def scheme(self: Self) -> str | None:
        return self.raw_scheme

    @property
    def userinfo(self: Self) -> str | None:
        return self.raw_userinfo

    @property
    def host(self: Self) -> str | None:
        return self.raw_host

    @property
    def port(self: Self) -> int | None:
        return _port_number(self.raw_port)

    @property
    def path(self: Self) -> URIPath:
        return URIPath.from_string(self.raw_path)

    @property
    def query(self: Self) -> str | None:
        return self.raw_query

    @property
    def fragment(self: Self) -> str | None:
        return self.raw_fragment

    @property
    def authority(self: Self) -> Authority | None:
        if self.raw_host is None:
            return None
        return Authority(user=self.raw_userinfo, host=self.raw_host, raw_port=self.raw_port)

    @property
    def has_authority(self: Self) -> bool:
        return self.raw_host is not None

    @property
    def is_empty(self: Self) -> bool:
        return self.serialize() == ""

    def serialize(self: Self) -> str:
        """Direct translation of RFC 3986 section 5.3"""
        result: str = ""
        if self.raw_scheme is not None:
            result += f"{self.raw_scheme}:"
        if self.authority is not None:
            result += f"//{self.authority}"
        result += self.raw_path
        if self.raw_query is not None:
            result += f"?{self.raw_query}"
        if self.raw_fragment is not None:
            result += f"#{self.raw_fragment}"
        return result

    __str__ = serialize

    def replace(self: Self, **changes: str | None) -> Self:
        return dataclasses.replace(self, **changes)

    def defrag(self: Self) -> Self:
        return self.replace(raw_fragment=None)


def _parse(data: str, pattern: re.Pattern[str], path_kinds: Iterable[str]) -> ParsedURI:
    m: re.Match[str] | None = pattern.match(data)
    if m is None:
        raise UnparsableInput(f"not a valid URI-reference: {data!r}")

    # Because relative references don't have a scheme group in their regexes,
    # this requires an extra check.
    scheme: str | None = m["scheme"] if "scheme" in m.groupdict() else None

    return ParsedURI(
        raw_scheme=scheme,
        raw_userinfo=m["userinfo"],
        raw_host=m["host"],
        raw_port=m["port"],
        raw_path=m[next(pk for pk in path_kinds if m[pk] is not None)],
        raw_query=m["query"],
        raw_fragment=m["fragment"],
    )


_URI_PATH_KINDS: tuple[str, ...] = ("path_abempty", "path_absolute", "path_empty", "path_rootless")


def parse_uri(data: str) -> ParsedURI:
    """Parse a URI, which must carry a scheme (e.g. "http://example.org/path?query#fragment")."""
    return _parse(data, _URI_PAT, _URI_PATH_KINDS)


_RELATIVE_REF_PATH_KINDS: tuple[str, ...] = ("path_abempty", "path_absolute", "path_empty", "path_noscheme")


def parse_relative_ref(data: str) -> ParsedURI:
    """Parse a relative reference, which must not carry a scheme (e.g. "//example.org/path?query#fragment")."""
    return _parse(data, _RELATIVE_REF_PAT, _RELATIVE_REF_PATH_KINDS)


def parse_uri_reference(data: str) -> ParsedURI:
    """Parse a URI-reference: a URI if possible, else a relative reference.
    Raises UnparsableInput if it is neither.
    """
    try:
        return parse_uri(data)
    except UnparsableInput:
        pass
    try:
        return parse_relative_ref(data)
    except UnparsableInput:
        pass
    raise UnparsableInput(f"failed to parse URI-reference: {data!r}")


def parse(data: str) -> ParsedURI | None:
    """Like parse_uri_reference, but returns None for unparsable input."""
    try:
        return parse_uri_reference(data)
    except UnparsableInput:
        return None
