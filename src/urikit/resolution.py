from .errors import InvalidBase, UnparsableInput
from .uri import ParsedURI, parse, parse_uri_reference
from .paths import URIPath, merge


def _remove_dot_segments(path: URIPath) -> str:
    return str(path.normalized())


def join(base: ParsedURI, r: ParsedURI) -> ParsedURI:
    """Implementation of the "Transform References" algorithm from RFC 3986 section 5.2.2"""

    scheme: str | None
    userinfo: str | None
    host: str | None
    port: str | None
    path: str
    query: str | None
    fragment: str | None

    # Branches follow the RFC pseudocode one to one, R.scheme first.
    if r.raw_scheme is not None:
        scheme = r.raw_scheme
        userinfo = r.raw_userinfo
        host = r.raw_host
        port = r.raw_port
        path = _remove_dot_segments(r.path)
        query = r.raw_query
    else:
        if r.has_authority:
            userinfo = r.raw_userinfo
            host = r.raw_host
            port = r.raw_port
            path = _remove_dot_segments(r.path)
            query = r.raw_query
        else:
            if len(r.raw_path) == 0:
                path = base.raw_path
                if r.raw_query is not None:
                    query = r.raw_query
                else:
                    query = base.raw_query
            else:
                if r.raw_path.startswith("/"):
                    path = _remove_dot_segments(r.path)
                else:
                    path = _remove_dot_segments(merge(base.path, r.path, base.has_authority))
                query = r.raw_query
            userinfo = base.raw_userinfo
            host = base.raw_host
            port = base.raw_port
        scheme = base.raw_scheme
    fragment = r.raw_fragment

    return ParsedURI(
        raw_scheme=scheme,
        raw_userinfo=userinfo,
        raw_host=host,
        raw_port=port,
        raw_path=path,
        raw_query=query,
        raw_fragment=fragment,
    )


def parse_base(base: str) -> ParsedURI:
    """Parse a base URI, raising InvalidBase if it cannot be parsed."""
    try:
        return parse_uri_reference(base)
    except UnparsableInput as e:
        raise InvalidBase(f"invalid base URI: {base!r}") from e


def resolve(reference: str, base: str | ParsedURI) -> str | None:
    """Resolve reference against base, e.g. resolve("../x", "http://a/b/c/d") == "http://a/b/x".

    base may be given already parsed, to resolve many references against it.
    Raises InvalidBase if base cannot be parsed. Returns None if reference cannot.
    """
    b: ParsedURI = base if isinstance(base, ParsedURI) else parse_base(base)
    r: ParsedURI | None = parse(reference)
    if r is None:
        return None
    return join(b, r).serialize()
