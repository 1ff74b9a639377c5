"""Relative reference computation, the inverse of resolve.

relativize(target, base) returns the shortest reference r such that
resolve(r, base) == target. When no relative form exists (different scheme or
authority, unparsable input, ...) the target itself is returned.
"""

from .uri import ParsedURI, parse
from .paths import URIPath, common_prefix_length

SEP, SUP, CUR = "/", "..", "./"


def _same_scheme(a: ParsedURI, b: ParsedURI) -> bool:
    if a.raw_scheme is None or b.raw_scheme is None:
        return a.raw_scheme is b.raw_scheme
    return a.raw_scheme.lower() == b.raw_scheme.lower()


def _same_authority(a: ParsedURI, b: ParsedURI) -> bool:
    if a.authority is None or b.authority is None:
        return a.authority is b.authority
    return a.authority.same_as(b.authority)


def _relative_path(t: ParsedURI, b: ParsedURI, t_path: URIPath, b_path: URIPath) -> str | None:
    if b_path.is_empty:
        # Everything in the target path is below the base already.
        segments: tuple[str, ...] = t_path.segments
        if not segments:
            return "" if t.raw_query is not None or b.raw_query is None else None
        if t_path.absolute:
            # "//x" would read as an authority.
            return f"/.{t_path}" if segments[0] == "" and len(segments) > 1 else str(t_path)
    else:
        if t_path.is_empty or t_path.absolute != b_path.absolute:
            return None
        base_dir: tuple[str, ...] = b_path.directory
        k: int = common_prefix_length(base_dir, t_path.directory)
        if SUP in base_dir[k:]:
            return None
        segments = (SUP,) * (len(base_dir) - k) + t_path.segments[k:]

        if t_path.segments == b_path.segments:
            # Same document. "" would also pick up the base's query.
            if t.raw_query is not None or b.raw_query is None:
                return ""
            segments = (t_path.last,)
        if segments == ("",):
            return CUR

    if ":" in segments[0] or segments[0] == "":
        return CUR + SEP.join(segments)
    return SEP.join(segments)


def relativize(target: str, base: str) -> str:
    """Return a reference to target relative to base.
    e.g. relativize("http://a/b/c", "http://a/b/d/e") == "../c"
    """
    t: ParsedURI | None = parse(target)
    b: ParsedURI | None = parse(base)
    if t is None or b is None:
        return target
    if not _same_scheme(t, b) or not _same_authority(t, b):
        return target

    path: str | None = _relative_path(t, b, t.path.normalized(), b.path.normalized())
    if path is None:
        return target

    result: str = path
    if t.raw_query is not None:
        result += f"?{t.raw_query}"
    if t.raw_fragment is not None:
        result += f"#{t.raw_fragment}"
    return result
