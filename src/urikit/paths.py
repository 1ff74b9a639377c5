"""Segment-level path operations used by reference resolution (RFC 3986 section 5.2)."""

import dataclasses

from typing import Self, Sequence


@dataclasses.dataclass(frozen=True)
class URIPath:
    """A path as a sequence of segments plus a leading-slash flag.

    "/a/b/" is (("a", "b", ""), True) and "a/b" is (("a", "b"), False).
    The empty path is ((), False).
    """

    segments: tuple[str, ...]
    absolute: bool

    @classmethod
    def from_string(cls, path: str) -> Self:
        if len(path) == 0:
            return cls(segments=(), absolute=False)
        if path.startswith("/"):
            return cls(segments=tuple(path[1:].split("/")), absolute=True)
        return cls(segments=tuple(path.split("/")), absolute=False)

    def __str__(self: Self) -> str:
        joined: str = "/".join(self.segments)
        return f"/{joined}" if self.absolute else joined

    @property
    def is_empty(self: Self) -> bool:
        return not self.absolute and len(self.segments) == 0

    @property
    def directory(self: Self) -> tuple[str, ...]:
        """Every segment but the last (the last names the current document)."""
        return self.segments[:-1]

    @property
    def last(self: Self) -> str:
        return self.segments[-1] if self.segments else ""

    def normalized(self: Self) -> Self:
        return self.__class__(
            segments=remove_dot_segments(self.segments, self.absolute),
            absolute=self.absolute,
        )


def remove_dot_segments(segments: Sequence[str], is_absolute: bool) -> tuple[str, ...]:
    """Implementation of the "remove_dot_segments" routine from RFC 3986 section 5.2.4

    Works on segments instead of the RFC's string buffer. For relative paths, a ".."
    with nothing left to pop is kept, so "../a" stays "../a".
    """
    output: list[str] = []
    for i, seg in enumerate(segments):
        is_last: bool = i == len(segments) - 1
        if seg == ".":
            if is_last:
                output.append("")
        elif seg == "..":
            if output and output[-1] != "..":
                output.pop()
            elif not is_absolute:
                output.append(seg)
                continue
            if is_last:
                output.append("")
        else:
            output.append(seg)
    return tuple(output)


def merge(base: URIPath, ref: URIPath, base_has_authority: bool) -> URIPath:
    """Implementation of the "merge" routine defined in RFC 3986 section 5.2.3"""
    if base_has_authority and base.is_empty:
        return URIPath(segments=ref.segments, absolute=True)
    return URIPath(segments=base.directory + ref.segments, absolute=base.absolute)


def common_prefix_length(a: Sequence[str], b: Sequence[str]) -> int:
    n: int = 0
    for seg_a, seg_b in zip(a, b):
        if seg_a != seg_b:
            break
        n += 1
    return n
