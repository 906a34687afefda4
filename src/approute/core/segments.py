"""Route segment grammar.

A segment is a single token between path separators in a route-defining
directory tree, e.g. ``blog``, ``[slug]``, ``(marketing)`` or ``@modal``.
Every token shape is a closed case of the ``PageSegment`` union; the four
URL-routable shapes form the ``PathSegment`` union.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias, TypedDict, TypeGuard

from approute.core.errors import EmptySegmentError, IllegalSlashError
from approute.core.types import SEPARATOR, URLPath


class SegmentDict(TypedDict):
    """Dictionary representation of a segment."""

    type: str
    name: str


@dataclass(frozen=True, slots=True)
class Static:
    """Literal path component, e.g. ``blog``."""

    name: str

    def __str__(self) -> str:
        return render_segment(self)


@dataclass(frozen=True, slots=True)
class Dynamic:
    """Single placeholder component, e.g. ``[id]``."""

    name: str

    def __str__(self) -> str:
        return render_segment(self)


@dataclass(frozen=True, slots=True)
class CatchAll:
    """Placeholder matching one or more components, e.g. ``[...slug]``."""

    name: str

    def __str__(self) -> str:
        return render_segment(self)


@dataclass(frozen=True, slots=True)
class OptionalCatchAll:
    """Placeholder matching zero or more components, e.g. ``[[...slug]]``."""

    name: str

    def __str__(self) -> str:
        return render_segment(self)


@dataclass(frozen=True, slots=True)
class Group:
    """Route group, e.g. ``(marketing)``. Not part of the URL."""

    name: str

    def __str__(self) -> str:
        return render_segment(self)


@dataclass(frozen=True, slots=True)
class Parallel:
    """Parallel route slot, e.g. ``@modal``. Not part of the URL."""

    name: str

    def __str__(self) -> str:
        return render_segment(self)


class PageType(StrEnum):
    """Terminal marker for the kind of leaf a route resolves to."""

    PAGE = "page"
    ROUTE = "route"


PathSegment: TypeAlias = Static | Dynamic | CatchAll | OptionalCatchAll
PageSegment: TypeAlias = PathSegment | Group | Parallel | PageType

_NAMED_SEGMENTS: dict[str, type[PageSegment]] = {
    "static": Static,
    "dynamic": Dynamic,
    "catch_all": CatchAll,
    "optional_catch_all": OptionalCatchAll,
    "group": Group,
    "parallel": Parallel,
}
_SEGMENT_TYPES = {cls: kind for kind, cls in _NAMED_SEGMENTS.items()}
_PAGE_TYPE_KIND = "page_type"


def parse_segment(token: str) -> PageSegment:
    """Parse a single token into a segment.

    Forms are tried from most to least specific because they share
    prefixes: ``[[...x]]`` and ``[...x]`` both start like ``[x]``.
    Anything that matches no form, including unbalanced brackets, is a
    ``Static`` segment holding the token verbatim.

    Args:
        token: Raw token without separators

    Returns:
        Parsed segment

    Raises:
        EmptySegmentError: If token is empty
        IllegalSlashError: If token contains a separator
    """
    if not token:
        raise EmptySegmentError()

    if SEPARATOR in token:
        raise IllegalSlashError(token)

    if (name := _strip(token, "(", ")")) is not None:
        return Group(name)

    if (name := _strip(token, "@", "")) is not None:
        return Parallel(name)

    if (name := _strip(token, "[[...", "]]")) is not None:
        return OptionalCatchAll(name)

    if (name := _strip(token, "[...", "]")) is not None:
        return CatchAll(name)

    if (name := _strip(token, "[", "]")) is not None:
        return Dynamic(name)

    return Static(token)


def _strip(token: str, prefix: str, suffix: str) -> str | None:
    """Return token without prefix and suffix, or None if either is missing."""
    if not token.startswith(prefix):
        return None
    rest = token[len(prefix) :]
    if not rest.endswith(suffix):
        return None
    return rest[: len(rest) - len(suffix)]


def render_segment(segment: PageSegment) -> str:
    """Render a segment back to the syntax it is parsed from."""
    match segment:
        case Static(name):
            return name
        case Dynamic(name):
            return f"[{name}]"
        case CatchAll(name):
            return f"[...{name}]"
        case OptionalCatchAll(name):
            return f"[[...{name}]]"
        case Group(name):
            return f"({name})"
        case Parallel(name):
            return f"@{name}"
        case PageType():
            return segment.value
    raise TypeError(f"Not a route segment: {segment!r}")


def render_segments(segments: Sequence[PageSegment]) -> URLPath:
    """Render segments as a separator-prefixed path.

    An empty sequence renders as the bare separator.
    """
    if not segments:
        return URLPath(SEPARATOR)
    return URLPath("".join(SEPARATOR + render_segment(s) for s in segments))


def is_routable(segment: PageSegment) -> TypeGuard[PathSegment]:
    """Check whether a segment is part of the URL path."""
    return isinstance(segment, Static | Dynamic | CatchAll | OptionalCatchAll)


def is_catch_all(segment: PageSegment) -> bool:
    """Check whether a segment consumes all remaining components."""
    return isinstance(segment, CatchAll | OptionalCatchAll)


def segment_to_dict(segment: PageSegment) -> SegmentDict:
    """Convert to dictionary for JSON serialization."""
    if isinstance(segment, PageType):
        return {"type": _PAGE_TYPE_KIND, "name": segment.value}
    return {"type": _SEGMENT_TYPES[type(segment)], "name": segment.name}


def segment_from_dict(data: object) -> PageSegment:
    """Build a segment from its dictionary representation.

    Args:
        data: Dictionary produced by segment_to_dict()

    Returns:
        Segment instance

    Raises:
        ValueError: If data is not a valid segment dictionary
    """
    if not isinstance(data, dict):
        raise ValueError("segment must be a dictionary")

    kind = data.get("type")
    name = data.get("name")
    if not isinstance(name, str):
        raise ValueError("segment.name must be a string")

    if kind == _PAGE_TYPE_KIND:
        try:
            return PageType(name)
        except ValueError:
            raise ValueError(f"Unknown page type: {name}") from None

    segment_cls = _NAMED_SEGMENTS.get(kind) if isinstance(kind, str) else None
    if segment_cls is None:
        raise ValueError(f"Unknown segment type: {kind}")
    return segment_cls(name)
