"""URL path derived from a page descriptor."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypedDict

from approute.core.segments import (
    PathSegment,
    SegmentDict,
    Static,
    is_routable,
    render_segments,
    segment_to_dict,
)
from approute.core.types import URLPath

if TYPE_CHECKING:
    from approute.core.page import AppPage


class AppPathDict(TypedDict):
    """Dictionary representation of a path."""

    path: str
    segments: list[SegmentDict]


@dataclass(frozen=True)
class AppPath:
    """The pathname, including dynamic placeholders, for a route to resolve.

    Holds only the URL-routable segments of a page: route groups,
    parallel slots and the page/route marker are dropped.
    """

    segments: tuple[PathSegment, ...] = ()

    @classmethod
    def from_page(cls, page: AppPage) -> AppPath:
        """Derive a path from a page, keeping routable segments in order."""
        return cls(tuple(segment for segment in page if is_routable(segment)))

    @property
    def is_dynamic(self) -> bool:
        """Whether any segment is a placeholder."""
        return any(not isinstance(segment, Static) for segment in self.segments)

    def render(self) -> URLPath:
        """Render path to its canonical string form."""
        return render_segments(self.segments)

    def to_dict(self) -> AppPathDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.render(),
            "segments": [segment_to_dict(segment) for segment in self.segments],
        }

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[PathSegment]:
        return iter(self.segments)

    def __getitem__(self, index: int) -> PathSegment:
        return self.segments[index]
