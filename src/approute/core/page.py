"""Page descriptor for a discovered route.

An ``AppPage`` describes the route including every internal modifier
that is not part of the pathname: route groups, parallel route slots and
the trailing page/route marker. It is built one directory component at a
time while the route tree is walked.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, TypedDict

from approute.core.errors import InvalidAppendError
from approute.core.segments import (
    PageSegment,
    PageType,
    SegmentDict,
    is_catch_all,
    parse_segment,
    render_segments,
    segment_from_dict,
    segment_to_dict,
)
from approute.core.types import SEPARATOR, URLPath

if TYPE_CHECKING:
    from approute.core.path import AppPath

logger = logging.getLogger(__name__)


class AppPageDict(TypedDict):
    """Dictionary representation of a page."""

    page: str
    segments: list[SegmentDict]


class AppPage:
    """Ordered page segments with the catch-all ordering invariant.

    Once a catch-all or optional catch-all segment is appended, the only
    segment that may follow is a ``PageType`` marker. A rejected append
    leaves the page unchanged.
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: tuple[PageSegment, ...] = ()) -> None:
        """Initialize page, validating segments in order.

        Args:
            segments: Initial segments

        Raises:
            InvalidAppendError: If segments violate the catch-all ordering
        """
        self._segments: tuple[PageSegment, ...] = ()
        for segment in segments:
            self.append(segment)

    @classmethod
    def parse_path(cls, path: str) -> AppPage:
        """Parse a separator-delimited path into a page.

        Empty components (leading, trailing or doubled separators) are
        skipped.

        Args:
            path: Route path (e.g., "/(shop)/products/[id]")

        Returns:
            Parsed page

        Raises:
            SegmentError: From the first component that fails to append
        """
        page = cls()
        for token in path.split(SEPARATOR):
            page.append_token(token)
        return page

    @classmethod
    def from_dict(cls, data: object) -> AppPage:
        """Build a page from its dictionary representation.

        Raises:
            ValueError: If data is malformed or violates the ordering invariant
        """
        if not isinstance(data, dict):
            raise ValueError("page must be a dictionary")
        segments = data.get("segments")
        if not isinstance(segments, list):
            raise ValueError("page.segments must be a list")
        return cls(tuple(segment_from_dict(item) for item in segments))

    @property
    def segments(self) -> tuple[PageSegment, ...]:
        return self._segments

    @property
    def page_type(self) -> PageType | None:
        """Trailing page/route marker, None while the page is incomplete."""
        if self._segments and isinstance(self._segments[-1], PageType):
            return self._segments[-1]
        return None

    def append(self, segment: PageSegment) -> None:
        """Append a segment.

        Args:
            segment: Segment to append

        Raises:
            InvalidAppendError: If the last segment is a catch-all and
                segment is not a PageType marker
        """
        if (
            self._segments
            and is_catch_all(self._segments[-1])
            and not isinstance(segment, PageType)
        ):
            logger.debug(f"Rejected {segment!r} after catch-all in {self}")
            raise InvalidAppendError(segment)

        self._segments = (*self._segments, segment)

    def append_token(self, token: str) -> None:
        """Parse and append a raw token. Empty tokens are ignored."""
        if not token:
            return
        self.append(parse_segment(token))

    def append_segment_copy(self, segment: PageSegment) -> AppPage:
        """Return a new page with segment appended, leaving this one untouched."""
        page = self.copy()
        page.append(segment)
        return page

    def append_token_copy(self, token: str) -> AppPage:
        """Return a new page with token appended, leaving this one untouched."""
        page = self.copy()
        page.append_token(token)
        return page

    def copy(self) -> AppPage:
        page = AppPage()
        page._segments = self._segments
        return page

    def to_path(self) -> AppPath:
        """Derive the URL path for this page."""
        from approute.core.path import AppPath

        return AppPath.from_page(self)

    def render(self) -> URLPath:
        """Render page to its canonical string form."""
        return render_segments(self._segments)

    def to_dict(self) -> AppPageDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "page": self.render(),
            "segments": [segment_to_dict(segment) for segment in self._segments],
        }

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"AppPage({self.render()!r})"

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[PageSegment]:
        return iter(self._segments)

    def __getitem__(self, index: int) -> PageSegment:
        return self._segments[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AppPage):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)

