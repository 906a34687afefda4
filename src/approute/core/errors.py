"""Errors raised while parsing and assembling route segments."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from approute.core.segments import PageSegment


class SegmentError(ValueError):
    """Base class for segment grammar and append errors."""

    kind = "segment"


class EmptySegmentError(SegmentError):
    """Raised when an empty token reaches the grammar."""

    kind = "empty_segment"

    def __init__(self) -> None:
        super().__init__("empty segments are not allowed")


class IllegalSlashError(SegmentError):
    """Raised when a token still contains a separator."""

    kind = "illegal_slash"

    def __init__(self, token: str) -> None:
        super().__init__(f"slashes are not allowed in segments: {token!r}")
        self.token = token


class InvalidAppendError(SegmentError):
    """Raised when a segment is appended after a catch-all segment."""

    kind = "invalid_append"

    def __init__(self, segment: PageSegment) -> None:
        super().__init__(
            f"Invalid segment {segment}, catch all segment must be the last segment"
        )
        self.segment = segment
