"""Route segment model for directory-based application routers.

Parses route directory names such as ``[id]``, ``(group)`` and
``[...slug]`` into typed segments, and assembles them into page
descriptors and the URL paths derived from them.
"""

from approute.core.errors import (
    EmptySegmentError,
    IllegalSlashError,
    InvalidAppendError,
    SegmentError,
)
from approute.core.page import AppPage
from approute.core.path import AppPath
from approute.core.segments import (
    CatchAll,
    Dynamic,
    Group,
    OptionalCatchAll,
    PageSegment,
    PageType,
    Parallel,
    PathSegment,
    Static,
    parse_segment,
    render_segment,
)

__all__ = [
    "AppPage",
    "AppPath",
    "CatchAll",
    "Dynamic",
    "EmptySegmentError",
    "Group",
    "IllegalSlashError",
    "InvalidAppendError",
    "OptionalCatchAll",
    "PageSegment",
    "PageType",
    "Parallel",
    "PathSegment",
    "SegmentError",
    "Static",
    "parse_segment",
    "render_segment",
]
