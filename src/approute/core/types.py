"""Core type definitions."""

from typing import Final, NewType

# Rendered route identifier (e.g., "/blog/[slug]", "/(shop)/[id]/page")
# Distinct from filesystem Path to catch type mismatches
URLPath = NewType("URLPath", str)

SEPARATOR: Final = "/"
