"""Registry of HTML tag names for each block kind."""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from .base import BlockKind

_DEFAULT_TAG = "p"

_TAG_TABLE: Mapping[BlockKind, str] = MappingProxyType(
    {
        BlockKind.PARAGRAPH: "p",
        BlockKind.HEADER1: "h1",
        BlockKind.HEADER2: "h2",
        BlockKind.HEADER3: "h3",
        BlockKind.HEADER4: "h4",
        BlockKind.HEADER5: "h5",
        BlockKind.HEADER6: "h6",
        BlockKind.BULLET: "li",
        BlockKind.HORIZONTAL_RULE: "hr",
    }
)


class TagRegistry:
    """Read-only lookup from block kind to HTML tag.

    Unknown kinds resolve to the paragraph tag instead of raising.
    """

    def __init__(self, table: Mapping[BlockKind, str] = _TAG_TABLE) -> None:
        self._table = MappingProxyType(dict(table))

    def tag_name(self, kind: BlockKind) -> str:
        try:
            return self._table.get(kind) or _DEFAULT_TAG
        except TypeError:
            # unhashable values cannot be table keys
            return _DEFAULT_TAG

    def opening_tag(self, kind: BlockKind) -> str:
        return f"<{self.tag_name(kind)}>"

    def closing_tag(self, kind: BlockKind) -> str:
        return f"</{self.tag_name(kind)}>"


@lru_cache(maxsize=1)
def get_tag_registry() -> TagRegistry:
    """Return the process-wide tag registry."""

    return TagRegistry()
