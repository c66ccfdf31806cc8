"""Line-oriented Markdown → HTML conversion."""

from __future__ import annotations

import logging
from typing import List

from .base import BlockKind, ConversionResult, LineRecord, MarkdownDocument
from .chain import build_chain

logger = logging.getLogger(__name__)


class MarkdownConverter:
    """Converts Markdown text into an HTML fragment, one block per line.

    Every call builds its own document and rule chain, so a single instance
    may be shared between threads.
    """

    def convert(self, text: str) -> ConversionResult:
        document = MarkdownDocument()
        chain = build_chain(document)

        kinds: List[BlockKind] = []
        for line in text.split("\n"):
            kinds.append(chain.handle(LineRecord(current_line=line)))

        logger.debug("Converted %d line(s), %d character(s)", len(kinds), len(text))
        return ConversionResult(html=document.get(), kinds=tuple(kinds))

    def to_html(self, text: str) -> str:
        return self.convert(text).html


_default_converter = MarkdownConverter()


def to_html(text: str) -> str:
    """Convert ``text`` to HTML using the shared converter."""

    return _default_converter.to_html(text)
