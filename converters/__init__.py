"""Markdown → HTML conversion engine."""

from .base import BlockKind, ConversionResult, LineRecord, MarkdownDocument
from .chain import RULES, BlockMatcherChain, MatchRule, build_chain
from .inline import apply_emphasis
from .markdown import MarkdownConverter, to_html
from .registry import TagRegistry, get_tag_registry

__all__ = [
    "RULES",
    "BlockKind",
    "BlockMatcherChain",
    "ConversionResult",
    "LineRecord",
    "MarkdownConverter",
    "MarkdownDocument",
    "MatchRule",
    "TagRegistry",
    "apply_emphasis",
    "build_chain",
    "get_tag_registry",
    "to_html",
]
