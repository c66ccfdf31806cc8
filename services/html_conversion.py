"""Service layer orchestrating Markdown → HTML conversion."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from converters import (
    RULES,
    BlockKind,
    MarkdownConverter,
    get_tag_registry,
    to_html,
)
from converters.chain import FALLBACK_KIND

logger = logging.getLogger(__name__)

DEFAULT_EMPTY_PLACEHOLDER = "<p></p>"
DEFAULT_MAX_INPUT_BYTES = 1024 * 1024


class MarkdownInputError(ValueError):
    """Raised when input cannot be handed to the converter."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputTooLargeError(MarkdownInputError):
    """Raised when input exceeds the configured size limit."""


@dataclass(frozen=True)
class PreviewSettings:
    """Runtime configuration for preview rendering."""

    empty_placeholder: str = DEFAULT_EMPTY_PLACEHOLDER
    max_input_bytes: int = DEFAULT_MAX_INPUT_BYTES


@dataclass
class HtmlConversionOutcome:
    html: str
    line_count: int
    block_counts: Dict[str, int] = field(default_factory=dict)
    original_filename: Optional[str] = None

    def as_dict(self) -> Dict[str, object]:
        return {
            "html": self.html,
            "line_count": self.line_count,
            "block_counts": dict(self.block_counts),
            "filename": self.original_filename,
        }


def load_settings() -> PreviewSettings:
    """Build settings from ``MARKDOWN_PREVIEW_*`` environment variables."""

    placeholder = os.getenv("MARKDOWN_PREVIEW_EMPTY_PLACEHOLDER", DEFAULT_EMPTY_PLACEHOLDER)

    raw_limit = os.getenv("MARKDOWN_PREVIEW_MAX_INPUT_BYTES")
    max_input_bytes = DEFAULT_MAX_INPUT_BYTES
    if raw_limit:
        try:
            max_input_bytes = int(raw_limit)
        except ValueError:
            logger.warning(
                "Ignoring invalid MARKDOWN_PREVIEW_MAX_INPUT_BYTES=%r, using %d",
                raw_limit,
                DEFAULT_MAX_INPUT_BYTES,
            )

    return PreviewSettings(empty_placeholder=placeholder, max_input_bytes=max_input_bytes)


def render_preview(markdown: Optional[str], settings: Optional[PreviewSettings] = None) -> str:
    """Render editor content for display.

    Empty content is shown as the placeholder fragment and never reaches the
    converter.
    """

    if settings is None:
        settings = load_settings()

    if not markdown:
        return settings.empty_placeholder

    _check_input(markdown, settings)
    return to_html(markdown)


def decode_markdown_bytes(payload: bytes) -> str:
    """Decode an uploaded Markdown file as UTF-8."""

    try:
        return payload.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        logger.warning("Rejected upload that is not valid UTF-8: %s", exc)
        raise MarkdownInputError("Markdown input must be UTF-8 encoded text.") from exc


def convert_markdown_to_html(
    markdown: str,
    *,
    original_filename: Optional[str] = None,
    settings: Optional[PreviewSettings] = None,
) -> HtmlConversionOutcome:
    """Convert markdown to HTML and collect per-kind block statistics."""

    if settings is None:
        settings = load_settings()

    _check_input(markdown, settings)

    result = MarkdownConverter().convert(markdown)

    logger.info(
        "Converted %s (%d line(s))",
        original_filename or "<inline markdown>",
        result.line_count,
    )

    return HtmlConversionOutcome(
        html=result.html,
        line_count=result.line_count,
        block_counts=result.block_counts(),
        original_filename=original_filename,
    )


def list_block_rules() -> List[Dict[str, object]]:
    """Return the block rules in the order they are tried."""

    registry = get_tag_registry()
    rules: List[Dict[str, object]] = [
        _describe_rule(priority, rule.kind, rule.prefix, registry.tag_name(rule.kind))
        for priority, rule in enumerate(RULES, start=1)
    ]
    rules.append(
        _describe_rule(
            len(RULES) + 1,
            FALLBACK_KIND,
            None,
            registry.tag_name(FALLBACK_KIND),
        )
    )
    return rules


def _describe_rule(priority: int, kind: BlockKind, prefix: Optional[str], tag: str) -> Dict[str, object]:
    return {
        "priority": priority,
        "kind": kind.value,
        "prefix": prefix,
        "tag": tag,
    }


def _check_input(markdown: object, settings: PreviewSettings) -> None:
    if not isinstance(markdown, str):
        raise MarkdownInputError(
            f"Markdown input must be a string, got {type(markdown).__name__}."
        )

    size = len(markdown.encode("utf-8"))
    if settings.max_input_bytes > 0 and size > settings.max_input_bytes:
        logger.warning(
            "Rejected markdown input of %d bytes (limit %d)",
            size,
            settings.max_input_bytes,
        )
        raise InputTooLargeError(
            f"Markdown input is {size} bytes, limit is {settings.max_input_bytes}."
        )
