"""Service layer exports."""

from .html_conversion import (
    HtmlConversionOutcome,
    InputTooLargeError,
    MarkdownInputError,
    PreviewSettings,
    convert_markdown_to_html,
    decode_markdown_bytes,
    list_block_rules,
    load_settings,
    render_preview,
)

__all__ = [
    "HtmlConversionOutcome",
    "InputTooLargeError",
    "MarkdownInputError",
    "PreviewSettings",
    "convert_markdown_to_html",
    "decode_markdown_bytes",
    "list_block_rules",
    "load_settings",
    "render_preview",
]
