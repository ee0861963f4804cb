"""Conversion module for markdown to HTML."""

from .md_to_html import (
    MarkdownRenderer,
    MarkdownToHTMLConverter,
    get_renderer,
    parse_markdown,
)

__all__ = [
    "MarkdownRenderer",
    "MarkdownToHTMLConverter",
    "get_renderer",
    "parse_markdown",
]
