"""
mathdown

Markdown to HTML rendering with TeX math:
- Raw HTML passthrough, autolinked URLs and typographic quotes
- Inline math with $...$ and \\(...\\), display math with $$...$$ and \\[...\\]
- Math typeset to MathML, skipped inside code, pre, script and similar tags
"""

__version__ = "0.1.0"

from mathdown.converters import MarkdownRenderer, parse_markdown

__all__ = ["MarkdownRenderer", "parse_markdown", "__version__"]
