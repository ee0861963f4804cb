"""
Markdown to HTML conversion.

Wraps a configured markdown-it engine: raw HTML passthrough, linkify,
typographer, and TeX math typeset to MathML.
"""

import html
from functools import lru_cache
from typing import Optional

from markdown_it import MarkdownIt

from mathdown.config.options import RendererOptions
from mathdown.converters.math_plugin import delimiters_summary, math_plugin
from mathdown.utils.logger import setup_logger


logger = setup_logger(__name__)


DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
{description_meta}</head>
<body>
<article>
{body}</article>
</body>
</html>
"""


class MarkdownToHTMLConverter:
    """Render Markdown text to HTML with math support."""

    def __init__(self, options: Optional[RendererOptions] = None):
        """
        Build the engine once; it is never reconfigured afterwards.

        Args:
            options: Renderer options (defaults to ``RendererOptions()``)
        """
        self.options = options or RendererOptions()
        self._md = MarkdownIt("default", self.options.engine_options()).use(
            math_plugin, self.options.math
        )

        math = self.options.math
        logger.debug(
            f"Markdown renderer ready (html={self.options.html}, "
            f"linkify={self.options.linkify}, typographer={self.options.typographer}; "
            f"inline math: {delimiters_summary(math.inline_math)}; "
            f"display math: {delimiters_summary(math.display_math)}; "
            f"skip tags: {', '.join(math.skip_html_tags)})"
        )

    def render(self, text: Optional[str]) -> str:
        """
        Convert Markdown to an HTML fragment.

        Empty or missing input returns ``""`` without touching the engine.
        Engine and math errors are not caught.
        """
        if not text:
            return ""
        return self._md.render(text)

    def render_document(
        self,
        text: Optional[str],
        title: str = "",
        description: str = "",
    ) -> str:
        """
        Convert Markdown to a standalone HTML page.

        Args:
            text: Markdown source
            title: Page title (escaped)
            description: Optional meta description (escaped)

        Returns:
            Complete HTML document
        """
        description_meta = ""
        if description:
            description_meta = (
                f'<meta name="description" content="{html.escape(description)}">\n'
            )
        return DOCUMENT_TEMPLATE.format(
            title=html.escape(title),
            description_meta=description_meta,
            body=self.render(text),
        )


# Name used throughout the package
MarkdownRenderer = MarkdownToHTMLConverter


@lru_cache(maxsize=1)
def get_renderer() -> MarkdownRenderer:
    """Process-wide renderer built with the default options."""
    return MarkdownRenderer()


def parse_markdown(content: Optional[str]) -> str:
    """Render ``content`` with the shared default renderer; ``""`` if falsy."""
    if not content:
        return ""
    return get_renderer().render(content)
