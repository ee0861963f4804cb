"""Tests for the math extension."""

import pytest
from markdown_it import MarkdownIt

from mathdown.config.options import MathOptions
from mathdown.converters.math_plugin import (
    delimiters_summary,
    math_plugin,
    tex_to_mathml,
)


def _fake_renderer(tex, display):
    return f"[{'D' if display else 'I'}:{tex}]"


def _engine(options=None, renderer=_fake_renderer):
    return MarkdownIt("default", {"html": True}).use(math_plugin, options, renderer=renderer)


def test_tex_to_mathml_inline():
    """Inline TeX becomes a MathML element."""
    mathml = tex_to_mathml("x^2")
    assert mathml.startswith("<math")
    assert 'display="inline"' in mathml
    assert "<msup>" in mathml


def test_tex_to_mathml_block():
    """Display TeX sets the block display attribute."""
    assert 'display="block"' in tex_to_mathml("x", display=True)


class TestTokens:
    """Token stream produced by the plugin."""

    def test_bracket_inline_token(self):
        tokens = _engine().parse(r"a \(x\) b")
        children = tokens[1].children
        math = [t for t in children if t.type == "math_inline"]
        assert len(math) == 1
        assert math[0].content == "x"
        assert math[0].markup == "\\("

    def test_bracket_block_token(self):
        tokens = _engine().parse("\\[\nx\ny\n\\]\n")
        block = [t for t in tokens if t.type == "math_block"]
        assert len(block) == 1
        assert block[0].content == "\nx\ny\n"
        assert block[0].map == [0, 4]

    def test_unclosed_bracket_is_text(self):
        html = _engine().render(r"a \(x b")
        assert "[I:" not in html

    def test_empty_bracket_is_not_math(self):
        html = _engine().render(r"a \(\) b")
        assert "[I:" not in html


class TestRendering:
    """Custom renderer and wrappers."""

    def test_renderer_receives_display_flags(self):
        html = _engine().render("$a$\n\n$$\nb\n$$\n")
        assert '<span class="math inline">[I:a]</span>' in html
        assert '<div class="math block">\n[D:b]\n</div>' in html

    def test_renderer_errors_propagate(self):
        def boom(tex, display):
            raise RuntimeError("bad tex")

        with pytest.raises(RuntimeError, match="bad tex"):
            _engine(renderer=boom).render("$x$")

    def test_skip_tag_restores_delimiters(self):
        html = _engine().render(r"<kbd>$a$</kbd> <code>\(b\)</code>")
        assert "[I:a]" in html
        assert r"<code>\(b\)</code>" in html


class TestOptions:
    """Delimiter configuration."""

    def test_dollars_only(self):
        options = MathOptions(inline_math=[("$", "$")], display_math=[("$$", "$$")])
        html = _engine(options).render(r"$a$ and \(b\)")
        assert "[I:a]" in html
        assert "[I:b]" not in html

    def test_brackets_only(self):
        options = MathOptions(inline_math=[("\\(", "\\)")], display_math=[("\\[", "\\]")])
        html = _engine(options).render(r"$a$ and \(b\)")
        assert "[I:a]" not in html
        assert "[I:b]" in html

    def test_empty_delimiter_rejected(self):
        with pytest.raises(ValueError):
            MathOptions(inline_math=[("", "$")])

    def test_summary(self):
        assert delimiters_summary([("$", "$"), ("\\(", "\\)")]) == "$...$, \\(...\\)"
