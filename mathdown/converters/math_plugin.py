"""
Math extension for markdown-it.

Dollar delimiters are parsed by ``mdit_py_plugins.dollarmath``; any other
delimiter pair (``\\(...\\)``, ``\\[...\\]``) gets a literal-delimiter rule
that emits the same token types. Every math token is typeset to MathML
with latex2mathml.
"""

import re
from typing import Callable, Optional, Sequence

import latex2mathml.converter
from markdown_it import MarkdownIt
from markdown_it.rules_block import StateBlock
from markdown_it.rules_core import StateCore
from markdown_it.rules_inline import StateInline
from mdit_py_plugins.dollarmath import dollarmath_plugin

from mathdown.config.options import Delimiter, MathOptions


MATH_TOKEN_TYPES = ("math_inline", "math_inline_double", "math_block")

DOLLAR_DELIMITERS = {("$", "$"), ("$$", "$$")}

# Block constructs a display-math block may interrupt
BLOCK_ALT = ["paragraph", "reference", "blockquote", "list", "footnote_def"]


def tex_to_mathml(tex: str, display: bool = False) -> str:
    """Typeset a TeX string as a MathML ``<math>`` element."""
    return latex2mathml.converter.convert(
        tex.strip(), display="block" if display else "inline"
    )


def math_plugin(
    md: MarkdownIt,
    options: Optional[MathOptions] = None,
    renderer: Callable[[str, bool], str] = tex_to_mathml,
) -> None:
    """
    Register math delimiters, skip tags and MathML rendering on ``md``.

    Args:
        md: Engine to extend
        options: Delimiters and skip tags (defaults to ``MathOptions()``)
        renderer: Callable turning (tex, display) into HTML
    """
    options = options or MathOptions()

    pairs = set(options.inline_math) | set(options.display_math)
    if pairs & DOLLAR_DELIMITERS:
        dollarmath_plugin(md, allow_labels=False, double_inline=True)

    for index, (opening, closing) in enumerate(options.inline_math):
        if (opening, closing) in DOLLAR_DELIMITERS:
            continue
        md.inline.ruler.before(
            "escape",
            f"math_inline_delim{index}",
            _inline_rule(opening, closing, "math_inline"),
        )

    for index, (opening, closing) in enumerate(options.display_math):
        if (opening, closing) in DOLLAR_DELIMITERS:
            continue
        md.block.ruler.before(
            "fence",
            f"math_block_delim{index}",
            _block_rule(opening, closing),
            {"alt": BLOCK_ALT},
        )
        md.inline.ruler.before(
            "escape",
            f"math_display_delim{index}",
            _inline_rule(opening, closing, "math_inline_double"),
        )

    if options.skip_html_tags:
        md.core.ruler.after("inline", "math_skip_tags", _skip_tags_rule(options.skip_html_tags))

    def render_math_inline(self, tokens, idx, options, env) -> str:
        return f'<span class="math inline">{renderer(tokens[idx].content.strip(), False)}</span>'

    def render_math_inline_double(self, tokens, idx, options, env) -> str:
        return f'<div class="math inline">{renderer(tokens[idx].content.strip(), True)}</div>'

    def render_math_block(self, tokens, idx, options, env) -> str:
        return f'<div class="math block">\n{renderer(tokens[idx].content.strip(), True)}\n</div>\n'

    md.add_render_rule("math_inline", render_math_inline)
    md.add_render_rule("math_inline_double", render_math_inline_double)
    md.add_render_rule("math_block", render_math_block)


def _inline_rule(opening: str, closing: str, token_type: str):
    def _rule(state: StateInline, silent: bool) -> bool:
        if not state.src.startswith(opening, state.pos):
            return False

        start = state.pos + len(opening)
        end = state.src.find(closing, start)
        if end == -1 or end == start or end + len(closing) > state.posMax:
            return False

        if not silent:
            token = state.push(token_type, "math", 0)
            token.content = state.src[start:end]
            token.markup = opening
            token.meta = {"close": closing}

        state.pos = end + len(closing)
        return True

    return _rule


def _block_rule(opening: str, closing: str):
    def _rule(state: StateBlock, startLine: int, endLine: int, silent: bool) -> bool:
        # indented code
        if state.sCount[startLine] - state.blkIndent >= 4:
            return False

        start = state.bMarks[startLine] + state.tShift[startLine]
        maximum = state.eMarks[startLine]
        if not state.src[start:maximum].startswith(opening):
            return False

        first = state.src[start + len(opening):maximum].rstrip()
        lines = []
        nextLine = startLine
        found = False

        if first.endswith(closing):
            lines.append(first[: -len(closing)])
            found = True
        else:
            lines.append(first)
            while not found:
                nextLine += 1
                if nextLine >= endLine:
                    break
                start = state.bMarks[nextLine] + state.tShift[nextLine]
                maximum = state.eMarks[nextLine]
                if start < maximum and state.sCount[nextLine] < state.blkIndent:
                    break
                line = state.src[start:maximum].rstrip()
                if line.endswith(closing):
                    line = line[: -len(closing)]
                    found = True
                lines.append(line)

        if not found:
            return False
        if silent:
            return True

        state.line = nextLine + 1
        token = state.push("math_block", "math", 0)
        token.block = True
        token.content = "\n".join(lines)
        token.markup = opening
        token.meta = {"close": closing}
        token.map = [startLine, state.line]
        return True

    return _rule


def _skip_tags_rule(tags: Sequence[str]):
    """Turn math found between raw ``<tag>`` and ``</tag>`` back into text."""
    names = "|".join(re.escape(tag) for tag in tags)
    open_re = re.compile(rf"^<({names})(?=[\s/>])", re.IGNORECASE)
    close_re = re.compile(rf"^</({names})\s*>", re.IGNORECASE)

    def _rule(state: StateCore) -> None:
        for block in state.tokens:
            if block.type != "inline" or not block.children:
                continue
            depth = 0
            for child in block.children:
                if child.type == "html_inline":
                    if close_re.match(child.content):
                        depth = max(depth - 1, 0)
                    elif open_re.match(child.content) and not child.content.rstrip().endswith("/>"):
                        depth += 1
                elif depth and child.type in MATH_TOKEN_TYPES:
                    child.content = _literal(child)
                    child.type = "text"
                    child.tag = ""
                    child.markup = ""

    return _rule


def _literal(token) -> str:
    opening = token.markup or ("$$" if token.type == "math_inline_double" else "$")
    closing = (token.meta or {}).get("close", opening)
    return f"{opening}{token.content}{closing}"


def delimiters_summary(pairs: Sequence[Delimiter]) -> str:
    """Human readable list of delimiter pairs, for logs."""
    return ", ".join(f"{opening}...{closing}" for opening, closing in pairs)
