"""CodeBlock -> highlighted RawBlock rewrite"""

import logging

from fencelight.core.ast import Attr, CodeBlock, Node, RawBlock
from fencelight.core.highlight import Highlighter
from fencelight.core.walk import DECLINE, FilterContext, Replace, TransformResult


logger = logging.getLogger(__name__)

TARGET_FORMAT = "html"


def render_wrapper(lang: str, markup: str) -> str:
    """Wrap already-highlighted markup; lang goes into the class attribute verbatim."""
    return f'<pre class="language-{lang}"><code>{markup}</code></pre>'


def declared_language(attr: Attr) -> str | None:
    """First class of a code block, or None when no language is declared."""
    return attr.classes[0] if attr.classes else None


class CodeBlockHighlighter:
    """Transformer replacing CodeBlocks in a registered language with raw HTML.

    Every other node, and CodeBlocks with no language or an unregistered one,
    are declined so the renderer applies its default escaping. The output is
    always an "html" RawBlock whatever `context.format` says.
    """

    def __init__(self, highlighter: Highlighter):
        self.highlighter = highlighter

    def __call__(self, node: Node, context: FilterContext) -> TransformResult:
        match node:
            case CodeBlock(c=(attr, text)):
                pass
            case _:
                return DECLINE

        lang = declared_language(attr)
        if lang is None:
            return DECLINE

        markup = self.highlighter.highlight(lang, text)
        if markup is None:
            logger.debug("No grammar registered for '%s'; leaving code block as-is", lang)
            return DECLINE

        logger.debug("Highlighted %d char(s) of '%s'", len(text), lang)
        return Replace(RawBlock(c=(TARGET_FORMAT, render_wrapper(lang, markup))))
