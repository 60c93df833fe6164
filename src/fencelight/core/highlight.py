"""Pygments-backed highlighting: an explicit grammar registry and the adapter over it"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound


logger = logging.getLogger(__name__)


# Highlighter's built-in set plus the grammars the filter has always registered explicitly.
DEFAULT_LANGUAGES: list[str] = [
    'clike', 'css', 'html', 'javascript', 'js', 'markup', 'mathml', 'svg', 'xml',
    'markdown', 'bash', 'jsx', 'json', 'java',
]

# Language ids with no Pygments lexer of the same name.
DEFAULT_ALIASES: dict[str, str] = {
    'clike':  'c',
    'markup': 'html',
    'mathml': 'xml',
    'svg':    'xml',
}


@dataclass(frozen=True)
class GrammarRegistry:
    """Language id -> lexer, built once at startup and passed to the Highlighter."""
    lexers: dict[str, Lexer] = field(default_factory=dict)

    @classmethod
    def from_names(cls, languages: list[str], aliases: Optional[dict[str, str]] = None) -> "GrammarRegistry":
        """Register each language id, resolving it through aliases to a Pygments lexer name.

        Raises ValueError for an id that maps to no Pygments lexer.
        """
        aliases = aliases or {}
        lexers = {}
        for lang in languages:
            name = aliases.get(lang, lang)
            try:
                lexers[lang] = get_lexer_by_name(name, stripnl=False, ensurenl=False)
            except ClassNotFound as e:
                raise ValueError(f"No Pygments lexer for language '{lang}' (looked up as '{name}')") from e
        logger.debug("Registered %d grammar(s): %s", len(lexers), ", ".join(sorted(lexers)))
        return cls(lexers=lexers)

    def __contains__(self, lang: str) -> bool:
        return lang in self.lexers

    def get(self, lang: str) -> Optional[Lexer]:
        return self.lexers.get(lang)

    @property
    def languages(self) -> list[str]:
        return sorted(self.lexers)


class Highlighter:
    """Translate (language id, code) into highlighted HTML spans, or None when unsupported."""

    def __init__(self, registry: GrammarRegistry):
        self.registry = registry
        self.formatter = HtmlFormatter(nowrap=True)

    def highlight(self, lang: str, text: str) -> Optional[str]:
        lexer = self.registry.get(lang)
        if lexer is None:
            return None
        markup = pygments_highlight(text, lexer, self.formatter)
        # HtmlFormatter terminates the last line even when the code has no trailing newline.
        if not text.endswith("\n") and markup.endswith("\n"):
            markup = markup[:-1]
        return markup
