"""
Pygments-backed syntax highlighter

Implements HighlighterProtocol: takes a language name, the pass-through
option string of a directive and the file content, and returns highlighted
HTML. Option syntax is the directive option syntax (key or key=value,
values optionally quoted).

Supported options:
    linenos           line numbers inline (same as linenos=inline)
    linenos=table     line numbers in a separate table column
    hl_lines="1 3"    highlight the listed lines
    linenostart=N     first line number
    lineanchors=ID    wrap each line in an anchor with id ID-N
    cssclass=NAME     CSS class of the wrapping div
    startinline       lexer option (PHP without <?php)
"""

from typing import Any, Dict, Optional, Tuple

from pygments import highlight
from pygments.lexers import get_lexer_by_name, TextLexer
from pygments.lexer import Lexer
from pygments.formatters import HtmlFormatter
from pygments.util import ClassNotFound

from .lexer import HighlightFileLexer
from .log import LOG
from .options import option_true
from .tokenizer import options_scan, unquote
from ..config import appsettings


LEXER_OPTIONS = ('startinline',)


class PygmentsHighlighter:
    """
    HighlighterProtocol implementation using Pygments HtmlFormatter

    Attributes:
        style: Pygments style name
        noclasses: Emit inline styles instead of CSS classes
    """

    def __init__(self, style: Optional[str] = None, noclasses: Optional[bool] = None) -> None:
        self.style = style or appsettings.pygments_style
        self.noclasses = appsettings.pygments_noclasses if noclasses is None else noclasses

    def options_parse(self, options: str) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """
        Split an option string into formatter and lexer keyword arguments

        Unsupported or invalid options are logged and dropped.

        Returns:
            (formatter_kwargs, lexer_kwargs)
        """
        formatter_kwargs: Dict[str, Any] = {}
        lexer_kwargs: Dict[str, Any] = {}

        for option in options_scan(options):
            key = option.key
            value = unquote(option.raw_value) if option.raw_value is not None else None

            if key == 'linenos':
                formatter_kwargs['linenos'] = 'table' if value == 'table' else 'inline'
            elif key == 'hl_lines':
                try:
                    formatter_kwargs['hl_lines'] = [int(n) for n in (value or '').split()]
                except ValueError:
                    LOG(f"Ignoring invalid hl_lines value '{value}'", level=1)
            elif key == 'linenostart':
                try:
                    formatter_kwargs['linenostart'] = int(value or '')
                except ValueError:
                    LOG(f"Ignoring invalid linenostart value '{value}'", level=1)
            elif key in ('lineanchors', 'cssclass'):
                if value:
                    formatter_kwargs[key] = value
            elif key in LEXER_OPTIONS:
                lexer_kwargs[key] = value is None or option_true(value)
            else:
                LOG(f"Ignoring unsupported highlighter option '{key}'", level=2)

        return formatter_kwargs, lexer_kwargs

    def lexer_get(self, language: str, **lexer_kwargs: Any) -> Lexer:
        """Lexer for a language name, falling back to plain text"""
        if language.lower() in HighlightFileLexer.aliases:
            return HighlightFileLexer(**lexer_kwargs)
        try:
            return get_lexer_by_name(language, **lexer_kwargs)
        except ClassNotFound:
            LOG(f"No lexer for language '{language}', using plain text", level=1)
            return TextLexer(**lexer_kwargs)

    def highlight(self, language: str, options: str, code: str) -> str:
        """
        Highlight code as HTML

        Args:
            language: Pygments lexer alias (e.g., "python", "c")
            options: Pass-through option string (e.g., 'linenos hl_lines="2 3"')
            code: Source text

        Returns:
            HTML fragment produced by HtmlFormatter
        """
        formatter_kwargs, lexer_kwargs = self.options_parse(options)
        lexer = self.lexer_get(language, **lexer_kwargs)
        formatter = HtmlFormatter(style=self.style, noclasses=self.noclasses, **formatter_kwargs)
        return highlight(code, lexer, formatter)
