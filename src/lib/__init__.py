"""
highlightfile - Embed highlighted source files in generated pages

Directive parsing, option resolution and rendering.
"""

__version__ = "1.0.0"

from .parser import DirectiveParser, directive_parse
from .renderer import DirectiveRenderer, render
from .directives import DirectiveRegistry
from .template import TemplateExpander, page_expand
from .escape import escape_xhtml, escape_xhtml_attr
from .options import option_true, options_resolve
from .log import LOG, state_connectToLogger

__all__ = [
    "DirectiveParser",
    "directive_parse",
    "DirectiveRenderer",
    "render",
    "DirectiveRegistry",
    "TemplateExpander",
    "page_expand",
    "escape_xhtml",
    "escape_xhtml_attr",
    "option_true",
    "options_resolve",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
