"""
highlightfile - Embed highlighted source files in generated pages

Renders {% highlight_file %}, {% highlight_git %} and {% highlight_gist %}
directives to syntax-highlighted HTML with links back to the git host.
"""

__version__ = "1.0.0"

from .lib import (
    DirectiveParser,
    DirectiveRenderer,
    DirectiveRegistry,
    TemplateExpander,
    render,
    escape_xhtml,
    escape_xhtml_attr,
    LOG,
    state_connectToLogger,
)
from .lib.errors import (
    HighlightFileError,
    MalformedDirective,
    UnknownDirectiveName,
    RepositoryCloneFailed,
    RepositoryPullFailed,
    FileReadFailed,
)

__all__ = [
    "DirectiveParser",
    "DirectiveRenderer",
    "DirectiveRegistry",
    "TemplateExpander",
    "render",
    "escape_xhtml",
    "escape_xhtml_attr",
    "LOG",
    "state_connectToLogger",
    "HighlightFileError",
    "MalformedDirective",
    "UnknownDirectiveName",
    "RepositoryCloneFailed",
    "RepositoryPullFailed",
    "FileReadFailed",
    "__version__",
]
