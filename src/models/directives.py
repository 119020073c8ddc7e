"""
Directive specification and invocation models

Defines the three highlightfile directive kinds, the fixed-arity grammar of
each (DirectiveSpec), and the immutable result of parsing one invocation
(DirectiveInvocation).
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .options import ResolvedOptions


class DirectiveKind(Enum):
    """
    Where a directive takes its source file from
    """
    FILE = "file"    # highlight_file - local filesystem
    GIT = "git"      # highlight_git - cloned git repository or local checkout
    GIST = "gist"    # highlight_gist - GitHub Gist (cloned through git)


# Positional field names, in grammar order
FIELD_LANGUAGE = "language"
FIELD_REPO = "repo"
FIELD_GIST_USER = "gist_user"
FIELD_GIST_ID = "gist_id"
FIELD_FILE = "file"


@dataclass
class DirectiveSpec:
    """
    Specification for a highlightfile directive

    Defines the positional grammar of a directive and how it is described
    to users. Used by DirectiveRegistry to look up directives by tag name.

    Attributes:
        name: Tag name as written in templates (e.g., "highlight_git")
        kind: Source kind
        fields: Positional field names, in order, before the options suffix
        placeholders: Usage placeholders matching fields (e.g., "<lang>")
        description: Human-readable description
        examples: Example argument strings
    """
    name: str
    kind: DirectiveKind
    fields: Tuple[str, ...]
    placeholders: Tuple[str, ...]
    description: str
    examples: List[str] = field(default_factory=list)

    @property
    def usage(self) -> str:
        """Usage line shown when an invocation does not match the grammar"""
        return f"Usage: {self.name} {' '.join(self.placeholders)} [option[=val]]*"

    def help_format(self) -> str:
        """Usage, description and example tags for command line help"""
        lines = [self.usage, f"  {self.description}"]
        lines.extend(f"    {{% {self.name} {example} %}}" for example in self.examples)
        return '\n'.join(lines)


@dataclass(frozen=True)
class DirectiveInvocation:
    """
    One parsed directive

    Produced by DirectiveParser.parse(). Immutable once built.

    Attributes:
        kind: Source kind
        name: Tag name the invocation was parsed under
        language: Highlighter language (unquoted, non-empty)
        filename: File to embed (unquoted, non-empty)
        repo_ref: Repository URL or local path; the synthesized git URL for gists
        gist_user: Gist owner (GIST only)
        gist_id: Gist identifier (GIST only)
        options_text: Raw options suffix as captured by the grammar
        options: Options resolved from options_text

    Example:
        highlight_git 'c https://github.com/acme/widget.git src/main.c linenos'
        -> DirectiveInvocation(kind=GIT, language='c',
                               repo_ref='https://github.com/acme/widget.git',
                               filename='src/main.c', options_text=' linenos', ...)
    """
    kind: DirectiveKind
    name: str
    language: str
    filename: str
    repo_ref: Optional[str] = None
    gist_user: Optional[str] = None
    gist_id: Optional[str] = None
    options_text: str = ""
    options: ResolvedOptions = field(default_factory=ResolvedOptions)


def git_url_for_gist(gist_id: str) -> str:
    """Git clone URL of a gist"""
    return f"git://gist.github.com/{gist_id}.git"
