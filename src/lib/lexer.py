"""
Custom Pygments lexer for highlightfile directive tags

Highlights {% highlight_file ... %}, {% highlight_git ... %} and
{% highlight_gist ... %} tags when a page shows directive examples.

Token types:
- Comment.Preproc: Tag delimiters ({%, %}, {%-, -%})
- Name.Tag: Directive names (highlight_file, highlight_git, highlight_gist)
- Name.Builtin: Recognized options (gist_script, git_host_footer, pull, repos_dir)
- Name.Attribute: Other option keys
- String.Double: Quoted arguments and values
- String: Unquoted arguments and values
- Other: Text outside of tags
"""

from pygments.lexer import RegexLexer, bygroups, default
from pygments.token import (
    Text,
    Comment,
    Name,
    Operator,
    String,
    Other,
    Error,
)


_QUOTED = r'"(?:[^\\"]|\\.)*"'


class HighlightFileLexer(RegexLexer):
    """
    Lexer for pages containing highlightfile directive tags

    Example:
        {% highlight_git c https://github.com/acme/widget.git main.c pull %}

    Tokens:
        {% → Comment.Preproc
        highlight_git → Name.Tag
        c, https://..., main.c → String
        pull → Name.Builtin
        %} → Comment.Preproc
    """

    name = 'HighlightFile'
    aliases = ['highlightfile', 'liquid-hf']
    filenames = []

    tokens = {
        'root': [
            # Directive tags
            (r'(\{%-?)(\s*)(highlight_(?:file|git|gist))\b',
             bygroups(Comment.Preproc, Text, Name.Tag), 'arguments'),

            # Any other Liquid tag or output is passed through
            (r'\{%-?.*?-?%\}', Comment.Preproc),
            (r'\{\{.*?\}\}', Comment.Preproc),

            # Everything else is text
            (r'[^{]+', Other),
            (r'\{', Other),
        ],

        'arguments': [
            (r'-?%\}', Comment.Preproc, '#pop'),
            (r'\s+', Text),

            # Recognized options
            (r'(gist_script|git_host_footer|pull|repos_dir)(=)',
             bygroups(Name.Builtin, Operator), 'value'),
            (r'(gist_script|git_host_footer|pull|repos_dir)(?=[\s%-])', Name.Builtin),

            # Pass-through options
            (r'([^="\s%]+)(=)', bygroups(Name.Attribute, Operator), 'value'),

            # Positional arguments
            (_QUOTED, String.Double),
            (r'[^"\s%]+', String),
            (r'%', String),
            (r'"', Error),
        ],

        'value': [
            (_QUOTED, String.Double, '#pop'),
            (r'[^"\s%]+', String, '#pop'),
            default('#pop'),
        ],
    }


def get_lexer() -> HighlightFileLexer:
    """
    Get the HighlightFileLexer instance

    Returns:
        HighlightFileLexer instance ready for use with Pygments
    """
    return HighlightFileLexer()
