"""
Pygments highlighter and directive lexer tests
"""

import pytest
from pygments.lexers import TextLexer
from pygments.token import Comment, Name, Operator, String

from highlightfile.lib.highlighter import PygmentsHighlighter
from highlightfile.lib.interfaces import HighlighterProtocol
from highlightfile.lib.lexer import HighlightFileLexer, get_lexer


@pytest.fixture
def pygments_highlighter():
    return PygmentsHighlighter(style='default', noclasses=False)


class TestOptionsParse:
    """Pass-through option string to formatter/lexer keyword arguments"""

    def test_empty(self, pygments_highlighter):
        assert pygments_highlighter.options_parse('') == ({}, {})

    def test_formatter_options(self, pygments_highlighter):
        formatter_kwargs, lexer_kwargs = pygments_highlighter.options_parse(
            'linenos hl_lines="1 3" linenostart=5 cssclass=code lineanchors=L'
        )
        assert formatter_kwargs == {
            'linenos': 'inline',
            'hl_lines': [1, 3],
            'linenostart': 5,
            'cssclass': 'code',
            'lineanchors': 'L',
        }
        assert lexer_kwargs == {}

    def test_linenos_table(self, pygments_highlighter):
        formatter_kwargs, _ = pygments_highlighter.options_parse('linenos=table')
        assert formatter_kwargs == {'linenos': 'table'}

    def test_invalid_values_dropped(self, pygments_highlighter):
        formatter_kwargs, _ = pygments_highlighter.options_parse('hl_lines="one" linenostart=x cssclass=""')
        assert formatter_kwargs == {}

    def test_unsupported_options_dropped(self, pygments_highlighter):
        assert pygments_highlighter.options_parse('frobnicate=1 mark') == ({}, {})

    def test_lexer_options(self, pygments_highlighter):
        assert pygments_highlighter.options_parse('startinline')[1] == {'startinline': True}
        assert pygments_highlighter.options_parse('startinline=no')[1] == {'startinline': False}


class TestHighlight:
    """HTML output through Pygments"""

    def test_implements_protocol(self, pygments_highlighter):
        assert isinstance(pygments_highlighter, HighlighterProtocol)

    def test_python(self, pygments_highlighter):
        html = pygments_highlighter.highlight('python', '', 'x = 1\n')
        assert html.startswith('<div class="highlight">')
        assert '<pre>' in html
        assert '<span class="mi">1</span>' in html

    def test_code_is_escaped(self, pygments_highlighter):
        html = pygments_highlighter.highlight('text', '', '<b>&</b>\n')
        assert '&lt;b&gt;&amp;&lt;/b&gt;' in html
        assert '<b>' not in html

    def test_line_numbers_table(self, pygments_highlighter):
        html = pygments_highlighter.highlight('c', 'linenos=table', 'int a;\nint b;\n')
        assert 'class="highlighttable"' in html

    def test_highlighted_lines(self, pygments_highlighter):
        html = pygments_highlighter.highlight('c', 'hl_lines="2"', 'int a;\nint b;\n')
        assert html.count('class="hll"') == 1

    def test_css_class(self, pygments_highlighter):
        html = pygments_highlighter.highlight('c', 'cssclass=code', 'int a;\n')
        assert html.startswith('<div class="code">')

    def test_inline_styles(self):
        html = PygmentsHighlighter(noclasses=True).highlight('python', '', 'x = 1\n')
        assert 'style="' in html

    def test_unknown_language_falls_back_to_text(self, pygments_highlighter):
        assert isinstance(pygments_highlighter.lexer_get('no-such-language'), TextLexer)
        html = pygments_highlighter.highlight('no-such-language', '', 'plain\n')
        assert 'plain' in html

    def test_directive_lexer_alias(self, pygments_highlighter):
        assert isinstance(pygments_highlighter.lexer_get('liquid-hf'), HighlightFileLexer)


class TestHighlightFileLexer:
    """Tokens of directive tags"""

    def tokens(self, text):
        return [(token, value) for token, value in get_lexer().get_tokens(text)]

    def test_tag_tokens(self):
        tokens = self.tokens('{% highlight_git c https://github.com/acme/widget.git main.c pull %}')
        assert tokens[0] == (Comment.Preproc, '{%')
        assert (Name.Tag, 'highlight_git') in tokens
        assert (String, 'https://github.com/acme/widget.git') in tokens
        assert (Name.Builtin, 'pull') in tokens
        assert (Comment.Preproc, '%}') in tokens

    def test_option_values(self):
        tokens = self.tokens('{% highlight_file c main.c hl_lines="1 2" repos_dir=cache %}')
        assert (Name.Attribute, 'hl_lines') in tokens
        assert (Operator, '=') in tokens
        assert (String.Double, '"1 2"') in tokens
        assert (Name.Builtin, 'repos_dir') in tokens
        assert (String, 'cache') in tokens

    def test_other_tags_untouched(self):
        tokens = self.tokens('{% if x %}')
        assert tokens[0] == (Comment.Preproc, '{% if x %}')
