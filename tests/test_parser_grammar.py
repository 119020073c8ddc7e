"""
Grammar matcher tests - the three directive grammars and their failures
"""

import pytest

from highlightfile.lib.parser import DirectiveParser, directive_parse, directives_describe, usage_lines
from highlightfile.lib.directives import DirectiveRegistry
from highlightfile.lib.errors import MalformedDirective, UnknownDirectiveName
from highlightfile.lib.tokenizer import ArgumentScanner
from highlightfile.models.directives import DirectiveKind, DirectiveSpec
from highlightfile.models.options import DEFAULT_OPTIONS


class TestFileGrammar:
    """highlight_file <lang> <file> [option[=val]]*"""

    def test_language_and_file(self):
        invocation = directive_parse('highlight_file', 'c main.c')

        assert invocation.kind == DirectiveKind.FILE
        assert invocation.language == 'c'
        assert invocation.filename == 'main.c'
        assert invocation.repo_ref is None
        assert invocation.options.recognized() == DEFAULT_OPTIONS
        assert invocation.options.passthrough == ()

    @pytest.mark.parametrize("lang,name", [
        ('python', 'setup.py'),
        ('c', 'src/dir/file.c'),
        ('text', 'a=b.txt'),
        ('ruby', 'Gemfile'),
    ])
    def test_plain_fields_extracted(self, lang, name):
        invocation = directive_parse('highlight_file', f'{lang} {name}')
        assert (invocation.language, invocation.filename) == (lang, name)
        assert invocation.options.recognized() == DEFAULT_OPTIONS

    def test_quoted_fields_unquoted(self):
        invocation = directive_parse('highlight_file', r'"objective-c" "dir/my \"file\".m"')
        assert invocation.language == 'objective-c'
        assert invocation.filename == 'dir/my "file".m'

    def test_surrounding_whitespace(self):
        invocation = directive_parse('highlight_file', '  \n c\t main.c  \n')
        assert invocation.filename == 'main.c'
        assert invocation.options_text == ''

    def test_options_text_captured(self):
        invocation = directive_parse('highlight_file', 'c main.c  linenos pull=yes  ')
        assert invocation.options_text == '  linenos pull=yes'
        assert invocation.options.pull == 'yes'
        assert invocation.options.passthrough_pairs() == [('linenos', None)]

    def test_extra_positional_tokens_become_options(self):
        """Trailing tokens are options, and unquoted values may contain '='"""
        invocation = directive_parse('highlight_file', 'c myfile extra1 extra2=bad=val')

        assert invocation.filename == 'myfile'
        assert invocation.options.passthrough_pairs() == [
            ('extra1', None),
            ('extra2', 'bad=val'),
        ]


class TestGitGrammar:
    """highlight_git <lang> <repo> <file> [option[=val]]*"""

    def test_fields(self):
        invocation = directive_parse(
            'highlight_git', 'c https://github.com/acme/widget.git src/main.c pull'
        )
        assert invocation.kind == DirectiveKind.GIT
        assert invocation.repo_ref == 'https://github.com/acme/widget.git'
        assert invocation.filename == 'src/main.c'
        assert invocation.options.pull == 'true'
        assert invocation.gist_id is None

    def test_local_path_repo(self):
        invocation = directive_parse('highlight_git', 'sh "/srv/my repos/tools" bin/run.sh')
        assert invocation.repo_ref == '/srv/my repos/tools'

    def test_missing_file(self):
        with pytest.raises(MalformedDirective):
            directive_parse('highlight_git', 'c https://github.com/acme/widget.git')


class TestGistGrammar:
    """highlight_gist <lang> <gist user> <gist id> <file> [option[=val]]*"""

    def test_fields_and_synthesized_url(self):
        invocation = directive_parse('highlight_gist', 'ruby octocat 1234567 hello.rb')

        assert invocation.kind == DirectiveKind.GIST
        assert invocation.gist_user == 'octocat'
        assert invocation.gist_id == '1234567'
        assert invocation.filename == 'hello.rb'
        assert invocation.repo_ref == 'git://gist.github.com/1234567.git'

    def test_three_fields_is_malformed(self):
        with pytest.raises(MalformedDirective):
            directive_parse('highlight_gist', 'ruby 1234567 hello.rb')


class TestMalformed:
    """Inputs that do not match the anchored grammar"""

    @pytest.mark.parametrize("text", [
        '',
        '   ',
        'c',
        'c "unterminated',
        'c main.c"x"',
        'c "a"b',
        'c main.c key=',
        'c main.c key="open',
        'c main.c key=a"b"',
        'c main.c "quoted-key"=1',
        'c main.c =value',
        'c "" ',
        '"" main.c',
    ])
    def test_rejected(self, text):
        with pytest.raises(MalformedDirective):
            directive_parse('highlight_file', text)

    def test_error_carries_text_and_usage(self):
        with pytest.raises(MalformedDirective) as excinfo:
            directive_parse('highlight_file', 'c "oops')

        error = excinfo.value
        assert error.text == 'c "oops'
        assert error.name == 'highlight_file'
        assert error.usage == 'Usage: highlight_file <lang> <file> [option[=val]]*'
        assert "Unrecognized argument 'c \"oops'" in str(error)
        assert error.usage in str(error)

    def test_malformed_is_a_syntax_error(self):
        with pytest.raises(SyntaxError):
            directive_parse('highlight_file', 'c')

    def test_empty_quoted_option_value_keeps_default(self):
        invocation = directive_parse('highlight_file', 'c main.c repos_dir=""')
        assert invocation.options.repos_dir == '_highlight_repos'


class TestRegistry:
    """Directive lookup"""

    def test_unknown_name(self):
        with pytest.raises(UnknownDirectiveName) as excinfo:
            DirectiveParser('highlight_svn', 'c main.c')
        assert excinfo.value.name == 'highlight_svn'

    def test_unknown_name_is_lookup_error(self):
        with pytest.raises(LookupError):
            directive_parse('nope', 'c main.c')

    def test_builtin_names(self):
        assert DirectiveRegistry().names() == ['highlight_file', 'highlight_git', 'highlight_gist']

    def test_usage_lines(self):
        assert usage_lines() == [
            'Usage: highlight_file <lang> <file> [option[=val]]*',
            'Usage: highlight_git <lang> <repo> <file> [option[=val]]*',
            'Usage: highlight_gist <lang> <gist user> <gist id> <file> [option[=val]]*',
        ]

    def test_custom_alias(self):
        registry = DirectiveRegistry()
        builtin = registry.spec_require('highlight_file')
        registry.register(DirectiveSpec(
            name='code',
            kind=builtin.kind,
            fields=builtin.fields,
            placeholders=builtin.placeholders,
            description='Short alias',
        ))

        invocation = directive_parse('code', 'c main.c', registry=registry)
        assert invocation.name == 'code'
        assert invocation.kind == DirectiveKind.FILE
        assert registry.directives_listByKind(DirectiveKind.FILE)[-1].name == 'code'

    def test_help_format(self):
        spec = DirectiveRegistry().spec_require('highlight_gist')
        assert spec.help_format().splitlines() == [
            'Usage: highlight_gist <lang> <gist user> <gist id> <file> [option[=val]]*',
            '  Highlight a file from a GitHub Gist',
            '    {% highlight_gist ruby octocat 1234567 hello.rb %}',
            '    {% highlight_gist sh octocat 1234567 install.sh gist_script=true %}',
        ]

    def test_directives_describe(self):
        text = directives_describe()
        assert text.split('\n\n')[0].startswith('Usage: highlight_file <lang> <file>')
        assert text.count('Usage: ') == 3

    def test_help_examples_parse(self):
        """Every documented example is a valid invocation"""
        registry = DirectiveRegistry()
        for name in registry.names():
            for example in registry.spec_require(name).examples:
                assert directive_parse(name, example).name == name


class TestFieldTokens:
    """Positional fields are read as tokens"""

    def test_tokens_carry_offsets(self):
        parser = DirectiveParser('highlight_git', ' c "my repo" src/main.c linenos')
        scanner = ArgumentScanner(parser.text)
        scanner.whitespace_skip()

        fields = parser.fields_match(scanner)

        assert [token.position for token in fields.values()] == [1, 3, 13]
        assert fields['repo'].quoted
        assert fields['repo'].value == 'my repo'
        assert fields['file'].raw == 'src/main.c'
