"""
Grammar matcher for directive argument strings

Matches the raw argument text of a directive against the fixed-arity grammar
registered for its tag name:

    highlight_file  <lang> <file> [option[=val]]*
    highlight_git   <lang> <repo> <file> [option[=val]]*
    highlight_gist  <lang> <gist user> <gist id> <file> [option[=val]]*

The match is anchored: after optional leading whitespace every positional
field must be present, each separated by whitespace, followed only by
key[=value] options and optional trailing whitespace. Anything else raises
MalformedDirective; there is no partial recovery.

Example:
    >>> invocation = DirectiveParser('highlight_file', 'c "my file.c" linenos').parse()
    >>> invocation.language, invocation.filename
    ('c', 'my file.c')
    >>> invocation.options.highlighter_options()
    'linenos'
"""

from typing import Dict, List, NoReturn, Optional

from ..models.directives import (
    DirectiveInvocation,
    DirectiveKind,
    DirectiveSpec,
    FIELD_LANGUAGE,
    FIELD_REPO,
    FIELD_GIST_USER,
    FIELD_GIST_ID,
    FIELD_FILE,
    git_url_for_gist,
)
from .directives import DirectiveRegistry
from .errors import MalformedDirective
from .options import options_resolve
from ..models.parser import Token
from .tokenizer import ArgumentScanner
from .log import LOG


class DirectiveParser:
    """
    Parser for one directive invocation

    Handles:
    - Positional fields (quoted or unquoted)
    - Options suffix validation
    - Gist git URL synthesis
    - Option resolution
    """

    def __init__(self, name: str, text: str, registry: Optional[DirectiveRegistry] = None):
        """
        Initialize parser with a tag name and its raw argument text

        Args:
            name: Directive tag name (e.g., "highlight_git")
            text: Raw argument text following the tag name
            registry: Optional DirectiveRegistry (built-in directives if omitted)

        Raises:
            UnknownDirectiveName: If name is not registered
        """
        self.name = name
        self.text = text
        if registry is None:
            registry = DirectiveRegistry()
        self.registry = registry
        self.spec: DirectiveSpec = registry.spec_require(name)

    def parse(self) -> DirectiveInvocation:
        """
        Match the argument text and build the invocation

        Returns:
            DirectiveInvocation with unquoted fields and resolved options

        Raises:
            MalformedDirective: If the text does not match the grammar
        """
        scanner = ArgumentScanner(self.text)
        scanner.whitespace_skip()

        fields = self.fields_match(scanner)
        options_text = self.options_match(scanner)

        values = {name: token.value for name, token in fields.items()}
        LOG(f"{self.name}: fields={values} options='{options_text.strip()}'", level=3)
        return self.invocation_build(values, options_text)

    def fields_match(self, scanner: ArgumentScanner) -> Dict[str, Token]:
        """
        Read the positional fields of the grammar

        Returns:
            Dict of field name to Token
        """
        fields: Dict[str, Token] = {}
        for index, field_name in enumerate(self.spec.fields):
            if index and not scanner.whitespace_skip():
                self.error()
            token = scanner.token_read()
            # A quoted "" is a token, but not a usable field
            if token is None or not token.value:
                self.error()
            fields[field_name] = token
        return fields

    def options_match(self, scanner: ArgumentScanner) -> str:
        """
        Validate the options suffix and return it as written

        The returned text starts right after the last positional field and
        ends after the last option, so it keeps the whitespace before each
        option but not the trailing whitespace.
        """
        start = scanner.position
        end = start

        while True:
            if not scanner.whitespace_skip() or scanner.at_end():
                break
            if scanner.option_read() is None:
                self.error()
            end = scanner.position

        if not scanner.at_end():
            self.error()

        return self.text[start:end]

    def invocation_build(self, fields: Dict[str, str], options_text: str) -> DirectiveInvocation:
        """Assemble the DirectiveInvocation for the matched fields"""
        kind = self.spec.kind
        repo_ref = fields.get(FIELD_REPO)
        gist_id = fields.get(FIELD_GIST_ID)
        if kind == DirectiveKind.GIST and gist_id is not None:
            repo_ref = git_url_for_gist(gist_id)

        return DirectiveInvocation(
            kind=kind,
            name=self.name,
            language=fields[FIELD_LANGUAGE],
            filename=fields[FIELD_FILE],
            repo_ref=repo_ref,
            gist_user=fields.get(FIELD_GIST_USER),
            gist_id=gist_id,
            options_text=options_text,
            options=options_resolve(options_text),
        )

    def error(self) -> NoReturn:
        """
        Report a grammar mismatch

        Raises:
            MalformedDirective: Always (this is an error reporting function)
        """
        raise MalformedDirective(self.name, self.text, self.spec.usage)


def directive_parse(name: str, text: str, registry: Optional[DirectiveRegistry] = None) -> DirectiveInvocation:
    """Parse one directive invocation (convenience wrapper around DirectiveParser)"""
    return DirectiveParser(name, text, registry=registry).parse()


def usage_lines(registry: Optional[DirectiveRegistry] = None) -> List[str]:
    """Usage lines for every registered directive"""
    registry = registry or DirectiveRegistry()
    return [registry.spec_require(name).usage for name in registry.names()]


def directives_describe(registry: Optional[DirectiveRegistry] = None) -> str:
    """Help text for every registered directive, blank-line separated"""
    registry = registry or DirectiveRegistry()
    return '\n\n'.join(registry.spec_require(name).help_format() for name in registry.names())
