r"""
Argument tokenizer for directive argument strings

Scans the raw text of a directive invocation into tokens. Three token forms
are recognized:

- unquoted words: a run of non-whitespace, non-'"' characters
- option keys: a run of non-whitespace, non-'"', non-'=' characters
- quoted strings: "..." where \x stands for x; the closing quote is the
  first unescaped '"'

The scanner never raises. A token that cannot be read (unterminated quote,
stray quote, empty key) is reported as None and the caller decides what that
means; the grammar matcher turns it into MalformedDirective.

Example:
    >>> scanner = ArgumentScanner('c "my file.c" linenos')
    >>> scanner.word_read()
    'c'
    >>> scanner.whitespace_skip()
    1
    >>> scanner.word_read()
    '"my file.c"'
    >>> unquote('"my file.c"')
    'my file.c'
"""

import re
from typing import Iterator, List, Optional

from ..models.parser import Token, OptionToken


WHITESPACE = " \t\r\n\f\v"

_UNESCAPE = re.compile(r'\\(.)')


def unquote(string: str) -> str:
    """
    Remove quotes from a quoted token and resolve its escapes

    Tokens that are not wrapped in double quotes (including tokens that only
    contain quotes somewhere inside) are returned unchanged.

    Example:
        >>> unquote('"a \\"b\\" c"')
        'a "b" c'
        >>> unquote('plain')
        'plain'
    """
    if len(string) > 1 and string.startswith('"') and string.endswith('"'):
        return _UNESCAPE.sub(r'\1', string[1:-1])
    return string


def quote(string: str) -> str:
    """Wrap a string in double quotes, escaping '"' and '\\'"""
    escaped = string.replace('\\', '\\\\').replace('"', '\\"')
    return f'"{escaped}"'


class ArgumentScanner:
    """
    Cursor over a directive argument string

    Each *_read method either consumes a complete token and returns its raw
    text, or leaves the position unchanged and returns None.

    Attributes:
        text: Text being scanned
        position: Current character offset
    """

    def __init__(self, text: str):
        self.text = text
        self.position = 0

    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def peek(self) -> str:
        """Current character, or '' at end of text"""
        if self.at_end():
            return ''
        return self.text[self.position]

    def whitespace_skip(self) -> int:
        """Skip whitespace, returning the number of characters skipped"""
        start = self.position
        while not self.at_end() and self.text[self.position] in WHITESPACE:
            self.position += 1
        return self.position - start

    def quoted_read(self) -> Optional[str]:
        """
        Read a double-quoted string starting at the current position

        Returns:
            Raw quoted text including both quotes, or None if there is no
            opening quote here or the string is not terminated
        """
        if self.peek() != '"':
            return None

        pos = self.position + 1
        while pos < len(self.text):
            char = self.text[pos]
            if char == '"':
                raw = self.text[self.position:pos + 1]
                self.position = pos + 1
                return raw
            if char == '\\':
                # An escape covers any single character except a newline
                if pos + 1 >= len(self.text) or self.text[pos + 1] == '\n':
                    return None
                pos += 2
            else:
                pos += 1

        return None

    def run_read(self, stops: str = '') -> Optional[str]:
        """Read an unquoted run, stopping at whitespace, '"' or any of stops"""
        start = self.position
        pos = start
        while pos < len(self.text):
            char = self.text[pos]
            if char in WHITESPACE or char == '"' or char in stops:
                break
            pos += 1

        if pos == start:
            return None

        self.position = pos
        return self.text[start:pos]

    def word_read(self) -> Optional[str]:
        """Read a positional token or option value (quoted or unquoted)"""
        if self.peek() == '"':
            return self.quoted_read()
        return self.run_read()

    def token_read(self) -> Optional[Token]:
        """Read a positional token, keeping its offset and unquoted value"""
        start = self.position
        raw = self.word_read()
        if raw is None:
            return None
        return Token(raw=raw, value=unquote(raw), position=start)

    def option_read(self) -> Optional[OptionToken]:
        """
        Read one key[=value] option

        A key is mandatory. When '=' follows the key but no valid value
        follows the '=', only the key is consumed and the position is left
        on the '=' so the caller sees a stray character.

        Returns:
            OptionToken, or None when no key can be read here
        """
        key = self.run_read(stops='=')
        if key is None:
            return None

        if self.peek() == '=':
            mark = self.position
            self.position += 1
            value = self.word_read()
            if value is None:
                self.position = mark
                return OptionToken(key=key)
            return OptionToken(key=key, raw_value=value)

        return OptionToken(key=key)


def options_scan(text: str) -> Iterator[OptionToken]:
    """
    Yield every key[=value] option found in text, in order

    Characters that cannot start an option are skipped one at a time, so
    garbage between options is ignored rather than reported. Use the grammar
    matcher to validate an options suffix.
    """
    scanner = ArgumentScanner(text)
    while True:
        scanner.whitespace_skip()
        if scanner.at_end():
            return
        option = scanner.option_read()
        if option is None:
            scanner.position += 1
            continue
        yield option


def tokenize(text: str) -> Optional[List[Token]]:
    """
    Split text into whitespace-separated quoted/unquoted tokens

    Returns:
        List of Tokens (empty for blank text), or None if the text contains
        an unterminated quote or a token that runs into a quote

    Example:
        >>> [t.value for t in tokenize('python "a b.py" x')]
        ['python', 'a b.py', 'x']
    """
    scanner = ArgumentScanner(text)
    tokens: List[Token] = []

    scanner.whitespace_skip()
    while not scanner.at_end():
        token = scanner.token_read()
        if token is None:
            return None
        tokens.append(token)
        if not scanner.whitespace_skip() and not scanner.at_end():
            return None

    return tokens
