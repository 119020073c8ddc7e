"""
Parser-specific data models

Type-safe structures for tokenizer and grammar matcher return values.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Token:
    """
    A single positional argument token

    Built by ArgumentScanner.token_read(); the grammar matcher reads one per
    positional field.

    Attributes:
        raw: Token text exactly as written (quotes and escapes included)
        value: Token text with quotes removed and escapes resolved
        position: Character offset of the token in the scanned text

    Example:
        For text 'c "my file.c"' the second token is:
        Token(raw='"my file.c"', value='my file.c', position=2)
    """
    raw: str
    value: str
    position: int

    @property
    def quoted(self) -> bool:
        """True when the token is a double-quoted string"""
        return len(self.raw) > 1 and self.raw.startswith('"') and self.raw.endswith('"')


@dataclass(frozen=True)
class OptionToken:
    """
    One key[=value] item from a directive's options suffix

    Attributes:
        key: Option name, verbatim (never quoted, never contains '=')
        raw_value: Value text as written, or None for a bare key

    Example:
        'hl_lines="1 2"' -> OptionToken(key='hl_lines', raw_value='"1 2"')
        'linenos'        -> OptionToken(key='linenos', raw_value=None)
    """
    key: str
    raw_value: Optional[str] = None

    def serialize(self) -> str:
        """Render back to 'key' or 'key=raw_value'"""
        if self.raw_value is None:
            return self.key
        return f"{self.key}={self.raw_value}"
