"""
Escaping for text interpolated into HTML/XHTML output

Characters that are not allowed in XML documents are written as numeric
character references. Characters with restricted or discouraged usage are
left unchanged.
"""

import re


# Anything outside the XML 1.0 Char production
_INVALID_XML = r'[^\t\n\r\x20-\U0000D7FF\U0000E000-\U0000FFFD\U00010000-\U0010FFFF]'

_XHTML_CONTENT = re.compile(r'[&<>]|' + _INVALID_XML)
_XHTML_ATTR = re.compile(r'[&<>\'"]|' + _INVALID_XML)

_ENTITIES = {
    '&': '&amp;',
    '<': '&lt;',
    # > does not need escaping in XML content, but HTML4 says "should escape"
    '>': '&gt;',
    "'": '&apos;',
    '"': '&quot;',
}


def _entity(match: 're.Match[str]') -> str:
    char = match.group(0)
    entity = _ENTITIES.get(char)
    if entity is not None:
        return entity
    return f'&#x{ord(char):x};'


def escape_xhtml(text: str) -> str:
    """
    Escape text for use as HTML/XHTML element content

    Example:
        >>> escape_xhtml('a & b < c')
        'a &amp; b &lt; c'
    """
    return _XHTML_CONTENT.sub(_entity, text)


def escape_xhtml_attr(text: str) -> str:
    """
    Escape text for use inside a quoted HTML/XHTML attribute value

    Example:
        >>> escape_xhtml_attr('say "hi"')
        'say &quot;hi&quot;'
    """
    return _XHTML_ATTR.sub(_entity, text)
