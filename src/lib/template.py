"""
Page expander for Liquid-style directive tags

Finds {% name args %} tags in a text page and replaces those whose name is
a registered directive with the rendered HTML. Other tags, and everything
inside {% raw %}...{% endraw %} blocks, are left untouched so a later
template engine can still process them.

Whitespace control follows Liquid: {%- strips whitespace before the tag,
-%} strips whitespace after it.

Example:
    >>> expander = TemplateExpander('<p>{% highlight_file c main.c %}</p>', renderer)
    >>> html = expander.expand()
    >>> expander.count
    1
"""

import re
from typing import List, Optional

from .directives import DirectiveRegistry
from .log import LOG
from .renderer import DirectiveRenderer


_TAG = re.compile(r'\{%(-?)\s*(\w+)(.*?)(-?)%\}', re.DOTALL)
_RAW_BLOCK = re.compile(r'\{%-?\s*raw\s*-?%\}.*?\{%-?\s*endraw\s*-?%\}', re.DOTALL)


class TemplateExpander:
    """
    Expands directive tags in one page

    Attributes:
        source: Page text
        renderer: DirectiveRenderer used for every tag
        registry: Directive names to expand (renderer's registry if omitted)
        count: Number of tags rendered by the last expand()
    """

    def __init__(
        self,
        source: str,
        renderer: Optional[DirectiveRenderer] = None,
        registry: Optional[DirectiveRegistry] = None,
    ) -> None:
        self.source = source
        self.renderer = renderer or DirectiveRenderer()
        self.registry = registry or self.renderer.registry
        self.count = 0

    def rawRegions_find(self) -> List[range]:
        """Character ranges covered by {% raw %} blocks"""
        return [range(m.start(), m.end()) for m in _RAW_BLOCK.finditer(self.source)]

    def line_number(self, position: int) -> int:
        return self.source.count('\n', 0, position) + 1

    def expand(self) -> str:
        """
        Render every registered directive tag in the page

        Returns:
            Page text with directive tags replaced

        Raises:
            Any error from parsing or rendering a tag; nothing is returned
            for the page in that case
        """
        raw_regions = self.rawRegions_find()
        parts: List[str] = []
        pos = 0
        self.count = 0

        for match in _TAG.finditer(self.source):
            name = match.group(2)
            if self.registry.get(name) is None:
                continue
            if any(match.start() in region for region in raw_regions):
                continue
            # A previous tag's -%} may already have consumed this position
            if match.start() < pos:
                continue

            before = self.source[pos:match.start()]
            if match.group(1):
                before = before.rstrip()
            parts.append(before)

            line = self.line_number(match.start())
            LOG(f"Line {line}: {name}", level=2)
            try:
                parts.append(self.renderer.render_tag(name, match.group(3)))
            except Exception as exc:
                LOG(f"Line {line}: {name} failed: {exc}", level=1)
                raise

            pos = match.end()
            if match.group(4):
                while pos < len(self.source) and self.source[pos].isspace():
                    pos += 1
            self.count += 1

        parts.append(self.source[pos:])
        return ''.join(parts)


def page_expand(source: str, renderer: Optional[DirectiveRenderer] = None) -> str:
    """Expand every directive tag in source (convenience wrapper)"""
    return TemplateExpander(source, renderer).expand()
