"""
Option resolution for directive invocations

Splits an options suffix into the four recognized options (default-filled)
and an ordered list of pass-through options for the highlighter.

Example:
    >>> opts = options_resolve(' pull gist_script=YES linenos')
    >>> opts.pull, opts.gist_script
    ('true', 'YES')
    >>> option_true(opts.gist_script)
    True
    >>> opts.passthrough_pairs()
    [('linenos', None)]
"""

from typing import Dict, List, Optional

from ..models.options import (
    DEFAULT_OPTIONS,
    RECOGNIZED_OPTIONS,
    PassThroughOption,
    ResolvedOptions,
)
from .log import LOG
from .tokenizer import options_scan, unquote


OPTION_TRUE_VALUES = frozenset({'1', 'on', 'true', 'y', 'yes'})


def option_true(value: Optional[str]) -> bool:
    """True iff value is 1, on, true, y or yes (case-insensitive)"""
    if value is None:
        return False
    return value.lower() in OPTION_TRUE_VALUES


def options_resolve(options_text: str, defaults: Optional[Dict[str, str]] = None) -> ResolvedOptions:
    """
    Resolve an options suffix against the default option table

    A bare key counts as 'true' for recognized options. An empty value
    (key="") leaves the current value in place. The last occurrence of a
    recognized key wins. Pass-through options keep every occurrence, in
    order.

    Args:
        options_text: Options suffix as captured by the grammar matcher
        defaults: Recognized option defaults (DEFAULT_OPTIONS if omitted)

    Returns:
        ResolvedOptions
    """
    recognized = dict(DEFAULT_OPTIONS if defaults is None else defaults)
    passthrough: List[PassThroughOption] = []

    for option in options_scan(options_text):
        if option.key in RECOGNIZED_OPTIONS:
            raw = option.raw_value if option.raw_value is not None else 'true'
            value = unquote(raw)
            # Recognized options are never empty
            if not value:
                LOG(f"Ignoring empty value for option '{option.key}'", level=1)
                continue
            recognized[option.key] = value
        else:
            value = unquote(option.raw_value) if option.raw_value is not None else None
            passthrough.append(PassThroughOption(
                key=option.key,
                value=value,
                raw_value=option.raw_value,
            ))

    return ResolvedOptions(passthrough=tuple(passthrough), **recognized)
