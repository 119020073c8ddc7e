"""
Option models for directive invocations

Recognized options are a fixed set of named string fields with defaults.
Everything else a directive carries is forwarded to the highlighter as an
ordered list of pass-through options.
"""

from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class PassThroughOption:
    """
    An option not recognized by highlightfile, forwarded to the highlighter

    Attributes:
        key: Option name, verbatim as captured
        value: Unquoted value, or None for a bare key
        raw_value: Value text as written (quotes kept), or None

    The raw value is what gets re-serialized, so 'hl_lines="1 2"' reaches
    the highlighter with its quotes intact.
    """
    key: str
    value: Optional[str] = None
    raw_value: Optional[str] = None

    def serialize(self) -> str:
        if self.raw_value is None:
            return self.key
        return f"{self.key}={self.raw_value}"


@dataclass(frozen=True)
class ResolvedOptions:
    """
    Fully resolved options for one directive

    The four recognized options are always present as strings. Boolean
    flavored ones are interpreted with option_true() where they are used,
    never converted at parse time.

    Attributes:
        gist_script: Use the GitHub Gist JavaScript embed to render gists
        git_host_footer: Add markup with links to the git host (if recognized)
        pull: Pull the git repository before rendering
        repos_dir: Location where local clones are stored
        passthrough: Unrecognized options in encounter order, duplicates kept
    """
    gist_script: str = "false"
    git_host_footer: str = "true"
    pull: str = "false"
    repos_dir: str = "_highlight_repos"
    passthrough: Tuple[PassThroughOption, ...] = field(default_factory=tuple)

    def recognized(self) -> Dict[str, str]:
        """Recognized options as a plain dict (always four keys)"""
        return {name: getattr(self, name) for name in RECOGNIZED_OPTIONS}

    def passthrough_pairs(self) -> List[Tuple[str, Optional[str]]]:
        """Pass-through options as (key, unquoted value) pairs"""
        return [(opt.key, opt.value) for opt in self.passthrough]

    def highlighter_options(self) -> str:
        """Pass-through options re-serialized for the highlighter"""
        return ' '.join(opt.serialize() for opt in self.passthrough)


RECOGNIZED_OPTIONS: Tuple[str, ...] = tuple(
    f.name for f in fields(ResolvedOptions) if f.name != 'passthrough'
)

DEFAULT_OPTIONS: Dict[str, str] = ResolvedOptions().recognized()
