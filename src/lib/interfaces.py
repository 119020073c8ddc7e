"""
Collaborator contracts used by the renderer

The renderer only talks to these protocols, so tests (and other hosts) can
substitute in-memory implementations for the highlighter, the git transport
and the filesystem.
"""

from pathlib import Path
from typing import Protocol, Union, runtime_checkable


PathLike = Union[str, Path]


@runtime_checkable
class HighlighterProtocol(Protocol):
    """Turns code into a highlighted HTML fragment"""

    def highlight(self, language: str, options: str, code: str) -> str: ...


@runtime_checkable
class GitTransportProtocol(Protocol):
    """Clones and updates repository caches; returns True on success"""

    def clone(self, url: str, dest_dir: PathLike) -> bool: ...

    def pull(self, dest_dir: PathLike) -> bool: ...


@runtime_checkable
class FileSystemProtocol(Protocol):
    """Read-only view of the files a page may embed"""

    def exists(self, path: PathLike) -> bool: ...

    def is_directory(self, path: PathLike) -> bool: ...

    def read_file(self, path: PathLike) -> bytes: ...
