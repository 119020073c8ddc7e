"""
Shared fakes for renderer, expander and pipeline tests

The fakes implement the collaborator protocols in memory so no test touches
git or the network.
"""

from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple

import pytest

from highlightfile.lib.renderer import DirectiveRenderer


class MemoryFileSystem:
    """FileSystemProtocol over a dict of '/'-separated paths"""

    def __init__(self, files: Optional[Dict[str, str]] = None, directories: Optional[Set[str]] = None):
        self.files: Dict[str, bytes] = {k: v.encode('utf-8') for k, v in (files or {}).items()}
        self.directories: Set[str] = set(directories or ())

    @staticmethod
    def key(path) -> str:
        return Path(path).as_posix()

    def add_file(self, path: str, content) -> None:
        if isinstance(content, str):
            content = content.encode('utf-8')
        self.files[self.key(path)] = content

    def exists(self, path) -> bool:
        return self.key(path) in self.files or self.is_directory(path)

    def is_directory(self, path) -> bool:
        return self.key(path) in self.directories

    def read_file(self, path) -> bytes:
        try:
            return self.files[self.key(path)]
        except KeyError:
            raise FileNotFoundError(2, 'No such file or directory', str(path))


class RecordingGit:
    """GitTransportProtocol that records calls and can populate the fake filesystem"""

    def __init__(self, fs: MemoryFileSystem, ok: bool = True, files: Optional[Dict[str, str]] = None):
        self.fs = fs
        self.ok = ok
        self.files = files or {}
        self.calls: List[Tuple[str, ...]] = []

    def clone(self, url, dest_dir) -> bool:
        self.calls.append(('clone', url, Path(dest_dir).as_posix()))
        if self.ok:
            self.fs.directories.add(Path(dest_dir).as_posix())
            for name, content in self.files.items():
                self.fs.add_file(f"{Path(dest_dir).as_posix()}/{name}", content)
        return self.ok

    def pull(self, dest_dir) -> bool:
        self.calls.append(('pull', Path(dest_dir).as_posix()))
        return self.ok


class EchoHighlighter:
    """HighlighterProtocol that wraps code in a recognizable marker"""

    def __init__(self):
        self.calls: List[Tuple[str, str, str]] = []

    def highlight(self, language: str, options: str, code: str) -> str:
        self.calls.append((language, options, code))
        return f'<pre lang="{language}" opts="{options}">{code}</pre>'


@pytest.fixture
def memfs():
    return MemoryFileSystem()


@pytest.fixture
def highlighter():
    return EchoHighlighter()


@pytest.fixture
def git(memfs):
    return RecordingGit(memfs)


@pytest.fixture
def renderer(highlighter, git, memfs):
    return DirectiveRenderer(highlighter=highlighter, git=git, fs=memfs)
