"""
Local filesystem adapter

Relative paths are resolved against a root directory (the page's input
directory when run from the command line, the working directory otherwise).
"""

from pathlib import Path
from typing import Optional

from .interfaces import PathLike


class LocalFileSystem:
    """FileSystemProtocol backed by the local disk"""

    def __init__(self, root: Optional[PathLike] = None):
        self.root = Path(root) if root is not None else Path('.')

    def resolve(self, path: PathLike) -> Path:
        """Absolute paths are kept; relative ones are taken under root"""
        return self.root / Path(path)

    def exists(self, path: PathLike) -> bool:
        return self.resolve(path).exists()

    def is_directory(self, path: PathLike) -> bool:
        return self.resolve(path).is_dir()

    def read_file(self, path: PathLike) -> bytes:
        """Raises OSError when the file is missing or unreadable"""
        return self.resolve(path).read_bytes()
