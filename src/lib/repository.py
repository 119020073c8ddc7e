"""
Repository cache location and git transport

local_dir_for_repo() maps a repository URL to a directory under repos_dir.
SubprocessGitTransport clones into and pulls that directory with the git
executable. Concurrent renders of the same repository are not coordinated.
"""

import re
import subprocess
from pathlib import Path
from typing import List, Optional

from .interfaces import FileSystemProtocol, PathLike
from .log import LOG
from ..config import appsettings


# Characters invalid in file names on common filesystems. The control range
# stops at 0x19.
_ILLEGAL_PATH_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x19]+')
_URL_SCHEME = re.compile(r'\A\w+://', re.ASCII)
_GIT_SUFFIX = re.compile(r'\.git\Z')


def repo_dir_name(repo_url: str) -> str:
    """
    Cache directory name for a repository URL

    Example:
        >>> repo_dir_name('https://github.com/foo/bar.git')
        'github.com-foo-bar'
    """
    dir_name = _URL_SCHEME.sub('', repo_url, count=1)
    dir_name = _GIT_SUFFIX.sub('', dir_name, count=1)
    return _ILLEGAL_PATH_CHARS.sub('-', dir_name)


def local_dir_for_repo(repo_ref: str, repos_dir: str, fs: FileSystemProtocol) -> Path:
    """
    Local directory holding the checkout of repo_ref

    An existing local directory named by repo_ref is used as-is, so a
    directive can point at a checkout that is already on disk.
    """
    if fs.is_directory(repo_ref):
        return Path(repo_ref)
    return Path(repos_dir) / repo_dir_name(repo_ref)


class SubprocessGitTransport:
    """
    GitTransportProtocol backed by the git executable

    Commands run synchronously without a timeout. Output goes to the parent
    process's stdout/stderr so git's own error messages remain visible.
    """

    def __init__(self, cwd: Optional[PathLike] = None, executable: Optional[str] = None):
        self.cwd = Path(cwd) if cwd is not None else None
        self.executable = executable or appsettings.git_executable

    def command_run(self, args: List[str], cwd: Optional[Path] = None) -> bool:
        """Run git with args; True iff it exits with status 0"""
        cmd = [self.executable, *args]
        LOG(f"Running {' '.join(cmd)}", level=2)
        try:
            completed = subprocess.run(cmd, cwd=cwd)
        except (OSError, ValueError) as exc:
            LOG(f"Could not run {self.executable}: {exc}", level=1)
            return False
        if completed.returncode != 0:
            LOG(f"{' '.join(cmd)} exited with status {completed.returncode}", level=1)
        return completed.returncode == 0

    def dir_resolve(self, path: PathLike) -> Path:
        if self.cwd is None:
            return Path(path)
        return self.cwd / Path(path)

    def clone(self, url: str, dest_dir: PathLike) -> bool:
        return self.command_run(['clone', url, str(dest_dir)], cwd=self.cwd)

    def pull(self, dest_dir: PathLike) -> bool:
        return self.command_run(['pull'], cwd=self.dir_resolve(dest_dir))
