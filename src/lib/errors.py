"""
Exceptions raised while parsing and rendering directives

Every failure aborts the directive being rendered and propagates to the
host, which decides how to surface it.
"""

from pathlib import Path
from typing import Optional, Union


class HighlightFileError(Exception):
    """Base class for all highlightfile errors"""
    pass


class MalformedDirective(HighlightFileError, SyntaxError):
    """
    Raised when an argument string does not match its directive's grammar

    Attributes:
        name: Directive tag name
        text: Original argument text
        usage: Usage line for the directive
    """

    def __init__(self, name: str, text: str, usage: str):
        super().__init__(f"Unrecognized argument '{text}'.\n{usage}")
        self.name = name
        self.text = text
        self.usage = usage


class UnknownDirectiveName(HighlightFileError, LookupError):
    """Raised when a tag name is not a registered directive"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unrecognized tag name '{name}'")


class RepositoryCloneFailed(HighlightFileError):
    """Raised when the git transport fails to clone a repository"""

    def __init__(self, repo_url: str, local_dir: Union[str, Path]):
        self.repo_url = repo_url
        self.local_dir = Path(local_dir)
        super().__init__(f"Error cloning repository {repo_url} into {local_dir}")


class RepositoryPullFailed(HighlightFileError):
    """Raised when the git transport fails to pull a repository"""

    def __init__(self, local_dir: Union[str, Path]):
        self.local_dir = Path(local_dir)
        super().__init__(f"Error pulling repository in {local_dir}")


class FileReadFailed(HighlightFileError):
    """Raised when the file to embed is missing, unreadable or undecodable"""

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None):
        self.path = Path(path)
        self.reason = reason
        message = f"Error reading file {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
