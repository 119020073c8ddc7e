"""
Git host metadata models

HostInfo holds the display URLs used by the footer. Lookups return either
Recognized(HostInfo) or UNRECOGNIZED rather than an optional struct.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class HostInfo:
    """
    Display metadata for a file on a recognized git host

    Attributes:
        repo_url: Web page of the repository (or gist)
        file_url: Pretty (rendered) view of the file
        file_raw_url: Raw download URL of the file
        site_name: Human-readable host name (e.g., "GitHub")
        site_url: Host home page
    """
    repo_url: str
    file_url: str
    file_raw_url: str
    site_name: str
    site_url: str


@dataclass(frozen=True)
class Recognized:
    """Host lookup succeeded"""
    info: HostInfo


@dataclass(frozen=True)
class Unrecognized:
    """Host lookup failed; callers omit the footer"""


UNRECOGNIZED = Unrecognized()

HostLookup = Union[Recognized, Unrecognized]
