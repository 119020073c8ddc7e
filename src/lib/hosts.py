"""
Git host recognition

Derives the repository, file and raw file URLs used by the footer. Only
GitHub (repositories and gists) is recognized, and repository files are
always linked on the master branch.
"""

import re
import unicodedata
from typing import Optional

from ..models.hosts import HostInfo, HostLookup, Recognized, UNRECOGNIZED


GITHUB_SITE_NAME = 'GitHub'
GITHUB_SITE_URL = 'https://github.com'
GITHUB_BRANCH = 'master'

_GITHUB_REPO = re.compile(r'\A(?:(?:git|https)://github\.com/|git@github\.com[:/])(.*)\.git\Z')

# Letters NFKD does not decompose, with their conventional ASCII spelling
_APPROXIMATIONS = str.maketrans({
    'Æ': 'AE', 'æ': 'ae',
    'Ð': 'D', 'ð': 'd',
    'Đ': 'D', 'đ': 'd',
    'Ħ': 'H', 'ħ': 'h',
    'ı': 'i',
    'ĸ': 'k',
    'Ŀ': 'L', 'ŀ': 'l',
    'Ł': 'L', 'ł': 'l',
    'Ŋ': 'NG', 'ŋ': 'ng',
    'Ø': 'O', 'ø': 'o',
    'Œ': 'OE', 'œ': 'oe',
    'ß': 'ss',
    'Þ': 'TH', 'þ': 'th',
    'Ŧ': 'T', 'ŧ': 't',
})


def transliterate(text: str) -> str:
    """
    Approximate text in ASCII

    Letters with a conventional spelling (ß, æ, ø, ł, þ, ...) are replaced
    by it, accented letters lose their accents, and characters without an
    ASCII form become '?'.

    Example:
        >>> transliterate('Café Straße Ærø 日')
        'Cafe Strasse AEro ?'
    """
    result = []
    for char in unicodedata.normalize('NFKD', text.translate(_APPROXIMATIONS)):
        if ord(char) < 128:
            result.append(char)
        elif not unicodedata.combining(char):
            result.append('?')
    return ''.join(result)


def filename_to_gist_id(filename: str) -> str:
    """
    Fragment id of a file on a GitHub gist page

    Example:
        >>> filename_to_gist_id('My File.rb')
        'file-my-file-rb'
    """
    slug = re.sub(r'[^A-Za-z0-9_]+', '-', transliterate(filename))
    return 'file-' + slug.lower()


def host_info_for_gist(gist_user: str, gist_id: str, filename: str) -> HostInfo:
    """Host info for a file in a gist (always GitHub)"""
    gist_url = f"https://gist.github.com/{gist_user}/{gist_id}"
    return HostInfo(
        repo_url=gist_url,
        file_url=f"{gist_url}#{filename_to_gist_id(filename)}",
        file_raw_url=f"{gist_url}/raw/{filename}",
        site_name=GITHUB_SITE_NAME,
        site_url=GITHUB_SITE_URL,
    )


def host_info_for_repo(repo_url: str, filename: str) -> HostLookup:
    """
    Host info for a file in a git repository

    Recognizes git://github.com/<path>.git, https://github.com/<path>.git
    and git@github.com:<path>.git.

    Returns:
        Recognized(HostInfo), or UNRECOGNIZED for any other URL
    """
    match = _GITHUB_REPO.match(repo_url)
    if not match:
        return UNRECOGNIZED

    page_url = f"{GITHUB_SITE_URL}/{match.group(1)}"
    return Recognized(HostInfo(
        repo_url=page_url,
        file_url=f"{page_url}/blob/{GITHUB_BRANCH}/{filename}",
        file_raw_url=f"{page_url}/raw/{GITHUB_BRANCH}/{filename}",
        site_name=GITHUB_SITE_NAME,
        site_url=GITHUB_SITE_URL,
    ))


def host_info_get(
    filename: str,
    repo_url: Optional[str] = None,
    gist_user: Optional[str] = None,
    gist_id: Optional[str] = None,
) -> HostLookup:
    """
    Host info for a directive's file

    A gist identity takes precedence over the repository URL (gists also
    carry a synthesized git URL).
    """
    if gist_id is not None and gist_user is not None:
        return Recognized(host_info_for_gist(gist_user, gist_id, filename))
    if repo_url is not None:
        return host_info_for_repo(repo_url, filename)
    return UNRECOGNIZED


def script_url_for_gist(gist_user: str, gist_id: str, filename: Optional[str] = None) -> str:
    """URL of the GitHub Gist JavaScript embed"""
    script_url = f"https://gist.github.com/{gist_user}/{gist_id}.js"
    if filename:
        script_url += f"?file={filename}"
    return script_url
