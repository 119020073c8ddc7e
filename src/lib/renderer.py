"""
Renderer for parsed directives

Turns a DirectiveInvocation into the HTML block embedded in the page:

    <div class="highlight-file">
    highlighted code + footer            (default)
    <script> + <noscript>code+footer     (gist_script on a gist)
    </div>

Repositories are cloned on first use and pulled on request (pull=true).
Any failure raises and no output is produced for the directive.
"""

from pathlib import Path
from typing import Optional

from ..models.directives import DirectiveInvocation, DirectiveKind
from ..models.hosts import HostInfo, Recognized
from .directives import DirectiveRegistry
from .errors import FileReadFailed, RepositoryCloneFailed, RepositoryPullFailed
from .escape import escape_xhtml, escape_xhtml_attr
from .filesystem import LocalFileSystem
from .highlighter import PygmentsHighlighter
from .hosts import host_info_get, script_url_for_gist
from .interfaces import FileSystemProtocol, GitTransportProtocol, HighlighterProtocol
from .log import LOG
from .options import option_true
from .parser import DirectiveParser
from .repository import SubprocessGitTransport, local_dir_for_repo
from ..config import appsettings


FOOTER_TEMPLATE = """\
<div class="highlight-git-host-footer">
  <span class="highlight-git-repo-host">
    <a href="{repo_url}">This repository</a> is available on
    <a href="{site_url}">{site_name}</a>.
  </span>
  <span class="highlight-git-file-raw">
    <span>View {filename}:</span>
    <a href="{file_url}">Pretty</a>
    <a href="{file_raw_url}">Raw</a>
  </span>
</div>
"""

# The space inside <script> and the newline after </script> keep Markdown
# processors from mangling the embed
GIST_SCRIPT_TEMPLATE = """\
<script type="text/javascript" src="{script_url}"> </script>
<noscript>
{content}
</noscript>
"""


class DirectiveRenderer:
    """
    Renders directives to HTML

    Responsibilities:
    - Resolve and refresh the repository cache (clone/pull)
    - Read the file to embed
    - Highlight it through the highlighter collaborator
    - Add the gist embed and the git host footer
    """

    def __init__(
        self,
        highlighter: Optional[HighlighterProtocol] = None,
        git: Optional[GitTransportProtocol] = None,
        fs: Optional[FileSystemProtocol] = None,
        registry: Optional[DirectiveRegistry] = None,
        encoding: Optional[str] = None,
    ) -> None:
        """
        Initialize renderer

        Args:
            highlighter: Syntax highlighter (Pygments if omitted)
            git: Git transport (git executable if omitted)
            fs: Filesystem reader (working directory if omitted)
            registry: Directive registry used by render_tag()
            encoding: Text encoding of embedded files (settings if omitted)
        """
        self.highlighter = highlighter or PygmentsHighlighter()
        self.git = git or SubprocessGitTransport()
        self.fs = fs or LocalFileSystem()
        self.registry = registry or DirectiveRegistry()
        self.encoding = encoding or appsettings.encoding

    def render_tag(self, name: str, text: str) -> str:
        """Parse and render one tag (name plus raw argument text)"""
        invocation = DirectiveParser(name, text, registry=self.registry).parse()
        return self.render(invocation)

    def render(self, invocation: DirectiveInvocation) -> str:
        """
        Render a parsed directive

        Returns:
            HTML block wrapped in <div class="highlight-file">

        Raises:
            RepositoryCloneFailed, RepositoryPullFailed, FileReadFailed
        """
        LOG(f"Rendering {invocation.name} {invocation.filename}", level=2)

        content = self.content_get(invocation)
        highlighted = self.highlighter.highlight(
            invocation.language,
            invocation.options.highlighter_options(),
            content,
        )
        footer = self.footer_make(invocation)

        options = invocation.options
        if option_true(options.gist_script) and invocation.gist_id and invocation.gist_user:
            script_url = script_url_for_gist(invocation.gist_user, invocation.gist_id, invocation.filename)
            body = GIST_SCRIPT_TEMPLATE.format(
                script_url=escape_xhtml_attr(script_url),
                content=highlighted + footer,
            )
        else:
            body = highlighted + footer

        return f'\n<div class="highlight-file">\n{body}\n</div>\n'

    def localDir_resolve(self, invocation: DirectiveInvocation) -> Optional[Path]:
        """
        Local checkout directory of the directive's repository

        Returns:
            Directory path, or None for highlight_file directives
        """
        if invocation.kind == DirectiveKind.FILE or invocation.repo_ref is None:
            return None
        return local_dir_for_repo(invocation.repo_ref, invocation.options.repos_dir, self.fs)

    def repository_sync(self, invocation: DirectiveInvocation, local_dir: Path) -> None:
        """Clone the repository if missing, pull it if requested"""
        repo_url = invocation.repo_ref
        if repo_url is None:
            return

        if not self.fs.is_directory(local_dir):
            LOG(f"Cloning {repo_url} into {local_dir}", level=1)
            if not self.git.clone(repo_url, local_dir):
                raise RepositoryCloneFailed(repo_url, local_dir)
        elif option_true(invocation.options.pull):
            LOG(f"Pulling {local_dir}", level=1)
            if not self.git.pull(local_dir):
                raise RepositoryPullFailed(local_dir)

    def filePath_get(self, invocation: DirectiveInvocation, local_dir: Optional[Path]) -> Path:
        """Path of the file to embed ('/'-separated filename under local_dir)"""
        if local_dir is None:
            return Path(invocation.filename)
        parts = [part for part in invocation.filename.split('/') if part]
        return local_dir.joinpath(*parts)

    def content_get(self, invocation: DirectiveInvocation) -> str:
        """
        Read the file to embed, fetching its repository first if needed

        Raises:
            FileReadFailed: If the file is missing, unreadable, undecodable or
                its path cannot be opened at all
        """
        local_dir = self.localDir_resolve(invocation)
        if local_dir is not None:
            self.repository_sync(invocation, local_dir)

        file_path = self.filePath_get(invocation, local_dir)
        try:
            data = self.fs.read_file(file_path)
        except (OSError, ValueError) as exc:
            # ValueError: paths pathlib cannot open, e.g. with an embedded NUL
            raise FileReadFailed(file_path, getattr(exc, 'strerror', None) or str(exc)) from exc

        try:
            content = data.decode(self.encoding)
        except UnicodeDecodeError as exc:
            raise FileReadFailed(file_path, f"not valid {self.encoding}") from exc

        LOG(f"Read {len(content)} characters from {file_path}", level=2)
        return content

    def footer_make(self, invocation: DirectiveInvocation) -> str:
        """Footer linking to the git host, or '' when disabled or unrecognized"""
        if not option_true(invocation.options.git_host_footer):
            return ''

        lookup = host_info_get(
            invocation.filename,
            repo_url=invocation.repo_ref,
            gist_user=invocation.gist_user,
            gist_id=invocation.gist_id,
        )
        if not isinstance(lookup, Recognized):
            LOG(f"No git host recognized for {invocation.repo_ref}", level=3)
            return ''

        return self.footer_format(lookup.info, invocation.filename)

    def footer_format(self, info: HostInfo, filename: str) -> str:
        return FOOTER_TEMPLATE.format(
            repo_url=escape_xhtml_attr(info.repo_url),
            site_url=escape_xhtml_attr(info.site_url),
            site_name=escape_xhtml(info.site_name),
            filename=escape_xhtml(filename),
            file_url=escape_xhtml_attr(info.file_url),
            file_raw_url=escape_xhtml_attr(info.file_raw_url),
        )


def render(name: str, text: str, renderer: Optional[DirectiveRenderer] = None) -> str:
    """
    Render one directive tag

    Entry point for hosts that hand over a tag name and its raw argument
    text, like a template engine's tag callback.

    Example:
        >>> html = render('highlight_file', 'python setup.py linenos')
    """
    renderer = renderer or DirectiveRenderer()
    return renderer.render_tag(name, text)
