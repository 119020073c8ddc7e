"""
Directive registry for highlightfile

Maps template tag names to DirectiveSpec objects describing each directive's
positional grammar and usage text.
"""

from typing import Dict, Iterable, List, Optional

from ..models.directives import (
    DirectiveSpec,
    DirectiveKind,
    FIELD_LANGUAGE,
    FIELD_REPO,
    FIELD_GIST_USER,
    FIELD_GIST_ID,
    FIELD_FILE,
)
from .errors import UnknownDirectiveName


class DirectiveRegistry:
    """
    Registry of directive specifications

    The three built-in directives are registered on construction. Hosts can
    register further names for the same kinds (e.g., a shorter alias).
    """

    def __init__(self) -> None:
        """Initialize the directive registry and register all built-in directives"""
        self.specs: Dict[str, DirectiveSpec] = {}
        self.builtinDirectives_register()

    def register(self, spec: DirectiveSpec) -> None:
        """Register a directive specification"""
        self.specs[spec.name] = spec

    def get(self, name: str) -> Optional[DirectiveSpec]:
        """
        Get directive specification by tag name

        Args:
            name: Tag name to look up

        Returns:
            DirectiveSpec or None if not registered
        """
        return self.specs.get(name)

    def spec_require(self, name: str) -> DirectiveSpec:
        """Get directive specification by tag name, raising UnknownDirectiveName"""
        spec = self.get(name)
        if spec is None:
            raise UnknownDirectiveName(name)
        return spec

    def names(self) -> List[str]:
        """Registered tag names, in registration order"""
        return list(self.specs)

    def directives_listByKind(self, kind: DirectiveKind) -> List[DirectiveSpec]:
        """Get all directives of a kind"""
        return [spec for spec in self.specs.values() if spec.kind == kind]

    def builtinDirectives_register(self) -> None:
        """Register highlight_file, highlight_git and highlight_gist"""

        builtin_specs: Iterable[DirectiveSpec] = [
            DirectiveSpec(
                name='highlight_file',
                kind=DirectiveKind.FILE,
                fields=(FIELD_LANGUAGE, FIELD_FILE),
                placeholders=('<lang>', '<file>'),
                description='Highlight a file from the local filesystem',
                examples=[
                    'c src/main.c',
                    'python "docs/my example.py" linenos',
                ],
            ),
            DirectiveSpec(
                name='highlight_git',
                kind=DirectiveKind.GIT,
                fields=(FIELD_LANGUAGE, FIELD_REPO, FIELD_FILE),
                placeholders=('<lang>', '<repo>', '<file>'),
                description='Highlight a file from a git repository (cloned on first use)',
                examples=[
                    'c https://github.com/acme/widget.git src/main.c',
                    'ruby git://github.com/acme/gem.git lib/gem.rb pull=yes',
                ],
            ),
            DirectiveSpec(
                name='highlight_gist',
                kind=DirectiveKind.GIST,
                fields=(FIELD_LANGUAGE, FIELD_GIST_USER, FIELD_GIST_ID, FIELD_FILE),
                placeholders=('<lang>', '<gist user>', '<gist id>', '<file>'),
                description='Highlight a file from a GitHub Gist',
                examples=[
                    'ruby octocat 1234567 hello.rb',
                    'sh octocat 1234567 install.sh gist_script=true',
                ],
            ),
        ]

        for spec in builtin_specs:
            self.register(spec)
