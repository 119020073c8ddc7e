#!/usr/bin/env python3
"""
highlightfile - Embed highlighted source files in generated pages

Expands Liquid-style directive tags in a page into syntax-highlighted HTML:

    {% highlight_file <lang> <file> [option[=val]]* %}
    {% highlight_git <lang> <repo> <file> [option[=val]]* %}
    {% highlight_gist <lang> <gist user> <gist id> <file> [option[=val]]* %}

Recognized options:
    gist_script=false       use the GitHub Gist JavaScript embed for gists
    git_host_footer=true    add links to the git host (GitHub only)
    pull=false              git pull the cached repository before rendering
    repos_dir=_highlight_repos
                            where repositories are cloned

Any other option is passed to the highlighter (e.g., linenos, hl_lines="1 3").

Usage:
    highlightfile inputdir/ outputdir/ --inputFile page.html

    Relative file paths, repository caches and git commands are resolved
    against inputdir. The expanded page is written to outputdir/ under the
    same name.

Examples:
    # Basic expansion
    highlightfile site/ _site/ --inputFile index.html

    # Into a subdirectory, with verbose output
    highlightfile site/ _site/ --inputFile docs/api.md --outputSubdir docs -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter, RawDescriptionHelpFormatter

from chris_plugin import chris_plugin
from .lib import TemplateExpander, DirectiveRenderer, __version__, LOG, state_connectToLogger
from .lib.errors import HighlightFileError
from .lib.filesystem import LocalFileSystem
from .lib.parser import directives_describe
from .lib.repository import SubprocessGitTransport
from .models import ProgramState, pipeline
from .config import appsettings


class HelpFormatter(ArgumentDefaultsHelpFormatter, RawDescriptionHelpFormatter):
    """Argument defaults in help, directive epilog kept as written"""


# Define CLI arguments
parser = ArgumentParser(
    description="highlightfile - embed highlighted source files in generated pages",
    formatter_class=HelpFormatter,
    epilog="Directives:\n\n" + directives_describe(),
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Page to expand (relative to inputdir)"
)

parser.add_argument(
    "--outputSubdir",
    default=".",
    type=str,
    help="Subdirectory within outputdir for the expanded page",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the input page
            - htmlOutputdir: Created output directory path
            - envOK: True if environment is valid

    Exits:
        1 if the input page is not found
    """
    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile
    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    state.htmlOutputdir = state.outputdir / state.outputSubdir
    state.htmlOutputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.htmlOutputdir}", level=2)

    state.envOK = True
    return state


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the input page.

    Returns:
        ProgramState with added field:
            - sourceText: Page text

    Exits:
        1 if the file cannot be read
    """
    state = inputstate.copy()

    LOG("Reading source file...", level=1)
    try:
        state.sourceText = state.inputSourceFile.read_text(encoding=appsettings.encoding)
        LOG(f"Read {len(state.sourceText)} characters from {state.inputSourceFile.name}", level=2)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)
    return state


def page_expand(inputstate: ProgramState) -> ProgramState:
    """
    Render every directive tag in the page.

    Files, repository caches and git commands are resolved against inputdir.

    Returns:
        ProgramState with added fields:
            - expandedText: Page with directives rendered
            - tagCount: Number of directives rendered

    Exits:
        1 on a malformed directive or a failed clone, pull or file read
    """
    state = inputstate.copy()

    LOG("Expanding directives...", level=1)

    if state.sourceText is None:
        print("Error: No source text available", file=sys.stderr)
        sys.exit(1)

    renderer = DirectiveRenderer(
        git=SubprocessGitTransport(cwd=state.inputdir),
        fs=LocalFileSystem(state.inputdir),
    )
    expander = TemplateExpander(state.sourceText, renderer)
    try:
        state.expandedText = expander.expand()
        state.tagCount = expander.count
    except SyntaxError as e:
        print(f"Parse error: {e}", file=sys.stderr)
        sys.exit(1)
    except HighlightFileError as e:
        print(f"Render error: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Rendered {state.tagCount} directives", level=2)
    return state


def results_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the expanded page and report.

    Returns:
        ProgramState with added field:
            - writeResult: Dict containing status, output_file and tag_count

    Exits:
        1 if there is nothing to write or the write fails
    """
    state = inputstate.copy()

    if state.expandedText is None:
        print("Error: Expansion failed", file=sys.stderr)
        sys.exit(1)

    output_file = state.htmlOutputdir / Path(state.inputFile).name
    try:
        output_file.write_text(state.expandedText, encoding=appsettings.encoding)
    except OSError as e:
        print(f"Error writing output file: {e}", file=sys.stderr)
        sys.exit(1)

    state.writeResult = {
        'status': True,
        'output_file': str(output_file),
        'tag_count': state.tagCount,
    }

    LOG("✓ Expansion successful!", level=1)
    LOG(f"  Output: {output_file}", level=1)
    LOG(f"  Directives: {state.tagCount}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="highlightfile - embed highlighted source files",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - expand directive tags in one page.

    Orchestrates the pipeline:
        1. env_check: Validate paths and environment
        2. source_read: Read the page
        3. page_expand: Render every directive tag
        4. results_write: Write the page and report

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, source_read, page_expand, results_write)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
