"""
Models package for highlightfile

Contains data structures and type definitions for directive parsing,
option resolution, host metadata and the command line pipeline.
"""

from .state import ProgramState, pipeline
from .directives import DirectiveSpec, DirectiveKind, DirectiveInvocation, git_url_for_gist
from .options import ResolvedOptions, PassThroughOption, DEFAULT_OPTIONS, RECOGNIZED_OPTIONS
from .hosts import HostInfo, HostLookup, Recognized, Unrecognized, UNRECOGNIZED
from .parser import Token, OptionToken

__all__ = [
    "ProgramState",
    "pipeline",
    "DirectiveSpec",
    "DirectiveKind",
    "DirectiveInvocation",
    "git_url_for_gist",
    "ResolvedOptions",
    "PassThroughOption",
    "DEFAULT_OPTIONS",
    "RECOGNIZED_OPTIONS",
    "HostInfo",
    "HostLookup",
    "Recognized",
    "Unrecognized",
    "UNRECOGNIZED",
    "Token",
    "OptionToken",
]
