"""
Argwright Argument Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import MISSING, ArgumentSpec
from .argument_kind import ArgumentKind
from .argument_parser import ArgumentParser
from .groups import ArgumentGroup, GroupPolicy
from .parser_types import ParseResult, ParserConfig, ParsePhase
from .registry import ArgumentBuilder, ArgumentRegistry
from .summary import build_summary, render_summary
from .utils import Unsigned

__all__ = [
    "ArgumentBuilder",
    "ArgumentGroup",
    "ArgumentKind",
    "ArgumentParser",
    "ArgumentRegistry",
    "ArgumentSpec",
    "GroupPolicy",
    "MISSING",
    "ParsePhase",
    "ParseResult",
    "ParserConfig",
    "Unsigned",
    "build_summary",
    "render_summary",
]
