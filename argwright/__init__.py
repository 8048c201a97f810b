"""
Argwright Argument Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import ArgumentParseError, RegistrationError
from .parser import (
    MISSING,
    ArgumentRegistry,
    GroupPolicy,
    ParseResult,
    ParserConfig,
    Unsigned,
)

logger = logging.getLogger("argwright")


__all__ = [
    "ArgumentRegistry",
    "ArgumentParseError",
    "GroupPolicy",
    "MISSING",
    "ParseResult",
    "ParserConfig",
    "RegistrationError",
    "Unsigned",
]
