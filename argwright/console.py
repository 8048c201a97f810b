# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argwright output."""
from rich.console import Console

from argwright.themes import get_argwright_theme

console = Console(color_system="truecolor", theme=get_argwright_theme())
