"""
Argwright Argument Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from rich.theme import Theme


class OneColors:
    """One Dark palette used for Rich markup in Argwright output."""

    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    LIGHT_GRAY = "#5C6370"
    RED = "#E06C75"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    YELLOW = "#E5C07B"
    DARK_YELLOW = "#D19A66"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"

    DARK_RED_b = f"bold {DARK_RED}"


def get_argwright_theme() -> Theme:
    """Rich theme with the named styles Argwright prints with."""
    return Theme(
        {
            "argwright.value": OneColors.GREEN,
            "argwright.slot": OneColors.BLUE,
            "argwright.muted": OneColors.LIGHT_GRAY,
            "argwright.error": OneColors.DARK_RED_b,
        }
    )


__all__ = [
    "OneColors",
    "get_argwright_theme",
]
