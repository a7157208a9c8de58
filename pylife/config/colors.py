"""
Named-color lookup. The table is pygame's own color dictionary, so any
name pygame.Color accepts is accepted here as well.
"""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
from pygame.colordict import THECOLORS

from .errors import UnknownColor
from .simulation_config import Color

# name -> (r,g,b), alpha dropped
COLOR_TABLE = {name: tuple(rgba[:3]) for name, rgba in THECOLORS.items()}


def normalize_color_name(name: str) -> str:
    """
    Lowercases and strips spaces and underscores, so that 'Dark Green',
    'DARK_GREEN' and 'darkgreen' all name the same color.
    """
    return name.strip().lower().replace(" ", "").replace("_", "")


def resolve_color(name: str, flag: str = "color") -> Color:
    """
    Looks up a color by name.

    Parameters:
    name : str, color name as typed by the user
    flag : str, flag the name came from, reported in the error

    Returns:
    Color, with the normalized name and its RGB triple

    Raises UnknownColor if the name is not in COLOR_TABLE.
    """
    key = normalize_color_name(name)
    if key not in COLOR_TABLE:
        raise UnknownColor(flag, name)
    return Color(key, COLOR_TABLE[key])
