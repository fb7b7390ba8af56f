import re
from types import MappingProxyType
from typing import Optional

NAMED_COLORS = MappingProxyType({
    "RED": "#FF0000",
    "GREEN": "#00FF00",
    "BLUE": "#0000FF",
    "YELLOW": "#FFFF00",
    "CYAN": "#00FFFF",
    "MAGENTA": "#FF00FF",
    "ORANGE": "#FFA500",
    "CHARTREUSE": "#7FFF00",
    "SPRING_GREEN": "#00FF7F",
    "AZURE": "#007FFF",
    "VIOLET": "#8A2BE2",
    "ROSE": "#FF007F",
    "BLACK": "#000000",
    "WHITE": "#FFFFFF",
    "GRAY": "#808080",
    "GREY": "#808080",
})

_SEPARATORS = re.compile(r"[\s_\-]+")

# Lookup keys without separators, so "spring green" and "SPRING_GREEN" agree
_LOOKUP = {_SEPARATORS.sub("", name): value for name, value in NAMED_COLORS.items()}


def normalize_name(name: str) -> str:
    return _SEPARATORS.sub("", name).upper()


def lookup_named(name: str) -> Optional[str]:
    """Return the hex value of a named color, or None if the name is unknown."""
    if not isinstance(name, str):
        return None
    return _LOOKUP.get(normalize_name(name))


def is_named_color(name: str) -> bool:
    return lookup_named(name) is not None
