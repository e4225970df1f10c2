# __init__.py

from .logger import Logger
from .style import (
    DEFAULT_STYLE,
    Color,
    FrozenStylesheetError,
    ReservedStyleNameError,
    ResolvedStyle,
    StyleDefinition,
    Stylesheet,
    StylesheetMisuseError,
    Transformation,
)

__all__ = [
    "Stylesheet",
    "StyleDefinition",
    "Transformation",
    "Color",
    "ResolvedStyle",
    "DEFAULT_STYLE",
    "StylesheetMisuseError",
    "FrozenStylesheetError",
    "ReservedStyleNameError",
    "Logger",
]
