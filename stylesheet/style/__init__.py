# style/__init__.py

from .definitions import Transformation, Color, StyleDefinition
from .engine import (
    DEFAULT_STYLE,
    ResolvedStyle,
    Stylesheet,
    StylesheetMisuseError,
    FrozenStylesheetError,
    ReservedStyleNameError,
)

__all__ = [
    'Transformation',
    'Color',
    'StyleDefinition',
    'DEFAULT_STYLE',
    'ResolvedStyle',
    'Stylesheet',
    'StylesheetMisuseError',
    'FrozenStylesheetError',
    'ReservedStyleNameError',
]
