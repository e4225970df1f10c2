# style/definitions.py

from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
from rich.style import Style

class Transformation(Enum):
    """Text transformations a style may switch on."""
    BLINK = 'blink'
    BOLD = 'bold'
    ITALIC = 'italic'
    UNDERLINED = 'underlined'

class Color(Enum):
    """
    Colors available for foreground and background.

    DEFAULT is an explicit choice of the terminal's own color. It renders the
    same as leaving the color unspecified.
    """
    DEFAULT = 'default'
    BLACK = 'black'
    WHITE = 'white'
    RED = 'red'
    GREEN = 'green'
    BLUE = 'blue'
    CYAN = 'cyan'
    MAGENTA = 'magenta'
    YELLOW = 'yellow'

# Each transformation carries exactly one attribute, so composition is commutative
TRANSFORMATIONS: Dict[Transformation, Style] = {
    Transformation.BLINK: Style(blink=True),
    Transformation.BOLD: Style(bold=True),
    Transformation.ITALIC: Style(italic=True),
    Transformation.UNDERLINED: Style(underline=True),
}

# Rich color names; None leaves the terminal color untouched
FOREGROUNDS: Dict[Color, Optional[str]] = {
    Color.DEFAULT: None,
    Color.BLACK: 'black',
    Color.WHITE: 'white',
    Color.RED: 'red',
    Color.GREEN: 'green',
    Color.BLUE: 'blue',
    Color.CYAN: 'cyan',
    Color.MAGENTA: 'magenta',
    Color.YELLOW: 'yellow',
}

BACKGROUNDS: Dict[Color, Optional[str]] = dict(FOREGROUNDS)

def _check_exhaustive(table: Dict, enum_type: type, table_name: str) -> None:
    """Fail at import time if a variant has no entry in its attribute table."""
    missing = [member.name for member in enum_type if member not in table]
    if missing:
        raise RuntimeError(f"{table_name} has no entry for: {', '.join(missing)}")

_check_exhaustive(TRANSFORMATIONS, Transformation, 'TRANSFORMATIONS')
_check_exhaustive(FOREGROUNDS, Color, 'FOREGROUNDS')
_check_exhaustive(BACKGROUNDS, Color, 'BACKGROUNDS')

@dataclass(frozen=True)
class StyleDefinition:
    """
    Intent of a style before any rendering attributes are computed.

    Order and repetition of transformations do not change the resolved style.
    A color left as None means the caller did not specify one.
    """
    transformations: Tuple[Transformation, ...] = field(default_factory=tuple)
    foreground: Optional[Color] = None
    background: Optional[Color] = None

    def __post_init__(self):
        # Accept any iterable of transformations but store an immutable tuple
        object.__setattr__(self, 'transformations', tuple(self.transformations))

    def describe(self) -> str:
        """Return a short summary for log messages."""
        parts = [t.value for t in self.transformations]
        if self.foreground is not None:
            parts.append(f"fg={self.foreground.value}")
        if self.background is not None:
            parts.append(f"bg={self.background.value}")
        return ' '.join(parts) or 'plain'
