# style/engine.py

from types import MappingProxyType
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional
from rich.style import Style
from rich.segment import Segment, Segments
from rich.console import Console
from ..logger import Logger
from .definitions import StyleDefinition, TRANSFORMATIONS, FOREGROUNDS, BACKGROUNDS

# Reserved key of the fallback style every stylesheet carries
DEFAULT_STYLE = 'default'

class StylesheetMisuseError(RuntimeError):
    """Raised when calling code sequences stylesheet operations incorrectly."""

class FrozenStylesheetError(StylesheetMisuseError):
    """Raised when a frozen stylesheet is asked to register a style."""

class ReservedStyleNameError(StylesheetMisuseError):
    """Raised when a style is registered under the reserved default key."""

@dataclass(frozen=True)
class ResolvedStyle:
    """A definition together with the rich style composed from it."""
    definition: StyleDefinition
    style: Style

    @classmethod
    def from_definition(cls, definition: StyleDefinition) -> 'ResolvedStyle':
        """Compose transformations, then foreground, then background."""
        style = Style()
        for transformation in definition.transformations:
            style += TRANSFORMATIONS[transformation]
        if definition.foreground is not None:
            style += Style(color=FOREGROUNDS[definition.foreground])
        if definition.background is not None:
            style += Style(bgcolor=BACKGROUNDS[definition.background])
        return cls(definition=definition, style=style)

class Stylesheet:
    """
    Registry of named styles with fallback-safe rendering.

    A stylesheet starts with only the default style, accepts registrations
    until frozen, and renders messages to its console in either state. Names
    that were never registered render with the default style.
    """
    def __init__(self, console: Optional[Console] = None, logger: Optional[Logger] = None):
        """
        Initialize with an output console and logger.

        Args:
            console: Rich console receiving rendered text. Defaults to stdout.
            logger: Logger for registry events. Defaults to a silent logger.
        """
        self.console = console if console is not None else Console()
        self.logger = logger if logger is not None else Logger(__name__)
        self._frozen = False
        self._styles: Dict[str, ResolvedStyle] = {
            DEFAULT_STYLE: ResolvedStyle.from_definition(StyleDefinition())
        }

    @classmethod
    def from_definitions(
        cls,
        definitions: Mapping[str, StyleDefinition],
        freeze: bool = True,
        console: Optional[Console] = None,
        logger: Optional[Logger] = None
    ) -> 'Stylesheet':
        """Build a stylesheet holding the given styles, frozen unless told otherwise."""
        sheet = cls(console=console, logger=logger)
        for name, definition in definitions.items():
            sheet.add_style(name, definition)
        if freeze:
            sheet.freeze()
        return sheet

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def styles(self) -> Mapping[str, ResolvedStyle]:
        """Read-only view of the registered styles."""
        return MappingProxyType(self._styles)

    def __contains__(self, name: object) -> bool:
        return name in self._styles

    def __len__(self) -> int:
        return len(self._styles)

    def names(self) -> List[str]:
        return sorted(self._styles)

    def add_style(self, name: str, definition: StyleDefinition) -> None:
        """
        Register or replace the style stored under name.

        Raises:
            FrozenStylesheetError: the stylesheet has been frozen.
            ReservedStyleNameError: name is the reserved default key.
            TypeError: name is not a string or definition is not a StyleDefinition.
        """
        if self._frozen:
            msg = f"Cannot add style '{name}': stylesheet is frozen"
            self.logger.critical(msg)
            raise FrozenStylesheetError(msg)
        if name == DEFAULT_STYLE:
            msg = f"Cannot add style '{name}': name is reserved for the default style"
            self.logger.critical(msg)
            raise ReservedStyleNameError(msg)
        if not isinstance(name, str):
            raise TypeError(f"Style name must be a string, got {type(name).__name__}")
        if not isinstance(definition, StyleDefinition):
            raise TypeError(f"Expected StyleDefinition, got {type(definition).__name__}")

        action = "Replaced" if name in self._styles else "Added"
        self._styles[name] = ResolvedStyle.from_definition(definition)
        self.logger.debug(f"{action} style '{name}': {definition.describe()}")

    def freeze(self) -> None:
        """Seal the stylesheet against further registration. Safe to repeat."""
        if not self._frozen:
            self._frozen = True
            self.logger.debug(f"Stylesheet frozen with {len(self._styles)} styles")

    def resolve(self, name: str) -> ResolvedStyle:
        """Return the style for name, or the default style when name is unknown."""
        resolved = self._styles.get(name)
        if resolved is None:
            self.logger.debug(f"Unknown style '{name}', using default")
            return self._styles[DEFAULT_STYLE]
        return resolved

    def render(self, name: str, message: str) -> None:
        """Write message styled as name, without a trailing newline."""
        self._write(name, message, end="")

    def render_line(self, name: str, message: str) -> None:
        """Write message styled as name, followed by a newline."""
        self._write(name, message, end="\n")

    def format(self, name: str, message: str, newline: bool = False) -> str:
        """Return the text render would write, escape codes included."""
        with self.console.capture() as capture:
            self._write(name, message, end="\n" if newline else "")
        return capture.get()

    def _write(self, name: str, message: str, end: str) -> None:
        resolved = self.resolve(name)
        # Raw segments bypass Text, which strips control codes and expands tabs
        segments = [Segment(message, resolved.style)]
        if end:
            segments.append(Segment(end))
        self.console.print(Segments(segments), end="", soft_wrap=True)
