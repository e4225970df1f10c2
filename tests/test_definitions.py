# test_definitions.py

import pytest
from rich.style import Style

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from stylesheet.style.definitions import (
    Transformation,
    Color,
    StyleDefinition,
    TRANSFORMATIONS,
    FOREGROUNDS,
    BACKGROUNDS,
)


class TestAttributeTables:
    """Every variant has a rich attribute."""

    def test_every_transformation_has_an_attribute(self):
        assert set(TRANSFORMATIONS) == set(Transformation)
        for style in TRANSFORMATIONS.values():
            assert isinstance(style, Style)
            assert style  # not the null style

    def test_every_color_has_an_entry(self):
        assert set(FOREGROUNDS) == set(Color)
        assert set(BACKGROUNDS) == set(Color)

    def test_default_color_leaves_terminal_color(self):
        assert FOREGROUNDS[Color.DEFAULT] is None
        assert BACKGROUNDS[Color.DEFAULT] is None


class TestStyleDefinition:
    """StyleDefinition is plain, immutable data."""

    def test_empty_definition(self):
        definition = StyleDefinition()
        assert definition.transformations == ()
        assert definition.foreground is None
        assert definition.background is None

    def test_transformations_stored_as_tuple(self):
        definition = StyleDefinition(transformations=[Transformation.BOLD, Transformation.BLINK])
        assert definition.transformations == (Transformation.BOLD, Transformation.BLINK)

    def test_definition_is_frozen(self):
        definition = StyleDefinition(foreground=Color.RED)
        with pytest.raises(AttributeError):
            definition.foreground = Color.BLUE

    def test_default_color_is_distinct_from_unspecified(self):
        assert StyleDefinition(foreground=Color.DEFAULT) != StyleDefinition()

    def test_describe(self):
        definition = StyleDefinition(
            transformations=[Transformation.BOLD],
            foreground=Color.RED,
            background=Color.WHITE
        )
        assert definition.describe() == "bold fg=red bg=white"
        assert StyleDefinition().describe() == "plain"
