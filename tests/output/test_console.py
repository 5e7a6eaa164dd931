"""Tests for the Rich console factory and theme."""

from __future__ import annotations

import pytest

from solidctl.output.console import SOLID_THEME, create_console, get_output, style_for_variant


class TestCreateConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_width_override(self) -> None:
        assert create_console(width=40).width == 40

    def test_theme_styles_resolve(self) -> None:
        console = create_console()
        for name in SOLID_THEME.styles:
            console.get_style(name)


class TestStyleForVariant:
    @pytest.mark.parametrize(
        ("variant", "style"),
        [("good", "solid.variant.good"), ("bad", "solid.variant.bad"), ("meh", "")],
    )
    def test_mapping(self, variant: str, style: str) -> None:
        assert style_for_variant(variant) == style
