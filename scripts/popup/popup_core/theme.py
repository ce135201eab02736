"""Colour theme shared read-only by every component."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from rich.color import Color, ColorParseError
from rich.style import Style


@dataclass(frozen=True)
class Theme:
    command_fg: str = "white"
    cmdbar_bg: str = "grey15"
    disabled_fg: str = "grey50"
    background_border: str = "cyan"

    def block(self, focused: bool) -> Style:
        if focused:
            return Style()
        return Style(color=self.disabled_fg)

    def title(self, focused: bool) -> Style:
        if focused:
            return Style(bold=True)
        return Style(color=self.disabled_fg)

    def commandbar(self, enabled: bool) -> Style:
        color = self.command_fg if enabled else self.disabled_fg
        return Style(color=color, bgcolor=self.cmdbar_bg)


THEME_FIELDS = {f.name for f in fields(Theme)}


def theme_from_config(overrides: dict[str, Any] | None) -> Theme:
    if overrides is None:
        return Theme()
    if not isinstance(overrides, dict):
        raise ValueError("theme config must be an object")

    values: dict[str, str] = {}
    for name, value in overrides.items():
        if name not in THEME_FIELDS:
            raise ValueError(f"unknown theme entry: {name}")
        try:
            Color.parse(str(value))
        except ColorParseError as exc:
            raise ValueError(f"invalid colour for {name}: {value}") from exc
        values[name] = str(value)
    return replace(Theme(), **values)
