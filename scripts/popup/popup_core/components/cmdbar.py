"""Command bar renderer for the collected command descriptors."""

from __future__ import annotations

from typing import Any

from rich.text import Text

from popup_core.models import CommandInfo
from popup_core.theme import Theme

SEPARATOR = " "


def available_commands(commands: list[CommandInfo]) -> list[CommandInfo]:
    shown = [cmd for cmd in commands if cmd.available]
    return sorted(shown, key=lambda cmd: cmd.order)


def render_commands(commands: list[CommandInfo], theme: Theme) -> Text:
    text = Text(no_wrap=True, overflow="ellipsis", end="")
    for index, cmd in enumerate(available_commands(commands)):
        if index:
            text.append(SEPARATOR, style=theme.commandbar(True))
        text.append(cmd.text.name, style=theme.commandbar(cmd.enabled))
    return text


def commands_to_dicts(commands: list[CommandInfo]) -> list[dict[str, Any]]:
    return [cmd.to_dict() for cmd in commands]
