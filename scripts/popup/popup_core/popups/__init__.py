"""Popup rendering helpers."""

from __future__ import annotations

from rich import box
from rich.panel import Panel
from rich.text import Text

from popup_core.theme import Theme


def message_panel(title: str, lines: list[str], theme: Theme, focused: bool = True) -> Panel:
    body = Text("\n".join(lines), justify="center", overflow="fold")
    return Panel(
        body,
        title=Text(title, style=theme.title(focused)),
        title_align="left",
        border_style=theme.block(focused),
        box=box.HEAVY,
        expand=True,
    )
