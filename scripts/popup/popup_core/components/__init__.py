"""Component contract shared by every drawable, interactive screen element.

Component sequences are always given in draw order: drawn back-to-front once
per frame, asked for input and commands front-to-back. A visible modal component consumes every event and
blocks the command bar, which is how modality reaches the surrounding shell.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from popup_core.models import CommandBlocking, CommandInfo, Event, EventState, Rect
from popup_core.surface import Surface


class Component(ABC):
    @abstractmethod
    def draw(self, surface: Surface, area: Rect) -> None:
        ...

    @abstractmethod
    def commands(self, out: list[CommandInfo], force_all: bool) -> CommandBlocking:
        ...

    @abstractmethod
    def event(self, ev: Event) -> EventState:
        ...

    @abstractmethod
    def is_visible(self) -> bool:
        ...

    @abstractmethod
    def hide(self) -> None:
        ...

    @abstractmethod
    def show(self) -> None:
        ...


def visibility_blocking(component: Component) -> CommandBlocking:
    if component.is_visible():
        return CommandBlocking.BLOCKING
    return CommandBlocking.PASSING_ON


def event_pump(ev: Event, components: Sequence[Component]) -> EventState:
    """Offer ``ev`` front-to-back until a component consumes it."""
    for component in reversed(components):
        if component.event(ev).is_consumed():
            return EventState.CONSUMED
    return EventState.NOT_CONSUMED


def command_pump(out: list[CommandInfo], force_all: bool, components: Sequence[Component]) -> bool:
    """Collect commands front-to-back; returns True when a component blocked."""
    for component in reversed(components):
        if component.commands(out, force_all) is CommandBlocking.BLOCKING and not force_all:
            return True
    return False
