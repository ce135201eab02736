"""Shared model contracts for component, event and command data flow."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Any, Union


class EventState(Enum):
    CONSUMED = "consumed"
    NOT_CONSUMED = "not_consumed"

    def is_consumed(self) -> bool:
        return self is EventState.CONSUMED


class CommandBlocking(Enum):
    BLOCKING = "blocking"
    PASSING_ON = "passing_on"


class KeyModifiers(Flag):
    NONE = 0
    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, other: Rect) -> bool:
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def inner(self, margin: int) -> Rect:
        width = max(0, self.width - 2 * margin)
        height = max(0, self.height - 2 * margin)
        return Rect(self.x + min(margin, self.width), self.y + min(margin, self.height), width, height)

    def bottom_rows(self, rows: int) -> Rect:
        rows = max(0, min(rows, self.height))
        return Rect(self.x, self.bottom - rows, self.width, rows)

    def without_bottom_rows(self, rows: int) -> Rect:
        rows = max(0, min(rows, self.height))
        return Rect(self.x, self.y, self.width, self.height - rows)


@dataclass(frozen=True)
class KeyEvent:
    code: str
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: str = "press"  # press|release


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class PasteEvent:
    text: str


Event = Union[KeyEvent, ResizeEvent, PasteEvent]


@dataclass(frozen=True)
class CommandText:
    name: str
    desc: str
    group: str


@dataclass
class CommandInfo:
    text: CommandText
    enabled: bool
    # shown in the command bar only while available
    available: bool
    order: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.text.name,
            "desc": self.text.desc,
            "group": self.text.group,
            "enabled": self.enabled,
            "available": self.available,
            "order": self.order,
        }
