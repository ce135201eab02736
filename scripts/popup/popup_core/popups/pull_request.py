"""Informational popup shown in place of pull request creation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from popup_core import strings
from popup_core.components import Component, visibility_blocking
from popup_core.keys import key_match
from popup_core.layout import centered_rect_absolute
from popup_core.models import CommandBlocking, CommandInfo, Event, EventState, Rect
from popup_core.popups import message_panel
from popup_core.surface import Surface

if TYPE_CHECKING:
    from popup_core.app import Environment

log = logging.getLogger(__name__)

POPUP_WIDTH = 50
POPUP_HEIGHT = 10


class PullRequestPopup(Component):
    def __init__(self, env: Environment):
        self.visible = False
        self.theme = env.theme
        self.key_config = env.key_config

    def draw(self, surface: Surface, area: Rect) -> None:
        if not self.visible:
            return

        rect = centered_rect_absolute(POPUP_WIDTH, POPUP_HEIGHT, surface.area)
        surface.clear(rect)
        surface.render_widget(
            message_panel(strings.PULL_REQUEST_TITLE, strings.PULL_REQUEST_MESSAGE, self.theme),
            rect,
        )

    def commands(self, out: list[CommandInfo], force_all: bool) -> CommandBlocking:
        out.append(CommandInfo(strings.close_popup(self.key_config), True, self.visible))
        return visibility_blocking(self)

    def event(self, ev: Event) -> EventState:
        if self.visible:
            if key_match(ev, self.key_config.keys.exit_popup):
                self.hide()
            return EventState.CONSUMED
        return EventState.NOT_CONSUMED

    def is_visible(self) -> bool:
        return self.visible

    def hide(self) -> None:
        if self.visible:
            log.debug("pull request popup hidden")
        self.visible = False

    def show(self) -> None:
        if not self.visible:
            log.debug("pull request popup shown")
        self.visible = True

    def open(self) -> None:
        self.show()
