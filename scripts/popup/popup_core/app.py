"""Application shell hosting the pull request popup."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from dataclasses import dataclass

from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from popup_core import strings
from popup_core.components import Component, command_pump, event_pump
from popup_core.components.cmdbar import commands_to_dicts, render_commands
from popup_core.config import default_config_path, resolve_config
from popup_core.keys import KeyConfig, key_match
from popup_core.log import setup_logging
from popup_core.models import CommandInfo, Event, EventState, ResizeEvent
from popup_core.popups.pull_request import PullRequestPopup
from popup_core.surface import Surface
from popup_core.terminal import cbreak, parse_keys, poll_input
from popup_core.theme import Theme

log = logging.getLogger(__name__)

FRAME_SECONDS = 0.1
ORDER_PULL_REQUEST = 10
ORDER_QUIT = 100


@dataclass(frozen=True)
class Environment:
    theme: Theme
    key_config: KeyConfig


class App:
    def __init__(self, env: Environment):
        self.env = env
        self.pull_request_popup = PullRequestPopup(env)
        self.should_quit = False

    def popups(self) -> list[Component]:
        return [self.pull_request_popup]

    def event(self, ev: Event) -> EventState:
        if event_pump(ev, self.popups()).is_consumed():
            return EventState.CONSUMED

        if isinstance(ev, ResizeEvent):
            log.debug("resized to %sx%s", ev.width, ev.height)
            return EventState.NOT_CONSUMED

        keys = self.env.key_config.keys
        if key_match(ev, keys.quit):
            self.should_quit = True
        elif key_match(ev, keys.open_pull_request):
            self.pull_request_popup.open()
        else:
            return EventState.NOT_CONSUMED
        return EventState.CONSUMED

    def commands(self, force_all: bool = False) -> list[CommandInfo]:
        out: list[CommandInfo] = []
        if command_pump(out, force_all, self.popups()):
            return out

        key_config = self.env.key_config
        out.append(CommandInfo(strings.open_pull_request(key_config), True, True, ORDER_PULL_REQUEST))
        out.append(CommandInfo(strings.quit_app(key_config), True, True, ORDER_QUIT))
        return out

    def draw(self, surface: Surface) -> None:
        area = surface.area
        theme = self.env.theme

        background = Panel(
            Text.from_markup(strings.background_message(self.env.key_config)),
            title=f"[bold]{strings.BACKGROUND_TITLE}[/bold]",
            border_style=theme.background_border,
        )
        surface.render_widget(background, area.without_bottom_rows(1))
        surface.render_widget(render_commands(self.commands(), theme), area.bottom_rows(1))

        for popup in self.popups():
            popup.draw(surface, area)


def render_frame(app: App, width: int, height: int) -> Surface:
    surface = Surface(width, height)
    app.draw(surface)
    return surface


def run_live(app: App, console: Console) -> int:
    fd = sys.stdin.fileno()
    size = console.size
    with cbreak(fd) as has_input:
        if not has_input:
            log.warning("no keyboard input; press Ctrl+C to exit")
        with Live(console=console, screen=True, auto_refresh=False) as live:
            try:
                while not app.should_quit:
                    if console.size != size:
                        size = console.size
                        app.event(ResizeEvent(size.width, size.height))
                    if has_input:
                        raw = poll_input(fd, FRAME_SECONDS)
                    else:
                        raw = ""
                        time.sleep(FRAME_SECONDS)
                    # every pending event is handled before the frame is drawn
                    for ev in parse_keys(raw):
                        app.event(ev)
                    if app.should_quit:
                        break
                    live.update(render_frame(app, size.width, size.height), refresh=True)
            except KeyboardInterrupt:
                return 0
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Modal popup terminal UI")
    parser.add_argument("-l", "--live", action="store_true", help="Run interactive loop")
    parser.add_argument("--json", action="store_true", help="Emit command descriptors as JSON")
    parser.add_argument("--all", action="store_true", help="With --json, include commands of blocked components")
    parser.add_argument("--open", action="store_true", help="Start with the pull request popup visible")
    parser.add_argument("--config", default=default_config_path(), help="Optional JSON config file for theme/key overrides")
    parser.add_argument("--width", type=int, help="Snapshot width override")
    parser.add_argument("--height", type=int, help="Snapshot height override")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", help="Write logs to a rotating file")
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    try:
        theme, key_config = resolve_config(args.config)
    except ValueError as exc:
        log.error("config error: %s", exc)
        return 2

    app = App(Environment(theme=theme, key_config=key_config))
    if args.open:
        app.pull_request_popup.open()

    if args.json:
        payload = {
            "popup_visible": app.pull_request_popup.is_visible(),
            "commands": commands_to_dicts(app.commands(force_all=args.all)),
        }
        print(json.dumps(payload, indent=2))
        return 0

    console = Console()

    if args.live:
        # keep log records off the alternate screen
        setup_logging(args.log_level, args.log_file, console=False)
        return run_live(app, console)

    width = args.width or console.size.width
    height = args.height or console.size.height
    console.print(render_frame(app, width, height))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
