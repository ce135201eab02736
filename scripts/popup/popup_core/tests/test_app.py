from __future__ import annotations

import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from popup_core.app import App, Environment, main, render_frame  # noqa: E402
from popup_core.components import Component, command_pump, event_pump, visibility_blocking  # noqa: E402
from popup_core.components.cmdbar import available_commands, render_commands  # noqa: E402
from popup_core.keys import KeyConfig  # noqa: E402
from popup_core.models import (  # noqa: E402
    CommandBlocking,
    CommandInfo,
    CommandText,
    EventState,
    KeyEvent,
    KeyModifiers,
    ResizeEvent,
)
from popup_core.theme import Theme  # noqa: E402

OPEN_PR = KeyEvent("P", KeyModifiers.SHIFT)


class FakeComponent(Component):
    def __init__(self, name: str, consume: bool = False, visible: bool = False):
        self.name = name
        self.consume = consume
        self.visible = visible
        self.seen = []
        self.asked = 0

    def draw(self, surface, area):
        pass

    def commands(self, out, force_all):
        self.asked += 1
        out.append(CommandInfo(CommandText(self.name, "", "test"), True, self.visible))
        return visibility_blocking(self)

    def event(self, ev):
        self.seen.append(ev)
        return EventState.CONSUMED if self.consume else EventState.NOT_CONSUMED

    def is_visible(self):
        return self.visible

    def hide(self):
        self.visible = False

    def show(self):
        self.visible = True


def make_app() -> App:
    return App(Environment(theme=Theme(), key_config=KeyConfig()))


class RouterTests(unittest.TestCase):
    def test_event_pump_stops_at_front_consumer(self):
        back = FakeComponent("back", consume=True)
        front = FakeComponent("front", consume=True)
        self.assertEqual(event_pump(KeyEvent("x"), [back, front]), EventState.CONSUMED)
        self.assertEqual(len(front.seen), 1)
        self.assertEqual(back.seen, [])

    def test_event_pump_falls_through(self):
        back = FakeComponent("back")
        front = FakeComponent("front")
        self.assertEqual(event_pump(KeyEvent("x"), [back, front]), EventState.NOT_CONSUMED)
        self.assertEqual(len(back.seen), 1)

    def test_command_pump_stops_at_blocking(self):
        back = FakeComponent("back")
        front = FakeComponent("front", visible=True)
        out = []
        self.assertTrue(command_pump(out, False, [back, front]))
        self.assertEqual([cmd.text.name for cmd in out], ["front"])
        self.assertEqual(back.asked, 0)

    def test_command_pump_force_all(self):
        back = FakeComponent("back")
        front = FakeComponent("front", visible=True)
        out = []
        self.assertFalse(command_pump(out, True, [back, front]))
        self.assertEqual([cmd.text.name for cmd in out], ["front", "back"])

    def test_visibility_blocking(self):
        component = FakeComponent("c")
        self.assertEqual(visibility_blocking(component), CommandBlocking.PASSING_ON)
        component.show()
        self.assertEqual(visibility_blocking(component), CommandBlocking.BLOCKING)


class AppTests(unittest.TestCase):
    def test_quit_key(self):
        app = make_app()
        self.assertEqual(app.event(KeyEvent("q")), EventState.CONSUMED)
        self.assertTrue(app.should_quit)

    def test_open_key_shows_popup(self):
        app = make_app()
        self.assertEqual(app.event(OPEN_PR), EventState.CONSUMED)
        self.assertTrue(app.pull_request_popup.is_visible())

    def test_popup_swallows_app_keys(self):
        app = make_app()
        app.event(OPEN_PR)
        self.assertEqual(app.event(KeyEvent("q")), EventState.CONSUMED)
        self.assertFalse(app.should_quit)
        app.event(KeyEvent("esc"))
        self.assertFalse(app.pull_request_popup.is_visible())
        app.event(KeyEvent("q"))
        self.assertTrue(app.should_quit)

    def test_unhandled_events(self):
        app = make_app()
        self.assertEqual(app.event(KeyEvent("z")), EventState.NOT_CONSUMED)
        self.assertEqual(app.event(ResizeEvent(80, 24)), EventState.NOT_CONSUMED)

    def test_commands_when_hidden(self):
        names = [cmd.text.name for cmd in available_commands(make_app().commands())]
        self.assertEqual(names, ["Pull Request [P]", "Quit [q]"])

    def test_commands_when_popup_visible(self):
        app = make_app()
        app.pull_request_popup.open()
        commands = app.commands()
        self.assertEqual([cmd.text.name for cmd in commands], ["Close [Esc]"])
        self.assertEqual(len(app.commands(force_all=True)), 3)

    def test_command_bar_text(self):
        app = make_app()
        text = render_commands(app.commands(), app.env.theme)
        self.assertEqual(text.plain, "Pull Request [P] Quit [q]")

    def test_frame_with_popup(self):
        app = make_app()
        app.pull_request_popup.open()
        lines = render_frame(app, 80, 24).lines()
        self.assertTrue(lines[-1].startswith("Close [Esc]"))
        self.assertNotIn("Quit", lines[-1])
        self.assertIn("Pull Request (Coming Soon)", "\n".join(lines))
        self.assertIn("Status", lines[0])

    def test_frame_without_popup(self):
        lines = render_frame(make_app(), 80, 24).lines()
        self.assertTrue(lines[-1].startswith("Pull Request [P] Quit [q]"))
        self.assertNotIn("Coming Soon", "\n".join(lines))


class MainTests(unittest.TestCase):
    def test_json_output(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            rc = main(["--json", "--open"])
        self.assertEqual(rc, 0)
        payload = json.loads(out.getvalue())
        self.assertTrue(payload["popup_visible"])
        self.assertEqual([cmd["name"] for cmd in payload["commands"]], ["Close [Esc]"])

    def test_json_output_all(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            main(["--json", "--open", "--all"])
        payload = json.loads(out.getvalue())
        self.assertEqual(len(payload["commands"]), 3)

    def test_snapshot(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            rc = main(["--open", "--width", "60", "--height", "12"])
        self.assertEqual(rc, 0)
        self.assertIn("Pull Request (Coming Soon)", out.getvalue())

    def test_config_error_exit_code(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg_path = Path(tmp) / "cfg.json"
            cfg_path.write_text(json.dumps({"keys": {"exit_popup": "hyper+x"}}))
            with contextlib.redirect_stderr(io.StringIO()):
                rc = main(["--json", "--config", str(cfg_path)])
        self.assertEqual(rc, 2)

    def test_config_applies_to_commands(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg_path = Path(tmp) / "cfg.json"
            cfg_path.write_text(json.dumps({"keys": {"quit": "ctrl+c"}}))
            out = io.StringIO()
            with contextlib.redirect_stdout(out):
                main(["--json", "--config", str(cfg_path)])
        names = [cmd["name"] for cmd in json.loads(out.getvalue())["commands"]]
        self.assertIn("Quit [^c]", names)


if __name__ == "__main__":
    unittest.main()
