"""Raw terminal input: non-canonical mode, polling and key decoding."""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Iterator

from popup_core.models import KeyEvent, KeyModifiers

log = logging.getLogger(__name__)

ESCAPE_SEQUENCES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageup",
    "\x1b[6~": "pagedown",
    "\x1b[Z": "backtab",
    "\x1bOP": "f1",
    "\x1bOQ": "f2",
    "\x1bOR": "f3",
    "\x1bOS": "f4",
}

# longest first so "\x1b[1~" wins over a bare escape
_SEQUENCES = sorted(ESCAPE_SEQUENCES.items(), key=lambda item: len(item[0]), reverse=True)

CONTROL_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
    " ": "space",
}


def _char_event(ch: str, modifiers: KeyModifiers = KeyModifiers.NONE) -> KeyEvent:
    if ch in CONTROL_KEYS:
        return KeyEvent(CONTROL_KEYS[ch], modifiers)
    code = ord(ch)
    if 0 < code < 32:
        return KeyEvent(chr(code + 96), modifiers | KeyModifiers.CONTROL)
    if ch.isalpha() and ch.isupper():
        modifiers |= KeyModifiers.SHIFT
    return KeyEvent(ch, modifiers)


def parse_keys(raw: str) -> list[KeyEvent]:
    events: list[KeyEvent] = []
    pos = 0
    while pos < len(raw):
        if raw[pos] != "\x1b":
            events.append(_char_event(raw[pos]))
            pos += 1
            continue

        for seq, name in _SEQUENCES:
            if raw.startswith(seq, pos):
                events.append(KeyEvent(name))
                pos += len(seq)
                break
        else:
            following = raw[pos + 1 : pos + 2]
            if following and following != "\x1b":
                events.append(_char_event(following, KeyModifiers.ALT))
                pos += 2
            else:
                events.append(KeyEvent("esc"))
                pos += 1
    return events


@contextmanager
def cbreak(fd: int) -> Iterator[bool]:
    """Disable canonical mode and echo on ``fd`` for the duration of the block.

    Leaves output processing intact so Rich Live's alternate screen keeps
    working over SSH. Yields False when the terminal cannot be configured;
    callers then run without keyboard input.
    """
    try:
        import termios
    except ImportError:
        yield False
        return

    try:
        old_settings = termios.tcgetattr(fd)
    except termios.error as exc:
        log.warning("keyboard input unavailable: %s", exc)
        yield False
        return

    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    new[6][termios.VMIN] = 0
    new[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSADRAIN, new)
    try:
        yield True
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def poll_input(fd: int, timeout: float = 0.0) -> str:
    """Non-blocking read of whatever bytes are pending on ``fd``."""
    import select

    ready, _, _ = select.select([fd], [], [], timeout)
    if not ready:
        return ""
    try:
        return os.read(fd, 64).decode("utf-8", errors="ignore")
    except OSError:
        return ""
