"""Key bindings: parsing, matching and display hints."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any

from popup_core.models import Event, KeyEvent, KeyModifiers

NAMED_KEYS = {
    "esc": "Esc",
    "enter": "Enter",
    "tab": "Tab",
    "backtab": "BackTab",
    "backspace": "Backspace",
    "delete": "Del",
    "insert": "Ins",
    "home": "Home",
    "end": "End",
    "pageup": "PgUp",
    "pagedown": "PgDn",
    "up": "↑",
    "down": "↓",
    "left": "←",
    "right": "→",
    "space": "Space",
    **{f"f{n}": f"F{n}" for n in range(1, 13)},
}

KEY_ALIASES = {
    "escape": "esc",
    "return": "enter",
    "del": "delete",
    "pgup": "pageup",
    "pgdn": "pagedown",
    " ": "space",
}

MODIFIER_NAMES = {
    "ctrl": KeyModifiers.CONTROL,
    "control": KeyModifiers.CONTROL,
    "alt": KeyModifiers.ALT,
    "meta": KeyModifiers.ALT,
    "shift": KeyModifiers.SHIFT,
}


@dataclass(frozen=True)
class KeyBinding:
    code: str
    modifiers: KeyModifiers = KeyModifiers.NONE


def parse_binding(text: str) -> KeyBinding:
    """Parse a binding such as ``esc``, ``ctrl+c`` or ``shift+p``."""
    raw = str(text).strip()
    if not raw:
        raise ValueError("empty key binding")
    if raw == "+":
        return KeyBinding("+")

    if raw.endswith("++"):
        mods, key = raw[:-2].split("+"), "+"
    else:
        *mods, key = raw.split("+")

    modifiers = KeyModifiers.NONE
    for mod in mods:
        flag = MODIFIER_NAMES.get(mod.strip().lower())
        if flag is None:
            raise ValueError(f"unknown modifier '{mod}' in binding: {text}")
        modifiers |= flag

    if len(key) == 1:
        if key.isalpha() and modifiers & KeyModifiers.CONTROL:
            # terminals report ctrl+letter without case or shift
            return KeyBinding(key.lower(), modifiers & ~KeyModifiers.SHIFT)
        if key.isalpha() and key.isupper():
            modifiers |= KeyModifiers.SHIFT
        elif key.isalpha() and modifiers & KeyModifiers.SHIFT:
            key = key.upper()
        return KeyBinding(key, modifiers)

    name = KEY_ALIASES.get(key.lower(), key.lower())
    if name not in NAMED_KEYS:
        raise ValueError(f"unknown key '{key}' in binding: {text}")
    return KeyBinding(name, modifiers)


def key_match(ev: Event, binding: KeyBinding) -> bool:
    if not isinstance(ev, KeyEvent) or ev.kind != "press":
        return False
    return ev.code == binding.code and ev.modifiers == binding.modifiers


@dataclass(frozen=True)
class KeysList:
    exit_popup: KeyBinding = KeyBinding("esc")
    quit: KeyBinding = KeyBinding("q")
    open_pull_request: KeyBinding = KeyBinding("P", KeyModifiers.SHIFT)


KEY_NAMES = {f.name for f in fields(KeysList)}


@dataclass(frozen=True)
class KeyConfig:
    keys: KeysList = field(default_factory=KeysList)

    def get_hint(self, binding: KeyBinding) -> str:
        code = binding.code
        mods = binding.modifiers
        if len(code) == 1 and code.isalpha():
            # shift is already visible in the letter case
            mods &= ~KeyModifiers.SHIFT
            label = code
        else:
            label = NAMED_KEYS.get(code, code)

        prefix = ""
        if mods & KeyModifiers.CONTROL:
            prefix += "^"
        if mods & KeyModifiers.ALT:
            prefix += "Alt+"
        if mods & KeyModifiers.SHIFT:
            prefix += "Shift+"
        return f"{prefix}{label}"


def key_config_from_config(overrides: dict[str, Any] | None) -> KeyConfig:
    if overrides is None:
        return KeyConfig()
    if not isinstance(overrides, dict):
        raise ValueError("keys config must be an object")

    values: dict[str, KeyBinding] = {}
    for name, value in overrides.items():
        if name not in KEY_NAMES:
            raise ValueError(f"unknown key action: {name}")
        values[name] = parse_binding(value)
    return KeyConfig(keys=replace(KeysList(), **values))
