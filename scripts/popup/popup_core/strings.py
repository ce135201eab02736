"""User-facing strings and command texts."""

from __future__ import annotations

from popup_core.keys import KeyConfig
from popup_core.models import CommandText

APP_TITLE = "popup-tui"

CMD_GROUP_GENERAL = "-- General --"

PULL_REQUEST_TITLE = "Pull Request (Coming Soon)"
PULL_REQUEST_MESSAGE = [
    "",
    "Pull Request functionality is not yet",
    "implemented. This feature would allow",
    "creating pull requests to GitHub/GitLab",
    "directly from gitui.",
    "",
    "Press Esc to close this dialog.",
]

BACKGROUND_TITLE = "Status"


def background_message(key_config: KeyConfig) -> str:
    keys = key_config.keys
    return (
        f"Press [bold]{key_config.get_hint(keys.open_pull_request)}[/bold] to open a pull request, "
        f"[bold]{key_config.get_hint(keys.quit)}[/bold] to quit."
    )


def close_popup(key_config: KeyConfig) -> CommandText:
    return CommandText(
        f"Close [{key_config.get_hint(key_config.keys.exit_popup)}]",
        "close overlay (e.g pull request)",
        CMD_GROUP_GENERAL,
    )


def quit_app(key_config: KeyConfig) -> CommandText:
    return CommandText(
        f"Quit [{key_config.get_hint(key_config.keys.quit)}]",
        "quit the application",
        CMD_GROUP_GENERAL,
    )


def open_pull_request(key_config: KeyConfig) -> CommandText:
    return CommandText(
        f"Pull Request [{key_config.get_hint(key_config.keys.open_pull_request)}]",
        "create a pull request (not yet implemented)",
        CMD_GROUP_GENERAL,
    )
