#!/usr/bin/env python3
"""Thin entrypoint for the popup terminal UI."""

from __future__ import annotations

from popup_core.app import main


if __name__ == "__main__":
    raise SystemExit(main())
