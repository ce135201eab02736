"""Fixed-size cell buffer that components draw Rich renderables into.

A ``Surface`` holds one row of ``Segment`` objects per terminal line, each
exactly ``width`` cells wide. Widgets are rendered into a sub-rectangle with
``render_widget`` and spliced over whatever was drawn before, which is what
lets a popup sit on top of the screen beneath it. The surface is a Rich
renderable itself, so a finished frame can be printed or handed to
``rich.live.Live``.
"""

from __future__ import annotations

import io

from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.segment import Segment

from popup_core.models import Rect


class SurfaceError(Exception):
    """Raised when drawing falls outside the surface."""


class Surface:
    def __init__(self, width: int, height: int, console: Console | None = None):
        if width < 0 or height < 0:
            raise SurfaceError(f"invalid surface size: {width}x{height}")
        self.width = width
        self.height = height
        self.console = console or Console(
            width=max(1, width),
            height=max(1, height),
            file=io.StringIO(),
            force_terminal=True,
            color_system="truecolor",
        )
        self._rows: list[list[Segment]] = [self._blank(width) for _ in range(height)]

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    @staticmethod
    def _blank(width: int) -> list[Segment]:
        return [Segment(" " * width)] if width else []

    def _check(self, rect: Rect) -> None:
        if rect.width < 0 or rect.height < 0 or not self.area.contains(rect):
            raise SurfaceError(f"{rect} is outside the surface area {self.area}")

    def _splice(self, y: int, x: int, width: int, segments: list[Segment]) -> None:
        before, _, after = Segment.divide(self._rows[y], [x, x + width, self.width])
        self._rows[y] = [*before, *segments, *after]

    def clear(self, rect: Rect) -> None:
        self._check(rect)
        if rect.is_empty():
            return
        for y in range(rect.y, rect.bottom):
            self._splice(y, rect.x, rect.width, self._blank(rect.width))

    def render_widget(self, renderable: RenderableType, rect: Rect) -> None:
        self._check(rect)
        if rect.is_empty():
            return
        options = self.console.options.update_dimensions(rect.width, rect.height)
        lines = self.console.render_lines(renderable, options, pad=True)
        for offset, line in enumerate(lines[: rect.height]):
            line = Segment.adjust_line_length(line, rect.width)
            self._splice(rect.y + offset, rect.x, rect.width, line)

    def lines(self) -> list[str]:
        return ["".join(segment.text for segment in row) for row in self._rows]

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        for row in self._rows:
            yield from row
            yield Segment.line()
