"""
Fixed-size drawing surface.

Renderables are placed onto named areas of a cell grid. Each one is
rendered with Rich at its area's size (or a wider natural width) and
clipped to the area, so content that does not fit is cut off by the
surface rather than truncated up front. Later placements draw over
earlier ones.
"""

from dataclasses import dataclass

from rich.cells import cell_len
from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.measure import Measurement
from rich.segment import Segment
from rich.style import Style

from ledger.ui.layout import Area

# One grid cell: character and style. "" marks the right half of a wide character.
Cell = tuple[str, Style | None]

BLANK: Cell = (" ", None)


@dataclass(frozen=True)
class Layer:
    """A renderable placed on the screen."""

    name: str
    renderable: RenderableType
    area: Area
    render_width: int


class Screen:
    """A width x height frame assembled from placed renderables."""

    def __init__(self, width: int, height: int):
        self.width = max(0, width)
        self.height = max(0, height)
        self._layers: list[Layer] = []

    @property
    def area(self) -> Area:
        return Area(0, 0, self.width, self.height)

    @property
    def layers(self) -> tuple[Layer, ...]:
        return tuple(self._layers)

    def place(
        self,
        name: str,
        renderable: RenderableType,
        area: Area,
        render_width: int | None = None,
    ) -> None:
        """
        Place a renderable on an area.

        Args:
            name: Layer name for lookups
            renderable: Anything Rich can render
            area: Where to draw; empty areas are ignored
            render_width: Render at this width and clip to the area (default: area width)
        """
        if area.is_empty:
            return
        self._layers.append(Layer(name, renderable, area, max(area.width, render_width or 0)))

    def layer(self, name: str) -> RenderableType:
        """Return the renderable of a placed layer."""
        for layer in self._layers:
            if layer.name == name:
                return layer.renderable
        raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return any(layer.name == name for layer in self._layers)

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        return Measurement(self.width, self.width)

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        for row in self.paint(console, options):
            yield from _merge_cells(row)
            yield Segment.line()

    def paint(self, console: Console, options: ConsoleOptions) -> list[list[Cell]]:
        """Render all layers into a grid of cells."""
        grid = [[BLANK] * self.width for _ in range(self.height)]
        base_options = options.update(justify=None, overflow=None, no_wrap=False, highlight=False)

        for layer in self._layers:
            clip = layer.area.intersection(self.area)
            if clip.is_empty:
                continue
            lines = console.render_lines(
                layer.renderable,
                base_options.update_dimensions(layer.render_width, layer.area.height),
                pad=False,
            )
            for row_offset, line in enumerate(lines):
                y = layer.area.y + row_offset
                if y < clip.y or y >= clip.bottom:
                    continue
                _draw_line(grid[y], line, layer.area.x, clip)

        return grid


def _draw_line(row: list[Cell], line: list[Segment], x: int, clip: Area) -> None:
    for segment in line:
        if segment.control:
            continue
        for char in segment.text:
            width = cell_len(char)
            if width == 0:
                continue
            if x + width > clip.right:
                return
            if x >= clip.x:
                _put(row, x, char, segment.style, width)
            x += width


def _put(row: list[Cell], x: int, char: str, style: Style | None, width: int) -> None:
    # Overwriting half of a wide character blanks the other half
    if row[x][0] == "" and x > 0:
        row[x - 1] = (" ", row[x - 1][1])
    end = x + width
    if end < len(row) and row[end][0] == "":
        row[end] = (" ", row[end][1])

    row[x] = (char, style)
    if width == 2:
        row[x + 1] = ("", style)


def _merge_cells(row: list[Cell]):
    """Join runs of equally styled cells into segments."""
    text: list[str] = []
    style: Style | None = None
    for char, char_style in row:
        if not char:
            continue
        if text and char_style != style:
            yield Segment("".join(text), style)
            text = []
        style = char_style
        text.append(char)
    if text:
        yield Segment("".join(text), style)
