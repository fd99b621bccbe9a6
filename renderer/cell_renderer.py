"""Drawing of the individual cells of a diagram."""

from __future__ import annotations

import logging
import math

from diagram.cells import Cell, CellKind, StoneColor
from diagram.config import FontMetrics
from diagram.grid import DiagramGrid
from renderer import svg_elements as svg
from shared.constants import (
    BLACK,
    BLACK_STONE_CLASS,
    GOBAN_COLOR,
    LINK_COLOR,
    MARKUP_CLASS,
    MARKUP_RED,
    MARKUP_TEXT_RATIO,
    WHITE,
    WHITE_STONE_CLASS,
)
from shared.render_data import LayoutGeometry

logger = logging.getLogger(__name__)


class CellRenderer:
    """Maps each visible grid cell to SVG elements.

    Stones, numbered moves and letters are drawn into the diagram body.
    Cells whose token is a link anchor additionally get a clickable overlay,
    collected separately so it can be placed beneath the symbols.
    """

    STONE_FILL = {StoneColor.BLACK: BLACK, StoneColor.WHITE: WHITE}
    STONE_CLASS = {StoneColor.BLACK: BLACK_STONE_CLASS, StoneColor.WHITE: WHITE_STONE_CLASS}
    LINE_COLOR = BLACK
    HOSHI_COLOR = BLACK
    LETTER_COLOR = BLACK

    # Baseline correction for centering digits vertically in a cell
    TEXT_BASELINE = 12.5

    def __init__(
        self,
        grid: DiagramGrid,
        layout: LayoutGeometry,
        font: FontMetrics,
        first_color: StoneColor = StoneColor.BLACK,
        start_move: int = 1,
        links: dict[str, str] | None = None,
    ):
        """Initialize cell renderer.

        Args:
            grid: Normalized diagram grid
            layout: Geometry computed for the grid
            font: Character cell size
            first_color: Color of the stone labelled 1
            start_move: Move number displayed for the stone labelled 1
            links: Anchor to URL map
        """
        self.grid = grid
        self.layout = layout
        self.font = font
        self.odd_color = first_color
        self.even_color = first_color.opponent
        self.start_move = start_move
        self.links = links if links is not None else {}
        self.markup_font_size = math.floor(font.h * MARKUP_TEXT_RATIO)

    def render(self) -> tuple[str, str]:
        """Draw every visible cell, row by row.

        Returns:
            (body, links): symbol markup and link overlay markup
        """
        row_centers = self.layout.row_centers()
        col_centers = self.layout.column_centers()

        body = []
        links = []
        for row, col, cell in self.grid.visible_cells():
            x = col_centers[col - self.layout.start_col]
            y = row_centers[row - self.layout.start_row]

            url = self.links.get(cell.token)
            if url is not None:
                links.append(svg.link_area(x, y, self.layout.radius, url))

            body.append(self.render_cell(row, col, cell, x, y))

        return "".join(body), "".join(links)

    def render_cell(self, row: int, col: int, cell: Cell, x: float, y: float) -> str:
        """Return the markup for one cell centered at (x, y)."""
        if cell.kind is CellKind.STONE:
            return self._draw_stone(cell, x, y)
        if cell.is_intersection:
            return self._draw_intersection(row, col, cell, x, y)
        if cell.kind is CellKind.NUMBER:
            return self._draw_numbered_move(cell, x, y)
        if cell.kind is CellKind.LETTER:
            return self._draw_letter(row, col, cell, x, y)
        if cell.kind is CellKind.UNKNOWN:
            logger.debug(f"Skipping unknown symbol {cell.token!r} at row {row}, col {col}")
        return ""

    def _stone(self, color: StoneColor, x: float, y: float) -> str:
        return svg.stone(
            x, y, self.layout.radius, BLACK, self.STONE_FILL[color], self.STONE_CLASS[color]
        )

    def _draw_stone(self, cell: Cell, x: float, y: float) -> str:
        item = self._stone(cell.color, x, y)
        if cell.mark is not None:
            item += svg.mark(x, y, self.layout.radius, MARKUP_RED, cell.mark)
        return item

    def _draw_intersection(self, row: int, col: int, cell: Cell, x: float, y: float) -> str:
        edges = self.grid.intersection_type(row, col)
        item = svg.intersection(x, y, self.layout.radius, self.LINE_COLOR, edges)
        if cell.mark is not None:
            color = self.HOSHI_COLOR if cell.kind is CellKind.EMPTY else MARKUP_RED
            item += svg.mark(x, y, self.layout.radius, color, cell.mark)
        return item

    def move_color(self, cell: Cell) -> StoneColor:
        """Color of a numbered move: odd numbers belong to the first player."""
        return self.odd_color if cell.value % 2 == 1 else self.even_color

    def move_label(self, cell: Cell) -> str:
        return str(cell.move_number + self.start_move - 1)

    def _draw_numbered_move(self, cell: Cell, x: float, y: float) -> str:
        color = self.move_color(cell)
        item = self._stone(color, x, y)
        item += self._label(self.move_label(cell), self.STONE_FILL[color.opponent], x, y)
        return item

    def _draw_letter(self, row: int, col: int, cell: Cell, x: float, y: float) -> str:
        edges = self.grid.intersection_type(row, col)
        item = svg.intersection(x, y, self.layout.radius, self.LINE_COLOR, edges)
        # Hide the lines under the letter; linked letters show the link color
        fill = LINK_COLOR if cell.token in self.links else GOBAN_COLOR
        item += svg.stone(x, y, self.layout.radius, GOBAN_COLOR, fill)
        item += self._label(cell.token, self.LETTER_COLOR, x, y)
        return item

    def _label(self, label: str, color: str, x: float, y: float) -> str:
        x_offset = self.font.w if len(label) >= 2 else self.font.w / 2
        y_offset = self.font.h / 2 - self.TEXT_BASELINE
        return svg.text(x - x_offset, y - y_offset, label, color, MARKUP_CLASS, self.markup_font_size)
