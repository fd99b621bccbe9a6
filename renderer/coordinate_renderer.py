"""Coordinate labels along the top and left edges of a diagram."""

from __future__ import annotations

import logging

import numpy as np

from diagram.config import FontMetrics
from diagram.grid import BorderFlags
from renderer import svg_elements as svg
from shared.constants import BLACK, COORD_CLASS, COORD_TEXT_RATIO, COORDINATE_LABELS
from shared.render_data import LayoutGeometry

logger = logging.getLogger(__name__)


def first_column_index(borders: BorderFlags, board_size: int, visible_cols: int) -> int:
    """Index into COORDINATE_LABELS of the leftmost visible column.

    A diagram showing only the right edge of the board is assumed to show
    its last columns.
    """
    if borders.left:
        return 0
    if borders.right:
        return max(board_size - visible_cols, 0)
    return 0


def first_row_number(borders: BorderFlags, board_size: int, visible_rows: int) -> int:
    """Row number of the topmost visible row.

    Rows are numbered from the bottom edge, so a diagram showing the bottom
    edge counts down from its own height, one showing only the top edge from
    the board size.
    """
    if borders.bottom:
        return visible_rows
    if borders.top:
        return board_size
    return 0


class CoordinateRenderer:
    """Draws row numbers left of the board and column letters above it."""

    # Pixel offsets tuned for the default 16x8 font
    LEFT_X = 6
    TOP_Y = 18
    ROW_BASELINE = 14

    def __init__(self, layout: LayoutGeometry, borders: BorderFlags, board_size: int, font: FontMetrics):
        self.layout = layout
        self.borders = borders
        self.board_size = board_size
        self.font = font
        self.font_size = font.h * COORD_TEXT_RATIO

    def render(self) -> str:
        return self.render_row_labels() + self.render_column_labels()

    def render_row_labels(self) -> str:
        """Draw one number per visible row, counting down from the top."""
        rows = self.layout.visible_rows
        first = first_row_number(self.borders, self.board_size, rows)
        numbers = first - np.arange(rows)
        ys = self.ROW_BASELINE + self.font.h + self.layout.radius - self.font.h / 2 + 2 * self.layout.radius * np.arange(rows)

        left_x = self.LEFT_X + self.font.w
        elements = []
        for number, y in zip(numbers, ys):
            x_offset = self.font.w if number >= 10 else self.font.w / 2
            elements.append(svg.text(left_x - x_offset, y, str(number), BLACK, COORD_CLASS, self.font_size))
        return "".join(elements)

    def render_column_labels(self) -> str:
        """Draw one letter per visible column, skipping 'I'."""
        cols = self.layout.visible_cols
        first = first_column_index(self.borders, self.board_size, cols)
        xs = self.layout.column_centers() - self.font.w / 2

        elements = []
        for index, x in enumerate(xs, start=first):
            if index >= len(COORDINATE_LABELS):
                logger.debug(f"No coordinate label for column index {index}")
                break
            elements.append(svg.text(x, self.TOP_Y, COORDINATE_LABELS[index], BLACK, COORD_CLASS, self.font_size))
        return "".join(elements)
