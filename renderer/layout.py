"""Pixel layout of a diagram image.

The goban is a matrix of square cells, each holding a stone, a symbol or an
empty intersection. A cell must fit one character of the font, so its size is
the diagonal of the font's character box. Two pixels of margin surround the
board, and room for coordinate labels is added on the top and left when they
are shown.
"""

from __future__ import annotations

import logging

import numpy as np

from diagram.config import FontMetrics
from diagram.errors import DiagramParseError
from diagram.grid import DiagramGrid
from shared.constants import BASE_OFFSET, IMAGE_MARGIN
from shared.render_data import LayoutGeometry

logger = logging.getLogger(__name__)


def cell_diameter(font: FontMetrics) -> int:
    """Return the cell size: the floored diagonal of the character box."""
    return int(np.floor(np.hypot(font.h, font.w)))


def coordinate_margins(font: FontMetrics) -> tuple[int, int]:
    """Return the (left, top) margins reserved for coordinate labels."""
    return font.w * 2 + 4, font.h + 2


def compute_layout(grid: DiagramGrid, font: FontMetrics, coordinates: bool) -> LayoutGeometry:
    """Compute image size and offsets for a grid.

    Coordinates need both a horizontal and a vertical border to know which
    part of the board is shown; without them they are turned off.

    Args:
        grid: Normalized diagram grid
        font: Character cell size
        coordinates: Whether coordinate labels were requested

    Returns:
        LayoutGeometry: geometry of the image
    """
    diameter = cell_diameter(font)
    width = diameter * (1 + grid.end_col - grid.start_col) + IMAGE_MARGIN
    height = diameter * (1 + grid.end_row - grid.start_row) + IMAGE_MARGIN
    offset_x = BASE_OFFSET
    offset_y = BASE_OFFSET

    if coordinates:
        if grid.borders.has_horizontal and grid.borders.has_vertical:
            margin_x, margin_y = coordinate_margins(font)
            width += margin_x
            offset_x += margin_x
            height += margin_y
            offset_y += margin_y
        else:
            logger.debug("Coordinates disabled: missing horizontal or vertical border")
            coordinates = False

    return LayoutGeometry(
        diameter=diameter,
        radius=diameter / 2,
        width=width,
        height=height,
        offset_x=offset_x,
        offset_y=offset_y,
        start_row=grid.start_row,
        end_row=grid.end_row,
        start_col=grid.start_col,
        end_col=grid.end_col,
        coordinates=coordinates,
    )


def check_image_size(layout: LayoutGeometry, font: FontMetrics) -> None:
    """Reject images smaller than one character cell.

    Raises:
        DiagramParseError: If the image is narrower or lower than the font cell
    """
    if layout.width < font.w or layout.height < font.h:
        raise DiagramParseError(
            f"image {layout.width}x{layout.height} smaller than font cell {font.w}x{font.h}"
        )
