"""Value objects passed between the diagram parser and the SVG renderer.

These classes carry the derived data of a render call: the pixel geometry
computed from the grid, the named markup sections of the image, and the final
output handed back to the caller. None of them hold references to the parser,
so a render call never mutates the diagram that produced them.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class LayoutGeometry:
    """Pixel geometry of one diagram image.

    Attributes:
        diameter: Cell size in pixels (floor of the font cell diagonal)
        radius: Half the cell size; stones are drawn with this radius
        width: Image width in pixels
        height: Image height in pixels
        offset_x: Left edge of the first visible column
        offset_y: Top edge of the first visible row
        start_row: First visible grid row
        end_row: Last visible grid row
        start_col: First visible grid column
        end_col: Last visible grid column
        coordinates: Whether coordinate labels are drawn
    """

    diameter: int
    radius: float
    width: int
    height: int
    offset_x: int
    offset_y: int
    start_row: int
    end_row: int
    start_col: int
    end_col: int
    coordinates: bool

    @property
    def visible_rows(self) -> int:
        return self.end_row - self.start_row + 1

    @property
    def visible_cols(self) -> int:
        return self.end_col - self.start_col + 1

    def row_centers(self) -> np.ndarray:
        """Return the y pixel position of every visible row's center."""
        return self.offset_y + self.radius + 2 * self.radius * np.arange(self.visible_rows)

    def column_centers(self) -> np.ndarray:
        """Return the x pixel position of every visible column's center."""
        return self.offset_x + self.radius + 2 * self.radius * np.arange(self.visible_cols)


@dataclass
class SvgSections:
    """Markup fragments of a diagram image, concatenated in a fixed order."""

    background: str = ""
    links: str = ""
    body: str = ""
    coordinates: str = ""

    def assemble(self) -> str:
        return self.background + self.links + self.body + self.coordinates


@dataclass(frozen=True)
class RenderOutput:
    """Result of rendering a diagram.

    Attributes:
        xml: Complete SVG document
        width: Image width in pixels, or None when parsing failed
        height: Image height in pixels, or None when parsing failed
    """

    xml: str
    width: int | None
    height: int | None

    @property
    def failed(self) -> bool:
        return self.width is None or self.height is None


@dataclass(frozen=True)
class ExportResult:
    """Result of exporting a diagram to another game record format.

    ``implemented`` is False when the format is not supported yet; callers
    must check it instead of treating an empty ``content`` as success.
    """

    format: str
    content: str
    implemented: bool
