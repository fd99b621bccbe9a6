"""Assembly of complete SVG documents for diagrams and parse failures."""

from __future__ import annotations

import logging
import textwrap

from diagram.cells import StoneColor
from diagram.config import FontMetrics
from diagram.grid import DiagramGrid
from renderer import svg_elements as svg
from renderer.cell_renderer import CellRenderer
from renderer.coordinate_renderer import CoordinateRenderer
from shared.constants import (
    ERROR_CLASS,
    ERROR_FILL,
    ERROR_IMAGE_WIDTH,
    ERROR_LINE_HEIGHT,
    ERROR_LINE_WIDTH,
    GOBAN_CLASS,
    GOBAN_COLOR,
)
from shared.render_data import LayoutGeometry, RenderOutput, SvgSections

logger = logging.getLogger(__name__)


def render_diagram(
    grid: DiagramGrid,
    layout: LayoutGeometry,
    font: FontMetrics,
    first_color: StoneColor = StoneColor.BLACK,
    board_size: int = 19,
    start_move: int = 1,
    links: dict[str, str] | None = None,
    title: str = "",
) -> RenderOutput:
    """Render a parsed diagram into an SVG document.

    Args:
        grid: Normalized diagram grid
        layout: Geometry computed for the grid
        font: Character cell size
        first_color: Color of the stone labelled 1
        board_size: Board size used for coordinate labels
        start_move: Move number displayed for the stone labelled 1
        links: Anchor to URL map
        title: Raw diagram title

    Returns:
        RenderOutput: SVG document with the image size
    """
    sections = SvgSections()
    sections.background = svg.rect(0, 0, layout.width, layout.height, GOBAN_COLOR, GOBAN_CLASS)

    cells = CellRenderer(grid, layout, font, first_color=first_color, start_move=start_move, links=links)
    sections.body, sections.links = cells.render()

    if layout.coordinates:
        sections.coordinates = CoordinateRenderer(layout, grid.borders, board_size, font).render()

    xml = svg.open_svg(layout.width, layout.height, title) + sections.assemble() + svg.close_svg()
    return RenderOutput(xml=xml, width=layout.width, height=layout.height)


def render_error(message: str) -> RenderOutput:
    """Render an error placeholder image.

    The message is wrapped into short lines on a red rounded rectangle. The
    returned output has no width or height, which tells the caller that no
    diagram was drawn.
    """
    lines = textwrap.wrap(message, ERROR_LINE_WIDTH) or [message]
    height = len(lines) * ERROR_LINE_HEIGHT

    tspans = "".join(
        f'<tspan x="30" dy="{0 if i == 0 else "1.2em"}">{svg.escape(line)}</tspan>'
        for i, line in enumerate(lines)
    )
    xml = (
        svg.open_svg(ERROR_IMAGE_WIDTH, height)
        + f'<g class="{ERROR_CLASS}">\n'
        + f'<rect x="0" y="0" rx="20" ry="20" width="{ERROR_IMAGE_WIDTH}" height="{height}" '
        + f'fill="{ERROR_FILL}" stroke="black" />\n'
        + f'<text x="30" y="30" font-size="15" fill="black">{tspans}</text>\n'
        + "</g>\n"
        + svg.close_svg()
    )
    return RenderOutput(xml=xml, width=None, height=None)
