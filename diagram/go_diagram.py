"""Go diagram in Sensei's Library ASCII format, rendered to SVG.

Example usage:
    diagram = GoDiagram(
        "$$Bc A corner\\n"
        "$$ +-----\\n"
        "$$ | . . .\\n"
        "$$ | . 1 .\\n"
        "$$ | . . ."
    )
    output = diagram.create_svg()
    output.xml, output.width, output.height

The diagram is parsed once at construction. If parsing fails the diagram is
permanently invalid and every render returns an error image instead.
See https://senseis.xmp.net/?HowDiagramsWork for the notation.
"""

from __future__ import annotations

import logging

from diagram.cells import StoneColor
from diagram.config import FontMetrics
from diagram.errors import DiagramParseError
from diagram.grid import DiagramGrid, build_grid
from diagram.header_parser import HeaderInfo, parse_header, scan_directive_lines
from renderer import svg_elements as svg
from renderer.layout import check_image_size, compute_layout
from renderer.svg_renderer import render_diagram, render_error
from shared.constants import FAILURE_MESSAGE
from shared.render_data import ExportResult, LayoutGeometry, RenderOutput

logger = logging.getLogger(__name__)


class GoDiagram:
    """Parses one ASCII diagram and renders it as an SVG image."""

    def __init__(self, input_diagram: str, font: FontMetrics | None = None):
        """Parse a diagram.

        Args:
            input_diagram: Diagram text in Sensei's Library format
            font: Character cell size in pixels (default: 16x8)
        """
        self.input_diagram = input_diagram
        self.font = font if font is not None else FontMetrics()
        self.failure_message = ""

        self.header = HeaderInfo()
        self.links: dict[str, str] = {}
        self.grid: DiagramGrid | None = None
        self.layout: LayoutGeometry | None = None

        try:
            self._parse()
        except DiagramParseError as e:
            # The raw input is not logged, only the reason
            logger.warning(f"Parsing of ASCII diagram failed: {e}")
            self.failure_message = FAILURE_MESSAGE
            self.grid = None
            self.layout = None

    def _parse(self) -> None:
        lines = self.input_diagram.split("\n")
        while len(lines) > 1 and not lines[0].strip():
            lines.pop(0)
        self.header = parse_header(lines[0])

        content = scan_directive_lines(lines[1:])
        self.links = content.links

        grid = build_grid(content.body)
        layout = compute_layout(grid, self.font, self.header.coordinates)
        check_image_size(layout, self.font)

        self.grid = grid
        self.layout = layout
        logger.debug(
            f"Parsed diagram: {layout.visible_cols}x{layout.visible_rows} cells, "
            f"image {layout.width}x{layout.height}, {len(self.links)} links"
        )

    # Query surface ------------------------------------------------------------

    @property
    def valid(self) -> bool:
        return self.grid is not None and self.layout is not None

    @property
    def first_color(self) -> StoneColor:
        return self.header.first_color

    @property
    def board_size(self) -> int:
        return self.header.board_size

    @property
    def coordinates(self) -> bool:
        """Whether coordinates are drawn (requested and enough borders shown)."""
        return self.valid and self.layout.coordinates

    @property
    def image_width(self) -> int | None:
        return self.layout.width if self.valid else None

    @property
    def image_height(self) -> int | None:
        return self.layout.height if self.valid else None

    def get_title(self) -> str:
        """Return the HTML-escaped diagram title."""
        return svg.escape(self.header.title)

    def get_linkmap(self) -> dict[str, str]:
        """Return the anchor to URL map of the diagram."""
        return dict(self.links)

    def create_svg(self) -> RenderOutput:
        """Render the diagram.

        Returns:
            RenderOutput: SVG document and image size; for a diagram that
            failed to parse, an error image with width and height None
        """
        if not self.valid:
            return render_error(self.failure_message or FAILURE_MESSAGE)

        return render_diagram(
            self.grid,
            self.layout,
            self.font,
            first_color=self.header.first_color,
            board_size=self.header.board_size,
            start_move=self.header.start_move,
            links=self.links,
            title=self.header.title,
        )

    def create_sgf(self) -> ExportResult:
        """Export the diagram as an SGF game record (not supported yet)."""
        return ExportResult(format="sgf", content="", implemented=False)
