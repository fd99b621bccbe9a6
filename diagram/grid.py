"""Grid normalization and border detection for diagram bodies.

The diagram body is turned into rows of classified cells. Rows are written
either compactly (one character per intersection) or, when a move number has
two or more digits, as space-separated tokens.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterator

from diagram.cells import Cell, classify_token
from diagram.errors import DiagramParseError
from shared.constants import BORDER_SENTINEL

logger = logging.getLogger(__name__)

_BORDER_RE = re.compile(r"[-|+]")
_NOISE_RE = re.compile(r"[\t\r$]")
_NEWLINES_RE = re.compile(r"\n+")
_DIGIT_RE = re.compile(r"[0-9]")

# Line and arrow definitions are never split into tokens
_LINE_MARKER = "{"

# Edge names returned by DiagramGrid.intersection_type
UPPER = "U"
BOTTOM = "B"
LEFT = "L"
RIGHT = "R"


@dataclass(frozen=True)
class BorderFlags:
    top: bool = False
    bottom: bool = False
    left: bool = False
    right: bool = False

    @property
    def has_horizontal(self) -> bool:
        return self.top or self.bottom

    @property
    def has_vertical(self) -> bool:
        return self.left or self.right


def is_non_compact(line: str) -> bool:
    """Check whether a row is written as space-separated tokens.

    A row is non-compact when it has a space between its tokens, contains a
    digit, and is not a line/arrow definition.
    """
    stripped = line.strip()
    return " " in stripped and bool(_DIGIT_RE.search(stripped)) and _LINE_MARKER not in stripped


def split_row(line: str) -> list[str]:
    """Split one normalized line into row tokens.

    Args:
        line: Row text with border glyphs already replaced by the sentinel

    Returns:
        list[str]: multi-character tokens for non-compact rows, single
        characters otherwise
    """
    if is_non_compact(line):
        return line.split()
    return list(line.replace(" ", ""))


def normalize_rows(body: str) -> list[list[str]]:
    """Turn a diagram body into token rows.

    Border glyphs become the sentinel, tabs/carriage returns/stray ``$`` are
    removed, and blank lines are dropped.

    Args:
        body: Newline separated diagram rows (directive prefix removed)

    Returns:
        list[list[str]]: one token list per non-empty row
    """
    text = _BORDER_RE.sub(BORDER_SENTINEL, body)
    text = _NOISE_RE.sub("", text)
    text = _NEWLINES_RE.sub("\n", text)

    rows = []
    for line in text.split("\n"):
        tokens = split_row(line)
        if tokens:
            rows.append(tokens)
    return rows


@dataclass(frozen=True)
class DiagramGrid:
    """Classified rows of a diagram plus the visible window inside the borders.

    Attributes:
        rows: Classified cells, row-major; rows may differ in length
        start_row: First row inside the top border
        end_row: Last row inside the bottom border
        start_col: First column inside the left border
        end_col: Last column inside the right border
        borders: Which board edges are drawn in the diagram
    """

    rows: tuple[tuple[Cell, ...], ...]
    start_row: int
    end_row: int
    start_col: int
    end_col: int
    borders: BorderFlags

    def cell_at(self, row: int, col: int) -> Cell | None:
        """Return the cell at (row, col), or None outside the grid."""
        if row < 0 or row >= len(self.rows):
            return None
        cells = self.rows[row]
        if col < 0 or col >= len(cells):
            return None
        return cells[col]

    def is_border(self, row: int, col: int) -> bool:
        cell = self.cell_at(row, col)
        return cell is not None and cell.is_border

    def intersection_type(self, row: int, col: int) -> str:
        """Check if the intersection is on an edge or in a corner.

        Returns:
            str: combination of 'U'(pper), 'B'(ottom), 'L'(eft), 'R'(ight),
            one letter per neighbouring border; empty for a middle point
        """
        edges = ""
        if self.is_border(row - 1, col):
            edges += UPPER
        if self.is_border(row + 1, col):
            edges += BOTTOM
        if self.is_border(row, col - 1):
            edges += LEFT
        if self.is_border(row, col + 1):
            edges += RIGHT
        return edges

    def visible_cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield (row, col, cell) for the visible window in row-major order.

        Positions beyond the end of a short row are skipped.
        """
        for row in range(self.start_row, self.end_row + 1):
            for col in range(self.start_col, self.end_col + 1):
                cell = self.cell_at(row, col)
                if cell is not None:
                    yield row, col, cell


def _probe(tokens: list[str], index: int) -> bool:
    return 0 <= index < len(tokens) and tokens[index] == BORDER_SENTINEL


def build_grid(body: str) -> DiagramGrid:
    """Normalize a diagram body and detect its borders.

    The probes run in a fixed order: the top border is the second token of
    the first row, the bottom border the second token of the last row. Only
    then is the first visible row fixed, and its first and last tokens are
    tested for the left and right borders.

    Args:
        body: Diagram rows collected from the directive lines

    Returns:
        DiagramGrid: classified grid with its visible window

    Raises:
        DiagramParseError: If no cell remains inside the borders
    """
    token_rows = normalize_rows(body)
    if not token_rows:
        raise DiagramParseError("diagram has no rows")

    start_row = 0
    end_row = len(token_rows) - 1

    top = _probe(token_rows[start_row], 1)
    if top:
        start_row += 1

    bottom = _probe(token_rows[end_row], 1)
    if bottom:
        end_row -= 1

    if start_row > end_row:
        raise DiagramParseError(f"empty row span ({start_row} > {end_row})")

    probe_row = token_rows[start_row]
    start_col = 0
    left = _probe(probe_row, 0)
    if left:
        start_col += 1

    end_col = len(probe_row) - 1
    right = end_col > 0 and _probe(probe_row, end_col)
    if right:
        end_col -= 1

    if start_col > end_col:
        raise DiagramParseError(f"empty column span ({start_col} > {end_col})")

    borders = BorderFlags(top=top, bottom=bottom, left=left, right=right)
    logger.debug(f"Borders: {borders}, rows {start_row}-{end_row}, cols {start_col}-{end_col}")

    rows = tuple(tuple(classify_token(token) for token in tokens) for tokens in token_rows)
    return DiagramGrid(
        rows=rows,
        start_row=start_row,
        end_row=end_row,
        start_col=start_col,
        end_col=end_col,
        borders=borders,
    )
