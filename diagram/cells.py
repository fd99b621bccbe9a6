"""Tagged cell model for diagram grids.

Each token of a normalized diagram row is classified once into a Cell, so the
renderer dispatches on the cell kind instead of re-inspecting raw characters.

Symbols:
    .          empty intersection
    ,          hoshi (star point)
    % (+ | -)  board border
    _          empty space outside the board
    X O        plain black / white stone
    B W        black / white stone with circle
    # @        black / white stone with square
    Y Q        black / white stone with triangle
    Z P        black / white stone with cross
    C S T M    circle / square / triangle / cross on an empty intersection
    0-9, 10+   numbered move (0 stands for move 10)
    a-z        letter on an empty intersection
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from shared.constants import BORDER_SENTINEL


class CellKind(Enum):
    EMPTY = "empty"
    BORDER = "border"
    SPACE = "space"
    STONE = "stone"
    NUMBER = "number"
    LETTER = "letter"
    MARKUP = "markup"
    UNKNOWN = "unknown"


class StoneColor(Enum):
    BLACK = "B"
    WHITE = "W"

    @property
    def opponent(self) -> StoneColor:
        return StoneColor.WHITE if self is StoneColor.BLACK else StoneColor.BLACK


class Mark(Enum):
    HOSHI = "hoshi"
    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"
    CROSS = "cross"


@dataclass(frozen=True)
class Cell:
    """One classified grid token.

    Attributes:
        token: Raw token text as it appeared in the row
        kind: Classification of the token
        color: Stone color for STONE cells
        mark: Overlay mark for marked stones, hoshi and markup cells
        value: Move number for NUMBER cells
    """

    token: str
    kind: CellKind
    color: StoneColor | None = None
    mark: Mark | None = None
    value: int | None = None

    @property
    def is_border(self) -> bool:
        return self.kind is CellKind.BORDER

    @property
    def is_intersection(self) -> bool:
        """True for cells drawn as bare board lines (with optional markup)."""
        return self.kind in (CellKind.EMPTY, CellKind.MARKUP)

    @property
    def move_number(self) -> int | None:
        """Move number shown on the stone; '0' is shorthand for move 10."""
        if self.value is None:
            return None
        return 10 if self.value == 0 else self.value


_SYMBOLS: dict[str, Cell] = {
    ".": Cell(".", CellKind.EMPTY),
    ",": Cell(",", CellKind.EMPTY, mark=Mark.HOSHI),
    BORDER_SENTINEL: Cell(BORDER_SENTINEL, CellKind.BORDER),
    "_": Cell("_", CellKind.SPACE),
    "X": Cell("X", CellKind.STONE, color=StoneColor.BLACK),
    "B": Cell("B", CellKind.STONE, color=StoneColor.BLACK, mark=Mark.CIRCLE),
    "#": Cell("#", CellKind.STONE, color=StoneColor.BLACK, mark=Mark.SQUARE),
    "Y": Cell("Y", CellKind.STONE, color=StoneColor.BLACK, mark=Mark.TRIANGLE),
    "Z": Cell("Z", CellKind.STONE, color=StoneColor.BLACK, mark=Mark.CROSS),
    "O": Cell("O", CellKind.STONE, color=StoneColor.WHITE),
    "W": Cell("W", CellKind.STONE, color=StoneColor.WHITE, mark=Mark.CIRCLE),
    "@": Cell("@", CellKind.STONE, color=StoneColor.WHITE, mark=Mark.SQUARE),
    "Q": Cell("Q", CellKind.STONE, color=StoneColor.WHITE, mark=Mark.TRIANGLE),
    "P": Cell("P", CellKind.STONE, color=StoneColor.WHITE, mark=Mark.CROSS),
    "C": Cell("C", CellKind.MARKUP, mark=Mark.CIRCLE),
    "S": Cell("S", CellKind.MARKUP, mark=Mark.SQUARE),
    "T": Cell("T", CellKind.MARKUP, mark=Mark.TRIANGLE),
    "M": Cell("M", CellKind.MARKUP, mark=Mark.CROSS),
}

_NUMBER_RE = re.compile(r"[0-9]+")
_LETTER_RE = re.compile(r"[a-z]")


def classify_token(token: str) -> Cell:
    """Classify a raw row token into a Cell.

    Args:
        token: Single character of a compact row, or one space-separated
            token of a non-compact row

    Returns:
        Cell: classified cell; unrecognized tokens get kind UNKNOWN
    """
    cell = _SYMBOLS.get(token)
    if cell is not None:
        return cell
    if _NUMBER_RE.fullmatch(token):
        return Cell(token, CellKind.NUMBER, value=int(token))
    if _LETTER_RE.fullmatch(token):
        return Cell(token, CellKind.LETTER)
    return Cell(token, CellKind.UNKNOWN)
