"""Shared constants for the parsing and rendering layers."""

from __future__ import annotations

# Every border glyph ('-', '|', '+') is normalized to this character before splitting
BORDER_SENTINEL: str = "%"
BORDER_CHARS: str = "-|+"

# Directive prefix starting every diagram line
DIRECTIVE_PREFIX: str = "$$"

# Characters allowed as link anchors ([anchor|url])
LINK_ANCHOR_CHARS: str = "abcdefghijklmnopqrstuvwxyz0123456789WB@#CS"

DEFAULT_BOARD_SIZE: int = 19
DEFAULT_START_MOVE: int = 1

# Column labels skip 'I' (and 'i'), following the usual Go board convention
COORDINATE_LABELS: str = "ABCDEFGHJKLMNOPQRSTUVWXYZabcdefghjklmnopqrstuvwxyz123456789"

FAILURE_MESSAGE: str = "Parsing of ASCII diagram failed"

# Colors
BLACK: str = "rgb(0, 0, 0)"
WHITE: str = "rgb(255, 255, 255)"
MARKUP_RED: str = "rgb(255, 55, 55)"
GOBAN_COLOR: str = "rgb(242, 176, 109)"
LINK_COLOR: str = "rgb(202, 106, 69)"
ERROR_FILL: str = "red"
LINK_OPACITY: float = 0.4

# CSS classes, so a host page can restyle the image
BLACK_STONE_CLASS: str = "blackstone"
WHITE_STONE_CLASS: str = "whitestone"
GOBAN_CLASS: str = "goban"
LINK_CLASS: str = "linkClass"
MARKUP_CLASS: str = "markup"
COORD_CLASS: str = "coordClass"
ERROR_CLASS: str = "errorClass"

# Text sizes as fractions of the character cell height
MARKUP_TEXT_RATIO: float = 0.9
COORD_TEXT_RATIO: float = 0.5

# Pixel margins around the board
IMAGE_MARGIN: int = 4
BASE_OFFSET: int = 2
HOSHI_RADIUS: int = 3

# Error placeholder layout
ERROR_LINE_WIDTH: int = 60
ERROR_LINE_HEIGHT: int = 50
ERROR_IMAGE_WIDTH: int = 520
