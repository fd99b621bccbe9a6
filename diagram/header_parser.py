"""Parser for the directive lines of a diagram.

The first line controls the diagram:

    $$(B|W)(c)(size)(m<start>)(title)
      |     |  |     |         +--> title of the diagram
      |     |  |     +--> number of the first move (e.g. m67, no space)
      |     |  +--> board size, used for coordinate labels (default 19)
      |     +--> show coordinates
      +--> color of the first move (default black)

All parts are optional. Subsequent lines starting with ``$$`` either carry a
diagram row or a link of the form ``$$ [anchor|url]``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from diagram.cells import StoneColor
from diagram.errors import DiagramParseError
from shared.constants import DEFAULT_BOARD_SIZE, DEFAULT_START_MOVE, LINK_ANCHOR_CHARS

logger = logging.getLogger(__name__)

_HEADER_RE = re.compile(r"^\$\$([WB])?(c)?([0-9]+)?(?:m([0-9]+))?(.*)$")
_CONTENT_RE = re.compile(r"^\$\$\s*([^\[\s].*)")
_LINK_RE = re.compile(r"^\$\$\s*\[(.*)\|(.*)\]")


@dataclass(frozen=True)
class HeaderInfo:
    """Settings taken from the first diagram line.

    Attributes:
        first_color: Color playing the odd-numbered moves
        coordinates: Whether coordinates were requested
        board_size: Board size used for coordinate numbering
        start_move: Number shown on the stone labelled 1
        title: Raw (unescaped) title text
    """

    first_color: StoneColor = StoneColor.BLACK
    coordinates: bool = False
    board_size: int = DEFAULT_BOARD_SIZE
    start_move: int = DEFAULT_START_MOVE
    title: str = ""


@dataclass
class DirectiveContent:
    """Diagram body and link map collected from the lines after the header."""

    body: str = ""
    links: dict[str, str] = field(default_factory=dict)


def parse_header(line: str) -> HeaderInfo:
    """Parse the control line of a diagram.

    Args:
        line: First line of the diagram text

    Returns:
        HeaderInfo: settings of the diagram

    Raises:
        DiagramParseError: If the line does not start with the directive prefix
    """
    match = _HEADER_RE.match(line.strip())
    if match is None:
        raise DiagramParseError("first line is not a diagram header")

    color, coord_flag, size, start, title = match.groups()

    board_size = int(size) if size is not None else DEFAULT_BOARD_SIZE
    if board_size <= 0:
        logger.debug(f"Ignoring board size {board_size}, using {DEFAULT_BOARD_SIZE}")
        board_size = DEFAULT_BOARD_SIZE

    start_move = int(start) if start is not None else DEFAULT_START_MOVE
    if start_move <= 0:
        start_move = DEFAULT_START_MOVE

    return HeaderInfo(
        first_color=StoneColor.WHITE if color == "W" else StoneColor.BLACK,
        coordinates=coord_flag is not None,
        board_size=board_size,
        start_move=start_move,
        title=title.strip(),
    )


def parse_link(line: str) -> tuple[str, str] | None:
    """Parse a ``$$ [anchor|url]`` link line.

    Returns:
        (anchor, url) if the line is a link with a valid one-character
        anchor, otherwise None
    """
    match = _LINK_RE.match(line)
    if match is None:
        return None

    anchor = match.group(1).strip()
    url = match.group(2).strip()
    if len(anchor) != 1 or anchor not in LINK_ANCHOR_CHARS:
        logger.debug(f"Dropping link with invalid anchor {anchor!r}")
        return None
    return anchor, url


def scan_directive_lines(lines: list[str]) -> DirectiveContent:
    """Collect diagram rows and links from the lines following the header.

    Lines not starting with the directive prefix are ignored. A line is
    tested independently as a row and as a link; later links with the same
    anchor replace earlier ones.

    Args:
        lines: Diagram lines after the header

    Returns:
        DirectiveContent: newline-terminated body text and link map
    """
    content = DirectiveContent()
    rows = []

    for line in lines:
        match = _CONTENT_RE.match(line.strip())
        if match:
            rows.append(match.group(1) + "\n")

        link = parse_link(line)
        if link is not None:
            anchor, url = link
            content.links[anchor] = url

    content.body = "".join(rows)
    return content
