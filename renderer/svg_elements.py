"""Builders for the SVG elements a diagram is made of.

All functions take cell-center pixel coordinates and return markup strings,
one element per line.
"""

from __future__ import annotations

import html

from diagram.cells import Mark
from diagram.grid import BOTTOM, LEFT, RIGHT, UPPER
from shared.constants import GOBAN_COLOR, HOSHI_RADIUS, LINK_CLASS, LINK_COLOR, LINK_OPACITY

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def fmt(value: float) -> str:
    """Format a pixel value, dropping the fraction of whole numbers."""
    value = round(float(value), 2)
    if value.is_integer():
        return str(int(value))
    return str(value)


def escape(text: str) -> str:
    return html.escape(text, quote=True)


def open_svg(width: int, height: int, title: str = "") -> str:
    """Return the opening <svg> tag, with a <title> when one is given."""
    tag = (
        f'<svg xmlns="{SVG_NAMESPACE}" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">\n'
    )
    if title:
        tag += f"<title>{escape(title)}</title>\n"
    return tag


def close_svg() -> str:
    return "</svg>\n"


def rect(x: float, y: float, width: float, height: float, fill: str, css_class: str | None = None) -> str:
    class_attr = f' class="{css_class}"' if css_class else ""
    return (
        f'<rect x="{fmt(x)}" y="{fmt(y)}" width="{fmt(width)}" height="{fmt(height)}" '
        f'fill="{fill}"{class_attr} />\n'
    )


def stone(x: float, y: float, radius: float, ring: str, fill: str, css_class: str | None = None) -> str:
    """Return a stone: a circle with the cell radius.

    Args:
        x: Cell center x
        y: Cell center y
        radius: Stone radius
        ring: Outline color
        fill: Body color
        css_class: Optional CSS class
    """
    class_attr = f' class="{css_class}"' if css_class else ""
    return (
        f'<circle cx="{fmt(x)}" cy="{fmt(y)}" r="{fmt(radius)}" '
        f'stroke="{ring}" fill="{fill}"{class_attr} />\n'
    )


def circle_mark(x: float, y: float, radius: float, color: str) -> str:
    # Two close rings read as one thick circle
    return (
        f'<circle cx="{fmt(x)}" cy="{fmt(y)}" r="{fmt(radius - 3)}" stroke="{color}" fill="none" />\n'
        f'<circle cx="{fmt(x)}" cy="{fmt(y)}" r="{fmt(radius - 2)}" stroke="{color}" fill="none" />\n'
    )


def square_mark(x: float, y: float, radius: float, color: str) -> str:
    side = radius - 1.5
    return (
        f'<rect x="{fmt(x - side / 2)}" y="{fmt(y - side / 2)}" width="{fmt(side)}" '
        f'height="{fmt(side)}" stroke="{color}" fill="none" />\n'
    )


def triangle_mark(x: float, y: float, radius: float, color: str) -> str:
    # Equilateral triangle inscribed in a circle of 0.6 * radius
    r = radius * 0.6
    half_base = r * 0.866
    points = [
        (x, y - r),
        (x - half_base, y + r / 2),
        (x + half_base, y + r / 2),
    ]
    point_str = " ".join(f"{fmt(px)},{fmt(py)}" for px, py in points)
    return f'<polygon points="{point_str}" stroke="{color}" fill="none" />\n'


def cross_mark(x: float, y: float, radius: float, color: str) -> str:
    d = radius * 0.45
    return (
        f'<line x1="{fmt(x - d)}" y1="{fmt(y - d)}" x2="{fmt(x + d)}" y2="{fmt(y + d)}" stroke="{color}" />\n'
        f'<line x1="{fmt(x - d)}" y1="{fmt(y + d)}" x2="{fmt(x + d)}" y2="{fmt(y - d)}" stroke="{color}" />\n'
    )


def hoshi(x: float, y: float, color: str) -> str:
    return (
        f'<circle cx="{fmt(x)}" cy="{fmt(y)}" r="{HOSHI_RADIUS}" '
        f'stroke="{color}" fill="{color}" />\n'
    )


def mark(x: float, y: float, radius: float, color: str, kind: Mark) -> str:
    """Draw board markup or a hoshi on a cell.

    Args:
        x: Cell center x
        y: Cell center y
        radius: Cell radius
        color: Mark color
        kind: Which mark to draw
    """
    if kind is Mark.CIRCLE:
        return circle_mark(x, y, radius, color)
    if kind is Mark.SQUARE:
        return square_mark(x, y, radius, color)
    if kind is Mark.TRIANGLE:
        return triangle_mark(x, y, radius, color)
    if kind is Mark.CROSS:
        return cross_mark(x, y, radius, color)
    if kind is Mark.HOSHI:
        return hoshi(x, y, color)
    raise ValueError(f"Unknown mark: {kind}")


def intersection(x: float, y: float, radius: float, color: str, edges: str) -> str:
    """Draw the board lines of an empty intersection.

    Each of the four half-lines from the center is omitted when a border
    lies on that side, which gives T-junctions on edges and L-junctions in
    corners.

    Args:
        x: Cell center x
        y: Cell center y
        radius: Cell radius (length of each half-line)
        color: Line color
        edges: Neighbouring borders, a combination of 'U', 'B', 'L', 'R'
    """
    lines = []
    if UPPER not in edges:
        lines.append((x, y - radius))
    if BOTTOM not in edges:
        lines.append((x, y + radius))
    if LEFT not in edges:
        lines.append((x - radius, y))
    if RIGHT not in edges:
        lines.append((x + radius, y))

    return "".join(
        f'<line x1="{fmt(x1)}" y1="{fmt(y1)}" x2="{fmt(x)}" y2="{fmt(y)}" stroke="{color}" />\n'
        for x1, y1 in lines
    )


def text(x: float, y: float, label: str, color: str, css_class: str, font_size: float) -> str:
    return (
        f'<text x="{fmt(x)}" y="{fmt(y)}" fill="{color}" class="{css_class}" '
        f'style="font-size:{fmt(font_size)}px">{escape(label)}</text>\n'
    )


def link_area(x: float, y: float, radius: float, url: str) -> str:
    """Return a clickable, semi-transparent square covering one cell."""
    return (
        f'<a href="{escape(url)}">\n'
        f'<rect x="{fmt(x - radius)}" y="{fmt(y - radius)}" width="{fmt(radius * 2)}" '
        f'height="{fmt(radius * 2)}" stroke="{GOBAN_COLOR}" fill="{LINK_COLOR}" '
        f'fill-opacity="{LINK_OPACITY}" class="{LINK_CLASS}" />\n'
        f"</a>\n"
    )
