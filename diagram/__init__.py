"""Parsing of Sensei's Library ASCII Go diagrams.

The GoDiagram façade is in ``diagram.go_diagram``.
"""

from .errors import DiagramParseError
from .config import FontMetrics, parse_font_spec

__all__ = ["DiagramParseError", "FontMetrics", "parse_font_spec"]
