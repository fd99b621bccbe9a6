"""Shared utility package for cross-layer value objects and constants."""

from .render_data import ExportResult, LayoutGeometry, RenderOutput, SvgSections  # noqa: F401
