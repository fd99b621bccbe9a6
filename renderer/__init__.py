"""SVG rendering of parsed Go diagrams."""
