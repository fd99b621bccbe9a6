"""Font metric configuration for diagram rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FontMetrics:
    """Size in pixels of one character cell of the text font.

    All board geometry (cell size, margins, text offsets) is derived from
    these two values. The defaults correspond to a 16x8 px bitmap font.

    Attributes:
        h: Character cell height in pixels
        w: Character cell width in pixels
    """

    h: int = 16
    w: int = 8

    def __post_init__(self):
        if self.h <= 0 or self.w <= 0:
            raise ValueError(f"Font metrics must be positive, got h={self.h}, w={self.w}")


def parse_font_spec(spec: str) -> FontMetrics:
    """Parse a font specification string into FontMetrics.

    Format:
        PARAM=VALUE[,PARAM=VALUE]

    Examples:
        "h=16,w=8" -> FontMetrics(h=16, w=8)
        "height=20" -> FontMetrics(h=20, w=8)

    Supported parameters:
        - h / height (int): character cell height
        - w / width (int): character cell width
    """
    params = {}
    for param_pair in spec.split(","):
        param_pair = param_pair.strip()
        if not param_pair:
            continue
        if "=" not in param_pair:
            raise ValueError(f"Invalid parameter format: {param_pair}. Expected PARAM=VALUE")
        key, value = param_pair.split("=", 1)
        key = key.strip().lower()
        value = value.strip()

        if key in ["h", "height"]:
            params["h"] = int(value)
        elif key in ["w", "width"]:
            params["w"] = int(value)
        else:
            raise ValueError(f"Unknown parameter: {key}")

    return FontMetrics(**params)
