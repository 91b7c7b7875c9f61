"""Configuration constants for outline-mindmap."""

from dataclasses import dataclass

# Color used for headings without a [#RRGGBB] tag.
DEFAULT_COLOR: str = "#212529"

# Distance between depth columns and between sibling rows.
HORIZONTAL_SPACING: float = 200
VERTICAL_SPACING: float = 100

# Node returned when the outline has no headings, and the synthetic root used
# when it has more than one top-level heading.
FALLBACK_ID: str = "root"
FALLBACK_LABEL: str = "Root"

# Vertical layout policies, see core/tree/layout.py.
LAYOUT_POLICIES: tuple[str, ...] = ("index", "anchored")
DEFAULT_POLICY: str = "index"


@dataclass(frozen=True)
class LayoutSettings:
    """Knobs for building and positioning a mind map."""

    horizontal_spacing: float = HORIZONTAL_SPACING
    vertical_spacing: float = VERTICAL_SPACING
    policy: str = DEFAULT_POLICY
    default_color: str = DEFAULT_COLOR
    fallback_id: str = FALLBACK_ID
    fallback_label: str = FALLBACK_LABEL

    def __post_init__(self) -> None:
        if self.horizontal_spacing <= 0 or self.vertical_spacing <= 0:
            msg = (
                f"Spacing must be positive, got horizontal={self.horizontal_spacing!r} "
                f"vertical={self.vertical_spacing!r}"
            )
            raise ValueError(msg)
        if self.policy not in LAYOUT_POLICIES:
            msg = f"Unknown layout policy {self.policy!r}, expected one of {LAYOUT_POLICIES!r}"
            raise ValueError(msg)
