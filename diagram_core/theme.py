"""
Color themes for diagram scenes.

A theme names the five roles every scene paints with. Emphasis states pick
their colors from the primary, accent and dimmed roles; the background role
is used for the scene itself and secondary for captions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Paint:
    """A color plus opacity, the unit every stroke/fill channel is set to."""

    color: str
    opacity: float = 1.0

    @property
    def transparent(self) -> bool:
        return self.opacity <= 0.0


TRANSPARENT = Paint("#000000", 0.0)


@dataclass(frozen=True)
class ColorTheme:
    primary: str
    """Main text and outline color."""

    secondary: str
    """Captions and less important text."""

    background: str

    accent: str
    """Color used by the accented emphasis state."""

    dimmed: str
    """Color used by the dimmed emphasis state."""

    def paint(self, role: str, opacity: float = 1.0) -> Paint:
        return Paint(getattr(self, role), opacity)


DARK_PALETTE = ("#d6dce5", "#adb9ca", "#8497b0", "#333f50", "#222a35")

DARK = ColorTheme(
    primary=DARK_PALETTE[0],
    secondary=DARK_PALETTE[1],
    accent=DARK_PALETTE[2],
    dimmed=DARK_PALETTE[3],
    background=DARK_PALETTE[4],
)

THEMES: Dict[str, ColorTheme] = {
    "dark": DARK,
}


def get_theme(name: str) -> ColorTheme:
    try:
        return THEMES[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown theme: {name!r} (choose from {', '.join(sorted(THEMES))})") from None
