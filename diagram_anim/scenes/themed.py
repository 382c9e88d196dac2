from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
from manim import Mobject
from manim import config as manim_config

from diagram_core.theme import DARK, ColorTheme

from ..compose import is_settled
from ..emphasis import EmphasisEngine


class ThemedSceneMixin:
    """
    Scene helpers shared by diagram scenes: a color theme, emphasis
    shortcuts and frame-edge coordinates.

    Edge helpers take a ``dist`` inset: values strictly between 0 and 1 are
    a fraction of the frame size, anything else is in scene units.
    """

    theme: ColorTheme = DARK

    def __init__(self, *args, theme: ColorTheme | None = None, **kwargs):
        super().__init__(*args, **kwargs)  # type: ignore[misc]
        if theme is not None:
            self.theme = theme
        self.emphasis = EmphasisEngine(self.theme)

    def setup(self):
        super().setup()  # type: ignore[misc]
        self.camera.background_color = self.theme.background  # type: ignore[attr-defined]

    # ----- emphasis -----
    def light(self, node: Mobject, duration: float | None = None):
        return self.emphasis.light(node, duration)

    def accent(self, node: Mobject, duration: float | None = None):
        return self.emphasis.accent(node, duration)

    def dim(self, node: Mobject, duration: float | None = None):
        return self.emphasis.dim(node, duration)

    def hide(self, node: Mobject, duration: float | None = None):
        return self.emphasis.hide(node, duration)

    def highlight(self, nodes: Iterable[Mobject], siblings: Iterable[Mobject], duration: float | None = None):
        return self.emphasis.highlight(nodes, siblings, duration)

    def play_joined(self, animation, **kwargs) -> None:
        """Play a joined animation unless there is nothing left to play."""
        if is_settled(animation):
            return
        self.play(animation, **kwargs)  # type: ignore[attr-defined]

    # ----- frame edges -----
    def left_x(self, dist: float = 0.0) -> float:
        if 0 < dist < 1:
            return manim_config.frame_width * (dist - 0.5)
        return manim_config.frame_width / -2 + dist

    def right_x(self, dist: float = 0.0) -> float:
        if 0 < dist < 1:
            return manim_config.frame_width * (0.5 - dist)
        return manim_config.frame_width / 2 - dist

    def top_y(self, dist: float = 0.0) -> float:
        if 0 < dist < 1:
            return manim_config.frame_height * (0.5 - dist)
        return manim_config.frame_height / 2 - dist

    def bottom_y(self, dist: float = 0.0) -> float:
        if 0 < dist < 1:
            return manim_config.frame_height * (dist - 0.5)
        return manim_config.frame_height / -2 + dist

    def left(self, dist: float = 0.0) -> np.ndarray:
        return np.array([self.left_x(dist), 0.0, 0.0])

    def right(self, dist: float = 0.0) -> np.ndarray:
        return np.array([self.right_x(dist), 0.0, 0.0])

    def top(self, dist: float = 0.0) -> np.ndarray:
        return np.array([0.0, self.top_y(dist), 0.0])

    def bottom(self, dist: float = 0.0) -> np.ndarray:
        return np.array([0.0, self.bottom_y(dist), 0.0])

    def top_left(self, dist: Sequence[float] = (0.0, 0.0)) -> np.ndarray:
        return np.array([self.left_x(dist[0]), self.top_y(dist[1]), 0.0])

    def top_right(self, dist: Sequence[float] = (0.0, 0.0)) -> np.ndarray:
        return np.array([self.right_x(dist[0]), self.top_y(dist[1]), 0.0])

    def bottom_left(self, dist: Sequence[float] = (0.0, 0.0)) -> np.ndarray:
        return np.array([self.left_x(dist[0]), self.bottom_y(dist[1]), 0.0])

    def bottom_right(self, dist: Sequence[float] = (0.0, 0.0)) -> np.ndarray:
        return np.array([self.right_x(dist[0]), self.bottom_y(dist[1]), 0.0])
