"""Fade and scale coefficients derived from distance to the focus line."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

DEFAULT_FALLOFF_PX = 500
MIN_SCALE = 0.7
MIN_ALPHA = 0.3


@dataclass(frozen=True, slots=True)
class FocusEffect:
    """Visual coefficients for one item."""

    scale: float
    alpha: float


def focus_effect_for_distance(distance: int, falloff: int = DEFAULT_FALLOFF_PX) -> FocusEffect:
    """Interpolate scale/alpha from |distance|; saturates past the falloff."""
    span = max(1, int(falloff))
    magnitude = abs(int(distance))
    scale = float(np.interp(magnitude, [0, span], [1.0, MIN_SCALE]))
    alpha = float(np.interp(magnitude, [0, span], [1.0, MIN_ALPHA]))
    return FocusEffect(scale=scale, alpha=alpha)


class FadeScaleListener:
    """Distance listener that keeps the latest fade/scale effect."""

    def __init__(self, falloff: int = DEFAULT_FALLOFF_PX) -> None:
        self._falloff = falloff
        self.last_distance: int | None = None
        self.effect = FocusEffect(scale=1.0, alpha=1.0)

    def on_distance_to_focus_changed(self, distance: int) -> None:
        self.last_distance = distance
        self.effect = focus_effect_for_distance(distance, self._falloff)
