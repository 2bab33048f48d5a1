"""
Frame Construction
==================
Turns the current label collection into draw commands for a renderer.

Every command is a self-contained immutable value, so a renderer never relies
on drawing state left behind by the previous label.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from wordsphere.model.config import CloudConfig, Color
from wordsphere.model.label import Label


@dataclass(frozen=True)
class DrawCommand:
    """One label to draw, centred on (x, y) in viewport coordinates."""
    text: str
    x: float
    y: float
    size: float
    opacity: float
    color: Color


def label_opacity(factor: float, config: CloudConfig) -> float:
    """Opacity for a factor, never below the configured floor."""
    return max(config.min_opacity, factor * config.max_opacity)


def build_frame(
    labels: Iterable[Label],
    config: CloudConfig,
    center: tuple[float, float]
) -> list[DrawCommand]:
    """
    Build the ordered draw commands for one frame.

    Only x and y are used for placement; depth is carried by the factor.

    Args:
        labels: Projected labels, in draw order.
        config: Session configuration (text size, opacity, color).
        center: Viewport center (cx, cy).

    Returns:
        One command per label, in the same order.
    """
    cx, cy = center
    return [
        DrawCommand(
            text=label.text,
            x=cx + label.x,
            y=cy + label.y,
            size=label.factor * config.max_text_size,
            opacity=label_opacity(label.factor, config),
            color=config.text_color,
        )
        for label in labels
    ]
