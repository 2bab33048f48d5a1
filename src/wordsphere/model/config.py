"""
Cloud Configuration
===================
Immutable settings for one word cloud session.

Why is this file needed?
------------------------
1. Validation: Bad values (zero labels per ring, a factor outside (0, 1]) are
   rejected here, when the host builds the config, instead of surfacing as a
   division by zero or an invisible cloud on a later frame.
2. Logging: `to_dict` gives a plain snapshot of the settings for log output.

Any change goes through `CloudConfig.replace`, which returns a new validated
instance; the session then performs a full relayout.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

Color = Union[str, tuple[int, int, int]]

# Labels are never drawn below alpha 30/255.
DEFAULT_MIN_OPACITY = 30.0 / 255.0


class ConfigurationError(ValueError):
    """Raised when a cloud is configured with values it cannot render."""


@dataclass(frozen=True)
class ShadowStyle:
    """Text shadow drawn underneath each label. Cosmetic only."""
    blur_radius: float = 5.0
    dx: float = 0.0
    dy: float = 5.0
    color: Color = "#FFFFFF"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "blur_radius": self.blur_radius,
            "dx": self.dx,
            "dy": self.dy,
            "color": list(self.color) if isinstance(self.color, tuple) else self.color,
        }


@dataclass(frozen=True)
class CloudConfig:
    """
    Geometry and styling of a word cloud.

    Attributes:
        radius: Sphere radius in pixels.
        max_text_size: Text size of a label facing the viewer (factor 1.0).
        min_factor: Lower bound of the size/opacity factor, in (0, 1].
        labels_per_ring: Number of labels sharing one latitude.
        text_color: Named/hex color string or an (r, g, b) tuple.
        min_opacity: Opacity floor applied regardless of `min_factor`.
        max_opacity: Opacity of a label with factor 1.0.
        shadow: Optional shadow drawn under the text.
    """
    radius: float = 200.0
    max_text_size: float = 120.0
    min_factor: float = 0.2
    labels_per_ring: int = 7
    text_color: Color = "#000000"
    min_opacity: float = DEFAULT_MIN_OPACITY
    max_opacity: float = 1.0
    shadow: Optional[ShadowStyle] = field(default=None)

    def __post_init__(self) -> None:
        if not self.radius > 0:
            raise ConfigurationError(f"radius must be positive, got {self.radius}.")
        if not self.max_text_size > 0:
            raise ConfigurationError(f"max_text_size must be positive, got {self.max_text_size}.")
        if not 0.0 < self.min_factor <= 1.0:
            raise ConfigurationError(f"min_factor must be in (0, 1], got {self.min_factor}.")
        if isinstance(self.labels_per_ring, bool) or not isinstance(self.labels_per_ring, int):
            raise ConfigurationError(f"labels_per_ring must be an integer, got {self.labels_per_ring!r}.")
        if self.labels_per_ring <= 0:
            raise ConfigurationError(f"labels_per_ring must be positive, got {self.labels_per_ring}.")
        for name in ("min_opacity", "max_opacity"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must be in [0, 1], got {value}.")
        if self.min_opacity > self.max_opacity:
            raise ConfigurationError(
                f"min_opacity ({self.min_opacity}) exceeds max_opacity ({self.max_opacity})."
            )

    @property
    def preferred_size(self) -> float:
        """Edge length of a square viewport that fits the whole sphere."""
        return 2.0 * self.radius + self.max_text_size

    def replace(self, **changes: Any) -> CloudConfig:
        """Return a validated copy with the given fields changed."""
        try:
            return dataclasses.replace(self, **changes)
        except TypeError as e:
            raise ConfigurationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        return {
            "radius": self.radius,
            "max_text_size": self.max_text_size,
            "min_factor": self.min_factor,
            "labels_per_ring": self.labels_per_ring,
            "text_color": list(self.text_color) if isinstance(self.text_color, tuple) else self.text_color,
            "min_opacity": self.min_opacity,
            "max_opacity": self.max_opacity,
            "shadow": self.shadow.to_dict() if self.shadow is not None else None,
        }


DEFAULT_CONFIG = CloudConfig()
