"""
Word Cloud Session
==================
Holds the configuration, the word list and the current label collection.

Why is this file needed?
------------------------
1. Relayout: Setting words or a new config rebuilds the whole collection.
   The new list is built first and swapped in with a single assignment, so a
   renderer reading `labels` never sees a half-built collection.
2. Frame loop: `tick()` and `frame()` are the two calls a host makes per frame.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from wordsphere.controller.animation import AnimationDriver
from wordsphere.model.config import DEFAULT_CONFIG, CloudConfig
from wordsphere.model.frame import DrawCommand, build_frame
from wordsphere.model.label import Label
from wordsphere.model.layout import layout, ring_count

logger = logging.getLogger(__name__)


class WordCloud:
    def __init__(
        self,
        config: Optional[CloudConfig] = None,
        driver: Optional[AnimationDriver] = None
    ) -> None:
        self._config: CloudConfig = config or DEFAULT_CONFIG
        self.driver: AnimationDriver = driver or AnimationDriver()
        self._words: tuple[str, ...] = ()
        self._labels: list[Label] = []

    @property
    def config(self) -> CloudConfig:
        return self._config

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    @property
    def labels(self) -> tuple[Label, ...]:
        return tuple(self._labels)

    @property
    def ring_count(self) -> int:
        return ring_count(len(self._words), self._config.labels_per_ring)

    def set_words(self, words: Iterable[str]) -> None:
        """Replace the word list and lay it out from scratch."""
        self._words = tuple(words)
        self._relayout()

    def reconfigure(self, config: CloudConfig) -> None:
        """Switch to a new configuration; always triggers a full relayout."""
        logger.info(f"Reconfiguring word cloud: {config.to_dict()}")
        self._config = config
        self._relayout()

    def tick(self) -> None:
        """Advance the animation by one step."""
        labels = self._labels
        self.driver.tick(labels, self._config.radius, self._config.min_factor)

    def frame(self, width: float, height: float) -> list[DrawCommand]:
        """Draw commands for a viewport of the given size."""
        return build_frame(self._labels, self._config, (width / 2.0, height / 2.0))

    def _relayout(self) -> None:
        labels = layout(
            self._words,
            self._config.labels_per_ring,
            self._config.radius,
            self._config.min_factor,
        )
        self._labels = labels
        logger.info(f"Word cloud laid out: {len(labels)} labels on {self.ring_count} rings.")
