"""
Word Cloud Widget
=================
Qt renderer for a `WordCloud`.

A QTimer drives the frame loop: every timeout advances the cloud by one tick
and schedules a repaint. `paintEvent` asks the cloud for the draw commands of
the current contents rect and paints each label centred on its point.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from PySide6.QtCore import QPointF, QRectF, QSize, Qt, QTimer
from PySide6.QtGui import QColor, QFont, QFontMetricsF, QPainter
from PySide6.QtWidgets import QGraphicsDropShadowEffect, QWidget

from wordsphere.controller.cloud import WordCloud
from wordsphere.model.config import CloudConfig, Color, ShadowStyle
from wordsphere.model.frame import DrawCommand

logger = logging.getLogger(__name__)

DEFAULT_FRAME_INTERVAL_MS = 16


def to_qcolor(color: Color) -> QColor:
    """Convert a config color (name, hex string or rgb tuple) into a QColor."""
    if isinstance(color, tuple):
        return QColor(*color)
    return QColor(color)


class WordCloudWidget(QWidget):
    def __init__(
        self,
        cloud: Optional[WordCloud] = None,
        parent: QWidget | None = None,
        frame_interval_ms: int = DEFAULT_FRAME_INTERVAL_MS
    ) -> None:
        super().__init__(parent)
        self.cloud: WordCloud = cloud or WordCloud()

        self._timer = QTimer(self)
        self._timer.setInterval(frame_interval_ms)
        self._timer.timeout.connect(self._advance)

        self._apply_shadow(self.cloud.config.shadow)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_words(self, words: Iterable[str]) -> None:
        self.cloud.set_words(words)
        self.update()

    def set_config(self, config: CloudConfig) -> None:
        self.cloud.reconfigure(config)
        self._apply_shadow(config.shadow)
        self.updateGeometry()
        self.update()

    def start(self) -> None:
        if not self._timer.isActive():
            logger.debug(f"Starting frame timer ({self._timer.interval()} ms).")
            self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def is_animating(self) -> bool:
        return self._timer.isActive()

    # ------------------------------------------------------------------------------
    # Qt overrides
    # ------------------------------------------------------------------------------

    def sizeHint(self) -> QSize:
        side = int(self.cloud.config.preferred_size)
        return QSize(side, side)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self.start()

    def hideEvent(self, event) -> None:
        self.stop()
        super().hideEvent(event)

    def paintEvent(self, event) -> None:
        area = self.contentsRect()
        commands = self.cloud.frame(area.width(), area.height())
        if not commands:
            return

        painter = QPainter(self)
        painter.setRenderHints(QPainter.RenderHint.Antialiasing | QPainter.RenderHint.TextAntialiasing)
        painter.translate(QPointF(area.left(), area.top()))
        base_font = QFont(self.font())
        for command in commands:
            self._draw_label(painter, base_font, command)
        painter.end()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _advance(self) -> None:
        self.cloud.tick()
        self.update()

    def _apply_shadow(self, shadow: Optional[ShadowStyle]) -> None:
        if shadow is None:
            self.setGraphicsEffect(None)
            return
        effect = QGraphicsDropShadowEffect(self)
        effect.setBlurRadius(shadow.blur_radius)
        effect.setOffset(shadow.dx, shadow.dy)
        effect.setColor(to_qcolor(shadow.color))
        self.setGraphicsEffect(effect)

    @staticmethod
    def _draw_label(painter: QPainter, base_font: QFont, command: DrawCommand) -> None:
        """Draw one label centred on its point, measuring the text at its own size."""
        font = QFont(base_font)
        font.setPixelSize(max(1, round(command.size)))
        painter.setFont(font)

        color = to_qcolor(command.color)
        color.setAlphaF(command.opacity)
        painter.setPen(color)

        bounds = QFontMetricsF(font).boundingRect(command.text)
        target = QRectF(
            command.x - bounds.width() / 2.0,
            command.y - bounds.height() / 2.0,
            bounds.width(),
            bounds.height(),
        )
        painter.drawText(target, Qt.AlignmentFlag.AlignCenter, command.text)
