"""
Main Application Window
=======================
Hosts a single word cloud widget as the central widget.
"""
from __future__ import annotations

from typing import Iterable, Optional

from PySide6.QtWidgets import QMainWindow, QWidget

from wordsphere.controller.cloud import WordCloud
from wordsphere.view.widgets.word_cloud import WordCloudWidget

VISIBLE_APP_NAME = "Word Sphere"


class MainWindow(QMainWindow):
    def __init__(
        self,
        cloud: Optional[WordCloud] = None,
        words: Optional[Iterable[str]] = None,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(VISIBLE_APP_NAME)

        self.cloud_widget = WordCloudWidget(cloud, parent=self)
        self.setCentralWidget(self.cloud_widget)

        if words is not None:
            self.cloud_widget.set_words(words)

        side = self.cloud_widget.sizeHint()
        self.resize(side.width() + 40, side.height() + 40)
