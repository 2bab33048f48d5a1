"""
Application Initialization
==========================
Builds the demo word cloud and starts the Qt event loop.

It acts as the "host" for the word cloud:
1. Sets up logging.
2. Creates the QApplication.
3. Builds the session config and the word list.
4. Shows the window; the widget's timer then drives the animation.
"""
import logging
import sys
from typing import Optional, Sequence

from wordsphere.application import create_app
from wordsphere.controller.cloud import WordCloud
from wordsphere.logging_config import setup_logging
from wordsphere.model.config import CloudConfig, ShadowStyle
from wordsphere.view.main_window import MainWindow

DEMO_WORD_COUNT = 50


def demo_words(count: int = DEMO_WORD_COUNT) -> list[str]:
    return [str(i) for i in range(count)]


def main(words: Optional[Sequence[str]] = None) -> int:
    # Use logging.DEBUG to see relayout details during development
    setup_logging(level=logging.INFO)

    app = create_app()

    config = CloudConfig(shadow=ShadowStyle())
    cloud = WordCloud(config)

    window = MainWindow(cloud, words=words if words is not None else demo_words())
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
