"""
Word Sphere - labels laid out on a rotating sphere.

Usage:
    python -m wordsphere
"""

__version__ = "1.0.0"
