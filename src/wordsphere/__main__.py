"""
Run with: python -m wordsphere
"""
import sys

from wordsphere.main import main

sys.exit(main())
