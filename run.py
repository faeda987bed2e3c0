"""Helper runner for the stolcker app.

Sets up the local src/ path so you can run without installing the package:

    python run.py ALPHA_VANTAGE_API_KEY
"""
import os
import sys

ROOT = os.path.dirname(__file__)
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from stolcker.cli import main


if __name__ == '__main__':
    sys.exit(main())
