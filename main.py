#!/usr/bin/env python3
"""
tintlog - leveled, colorized console logging

Thin wrapper around the package command line. Emits one sample line per
level, or shows the level/color table with --preview.

To run: python main.py [--level WARN] [--file out.log] [--no-color] [--preview]
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from tintlog.cli import main

if __name__ == "__main__":
    main()
