#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four game

Usage:
    python run.py play [--p1-color red] [--p2-color blue] [--height 6] [--width 7]
    python run.py benchmark [--iterations 100]
"""

import os
import sys

# Add the project root to Python path so the package imports without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from connect4.interfaces.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
