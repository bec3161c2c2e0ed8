#!/usr/bin/env python3
"""
Gesture Runes - Main Entry Point
Draw a stroke and run the command bound to the closest recorded one.
"""

import sys
from gesture_runes.cli import main

if __name__ == "__main__":
    sys.exit(main())
