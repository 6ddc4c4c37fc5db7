# src/connectfour/config.py

from __future__ import annotations

WIDTH = 7
HEIGHT = 6
CONNECT_N = 4

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True
