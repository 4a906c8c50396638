# src/dropfour/config.py

from __future__ import annotations

import os

WIDTH = 7
HEIGHT = 6
CONNECT_N = 4

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True
SHOW_THREATS = True  # mark R / Y / B on empty cells someone threatens

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 1  # short pause so AI moves aren’t instant

# Search defaults
SEARCH_DEPTH = 5
USE_PRUNING = True

# Logging
LOG_LEVEL = os.environ.get("DROPFOUR_LOG_LEVEL", "WARNING")
LOG_DIR = os.environ.get("DROPFOUR_LOG_DIR")  # unset: no file sink
