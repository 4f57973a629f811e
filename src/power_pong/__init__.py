"""
Power Pong: Pong against a predicting CPU paddle, with power-ups.
"""

from __future__ import annotations

import os

# pygame prints a banner on import unless told otherwise
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

__version__ = "0.1.0"
