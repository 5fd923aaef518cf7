"""
config.py — Settings & Sample Inputs
=====================================
Module-level constants the engine and the Flask host read, plus the few
settings that can be overridden from the environment:

    VISUALIZER_LOG_LEVEL      DEBUG, INFO, WARNING, ERROR    (default INFO)
    VISUALIZER_SECRET_KEY     Flask session key              (default: random per process)
    VISUALIZER_HOST           bind address                   (default 127.0.0.1)
    VISUALIZER_PORT           bind port                      (default 5000)
    VISUALIZER_MAX_SESSIONS   live sessions kept in memory   (default 256)
    VISUALIZER_EXPLAIN        "claude" turns on step explanations through
                              the anthropic SDK (`explain` extra)   (default off)
    VISUALIZER_EXPLAIN_MODEL  model for that backend
"""

import logging
import os
import sys
from typing import Any, Dict


# ---------------------------------------------------------------------------
# Playback timing (seconds)
# ---------------------------------------------------------------------------
BASE_DELAY = 0.5      # delay between auto-advance ticks at speed 1x
MIN_DELAY  = 0.02     # floor, however fast the multiplier

SPEED_PRESETS: Dict[str, float] = {
    "slow":   0.5,    # teaching mode
    "normal": 1.0,
    "fast":   2.0,
    "turbo":  4.0,    # demo mode
}

# ---------------------------------------------------------------------------
# Algorithm inputs
# ---------------------------------------------------------------------------
HEURISTIC_SCALE    = 50.0   # A*: straight-line pixel distance / this
CELL_SIZE          = 50.0   # lattice cell pitch in pixels, so h stays in "cells"
INITIAL_ARRAY_SIZE = 25
ARRAY_VALUE_RANGE  = (1, 100)

# Input ceilings.  The recursive sorts and DFS go one frame deeper per
# element / node, so these stay well under the interpreter recursion limit.
MAX_ARRAY_SIZE  = 500
MAX_GRAPH_NODES = 500

DEFAULT_SOURCE = "A"
DEFAULT_TARGET = "F"

DEFAULT_GRAPH: Dict[str, Any] = {
    "nodes": [
        {"id": "A", "x": 100, "y": 200},
        {"id": "B", "x": 250, "y": 100},
        {"id": "C", "x": 250, "y": 300},
        {"id": "D", "x": 450, "y": 100},
        {"id": "E", "x": 450, "y": 300},
        {"id": "F", "x": 600, "y": 200},
        {"id": "G", "x": 350, "y": 200},
        {"id": "H", "x": 520, "y": 200},
    ],
    "edges": [
        {"from": "A", "to": "B", "weight": 4},
        {"from": "A", "to": "C", "weight": 2},
        {"from": "B", "to": "D", "weight": 5},
        {"from": "B", "to": "G", "weight": 3},
        {"from": "C", "to": "G", "weight": 1},
        {"from": "C", "to": "E", "weight": 8},
        {"from": "G", "to": "D", "weight": 6},
        {"from": "G", "to": "E", "weight": 2},
        {"from": "D", "to": "F", "weight": 3},
        {"from": "E", "to": "F", "weight": 1},
        {"from": "G", "to": "H", "weight": 4},
        {"from": "H", "to": "F", "weight": 2},
    ],
}

DEFAULT_LATTICE: Dict[str, Any] = {
    "rows":  10,
    "cols":  15,
    "start": [4, 2],
    "end":   [4, 12],
    "walls": ["2-7", "3-7", "4-7", "5-7", "6-7"],
}

# ---------------------------------------------------------------------------
# Host settings
# ---------------------------------------------------------------------------
LOG_LEVEL  = os.getenv("VISUALIZER_LOG_LEVEL", "INFO").upper()
SECRET_KEY = os.getenv("VISUALIZER_SECRET_KEY")
HOST       = os.getenv("VISUALIZER_HOST", "127.0.0.1")
PORT       = int(os.getenv("VISUALIZER_PORT", "5000"))

MAX_SESSIONS  = int(os.getenv("VISUALIZER_MAX_SESSIONS", "256"))
EXPLAIN       = os.getenv("VISUALIZER_EXPLAIN", "").strip().lower()
EXPLAIN_MODEL = os.getenv("VISUALIZER_EXPLAIN_MODEL", "claude-sonnet-4-20250514")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
