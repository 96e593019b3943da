"""
Configuration constants for reachgraph.

Board markers, reusable direction sets and logging settings are defined here.
"""

import logging
import os
from typing import Optional, Tuple

# =============================================================================
# Board Configuration
# =============================================================================

# Cell character that cannot be moved onto
BLOCKED_CELL = "X"

# Direction vectors as (row, column) offsets
CARDINAL_DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),  # Up
    (0, 1),   # Right
    (1, 0),   # Down
    (0, -1),  # Left
)

DIAGONAL_DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 1),   # Up/right
    (1, 1),    # Down/right
    (1, -1),   # Down/left
    (-1, -1),  # Up/left
)

# All eight single-step moves
KING_DIRECTIONS: Tuple[Tuple[int, int], ...] = CARDINAL_DIRECTIONS + DIAGONAL_DIRECTIONS

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("REACHGRAPH_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

# Handler installed by configure_logging
_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None) -> None:
    """
    Attach a stream handler to the ``reachgraph`` logger.

    The library itself never calls this; applications and test sessions opt in.

    Args:
        level: Level name, defaults to LOG_LEVEL
    """
    global _handler

    logger = logging.getLogger("reachgraph")
    logger.setLevel((level or LOG_LEVEL).upper())

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
