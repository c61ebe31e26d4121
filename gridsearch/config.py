"""
Configuration constants for the grid shortest-path engine.

All board defaults and tunable parameters are defined here.
The log level is read from the environment so CLIs can be made verbose
without code changes.
"""

import logging
import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of gridsearch/
PROJECT_ROOT = Path(__file__).parent.parent

# Benchmark CSVs land here unless --outdir says otherwise
RESULTS_DIR = PROJECT_ROOT / "results" / "csv"

# =============================================================================
# Board Configuration
# =============================================================================

DEFAULT_ROWS = 25
DEFAULT_COLS = 50

# (row, col) of the default start/finish cells on a DEFAULT_ROWS x DEFAULT_COLS board
DEFAULT_START = (12, 10)
DEFAULT_FINISH = (12, 39)

# Probability that a non-start/non-finish cell becomes a wall in a random maze
WALL_DENSITY = 0.3

# How many times generate_environment(ensure_path=True) re-draws a board
MAX_MAZE_TRIES = 200

# =============================================================================
# Benchmark Configuration
# =============================================================================

DEFAULT_NUM_GRIDS = 20

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("GRIDSEARCH_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = None) -> None:
    """Install a root handler at LOG_LEVEL (or the given level)."""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
