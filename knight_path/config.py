"""
Configuration constants for the Knight Path project.

All board settings and tunable parameters are defined here.
Values that vary per deployment are read from environment variables
(a local .env file is loaded first).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of knight_path/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Board Configuration
# =============================================================================

# Side length used when a caller does not pick one (the classic chessboard)
DEFAULT_BOARD_SIZE = int(os.environ.get("KNIGHT_BOARD_SIZE", "8"))

# Largest board the HTTP API will build an index for
MAX_BOARD_SIZE = 64

# Square identifiers look like "3-4" (x, then y)
SQUARE_ID_SEPARATOR = "-"

# =============================================================================
# Index Cache Configuration
# =============================================================================

# Number of (start, board_size) indexes the API keeps around.
# Indexes are immutable so sharing them between requests is safe.
INDEX_CACHE_SIZE = 128

# =============================================================================
# Web Configuration
# =============================================================================

# Flask session signing key - override in any real deployment
SECRET_KEY = os.environ.get("SECRET_KEY", "knight-path-dev-key")

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
