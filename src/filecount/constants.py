from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Configuration file looked up in the working directory when --config is not given.
DEFAULT_CONFIG_FILE: str = 'config.json'

# Read size used by the line counter.
READ_CHUNK_SIZE: int = 64 * 1024

# Submitted-but-unfinished tasks allowed per worker before submit() blocks.
PENDING_PER_WORKER: int = 2
