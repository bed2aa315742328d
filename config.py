"""
config.py — Runtime Settings
=============================
Environment-driven knobs for the visualizer service.  A `.env` file in
the project root is loaded first, then every setting falls back to a
sane default so the app runs with zero configuration.

Input caps mirror the limits of the input forms.  They keep
every trace small enough to snapshot whole tables per step.
"""

import os
import secrets

from dotenv import load_dotenv

# Load .env from project root
load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


SECRET_KEY            = os.getenv("SECRET_KEY") or secrets.token_hex(32)
LOG_LEVEL             = os.getenv("LOG_LEVEL", "INFO").upper()

# playback (milliseconds per step)
PLAYBACK_INTERVAL_MS  = _int_env("PLAYBACK_INTERVAL_MS", 900)
MINI_SORT_INTERVAL_MS = _int_env("MINI_SORT_INTERVAL_MS", 120)

# in-memory run store
MAX_STORED_RUNS       = _int_env("MAX_STORED_RUNS", 64)


# ---------------------------------------------------------------------------
# Input caps
# ---------------------------------------------------------------------------
GCD_MAX_OPERAND      = 10_000
SIEVE_MAX_N          = 100
FAST_EXP_MAX_BASE    = 50
FAST_EXP_MAX_EXP     = 30
FIBONACCI_MAX_N      = 50
FACTOR_MAX_N         = 100_000

DP_FIBONACCI_MAX_N   = 30
KNAPSACK_MAX_ITEMS   = 6
KNAPSACK_MAX_CAP     = 20
DP_MAX_AMOUNT        = 100
DP_MAX_STRING        = 12
DP_MAX_ARRAY         = 20
DP_MAX_GRID_SIDE     = 8

GREEDY_MAX_ELEMENTS  = 20
HUFFMAN_MAX_TEXT     = 64
GREEDY_MAX_AMOUNT    = 10_000
GREEDY_MAX_CAPACITY  = 1_000
GREEDY_MAX_TIME      = 1_000
GREEDY_MAX_QUANTITY  = 10_000
GREEDY_MAX_DEADLINE  = 50

ARRAY_MAX_LENGTH     = 40
GRAPH_MAX_NODES      = 16
