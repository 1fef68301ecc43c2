# apps/players/conf.py
# ================================================================================
"""Configuration and constants for the 'players' app."""

from __future__ import annotations

from datetime import timedelta
from typing import Final

# ─── Reconciliation ────────────────────────────────────────────────────────────
# Stored matches are served as-is while the player's last refresh is younger
# than this; afterwards a refresh pass runs.
PLAYER_STATS_TTL: Final[timedelta] = timedelta(seconds=3600)

# Size of the match window both fetched from upstream and aggregated over.
RECENT_MATCH_LIMIT: Final[int] = 20

# Number of champions reported in `championWinRates`.
TOP_CHAMPIONS: Final[int] = 2

# ─── Empty-result messages ─────────────────────────────────────────────────────
MSG_NO_MATCHES: Final[str] = "No matches found for this player"
MSG_NO_CACHED_MATCHES: Final[str] = "No matches found in DB for this player (cache)."

# ─── Storage ───────────────────────────────────────────────────────────────────
# Unknown regions are routed to the default cluster rather than rejected, so the
# stored value is clamped to the column width instead of failing the upsert.
MAX_REGION_LENGTH: Final[int] = 32
