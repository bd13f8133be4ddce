# ============================
# LEADERBOARD.PY - Lakbay Batangas
# Runtime-only ranking of finished sessions
# ============================

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaderboardEntry:
    name: str
    points: int


class Leaderboard:
    """Finished players kept in descending score order (newest first among ties)."""

    def __init__(self):
        self.entries = []

    def insert(self, name: str, points: int) -> int:
        """Sorted insert; returns the 1-based rank of the new entry."""
        idx = 0
        # Strictly greater: a new score goes above older equal ones
        while idx < len(self.entries) and self.entries[idx].points > points:
            idx += 1
        self.entries.insert(idx, LeaderboardEntry(name, points))
        logger.info("Leaderboard: %s placed #%d with %d pts", name, idx + 1, points)
        return idx + 1

    def render(self):
        """[(rank, name, points), ...] for display."""
        return [(rank, e.name, e.points) for rank, e in enumerate(self.entries, start=1)]

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)
