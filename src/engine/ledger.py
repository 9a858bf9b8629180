"""
Speed Dice - Roll Ledger

Append-only, newest-first history of completed rolls for one session, with
per-player statistics projected from it on demand.
"""

from collections import deque
from typing import Iterator

from src.engine.base import PlayerStats, RollRecord


class RollLedger:
    """Newest-first log of RollRecords.

    Records are immutable; the ledger only ever prepends or clears.
    Statistics are recomputed on every call rather than cached.
    """

    def __init__(self) -> None:
        self._records: deque[RollRecord] = deque()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RollRecord]:
        return iter(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    @property
    def records(self) -> tuple[RollRecord, ...]:
        """All records, newest first."""
        return tuple(self._records)

    @property
    def latest(self) -> RollRecord | None:
        """The most recent record, or None when empty."""
        return self._records[0] if self._records else None

    def append(self, record: RollRecord) -> None:
        """Add a record at the front of the log."""
        self._records.appendleft(record)

    def clear(self) -> None:
        self._records.clear()

    def roll_number(self, index: int) -> int:
        """Sequential number of the record at ``index`` (oldest roll is #1).

        Raises:
            IndexError: If index is out of range
        """
        if not (0 <= index < len(self._records)):
            raise IndexError(f"No roll at position {index}.")
        return len(self._records) - index

    def stats_for(self, player: int) -> PlayerStats:
        """Aggregate statistics for one player.

        Args:
            player: Zero-based player index

        Returns:
            PlayerStats; average_total is None when the player has no rolls
        """
        totals = [r.total for r in self._records if r.player == player]
        special = sum(1 for r in self._records if r.player == player and r.is_special)

        if not totals:
            return PlayerStats(player=player)

        return PlayerStats(
            player=player,
            rolls=len(totals),
            average_total=sum(totals) / len(totals),
            special_rolls=special,
        )

    def stats_for_all(self, player_count: int) -> list[PlayerStats]:
        """Statistics for players 0..player_count-1, in seat order."""
        return [self.stats_for(player) for player in range(player_count)]
