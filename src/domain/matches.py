"""Match-level helpers shared by the stats aggregator."""

from __future__ import annotations

from collections.abc import Iterable

from domain.common import MatchRecord, TimeWindow


def is_win(match: MatchRecord) -> bool:
    """Radiant slots are 0-127, Dire slots 128-255."""
    return match.is_win


def filter_matches(matches: Iterable[MatchRecord], window: TimeWindow) -> list[MatchRecord]:
    """Keep matches whose start time falls inside ``window``."""
    return [match for match in matches if window.contains(match.start_time)]


def sort_matches(matches: Iterable[MatchRecord]) -> list[MatchRecord]:
    """Chronological order with match id as the tiebreak."""
    return sorted(matches, key=lambda match: (match.start_time, match.match_id))


__all__ = ["filter_matches", "is_win", "sort_matches"]
