"""Shared types for period stats and nominations."""

from __future__ import annotations

from dataclasses import dataclass

RADIANT_SLOT_LIMIT = 128


@dataclass(frozen=True)
class MatchRecord:
    """Canonical per-player match payload used by the stats aggregator."""

    match_id: int
    player_slot: int
    radiant_win: bool
    start_time: int
    duration: int
    hero_id: int
    kills: int
    deaths: int
    assists: int

    @property
    def is_radiant(self) -> bool:
        return self.player_slot < RADIANT_SLOT_LIMIT

    @property
    def is_win(self) -> bool:
        return self.is_radiant == self.radiant_win


@dataclass(frozen=True)
class TimeWindow:
    """Half-open ``[start, end)`` window in epoch seconds; ``end=None`` is unbounded."""

    start: int
    end: int | None = None

    def contains(self, timestamp: int) -> bool:
        if timestamp < self.start:
            return False
        return self.end is None or timestamp < self.end

    @property
    def is_bounded(self) -> bool:
        return self.end is not None


@dataclass(frozen=True)
class HeroOutcome:
    hero_id: int
    is_win: bool


@dataclass(frozen=True)
class GroupedHero:
    """Wins and losses of one hero within a period."""

    hero_id: int
    name: str
    wins: int
    losses: int

    @property
    def total(self) -> int:
        return self.wins + self.losses

    @property
    def win_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return (self.wins / self.total) * 100.0


@dataclass(frozen=True)
class PlayerStats:
    """Aggregate for one player over one period."""

    player_id: int
    display_name: str
    wins: int
    losses: int
    total_matches: int
    win_rate_percent: int
    heroes: tuple[HeroOutcome, ...]
    total_kills: int
    total_deaths: int
    total_assists: int
    total_duration: int
    avg_duration: int
    long_match_count: int
    long_match_wins: int
    night_match_count: int
    morning_match_count: int
    avg_apm: float | None = None
    avg_kda: float | None = None
    rank_tier: int | None = None

    @property
    def is_active(self) -> bool:
        return self.total_matches > 0


@dataclass(frozen=True)
class Nomination:
    """One award category assigned to one player."""

    key: str
    title: str
    emoji: str
    player: PlayerStats
    value: str
    hero_name: str | None = None


__all__ = [
    "GroupedHero",
    "HeroOutcome",
    "MatchRecord",
    "Nomination",
    "PlayerStats",
    "RADIANT_SLOT_LIMIT",
    "TimeWindow",
]
