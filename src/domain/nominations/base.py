"""Shared types for nomination categories."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from domain.common import GroupedHero, PlayerStats

SortValue = float | tuple[float, ...]


class Direction(str, Enum):
    """Which end of the metric wins the category."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class NominationParameters:
    max_awards_per_player: int = 2
    min_active_players: int = 2
    min_matches: int = 3
    participation_floor: float = 10.0
    lucky_min_win_rate: float = 60.0
    lucky_max_kda: float = 2.0
    clown_min_hero_share: float = 0.7
    clown_max_hero_win_rate: float = 50.0
    specialist_min_hero_games: int = 5
    specialist_min_hero_win_rate: float = 60.0
    long_match_min_count: int = 2
    enabled: tuple[str, ...] | None = None


@dataclass(frozen=True)
class Candidate:
    """A player's stats together with their grouped heroes for the period."""

    stats: PlayerStats
    heroes: tuple[GroupedHero, ...] = ()

    @property
    def main_hero(self) -> GroupedHero | None:
        return self.heroes[0] if self.heroes else None

    @property
    def main_hero_share(self) -> float:
        hero = self.main_hero
        if hero is None or self.stats.total_matches == 0:
            return 0.0
        return hero.total / self.stats.total_matches

    def per_game(self, value: int) -> float:
        return value / self.stats.total_matches


MetricFn = Callable[[Candidate], SortValue]
EligibilityFn = Callable[[Candidate], bool]
FormatFn = Callable[[Candidate], str]
HeroFn = Callable[[Candidate], str | None]


def _always(_: Candidate) -> bool:
    return True


def _no_hero(_: Candidate) -> str | None:
    return None


@dataclass(frozen=True)
class NominationCategory:
    """One award: a metric, which end of it wins, and who may compete."""

    key: str
    title: str
    emoji: str
    metric: MetricFn
    direction: Direction
    format_value: FormatFn
    is_eligible: EligibilityFn = field(default=_always)
    hero_name: HeroFn = field(default=_no_hero)


__all__ = [
    "Candidate",
    "Direction",
    "NominationCategory",
    "NominationParameters",
    "SortValue",
]
