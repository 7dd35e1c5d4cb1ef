"""End-to-end period report for a tracked party of players."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime

from domain.common import GroupedHero, MatchRecord, Nomination, PlayerStats, TimeWindow
from domain.config import ReportConfig, default_report_config
from domain.nominations.engine import compute_nominations
from domain.periods import describe_period, resolve_window
from domain.protocol import HeroNameResolver, PeriodTag
from domain.stats import (
    best_hero,
    group_heroes,
    round_half_up,
    summarize_matches,
    win_rate_percent,
)

# Longer periods list fewer heroes per player; unlisted periods show every hero.
HERO_DISPLAY_LIMITS: dict[PeriodTag, int] = {PeriodTag.WEEK: 9, PeriodTag.MONTH: 6}


@dataclass(frozen=True)
class PlayerMatches:
    """Input provider payload for one tracked player."""

    player_id: int
    display_name: str
    matches: tuple[MatchRecord, ...]
    avg_apm: float | None = None
    rank_tier: int | None = None


@dataclass(frozen=True)
class TeamSummary:
    total_matches: int
    total_wins: int
    total_losses: int
    win_rate_percent: int
    players_played: int
    players_tracked: int
    avg_apm: int | None
    avg_kda: float | None


@dataclass(frozen=True)
class PeriodReport:
    """Everything a consumer needs to render one period."""

    period: PeriodTag
    label: str
    window: TimeWindow
    players: tuple[PlayerStats, ...]
    hero_names: dict[int, list[str]]
    nominations: tuple[Nomination, ...]
    summary: TeamSummary

    @property
    def active_players(self) -> tuple[PlayerStats, ...]:
        return tuple(stats for stats in self.players if stats.is_active)

    @property
    def inactive_players(self) -> tuple[PlayerStats, ...]:
        return tuple(stats for stats in self.players if not stats.is_active)


def performance_emoji(stats: PlayerStats) -> str:
    if stats.total_matches == 0:
        return "😴"
    if stats.win_rate_percent >= 75:
        return "🔥"
    if stats.win_rate_percent >= 50:
        return "⭐"
    if stats.win_rate_percent >= 25:
        return "😐"
    return "💀"


def sort_by_performance(players: Sequence[PlayerStats]) -> list[PlayerStats]:
    """Active players first, then most matches, then best win rate."""
    return sorted(
        players,
        key=lambda stats: (
            not stats.is_active,
            -stats.total_matches,
            -stats.win_rate_percent,
            stats.display_name.casefold(),
            stats.player_id,
        ),
    )


def summarize_team(players: Sequence[PlayerStats]) -> TeamSummary:
    total_matches = sum(stats.total_matches for stats in players)
    total_wins = sum(stats.wins for stats in players)

    apm_values = [stats.avg_apm for stats in players if stats.avg_apm is not None]
    kda_values = [stats.avg_kda for stats in players if stats.avg_kda is not None]
    avg_apm = int(round_half_up(sum(apm_values) / len(apm_values))) if apm_values else None
    avg_kda = round_half_up(sum(kda_values) / len(kda_values), 2) if kda_values else None

    return TeamSummary(
        total_matches=total_matches,
        total_wins=total_wins,
        total_losses=sum(stats.losses for stats in players),
        win_rate_percent=win_rate_percent(total_wins, total_matches),
        players_played=sum(1 for stats in players if stats.is_active),
        players_tracked=len(players),
        avg_apm=avg_apm,
        avg_kda=avg_kda,
    )


def resolve_hero_names(
    players: Sequence[PlayerStats],
    resolver: HeroNameResolver,
) -> dict[int, list[str]]:
    """Hero names per player, aligned with each player's ``heroes``."""
    hero_names: dict[int, list[str]] = {}
    for stats in players:
        if not stats.heroes:
            hero_names[stats.player_id] = []
            continue
        hero_names[stats.player_id] = resolver.resolve([hero.hero_id for hero in stats.heroes])
    return hero_names


def _format_grouped_hero(hero: GroupedHero) -> str:
    return f"{hero.name}: {hero.wins}W/{hero.losses}L"


def format_hero_line(heroes: Sequence[GroupedHero], period: PeriodTag | str) -> str:
    """Comma-separated hero records, truncated with ``+N more`` for long periods."""
    limit = HERO_DISPLAY_LIMITS.get(PeriodTag(period))
    shown = list(heroes) if limit is None else list(heroes[:limit])
    line = ", ".join(_format_grouped_hero(hero) for hero in shown)
    hidden = len(heroes) - len(shown)
    if hidden > 0:
        line = f"{line} +{hidden} more"
    return line


def format_player_card(
    stats: PlayerStats,
    hero_names: Sequence[str],
    period: PeriodTag | str,
) -> list[str]:
    """Text lines describing one active player's period."""
    lines = [
        f"{performance_emoji(stats)} {stats.display_name}",
        f"{stats.win_rate_percent}% - {stats.wins}W / {stats.losses}L",
    ]

    heroes = group_heroes(stats.heroes, hero_names)
    if heroes:
        lines.append(format_hero_line(heroes, period))
    top = best_hero(heroes)
    if top is not None and top.wins > 0:
        lines.append(f"Best hero: {_format_grouped_hero(top)}")

    metrics = []
    if stats.avg_kda is not None:
        metrics.append(f"KDA {stats.avg_kda}")
    if stats.avg_apm is not None:
        metrics.append(f"APM {int(round_half_up(stats.avg_apm))}")
    if metrics:
        lines.append(" - ".join(metrics))
    return lines


def build_period_report(
    players: Sequence[PlayerMatches],
    period: PeriodTag | str,
    *,
    now: datetime,
    hero_names: HeroNameResolver,
    config: ReportConfig | None = None,
    echo: Callable[[str], None] | None = None,
) -> PeriodReport:
    """Aggregate every player for ``period`` and assign nominations."""
    config = config or default_report_config()
    period = PeriodTag(period)
    window = resolve_window(period, now, config.clock)

    all_stats = [
        summarize_matches(
            player.player_id,
            player.display_name,
            player.matches,
            window,
            avg_apm=player.avg_apm,
            rank_tier=player.rank_tier,
            clock=config.clock,
            params=config.stats,
        )
        for player in players
    ]
    ordered = sort_by_performance(all_stats)
    names = resolve_hero_names(ordered, hero_names)

    active = [stats for stats in ordered if stats.is_active]
    nominations = compute_nominations(active, names, params=config.nominations)
    summary = summarize_team(ordered)

    if echo is not None:
        echo(
            f"config={config.name} "
            f"period={period.value} "
            f"window_start={window.start} "
            f"window_end={window.end} "
            f"players_tracked={summary.players_tracked} "
            f"players_played={summary.players_played} "
            f"total_matches={summary.total_matches} "
            f"nominations={len(nominations)}"
        )

    return PeriodReport(
        period=period,
        label=describe_period(period, now, config.clock),
        window=window,
        players=tuple(ordered),
        hero_names=names,
        nominations=tuple(nominations),
        summary=summary,
    )


__all__ = [
    "HERO_DISPLAY_LIMITS",
    "PeriodReport",
    "PlayerMatches",
    "TeamSummary",
    "build_period_report",
    "format_hero_line",
    "format_player_card",
    "performance_emoji",
    "resolve_hero_names",
    "sort_by_performance",
    "summarize_team",
]
