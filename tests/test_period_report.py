"""End-to-end tests for the party period report."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from domain.common import GroupedHero, HeroOutcome, MatchRecord, PlayerStats, TimeWindow
from domain.config import ReportConfig, default_report_config
from domain.nominations import NominationParameters
from domain.protocol import PeriodTag, StaticHeroNameResolver
from domain.report import (
    PlayerMatches,
    build_period_report,
    format_hero_line,
    format_player_card,
    performance_emoji,
    sort_by_performance,
    summarize_team,
)
from domain.stats import summarize_matches

MSK = timedelta(hours=3)
NOW = datetime(2026, 10, 21, 12) - MSK
HERO_NAMES = StaticHeroNameResolver({1: "Anti-Mage", 2: "Axe", 5: "Crystal Maiden", 14: "Pudge"})


def msk_epoch(day: int, hour: int) -> int:
    return int((datetime(2026, 10, day, hour) - MSK).replace(tzinfo=UTC).timestamp())


def match(match_id: int, *, day: int, hour: int, win: bool, hero_id: int, k: int, d: int, a: int) -> MatchRecord:
    return MatchRecord(
        match_id=match_id,
        player_slot=1,
        radiant_win=win,
        start_time=msk_epoch(day, hour),
        duration=2_500,
        hero_id=hero_id,
        kills=k,
        deaths=d,
        assists=a,
    )


def party() -> list[PlayerMatches]:
    return [
        PlayerMatches(
            player_id=10,
            display_name="Support4Life",
            matches=(
                match(1, day=21, hour=7, win=False, hero_id=5, k=1, d=8, a=12),
                match(2, day=21, hour=9, win=False, hero_id=5, k=2, d=7, a=15),
                match(3, day=21, hour=10, win=True, hero_id=5, k=0, d=5, a=20),
            ),
            avg_apm=98.0,
        ),
        PlayerMatches(
            player_id=20,
            display_name="ProGamer",
            matches=(
                match(4, day=21, hour=8, win=True, hero_id=1, k=15, d=2, a=6),
                match(5, day=21, hour=9, win=True, hero_id=2, k=12, d=1, a=8),
                # Before today's 06:00 boundary.
                match(6, day=21, hour=3, win=False, hero_id=1, k=3, d=9, a=1),
            ),
            avg_apm=185.0,
            rank_tier=62,
        ),
        PlayerMatches(player_id=30, display_name="Inactive", matches=()),
    ]


def test_today_report_orders_players_and_summarizes_team() -> None:
    lines: list[str] = []
    report = build_period_report(party(), PeriodTag.TODAY, now=NOW, hero_names=HERO_NAMES, echo=lines.append)

    assert report.label == "21.10.2026"
    assert report.window.end is None
    assert [stats.display_name for stats in report.players] == ["Support4Life", "ProGamer", "Inactive"]
    assert [stats.display_name for stats in report.inactive_players] == ["Inactive"]

    pro = report.players[1]
    assert pro.total_matches == 2
    assert pro.win_rate_percent == 100
    assert pro.rank_tier == 62
    assert report.hero_names[20] == ["Anti-Mage", "Axe"]
    assert report.hero_names[30] == []

    summary = report.summary
    assert summary.total_matches == 5
    assert summary.total_wins == 3
    assert summary.total_losses == 2
    assert summary.win_rate_percent == 60
    assert summary.players_played == 2
    assert summary.players_tracked == 3
    assert summary.avg_apm == 142
    assert summary.avg_kda is not None

    assert len(lines) == 1
    assert "period=today" in lines[0]
    assert "nominations=" in lines[0]


def test_report_nominations_respect_cap_and_skip_inactive() -> None:
    report = build_period_report(party(), "today", now=NOW, hero_names=HERO_NAMES)

    assert report.nominations
    winners = [nomination.player.player_id for nomination in report.nominations]
    assert 30 not in winners
    assert winners.count(10) <= 2
    assert winners.count(20) <= 2
    loser = next(n for n in report.nominations if n.key == "loser")
    assert loser.player.display_name == "Support4Life"


def test_single_active_player_gets_no_nominations() -> None:
    players = party()[1:]
    report = build_period_report(players, PeriodTag.TODAY, now=NOW, hero_names=HERO_NAMES)
    assert report.nominations == ()
    assert report.summary.players_played == 1


def test_week_report_includes_night_match() -> None:
    report = build_period_report(party(), PeriodTag.WEEK, now=NOW, hero_names=HERO_NAMES)
    pro = next(stats for stats in report.players if stats.player_id == 20)
    assert pro.total_matches == 3
    assert pro.night_match_count == 1
    assert report.label == "19.10.2026 - 21.10.2026 (Week)"


def test_config_is_applied_to_nominations() -> None:
    config = default_report_config()
    restricted = ReportConfig(
        name="only_grinder",
        description=None,
        file_path=config.file_path,
        clock=config.clock,
        stats=config.stats,
        nominations=NominationParameters(enabled=("grinder",)),
    )
    report = build_period_report(party(), PeriodTag.WEEK, now=NOW, hero_names=HERO_NAMES, config=restricted)
    assert [n.key for n in report.nominations] == ["grinder"]
    # Both have three games this week; the alphabetical tiebreak picks ProGamer.
    assert report.nominations[0].player.display_name == "ProGamer"


def test_summarize_team_without_optional_metrics() -> None:
    stats = [summarize_matches(1, "A", [], TimeWindow(start=0))]
    summary = summarize_team(stats)
    assert summary.total_matches == 0
    assert summary.win_rate_percent == 0
    assert summary.avg_apm is None
    assert summary.avg_kda is None


@pytest.mark.parametrize(
    ("wins", "losses", "emoji"),
    [(0, 0, "😴"), (3, 1, "🔥"), (1, 1, "⭐"), (1, 3, "😐"), (0, 4, "💀")],
)
def test_performance_emoji(wins: int, losses: int, emoji: str) -> None:
    matches = [
        MatchRecord(i, 1, i < wins, 100 + i, 2_000, 1, 1, 1, 1) for i in range(wins + losses)
    ]
    stats = summarize_matches(1, "A", matches, TimeWindow(start=0))
    assert performance_emoji(stats) == emoji


def test_sort_by_performance_puts_inactive_last() -> None:
    window = TimeWindow(start=0)
    idle = summarize_matches(1, "Aaron", [], window)
    busy = summarize_matches(2, "Zoe", [MatchRecord(1, 1, True, 100, 2_000, 1, 1, 1, 1)], window)
    assert [s.display_name for s in sort_by_performance([idle, busy])] == ["Zoe", "Aaron"]


def _grouped(count: int) -> list[GroupedHero]:
    return [GroupedHero(hero_id=index, name=f"Hero{index:02d}", wins=1, losses=0) for index in range(count)]


@pytest.mark.parametrize(
    ("period", "shown", "suffix"),
    [
        (PeriodTag.TODAY, 12, ""),
        (PeriodTag.YESTERDAY, 12, ""),
        (PeriodTag.WEEK, 9, " +3 more"),
        (PeriodTag.MONTH, 6, " +6 more"),
    ],
)
def test_hero_line_truncates_long_periods(period: PeriodTag, shown: int, suffix: str) -> None:
    line = format_hero_line(_grouped(12), period)
    assert line.count("W/") == shown
    assert line.endswith(f"Hero{shown - 1:02d}: 1W/0L{suffix}")


def test_hero_line_without_overflow_has_no_suffix() -> None:
    assert format_hero_line(_grouped(6), "month") == ", ".join(f"Hero{i:02d}: 1W/0L" for i in range(6))


def _card_stats(outcomes: tuple[HeroOutcome, ...], *, avg_apm: float | None = None) -> PlayerStats:
    matches = [
        MatchRecord(index, 1, outcome.is_win, 100 + index, 2_000, outcome.hero_id, 5, 2, 5)
        for index, outcome in enumerate(outcomes)
    ]
    return summarize_matches(1, "Carder", matches, TimeWindow(start=0), avg_apm=avg_apm)


def test_player_card_lists_heroes_and_best_hero() -> None:
    outcomes = (
        HeroOutcome(14, False),
        HeroOutcome(14, False),
        HeroOutcome(14, True),
        HeroOutcome(2, True),
        HeroOutcome(2, True),
    )
    stats = _card_stats(outcomes, avg_apm=150.5)
    names = ["Pudge", "Pudge", "Pudge", "Axe", "Axe"]

    lines = format_player_card(stats, names, PeriodTag.TODAY)
    assert lines == [
        "⭐ Carder",
        "60% - 3W / 2L",
        "Pudge: 1W/2L, Axe: 2W/0L",
        "Best hero: Axe: 2W/0L",
        "KDA 5.0 - APM 151",
    ]


def test_player_card_omits_best_hero_without_wins() -> None:
    stats = _card_stats((HeroOutcome(5, False), HeroOutcome(5, False)))
    lines = format_player_card(stats, ["Crystal Maiden"] * 2, PeriodTag.WEEK)
    assert "Crystal Maiden: 0W/2L" in lines
    assert not any(line.startswith("Best hero") for line in lines)
