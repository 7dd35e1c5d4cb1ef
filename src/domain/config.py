"""Load report system definitions from TOML files."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from domain.config_base import (
    BaseSystemConfig,
    load_system_configs,
    parse_system_metadata,
    read_toml,
)
from domain.nominations.base import NominationParameters
from domain.nominations.categories import CATEGORY_KEYS
from domain.periods import ClockParameters
from domain.stats import StatsParameters


@dataclass(frozen=True)
class ReportConfig(BaseSystemConfig):
    """Configuration for one period report."""

    clock: ClockParameters = field(default_factory=ClockParameters)
    stats: StatsParameters = field(default_factory=StatsParameters)
    nominations: NominationParameters = field(default_factory=NominationParameters)

    def as_config_json(self) -> dict[str, Any]:
        nominations = asdict(self.nominations)
        if self.nominations.enabled is not None:
            nominations["enabled"] = list(self.nominations.enabled)
        return {
            "clock": asdict(self.clock),
            "stats": asdict(self.stats),
            "nominations": nominations,
        }


def default_report_config() -> ReportConfig:
    return ReportConfig(name="default", description=None, file_path=Path("<defaults>"))


def load_report_configs(config_dir: Path) -> list[ReportConfig]:
    """Load and validate all report TOML config files in a directory."""
    return load_system_configs(
        config_dir,
        _parse_report_config,
        duplicate_name_label="report",
    )


def load_report_config(file_path: Path) -> ReportConfig:
    """Load one report TOML file."""
    if not file_path.is_file():
        raise FileNotFoundError(f"Config file not found: {file_path}")
    return _parse_report_config(read_toml(file_path), file_path)


def _parse_report_config(raw: dict[str, Any], file_path: Path) -> ReportConfig:
    name, description = parse_system_metadata(raw, file_path)
    clock_raw = raw.get("clock", {})
    stats_raw = raw.get("stats", {})
    nominations_raw = raw.get("nominations", {})

    clock = ClockParameters(
        utc_offset_hours=int(clock_raw.get("utc_offset_hours", 3)),
        day_start_hour=int(clock_raw.get("day_start_hour", 6)),
    )
    stats = StatsParameters(
        long_match_minutes=int(stats_raw.get("long_match_minutes", 45)),
        night_start_hour=int(stats_raw.get("night_start_hour", 0)),
        night_end_hour=int(stats_raw.get("night_end_hour", 6)),
        morning_end_hour=int(stats_raw.get("morning_end_hour", 12)),
    )

    enabled_value = nominations_raw.get("enabled")
    enabled = None if enabled_value is None else tuple(str(key) for key in enabled_value)
    nominations = NominationParameters(
        max_awards_per_player=int(nominations_raw.get("max_awards_per_player", 2)),
        min_active_players=int(nominations_raw.get("min_active_players", 2)),
        min_matches=int(nominations_raw.get("min_matches", 3)),
        participation_floor=float(nominations_raw.get("participation_floor", 10.0)),
        lucky_min_win_rate=float(nominations_raw.get("lucky_min_win_rate", 60.0)),
        lucky_max_kda=float(nominations_raw.get("lucky_max_kda", 2.0)),
        clown_min_hero_share=float(nominations_raw.get("clown_min_hero_share", 0.7)),
        clown_max_hero_win_rate=float(nominations_raw.get("clown_max_hero_win_rate", 50.0)),
        specialist_min_hero_games=int(nominations_raw.get("specialist_min_hero_games", 5)),
        specialist_min_hero_win_rate=float(
            nominations_raw.get("specialist_min_hero_win_rate", 60.0)
        ),
        long_match_min_count=int(nominations_raw.get("long_match_min_count", 2)),
        enabled=enabled,
    )

    _validate_clock(file_path=file_path, clock=clock)
    _validate_stats(file_path=file_path, stats=stats)
    _validate_nominations(file_path=file_path, nominations=nominations)

    return ReportConfig(
        name=name,
        description=description,
        file_path=file_path,
        clock=clock,
        stats=stats,
        nominations=nominations,
    )


def _validate_clock(*, file_path: Path, clock: ClockParameters) -> None:
    if clock.utc_offset_hours < -12 or clock.utc_offset_hours > 14:
        raise ValueError(f"{file_path}: [clock].utc_offset_hours must be between -12 and 14")
    if clock.day_start_hour < 0 or clock.day_start_hour > 23:
        raise ValueError(f"{file_path}: [clock].day_start_hour must be between 0 and 23")


def _validate_stats(*, file_path: Path, stats: StatsParameters) -> None:
    if stats.long_match_minutes <= 0:
        raise ValueError(f"{file_path}: [stats].long_match_minutes must be > 0")
    if not 0 <= stats.night_start_hour < stats.night_end_hour:
        raise ValueError(
            f"{file_path}: [stats].night_start_hour must be >= 0 and below night_end_hour"
        )
    if not stats.night_end_hour < stats.morning_end_hour <= 24:
        raise ValueError(
            f"{file_path}: [stats].morning_end_hour must be above night_end_hour and <= 24"
        )


def _validate_nominations(*, file_path: Path, nominations: NominationParameters) -> None:
    if nominations.max_awards_per_player <= 0:
        raise ValueError(f"{file_path}: [nominations].max_awards_per_player must be > 0")
    if nominations.min_active_players < 2:
        raise ValueError(f"{file_path}: [nominations].min_active_players must be >= 2")
    if nominations.min_matches < 1:
        raise ValueError(f"{file_path}: [nominations].min_matches must be >= 1")
    if nominations.participation_floor <= 0.0:
        raise ValueError(f"{file_path}: [nominations].participation_floor must be > 0")
    if nominations.lucky_min_win_rate < 0.0 or nominations.lucky_min_win_rate > 100.0:
        raise ValueError(f"{file_path}: [nominations].lucky_min_win_rate must be between 0 and 100")
    if nominations.lucky_max_kda <= 0.0:
        raise ValueError(f"{file_path}: [nominations].lucky_max_kda must be > 0")
    if nominations.clown_min_hero_share <= 0.0 or nominations.clown_min_hero_share > 1.0:
        raise ValueError(f"{file_path}: [nominations].clown_min_hero_share must be between 0 and 1")
    if nominations.clown_max_hero_win_rate < 0.0 or nominations.clown_max_hero_win_rate > 100.0:
        raise ValueError(
            f"{file_path}: [nominations].clown_max_hero_win_rate must be between 0 and 100"
        )
    if nominations.specialist_min_hero_games < 1:
        raise ValueError(f"{file_path}: [nominations].specialist_min_hero_games must be >= 1")
    if (
        nominations.specialist_min_hero_win_rate < 0.0
        or nominations.specialist_min_hero_win_rate > 100.0
    ):
        raise ValueError(
            f"{file_path}: [nominations].specialist_min_hero_win_rate must be between 0 and 100"
        )
    if nominations.long_match_min_count < 1:
        raise ValueError(f"{file_path}: [nominations].long_match_min_count must be >= 1")
    if nominations.enabled is not None:
        unknown = sorted(set(nominations.enabled) - set(CATEGORY_KEYS))
        if unknown:
            raise ValueError(f"{file_path}: [nominations].enabled has unknown categories {unknown}")


__all__ = [
    "ReportConfig",
    "default_report_config",
    "load_report_config",
    "load_report_configs",
]
