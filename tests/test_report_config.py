"""Tests for TOML-based report config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from domain.config import default_report_config, load_report_config, load_report_configs


def test_load_report_configs_from_directory(tmp_path: Path) -> None:
    config_path = tmp_path / "default.toml"
    config_path.write_text(
        """
[system]
name = "party_a"
description = "A test report"

[clock]
utc_offset_hours = 2
day_start_hour = 5

[stats]
long_match_minutes = 50
night_start_hour = 1
night_end_hour = 5
morning_end_hour = 11

[nominations]
max_awards_per_player = 3
min_active_players = 3
min_matches = 4
participation_floor = 12.5
lucky_min_win_rate = 65.0
lucky_max_kda = 1.5
clown_min_hero_share = 0.8
clown_max_hero_win_rate = 40.0
specialist_min_hero_games = 7
specialist_min_hero_win_rate = 70.0
long_match_min_count = 3
enabled = ["loser", "grinder"]
""".strip()
    )

    configs = load_report_configs(tmp_path)
    assert len(configs) == 1

    system = configs[0]
    assert system.name == "party_a"
    assert system.description == "A test report"
    assert system.clock.utc_offset_hours == 2
    assert system.clock.day_start_hour == 5
    assert system.stats.long_match_minutes == 50
    assert system.stats.night_start_hour == 1
    assert system.stats.night_end_hour == 5
    assert system.stats.morning_end_hour == 11
    assert system.nominations.max_awards_per_player == 3
    assert system.nominations.min_active_players == 3
    assert system.nominations.min_matches == 4
    assert system.nominations.participation_floor == pytest.approx(12.5)
    assert system.nominations.lucky_min_win_rate == pytest.approx(65.0)
    assert system.nominations.lucky_max_kda == pytest.approx(1.5)
    assert system.nominations.clown_min_hero_share == pytest.approx(0.8)
    assert system.nominations.clown_max_hero_win_rate == pytest.approx(40.0)
    assert system.nominations.specialist_min_hero_games == 7
    assert system.nominations.specialist_min_hero_win_rate == pytest.approx(70.0)
    assert system.nominations.long_match_min_count == 3
    assert system.nominations.enabled == ("loser", "grinder")
    assert system.as_config_json()["nominations"]["enabled"] == ["loser", "grinder"]


def test_all_defaults_when_sections_omitted(tmp_path: Path) -> None:
    config_path = tmp_path / "defaulted.toml"
    config_path.write_text(
        """
[system]
name = "party_defaulted"
""".strip()
    )

    system = load_report_config(config_path)
    defaults = default_report_config()
    assert system.description is None
    assert system.clock == defaults.clock
    assert system.stats == defaults.stats
    assert system.nominations == defaults.nominations
    assert system.clock.utc_offset_hours == 3
    assert system.clock.day_start_hour == 6
    assert system.nominations.max_awards_per_player == 2
    assert system.nominations.enabled is None


def test_duplicate_names_raise_error(tmp_path: Path) -> None:
    template = """
[system]
name = "dup"
""".strip()
    (tmp_path / "a.toml").write_text(template)
    (tmp_path / "b.toml").write_text(template)

    with pytest.raises(ValueError, match="Duplicate report system names"):
        load_report_configs(tmp_path)


def test_missing_name_raises(tmp_path: Path) -> None:
    (tmp_path / "nameless.toml").write_text("[system]\ndescription = 'x'\n")
    with pytest.raises(ValueError, match=r"\[system\].name is required"):
        load_report_configs(tmp_path)


def test_missing_directory_and_empty_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_report_configs(tmp_path / "nope")
    with pytest.raises(ValueError, match="No .toml config files"):
        load_report_configs(tmp_path)


@pytest.mark.parametrize(
    ("section", "body", "message"),
    [
        ("clock", "day_start_hour = 24", r"day_start_hour must be between 0 and 23"),
        ("clock", "utc_offset_hours = 15", r"utc_offset_hours must be between -12 and 14"),
        ("stats", "long_match_minutes = 0", r"long_match_minutes must be > 0"),
        ("stats", "morning_end_hour = 4", r"morning_end_hour must be above night_end_hour"),
        ("nominations", "max_awards_per_player = 0", r"max_awards_per_player must be > 0"),
        ("nominations", "min_active_players = 1", r"min_active_players must be >= 2"),
        ("nominations", "clown_min_hero_share = 1.5", r"clown_min_hero_share must be between 0 and 1"),
        ("nominations", 'enabled = ["mvp"]', r"enabled has unknown categories"),
    ],
)
def test_invalid_values_raise_validation_error(
    tmp_path: Path, section: str, body: str, message: str
) -> None:
    config_path = tmp_path / "invalid.toml"
    config_path.write_text(f'[system]\nname = "bad"\n\n[{section}]\n{body}\n')

    with pytest.raises(ValueError, match=message):
        load_report_config(config_path)


def test_bundled_default_config_loads() -> None:
    config_dir = Path(__file__).resolve().parents[1] / "configs" / "reports"
    configs = load_report_configs(config_dir)
    assert [config.name for config in configs] == ["party_default"]
    assert configs[0].nominations == default_report_config().nominations
