"""
Tests for settings, season tags and log masking.
"""

import pytest

from src.config.settings import AppSettings, load_settings
from src.logging.setup import mask_secret, sensitive_data_filter
from src.models.enums import SeasonTag
from src.models.team import TeamRecord, fallback_team_name


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("SUPABASE_URL", "SUPABASE_KEY", "TEAMS_TABLE", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        app_settings = AppSettings(_env_file=None)
        assert app_settings.supabase_configured is False
        assert app_settings.teams_table == "teams"
        assert app_settings.default_season == 2025

    def test_invalid_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        assert load_settings().log_level == "INFO"

    def test_log_level_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert load_settings().log_level == "DEBUG"

    def test_configured_from_environment(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
        monkeypatch.setenv("SUPABASE_KEY", "anon")
        assert AppSettings(_env_file=None).supabase_configured is True


class TestSeasonTag:
    def test_route_slugs(self):
        assert SeasonTag.AGE.route_slug == "age"
        assert SeasonTag.GAME_CHANGERS.route_slug == "gameChangers"
        assert all(season.route_slug for season in SeasonTag)

    def test_latest(self):
        assert SeasonTag.latest() is SeasonTag.AGE

    @pytest.mark.parametrize(
        "value,expected",
        [
            (2024, SeasonTag.INTO_THE_DEEP),
            ("2019", SeasonTag.RISE),
            (1999, SeasonTag.AGE),
            ("abc", SeasonTag.AGE),
            (None, SeasonTag.AGE),
        ],
    )
    def test_from_year(self, value, expected):
        assert SeasonTag.from_year(value) is expected

    def test_from_year_custom_default(self):
        assert SeasonTag.from_year("bad", default=SeasonTag.RISE) is SeasonTag.RISE


class TestTeamRecord:
    def test_wire_names(self):
        record = TeamRecord.model_validate({"teamNumber": 254, "teamName": "Cheesy"})
        assert record.team_number == 254
        assert record.display_name == "Cheesy"

    def test_display_name_fallbacks(self):
        assert TeamRecord(team_number=7).display_name == "Team 7"
        assert TeamRecord().display_name == "Unknown team"

    def test_display_name_matches_fallback_format(self):
        assert TeamRecord(team_number=31).display_name == fallback_team_name(31)

    def test_number_label(self):
        assert TeamRecord(team_number=0).number_label == "0"
        assert TeamRecord(team_number=118).number_label == "118"
        assert TeamRecord().number_label == "-"


class TestLogMasking:
    def test_mask_secret(self):
        assert mask_secret("abcdefghijkl") == "abcd****ijkl"
        assert mask_secret("short") == "********"

    def test_sensitive_extras_are_masked(self):
        record = {"message": "hello", "extra": {"api_key": "abcdefghijkl", "team": 5}}
        assert sensitive_data_filter(record) is True
        assert record["extra"] == {"api_key": "abcd****ijkl", "team": 5}
