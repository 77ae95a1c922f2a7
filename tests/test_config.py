"""Tests for environment-derived configuration."""

import pytest

from rapidwright_launcher.config import LauncherConfig, load_config


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        assert load_config({}) == LauncherConfig(java="java", verbose=0, quiet=0)

    def test_java_override(self):
        config = load_config({"RAPIDWRIGHT_LAUNCHER_JAVA": " /opt/jdk/bin/java "})

        assert config.java == "/opt/jdk/bin/java"

    def test_blank_java_falls_back_to_default(self):
        assert load_config({"RAPIDWRIGHT_LAUNCHER_JAVA": "  "}).java == "java"

    @pytest.mark.parametrize(
        "raw,expected",
        [("1", 1), ("yes", 1), ("ON", 1), ("0", 0), ("off", 0), ("maybe", 0), ("", 0)],
    )
    def test_verbose_flag(self, raw, expected):
        assert load_config({"RAPIDWRIGHT_LAUNCHER_VERBOSE": raw}).verbose == expected

    def test_quiet_flag(self):
        assert load_config({"RAPIDWRIGHT_LAUNCHER_QUIET": "true"}).quiet == 1

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("RAPIDWRIGHT_LAUNCHER_JAVA", "java17")

        assert load_config().java == "java17"
