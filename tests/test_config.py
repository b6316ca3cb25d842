"""환경변수 플래그 기본값 바인딩 테스트."""

from __future__ import annotations

import logging

import pytest

from freqcount.config import env_bool, env_default, env_key


@pytest.mark.parametrize(
    ("flag", "key"),
    [("skip-errors", "FREQCOUNT_SKIP_ERRORS"), ("--number", "FREQCOUNT_NUMBER"), ("json", "FREQCOUNT_JSON")],
)
def test_env_key(flag, key):
    assert env_key(flag) == key


class TestEnvBool:
    def test_missing_uses_default(self):
        assert env_bool("sort", environ={}) is False
        assert env_bool("sort", True, environ={}) is True

    @pytest.mark.parametrize("value", ["1", "t", "true", "TRUE", "True", "yes", "on", " true "])
    def test_truthy(self, value):
        assert env_bool("sort", environ={"FREQCOUNT_SORT": value}) is True

    @pytest.mark.parametrize("value", ["0", "f", "false", "FALSE", "no", "off"])
    def test_falsy(self, value):
        assert env_bool("sort", True, environ={"FREQCOUNT_SORT": value}) is False

    def test_unprefixed_variable_is_ignored(self):
        assert env_bool("lines", environ={"LINES": "true"}) is False

    def test_invalid_value_falls_back_to_default(self, caplog):
        with caplog.at_level(logging.WARNING, logger="freqcount.config"):
            assert env_bool("lines", environ={"FREQCOUNT_LINES": "24"}) is False
        assert "FREQCOUNT_LINES" in caplog.text

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("FREQCOUNT_SKIP_ERRORS", "true")
        assert env_bool("skip-errors") is True


class TestEnvDefault:
    def test_missing_uses_default(self):
        assert env_default("number", 1, environ={}) == 1

    def test_value_is_left_for_argparse(self):
        assert env_default("maximum", -1, environ={"FREQCOUNT_MAXIMUM": " 5 "}) == " 5 "
