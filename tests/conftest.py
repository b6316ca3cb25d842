"""테스트 공용 fixture."""

from __future__ import annotations

from pathlib import Path

import pytest

from freqcount.counter import FrequencyCounter

# 플래그 기본값을 덮어쓰는 환경변수
_FLAG_ENV_KEYS = tuple(
    f"FREQCOUNT_{name}"
    for name in ("BYTES", "WORDS", "LINES", "JSON", "YAML", "CSV", "SKIP_ERRORS", "SORT", "NUMBER", "MINIMUM", "MAXIMUM")
)


@pytest.fixture(autouse=True)
def clean_flag_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """외부 환경변수가 플래그 기본값에 섞이지 않도록 제거한다."""
    for key in _FLAG_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def foo_bar_counter() -> FrequencyCounter:
    """foo 10회, bar 5회 집계된 카운터."""
    counter = FrequencyCounter()
    for _ in range(10):
        counter.increment("foo")
    for _ in range(5):
        counter.increment("bar")
    return counter


@pytest.fixture
def words_file(tmp_path: Path) -> Path:
    """단어 빈도가 the 3, cat 2, sat·on·mat 1 인 텍스트 파일."""
    path = tmp_path / "words.txt"
    path.write_text("the cat sat\non the mat, the cat!\n", encoding="utf-8")
    return path


@pytest.fixture
def lines_file(tmp_path: Path) -> Path:
    """CRLF 줄바꿈을 섞은 줄 빈도 테스트 파일."""
    path = tmp_path / "lines.txt"
    path.write_bytes(b"alpha\r\nbeta\nalpha\ngamma\r\nalpha\nbeta")
    return path
