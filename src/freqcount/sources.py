"""입력 소스 수집 모듈.

파일 경로 또는 표준 입력(``-``/``stdin``)을 순서대로 열어 토크나이저에 넘기고
결과 토큰을 빈도 카운터에 누적한다. 소스는 한 번에 하나씩 끝까지 처리한다.
"""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from typing import BinaryIO

from freqcount.constants import STDIN_SENTINELS
from freqcount.counter import FrequencyCounter
from freqcount.errors import SourceAccessError
from freqcount.tokenizer import SplitMode, Splitter, get_splitter
from freqcount.utils.logging_config import get_logger

logger = get_logger(__name__)


def is_stdin(source: str) -> bool:
    """소스 식별자가 표준 입력을 뜻하는지 확인한다."""
    return source in STDIN_SENTINELS


@contextmanager
def open_source(source: str, stdin: BinaryIO | None = None) -> Iterator[BinaryIO | None]:
    """소스를 바이너리 스트림으로 연다.

    표준 입력은 닫지 않는다. 일반 파일이 아닌 경로(디렉토리, FIFO, 장치 등)는
    None 을 넘겨 건너뛰게 한다.

    Args:
        source: 파일 경로 또는 ``-``/``stdin``
        stdin: 표준 입력 대신 사용할 바이너리 스트림 (None이면 sys.stdin.buffer)

    Yields:
        읽기용 바이너리 스트림, 또는 건너뛸 소스이면 None

    Raises:
        OSError: 파일을 stat 하거나 열 수 없는 경우
    """
    if is_stdin(source):
        yield stdin if stdin is not None else sys.stdin.buffer
        return

    # 디렉토리나 FIFO 는 열기 전에 걸러낸다
    if not stat.S_ISREG(os.stat(source).st_mode):
        yield None
        return

    with open(source, "rb") as handle:
        yield handle


def count_source(
    source: str,
    splitter: Splitter,
    counter: FrequencyCounter,
    *,
    skip_errors: bool = False,
    stdin: BinaryIO | None = None,
) -> bool:
    """소스 하나의 토큰을 카운터에 누적한다.

    읽는 도중 오류가 나면 그때까지 집계된 토큰은 카운터에 남는다.

    Args:
        source: 파일 경로 또는 ``-``/``stdin``
        splitter: 토큰 분리 함수
        counter: 누적 대상 카운터
        skip_errors: True이면 접근 오류를 경고로 남기고 건너뛴다
        stdin: 표준 입력 대신 사용할 바이너리 스트림

    Returns:
        소스를 실제로 읽었으면 True, 건너뛰었으면 False

    Raises:
        SourceAccessError: skip_errors 가 False 이고 소스 접근에 실패한 경우
    """
    try:
        with open_source(source, stdin) as stream:
            if stream is None:
                logger.warning("일반 파일이 아니므로 건너뜁니다: %s", source)
                return False
            counter.update(splitter(stream))
    except OSError as e:
        if skip_errors:
            logger.warning("⚠️  소스를 건너뜁니다 (%s): %s", source, e)
            return False
        label = "표준 입력" if is_stdin(source) else f"파일 {source!r}"
        raise SourceAccessError(f"{label}에서 토큰을 읽는 중 오류가 발생했습니다: {e}", source) from e

    logger.debug("소스 처리 완료: %s (고유 토큰 누적 %d개)", source, counter.size())
    return True


def count_sources(
    sources: Iterable[str],
    mode: SplitMode | str,
    *,
    skip_errors: bool = False,
    stdin: BinaryIO | None = None,
    on_source: Callable[[str, bool], None] | None = None,
) -> FrequencyCounter:
    """모든 소스의 토큰 빈도 히스토그램을 생성한다.

    Args:
        sources: 파일 경로 또는 ``-``/``stdin`` 목록
        mode: 토큰 분리 정책
        skip_errors: True이면 접근할 수 없는 소스를 건너뛴다
        stdin: 표준 입력 대신 사용할 바이너리 스트림
        on_source: 소스 하나를 마칠 때마다 (소스, 실제로 읽었는지) 로 호출되는 콜백

    Returns:
        집계된 빈도 카운터

    Raises:
        SourceAccessError: skip_errors 가 False 이고 소스 접근에 실패한 경우
    """
    splitter = get_splitter(mode)
    counter = FrequencyCounter()
    for source in sources:
        scanned = count_source(source, splitter, counter, skip_errors=skip_errors, stdin=stdin)
        if on_source is not None:
            on_source(source, scanned)
    return counter
