"""토큰 집계 커맨드 공통 기반.

입력 소스를 토큰화하여 빈도 카운터를 만들고, 하위 클래스가 정의한 선택 질의의
결과를 지정한 형식으로 출력하는 흐름을 제공한다.
"""

from __future__ import annotations

import argparse
from abc import abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, BinaryIO, TextIO

from freqcount.config import env_bool
from freqcount.counter import FrequencyCounter
from freqcount.errors import ConfigurationError
from freqcount.output import OutputFormat, print_object, select_format
from freqcount.sources import count_sources
from freqcount.tokenizer import SplitMode
from freqcount.utils.logging_config import create_progress, get_logger

from .base import Command

logger = get_logger(__name__)


def add_split_args(parser: argparse.ArgumentParser) -> None:
    """분리 정책 플래그(-b/-w/-l)를 추가한다."""
    parser.add_argument("-b", "--bytes", action="store_true", default=env_bool("bytes"), help="바이트 빈도 집계")
    parser.add_argument("-w", "--words", action="store_true", default=env_bool("words"), help="단어 빈도 집계")
    parser.add_argument("-l", "--lines", action="store_true", default=env_bool("lines"), help="줄 빈도 집계")


def add_output_args(parser: argparse.ArgumentParser) -> None:
    """출력 형식과 오류 처리 플래그, 입력 소스 인자를 추가한다."""
    parser.add_argument("-j", "--json", action="store_true", default=env_bool("json"), help="JSON 출력")
    parser.add_argument("-y", "--yaml", action="store_true", default=env_bool("yaml"), help="YAML 출력")
    parser.add_argument("-c", "--csv", action="store_true", default=env_bool("csv"), help="CSV 출력")
    parser.add_argument(
        "-e",
        "--skip-errors",
        action="store_true",
        default=env_bool("skip-errors"),
        help="열거나 읽을 수 없는 소스를 건너뜀",
    )
    parser.add_argument("sources", nargs="+", metavar="SOURCE", help="입력 파일 경로 또는 표준 입력(- 또는 stdin)")


class CountingCommand(Command):
    """토큰 빈도 집계 커맨드의 공통 기반.

    실행 순서는 설정 검증 → 소스별 토큰 집계 → 선택 질의 → 출력이다.
    설정 오류는 입력을 읽기 전에 보고한다.

    Attributes:
        sources: 입력 소스 목록 (파일 경로 또는 ``-``/``stdin``)
        split_flags: 분리 정책별 선택 여부
        output_format: 출력 형식
        skip_errors: 접근할 수 없는 소스를 건너뛸지 여부
        stream: 결과 출력 스트림 (None이면 표준 출력)
        stdin: 표준 입력 대신 사용할 바이너리 스트림
    """

    def __init__(
        self,
        sources: Sequence[str],
        split_bytes: bool = False,
        split_words: bool = False,
        split_lines: bool = False,
        json_output: bool = False,
        yaml_output: bool = False,
        csv_output: bool = False,
        skip_errors: bool = False,
        stream: TextIO | None = None,
        stdin: BinaryIO | None = None,
    ) -> None:
        self.sources = list(sources)
        self.split_flags = {SplitMode.BYTES: split_bytes, SplitMode.WORDS: split_words, SplitMode.LINES: split_lines}
        self.output_format: OutputFormat = select_format(json_output, yaml_output, csv_output)
        self.skip_errors = skip_errors
        self.stream = stream
        self.stdin = stdin

    def split_mode(self) -> SplitMode:
        """선택된 분리 정책을 반환한다.

        Raises:
            ConfigurationError: 분리 정책이 하나도 없거나 둘 이상 선택된 경우
        """
        selected = [mode for mode, enabled in self.split_flags.items() if enabled]
        if not selected:
            raise ConfigurationError("bytes (-b), words (-w), lines (-l) 중 하나를 선택해야 합니다.")
        if len(selected) > 1:
            raise ConfigurationError("bytes (-b), words (-w), lines (-l) 중 하나만 선택해야 합니다.")
        return selected[0]

    def validate(self) -> SplitMode:
        """실행 전 설정을 검증하고 분리 정책을 반환한다. 하위 클래스가 확장한다."""
        return self.split_mode()

    def count(self, mode: SplitMode) -> tuple[FrequencyCounter, int]:
        """모든 소스를 순서대로 토큰화하여 집계한다.

        Returns:
            (빈도 카운터, 실제로 읽은 소스 수)
        """
        scanned: list[str] = []

        with create_progress() as progress:
            task = progress.add_task("토큰 집계 중", total=len(self.sources))

            def on_source(source: str, counted: bool) -> None:
                if counted:
                    scanned.append(source)
                progress.update(task, advance=1, description=f"토큰 집계 중: {source}")

            counter = count_sources(
                self.sources, mode, skip_errors=self.skip_errors, stdin=self.stdin, on_source=on_source
            )

        logger.info(
            "📊 %s 단위 집계 완료: 소스 %d/%d개, 고유 토큰 %d개",
            mode.value,
            len(scanned),
            len(self.sources),
            counter.size(),
        )
        return counter, len(scanned)

    @abstractmethod
    def select(self, counter: FrequencyCounter) -> Sequence[str] | Mapping[str, int]:
        """카운터에서 출력할 결과를 선택한다."""
        raise NotImplementedError

    def execute(self) -> dict[str, Any]:
        """설정 검증, 집계, 선택, 출력을 차례로 실행한다.

        Returns:
            실행 결과 딕셔너리 (sources, scanned_sources, total_tokens, unique_tokens, selected, output_format)

        Raises:
            ConfigurationError: 설정이 올바르지 않은 경우
            SourceAccessError: skip_errors 없이 소스 접근에 실패한 경우
            EncodingError: 결과 직렬화에 실패한 경우
        """
        mode = self.validate()
        counter, scanned = self.count(mode)
        payload = self.select(counter)
        print_object(payload, self.output_format, self.stream)

        return {
            "sources": len(self.sources),
            "scanned_sources": scanned,
            "total_tokens": counter.total(),
            "unique_tokens": counter.size(),
            "selected": len(payload),
            "output_format": self.output_format.value,
        }
