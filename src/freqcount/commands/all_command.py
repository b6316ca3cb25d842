"""전체 토큰 목록 커맨드."""

from __future__ import annotations

from collections.abc import Sequence
from typing import BinaryIO, TextIO

from freqcount.config import env_bool
from freqcount.counter import FrequencyCounter
from freqcount.parser import CliHelpFormatter

from .base import SubparsersLike
from .counting import CountingCommand, add_output_args, add_split_args


class AllCommand(CountingCommand):
    """등장한 모든 고유 토큰을 출력하는 커맨드.

    Attributes:
        sort: True이면 코드 포인트 오름차순으로 정렬
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 파서를 설정한다.

        Args:
            subparsers: 서브파서 액션 객체
        """
        parser = subparsers.add_parser(
            "all",
            help="모든 고유 토큰 출력",
            description="입력에 등장한 모든 고유 토큰을 출력한다.",
            formatter_class=CliHelpFormatter,
        )
        add_split_args(parser)
        parser.add_argument("-s", "--sort", action="store_true", default=env_bool("sort"), help="오름차순 정렬")
        add_output_args(parser)

    def __init__(
        self,
        sources: Sequence[str],
        sort: bool = False,
        *,
        stream: TextIO | None = None,
        stdin: BinaryIO | None = None,
        **flags: bool,
    ) -> None:
        super().__init__(sources, stream=stream, stdin=stdin, **flags)
        self.sort = sort

    def select(self, counter: FrequencyCounter) -> list[str]:
        return counter.all(self.sort)

    def get_name(self) -> str:
        """커맨드 이름 반환"""
        return "all"
