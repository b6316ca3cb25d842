"""빈도 히스토그램 덤프 커맨드.

입력 소스의 토큰 빈도 전체를 {토큰: 빈도} 사전으로 출력한다.
"""

from __future__ import annotations

from freqcount.counter import FrequencyCounter
from freqcount.parser import CliHelpFormatter

from .base import SubparsersLike
from .counting import CountingCommand, add_output_args, add_split_args


class DumpCommand(CountingCommand):
    """토큰 빈도 분포 전체를 출력하는 커맨드."""

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 파서를 설정한다.

        Args:
            subparsers: 서브파서 액션 객체
        """
        parser = subparsers.add_parser(
            "dump",
            help="토큰 빈도 분포 전체 출력",
            description="토큰 빈도 분포 전체를 {토큰: 빈도} 형태로 출력한다.",
            formatter_class=CliHelpFormatter,
        )
        add_split_args(parser)
        add_output_args(parser)

    def select(self, counter: FrequencyCounter) -> dict[str, int]:
        return counter.to_dict()

    def get_name(self) -> str:
        """커맨드 이름을 반환한다.

        Returns:
            커맨드 이름 "dump"
        """
        return "dump"
