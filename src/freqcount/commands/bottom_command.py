"""최소 빈도 토큰 선택 커맨드.

빈도가 최대값 이하인 토큰 중 최대 N개를 출력한다.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import BinaryIO, TextIO

from freqcount.config import env_bool, env_default
from freqcount.constants import DEFAULT_MAXIMUM, DEFAULT_NUMBER
from freqcount.counter import FrequencyCounter
from freqcount.errors import ConfigurationError
from freqcount.parser import CliHelpFormatter, integer
from freqcount.tokenizer import SplitMode

from .base import SubparsersLike
from .counting import CountingCommand, add_output_args, add_split_args


class BottomCommand(CountingCommand):
    """가장 드문 토큰을 출력하는 커맨드.

    Attributes:
        number: 최대 출력 개수 (1 이상)
        maximum: 최대 빈도 (음수이면 제한 없음, 0은 허용하지 않음)
        sort: True이면 빈도 오름차순 정렬 후 선택
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 파서를 설정한다.

        Args:
            subparsers: 서브파서 액션 객체
        """
        parser = subparsers.add_parser(
            "bottom",
            help="최소 빈도 토큰 출력",
            description="빈도가 최대값 이하인 토큰 중 최대 N개를 출력한다.",
            formatter_class=CliHelpFormatter,
        )
        add_split_args(parser)
        parser.add_argument(
            "-n", "--number", type=integer, default=env_default("number", DEFAULT_NUMBER), help="출력할 토큰 수"
        )
        parser.add_argument(
            "-m",
            "--maximum",
            type=integer,
            default=env_default("maximum", DEFAULT_MAXIMUM),
            help="최대 빈도 (음수이면 제한 없음)",
        )
        parser.add_argument(
            "-s", "--sort", action="store_true", default=env_bool("sort"), help="선택 전에 빈도 오름차순 정렬"
        )
        add_output_args(parser)

    def __init__(
        self,
        sources: Sequence[str],
        number: int = DEFAULT_NUMBER,
        maximum: int = DEFAULT_MAXIMUM,
        sort: bool = False,
        *,
        stream: TextIO | None = None,
        stdin: BinaryIO | None = None,
        **flags: bool,
    ) -> None:
        super().__init__(sources, stream=stream, stdin=stdin, **flags)
        self.number = number
        self.maximum = maximum
        self.sort = sort

    def validate(self) -> SplitMode:
        """분리 정책과 수치 인자를 검증한다.

        Raises:
            ConfigurationError: number 가 0 이하이거나 maximum 이 0인 경우
        """
        mode = super().validate()
        if self.number <= 0:
            raise ConfigurationError(f"number 는 {self.number} 입니다. 0보다 큰 값이 필요합니다.")
        if self.maximum == 0:
            raise ConfigurationError("maximum 은 0일 수 없습니다. 제한을 없애려면 음수를 사용하세요.")
        return mode

    def select(self, counter: FrequencyCounter) -> list[str]:
        return counter.bottom(self.number, self.maximum, self.sort)

    def get_name(self) -> str:
        """커맨드 이름을 반환한다.

        Returns:
            커맨드 이름 "bottom"
        """
        return "bottom"
