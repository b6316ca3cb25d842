"""CLI 인자 파서 설정 모듈.

argparse 기반 CLI 파서와 서브커맨드를 정의한다.
검증 함수와 서브파서 구성을 담당한다.
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.panel import Panel

from freqcount.constants import DEFAULT_LOG_LEVEL, LOG_LEVELS, PROG

if TYPE_CHECKING:
    from freqcount.commands.base import Command


class CliHelpFormatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawTextHelpFormatter):
    """CLI 도움말 포맷터.

    ArgumentDefaultsHelpFormatter와 RawTextHelpFormatter를 결합하여
    기본값 표시와 원시 텍스트 포맷을 동시에 지원한다.
    """


class CliArgumentParser(argparse.ArgumentParser):
    """오류 메시지를 Rich 스타일로 출력하는 argparse 파서.

    인자 파싱 오류 발생 시 Rich Panel로 오류를 표시하여
    사용자 경험을 개선한다.

    Attributes:
        console: Rich 콘솔 인스턴스
    """

    def __init__(self, console: Console | None = None, **kwargs: Any) -> None:
        self.console = console or Console(stderr=True)
        super().__init__(**kwargs)

    def error(self, message: str) -> None:
        """인자 파싱 오류를 Rich 패널로 출력한다.

        Args:
            message: 오류 메시지
        """
        self.console.print(
            Panel.fit(
                f"[bold red]인자 오류[/bold red]\n{message}\n\n[dim]도움말: {self.prog} --help[/dim]",
                title="CLI 입력 오류",
                border_style="red",
            )
        )
        raise SystemExit(2)


def validate_int(value: str, minimum: int | None = 0) -> int:
    """정수 값을 검증한다.

    Args:
        value: 파싱할 문자열 값
        minimum: 허용되는 최소값 (None이면 제한 없음)

    Returns:
        파싱된 정수 값

    Raises:
        argparse.ArgumentTypeError: 값이 정수가 아니거나 최소값보다 작은 경우
    """
    try:
        parsed = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError("정수를 입력해야 합니다.") from e
    if minimum is not None and parsed < minimum:
        raise argparse.ArgumentTypeError(f"{minimum} 이상의 정수만 허용됩니다.")
    return parsed


def integer(value: str) -> int:
    """부호와 관계없이 정수를 검증한다. 범위 검증은 커맨드가 담당한다."""
    return validate_int(value, minimum=None)


def setup_parser(console: Console, commands: Iterable[type[Command]]) -> argparse.ArgumentParser:
    """CLI 파서를 설정한다.

    각 Command 서브클래스의 configure_parser()를 호출하여 서브커맨드를 등록한다.

    Args:
        console: Rich 콘솔 인스턴스 (오류 출력용)
        commands: Command 서브클래스 이터러블

    Returns:
        설정된 ArgumentParser 객체
    """
    parser = CliArgumentParser(
        console,
        prog=PROG,
        description="파일이나 표준 입력의 바이트/단어/줄 빈도를 집계하는 CLI",
        formatter_class=CliHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help="콘솔 로깅 레벨",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="로그를 추가로 저장할 파일 경로")
    parser.add_argument("--stats", action="store_true", help="실행 후 집계 요약을 stderr 에 출력")
    parser.add_argument("--no-banner", action="store_true", help="시작 배너를 출력하지 않음")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="command")
    for cmd_cls in commands:
        cmd_cls.configure_parser(subparsers)

    return parser
