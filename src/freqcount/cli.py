"""freqcount CLI 진입점 모듈.

파일이나 표준 입력의 바이트/단어/줄 빈도를 집계하는 명령줄 인터페이스를 제공한다.
결과는 표준 출력으로, 로그와 배너, 요약 패널은 Rich 기반으로 stderr 에 출력한다.
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from collections.abc import Callable, Sequence
from functools import lru_cache
from time import perf_counter
from typing import Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from freqcount.commands import AllCommand, BottomCommand, Command, DumpCommand, TopCommand
from freqcount.constants import LOGGER_NAME, PROG
from freqcount.errors import ConfigurationError, EncodingError, SourceAccessError
from freqcount.parser import setup_parser
from freqcount.utils.logging_config import get_console, setup_logging

CONSOLE = get_console()
COMMANDS: tuple[type[Command], ...] = (DumpCommand, AllCommand, TopCommand, BottomCommand)


# Command registry for Factory pattern
_COMMAND_REGISTRY: dict[str, Callable[[argparse.Namespace], Command]] = {}


def register_command(name: str) -> Callable:
    """커맨드 팩토리 함수를 레지스트리에 등록하는 데코레이터.

    Args:
        name: 커맨드 이름 (CLI 서브커맨드 이름)

    Returns:
        데코레이터 함수
    """
    def decorator(factory: Callable[[argparse.Namespace], Command]) -> Callable:
        _COMMAND_REGISTRY[name] = factory
        return factory
    return decorator


def _common_flags(a: argparse.Namespace) -> dict[str, bool]:
    """모든 집계 커맨드가 공유하는 플래그를 추출한다."""
    return {
        "split_bytes": a.bytes,
        "split_words": a.words,
        "split_lines": a.lines,
        "json_output": a.json,
        "yaml_output": a.yaml,
        "csv_output": a.csv,
        "skip_errors": a.skip_errors,
    }


@lru_cache(maxsize=1)
def _get_banner() -> str:
    """배너 텍스트를 캐싱하여 반환한다.

    pyfiglet을 사용하여 ASCII 아트 배너를 생성하고, LRU 캐시로 재사용한다.

    Returns:
        생성된 배너 텍스트
    """
    from pyfiglet import Figlet
    return Figlet(font="standard").renderText(PROG).rstrip()


def print_banner() -> None:
    """시작 배너를 출력한다."""
    CONSOLE.print(Text(_get_banner(), style="bold cyan"))


# Command factory functions (Registry pattern)
@register_command("dump")
def _create_dump_command(a: argparse.Namespace) -> DumpCommand:
    """DumpCommand 팩토리 함수."""
    return DumpCommand(a.sources, **_common_flags(a))


@register_command("all")
def _create_all_command(a: argparse.Namespace) -> AllCommand:
    """AllCommand 팩토리 함수."""
    return AllCommand(a.sources, a.sort, **_common_flags(a))


@register_command("top")
def _create_top_command(a: argparse.Namespace) -> TopCommand:
    """TopCommand 팩토리 함수."""
    return TopCommand(a.sources, a.number, a.minimum, a.sort, **_common_flags(a))


@register_command("bottom")
def _create_bottom_command(a: argparse.Namespace) -> BottomCommand:
    """BottomCommand 팩토리 함수."""
    return BottomCommand(a.sources, a.number, a.maximum, a.sort, **_common_flags(a))


def create_command(args: argparse.Namespace) -> Command:
    """커맨드 객체를 생성한다.

    Factory Registry 패턴을 사용하여 커맨드 이름에 해당하는 팩토리 함수를 조회하고 실행한다.

    Args:
        args: 파싱된 커맨드라인 인자

    Returns:
        생성된 Command 객체

    Raises:
        ConfigurationError: 등록되지 않은 커맨드인 경우
    """
    if factory := _COMMAND_REGISTRY.get(args.command):
        return factory(args)
    raise ConfigurationError(f"'{args.command}'는 유효하지 않은 커맨드입니다.")


def format_time(elapsed: float) -> str:
    """경과 시간을 사람이 읽기 쉬운 형태로 포맷팅한다.

    1초 미만은 밀리초, 1분 미만은 초, 그 이상은 분:초 형식으로 표시한다.

    Args:
        elapsed: 경과 시간 (초 단위)

    Returns:
        포맷팅된 시간 문자열 (예: "500ms", "3.14초", "2분 30.5초")
    """
    if elapsed < 1:
        return f"{elapsed*1000:.0f}ms"
    if elapsed < 60:
        return f"{elapsed:.2f}초"
    minutes, seconds = divmod(elapsed, 60)
    return f"{int(minutes)}분 {seconds:.1f}초"


def format_value(value: Any) -> str:
    """결과 값을 포맷팅한다.

    정수는 천 단위 구분 기호를 붙이고, 120자를 초과하면 잘라낸다.

    Args:
        value: 포맷팅할 값 (Any 타입)

    Returns:
        포맷팅된 문자열 (120자 초과 시 "..." 추가)
    """
    formatted = f"{value:,}" if type(value) is int else str(value)
    return formatted[:117] + "..." if len(formatted) > 120 else formatted


def create_result_table(command_name: str, elapsed: float, result: dict[str, Any]) -> Panel:
    """실행 결과 테이블을 생성한다.

    Args:
        command_name: 커맨드 이름
        elapsed: 경과 시간 (초 단위)
        result: 실행 결과 딕셔너리

    Returns:
        생성된 Rich Panel 객체
    """
    table = Table(show_header=True, border_style="dim", padding=(0, 1))
    table.add_column("항목", style="bold cyan", width=25)
    table.add_column("값", style="yellow", justify="left")

    table.add_row("⏱️  실행 시간", format_time(elapsed))

    for key, value in result.items():
        formatted_key = key.replace("_", " ").title()
        table.add_row(f"   {formatted_key}", format_value(value))

    return Panel(
        table,
        title=f"[bold green]✅ {command_name} 완료[/bold green]",
        border_style="green",
        padding=(1, 2)
    )


# Error categorization strategy (Strategy pattern)
_ERROR_CATEGORIES = {
    ConfigurationError: ("설정 오류", "⚙️", "설정 검증 실패"),
    SourceAccessError: ("입력 소스 오류", "📁", "입력 소스 접근 실패"),
    EncodingError: ("출력 인코딩 오류", "🧾", "결과 직렬화 실패"),
}


def handle_error(error: Exception, command: str, elapsed: float, logger: logging.Logger) -> None:
    """에러를 처리하고 출력한다.

    Strategy 패턴을 사용하여 에러 타입별로 적절한 카테고리와 아이콘을 선택한다.

    Args:
        error: 발생한 예외
        command: 실행 중이던 커맨드 이름
        elapsed: 경과 시간 (초 단위)
        logger: 로거 객체
    """
    error_type = type(error).__name__
    category, icon, log_msg = _ERROR_CATEGORIES.get(type(error), ("예기치 않은 오류", "❌", "실행 중 예기치 않은 오류 발생"))

    # 로깅
    if type(error) in _ERROR_CATEGORIES:
        logger.error("[%s] %s: %s", command, log_msg, error)
    else:
        logger.exception("[%s] %s", command, log_msg)

    # Rich 테이블로 에러 정보 구성
    error_table = Table(show_header=False, border_style="dim red", padding=(0, 1))
    error_table.add_column("항목", style="bold red", width=15)
    error_table.add_column("내용", style="white")

    error_table.add_row("카테고리", f"{icon} {category}")
    error_table.add_row("오류 타입", error_type)
    error_table.add_row("메시지", str(error))
    error_table.add_row("경과 시간", format_time(elapsed))

    # Panel로 감싸서 출력
    CONSOLE.print()
    CONSOLE.print(
        Panel(error_table, title=f"[bold red]❌ {command} 실행 실패[/bold red]",
              border_style="red", padding=(1, 2))
    )
    CONSOLE.print()

    # 도움말 제안
    help_text = Text()
    help_text.append("💡 도움말: ", style="bold yellow")
    help_text.append(f"{PROG} {command} --help" if command != PROG else f"{PROG} --help", style="cyan")
    help_text.append(" 명령으로 상세 옵션을 확인하세요", style="dim")
    CONSOLE.print(help_text)
    CONSOLE.print()


def _preserve_raw_bytes() -> None:
    """표준 출력이 surrogateescape 로 보존된 원본 바이트를 그대로 쓰도록 설정한다."""
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(errors="surrogateescape")


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 엔트리 포인트.

    서브커맨드를 파싱하고 실행한다. 결과는 표준 출력에 쓰고,
    로그와 오류 패널은 stderr 에 출력한다.

    Args:
        argv: 명령줄 인자 (None이면 sys.argv[1:])

    Returns:
        종료 코드 (0: 성공, 1: 오류, 130: 사용자 중단). 인자 오류는 SystemExit(2)로 끝난다.
    """
    logger = logging.getLogger(LOGGER_NAME)

    args = setup_parser(CONSOLE, COMMANDS).parse_args(argv)
    setup_logging(getattr(logging, args.log_level), log_file=args.log_file)
    if not args.no_banner and CONSOLE.is_terminal:
        print_banner()

    _preserve_raw_bytes()
    start = perf_counter()

    try:
        command = create_command(args)
        command_name = command.get_name()
        logger.info("[%s] 시작", command_name)
        result = command.execute()
        elapsed = perf_counter() - start

        logger.info("[%s] 완료 (%.2fs)", command_name, elapsed)
        if args.stats:
            CONSOLE.print(create_result_table(command_name, elapsed, result))
        return 0

    except KeyboardInterrupt:
        logger.warning("사용자 요청으로 실행 중단됨")
        return 130

    except Exception as e:
        handle_error(e, args.command, perf_counter() - start, logger)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
