"""중앙화된 로깅/진행바 설정"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

# 표준 출력은 결과 전용이므로 로그/진행바/배너는 stderr 로 보낸다
_CONSOLE = Console(stderr=True)


def get_console() -> Console:
    """로깅과 진행바에서 공용으로 사용할 Rich 콘솔을 반환한다."""
    return _CONSOLE


def create_progress(*, transient: bool = True, disable: bool | None = None) -> Progress:
    """입력 소스 처리용 Rich 진행바를 생성한다.

    Args:
        transient: 완료 후 진행바를 지울지 여부
        disable: 진행바 비활성화 여부 (None이면 터미널이 아닐 때 비활성화)
    """
    console = get_console()
    if disable is None:
        disable = not console.is_terminal
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=transient,
        disable=disable,
    )


def setup_logging(
    level: int = logging.WARNING,
    format_string: str = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
    log_file: Path | None = None,
) -> None:
    """전역 로깅을 설정한다.

    애플리케이션 시작 시 한 번만 호출해야 한다.
    중복 핸들러 생성을 방지한다.

    Args:
        level: 로깅 레벨
        format_string: 파일 로그 포맷 문자열
        log_file: 로그를 추가로 저장할 파일 경로 (None이면 콘솔만 사용)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # 이미 핸들러가 있으면 설정 완료
    if root_logger.handlers:
        return

    # Rich 콘솔 핸들러 설정
    console_handler = RichHandler(
        console=get_console(),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
        log_time_format="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    # 파일 핸들러 설정
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(format_string))
        root_logger.addHandler(file_handler)

        # 로그 파일 경로 출력
        root_logger.info("📝 로그 파일: %s", log_file)


def get_logger(name: str) -> logging.Logger:
    """모듈별 로거를 반환한다.

    Args:
        name: 로거 이름 (보통 __name__ 사용)

    Returns:
        설정된 로거 인스턴스
    """
    return logging.getLogger(name)
