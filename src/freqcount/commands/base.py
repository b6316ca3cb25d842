"""서브커맨드 추상 인터페이스.

CLI 진입점은 등록된 Command 서브클래스로 서브파서를 만들고, 파싱한 인자로
커맨드를 생성해 execute() 를 호출한다. execute() 가 돌려주는 요약 딕셔너리는
``--stats`` 패널의 행이 된다.
"""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from typing import Any, Protocol


class SubparsersLike(Protocol):
    """``add_subparsers()`` 가 반환하는 객체 중 커맨드가 쓰는 부분."""

    def add_parser(self, name: str, **kwargs: Any) -> argparse.ArgumentParser: ...


class Command(ABC):
    """freqcount 서브커맨드.

    결과 데이터는 표준 출력에 직접 쓰고, 실행 요약만 반환한다.
    설정 오류는 ConfigurationError 로 알린다.
    """

    @staticmethod
    @abstractmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 이름과 플래그를 등록한다. 플래그 기본값은 환경변수를 반영한다."""

    @abstractmethod
    def execute(self) -> dict[str, Any]:
        """커맨드를 실행한다.

        Returns:
            ``--stats`` 패널에 표시할 {항목: 값} 요약. 정수 값은 천 단위로 구분해 표시된다.
        """

    @abstractmethod
    def get_name(self) -> str:
        """서브커맨드 이름 (로그와 오류 패널 제목에 쓰인다)."""
