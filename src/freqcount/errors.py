"""freqcount 예외 계층.

카운터와 토크나이저는 예외를 던지지 않는다. 모든 오류는 설정 검증,
입력 소스 접근, 출력 직렬화 단계에서 발생한다.
"""

from __future__ import annotations


class FreqCountError(Exception):
    """freqcount 예외의 공통 기반 클래스."""


class ConfigurationError(FreqCountError, ValueError):
    """분리 모드 선택이나 수치 인자가 올바르지 않은 경우."""


class SourceAccessError(FreqCountError):
    """입력 소스를 열거나 stat 하거나 읽지 못한 경우.

    Attributes:
        source: 실패한 소스 식별자 (파일 경로 또는 ``-``/``stdin``)
    """

    def __init__(self, message: str, source: str) -> None:
        super().__init__(message)
        self.source = source


class EncodingError(FreqCountError):
    """결과를 출력 형식으로 직렬화하지 못한 경우."""
