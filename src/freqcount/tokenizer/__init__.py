"""입력 토큰화 모듈.

바이트 스트림을 바이트, 단어, 줄 단위 토큰으로 분리하는 스플리터를 제공한다.
"""

from __future__ import annotations

from .splitters import SplitMode, Splitter, get_splitter, is_delimiter, scan_bytes, scan_lines, scan_words

__all__ = [
    "SplitMode",
    "Splitter",
    "get_splitter",
    "is_delimiter",
    "scan_bytes",
    "scan_lines",
    "scan_words",
]
