"""바이트 스트림을 토큰 시퀀스로 분리하는 스플리터 모듈.

바이트, 단어, 줄 단위의 세 가지 분리 정책을 제공한다.
모든 스플리터는 스트림을 한 번만 앞으로 읽는 지연(lazy) 제너레이터이다.
"""

from __future__ import annotations

import codecs
import re
from collections.abc import Callable, Iterator
from enum import Enum
from functools import partial
from typing import BinaryIO

from freqcount.constants import READ_CHUNK_SIZE, TOKEN_ENCODING, TOKEN_ERRORS, WORD_PUNCTUATION

Splitter = Callable[[BinaryIO], Iterator[str]]


class SplitMode(str, Enum):
    """토큰 분리 정책."""

    BYTES = "bytes"
    WORDS = "words"
    LINES = "lines"


# 0x00 ~ 0xFF 각 바이트의 토큰 문자열 (0x80 이상은 surrogate 로 보존)
_BYTE_TOKENS = tuple(bytes([value]).decode(TOKEN_ENCODING, TOKEN_ERRORS) for value in range(256))

# 구분자가 아닌 코드 포인트의 최대 연속 구간
_WORD_PATTERN = re.compile(r"[^\s" + re.escape("".join(sorted(WORD_PUNCTUATION))) + r"]+")

# 단어 구분자 코드 포인트 하나
_DELIMITER_PATTERN = re.compile(r"[\s" + re.escape("".join(sorted(WORD_PUNCTUATION))) + r"]")


def is_delimiter(char: str) -> bool:
    """단어 분리 시 구분자로 취급되는 코드 포인트인지 확인한다."""
    return char.isspace() or char in WORD_PUNCTUATION


def _iter_chunks(stream: BinaryIO) -> Iterator[bytes]:
    """스트림을 READ_CHUNK_SIZE 단위로 끝까지 읽는다."""
    return iter(partial(stream.read, READ_CHUNK_SIZE), b"")


def scan_bytes(stream: BinaryIO) -> Iterator[str]:
    """바이트 하나를 토큰 하나로 생성한다."""
    for chunk in _iter_chunks(stream):
        for value in chunk:
            yield _BYTE_TOKENS[value]


def _split_words(text: str, pending: list[str]) -> Iterator[str]:
    """디코딩된 조각에서 완결된 단어를 생성한다.

    조각 끝에 닿은 단어는 pending 에 남겨 다음 조각과 이어 붙인다.
    pending 이 있으면 새 조각의 첫 구분자만 찾으므로 긴 단어도 한 번씩만 훑는다.
    """
    start = 0
    if pending:
        boundary = _DELIMITER_PATTERN.search(text)
        if boundary is None:
            pending.append(text)
            return
        pending.append(text[: boundary.start()])
        yield "".join(pending)
        pending.clear()
        start = boundary.start()

    for match in _WORD_PATTERN.finditer(text, start):
        if match.end() == len(text):
            pending.append(match.group())
        else:
            yield match.group()


def scan_words(stream: BinaryIO) -> Iterator[str]:
    """공백과 고정 문장부호로 구분된 단어를 생성한다.

    청크 경계에 걸친 멀티바이트 문자는 증분 디코더가, 청크 경계에 걸친
    단어는 pending 버퍼가 이어 붙인다. 입력 끝의 미완결 단어도 비어 있지 않으면
    생성한다.

    Args:
        stream: 바이너리 입력 스트림

    Yields:
        구분자를 포함하지 않는 비어 있지 않은 단어
    """
    decoder = codecs.getincrementaldecoder(TOKEN_ENCODING)(errors=TOKEN_ERRORS)
    pending: list[str] = []
    for chunk in _iter_chunks(stream):
        yield from _split_words(decoder.decode(chunk), pending)

    yield from _split_words(decoder.decode(b"", final=True), pending)
    if pending:
        yield "".join(pending)

def scan_lines(stream: BinaryIO) -> Iterator[str]:
    """``\\n`` 으로 구분된 줄을 생성한다.

    구분자는 제외하며, 줄 끝의 ``\\r`` 하나를 제거한다 (CRLF 정규화).
    중간의 빈 줄은 빈 문자열 토큰이 되고, 마지막 ``\\n`` 뒤의 빈 조각은 생성하지 않는다.
    """
    for raw in stream:
        if raw.endswith(b"\n"):
            raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        yield raw.decode(TOKEN_ENCODING, TOKEN_ERRORS)


_SPLITTERS: dict[SplitMode, Splitter] = {
    SplitMode.BYTES: scan_bytes,
    SplitMode.WORDS: scan_words,
    SplitMode.LINES: scan_lines,
}


def get_splitter(mode: SplitMode | str) -> Splitter:
    """분리 정책에 해당하는 스플리터를 반환한다.

    Args:
        mode: 분리 정책 (SplitMode 또는 "bytes"/"words"/"lines")

    Returns:
        바이너리 스트림을 받아 토큰 이터레이터를 반환하는 함수
    """
    return _SPLITTERS[SplitMode(mode)]
