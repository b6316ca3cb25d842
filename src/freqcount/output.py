"""선택 결과 출력 모듈.

선택 결과(토큰 목록) 또는 히스토그램 전체(사전)를 레코드 표기, JSON, YAML, CSV 중
하나로 직렬화하여 출력한다.
"""

from __future__ import annotations

import csv
import io
import json
import sys
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, TextIO

import yaml
from rich.pretty import pretty_repr

from freqcount.constants import TOKEN_ENCODING, TOKEN_ERRORS
from freqcount.errors import EncodingError


class OutputFormat(str, Enum):
    """출력 형식."""

    RECORD = "record"
    JSON = "json"
    YAML = "yaml"
    CSV = "csv"


def select_format(json_output: bool = False, yaml_output: bool = False, csv_output: bool = False) -> OutputFormat:
    """출력 플래그에서 형식을 결정한다. 여러 개가 켜지면 JSON > YAML > CSV 순이다."""
    if json_output:
        return OutputFormat.JSON
    if yaml_output:
        return OutputFormat.YAML
    if csv_output:
        return OutputFormat.CSV
    return OutputFormat.RECORD


def _valid_text(token: str) -> str:
    """surrogate 로 보존된 원본 바이트를 U+FFFD 로 바꾼다."""
    return token.encode(TOKEN_ENCODING, TOKEN_ERRORS).decode(TOKEN_ENCODING, "replace")


def _as_valid_text(payload: Sequence[str] | Mapping[str, int]) -> list[str] | dict[str, int]:
    """JSON/YAML 문서에 쓸 수 있도록 토큰을 유효한 유니코드로 바꾼다.

    서로 다른 원본 바이트가 같은 U+FFFD 토큰이 되면 빈도를 합친다.
    """
    if not isinstance(payload, Mapping):
        return [_valid_text(token) for token in payload]

    merged: dict[str, int] = {}
    for token, frequency in payload.items():
        key = _valid_text(token)
        merged[key] = merged.get(key, 0) + frequency
    return merged


def _render_csv(payload: Sequence[str] | Mapping[str, int]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    if isinstance(payload, Mapping):
        writer.writerows(payload.items())
    else:
        writer.writerows([token] for token in payload)
    return buffer.getvalue()


def render(payload: Sequence[str] | Mapping[str, int], output_format: OutputFormat) -> str:
    """결과를 지정한 형식의 문자열로 직렬화한다.

    Args:
        payload: 토큰 목록 또는 {토큰: 빈도} 사전
        output_format: 출력 형식

    Returns:
        개행으로 끝나는 직렬화 문자열 (빈 CSV 는 빈 문자열)

    Raises:
        EncodingError: 직렬화에 실패한 경우
    """
    try:
        if output_format is OutputFormat.JSON:
            text = json.dumps(_as_valid_text(payload), ensure_ascii=False)
        elif output_format is OutputFormat.YAML:
            text = yaml.safe_dump(_as_valid_text(payload), allow_unicode=True, sort_keys=False, default_flow_style=False)
        elif output_format is OutputFormat.CSV:
            text = _render_csv(payload)
        else:
            text = pretty_repr(payload)
    except (TypeError, ValueError, yaml.YAMLError, csv.Error) as e:
        raise EncodingError(f"{output_format.value} 형식으로 직렬화할 수 없습니다: {e}") from e

    # 빈 CSV 는 빈 문자열 그대로 둔다
    return text if not text or text.endswith("\n") else text + "\n"


def print_object(payload: Any, output_format: OutputFormat, stream: TextIO | None = None) -> None:
    """결과를 직렬화하여 스트림(기본값: 표준 출력)에 쓴다.

    Raises:
        EncodingError: 직렬화 또는 쓰기 인코딩에 실패한 경우
    """
    text = render(payload, output_format)
    target = stream if stream is not None else sys.stdout
    try:
        target.write(text)
    except UnicodeEncodeError as e:
        raise EncodingError(f"출력 스트림 인코딩({e.encoding})으로 결과를 쓸 수 없습니다: {e.reason}") from e
    target.flush()
