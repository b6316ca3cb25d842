"""환경변수 기반 플래그 기본값 바인딩.

각 플래그의 기본값은 ``FREQCOUNT_`` 접두사 뒤에 긴 플래그 이름을 대문자로 바꾸고
``-`` 를 ``_`` 로 치환한 환경변수로 덮어쓸 수 있다
(예: ``--skip-errors`` → ``FREQCOUNT_SKIP_ERRORS``).
우선순위는 명시적 플래그 > 환경변수 > 내장 기본값이다.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from freqcount.constants import ENV_PREFIX
from freqcount.utils.logging_config import get_logger

logger = get_logger(__name__)

_TRUE_VALUES = frozenset({"1", "t", "true", "y", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "f", "false", "n", "no", "off"})


def env_key(flag: str) -> str:
    """플래그 이름에 대응하는 환경변수 이름을 반환한다."""
    return f"{ENV_PREFIX}_{flag.lstrip('-').replace('-', '_').upper()}"


def env_bool(flag: str, default: bool = False, environ: Mapping[str, str] | None = None) -> bool:
    """환경변수에서 불리언 기본값을 읽는다.

    불리언으로 해석할 수 없는 값은 경고를 남기고 무시한다.

    Args:
        flag: 긴 플래그 이름 (예: "skip-errors")
        default: 환경변수가 없거나 해석할 수 없을 때의 기본값
        environ: 조회할 환경 (None이면 os.environ)

    Returns:
        해석된 불리언 값
    """
    key = env_key(flag)
    value = (os.environ if environ is None else environ).get(key)
    if value is None:
        return default

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    logger.warning("⚠️  환경변수 %s=%r 는 불리언 값이 아니므로 무시합니다.", key, value)
    return default


def env_default(flag: str, default: int, environ: Mapping[str, str] | None = None) -> int | str:
    """값을 받는 플래그의 기본값을 환경변수에서 읽는다.

    환경변수 값은 문자열 그대로 돌려준다. argparse 는 문자열 기본값을 플래그가
    명령줄에 없을 때만 ``type`` 으로 변환하므로, 잘못된 값은 해당 플래그를
    생략했을 때에만 인자 오류가 된다.
    """
    return (os.environ if environ is None else environ).get(env_key(flag), default)
