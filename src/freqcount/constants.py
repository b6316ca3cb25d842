"""중앙화된 상수 관리

이 모듈은 프로젝트 전체에서 사용되는 기본값과 고정 설정을 중앙에서 관리한다.
모든 하드코딩된 값은 이 모듈의 상수를 참조해야 한다.
"""

from __future__ import annotations

# ====================================================================
# 🏷️ 프로그램 정보
# ====================================================================

PROG = "freqcount"
LOGGER_NAME = "freqcount.cli"

# 플래그 기본값을 덮어쓰는 환경변수 접두사 (예: FREQCOUNT_SKIP_ERRORS)
ENV_PREFIX = "FREQCOUNT"

# ====================================================================
# 📥 입력 소스
# ====================================================================

# 표준 입력을 뜻하는 소스 식별자
STDIN_SENTINELS = frozenset({"-", "stdin"})

# 스트림 읽기 단위 (바이트)
READ_CHUNK_SIZE = 64 * 1024

# 바이트 → 문자열 디코딩 설정 (임의 바이트열 무손실 보존)
TOKEN_ENCODING = "utf-8"
TOKEN_ERRORS = "surrogateescape"

# ====================================================================
# 🔤 단어 분리
# ====================================================================

# 공백 외에 단어 구분자로 취급하는 문장부호
WORD_PUNCTUATION = frozenset("!,;(){}[]<>`|=")

# ====================================================================
# ⚙️ 플래그 기본값
# ====================================================================

DEFAULT_NUMBER = 1
DEFAULT_MINIMUM = 0
DEFAULT_MAXIMUM = -1
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
