"""freqcount 패키지.

파일이나 표준 입력을 바이트, 단어, 줄 단위로 토큰화하여 빈도 히스토그램을 만들고
전체/상위/하위 토큰을 레코드 표기, JSON, YAML, CSV 로 출력한다.
"""

from __future__ import annotations

from freqcount.counter import FrequencyCounter
from freqcount.sources import count_sources
from freqcount.tokenizer import SplitMode, get_splitter

__version__ = "0.1.0"

__all__ = [
    "FrequencyCounter",
    "SplitMode",
    "count_sources",
    "get_splitter",
]
