"""토큰 빈도 히스토그램 모듈.

토큰(문자열)별 출현 횟수를 정확히 집계하고, 전체/상위/하위 선택 질의를 제공한다.

자연 순회 순서는 토큰이 처음 등장한 순서(삽입 순서)이며,
정렬 시 동일 빈도 토큰의 순서는 이 순서를 유지한다 (안정 정렬).
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from operator import itemgetter


class FrequencyCounter:
    """문자열 토큰의 빈도 히스토그램.

    저장된 모든 토큰의 빈도는 1 이상이며, 조회만으로는 항목이 생기지 않는다.
    어떤 연산도 예외를 던지지 않는다. 인자 조합의 유효성은 호출 측(CLI)이 검증한다.

    Examples:
        >>> words = FrequencyCounter()
        >>> words.update(["foo"] * 10 + ["bar"] * 5)
        >>> words.top(1, 0, sort=True)
        ['foo']
        >>> words.bottom(1, -1, sort=True)
        ['bar']
    """

    def __init__(self, tokens: Iterable[str] | None = None) -> None:
        self._counts: Counter[str] = Counter()
        if tokens is not None:
            self.update(tokens)

    def increment(self, token: str) -> None:
        """토큰의 빈도를 1 증가시킨다."""
        self._counts[token] += 1

    def update(self, tokens: Iterable[str]) -> None:
        """이터러블의 각 토큰 빈도를 1씩 증가시킨다."""
        self._counts.update(tokens)

    def count(self, token: str) -> int:
        """토큰의 현재 빈도를 반환한다. 등장하지 않았으면 0."""
        return self._counts[token]

    def has(self, token: str) -> bool:
        """토큰이 한 번 이상 등장했는지 확인한다."""
        return token in self._counts

    def size(self) -> int:
        """고유 토큰 수를 반환한다."""
        return len(self._counts)

    def total(self) -> int:
        """집계된 전체 토큰 수(빈도 합)를 반환한다."""
        return sum(self._counts.values())

    def items(self) -> list[tuple[str, int]]:
        """(토큰, 빈도) 쌍 목록을 삽입 순서로 반환한다."""
        return list(self._counts.items())

    def to_dict(self) -> dict[str, int]:
        """히스토그램 전체를 독립된 사전으로 복사한다."""
        return dict(self._counts)

    def all(self, sort: bool = False) -> list[str]:
        """모든 고유 토큰을 반환한다.

        Args:
            sort: True이면 코드 포인트 오름차순, False이면 삽입 순서

        Returns:
            중복 없는 토큰 목록
        """
        values = list(self._counts)
        if sort:
            values.sort()
        return values

    def top(self, n: int, minimum: int = 0, sort: bool = False) -> list[str]:
        """빈도가 *minimum* 이상인 토큰을 최대 *n* 개 반환한다.

        가장 빈번한 토큰 하나는 ``top(1, 0, sort=True)`` 로 얻는다.
        정렬하지 않으면 조건을 만족하는 임의의(삽입 순서상 앞쪽) *n* 개가 선택된다.

        Args:
            n: 최대 반환 개수. 0이면 빈 목록, 음수이면 제한 없음
            minimum: 최소 빈도 (이상)
            sort: True이면 빈도 내림차순 안정 정렬 후 선택

        Returns:
            선택된 토큰 목록
        """
        if n == 0:
            return []

        items = [(token, frequency) for token, frequency in self._counts.items() if frequency >= minimum]
        if sort:
            items.sort(key=itemgetter(1), reverse=True)
        return _truncate(items, n)

    def bottom(self, n: int, maximum: int = -1, sort: bool = False) -> list[str]:
        """빈도가 *maximum* 이하인 토큰을 최대 *n* 개 반환한다.

        *maximum* 이 음수이면 임계값을 적용하지 않는다.
        저장된 빈도는 항상 1 이상이므로 *maximum* 이 0이면 결과는 비어 있다.

        Args:
            n: 최대 반환 개수. 0이면 빈 목록, 음수이면 제한 없음
            maximum: 최대 빈도 (이하), 음수이면 무시
            sort: True이면 빈도 오름차순 안정 정렬 후 선택

        Returns:
            선택된 토큰 목록
        """
        if n == 0:
            return []

        items = [
            (token, frequency)
            for token, frequency in self._counts.items()
            if maximum < 0 or frequency <= maximum
        ]
        if sort:
            items.sort(key=itemgetter(1))
        return _truncate(items, n)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, token: object) -> bool:
        return token in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._counts)!r})"


def _truncate(items: list[tuple[str, int]], n: int) -> list[str]:
    """양수 *n* 이 항목 수보다 작으면 앞의 *n* 개만 남기고 토큰만 추출한다."""
    if 0 < n < len(items):
        items = items[:n]
    return [token for token, _ in items]
