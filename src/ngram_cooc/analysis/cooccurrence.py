"""공기(co-occurrence) 빈도 집계 모듈.

각 토큰을 중심어로 두고 좌우 window 거리 안에 등장한 이웃 토큰의 빈도를 센다.
테이블은 위치가 아니라 토큰 문자열을 키로 하므로, 같은 중심어가 여러 위치에
등장하면 이웃 빈도는 합산된다.

진입점:
    - count_cooccurrences: 위치별 이웃 빈도를 만든 뒤 중심어 기준으로 합산
    - count_cooccurrences_once: 호출마다 새 CooccurrenceAggregation을 만들어 한 번만 집계
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum

from ngram_cooc.utils.logging_config import get_logger

logger = get_logger(__name__)

CooccurrenceTable = dict[str, dict[str, int]]


class AggregationError(RuntimeError):
    """반드시 하나의 결과를 내야 하는 집계가 결과를 내지 못한 경우."""


class AggregationState(Enum):
    """일회성 집계의 상태."""

    PENDING = "pending"
    COMPLETED = "completed"


def _is_valid_window(window: int, tokens: Sequence[str]) -> bool:
    """window 크기가 [1, 토큰 수] 범위에 있는지 확인한다."""
    return 1 <= window <= len(tokens)


def _neighbor_positions(center: int, window: int, length: int) -> range:
    """중심 위치 기준 window 거리 안의 유효 인덱스 범위 (중심 포함)."""
    return range(max(0, center - window), min(length, center + window + 1))


def count_neighbors(tokens: Sequence[str], center: int, window: int) -> Counter[str]:
    """한 중심 위치의 이웃 토큰 빈도를 센다.

    Args:
        tokens: 입력 토큰 시퀀스
        center: 중심 토큰 인덱스
        window: 좌우 최대 거리

    Returns:
        이웃 토큰별 빈도 (중심 위치 자신은 제외)
    """
    return Counter(
        tokens[j] for j in _neighbor_positions(center, window, len(tokens)) if j != center
    )


def merge_neighbor_counts(target: dict[str, int], source: dict[str, int]) -> dict[str, int]:
    """source의 빈도를 target에 합산한다."""
    for neighbor, count in source.items():
        target[neighbor] = target.get(neighbor, 0) + count
    return target


def count_cooccurrences(window: int, tokens: Sequence[str]) -> CooccurrenceTable:
    """모든 위치를 순회하며 공기 빈도 테이블을 만든다.

    Args:
        window: 좌우 최대 거리
        tokens: 입력 토큰 시퀀스

    Returns:
        {중심어: {이웃어: 빈도}} 테이블.
        window가 1 미만이거나 토큰 수보다 크면 빈 테이블.
    """
    if not _is_valid_window(window, tokens):
        logger.debug("window=%d 이(가) 유효 범위를 벗어나 빈 테이블을 반환합니다. (토큰 %d개)", window, len(tokens))
        return {}

    table: CooccurrenceTable = {}
    for i, center in enumerate(tokens):
        merge_neighbor_counts(table.setdefault(center, {}), count_neighbors(tokens, i, window))
    return table


class CooccurrenceAggregation:
    """토큰 시퀀스 전체를 한 번만 집계하는 일회성 공기 빈도 집계기.

    PENDING 상태에서 처음 aggregate()가 호출되면 전체 테이블을 계산해 보관하고
    COMPLETED로 전이한다. 이후 호출은 다시 계산하지 않고 보관된 테이블을 그대로 반환한다.

    Attributes:
        window: 좌우 최대 거리
    """

    def __init__(self, tokens: Sequence[str], window: int) -> None:
        self._tokens = tokens
        self.window = window
        self._state = AggregationState.PENDING
        self._result: CooccurrenceTable | None = None

    @property
    def state(self) -> AggregationState:
        return self._state

    def aggregate(self) -> CooccurrenceTable:
        """전체 공기 빈도 테이블을 계산한다. 두 번째 호출부터는 같은 테이블을 반환한다."""
        if self._state is AggregationState.COMPLETED and self._result is not None:
            logger.debug("이미 완료된 집계입니다. 보관된 테이블을 반환합니다.")
            return self._result

        tokens = self._tokens
        table: CooccurrenceTable = {}
        if not _is_valid_window(self.window, tokens):
            logger.debug("window=%d 이(가) 유효 범위를 벗어나 빈 테이블을 보관합니다. (토큰 %d개)", self.window, len(tokens))
            self._result = table
            self._state = AggregationState.COMPLETED
            return table

        for i, center in enumerate(tokens):
            neighbors = table.setdefault(center, {})
            for j in range(i - self.window, i + self.window + 1):
                if j < 0 or j >= len(tokens) or j == i:
                    continue
                neighbor = tokens[j]
                neighbors[neighbor] = neighbors.get(neighbor, 0) + 1

        self._result = table
        self._state = AggregationState.COMPLETED
        return table

    def fold(self, elements: Iterable[str]) -> Iterator[CooccurrenceTable]:
        """토큰 스트림을 접어 최종 테이블 하나만 내보낸다.

        첫 요소에서 전체 집계를 수행하고 곧바로 종료하므로 나머지 요소는 소비하지 않는다.
        """
        for _ in elements:
            yield self.aggregate()
            return


def count_cooccurrences_once(window: int, tokens: Sequence[str]) -> CooccurrenceTable:
    """일회성 집계기로 공기 빈도 테이블을 만든다.

    호출마다 새 CooccurrenceAggregation을 생성하므로 같은 입력으로 반복 호출해도 안전하다.
    count_cooccurrences()와 동일한 테이블을 반환한다.

    Raises:
        AggregationError: 집계가 결과를 내지 못한 경우
    """
    if not _is_valid_window(window, tokens):
        logger.debug("window=%d 이(가) 유효 범위를 벗어나 빈 테이블을 반환합니다. (토큰 %d개)", window, len(tokens))
        return {}

    aggregation = CooccurrenceAggregation(tokens, window)
    table = next(aggregation.fold(tokens), None)
    if table is None:
        raise AggregationError("공기 빈도 집계가 결과를 생성하지 않았습니다.")
    return table
