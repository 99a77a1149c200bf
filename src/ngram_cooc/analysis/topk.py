"""공기 빈도 상위 K개 이웃 추출 모듈."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterable, Mapping

from ngram_cooc.utils.logging_config import get_logger

logger = get_logger(__name__)


def _ranking_key(item: tuple[str, int]) -> tuple[int, str]:
    # 빈도 내림차순, 동률이면 이웃어 사전순
    neighbor, count = item
    return -count, neighbor


def _collect_ordered(items: Iterable[tuple[str, int]]) -> OrderedDict[str, int]:
    """정렬 순서를 유지하며 수집한다. 중복 키는 처음 값을 유지한다."""
    ordered: OrderedDict[str, int] = OrderedDict()
    for neighbor, count in items:
        ordered.setdefault(neighbor, count)
    return ordered


def find_top_k(
    center_word: str,
    k: int,
    table: Mapping[str, Mapping[str, int]],
) -> OrderedDict[str, int]:
    """중심어의 이웃을 빈도 내림차순으로 정렬해 상위 k개를 반환한다.

    중심어를 그대로 먼저 조회하고, 없으면 토크나이저와 같은 방식으로 소문자화하여 다시 조회한다.
    빈도가 같은 이웃은 이웃어의 사전순으로 정렬한다.

    Args:
        center_word: 중심어
        k: 반환할 최대 이웃 수
        table: {중심어: {이웃어: 빈도}} 공기 빈도 테이블

    Returns:
        {이웃어: 빈도} 순서 보존 매핑. 중심어가 없거나 k가 0 이하이면 빈 매핑.
    """
    neighbors = table.get(center_word)
    if neighbors is None:
        neighbors = table.get(center_word.lower())
    if neighbors is None:
        logger.debug("'%s' 이(가) 테이블에 없습니다.", center_word)
        return OrderedDict()
    if k <= 0:
        return OrderedDict()

    ranked = sorted(neighbors.items(), key=_ranking_key)
    return _collect_ordered(ranked[:k])
