"""n-gram 추출 모듈.

같은 결과를 내는 두 가지 방식을 제공한다.
    - produce_ngrams: 시작 인덱스 기반 직접 구성
    - produce_ngrams_sliding: SlidingWindowGatherer로 한 토큰씩 이동하며 구성
"""

from __future__ import annotations

from collections.abc import Sequence

from ngram_cooc.analysis.gatherer import SlidingWindowGatherer, gather
from ngram_cooc.utils.logging_config import get_logger

logger = get_logger(__name__)

NGRAM_SEPARATOR = " "


def _is_valid_size(n: int, tokens: Sequence[str]) -> bool:
    """n-gram 크기가 [1, 토큰 수] 범위에 있는지 확인한다."""
    return 1 <= n <= len(tokens)


def produce_ngrams(n: int, tokens: Sequence[str]) -> list[str]:
    """시작 인덱스마다 n개 토큰을 이어 붙여 n-gram 목록을 만든다.

    Args:
        n: n-gram 크기
        tokens: 입력 토큰 시퀀스

    Returns:
        첫 토큰 위치 순서의 n-gram 문자열 리스트.
        n이 1 미만이거나 토큰 수보다 크면 빈 리스트, n이 1이면 입력 토큰 그대로.
    """
    if not _is_valid_size(n, tokens):
        logger.debug("n=%d 이(가) 유효 범위를 벗어나 빈 결과를 반환합니다. (토큰 %d개)", n, len(tokens))
        return []
    if n == 1:
        return list(tokens)

    return [NGRAM_SEPARATOR.join(tokens[i : i + n]) for i in range(len(tokens) - n + 1)]


def produce_ngrams_sliding(n: int, tokens: Sequence[str]) -> list[str]:
    """슬라이딩 윈도우를 한 토큰씩 이동시키며 n-gram 목록을 만든다.

    produce_ngrams()와 동일한 입력에 대해 동일한 결과를 반환한다.
    """
    if not _is_valid_size(n, tokens):
        logger.debug("n=%d 이(가) 유효 범위를 벗어나 빈 결과를 반환합니다. (토큰 %d개)", n, len(tokens))
        return []
    if n == 1:
        return list(tokens)

    windows = gather(SlidingWindowGatherer(n), tokens)
    return [NGRAM_SEPARATOR.join(window) for window in windows]
