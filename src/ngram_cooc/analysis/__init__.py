"""n-gram 추출, 공기 빈도 집계 및 상위 K 이웃 추출 모듈.

토큰 시퀀스 하나를 입력으로 받아 n-gram 목록과 공기 빈도 테이블을 계산하고,
테이블에서 중심어별 상위 K개 이웃을 선정한다.
"""

from __future__ import annotations

from .cooccurrence import (
    AggregationError,
    AggregationState,
    CooccurrenceAggregation,
    CooccurrenceTable,
    count_cooccurrences,
    count_cooccurrences_once,
)
from .gatherer import Gatherer, RunningAverageGatherer, SlidingWindowGatherer, gather, running_sum
from .ngrams import produce_ngrams, produce_ngrams_sliding
from .topk import find_top_k

__all__ = [
    "AggregationError",
    "AggregationState",
    "CooccurrenceAggregation",
    "CooccurrenceTable",
    "Gatherer",
    "RunningAverageGatherer",
    "SlidingWindowGatherer",
    "count_cooccurrences",
    "count_cooccurrences_once",
    "find_top_k",
    "gather",
    "produce_ngrams",
    "produce_ngrams_sliding",
    "running_sum",
]
