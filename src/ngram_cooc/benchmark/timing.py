"""워밍업 후 반복 측정으로 평균 실행 시간을 구하는 마이크로벤치마크 헬퍼."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from time import perf_counter_ns
from typing import Any

from ngram_cooc.utils.logging_config import get_logger

logger = get_logger(__name__)

NANOS_PER_MILLI = 1_000_000


@dataclass(frozen=True, slots=True)
class TimingResult:
    """단일 연산의 측정 결과.

    Attributes:
        name: 연산 이름
        runs: 측정 횟수 (워밍업 제외)
        mean_ms: 평균 실행 시간(밀리초)
    """

    name: str
    runs: int
    mean_ms: float


def measure_time_to_execute(
    name: str,
    operation: Callable[[], Any],
    warmup_runs: int,
    measure_runs: int,
) -> TimingResult:
    """연산을 워밍업한 뒤 반복 측정하여 평균 실행 시간을 구한다.

    Args:
        name: 로그와 결과에 표시할 연산 이름
        operation: 인자 없이 호출되는 측정 대상
        warmup_runs: 측정 전 실행 횟수
        measure_runs: 측정 실행 횟수

    Returns:
        측정 결과

    Raises:
        ValueError: measure_runs가 1 미만인 경우
    """
    if measure_runs < 1:
        raise ValueError(f"측정 횟수는 1 이상이어야 합니다: {measure_runs}")

    for _ in range(warmup_runs):
        operation()

    total_nanos = 0
    for _ in range(measure_runs):
        start = perf_counter_ns()
        operation()
        total_nanos += perf_counter_ns() - start

    mean_ms = total_nanos / measure_runs / NANOS_PER_MILLI
    logger.info("⏱️  %s: 평균 %.4f ms (%d회 측정)", name, mean_ms, measure_runs)
    return TimingResult(name=name, runs=measure_runs, mean_ms=mean_ms)
