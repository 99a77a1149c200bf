"""상태 기반 스트림 변환(gatherer) 모듈.

요소를 하나씩 받아 내부 상태를 갱신하고 결과를 내보내는 변환을
생성(create_state) · 갱신(update) · 병합(merge) · 종료(finalize) 네 단계로 정의한다.

구현체:
    - SlidingWindowGatherer: 고정 크기 슬라이딩 윈도우 (n-gram 추출용)
    - RunningAverageGatherer: 누적 평균
"""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import accumulate
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")
A = TypeVar("A")
R = TypeVar("R")
T_contra = TypeVar("T_contra", contravariant=True)
R_co = TypeVar("R_co", covariant=True)


class Gatherer(Protocol[T_contra, A, R_co]):
    """상태 기반 변환 인터페이스.

    update()와 finalize()는 내보낼 결과 목록을 반환한다.
    상태 객체는 호출자가 명시적으로 전달하며 gatherer 자신은 상태를 보관하지 않는다.
    """

    def create_state(self) -> A:
        """초기 상태를 생성한다."""
        ...

    def update(self, state: A, element: T_contra) -> list[R_co]:
        """요소 하나로 상태를 갱신하고 내보낼 결과를 반환한다."""
        ...

    def merge(self, left: A, right: A) -> A:
        """두 부분 상태를 하나로 병합한다."""
        ...

    def finalize(self, state: A) -> list[R_co]:
        """입력이 끝난 뒤 남은 결과를 반환한다."""
        ...


def gather(gatherer: Gatherer[T, A, R], elements: Iterable[T]) -> list[R]:
    """gatherer를 입력 요소 전체에 순차 적용한다.

    Args:
        gatherer: 적용할 gatherer
        elements: 입력 요소 이터러블

    Returns:
        update/finalize 단계에서 내보낸 결과를 순서대로 담은 리스트
    """
    state = gatherer.create_state()
    outputs: list[R] = []
    for element in elements:
        outputs.extend(gatherer.update(state, element))
    outputs.extend(gatherer.finalize(state))
    return outputs


# ---------------------------------------------------------------------------
# 슬라이딩 윈도우
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class WindowState(Generic[T]):
    """슬라이딩 윈도우 상태."""

    buffer: deque[T]
    emitted: bool = False


class SlidingWindowGatherer(Generic[T]):
    """길이 size의 겹치는 윈도우를 한 칸씩 이동하며 내보낸다.

    윈도우가 가득 찰 때마다 현재 윈도우의 복사본을 내보내고, 다음 요소가 들어오면
    가장 오래된 요소가 밀려난다. 입력이 size보다 짧으면 finalize()에서 남은 요소를
    하나의 부분 윈도우로 내보낸다.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"윈도우 크기는 1 이상이어야 합니다: {size}")
        self.size = size

    def create_state(self) -> WindowState[T]:
        return WindowState(buffer=deque(maxlen=self.size))

    def update(self, state: WindowState[T], element: T) -> list[tuple[T, ...]]:
        state.buffer.append(element)
        if len(state.buffer) < self.size:
            return []
        state.emitted = True
        return [tuple(state.buffer)]

    def merge(self, left: WindowState[T], right: WindowState[T]) -> WindowState[T]:
        # 경계를 넘는 윈도우를 복원할 수 없으므로 순차 처리만 지원
        raise TypeError("슬라이딩 윈도우는 부분 상태 병합을 지원하지 않습니다.")

    def finalize(self, state: WindowState[T]) -> list[tuple[T, ...]]:
        if state.emitted or not state.buffer:
            return []
        return [tuple(state.buffer)]


# ---------------------------------------------------------------------------
# 누적 평균 / 누적 합
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class AverageState:
    """누적 평균 상태: 지금까지의 합계와 개수."""

    total: float = 0
    count: int = 0


class RunningAverageGatherer:
    """요소가 들어올 때마다 지금까지의 평균을 내보낸다."""

    def create_state(self) -> AverageState:
        return AverageState()

    def update(self, state: AverageState, element: float) -> list[float]:
        state.total += element
        state.count += 1
        return [state.total / state.count]

    def merge(self, left: AverageState, right: AverageState) -> AverageState:
        return AverageState(total=left.total + right.total, count=left.count + right.count)

    def finalize(self, state: AverageState) -> list[float]:
        return []


def running_sum(values: Iterable[int]) -> list[int]:
    """누적 합을 계산한다.

    누산기는 각 단계의 인자로 전달되며 외부 가변 카운터를 사용하지 않는다.

    Example:
        >>> running_sum([1, 2, 3, 4, 5])
        [1, 3, 6, 10, 15]
    """
    return list(accumulate(values, operator.add))
