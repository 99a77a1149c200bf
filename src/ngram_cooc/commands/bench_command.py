"""실행 시간 측정 커맨드.

n-gram 추출 두 방식과 공기 빈도 집계 두 방식을 파라미터별로 워밍업 후 반복 측정하고
평균 실행 시간을 표로 출력한다.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from ngram_cooc.analysis import (
    count_cooccurrences,
    count_cooccurrences_once,
    produce_ngrams,
    produce_ngrams_sliding,
)
from ngram_cooc.benchmark.timing import TimingResult, measure_time_to_execute
from ngram_cooc.constants import (
    DEFAULT_BENCH_NGRAM_SIZES,
    DEFAULT_BENCH_WINDOW_SIZES,
    DEFAULT_MEASURE_RUNS,
    DEFAULT_WARMUP_RUNS,
)
from ngram_cooc.parser import CliHelpFormatter, non_negative_int, positive_int
from ngram_cooc.utils.logging_config import create_progress

from .base import Command, SubparsersLike, add_corpus_arguments, load_tokens

# (표시 이름, 파라미터 이름, 측정 함수)
Operation = tuple[str, str, Callable[[int, Sequence[str]], Any]]

NGRAM_OPERATIONS: tuple[Operation, ...] = (
    ("n-gram (슬라이딩 윈도우)", "n", produce_ngrams_sliding),
    ("n-gram (인덱스)", "n", produce_ngrams),
)
COOCCURRENCE_OPERATIONS: tuple[Operation, ...] = (
    ("공기 빈도 (일회성 집계)", "window", count_cooccurrences_once),
    ("공기 빈도 (전체 순회)", "window", count_cooccurrences),
)


class BenchCommand(Command):
    """실행 시간 측정 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        input_path: 코퍼스 파일 또는 디렉토리
        ngram_sizes: 측정할 n-gram 크기 목록
        window_sizes: 측정할 window 크기 목록
        warmup_runs: 측정 전 실행 횟수
        measure_runs: 측정 실행 횟수
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        parser = subparsers.add_parser("bench", help="실행 시간 측정", formatter_class=CliHelpFormatter)
        add_corpus_arguments(parser)
        parser.add_argument(
            "--ngram-sizes", type=positive_int, nargs="+", default=list(DEFAULT_BENCH_NGRAM_SIZES), help="측정할 n-gram 크기"
        )
        parser.add_argument(
            "--window-sizes", type=positive_int, nargs="+", default=list(DEFAULT_BENCH_WINDOW_SIZES), help="측정할 window 크기"
        )
        parser.add_argument("--warmup-runs", type=non_negative_int, default=DEFAULT_WARMUP_RUNS, help="측정 전 실행 횟수")
        parser.add_argument("--measure-runs", type=positive_int, default=DEFAULT_MEASURE_RUNS, help="측정 실행 횟수")

    def __init__(
        self,
        console: Console,
        input_path: Path,
        ngram_sizes: Sequence[int],
        window_sizes: Sequence[int],
        warmup_runs: int,
        measure_runs: int,
        text_key: str = "text",
        encoding: str = "utf-8",
    ):
        self.console = console
        self.input_path = input_path
        self.ngram_sizes = list(ngram_sizes)
        self.window_sizes = list(window_sizes)
        self.warmup_runs = warmup_runs
        self.measure_runs = measure_runs
        self.text_key = text_key
        self.encoding = encoding

    def _plan(self) -> list[tuple[str, Callable[[int, Sequence[str]], Any], int]]:
        """(측정 이름, 함수, 파라미터 값) 목록을 구성한다."""
        plan = []
        for operations, values in (
            (NGRAM_OPERATIONS, self.ngram_sizes),
            (COOCCURRENCE_OPERATIONS, self.window_sizes),
        ):
            for value in values:
                for label, param, func in operations:
                    plan.append((f"{label} ({param} = {value})", func, value))
        return plan

    def execute(self) -> dict[str, Any]:
        """실행 시간 측정을 수행한다.

        Returns:
            실행 결과 딕셔너리 (token_count, measurements, fastest)
        """
        tokens = load_tokens(self.input_path, self.text_key, self.encoding)
        plan = self._plan()

        results: list[TimingResult] = []
        with create_progress(transient=True) as progress:
            task = progress.add_task("측정 중", total=len(plan))
            for name, func, value in plan:
                # 루프 변수 바인딩
                results.append(
                    measure_time_to_execute(
                        name,
                        lambda func=func, value=value: func(value, tokens),
                        self.warmup_runs,
                        self.measure_runs,
                    )
                )
                progress.advance(task)

        table = Table(title="⏱️  평균 실행 시간", show_header=True, title_style="bold green")
        table.add_column("연산", style="bold cyan")
        table.add_column("평균(ms)", style="yellow", justify="right")
        table.add_column("측정 횟수", style="dim", justify="right")
        for result in results:
            table.add_row(result.name, f"{result.mean_ms:.4f}", f"{result.runs}")

        self.console.print()
        self.console.print(table)
        self.console.print()

        fastest = min(results, key=lambda r: r.mean_ms) if results else None
        return {
            "token_count": len(tokens),
            "measurements": len(results),
            "fastest": fastest.name if fastest else "-",
        }

    def get_name(self) -> str:
        return "bench"
