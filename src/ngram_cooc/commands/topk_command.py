"""상위 K 이웃 추출 커맨드.

저장된 공기 빈도 테이블 JSON을 읽어 중심어의 상위 K개 이웃을 출력하고 저장한다.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from ngram_cooc.analysis import find_top_k
from ngram_cooc.constants import COOCCURRENCES_FILE, DEFAULT_CENTER_WORD, DEFAULT_TOP_K, TOP_K_FILE
from ngram_cooc.io.serialize import read_cooccurrence_table, write_json
from ngram_cooc.parser import CliHelpFormatter, non_negative_int
from ngram_cooc.utils.logging_config import get_logger

from .base import Command, SubparsersLike

logger = get_logger(__name__)


def build_top_k_table(center_word: str, top: Mapping[str, int]) -> Table:
    """상위 K 이웃을 Rich 테이블로 구성한다."""
    table = Table(title=f"🔗 '{center_word}' 의 상위 {len(top)}개 공기어", show_header=True, border_style="dim")
    table.add_column("순위", style="dim", width=6, justify="center")
    table.add_column("이웃어", style="cyan")
    table.add_column("빈도", style="yellow", justify="right")
    for idx, (neighbor, count) in enumerate(top.items(), 1):
        rank_style = "bold green" if idx <= 3 else "dim"
        table.add_row(f"{idx}", neighbor, f"{count:,}회", style=rank_style)
    return table


class TopKCommand(Command):
    """상위 K 이웃 추출 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        table_path: 공기 빈도 테이블 JSON 경로
        center_word: 중심어
        k: 반환할 최대 이웃 수
        output_path: 결과 JSON 저장 경로
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        parser = subparsers.add_parser("topk", help="중심어의 상위 K 공기어 추출", formatter_class=CliHelpFormatter)
        parser.add_argument("--table", type=Path, default=COOCCURRENCES_FILE, help="공기 빈도 테이블 JSON 경로")
        parser.add_argument("--center", default=DEFAULT_CENTER_WORD, help="중심어")
        parser.add_argument("--k", type=non_negative_int, default=DEFAULT_TOP_K, help="반환할 최대 이웃 수")
        parser.add_argument("--output", type=Path, default=TOP_K_FILE, help="결과 JSON 저장 경로")

    def __init__(self, console: Console, table_path: Path, center_word: str, k: int, output_path: Path):
        self.console = console
        self.table_path = table_path
        self.center_word = center_word
        self.k = k
        self.output_path = output_path

    def execute(self) -> dict[str, Any]:
        """상위 K 이웃 추출을 실행한다.

        Returns:
            실행 결과 딕셔너리 (center_word, k, neighbors, output_path)
        """
        cooccurrences = read_cooccurrence_table(self.table_path)
        logger.info("📂 공기 빈도 테이블 로드: 중심어 %d개", len(cooccurrences))

        top = find_top_k(self.center_word, self.k, cooccurrences)
        if not top:
            logger.warning("⚠️  '%s' 에 대한 공기어가 없습니다.", self.center_word)
        else:
            self.console.print()
            self.console.print(build_top_k_table(self.center_word, top))

        write_json(dict(top), self.output_path)

        return {
            "center_word": self.center_word,
            "k": self.k,
            "neighbors": len(top),
            "output_path": self.output_path,
        }

    def get_name(self) -> str:
        return "topk"
