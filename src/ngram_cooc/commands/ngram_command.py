"""n-gram 추출 커맨드.

코퍼스를 토큰화한 뒤 인덱스 기반 방식과 슬라이딩 윈도우 방식으로 n-gram을 각각 만들고,
두 결과가 일치하는지 확인하여 JSON으로 저장한다.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from ngram_cooc.analysis import produce_ngrams, produce_ngrams_sliding
from ngram_cooc.constants import DEFAULT_NGRAM_SIZE, NGRAMS_FILE
from ngram_cooc.io.serialize import write_json
from ngram_cooc.parser import CliHelpFormatter, positive_int
from ngram_cooc.utils.logging_config import get_logger

from .base import Command, SubparsersLike, add_corpus_arguments, load_tokens

logger = get_logger(__name__)


class NgramCommand(Command):
    """n-gram 추출 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        input_path: 코퍼스 파일 또는 디렉토리
        n: n-gram 크기
        output_path: n-gram JSON 저장 경로
        text_key: JSON/JSONL 텍스트 키
        encoding: 입력 파일 인코딩
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        parser = subparsers.add_parser("ngrams", help="n-gram 추출", formatter_class=CliHelpFormatter)
        add_corpus_arguments(parser)
        parser.add_argument("--n", type=positive_int, default=DEFAULT_NGRAM_SIZE, help="n-gram 크기")
        parser.add_argument("--output", type=Path, default=NGRAMS_FILE, help="n-gram JSON 저장 경로")

    def __init__(
        self,
        console: Console,
        input_path: Path,
        n: int,
        output_path: Path,
        text_key: str = "text",
        encoding: str = "utf-8",
    ):
        self.console = console
        self.input_path = input_path
        self.n = n
        self.output_path = output_path
        self.text_key = text_key
        self.encoding = encoding

    def execute(self) -> dict[str, Any]:
        """n-gram 추출을 실행한다.

        Returns:
            실행 결과 딕셔너리 (ngram_count, unique_ngrams, strategies_match, output_path)
        """
        tokens = load_tokens(self.input_path, self.text_key, self.encoding)

        indexed = produce_ngrams(self.n, tokens)
        sliding = produce_ngrams_sliding(self.n, tokens)
        strategies_match = indexed == sliding
        if strategies_match:
            logger.info("✅ 두 n-gram 추출 방식의 결과가 일치합니다. (n=%d)", self.n)
        else:
            logger.warning("⚠️  두 n-gram 추출 방식의 결과가 다릅니다. (n=%d)", self.n)

        write_json(indexed, self.output_path)

        counter = Counter(indexed)
        if top := counter.most_common(10):
            table = Table(title=f"🏆 상위 10개 {self.n}-gram", show_header=True, border_style="dim")
            table.add_column("순위", style="dim", width=6, justify="center")
            table.add_column("n-gram", style="cyan")
            table.add_column("빈도", style="yellow", justify="right")
            for idx, (ngram, freq) in enumerate(top, 1):
                table.add_row(f"{idx}", ngram, f"{freq:,}회")
            self.console.print()
            self.console.print(table)

        return {
            "n": self.n,
            "token_count": len(tokens),
            "ngram_count": len(indexed),
            "unique_ngrams": len(counter),
            "strategies_match": strategies_match,
            "output_path": self.output_path,
        }

    def get_name(self) -> str:
        return "ngrams"
