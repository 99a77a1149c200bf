"""공기 빈도 분석 커맨드.

코퍼스를 토큰화한 뒤 전체 순회 방식과 일회성 집계 방식으로 공기 빈도 테이블을 각각 만들고,
두 결과가 일치하는지 확인하여 JSON으로 저장한다. 중심어의 상위 K개 이웃도 함께 출력한다.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rich.console import Console

from ngram_cooc.analysis import count_cooccurrences, count_cooccurrences_once, find_top_k
from ngram_cooc.constants import (
    COOCCURRENCES_FILE,
    DEFAULT_CENTER_WORD,
    DEFAULT_TOP_K,
    DEFAULT_WINDOW_SIZE,
)
from ngram_cooc.io.serialize import write_json
from ngram_cooc.parser import CliHelpFormatter, non_negative_int, positive_int
from ngram_cooc.utils.logging_config import get_logger

from .base import Command, SubparsersLike, add_corpus_arguments, load_tokens
from .topk_command import build_top_k_table

logger = get_logger(__name__)


class CooccurCommand(Command):
    """공기 빈도 분석 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        input_path: 코퍼스 파일 또는 디렉토리
        window: 좌우 최대 거리
        center_word: 상위 K 이웃을 출력할 중심어
        k: 출력할 최대 이웃 수
        output_path: 공기 빈도 테이블 JSON 저장 경로
        text_key: JSON/JSONL 텍스트 키
        encoding: 입력 파일 인코딩
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        parser = subparsers.add_parser("cooccur", help="공기 빈도 분석", formatter_class=CliHelpFormatter)
        add_corpus_arguments(parser)
        parser.add_argument("--window", type=positive_int, default=DEFAULT_WINDOW_SIZE, help="좌우 최대 거리")
        parser.add_argument("--center", default=DEFAULT_CENTER_WORD, help="상위 K 이웃을 출력할 중심어")
        parser.add_argument("--k", type=non_negative_int, default=DEFAULT_TOP_K, help="출력할 최대 이웃 수")
        parser.add_argument("--output", type=Path, default=COOCCURRENCES_FILE, help="공기 빈도 테이블 JSON 저장 경로")

    def __init__(
        self,
        console: Console,
        input_path: Path,
        window: int,
        center_word: str,
        k: int,
        output_path: Path,
        text_key: str = "text",
        encoding: str = "utf-8",
    ):
        self.console = console
        self.input_path = input_path
        self.window = window
        self.center_word = center_word
        self.k = k
        self.output_path = output_path
        self.text_key = text_key
        self.encoding = encoding

    def execute(self) -> dict[str, Any]:
        """공기 빈도 분석을 실행한다.

        Returns:
            실행 결과 딕셔너리 (window, center_words, strategies_match, top_k, output_path)
        """
        tokens = load_tokens(self.input_path, self.text_key, self.encoding)

        eager = count_cooccurrences(self.window, tokens)
        once = count_cooccurrences_once(self.window, tokens)
        strategies_match = eager == once
        if strategies_match:
            logger.info("✅ 두 공기 빈도 집계 방식의 결과가 일치합니다. (window=%d)", self.window)
        else:
            logger.warning("⚠️  두 공기 빈도 집계 방식의 결과가 다릅니다. (window=%d)", self.window)

        write_json(eager, self.output_path)

        top = find_top_k(self.center_word, self.k, eager)
        if top:
            self.console.print()
            self.console.print(build_top_k_table(self.center_word, top))
        else:
            logger.warning("⚠️  '%s' 에 대한 공기어가 없습니다.", self.center_word)

        return {
            "window": self.window,
            "token_count": len(tokens),
            "center_words": len(eager),
            "strategies_match": strategies_match,
            "top_k": dict(top),
            "output_path": self.output_path,
        }

    def get_name(self) -> str:
        return "cooccur"
