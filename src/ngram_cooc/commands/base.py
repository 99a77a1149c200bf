"""분석 커맨드 추상 인터페이스.

각 분석 단계를 실행하는 커맨드 클래스들의 공통 인터페이스를 정의한다.
모든 커맨드는 Command 추상 클래스를 상속받아 configure_parser(), execute(), get_name()을 구현해야 한다.
"""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Protocol

from ngram_cooc.constants import CORPORA_DIR
from ngram_cooc.corpus.reader import read_corpus
from ngram_cooc.corpus.tokenize import produce_tokens
from ngram_cooc.utils.logging_config import get_logger

logger = get_logger(__name__)


class SubparsersLike(Protocol):
    """argparse 서브파서 액션 호환 프로토콜."""

    def add_parser(self, name: str, **kwargs: Any) -> argparse.ArgumentParser:
        """서브커맨드 파서를 추가한다."""
        ...


def add_corpus_arguments(parser: argparse.ArgumentParser) -> None:
    """코퍼스 입력 관련 공통 인자를 추가한다."""
    parser.add_argument("--input", type=Path, default=CORPORA_DIR, help="코퍼스 파일 또는 디렉토리")
    parser.add_argument("--text-key", default="text", help="JSON/JSONL 파일에서 텍스트를 읽어올 키")
    parser.add_argument("--encoding", default="utf-8", help="입력 파일 인코딩")


def load_tokens(input_path: Path, text_key: str, encoding: str) -> list[str]:
    """코퍼스를 읽어 토큰 시퀀스로 변환한다."""
    text = read_corpus(input_path, text_key=text_key, encoding=encoding)
    tokens = produce_tokens(text)
    logger.info("🔤 토큰 %d개 (고유 %d개)를 추출했습니다.", len(tokens), len(set(tokens)))
    return tokens


class Command(ABC):
    """분석 단계 실행 커맨드 인터페이스.

    모든 커맨드가 상속받아야 하는 추상 기반 클래스이다.
    """

    @staticmethod
    @abstractmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 파서를 설정한다.

        Args:
            subparsers: 서브파서 액션 객체
        """
        raise NotImplementedError

    @abstractmethod
    def execute(self) -> dict[str, Any]:
        """커맨드 실행 로직.

        Returns:
            실행 결과 딕셔너리 (요약 테이블 출력용)
        """
        raise NotImplementedError

    @abstractmethod
    def get_name(self) -> str:
        """커맨드 이름을 반환한다.

        Returns:
            커맨드의 고유 식별 이름
        """
        raise NotImplementedError
