"""cooc CLI 인자 파서.

n, window, k 같은 분석 파라미터의 정수 검증과 ngrams/cooccur/topk/bench 서브커맨드 등록을 담당한다.
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.panel import Panel

if TYPE_CHECKING:
    from ngram_cooc.commands.base import Command


class CliHelpFormatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawTextHelpFormatter):
    """기본 파라미터 값을 함께 보여주는 도움말 포맷터."""


class CliArgumentParser(argparse.ArgumentParser):
    """잘못된 분석 파라미터를 Rich 패널로 알리는 argparse 파서.

    Attributes:
        console: Rich 콘솔 인스턴스
    """

    def __init__(self, console: Console | None = None, **kwargs: Any) -> None:
        self.console = console or Console()
        super().__init__(**kwargs)

    def error(self, message: str) -> None:
        """인자 파싱 오류를 Rich 패널로 출력한다.

        Args:
            message: 오류 메시지
        """
        self.console.print(
            Panel.fit(
                f"[bold red]인자 오류[/bold red]\n{message}\n\n[dim]도움말: cooc --help[/dim]",
                title="CLI 입력 오류",
                border_style="red",
            )
        )
        raise SystemExit(2)


def validate_int(value: str, minimum: int = 0) -> int:
    """n, window, k 등 정수 파라미터를 검증한다.

    Args:
        value: 파싱할 문자열 값
        minimum: 허용되는 최소값 (기본값: 0)

    Returns:
        파싱된 정수 값

    Raises:
        argparse.ArgumentTypeError: 값이 정수가 아니거나 최소값보다 작은 경우
    """
    try:
        if (parsed := int(value)) < minimum:
            raise argparse.ArgumentTypeError(f"{minimum} 이상의 정수만 허용됩니다.")
        return parsed
    except ValueError as e:
        raise argparse.ArgumentTypeError("정수를 입력해야 합니다.") from e


def non_negative_int(value: str) -> int:
    """0 이상의 정수를 검증한다."""
    return validate_int(value, minimum=0)


def positive_int(value: str) -> int:
    """1 이상의 정수를 검증한다."""
    return validate_int(value, minimum=1)


def setup_parser(console: Console, commands: Iterable[type[Command]]) -> argparse.ArgumentParser:
    """cooc 파서를 만들고 각 분석 커맨드의 서브파서를 등록한다.

    Args:
        console: Rich 콘솔 인스턴스 (오류 출력용)
        commands: Command 서브클래스 이터러블

    Returns:
        설정된 ArgumentParser 객체
    """
    parser = CliArgumentParser(
        console,
        prog="cooc",
        description="n-gram 추출 및 공기(co-occurrence) 분석 CLI",
        formatter_class=CliHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="콘솔 로깅 레벨",
    )
    parser.add_argument("--no-log-file", action="store_true", help="로그 파일을 생성하지 않습니다")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="command")
    for cmd_cls in commands:
        cmd_cls.configure_parser(subparsers)

    return parser
