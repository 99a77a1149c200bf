"""ngram-cooc CLI 진입점 모듈.

n-gram 추출 및 공기(co-occurrence) 분석의 명령줄 인터페이스를 제공한다.
Rich 기반 콘솔 출력 및 로깅을 지원한다.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from functools import lru_cache
from pathlib import Path
from time import perf_counter
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ngram_cooc.analysis import AggregationError
from ngram_cooc.commands import BenchCommand, Command, CooccurCommand, NgramCommand, TopKCommand
from ngram_cooc.parser import setup_parser
from ngram_cooc.utils.logging_config import get_console, get_logger, setup_logging

LOGGER_NAME = "ngram_cooc.cli"

COMMANDS: tuple[type[Command], ...] = (NgramCommand, CooccurCommand, TopKCommand, BenchCommand)

# Command registry for Factory pattern
_COMMAND_REGISTRY: dict[str, Callable[[Console, argparse.Namespace], Command]] = {}


def register_command(name: str) -> Callable:
    """커맨드 팩토리 함수를 레지스트리에 등록하는 데코레이터.

    Args:
        name: 커맨드 이름 (CLI 서브커맨드 이름)

    Returns:
        데코레이터 함수
    """
    def decorator(factory: Callable[[Console, argparse.Namespace], Command]) -> Callable:
        _COMMAND_REGISTRY[name] = factory
        return factory
    return decorator


@lru_cache(maxsize=1)
def _get_banner() -> str:
    """pyfiglet ASCII 아트 배너를 생성하고 캐싱한다."""
    from pyfiglet import Figlet
    return Figlet(font="standard").renderText("COOC").rstrip()


def print_banner(console: Console) -> None:
    """시작 배너를 출력한다."""
    console.print(Text(_get_banner(), style="bold cyan"))


# Command factory functions (Registry pattern)
@register_command("ngrams")
def _create_ngram_command(console: Console, a: argparse.Namespace) -> NgramCommand:
    """NgramCommand 팩토리 함수."""
    return NgramCommand(console, a.input, a.n, a.output, a.text_key, a.encoding)


@register_command("cooccur")
def _create_cooccur_command(console: Console, a: argparse.Namespace) -> CooccurCommand:
    """CooccurCommand 팩토리 함수."""
    return CooccurCommand(console, a.input, a.window, a.center, a.k, a.output, a.text_key, a.encoding)


@register_command("topk")
def _create_topk_command(console: Console, a: argparse.Namespace) -> TopKCommand:
    """TopKCommand 팩토리 함수."""
    return TopKCommand(console, a.table, a.center, a.k, a.output)


@register_command("bench")
def _create_bench_command(console: Console, a: argparse.Namespace) -> BenchCommand:
    """BenchCommand 팩토리 함수."""
    return BenchCommand(
        console, a.input, a.ngram_sizes, a.window_sizes,
        a.warmup_runs, a.measure_runs, a.text_key, a.encoding
    )


def create_command(console: Console, args: argparse.Namespace) -> Command:
    """커맨드 객체를 생성한다.

    Args:
        console: Rich 콘솔 인스턴스
        args: 파싱된 커맨드라인 인자

    Returns:
        생성된 Command 객체

    Raises:
        NotImplementedError: 유효하지 않은 커맨드인 경우
    """
    if factory := _COMMAND_REGISTRY.get(args.command):
        return factory(console, args)
    raise NotImplementedError(f"'{args.command}'는 유효하지 않은 커맨드입니다.")


def format_time(elapsed: float) -> str:
    """경과 시간을 사람이 읽기 쉬운 형태로 포맷팅한다.

    Args:
        elapsed: 경과 시간 (초 단위)

    Returns:
        포맷팅된 시간 문자열 (예: "500ms", "3.14초", "2분 30.5초")
    """
    if elapsed < 1:
        return f"{elapsed*1000:.0f}ms"
    if elapsed < 60:
        return f"{elapsed:.2f}초"
    minutes, seconds = divmod(elapsed, 60)
    return f"{int(minutes)}분 {seconds:.1f}초"


def format_value(value: Any) -> str:
    """결과 값을 포맷팅한다. 120자를 초과하면 잘라낸다."""
    formatters: dict[type, Callable[[Any], str]] = {
        Path: str,
        dict: lambda v: ", ".join(f"{k}={val}" for k, val in v.items()) or "{}",
        list: lambda v: f"list({len(v)})",
        int: lambda v: f"{v:,}",
    }
    formatted = formatters.get(type(value), str)(value)
    return formatted[:117] + "..." if len(formatted) > 120 else formatted


def create_result_table(command_name: str, elapsed: float, result: dict[str, Any]) -> Panel:
    """실행 결과 테이블을 생성한다.

    Args:
        command_name: 커맨드 이름
        elapsed: 경과 시간 (초 단위)
        result: 실행 결과 딕셔너리

    Returns:
        생성된 Rich Panel 객체
    """
    table = Table(show_header=True, border_style="dim", padding=(0, 1))
    table.add_column("항목", style="bold cyan", width=25)
    table.add_column("값", style="yellow", justify="left")

    table.add_row("⏱️  실행 시간", format_time(elapsed))

    for key, value in result.items():
        formatted_key = key.replace("_", " ").title()
        table.add_row(f"   {formatted_key}", format_value(value))

    return Panel(
        table,
        title=f"[bold green]✅ {command_name} 완료[/bold green]",
        border_style="green",
        padding=(1, 2)
    )


# Error categorization strategy (Strategy pattern)
_ERROR_CATEGORIES = {
    NotImplementedError: ("미구현 기능", "⚠️", "미구현/미지원 오류"),
    FileNotFoundError: ("파일 없음", "📁", "파일 찾기 실패"),
    ValueError: ("입력값 오류", "⚠️", "입력값 오류"),
    AggregationError: ("집계 오류", "🧮", "집계 불변식 위반"),
}
_UNEXPECTED_ERROR = ("예기치 않은 오류", "❌", "실행 중 예기치 않은 오류 발생")


def categorize_error(error: Exception) -> tuple[str, str, str] | None:
    """예외의 MRO를 따라 가장 가까운 에러 카테고리를 찾는다. 없으면 None."""
    for cls in type(error).__mro__:
        if cls in _ERROR_CATEGORIES:
            return _ERROR_CATEGORIES[cls]
    return None


def handle_error(console: Console, error: Exception, command: str, elapsed: float, logger: logging.Logger) -> None:
    """에러를 처리하고 출력한다.

    에러 타입별로 적절한 카테고리와 아이콘을 선택한다.

    Args:
        console: Rich 콘솔 인스턴스
        error: 발생한 예외
        command: 실행 중이던 커맨드 이름
        elapsed: 경과 시간 (초 단위)
        logger: 로거 객체
    """
    error_type = type(error).__name__
    matched = categorize_error(error)
    category, icon, log_msg = matched or _UNEXPECTED_ERROR

    if matched is not None:
        logger.error("[%s] %s: %s", command, log_msg, error)
    else:
        logger.exception("[%s] %s", command, log_msg)

    error_table = Table(show_header=False, border_style="dim red", padding=(0, 1))
    error_table.add_column("항목", style="bold red", width=15)
    error_table.add_column("내용", style="white")

    error_table.add_row("카테고리", f"{icon} {category}")
    error_table.add_row("오류 타입", error_type)
    error_table.add_row("메시지", str(error))
    error_table.add_row("경과 시간", format_time(elapsed))

    console.print()
    console.print(
        Panel(error_table, title=f"[bold red]❌ {command} 실행 실패[/bold red]",
              border_style="red", padding=(1, 2))
    )
    console.print()

    help_text = Text()
    help_text.append("💡 도움말: ", style="bold yellow")
    help_text.append(f"cooc {command} --help", style="cyan")
    help_text.append(" 명령으로 상세 옵션을 확인하세요", style="dim")
    console.print(help_text)
    console.print()


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 엔트리 포인트.

    Args:
        argv: 커맨드라인 인자 (None이면 sys.argv 사용)

    Returns:
        종료 코드 (0: 성공, 1: 오류, 130: 사용자 중단)
    """
    console = get_console()
    print_banner(console)
    args = setup_parser(console, COMMANDS).parse_args(argv)
    setup_logging(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        log_to_file=not args.no_log_file,
    )
    logger = get_logger(LOGGER_NAME)
    start = perf_counter()

    try:
        command = create_command(console, args)
        command_name = command.get_name()
        logger.info("[%s] 단계 시작", command_name)
        result = command.execute()
        elapsed = perf_counter() - start

        logger.info("[%s] 단계 완료 (%.2fs)", command_name, elapsed)
        console.print(create_result_table(command_name, elapsed, result))
        return 0

    except KeyboardInterrupt:
        logger.warning("사용자 요청으로 실행 중단됨")
        return 130

    except Exception as e:
        handle_error(console, e, args.command, perf_counter() - start, logger)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
