"""분석 커맨드 모듈.

각 분석 단계를 실행하는 커맨드 클래스들을 제공한다.
모든 커맨드는 Command 인터페이스를 구현하며, CLI에서 서브커맨드로 호출된다.
"""

from .base import Command
from .bench_command import BenchCommand
from .cooccur_command import CooccurCommand
from .ngram_command import NgramCommand
from .topk_command import TopKCommand

__all__ = [
    "Command",
    "NgramCommand",
    "CooccurCommand",
    "TopKCommand",
    "BenchCommand",
]
