"""중앙화된 산출물 경로 및 기본 파라미터 상수 관리

이 모듈은 프로젝트 전체에서 사용되는 artifacts 경로와 분석 기본값을 중앙에서 관리한다.
모든 하드코딩된 경로와 기본 파라미터는 이 모듈의 상수를 참조해야 한다.
"""

from __future__ import annotations

from pathlib import Path

# ====================================================================
# 📁 루트 디렉토리
# ====================================================================

ARTIFACTS_ROOT = Path("artifacts")

# ====================================================================
# 📊 코퍼스 경로
# ====================================================================

CORPORA_DIR = ARTIFACTS_ROOT / "corpora"

# ====================================================================
# 📈 분석 산출물 경로
# ====================================================================

RESULTS_DIR = ARTIFACTS_ROOT / "results"

NGRAMS_FILE = RESULTS_DIR / "ngrams.json"
COOCCURRENCES_FILE = RESULTS_DIR / "cooccurrences.json"
TOP_K_FILE = RESULTS_DIR / "top_k.json"

# ====================================================================
# 📝 로그 경로
# ====================================================================

LOGS_DIR = ARTIFACTS_ROOT / "logs"

# ====================================================================
# ⚙️ 분석 기본 파라미터
# ====================================================================

DEFAULT_NGRAM_SIZE = 3
DEFAULT_WINDOW_SIZE = 2
DEFAULT_CENTER_WORD = "see"
DEFAULT_TOP_K = 5

# ====================================================================
# ⏱️ 벤치마크 기본 파라미터
# ====================================================================

DEFAULT_WARMUP_RUNS = 5
DEFAULT_MEASURE_RUNS = 10
DEFAULT_BENCH_NGRAM_SIZES = (2, 3, 4, 5)
DEFAULT_BENCH_WINDOW_SIZES = (2, 3, 4, 5)
