"""분석 결과 JSON 저장/로드 모듈."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ngram_cooc.utils.logging_config import get_logger

logger = get_logger(__name__)


def write_json(data: Any, output_path: Path) -> Path:
    """결과를 들여쓰기된 UTF-8 JSON으로 저장한다.

    Args:
        data: 리스트/딕셔너리로 구성된 결과
        output_path: 저장 경로 (상위 디렉토리는 자동 생성)

    Returns:
        저장된 파일 경로
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, ensure_ascii=False, indent=2)
        handle.write("\n")
    logger.info("📄 결과 저장: %s", output_path)
    return output_path


def read_json(path: Path) -> Any:
    """JSON 파일을 읽는다.

    Raises:
        FileNotFoundError: 파일이 없는 경우
        ValueError: JSON으로 파싱할 수 없는 경우
    """
    if not path.is_file():
        raise FileNotFoundError(f"파일을 찾을 수 없습니다: {path}")
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path} 파일을 json으로 파싱할 수 없습니다: {exc}") from exc


def read_cooccurrence_table(path: Path) -> dict[str, dict[str, int]]:
    """저장된 공기 빈도 테이블을 읽고 구조를 검증한다.

    Raises:
        ValueError: {문자열: {문자열: 정수}} 구조가 아닌 경우
    """
    payload = read_json(path)
    if not isinstance(payload, dict):
        raise ValueError(f"공기 빈도 테이블은 JSON 객체여야 합니다: {path}")

    table: dict[str, dict[str, int]] = {}
    for center, neighbors in payload.items():
        if not isinstance(neighbors, dict) or not all(
            isinstance(count, int) and not isinstance(count, bool) for count in neighbors.values()
        ):
            raise ValueError(f"'{center}' 의 이웃 빈도 형식이 올바르지 않습니다: {path}")
        table[center] = dict(neighbors)
    return table
