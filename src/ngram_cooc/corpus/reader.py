"""코퍼스 파일을 읽어 하나의 텍스트로 합치는 헬퍼입니다."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator, Sequence

from tqdm import tqdm

logger = logging.getLogger(__name__)

_ALLOWED_CORPUS_SUFFIXES = {".txt", ".jsonl", ".json"}


def find_corpus_files(path: Path) -> Sequence[Path]:
    """입력 경로에서 허용된 확장자를 가진 코퍼스 파일 목록을 가져옵니다.

    Raises:
        FileNotFoundError: 경로가 존재하지 않는 경우
    """
    if not path.exists():
        raise FileNotFoundError(f"코퍼스 경로를 찾을 수 없습니다: {path}")

    if path.is_file():
        return [path]

    files: list[Path] = []
    for candidate in sorted(path.rglob("*")):
        if candidate.is_file() and candidate.suffix.lower() in _ALLOWED_CORPUS_SUFFIXES:
            files.append(candidate)
    return files


def _extract_texts_from_file(path: Path, text_key: str, encoding: str) -> Iterator[str]:
    """파일로부터 텍스트를 순차적으로 추출합니다."""
    suffix = path.suffix.lower()
    if suffix == ".jsonl":
        with path.open("r", encoding=encoding) as handle:
            for line in handle:
                line = line.strip()
                if not line:
                    continue
                try:
                    record = json.loads(line)
                except json.JSONDecodeError as exc:
                    logger.warning("%s 파일의 jsonl 라인을 해석할 수 없습니다: %s", path, exc)
                    continue
                if isinstance(record, dict) and isinstance(record.get(text_key), str):
                    yield record[text_key]
        return

    if suffix == ".json":
        try:
            with path.open("r", encoding=encoding) as handle:
                payload = json.load(handle)
        except json.JSONDecodeError as exc:
            logger.warning("%s 파일을 json으로 파싱할 수 없습니다: %s", path, exc)
            return
        records = payload if isinstance(payload, list) else [payload]
        for record in records:
            if isinstance(record, dict) and text_key in record:
                yield str(record[text_key])
        return

    # .txt 및 그 밖의 단일 파일은 전체를 그대로 읽는다
    yield path.read_text(encoding=encoding)


def read_corpus(path: Path, *, text_key: str = "text", encoding: str = "utf-8") -> str:
    """코퍼스 파일(또는 디렉토리)의 텍스트를 줄바꿈으로 이어 붙여 반환합니다.

    Args:
        path: 코퍼스 파일 또는 디렉토리 경로
        text_key: JSON/JSONL 레코드에서 텍스트를 읽어올 키
        encoding: 입력 파일 인코딩

    Returns:
        합쳐진 코퍼스 텍스트

    Raises:
        FileNotFoundError: 경로가 없거나 읽을 코퍼스 파일이 없는 경우
    """
    files = find_corpus_files(path)
    if not files:
        raise FileNotFoundError(f"읽을 수 있는 코퍼스 파일이 없습니다: {path}")

    texts: list[str] = []
    for file_path in tqdm(files, desc="코퍼스 읽기", unit="파일", disable=len(files) == 1):
        texts.extend(_extract_texts_from_file(file_path, text_key, encoding))

    logger.info("📂 코퍼스 파일 %d개에서 텍스트 %d건을 읽었습니다.", len(files), len(texts))
    return "\n".join(texts)
