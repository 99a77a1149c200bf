"""원시 텍스트를 소문자 단어 토큰 시퀀스로 변환합니다."""

from __future__ import annotations

import re

# 숫자와 밑줄을 제외한 모든 유니코드 문자 (독일어 움라우트, ß 포함)
WORD_PATTERN = re.compile(r"[^\W\d_]+")


def produce_tokens(text: str, pattern: re.Pattern[str] = WORD_PATTERN) -> list[str]:
    """텍스트를 소문자화한 뒤 단어 문자 클래스와 일치하는 구간을 순서대로 추출합니다.

    Example:
        >>> produce_tokens("Die See, 20.000 Meilen!")
        ['die', 'see', 'meilen']
    """
    return pattern.findall(text.lower())
