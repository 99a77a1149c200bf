"""ngram-cooc 패키지.

원시 텍스트를 토큰화하여 n-gram 목록과 공기(co-occurrence) 빈도 테이블을 계산하고,
중심어별 상위 K개 공기어를 추출한다.
"""
