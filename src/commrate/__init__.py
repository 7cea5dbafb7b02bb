"""commrate - 커밋 품질 평가 도구

커밋 메타데이터, diff 통계, 메시지를 검사하여 커밋마다
등급(A-F) 또는 0-100 점수를 부여합니다.
"""

__version__ = "0.1.0"
