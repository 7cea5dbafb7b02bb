"""특수 커밋 분류 모듈

diff 길이나 메시지 길이가 같더라도 특별한 의미를 갖는 커밋은
점수 계산 시 다르게 취급해야 합니다. 각 분류는 일부 규칙의
본문 관련 감점을 완화하는 데 사용됩니다.
"""

import math
import re
from enum import Flag
from typing import Optional

from .diff_info import DiffInfo
from .message_info import MessageInfo
from .metadata import CommitMetadata

# Short 커밋으로 분류되는 최대 diff 크기 (미만)
SHORT_COMMIT_LENGTH = 25

# 리팩토링 커밋에서 허용하는 추가/삭제 라인 수 차이 (전체 diff 대비 비율)
# import 수정 등 이동에 따른 부수 변경을 허용하기 위함
REFACTOR_ALLOWED_DIFF = 0.05

REFACTOR_SUBJECT_PATTERN = re.compile(r'\b(moved?|renamed?)\b', re.IGNORECASE)


class CommitClass(Flag):
    """특수 커밋 분류 (비트 집합)

    - MERGE: 머지 커밋. 분류/점수 계산을 건너뜀
    - INITIAL: 최초 커밋. 보통 "Initial commit" 제목뿐이지만 diff는 큼
    - SHORT: 버전 업, 오타 수정 등 설명이 필요 없는 작은 변경
    - REFACTOR: 파일/코드 이동 및 이름 변경. 길어도 제목 한 줄로 충분
    """
    MERGE = 1
    INITIAL = 2
    SHORT = 4
    REFACTOR = 8

    @property
    def code(self) -> str:
        """출력용 한 글자 코드"""
        return _CLASS_CODES[self]


Classes = CommitClass

NO_CLASSES = CommitClass(0)

_CLASS_CODES = {
    CommitClass.MERGE: 'M',
    CommitClass.INITIAL: 'I',
    CommitClass.SHORT: 'S',
    CommitClass.REFACTOR: 'R',
}


def format_classes(classes: Classes) -> str:
    """분류 집합을 선언 순서의 코드 문자열로 변환 (예: "IS")"""
    return ''.join(
        member.code for member in _CLASS_CODES if member in classes
    )


def is_refactor(diff_info: DiffInfo, subject: Optional[str]) -> bool:
    """이동/이름 변경 커밋 여부 (best-effort)

    다른 변경이 섞인 이름 변경은 놓칠 수 있으며(false negative),
    이런 변경은 원래 별도 커밋으로 분리되어야 하므로 허용합니다.
    """
    allowed = math.floor(diff_info.total * REFACTOR_ALLOWED_DIFF)
    actual = abs(diff_info.deletions - diff_info.insertions)
    if actual > allowed:
        return False
    return subject is not None and REFACTOR_SUBJECT_PATTERN.search(subject) is not None


def classify(metadata: CommitMetadata, diff_info: DiffInfo,
             msg_info: MessageInfo) -> Classes:
    """커밋 분류 (순수 함수)

    MERGE는 여기서 부여하지 않습니다. 머지 커밋은 호출 측에서
    diff 계산 없이 바로 MERGE로 분류합니다.

    Args:
        metadata: 커밋 메타데이터
        diff_info: diff 통계
        msg_info: 파싱된 메시지 지표

    Returns:
        Classes: 분류 집합
    """
    classes = NO_CLASSES

    if metadata.parent_count == 0:
        classes |= CommitClass.INITIAL

    if diff_info.total < SHORT_COMMIT_LENGTH:
        classes |= CommitClass.SHORT

    if is_refactor(diff_info, msg_info.subject):
        classes |= CommitClass.REFACTOR

    return classes
