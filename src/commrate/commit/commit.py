from dataclasses import dataclass
from typing import Optional

from .commit_class import Classes, CommitClass, classify
from .diff_info import DiffInfo
from .message_info import MessageInfo
from .metadata import CommitMetadata

# 특수 커밋: 본문 관련 규칙에서 완화된 기준을 적용
SPECIAL_CLASSES = CommitClass.SHORT | CommitClass.REFACTOR | CommitClass.INITIAL


@dataclass(frozen=True)
class Commit:
    """점수 계산에 필요한 모든 데이터를 가진 파싱/분류된 커밋"""
    metadata: CommitMetadata
    diff_info: Optional[DiffInfo]
    msg_info: MessageInfo
    classes: Classes

    @property
    def is_merge(self) -> bool:
        return CommitClass.MERGE in self.classes

    @property
    def is_special(self) -> bool:
        """Short, Refactor, Initial 중 하나라도 해당하는지 여부"""
        return bool(self.classes & SPECIAL_CLASSES)


def build_commit(metadata: CommitMetadata, diff_info: Optional[DiffInfo],
                 msg_info: MessageInfo) -> Commit:
    """파싱 결과와 분류 결과를 결합하여 Commit 생성

    diff_info가 없으면 머지 커밋으로 취급하여 분류를 건너뜁니다.
    """
    if diff_info is None:
        return Commit(
            metadata=metadata,
            diff_info=None,
            msg_info=msg_info,
            classes=CommitClass.MERGE,
        )

    return Commit(
        metadata=metadata,
        diff_info=diff_info,
        msg_info=msg_info,
        classes=classify(metadata, diff_info, msg_info),
    )
