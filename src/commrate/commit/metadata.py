from dataclasses import dataclass


@dataclass(frozen=True)
class CommitMetadata:
    """메시지 파싱이나 diff 계산 없이 얻을 수 있는 커밋 메타데이터"""
    id: str
    author: str
    parent_count: int

    @property
    def short_id(self) -> str:
        """7자리 축약 커밋 ID"""
        return self.id[:7]

    @property
    def is_merge(self) -> bool:
        """부모가 2개 이상이면 머지 커밋"""
        return self.parent_count >= 2
