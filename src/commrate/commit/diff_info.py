from dataclasses import dataclass


@dataclass(frozen=True)
class DiffInfo:
    """커밋 diff 통계"""
    insertions: int
    deletions: int

    def __post_init__(self):
        """음수 통계 검증"""
        if self.insertions < 0 or self.deletions < 0:
            raise ValueError(
                f"diff counts must be non-negative: +{self.insertions} -{self.deletions}"
            )

    @property
    def total(self) -> int:
        """총 변경 라인 수"""
        return self.insertions + self.deletions
