from dataclasses import dataclass
from typing import Optional

from commrate.commit import Commit
from .grade import Grade


@dataclass(frozen=True)
class Score:
    """커밋 점수

    머지 커밋은 점수 없이 ignored 상태가 됩니다.
    """
    score: Optional[int] = None
    grade: Optional[Grade] = None

    def __post_init__(self):
        """점수 범위 검증"""
        if (self.score is None) != (self.grade is None):
            raise ValueError("score and grade must be both set or both empty")
        if self.score is not None and not 0 <= self.score <= 100:
            raise ValueError(f"score out of range: {self.score}")

    @classmethod
    def ignored(cls) -> 'Score':
        return cls()

    @classmethod
    def scored(cls, score: int, grade: Grade) -> 'Score':
        return cls(score=score, grade=grade)

    @property
    def is_ignored(self) -> bool:
        return self.grade is None

    def to_text(self, use_score: bool = False) -> str:
        """출력용 텍스트 ("-", 점수 또는 등급)"""
        if self.is_ignored:
            return "-"
        if use_score:
            return str(self.score)
        return self.grade.name


@dataclass(frozen=True)
class ScoredCommit:
    """점수가 계산된 커밋"""
    commit: Commit
    score: Score
