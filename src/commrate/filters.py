"""커밋 필터 체인

- 사전 필터: 메시지 파싱/diff 계산 전에 CommitMetadata만으로 커밋 제외
- 사후 필터: 점수 계산 후 ScoredCommit 기준으로 커밋 제외
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from commrate.commit import CommitMetadata
from commrate.scoring import GradeSpec, ScoredCommit

T = TypeVar('T')


class CommitFilter(ABC, Generic[T]):
    """단일 커밋 필터"""

    @abstractmethod
    def accept(self, item: T) -> bool:
        """통과 여부 반환"""
        pass


class FilterChain(Generic[T]):
    """순서가 있는 필터 목록 (모든 필터를 통과해야 허용)"""

    def __init__(self, filters: Optional[List[CommitFilter[T]]] = None):
        self.filters: List[CommitFilter[T]] = list(filters or [])

    def accept(self, item: T) -> bool:
        # all()은 첫 거부에서 멈춤
        return all(f.accept(item) for f in self.filters)

    def __len__(self) -> int:
        return len(self.filters)


class AuthorFilter(CommitFilter[CommitMetadata]):
    """특정 작성자의 커밋만 허용"""

    def __init__(self, author: str):
        self.author = author

    def accept(self, item: CommitMetadata) -> bool:
        return item.author == self.author


class MergeFilter(CommitFilter[CommitMetadata]):
    """머지 커밋 제외"""

    def accept(self, item: CommitMetadata) -> bool:
        return item.parent_count <= 1


class GradeFilter(CommitFilter[ScoredCommit]):
    """등급 스펙을 만족하는 커밋만 허용 (점수 없는 커밋은 항상 통과)"""

    def __init__(self, spec: GradeSpec):
        self.spec = spec

    def accept(self, item: ScoredCommit) -> bool:
        if item.score.is_ignored:
            return True
        return self.spec.matches(item.score.grade)


def build_pre_filters(author: Optional[str] = None,
                      include_merges: bool = False) -> FilterChain[CommitMetadata]:
    """사전 필터 체인 생성"""
    filters: List[CommitFilter[CommitMetadata]] = []
    if author is not None:
        filters.append(AuthorFilter(author))
    if not include_merges:
        filters.append(MergeFilter())
    return FilterChain(filters)


def build_post_filters(grade_spec: Optional[GradeSpec] = None) -> FilterChain[ScoredCommit]:
    """사후 필터 체인 생성"""
    filters: List[CommitFilter[ScoredCommit]] = []
    if grade_spec is not None:
        filters.append(GradeFilter(grade_spec))
    return FilterChain(filters)
