"""Git 저장소 접근 패키지"""

from .repository import GitRepository, GitCommitItem, GitError

__all__ = [
    'GitRepository',
    'GitCommitItem',
    'GitError',
]
