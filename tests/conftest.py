"""commrate 단위 테스트를 위한 pytest 설정"""

import tempfile
from pathlib import Path
from typing import Callable, Generator, List, Optional
import pytest

from commrate.commit import CommitMetadata, DiffInfo, Commit, build_commit, parse_message


def pytest_configure(config):
    """pytest 설정을 구성합니다. 단위/통합 테스트용 마커들을 등록합니다."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """테스트용 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def make_message(subject: str, body: Optional[List[str]] = None,
                 trailers: Optional[List[str]] = None, blank_line: bool = True) -> str:
    """제목, 본문, 트레일러로 원본 커밋 메시지 생성"""
    lines = [subject]
    if body:
        if blank_line:
            lines.append("")
        lines.extend(body)
    if trailers:
        lines.append("")
        lines.extend(trailers)
    return "\n".join(lines)


@pytest.fixture
def make_commit() -> Callable[..., Commit]:
    """테스트용 커밋 생성 팩토리"""
    def _make_commit(subject: str = "Add retry logic to the HTTP client",
                     body: Optional[List[str]] = None,
                     trailers: Optional[List[str]] = None,
                     insertions: int = 60,
                     deletions: int = 40,
                     parents: int = 1,
                     author: str = "Jane Doe",
                     commit_id: str = "0123456789abcdef0123456789abcdef01234567",
                     blank_line: bool = True) -> Commit:
        metadata = CommitMetadata(id=commit_id, author=author, parent_count=parents)
        msg_info = parse_message(make_message(subject, body, trailers, blank_line))
        diff_info = None if parents >= 2 else DiffInfo(insertions, deletions)
        return build_commit(metadata, diff_info, msg_info)

    return _make_commit
