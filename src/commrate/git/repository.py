"""Git 저장소 순회 모듈

git 명령어를 subprocess로 실행하여 커밋 메타데이터, 메시지,
diff 통계를 수집합니다. 저장소 접근 실패는 치명적 오류(GitError)이며
재시도하지 않습니다.
"""

import logging
import subprocess
from contextlib import closing
from typing import Iterator, List, Optional, Tuple

from commrate.commit import (
    Commit,
    CommitMetadata,
    DiffInfo,
    build_commit,
    parse_message,
)

logger = logging.getLogger(__name__)

FIELD_SEP = '\x00'
RECORD_SEP = '\x1e'

# %H: 커밋 해시, %an: 작성자 이름, %P: 부모 해시 목록, %B: 원본 메시지
# 명령행 인자에는 NUL 문자를 넣을 수 없으므로 git의 %x00, %x1e 표기 사용
LOG_FORMAT = '%H%x00%an%x00%P%x00%B%x1e'

DEFAULT_TIMEOUT = 60

# git log 출력을 읽는 단위 (문자 수)
LOG_READ_SIZE = 64 * 1024


class GitError(RuntimeError):
    """Git 명령어 실행 실패"""


def run_git(args: List[str], cwd: str, timeout: int = DEFAULT_TIMEOUT) -> str:
    """git 명령어 실행 후 stdout 반환

    Raises:
        GitError: git 실행 불가, 타임아웃, 0이 아닌 종료 코드
    """
    command = ['git', *args]
    logger.debug(f"Git 명령어 실행: {' '.join(command)} (cwd={cwd})")

    try:
        result = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='replace',
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise GitError(f"git executable not found: {e}") from e
    except subprocess.TimeoutExpired as e:
        raise GitError(f"git command timed out after {timeout} seconds: {' '.join(command)}") from e

    if result.returncode != 0:
        stderr = (result.stderr or '').strip()
        raise GitError(stderr or f"git command failed with exit code {result.returncode}")

    return result.stdout or ''


def stream_git(args: List[str], cwd: str) -> Iterator[str]:
    """git 명령어를 실행하고 stdout을 조각 단위로 생성

    전체 실행 시간 제한은 두지 않습니다. 생성기를 닫으면 프로세스를 종료합니다.

    Raises:
        GitError: git 실행 불가, 0이 아닌 종료 코드
    """
    command = ['git', *args]
    logger.debug(f"Git 명령어 스트리밍: {' '.join(command)} (cwd={cwd})")

    try:
        process = subprocess.Popen(
            command,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding='utf-8',
            errors='replace',
        )
    except FileNotFoundError as e:
        raise GitError(f"git executable not found: {e}") from e

    try:
        while True:
            chunk = process.stdout.read(LOG_READ_SIZE)
            if not chunk:
                break
            yield chunk

        stderr = process.stderr.read()
        returncode = process.wait()
        if returncode != 0:
            raise GitError(stderr.strip() or f"git command failed with exit code {returncode}")
    finally:
        if process.poll() is None:
            process.kill()
        process.wait()
        process.stdout.close()
        process.stderr.close()


def parse_numstat(output: str) -> Tuple[int, int]:
    """`git show --numstat` 출력에서 추가/삭제 라인 수 합산

    바이너리 파일("-\t-\tpath")은 0으로 계산합니다.
    """
    insertions = 0
    deletions = 0

    for line in output.splitlines():
        parts = line.split('\t')
        if len(parts) < 3:
            continue
        added, deleted = parts[0], parts[1]
        if added.isdigit():
            insertions += int(added)
        if deleted.isdigit():
            deletions += int(deleted)

    return insertions, deletions


class GitCommitItem:
    """순회 중인 단일 커밋

    메타데이터는 바로 사용할 수 있고, diff 통계는 필요할 때만 계산합니다.
    """

    def __init__(self, repo: 'GitRepository', metadata: CommitMetadata, raw_message: str):
        self.repo = repo
        self.metadata = metadata
        self.raw_message = raw_message

    def diff_stats(self) -> Optional[Tuple[int, int]]:
        """(추가, 삭제) 라인 수. 머지 커밋은 None"""
        if self.metadata.is_merge:
            return None

        # --root: log.showRoot 설정과 무관하게 최초 커밋은 빈 트리와 비교
        output = self.repo.git(
            'show', '--root', '--numstat', '--format=', '--no-renames', self.metadata.id
        )
        return parse_numstat(output)

    def parse(self) -> Commit:
        """메시지 파싱, diff 통계 수집, 분류"""
        msg_info = parse_message(self.raw_message)
        stats = self.diff_stats()
        diff_info = DiffInfo(*stats) if stats is not None else None
        return build_commit(self.metadata, diff_info, msg_info)


class GitRepository:
    """Git 저장소"""

    def __init__(self, path: str = '.'):
        self.path = path
        # 작업 트리가 아니면 GitError
        self.git('rev-parse', '--git-dir')

    def git(self, *args: str) -> str:
        return run_git(list(args), cwd=self.path)

    def traverse(self, start_commit: str = 'HEAD') -> Iterator[GitCommitItem]:
        """start_commit부터 커밋을 순회 (git log 순서)

        Args:
            start_commit: 시작 커밋 ID 또는 참조

        Yields:
            GitCommitItem: 순회 중인 커밋
        """
        args = ['log', f'--format={LOG_FORMAT}', start_commit, '--']
        buffer = ''
        with closing(stream_git(args, cwd=self.path)) as chunks:
            for chunk in chunks:
                buffer += chunk
                *records, buffer = buffer.split(RECORD_SEP)
                for record in records:
                    item = self._parse_record(record)
                    if item is not None:
                        yield item

        item = self._parse_record(buffer)
        if item is not None:
            yield item

    def _parse_record(self, record: str) -> Optional[GitCommitItem]:
        record = record.lstrip('\n')
        if not record:
            return None

        fields = record.split(FIELD_SEP, 3)
        if len(fields) != 4:
            raise GitError(f"unexpected git log record: {record[:80]!r}")

        commit_id, author, parents, message = fields
        metadata = CommitMetadata(
            id=commit_id,
            author=author,
            parent_count=len(parents.split()),
        )
        return GitCommitItem(self, metadata, message.rstrip('\n'))
