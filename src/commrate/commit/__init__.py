"""커밋 파싱 및 분류 패키지

메시지 파싱, diff 통계, 특수 커밋 분류 기능을 제공합니다.
"""

from .metadata import CommitMetadata
from .diff_info import DiffInfo
from .message_info import MessageInfo, parse_message, TRAILER_KEYS
from .commit_class import (
    CommitClass,
    Classes,
    classify,
    format_classes,
    SHORT_COMMIT_LENGTH,
    REFACTOR_ALLOWED_DIFF,
)
from .commit import Commit, build_commit

__all__ = [
    'CommitMetadata',
    'DiffInfo',
    'MessageInfo',
    'parse_message',
    'TRAILER_KEYS',
    'CommitClass',
    'Classes',
    'classify',
    'format_classes',
    'SHORT_COMMIT_LENGTH',
    'REFACTOR_ALLOWED_DIFF',
    'Commit',
    'build_commit',
]
