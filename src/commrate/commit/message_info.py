"""커밋 메시지 파싱 모듈

원본 커밋 메시지를 점수 계산에 필요한 지표(MessageInfo)로 변환합니다.
"""

from dataclasses import dataclass
from typing import Optional, FrozenSet

# 본문 한 줄의 권장 최대 길이
MAX_LINE_LENGTH = 80

# 트레일러(메타데이터) 라인으로 인정하는 키 (소문자)
TRAILER_KEYS: FrozenSet[str] = frozenset({
    'acked-by',
    'analyzed-by',
    'approved-by',
    'assisted-by',
    'based-on',
    'bisected-by',
    'caught-by',
    'cc',
    'checked-by',
    'co-developed-by',
    'fixed-by',
    'fixes',
    'found-by',
    'investigated-by',
    'link',
    'rebased-by',
    'reported-by',
    'reviewed-by',
    'sent-by',
    'signed-off-by',
    'sponsored-by',
    'submitted-by',
    'suggested-by',
    'tested-by',
    'triaged-by',
    'written-by',
})


@dataclass(frozen=True)
class MessageInfo:
    """커밋 메시지에서 추출한 점수 계산용 지표"""
    subject: Optional[str] = None
    break_after_subject: bool = False
    body_len: int = 0
    body_lines: int = 0
    body_unwrapped_lines: int = 0
    metadata_lines: int = 0

    @property
    def has_body(self) -> bool:
        """본문 존재 여부"""
        return self.body_len > 0


def is_trailer_line(line: str) -> bool:
    """`Key: value` 형태의 알려진 트레일러 라인인지 확인"""
    key = line.partition(':')[0].strip().lower()
    return key in TRAILER_KEYS


def parse_message(raw_message: str) -> MessageInfo:
    """원본 커밋 메시지 파싱

    Git은 커밋 시 앞뒤 빈 줄을 제거하므로 첫 줄은 항상 제목입니다.
    여기서는 다시 strip 하지 않습니다.

    Args:
        raw_message: 원본 커밋 메시지

    Returns:
        MessageInfo: 파싱된 메시지 지표
    """
    # 줄 구분은 LF(와 CRLF)만 사용. 본문의 \x0c, \x1c 등은 같은 줄로 취급
    lines = [line[:-1] if line.endswith('\r') else line for line in raw_message.split('\n')]
    if lines[-1] == '':
        lines.pop()
    if not lines:
        return MessageInfo()

    subject = lines[0]
    break_after_subject = len(lines) > 1 and lines[1] == ''
    body_len = 0
    body_lines = 0
    body_unwrapped_lines = 0
    metadata_lines = 0

    for line in lines[1:]:
        if is_trailer_line(line):
            metadata_lines += 1
            continue

        # 문단 구분용 빈 줄은 본문 지표에 포함하지 않음
        if not line:
            continue

        body_len += len(line)
        body_lines += 1
        if len(line) > MAX_LINE_LENGTH:
            body_unwrapped_lines += 1

    return MessageInfo(
        subject=subject,
        break_after_subject=break_after_subject,
        body_len=body_len,
        body_lines=body_lines,
        body_unwrapped_lines=body_unwrapped_lines,
        metadata_lines=metadata_lines,
    )
