"""점수 규칙 라이브러리

각 규칙은 커밋 품질의 한 측면만 검사하여 0.0 ~ 1.0 사이 값을 반환합니다.
규칙은 전체 점수에서의 가중치나 실제 점수 척도를 알지 못하며,
이는 Scorer에서 처리합니다.
"""

import math
from abc import ABC, abstractmethod

from commrate.commit import Commit, CommitClass


class Rule(ABC):
    """점수 규칙 추상 기본 클래스"""

    @property
    def name(self) -> str:
        """규칙 이름"""
        return type(self).__name__

    @abstractmethod
    def score(self, commit: Commit) -> float:
        """커밋을 검사하여 0.0 ~ 1.0 점수 반환

        Args:
            commit: 분류된 커밋

        Returns:
            float: 규칙 점수 (0.0 ~ 1.0)
        """
        pass


class SubjectRule(Rule):
    """제목(메시지 첫 줄) 길이 검사

    제목은 본문보다 훨씬 자주 읽히므로 가장 중요합니다.
    스타일은 보지 않고 길이만 평가합니다.
    - 너무 짧은 제목("fix", "refactoring")은 감점
    - 너무 긴 제목은 `log --oneline` 등에서 불편하므로 감점
    """

    def score(self, commit: Commit) -> float:
        # 전형적인 "Initial commit"은 짧아도 허용
        if CommitClass.INITIAL in commit.classes:
            return 1.0

        subject = commit.msg_info.subject or ""

        # 티켓/이슈 ID만 제목으로 쓴 커밋 (예: "PROJ-1234")
        if len(subject.split()) <= 1:
            return 0.0

        length = len(subject)
        if length <= 10:
            return 0.0
        if length <= 20:
            return (length - 10) / 10
        if length <= 70:
            return 1.0
        if length <= 100:
            # 긴 제목도 정보는 담고 있으므로 완만하게 감소
            return (100 - length) / 100
        return 0.0


class BodyPresenceRule(Rule):
    """본문 존재 여부 검사 (특수 커밋은 본문이 없어도 감점하지 않음)"""

    def score(self, commit: Commit) -> float:
        if commit.msg_info.has_body or commit.is_special:
            return 1.0
        return 0.0


class SubjectBodyBreakRule(Rule):
    """제목과 본문 사이 빈 줄 검사

    본문이 없는 일반 커밋도 감점됩니다.
    """

    def score(self, commit: Commit) -> float:
        msg_info = commit.msg_info

        if msg_info.has_body:
            return 1.0 if msg_info.break_after_subject else 0.0
        return 1.0 if commit.is_special else 0.0


class BodyLenRule(Rule):
    """본문 길이와 diff 크기의 관계 평가

    diff가 클수록 더 긴 설명이 필요하지만 관계는 비선형입니다.
    최대 점수에 도달하려면 대략
    - 짧은 diff(25줄 남짓): 본문 한 줄
    - 중간 diff(~250줄): 본문 3-4줄
    - 큰 diff(500-1000줄): 여러 문단
    이 필요합니다.
    """

    def score(self, commit: Commit) -> float:
        if commit.is_special:
            return 1.0

        # 머지 커밋만 diff가 없으며, 이 규칙까지 오지 않아야 함
        if commit.diff_info is None:
            return 1.0

        diff_total = commit.diff_info.total
        # ln(1) == 0
        if diff_total <= 1:
            return 1.0

        # +1은 빈 본문의 ln 값을 0으로 맞추기 위함
        score = math.log(commit.msg_info.body_len + 1) / math.log(diff_total)
        return min(score, 1.0)


class BodyWrappingRule(Rule):
    """본문 줄바꿈 검사

    로그 복사본이나 ASCII 다이어그램은 줄바꿈 없이 들어올 수 있으므로
    줄바꿈되지 않은 줄의 비율만큼만 감점합니다.
    """

    def score(self, commit: Commit) -> float:
        msg_info = commit.msg_info

        if msg_info.body_lines == 0:
            return 1.0 if commit.is_special else 0.0

        return 1.0 - msg_info.body_unwrapped_lines / msg_info.body_lines


class MetadataLinesRule(Rule):
    """트레일러(Signed-off-by 등) 라인 보너스

    선택 사항이므로 낮은 가중치로 사용합니다.
    """

    SCORES = {0: 0.0, 1: 0.6, 2: 0.8}

    def score(self, commit: Commit) -> float:
        return self.SCORES.get(commit.msg_info.metadata_lines, 1.0)
