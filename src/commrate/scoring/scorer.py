"""가중치 기반 점수 계산기"""

import logging
import math
from dataclasses import dataclass
from typing import List, Tuple

from commrate.commit import Commit
from .grade import Grade
from .rules import (
    Rule,
    SubjectRule,
    BodyPresenceRule,
    SubjectBodyBreakRule,
    BodyLenRule,
    BodyWrappingRule,
    MetadataLinesRule,
)
from .score import Score, ScoredCommit

logger = logging.getLogger(__name__)

MAX_SCORE = 100

# 가중치 합계는 1.05이며, 100점 초과분은 잘라냄
DEFAULT_RULE_WEIGHTS: List[Tuple[Rule, float]] = [
    (SubjectRule(), 0.30),
    (BodyPresenceRule(), 0.10),
    (SubjectBodyBreakRule(), 0.10),
    (BodyLenRule(), 0.25),
    (BodyWrappingRule(), 0.25),
    (MetadataLinesRule(), 0.05),
]

# (최소 점수, 등급) - 내림차순
GRADE_BREAKPOINTS: List[Tuple[int, Grade]] = [
    (80, Grade.A),
    (60, Grade.B),
    (40, Grade.C),
    (20, Grade.D),
    (0, Grade.F),
]


def grade_for_score(score: int) -> Grade:
    """0-100 점수를 등급으로 변환"""
    for min_score, grade in GRADE_BREAKPOINTS:
        if score >= min_score:
            return grade
    return Grade.F


@dataclass(frozen=True)
class WeightedRule:
    rule: Rule
    weight: float


class Scorer:
    """규칙 점수에 가중치를 적용하여 커밋 점수와 등급 계산"""

    def __init__(self, rules: List[WeightedRule]):
        self.rules = list(rules)

    def score(self, commit: Commit) -> ScoredCommit:
        """커밋 점수 계산

        Args:
            commit: 분류된 커밋

        Returns:
            ScoredCommit: 커밋과 점수
        """
        return ScoredCommit(commit=commit, score=self._score(commit))

    def _score(self, commit: Commit) -> Score:
        if commit.is_merge:
            return Score.ignored()

        total = 0.0
        for item in self.rules:
            rule_score = item.rule.score(commit)
            logger.debug(
                f"{commit.metadata.short_id} {item.rule.name}: {rule_score:.3f} (x{item.weight})"
            )
            total += MAX_SCORE * rule_score * item.weight

        # 반올림은 0.5 올림
        score = min(MAX_SCORE, math.floor(total + 0.5))
        return Score.scored(score, grade_for_score(score))


class ScorerBuilder:
    """Scorer 생성기

    예:
        ScorerBuilder().with_rule(SubjectRule(), 0.3).build()
    """

    def __init__(self):
        self._rules: List[WeightedRule] = []

    def with_rule(self, rule: Rule, weight: float) -> 'ScorerBuilder':
        self._rules.append(WeightedRule(rule=rule, weight=weight))
        return self

    def build(self) -> Scorer:
        return Scorer(self._rules)


def default_scorer() -> Scorer:
    """기본 규칙과 가중치를 사용하는 Scorer 생성"""
    builder = ScorerBuilder()
    for rule, weight in DEFAULT_RULE_WEIGHTS:
        builder.with_rule(rule, weight)
    return builder.build()
