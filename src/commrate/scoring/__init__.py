"""커밋 점수 계산 패키지

등급 타입, 점수 규칙 라이브러리, 가중치 기반 점수 계산기를 제공합니다.
"""

from .grade import (
    Grade,
    Relation,
    GradeSpec,
    GradeSpecError,
    InvalidGradeError,
    MissingGradeError,
    InvalidRelationError,
    TrailingInputError,
)
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
from .scorer import Scorer, ScorerBuilder, default_scorer, grade_for_score, DEFAULT_RULE_WEIGHTS

__all__ = [
    'Grade',
    'Relation',
    'GradeSpec',
    'GradeSpecError',
    'InvalidGradeError',
    'MissingGradeError',
    'InvalidRelationError',
    'TrailingInputError',
    'Rule',
    'SubjectRule',
    'BodyPresenceRule',
    'SubjectBodyBreakRule',
    'BodyLenRule',
    'BodyWrappingRule',
    'MetadataLinesRule',
    'Score',
    'ScoredCommit',
    'Scorer',
    'ScorerBuilder',
    'default_scorer',
    'grade_for_score',
    'DEFAULT_RULE_WEIGHTS',
]
