"""등급 및 등급 필터 스펙 모듈"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class Grade(IntEnum):
    """커밋 등급 (F < D < C < B < A)"""
    F = 0
    D = 1
    C = 2
    B = 3
    A = 4

    def __str__(self) -> str:
        return self.name


class Relation(Enum):
    """등급 비교 관계"""
    EQ = ""
    LE = "-"
    GE = "+"


class GradeSpecError(ValueError):
    """등급 스펙 파싱 오류"""


class MissingGradeError(GradeSpecError):
    def __init__(self):
        super().__init__("grade must be specified")


class InvalidGradeError(GradeSpecError):
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"invalid grade {char!r}: grade must be one of: A, B, C, D, F")


class InvalidRelationError(GradeSpecError):
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"invalid grade relation {char!r}: must be one of: +, -, <empty>")


class TrailingInputError(GradeSpecError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"grade specification {text!r} should not contain extra characters"
        )


_RELATIONS = {relation.value: relation for relation in Relation if relation.value}


@dataclass(frozen=True)
class GradeSpec:
    """등급 필터 스펙 (예: "C", "C+", "c-")

    - "C": C 등급만
    - "C+": C 이상
    - "C-": C 이하
    """
    grade: Grade
    relation: Relation = Relation.EQ

    @classmethod
    def parse(cls, text: str) -> 'GradeSpec':
        """텍스트에서 GradeSpec 파싱

        Raises:
            MissingGradeError: 빈 문자열
            InvalidGradeError: 첫 문자가 A/B/C/D/F가 아님
            InvalidRelationError: 두 번째 문자가 +/-가 아님
            TrailingInputError: 세 번째 문자 이후 입력이 존재
        """
        if not text:
            raise MissingGradeError()

        grade_char = text[0].upper()
        if grade_char not in Grade.__members__:
            raise InvalidGradeError(text[0])
        grade = Grade[grade_char]

        relation = Relation.EQ
        if len(text) > 1:
            relation_char = text[1]
            if relation_char not in _RELATIONS:
                raise InvalidRelationError(relation_char)
            relation = _RELATIONS[relation_char]

        if len(text) > 2:
            raise TrailingInputError(text)

        return cls(grade=grade, relation=relation)

    def matches(self, grade: Grade) -> bool:
        """등급이 스펙을 만족하는지 확인"""
        if self.relation is Relation.GE:
            return grade >= self.grade
        if self.relation is Relation.LE:
            return grade <= self.grade
        return grade == self.grade

    def __str__(self) -> str:
        return f"{self.grade.name}{self.relation.value}"
