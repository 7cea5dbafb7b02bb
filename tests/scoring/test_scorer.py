"""Scorer 테스트"""

import pytest

from commrate.commit import Commit
from commrate.scoring import (
    DEFAULT_RULE_WEIGHTS,
    Grade,
    Rule,
    Score,
    ScorerBuilder,
    default_scorer,
    grade_for_score,
)


class FixedRule(Rule):
    """항상 같은 값을 반환하는 규칙"""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def score(self, commit: Commit) -> float:
        self.calls += 1
        return self.value


GOOD_BODY = [
    "The client gave up after the first connection error, which made",
    "deploys flaky whenever the upstream service restarted. Retry up to",
    "three times with exponential backoff before surfacing the error.",
]

GOOD_TRAILERS = [
    "Signed-off-by: Jane Doe <jane@example.com>",
    "Reviewed-by: John Roe <john@example.com>",
    "Tested-by: Max Moe <max@example.com>",
]


@pytest.mark.unit
class TestScorer:
    """Scorer 테스트"""

    def test_merge_commit_is_ignored(self, make_commit):
        """머지 커밋은 규칙 평가 없이 ignored"""
        rule = FixedRule(1.0)
        scorer = ScorerBuilder().with_rule(rule, 1.0).build()

        scored = scorer.score(make_commit(subject="Merge branch 'feature'", parents=2))

        assert scored.score == Score.ignored()
        assert scored.score.is_ignored
        assert rule.calls == 0

    def test_merge_commit_ignored_regardless_of_content(self, make_commit):
        commit = make_commit(body=GOOD_BODY, trailers=GOOD_TRAILERS, parents=3)
        assert default_scorer().score(commit).score.is_ignored

    def test_score_is_clamped(self, make_commit):
        """가중치 합이 1.05라도 100점을 넘지 않음"""
        scored = default_scorer().score(
            make_commit(body=GOOD_BODY, trailers=GOOD_TRAILERS, insertions=60, deletions=40)
        )

        assert scored.score.score == 100
        assert scored.score.grade is Grade.A

    def test_score_is_clamped_with_custom_weight(self, make_commit):
        scorer = ScorerBuilder().with_rule(FixedRule(1.0), 1.5).build()
        assert scorer.score(make_commit()).score.score == 100

    def test_worst_commit(self, make_commit):
        """한 단어 제목, 본문 없는 큰 커밋은 0점"""
        scored = default_scorer().score(make_commit(subject="fix", insertions=300, deletions=20))

        assert scored.score.score == 0
        assert scored.score.grade is Grade.F

    def test_short_commit_without_body(self, make_commit):
        """짧은 커밋은 본문이 없어도 높은 점수"""
        scored = default_scorer().score(
            make_commit(subject="Fix typo in the README file", insertions=1, deletions=1)
        )

        assert scored.score.score == 100
        assert scored.score.grade is Grade.A

    def test_regular_commit_without_body(self, make_commit):
        """일반 커밋은 제목 점수만 받음: 100 * 1.0 * 0.3"""
        scored = default_scorer().score(make_commit())

        assert scored.score.score == 30
        assert scored.score.grade is Grade.D

    def test_half_rounds_up(self, make_commit):
        """12.5점은 13점으로 반올림"""
        scorer = ScorerBuilder().with_rule(FixedRule(0.125), 1.0).build()
        assert scorer.score(make_commit()).score.score == 13

    def test_weighted_sum(self, make_commit):
        scorer = (
            ScorerBuilder()
            .with_rule(FixedRule(1.0), 0.5)
            .with_rule(FixedRule(0.5), 0.5)
            .build()
        )
        scored = scorer.score(make_commit())

        assert scored.score.score == 75
        assert scored.score.grade is Grade.B

    def test_scored_commit_keeps_commit(self, make_commit):
        commit = make_commit()
        assert default_scorer().score(commit).commit is commit

    def test_default_weights(self):
        weights = [weight for _, weight in DEFAULT_RULE_WEIGHTS]
        assert weights == [0.30, 0.10, 0.10, 0.25, 0.25, 0.05]
        assert sum(weights) == pytest.approx(1.05)


@pytest.mark.unit
class TestGradeForScore:
    """점수 → 등급 변환 테스트"""

    @pytest.mark.parametrize("score,grade", [
        (0, Grade.F),
        (19, Grade.F),
        (20, Grade.D),
        (39, Grade.D),
        (40, Grade.C),
        (59, Grade.C),
        (60, Grade.B),
        (79, Grade.B),
        (80, Grade.A),
        (100, Grade.A),
    ])
    def test_breakpoints(self, score, grade):
        assert grade_for_score(score) is grade


@pytest.mark.unit
class TestScore:
    """Score 테스트"""

    def test_to_text(self):
        score = Score.scored(73, Grade.B)

        assert score.to_text() == "B"
        assert score.to_text(use_score=True) == "73"
        assert Score.ignored().to_text() == "-"
        assert Score.ignored().to_text(use_score=True) == "-"

    def test_invalid_score(self):
        with pytest.raises(ValueError):
            Score.scored(101, Grade.A)
        with pytest.raises(ValueError):
            Score(score=50)
