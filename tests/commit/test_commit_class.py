"""커밋 분류 테스트"""

import pytest

from commrate.commit import (
    CommitClass,
    CommitMetadata,
    DiffInfo,
    MessageInfo,
    SHORT_COMMIT_LENGTH,
    build_commit,
    classify,
    format_classes,
)


def _metadata(parents: int = 1) -> CommitMetadata:
    return CommitMetadata(id="abc1234def", author="Jane Doe", parent_count=parents)


def _msg(subject: str = "Add retry logic to the HTTP client") -> MessageInfo:
    return MessageInfo(subject=subject)


@pytest.mark.unit
class TestClassify:
    """classify 테스트"""

    @pytest.mark.parametrize("insertions,deletions", [(0, 0), (500, 300), (3000, 10)])
    def test_initial_for_root_commit(self, insertions, deletions):
        """부모가 없으면 diff 크기와 무관하게 INITIAL"""
        classes = classify(_metadata(0), DiffInfo(insertions, deletions), _msg())
        assert CommitClass.INITIAL in classes

    @pytest.mark.parametrize("parents", [1, 2, 3])
    def test_never_initial_with_parents(self, parents):
        """부모가 있으면 INITIAL 아님"""
        classes = classify(_metadata(parents), DiffInfo(1, 1), _msg())
        assert CommitClass.INITIAL not in classes

    @pytest.mark.parametrize("total,expected", [
        (0, True),
        (1, True),
        (SHORT_COMMIT_LENGTH - 1, True),
        (SHORT_COMMIT_LENGTH, False),
        (1000, False),
    ])
    def test_short_boundary(self, total, expected):
        """diff 25줄 미만이면 SHORT"""
        classes = classify(_metadata(), DiffInfo(total, 0), _msg())
        assert (CommitClass.SHORT in classes) is expected

    def test_refactor_within_allowed_diff(self):
        """추가/삭제 차이 2 <= 허용치 5 (102의 5%)"""
        classes = classify(_metadata(), DiffInfo(50, 52), _msg("Move Snowden to Russia"))
        assert CommitClass.REFACTOR in classes

    def test_refactor_exceeds_allowed_diff(self):
        """추가/삭제 차이 490은 510의 5% 초과"""
        classes = classify(_metadata(), DiffInfo(10, 500), _msg("Rename C# to Java"))
        assert CommitClass.REFACTOR not in classes

    @pytest.mark.parametrize("subject", [
        "I moved X",
        "RENAMED Y",
        "rename Z",
        "Move utils into the core package",
        "Files were renamed",
    ])
    def test_refactor_subject_matches(self, subject):
        """단어 경계 기준으로 move/rename 매칭 (대소문자, 위치 무관)"""
        classes = classify(_metadata(), DiffInfo(100, 100), _msg(subject))
        assert CommitClass.REFACTOR in classes

    @pytest.mark.parametrize("subject", [
        "movement of the data",
        "Removed dead code",
        "Renaming is hard",
        "Add retry logic to the HTTP client",
    ])
    def test_refactor_subject_does_not_match(self, subject):
        """단어 경계가 없으면 매칭하지 않음"""
        classes = classify(_metadata(), DiffInfo(100, 100), _msg(subject))
        assert CommitClass.REFACTOR not in classes

    def test_refactor_without_subject(self):
        """제목이 없으면 REFACTOR 아님"""
        classes = classify(_metadata(), DiffInfo(100, 100), MessageInfo())
        assert CommitClass.REFACTOR not in classes

    def test_allowed_diff_is_floored(self):
        """허용치는 내림 처리: 총 39줄이면 허용치 1"""
        assert CommitClass.REFACTOR in classify(_metadata(), DiffInfo(19, 20), _msg("rename foo"))
        assert CommitClass.REFACTOR not in classify(_metadata(), DiffInfo(18, 21), _msg("rename foo"))

    def test_classify_never_produces_merge(self):
        """classify는 MERGE를 부여하지 않음"""
        classes = classify(_metadata(5), DiffInfo(1, 1), _msg("Merge branch 'x'"))
        assert CommitClass.MERGE not in classes

    def test_multiple_classes(self):
        """여러 분류 동시 부여"""
        classes = classify(_metadata(0), DiffInfo(5, 5), _msg("Rename module"))
        assert classes == CommitClass.INITIAL | CommitClass.SHORT | CommitClass.REFACTOR


@pytest.mark.unit
class TestBuildCommit:
    """build_commit 테스트"""

    def test_merge_when_diff_absent(self):
        """diff가 없으면 MERGE만 부여"""
        commit = build_commit(_metadata(2), None, _msg("Merge branch 'feature'"))

        assert commit.classes == CommitClass.MERGE
        assert commit.is_merge is True
        assert commit.is_special is False
        assert commit.diff_info is None

    def test_regular_commit(self):
        """일반 커밋은 분류 결과 사용"""
        commit = build_commit(_metadata(), DiffInfo(3, 1), _msg())

        assert commit.classes == CommitClass.SHORT
        assert commit.is_special is True
        assert commit.diff_info.total == 4


@pytest.mark.unit
class TestFormatClasses:
    """format_classes 테스트"""

    def test_codes_in_declaration_order(self):
        classes = CommitClass.REFACTOR | CommitClass.INITIAL | CommitClass.SHORT
        assert format_classes(classes) == "ISR"

    def test_empty_set(self):
        assert format_classes(CommitClass(0)) == ""

    def test_single_code(self):
        assert CommitClass.MERGE.code == "M"
        assert format_classes(CommitClass.MERGE) == "M"

    @pytest.mark.parametrize("member", list(CommitClass))
    def test_uses_member_code(self, member):
        assert format_classes(member) == member.code

    def test_all_classes(self):
        every = CommitClass.MERGE | CommitClass.INITIAL | CommitClass.SHORT | CommitClass.REFACTOR
        assert format_classes(every) == "".join(member.code for member in CommitClass)


@pytest.mark.unit
class TestDiffInfo:
    """DiffInfo 테스트"""

    def test_total(self):
        diff = DiffInfo(insertions=12, deletions=30)
        assert diff.total == 42

    def test_negative_counts_rejected(self):
        with pytest.raises(ValueError):
            DiffInfo(insertions=-1, deletions=0)
