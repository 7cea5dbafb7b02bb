"""커밋 평가 파이프라인

순회 → 사전 필터 → 파싱/분류 → 점수 계산 → 사후 필터 → 출력 순서로
커밋을 하나씩 처리합니다. 커밋 간 공유 상태는 없습니다.
"""

import logging
from typing import Iterable, Iterator, Optional

from commrate.commit import CommitMetadata
from commrate.config.settings import CommrateConfig
from commrate.filters import FilterChain, build_pre_filters, build_post_filters
from commrate.git import GitRepository, GitCommitItem
from commrate.printer import Printer
from commrate.scoring import Scorer, ScoredCommit, default_scorer

logger = logging.getLogger(__name__)


def rate_commits(items: Iterable[GitCommitItem],
                 scorer: Scorer,
                 pre_filters: FilterChain[CommitMetadata],
                 post_filters: FilterChain[ScoredCommit],
                 max_commits: Optional[int] = None) -> Iterator[ScoredCommit]:
    """순회 결과를 평가하여 ScoredCommit을 순서대로 생성

    Args:
        items: 메타데이터와 parse()를 제공하는 커밋 목록 (지연 순회)
        scorer: 점수 계산기
        pre_filters: 메타데이터 기준 필터
        post_filters: 점수 기준 필터
        max_commits: 최대 출력 커밋 수 (None이면 제한 없음)

    Yields:
        ScoredCommit: 필터를 통과한 커밋
    """
    if max_commits is not None and max_commits <= 0:
        return

    emitted = 0
    for item in items:
        if not pre_filters.accept(item.metadata):
            logger.debug(f"사전 필터 제외: {item.metadata.short_id}")
            continue

        scored = scorer.score(item.parse())
        if not post_filters.accept(scored):
            logger.debug(f"사후 필터 제외: {item.metadata.short_id}")
            continue

        yield scored
        emitted += 1
        if max_commits is not None and emitted >= max_commits:
            break


def run(config: CommrateConfig, printer: Optional[Printer] = None) -> int:
    """설정에 따라 저장소 커밋을 평가하고 출력

    Returns:
        int: 출력한 커밋 수
    """
    if printer is None:
        printer = Printer(show_score=config.show_score, show_classes=config.show_classes)

    repo = GitRepository(config.repo_path)
    pre_filters = build_pre_filters(config.author, config.include_merges)
    post_filters = build_post_filters(config.grade_spec())

    logger.info(
        f"커밋 평가 시작: {config.repo_path} ({config.start_commit}), "
        f"사전 필터 {len(pre_filters)}개, 사후 필터 {len(post_filters)}개"
    )

    printer.print_header()
    count = 0
    for scored in rate_commits(repo.traverse(config.start_commit), default_scorer(),
                               pre_filters, post_filters, config.max_commits):
        printer.print_commit(scored)
        count += 1

    logger.info(f"커밋 평가 완료: {count}개 출력")
    return count
