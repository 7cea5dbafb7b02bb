"""점수 계산 결과 출력 모듈"""

import sys
from typing import Optional, TextIO

from commrate.commit import format_classes
from commrate.scoring import ScoredCommit


class Printer:
    """커밋별 점수를 표 형태로 출력"""

    def __init__(self, show_score: bool = False, show_classes: bool = False,
                 stream: Optional[TextIO] = None):
        self.show_score = show_score
        self.show_classes = show_classes
        self.stream = stream if stream is not None else sys.stdout

    def print_header(self) -> None:
        score_title = "SCORE" if self.show_score else "GRADE"
        columns = [f"{'COMMIT':7}", f"{score_title:5}", f"{'AUTHOR':19}"]
        if self.show_classes:
            columns.append(f"{'TAGS':4}")
        columns.append("SUBJECT")
        self._write(" ".join(columns))

    def print_commit(self, scored: ScoredCommit) -> None:
        commit = scored.commit
        metadata = commit.metadata
        columns = [
            f"{metadata.short_id:7.7}",
            f"{scored.score.to_text(self.show_score):<5}",
            f"{metadata.author:19.19}",
        ]
        if self.show_classes:
            columns.append(f"{format_classes(commit.classes):4}")
        columns.append(commit.msg_info.subject or "")
        self._write(" ".join(columns))

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")
