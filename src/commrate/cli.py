"""CLI 진입점

명령행 인터페이스를 통한 커밋 평가 실행을 제공합니다.
"""

import argparse
import os
import sys
import logging

from commrate import __version__
from commrate.git import GitError
from commrate.scoring import GradeSpec, GradeSpecError

from .config.settings import CommrateConfig, load_config, get_default_config_path
from .pipeline import run


def setup_logging(level: str = "WARNING") -> None:
    """로깅 설정

    표 출력과 섞이지 않도록 stderr로 출력합니다.

    Args:
        level: 로그 레벨
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def non_negative_int(value: str) -> int:
    """0 이상의 정수 인자"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("must be a non-negative number")
    if number < 0:
        raise argparse.ArgumentTypeError("must be a non-negative number")
    return number


def grade_spec(value: str) -> str:
    """등급 스펙 인자 (예: C, B+, d-)"""
    try:
        return str(GradeSpec.parse(value))
    except GradeSpecError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commrate",
        description="Git 커밋 품질 평가 도구",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
사용 예시:
  commrate                       # HEAD부터 모든 커밋 평가
  commrate v1.0 -n 20            # v1.0부터 20개 커밋
  commrate -a "Jane Doe" -s      # 특정 작성자, 숫자 점수로 표시
  commrate -g C-                 # C 등급 이하 커밋만
  commrate -m                    # 머지 커밋 포함 (점수 없음)
        """
    )

    parser.add_argument(
        "start_commit",
        nargs="?",
        default=None,
        metavar="START_COMMIT",
        help="시작 커밋 ID 또는 참조 (기본값: HEAD)"
    )

    parser.add_argument(
        "--author", "-a",
        type=str,
        default=None,
        help="커밋 작성자로 필터링"
    )

    parser.add_argument(
        "--merges", "-m",
        action="store_true",
        default=None,
        help="머지 커밋을 출력에 포함 (점수는 계산하지 않음)"
    )

    parser.add_argument(
        "--number", "-n",
        type=non_negative_int,
        default=None,
        help="출력할 최대 커밋 수"
    )

    parser.add_argument(
        "--score", "-s",
        action="store_true",
        default=None,
        help="등급 대신 숫자 점수 표시"
    )

    parser.add_argument(
        "--grade", "-g",
        type=grade_spec,
        default=None,
        help="등급 필터 (예: C = C만, C+ = C 이상, C- = C 이하)"
    )

    parser.add_argument(
        "--classes",
        action="store_true",
        default=None,
        help="커밋 분류 코드 표시 (M=머지, I=최초, S=짧음, R=리팩토링)"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="설정 파일 경로 (기본값: .commrate.yml, 있을 경우)"
    )

    parser.add_argument(
        "--repo", "-C",
        type=str,
        default=None,
        help="저장소 경로 (기본값: 현재 디렉토리)"
    )

    parser.add_argument(
        "--log-level", "-l",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="로그 레벨 (기본값: WARNING)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def build_config(args: argparse.Namespace) -> CommrateConfig:
    """설정 파일과 CLI 인자를 합쳐 최종 설정 생성"""
    config_path = args.config or get_default_config_path()
    config = load_config(config_path) if config_path else CommrateConfig()

    overrides = {
        "repo_path": args.repo,
        "start_commit": args.start_commit,
        "author": args.author,
        "include_merges": args.merges,
        "max_commits": args.number,
        "show_score": args.score,
        "show_classes": args.classes,
        "grade": args.grade,
    }
    config = config.merge_cli_overrides(overrides)

    if args.log_level:
        config.logging.level = args.log_level
    return config


def main() -> None:
    """메인 함수"""
    parser = build_parser()
    args = parser.parse_args()

    log_level = args.log_level or "WARNING"
    try:
        config = build_config(args)
        log_level = config.logging.level
        setup_logging(log_level)
        run(config)

    except BrokenPipeError:
        # 출력이 head 등으로 파이프된 경우 조용히 종료
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(0)
    except (GitError, ValueError, FileNotFoundError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        if log_level == "DEBUG":
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
