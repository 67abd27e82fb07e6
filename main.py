#!/usr/bin/env python3
"""
포트폴리오 프로젝트 페이지 서버 통합 실행 스크립트
"""

import os
import sys
import json
import argparse
import logging
from dataclasses import asdict
from pathlib import Path

from showcase import (
    Config,
    validate_config,
    setup_database,
    check_database_status,
    ProjectStore,
    MarkdownRenderer,
    build_outline,
    format_outline,
)

# 로깅 설정
logging.basicConfig(
    level=Config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def setup_command(args):
    """데이터베이스 설정 명령"""
    try:
        config = Config()
        validate_config(config)
        setup_database(config.database_url)
        print("✅ 데이터베이스 설정이 완료되었습니다.")
    except Exception as e:
        logger.error(f"데이터베이스 설정 중 오류 발생: {e}")
        return 1
    return 0


def status_command(args):
    """데이터베이스 상태 확인 명령"""
    try:
        config = Config()
        validate_config(config)
        status = check_database_status(config.database_url)
        print("📊 데이터베이스 상태:")
        print(f"   - 테이블: {', '.join(status['tables']) or '없음'}")
        print(f"   - 인덱스: {', '.join(status['indexes']) or '없음'}")
        print(f"   - 프로젝트 수: {status['project_count']:,}")
    except Exception as e:
        logger.error(f"데이터베이스 상태 확인 중 오류 발생: {e}")
        return 1
    return 0


def serve_command(args):
    """웹 서버 실행 명령"""
    import uvicorn

    try:
        config = Config()
        validate_config(config)
    except ValueError as e:
        logger.error(f"설정 오류: {e}")
        return 1

    host = args.host or config.HOST
    port = args.port or config.PORT
    print(f"🚀 서버 시작: http://{host}:{port}")

    uvicorn.run(
        "showcase.web.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=args.reload,
        log_level=config.LOG_LEVEL.lower(),
    )
    return 0


def seed_command(args):
    """JSON 파일의 프로젝트를 데이터베이스에 저장하는 명령"""
    try:
        if not os.path.exists(args.json_file):
            print(f"❌ JSON 파일을 찾을 수 없습니다: {args.json_file}")
            return 1

        with open(args.json_file, "r", encoding="utf-8") as f:
            records = json.load(f)

        if not isinstance(records, list):
            print("❌ JSON 파일은 프로젝트 배열이어야 합니다.")
            return 1

        config = Config()
        validate_config(config)

        store = ProjectStore(config.database_url)
        saved = store.seed(records)
        print(f"✅ {saved}개의 프로젝트를 저장했습니다.")

    except Exception as e:
        logger.error(f"프로젝트 저장 중 오류 발생: {e}")
        return 1
    return 0


def outline_command(args):
    """Markdown 파일의 목차 출력 명령"""
    path = Path(args.markdown_file)
    if not path.exists():
        print(f"❌ Markdown 파일을 찾을 수 없습니다: {path}")
        return 1

    rendered = MarkdownRenderer().render(path.read_text(encoding="utf-8"))

    if args.json:
        print(
            json.dumps(
                [asdict(entry) for entry in rendered.headings],
                ensure_ascii=False,
                indent=2,
            )
        )
    else:
        print(f"📑 목차 ({len(rendered.headings)}개 헤딩):")
        print(format_outline(build_outline(rendered.headings)))
    return 0


def create_parser():
    """명령행 인수 파서 생성"""
    parser = argparse.ArgumentParser(
        description="포트폴리오 프로젝트 페이지 서버",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예제:
  # 데이터베이스 설정
  python main.py setup

  # 프로젝트 일괄 저장
  python main.py seed projects.json

  # 서버 실행
  python main.py serve --port 8000

  # Markdown 목차 확인
  python main.py outline README.md
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="사용 가능한 명령어")

    # setup 명령
    subparsers.add_parser("setup", help="데이터베이스 설정")

    # status 명령
    subparsers.add_parser("status", help="데이터베이스 상태 확인")

    # serve 명령
    serve_parser = subparsers.add_parser("serve", help="웹 서버 실행")
    serve_parser.add_argument("--host", type=str, help="바인드 주소 (기본값: HOST)")
    serve_parser.add_argument("--port", type=int, help="포트 (기본값: PORT)")
    serve_parser.add_argument(
        "--reload", action="store_true", help="코드 변경 시 자동 재시작"
    )

    # seed 명령
    seed_parser = subparsers.add_parser("seed", help="JSON 파일의 프로젝트 저장")
    seed_parser.add_argument("json_file", help="프로젝트 배열 JSON 파일 경로")

    # outline 명령
    outline_parser = subparsers.add_parser("outline", help="Markdown 목차 출력")
    outline_parser.add_argument("markdown_file", help="Markdown 파일 경로")
    outline_parser.add_argument(
        "--json", action="store_true", help="헤딩 목록을 JSON으로 출력"
    )

    return parser


def main():
    """메인 함수"""
    parser = create_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    # 명령 실행
    if args.command == "setup":
        return setup_command(args)
    elif args.command == "status":
        return status_command(args)
    elif args.command == "serve":
        return serve_command(args)
    elif args.command == "seed":
        return seed_command(args)
    elif args.command == "outline":
        return outline_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
