"""
환경 설정 및 구성 관리
"""

import logging
import os
from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

logger = logging.getLogger(__name__)


class Config:
    """애플리케이션 설정 클래스"""

    # 데이터베이스 설정
    DATABASE_URL = os.getenv(
        "DATABASE_URL", "postgresql://user@localhost:5432/postgres"
    )

    # 관리자 API 설정
    ADMIN_API_TOKEN = os.getenv("ADMIN_API_TOKEN", "")

    # 사이트 설정
    SITE_NAME = os.getenv("SITE_NAME", "Projects")
    SITE_URL = os.getenv("SITE_URL", "http://localhost:8000")

    # 서버 설정
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "8000"))

    # 로깅 설정
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # 목차 및 페이지 설정
    TOC_SCROLL_OFFSET = float(os.getenv("TOC_SCROLL_OFFSET", "100"))
    RELATED_PROJECTS_LIMIT = int(os.getenv("RELATED_PROJECTS_LIMIT", "2"))
    IMAGE_VARIANT_FORMAT = os.getenv("IMAGE_VARIANT_FORMAT", "webp")

    @property
    def database_url(self):
        """데이터베이스 URL"""
        return self.DATABASE_URL

    @property
    def admin_api_token(self):
        """관리자 API 토큰"""
        return self.ADMIN_API_TOKEN

    @property
    def site_name(self):
        return self.SITE_NAME

    @property
    def site_url(self):
        return self.SITE_URL.rstrip("/")

    @property
    def toc_scroll_offset(self):
        """활성 헤딩 판정 기준 오프셋 (px)"""
        return self.TOC_SCROLL_OFFSET

    @property
    def related_projects_limit(self):
        return self.RELATED_PROJECTS_LIMIT

    @property
    def image_variant_format(self):
        return self.IMAGE_VARIANT_FORMAT

    def validate(self):
        """설정 유효성 검사"""
        errors = []

        if not self.DATABASE_URL:
            errors.append("DATABASE_URL이 설정되지 않았습니다.")

        if not (0 < self.PORT < 65536):
            errors.append("PORT는 1과 65535 사이의 값이어야 합니다.")

        if self.TOC_SCROLL_OFFSET < 0:
            errors.append("TOC_SCROLL_OFFSET은 0 이상이어야 합니다.")

        if self.RELATED_PROJECTS_LIMIT < 0:
            errors.append("RELATED_PROJECTS_LIMIT은 0 이상이어야 합니다.")

        if not isinstance(logging.getLevelName(self.LOG_LEVEL.upper()), int):
            errors.append(f"알 수 없는 LOG_LEVEL입니다: {self.LOG_LEVEL}")

        if not self.SITE_URL.startswith(("http://", "https://")):
            errors.append("SITE_URL은 http:// 또는 https://로 시작해야 합니다.")

        return errors

    @classmethod
    def print_config(cls):
        """현재 설정을 출력합니다."""
        print("현재 설정:")
        print(f"  데이터베이스 URL: {cls.DATABASE_URL}")
        print(f"  사이트 이름: {cls.SITE_NAME}")
        print(f"  사이트 URL: {cls.SITE_URL}")
        print(f"  서버 주소: {cls.HOST}:{cls.PORT}")
        print(f"  로그 레벨: {cls.LOG_LEVEL}")
        print(f"  목차 스크롤 오프셋: {cls.TOC_SCROLL_OFFSET}")
        print(f"  관련 프로젝트 수: {cls.RELATED_PROJECTS_LIMIT}")
        print(f"  관리자 토큰 설정됨: {'예' if cls.ADMIN_API_TOKEN else '아니오'}")


def validate_config(config: Config) -> None:
    """
    설정 유효성 검사 함수

    Args:
        config: Config 인스턴스

    Raises:
        ValueError: 설정이 유효하지 않은 경우
    """
    errors = config.validate()
    if errors:
        error_message = "설정 오류가 발견되었습니다:\n" + "\n".join(
            f"  - {error}" for error in errors
        )
        raise ValueError(error_message)

    if not config.admin_api_token:
        logger.warning("ADMIN_API_TOKEN이 설정되지 않아 관리자 API가 모두 거부됩니다.")
