"""
FastAPI 애플리케이션 구성
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from .. import __version__
from ..core.config import Config
from ..core.renderer import MarkdownRenderer
from ..core.store import ProjectStore
from . import api, pages
from .auth import AdminTokenCheck

# 로깅 설정
logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


def create_app(
    config: Optional[Config] = None,
    store: Optional[ProjectStore] = None,
    admin_check: Optional[Callable] = None,
    renderer: Optional[MarkdownRenderer] = None,
) -> FastAPI:
    """
    애플리케이션을 생성합니다.

    Args:
        config: 설정 (기본값 Config())
        store: 프로젝트 저장소 (기본값 DATABASE_URL 기반 ProjectStore)
        admin_check: 요청을 받아 관리자 여부를 반환하는 함수
        renderer: 본문 렌더러

    Returns:
        FastAPI 인스턴스
    """
    config = config or Config()

    app = FastAPI(
        title=config.site_name,
        version=__version__,
        docs_url="/docs",
        redoc_url=None,
    )

    app.state.config = config
    app.state.store = store or ProjectStore(config.database_url)
    app.state.admin_check = admin_check or AdminTokenCheck(config.admin_api_token)
    app.state.renderer = renderer or MarkdownRenderer()
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    app.include_router(api.router)
    app.include_router(pages.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    logger.info(f"애플리케이션 생성 완료: {config.site_name}")
    return app
