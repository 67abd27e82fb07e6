"""
프로젝트 상세 페이지 라우트
slug로 프로젝트를 조회해 본문, 목차, 다른 프로젝트 내비게이션을 렌더링합니다.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ..core.store import StoreError
from ..core.toc import Presentation, TableOfContents
from ..utils.format import variant_url

# 로깅 설정
logger = logging.getLogger(__name__)

router = APIRouter()

HERO_SIZE = (1200, 630)
CARD_SIZE = (600, 315)


def _not_found(request: Request):
    state = request.app.state
    return state.templates.TemplateResponse(
        request,
        "not_found.html",
        {"site_name": state.config.site_name},
        status_code=404,
    )


# 저장소가 동기 I/O라서 스레드풀에서 실행되도록 일반 함수로 선언
@router.get("/projects/{slug}", response_class=HTMLResponse)
def project_page(slug: str, request: Request):
    state = request.app.state
    config = state.config

    try:
        project = state.store.fetch_by_slug(slug)
    except StoreError as e:
        logger.error(f"프로젝트 조회 중 오류 발생: slug={slug}, {e}")
        return _not_found(request)

    if project is None:
        return _not_found(request)

    rendered = state.renderer.render(project.long_description)

    # 넓은 레이아웃(사이드바)과 좁은 레이아웃(플로팅)은 서로 독립적인 위젯
    inline_toc = TableOfContents(
        rendered.headings, Presentation.INLINE, offset=config.toc_scroll_offset
    )
    floating_toc = TableOfContents(
        rendered.headings, Presentation.FLOATING, offset=config.toc_scroll_offset
    )

    try:
        others = state.store.related(project.id, limit=config.related_projects_limit)
    except StoreError as e:
        # 다른 프로젝트 목록은 없는 것으로 처리하고 섹션을 숨김
        logger.error(f"관련 프로젝트 조회 중 오류 발생: {e}")
        others = []
    logger.info(f"프로젝트 페이지 렌더링: {slug} (헤딩 {len(rendered.headings)}개)")

    fmt = config.image_variant_format
    return state.templates.TemplateResponse(
        request,
        "project.html",
        {
            "site_name": config.site_name,
            "canonical_url": f"{config.site_url}/projects/{project.slug}",
            "project": project,
            "hero_image": variant_url(project.featured_image, *HERO_SIZE, fmt=fmt),
            "body_html": rendered.html,
            "inline_toc": inline_toc,
            "floating_toc": floating_toc,
            "other_projects": [
                {"project": other, "image": variant_url(other.featured_image, *CARD_SIZE, fmt=fmt)}
                for other in others
            ],
        },
    )
