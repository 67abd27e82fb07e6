"""
Markdown 본문 렌더링 모듈
Markdown을 HTML로 변환하고 컴포넌트 치환, 헤딩 앵커 부여를 수행합니다.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import markdown
from bs4 import BeautifulSoup, Tag

from ..models.toc import HeadingEntry
from .headings import apply_anchors, extract_headings

# 로깅 설정
logger = logging.getLogger(__name__)

Component = Callable[[Tag, BeautifulSoup], None]

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]


def external_link(element: Tag, soup: BeautifulSoup) -> None:
    """외부 링크는 새 탭에서 엽니다."""
    href = element.get("href", "")
    if href.startswith(("http://", "https://")):
        element["target"] = "_blank"
        element["rel"] = "noopener noreferrer"


def lazy_image(element: Tag, soup: BeautifulSoup) -> None:
    element["loading"] = "lazy"
    element["decoding"] = "async"


def code_block(element: Tag, soup: BeautifulSoup) -> None:
    """코드 블록의 language-* 클래스를 pre 요소에도 붙입니다."""
    code = element.find("code")
    if code is None:
        return

    languages = [c for c in code.get("class", []) if c.startswith("language-")]
    if languages:
        classes = element.get("class", [])
        element["class"] = classes + [c for c in languages if c not in classes]


DEFAULT_COMPONENTS: Dict[str, Component] = {
    "a": external_link,
    "img": lazy_image,
    "pre": code_block,
}


@dataclass
class RenderedContent:
    """렌더링된 본문과 추출된 헤딩"""

    soup: BeautifulSoup
    headings: List[HeadingEntry]

    @property
    def html(self) -> str:
        return str(self.soup)


class MarkdownRenderer:
    """Markdown 본문을 렌더링하는 클래스"""

    def __init__(self, components: Optional[Dict[str, Component]] = None):
        """
        Args:
            components: 태그 이름별 치환 함수 (기본 컴포넌트에 덮어씀)
        """
        self.components = dict(DEFAULT_COMPONENTS)
        if components:
            self.components.update(components)

    def to_html(self, text: str) -> str:
        return markdown.markdown(text or "", extensions=MARKDOWN_EXTENSIONS)

    def render(self, text: str) -> RenderedContent:
        """
        Markdown 텍스트를 렌더링합니다.

        Args:
            text: Markdown 본문

        Returns:
            RenderedContent (앵커가 적용된 트리와 헤딩 목록)
        """
        soup = BeautifulSoup(self.to_html(text), "html.parser")

        for tag_name, component in self.components.items():
            for element in soup.find_all(tag_name):
                component(element, soup)

        headings = extract_headings(soup)
        apply_anchors(soup, headings)

        logger.debug(f"본문 렌더링 완료: {len(headings)}개 헤딩")
        return RenderedContent(soup=soup, headings=headings)
