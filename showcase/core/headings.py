"""
렌더링된 본문에서 목차용 헤딩을 추출하는 모듈
h2/h3 헤딩을 문서 순서대로 수집하고 고유한 앵커 ID를 부여합니다.
"""

import logging
import re
from typing import List, Set, Union

from bs4 import BeautifulSoup

from ..models.toc import HeadingEntry

# 로깅 설정
logger = logging.getLogger(__name__)

# h1은 페이지 제목, h4 이하는 목차에 넣기엔 너무 세분화됨
TOC_HEADING_TAGS = ["h2", "h3"]

_NON_ALNUM = re.compile(r"[\W_]+")


def slugify(text: str) -> str:
    """
    헤딩 텍스트를 URL 프래그먼트에 쓸 수 있는 ID로 변환합니다.

    Args:
        text: 헤딩 텍스트

    Returns:
        소문자, 하이픈 구분 ID (변환 결과가 없으면 빈 문자열)
    """
    return _NON_ALNUM.sub("-", text.lower()).strip("-")


def _as_soup(content: Union[str, BeautifulSoup]) -> BeautifulSoup:
    if isinstance(content, BeautifulSoup):
        return content
    return BeautifulSoup(content or "", "html.parser")


def _unique_id(base: str, used: Set[str]) -> str:
    if base not in used:
        return base

    suffix = 2
    while f"{base}-{suffix}" in used:
        suffix += 1
    return f"{base}-{suffix}"


def extract_headings(content: Union[str, BeautifulSoup]) -> List[HeadingEntry]:
    """
    본문에서 h2/h3 헤딩을 문서 순서대로 추출합니다.

    기존 id 속성은 무시하고 텍스트에서 ID를 새로 만들기 때문에
    같은 본문에 대해 여러 번 실행해도 결과가 같습니다.

    Args:
        content: BeautifulSoup 트리 또는 HTML 문자열

    Returns:
        HeadingEntry 리스트
    """
    soup = _as_soup(content)
    entries = []
    used: Set[str] = set()

    for position, element in enumerate(soup.find_all(TOC_HEADING_TAGS), 1):
        text = " ".join(element.get_text().split())
        base = slugify(text) or f"section-{position}"
        heading_id = _unique_id(base, used)
        used.add(heading_id)

        entries.append(
            HeadingEntry(id=heading_id, text=text, level=int(element.name[1]))
        )
        logger.debug(f"헤딩 추출: {heading_id} (레벨 {element.name[1]})")

    return entries


def apply_anchors(
    content: Union[str, BeautifulSoup], entries: List[HeadingEntry]
) -> BeautifulSoup:
    """
    추출된 ID를 본문의 h2/h3 요소에 id 속성으로 기록합니다.

    Args:
        content: extract_headings에 넘겼던 본문
        entries: extract_headings 결과

    Returns:
        앵커가 적용된 BeautifulSoup 트리
    """
    soup = _as_soup(content)
    elements = soup.find_all(TOC_HEADING_TAGS)

    if len(elements) != len(entries):
        logger.warning(
            f"헤딩 수가 일치하지 않습니다: 본문 {len(elements)}개, 항목 {len(entries)}개"
        )

    for element, entry in zip(elements, entries):
        element["id"] = entry.id

    return soup
