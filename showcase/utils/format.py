"""
목차 출력 및 이미지 URL 포맷팅 유틸리티
"""

from typing import List, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from ..models.toc import OutlineNode


def format_outline(
    outline: List[OutlineNode], active_id: Optional[str] = None, indent: str = "  "
) -> str:
    """
    아웃라인을 들여쓰기된 텍스트 트리로 포맷팅합니다.

    Args:
        outline: build_outline 결과
        active_id: 강조할 헤딩 ID
        indent: 깊이당 들여쓰기 문자열

    Returns:
        포맷팅된 목차 문자열
    """
    if not outline:
        return "목차 없음"

    lines = []

    def add_node(node: OutlineNode, depth: int):
        marker = "▶" if node.id == active_id else "├─"
        lines.append(f"{indent * depth}{marker} {node.text} (#{node.id})")
        for child in node.children:
            add_node(child, depth + 1)

    for root in outline:
        add_node(root, 0)

    return "\n".join(lines)


def variant_url(
    url: Optional[str], width: int, height: int, fmt: str = "webp"
) -> Optional[str]:
    """
    이미지 프록시가 처리할 크기/포맷 변환 쿼리를 붙인 URL을 만듭니다.

    Args:
        url: 원본 이미지 URL
        width: 너비 (px)
        height: 높이 (px)
        fmt: 출력 포맷

    Returns:
        변환 URL (원본이 없으면 None)
    """
    if not url:
        return None

    parts = urlsplit(url)
    query = dict(parse_qsl(parts.query))
    query.update(
        {
            "width": str(width),
            "height": str(height),
            "resize": "cover",
            "format": fmt,
        }
    )
    return urlunsplit(parts._replace(query=urlencode(query)))
