"""TOC (Table of Contents) related data models."""

from typing import Iterator, List
from dataclasses import dataclass, field


@dataclass(frozen=True)
class HeadingEntry:
    """렌더링된 본문에서 추출한 헤딩 항목"""

    id: str
    text: str
    level: int


@dataclass
class OutlineNode:
    """헤딩 항목을 레벨에 따라 중첩한 목차 노드"""

    entry: HeadingEntry
    children: List["OutlineNode"] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.entry.id

    @property
    def text(self) -> str:
        return self.entry.text

    @property
    def level(self) -> int:
        return self.entry.level

    def walk(self) -> Iterator["OutlineNode"]:
        """자신과 하위 노드를 깊이 우선(문서 순서)으로 순회합니다."""
        yield self
        for child in self.children:
            yield from child.walk()
