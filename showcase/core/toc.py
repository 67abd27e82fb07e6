"""
목차(Table of Contents) 빌더 및 위젯
헤딩 목록을 중첩된 아웃라인으로 만들고 스크롤에 따른 활성 항목을 추적합니다.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

from ..models.toc import HeadingEntry, OutlineNode
from .viewport import FrameThrottle, Unsubscribe, Viewport

# 로깅 설정
logger = logging.getLogger(__name__)


class TocState(Enum):
    """목차 위젯 상태"""

    COLLAPSED = "collapsed"
    EXPANDED = "expanded"


class Presentation(Enum):
    """목차 위젯 표시 방식"""

    INLINE = "inline"
    FLOATING = "floating"


def build_outline(entries: Sequence[HeadingEntry]) -> List[OutlineNode]:
    """
    평평한 헤딩 목록을 레벨에 따라 중첩된 아웃라인으로 변환합니다.

    Args:
        entries: 문서 순서의 헤딩 항목

    Returns:
        루트 노드 리스트
    """
    roots: List[OutlineNode] = []
    stack: List[OutlineNode] = []

    for entry in entries:
        node = OutlineNode(entry=entry)

        while stack and stack[-1].level >= entry.level:
            stack.pop()

        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)

        stack.append(node)

    return roots


def find_active(
    entries: Sequence[HeadingEntry],
    positions: Dict[str, Optional[float]],
    offset: float,
) -> Optional[HeadingEntry]:
    """
    오프셋에 가장 가깝지만 그 아래로 내려가지 않은 헤딩을 찾습니다.

    Args:
        entries: 문서 순서의 헤딩 항목
        positions: 헤딩 ID별 뷰포트 기준 상단 위치 (없으면 건너뜀)
        offset: 뷰포트 상단 기준 오프셋

    Returns:
        활성 헤딩 또는 None
    """
    active = None
    active_top = None

    for entry in entries:
        top = positions.get(entry.id)
        if top is None or top > offset:
            continue
        # 같은 위치면 문서 순서상 앞의 항목 유지
        if active_top is None or top > active_top:
            active, active_top = entry, top

    return active


class TableOfContents:
    """
    목차 위젯

    인스턴스마다 자체 상태(펼침 여부, 활성 항목, 구독)를 가지므로
    같은 본문에 대해 여러 위젯이 서로 간섭 없이 공존할 수 있습니다.
    """

    def __init__(
        self,
        entries: Sequence[HeadingEntry],
        presentation: Union[Presentation, str] = Presentation.INLINE,
        offset: float = 100.0,
    ):
        """
        Args:
            entries: 헤딩 항목 (extract_headings 결과)
            presentation: inline(넓은 레이아웃) 또는 floating(좁은 레이아웃)
            offset: 활성 항목 판정 기준 오프셋 (px)
        """
        self.entries: List[HeadingEntry] = list(entries)
        self.presentation = Presentation(presentation)
        self.offset = offset
        self.outline = build_outline(self.entries)
        self.state = TocState.COLLAPSED
        self.active: Optional[HeadingEntry] = None

        self._by_id = {entry.id: entry for entry in self.entries}
        self._viewport: Optional[Viewport] = None
        self._throttle: Optional[FrameThrottle] = None
        self._unsubscribers: List[Unsubscribe] = []

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def expanded(self) -> bool:
        return self.state is TocState.EXPANDED

    @property
    def is_tracking(self) -> bool:
        return bool(self._unsubscribers)

    def mount(self, viewport: Viewport, fragment: Optional[str] = None):
        """
        위젯을 뷰포트에 연결합니다.

        Args:
            viewport: 뷰포트 협력자
            fragment: 페이지 로드 시 URL 프래그먼트 (있으면 해당 앵커로 이동)
        """
        if self._viewport is not None:
            self.unmount()

        self._viewport = viewport

        if self.is_empty:
            logger.debug("헤딩이 없어 스크롤 추적을 시작하지 않습니다.")
            return

        self._throttle = FrameThrottle(viewport, self.refresh)

        # floating은 접혀 있는 동안에만 추적을 멈춤
        if self.presentation is Presentation.INLINE or self.expanded:
            self._start_tracking()
            self.refresh()

        target = fragment.lstrip("#") if fragment else None
        if target and target in self._by_id:
            self.select(target)

    def unmount(self):
        """모든 스크롤/리사이즈 구독을 해제합니다."""
        self._stop_tracking()
        self._throttle = None
        self._viewport = None

    def toggle(self):
        """접힘/펼침 상태를 전환합니다."""
        if self.state is TocState.COLLAPSED:
            self.state = TocState.EXPANDED
            if self.presentation is Presentation.FLOATING and self._viewport:
                self._start_tracking()
                self.refresh()
        else:
            self._collapse()

    def select(self, target: Union[HeadingEntry, str]) -> HeadingEntry:
        """
        항목을 선택합니다: 앵커로 스크롤하고 즉시 활성 항목으로 표시한 뒤 접습니다.

        Args:
            target: HeadingEntry 또는 헤딩 ID

        Returns:
            선택된 HeadingEntry

        Raises:
            KeyError: 목차에 없는 ID인 경우
        """
        heading_id = target.id if isinstance(target, HeadingEntry) else target
        entry = self._by_id[heading_id]

        if self._viewport is not None:
            self._viewport.scroll_to(entry.id, smooth=True)

        self.active = entry
        self._collapse()
        return entry

    def refresh(self):
        """현재 앵커 위치로 활성 항목을 다시 계산합니다."""
        if self._viewport is None:
            return

        positions = {}
        for entry in self.entries:
            try:
                positions[entry.id] = self._viewport.anchor_top(entry.id)
            except LookupError:
                positions[entry.id] = None
            if positions[entry.id] is None:
                logger.debug(f"앵커를 찾을 수 없어 건너뜁니다: {entry.id}")

        self.active = find_active(self.entries, positions, self.offset)

    def is_active(self, node: Union[OutlineNode, HeadingEntry]) -> bool:
        return self.active is not None and self.active.id == node.id

    def _collapse(self):
        self.state = TocState.COLLAPSED
        if self.presentation is Presentation.FLOATING:
            self._stop_tracking()

    def _start_tracking(self):
        if self.is_tracking or self._viewport is None or self._throttle is None:
            return
        self._unsubscribers = [
            self._viewport.on_scroll(self._throttle.notify),
            self._viewport.on_resize(self._throttle.notify),
        ]

    def _stop_tracking(self):
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        if self._throttle is not None:
            self._throttle.cancel()
