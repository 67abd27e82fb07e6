"""
목차 위젯이 사용하는 뷰포트 인터페이스
스크롤/리사이즈 구독, 앵커 위치 조회, 프레임 예약을 제공합니다.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

# 로깅 설정
logger = logging.getLogger(__name__)

Handler = Callable[[], None]
Unsubscribe = Callable[[], None]


class Listeners:
    """핸들러 등록/해제를 관리하는 작은 레지스트리"""

    def __init__(self):
        self._handlers: List[Handler] = []

    def add(self, handler: Handler) -> Unsubscribe:
        self._handlers.append(handler)

        def unsubscribe():
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def emit(self):
        for handler in list(self._handlers):
            handler()

    def __len__(self):
        return len(self._handlers)


class Viewport(ABC):
    """브라우저 뷰포트 협력자 인터페이스"""

    @abstractmethod
    def on_scroll(self, handler: Handler) -> Unsubscribe:
        """스크롤 알림을 구독하고 해제 함수를 반환합니다."""

    @abstractmethod
    def on_resize(self, handler: Handler) -> Unsubscribe:
        """리사이즈 알림을 구독하고 해제 함수를 반환합니다."""

    @abstractmethod
    def anchor_top(self, anchor_id: str) -> Optional[float]:
        """앵커의 뷰포트 기준 상단 위치. 문서에 없으면 None."""

    @abstractmethod
    def scroll_to(self, anchor_id: str, smooth: bool = True) -> None:
        """앵커가 보이도록 스크롤합니다."""

    @abstractmethod
    def request_frame(self, callback: Handler) -> int:
        """다음 애니메이션 프레임에 콜백을 예약합니다."""

    @abstractmethod
    def cancel_frame(self, handle: int) -> None:
        """예약된 프레임 콜백을 취소합니다."""


class StaticViewport(Viewport):
    """
    고정된 앵커 위치를 가지는 헤드리스 뷰포트

    프레임은 run_frame()을 호출할 때만 실행됩니다.
    """

    def __init__(self, positions: Optional[Dict[str, float]] = None):
        """
        Args:
            positions: 앵커 ID별 문서 내 절대 위치 (px)
        """
        self.positions: Dict[str, float] = dict(positions or {})
        self.scroll_y = 0.0
        self.scroll_calls: List[Dict[str, object]] = []
        self._scroll_listeners = Listeners()
        self._resize_listeners = Listeners()
        self._frames: Dict[int, Handler] = {}
        self._next_handle = 1

    @property
    def listener_count(self) -> int:
        return len(self._scroll_listeners) + len(self._resize_listeners)

    @property
    def pending_frames(self) -> int:
        return len(self._frames)

    def on_scroll(self, handler: Handler) -> Unsubscribe:
        return self._scroll_listeners.add(handler)

    def on_resize(self, handler: Handler) -> Unsubscribe:
        return self._resize_listeners.add(handler)

    def anchor_top(self, anchor_id: str) -> Optional[float]:
        position = self.positions.get(anchor_id)
        if position is None:
            return None
        return position - self.scroll_y

    def scroll_to(self, anchor_id: str, smooth: bool = True) -> None:
        self.scroll_calls.append({"anchor": anchor_id, "smooth": smooth})
        if anchor_id in self.positions:
            self.scroll_y = self.positions[anchor_id]

    def request_frame(self, callback: Handler) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._frames[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._frames.pop(handle, None)

    def scroll(self, y: float):
        """스크롤 위치를 바꾸고 스크롤 알림을 보냅니다."""
        self.scroll_y = y
        self._scroll_listeners.emit()

    def resize(self):
        self._resize_listeners.emit()

    def run_frame(self) -> int:
        """
        예약된 프레임 콜백을 모두 실행합니다.

        Returns:
            실행된 콜백 수
        """
        frames, self._frames = self._frames, {}
        for callback in frames.values():
            callback()
        return len(frames)


class FrameThrottle:
    """알림을 애니메이션 프레임당 최대 한 번의 실행으로 묶습니다."""

    def __init__(self, viewport: Viewport, callback: Handler):
        self.viewport = viewport
        self.callback = callback
        self._handle: Optional[int] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def notify(self):
        if self._handle is None:
            self._handle = self.viewport.request_frame(self._flush)

    def _flush(self):
        self._handle = None
        self.callback()

    def cancel(self):
        if self._handle is not None:
            self.viewport.cancel_frame(self._handle)
            self._handle = None
