"""
관리자 API 인증 확인
"""

import hmac
import logging
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse

# 로깅 설정
logger = logging.getLogger(__name__)


class AdminTokenCheck:
    """Authorization: Bearer 또는 X-Admin-Token 헤더를 관리자 토큰과 비교합니다."""

    def __init__(self, token: Optional[str]):
        self.token = token or ""

    def _presented(self, request: Request) -> str:
        auth_header = request.headers.get("Authorization", "")
        if auth_header.startswith("Bearer "):
            return auth_header[len("Bearer "):].strip()
        return request.headers.get("X-Admin-Token", "").strip()

    def __call__(self, request: Request) -> bool:
        if not self.token:
            logger.warning("관리자 토큰이 설정되지 않아 요청을 거부합니다.")
            return False

        presented = self._presented(request)
        if not presented:
            return False
        return hmac.compare_digest(presented.encode(), self.token.encode())


def unauthorized_response() -> JSONResponse:
    return JSONResponse({"error": "Unauthorized"}, status_code=401)
