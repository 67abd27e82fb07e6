"""
프로젝트 CRUD API 라우트
저장소 호출 결과와 오류를 JSON 응답으로 변환합니다.
"""

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from ..core.store import InvalidProjectData, ProjectNotFound
from .auth import unauthorized_response

# 로깅 설정
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/projects")


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _is_admin(request: Request) -> bool:
    return bool(request.app.state.admin_check(request))


async def _read_body(request: Request):
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InvalidProjectData("요청 본문이 올바른 JSON이 아닙니다.")


# 저장소 호출은 동기 I/O: 본문을 읽지 않는 핸들러는 일반 함수로 두어 스레드풀에서 실행
@router.get("")
def list_projects(request: Request):
    try:
        projects = request.app.state.store.list()
        return [project.to_dict() for project in projects]
    except Exception as e:
        logger.error(f"Unexpected error in GET /api/projects: {e}")
        return _error(str(e) or "Failed to fetch projects", 500)


@router.post("")
async def create_project(request: Request):
    try:
        if not _is_admin(request):
            return unauthorized_response()

        body = await _read_body(request)
        project = await run_in_threadpool(request.app.state.store.create, body)
        return JSONResponse(project.to_dict(), status_code=201)
    except InvalidProjectData as e:
        return _error(str(e), 400)
    except Exception as e:
        logger.error(f"Unexpected error in POST /api/projects: {e}")
        return _error(f"Error creating project: {e}", 500)


@router.get("/{project_id}")
def get_project(project_id: str, request: Request):
    try:
        project = request.app.state.store.get(project_id)
        return project.to_dict()
    except ProjectNotFound as e:
        return _error(str(e), 404)
    except Exception as e:
        logger.error(f"Unexpected error in GET /api/projects/{project_id}: {e}")
        return _error(str(e) or "Failed to fetch project", 500)


@router.put("/{project_id}")
async def update_project(project_id: str, request: Request):
    # 관리자 확인이 가장 먼저
    if not _is_admin(request):
        return unauthorized_response()

    try:
        body = await _read_body(request)
        updated = await run_in_threadpool(request.app.state.store.update, project_id, body)
    except InvalidProjectData as e:
        return _error(str(e), 400)
    except Exception as e:
        logger.error(f"Error updating project {project_id}: {e}")
        return _error(f"Error updating project: {e}", 500)

    if not updated:
        return _error("Project not found or no changes made", 404)

    return updated[0].to_dict()


@router.delete("/{project_id}")
def delete_project(project_id: str, request: Request):
    if not _is_admin(request):
        return unauthorized_response()

    if not project_id.strip():
        return _error("Project ID is required", 400)

    try:
        deleted = request.app.state.store.delete(project_id)
    except Exception as e:
        logger.error(f"Error deleting project {project_id}: {e}")
        return _error(f"Error deleting project: {e}", 500)

    if not deleted:
        return _error("Project not found", 404)

    return {"success": True, "message": "Project deleted successfully"}
