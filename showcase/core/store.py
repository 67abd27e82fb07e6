"""
프로젝트 레코드 저장소
PostgreSQL projects 테이블에 대한 조회/생성/수정/삭제를 제공합니다.
"""

import logging
import uuid
from typing import Any, Callable, Dict, Iterable, List, Optional

import psycopg
from psycopg import sql
from psycopg.rows import dict_row
from tqdm import tqdm

from ..models.project import ProjectRecord

# 로깅 설정
logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    "title",
    "slug",
    "short_description",
    "long_description",
    "featured_image",
    "featured",
)

REQUIRED_FIELDS = ("title", "slug")

RELATED_COLUMNS = ("id", "title", "slug", "featured_image")


class StoreError(Exception):
    """저장소 접근 실패"""


class ProjectNotFound(StoreError):
    """요청한 프로젝트가 없음"""


class InvalidProjectData(ValueError):
    """수정/생성 요청 본문이 올바르지 않음"""


def _parse_id(project_id: Any) -> Optional[uuid.UUID]:
    try:
        return uuid.UUID(str(project_id))
    except ValueError:
        return None


def _validate_fields(fields: Dict[str, Any], required: Iterable[str] = ()) -> None:
    if not isinstance(fields, dict) or not fields:
        raise InvalidProjectData("요청 본문에 수정할 필드가 없습니다.")

    unknown = sorted(set(fields) - set(EDITABLE_FIELDS))
    if unknown:
        raise InvalidProjectData(f"알 수 없는 필드: {', '.join(unknown)}")

    missing = [name for name in required if not fields.get(name)]
    if missing:
        raise InvalidProjectData(f"필수 필드 누락: {', '.join(missing)}")


class ProjectStore:
    """projects 테이블 접근 클래스"""

    def __init__(
        self,
        connection_string: str = "postgresql://user@localhost:5432/postgres",
        connect: Callable[..., Any] = psycopg.connect,
    ):
        """
        Args:
            connection_string: PostgreSQL 연결 문자열
            connect: 연결 팩토리 (기본값 psycopg.connect)
        """
        self.connection_string = connection_string
        self._connect = connect

    def _execute(self, query, params=(), fetch: str = "all"):
        try:
            with self._connect(self.connection_string) as conn:
                with conn.cursor(row_factory=dict_row) as cursor:
                    cursor.execute(query, params)
                    if fetch == "one":
                        return cursor.fetchone()
                    if fetch == "all":
                        return cursor.fetchall()
                    return cursor.rowcount
        except psycopg.Error as e:
            logger.error(f"데이터베이스 쿼리 중 오류 발생: {e}")
            raise StoreError(str(e)) from e

    def fetch_by_slug(self, slug: str) -> Optional[ProjectRecord]:
        """
        slug로 프로젝트를 조회합니다.

        Args:
            slug: 프로젝트 slug

        Returns:
            ProjectRecord 또는 None (없는 경우)
        """
        row = self._execute(
            "SELECT * FROM projects WHERE slug = %s", (slug,), fetch="one"
        )
        if row is None:
            logger.info(f"프로젝트를 찾을 수 없습니다: slug={slug}")
            return None
        return ProjectRecord.from_row(row)

    def get(self, project_id: str) -> ProjectRecord:
        """
        ID로 프로젝트를 조회합니다.

        Raises:
            ProjectNotFound: 프로젝트가 없는 경우
        """
        parsed = _parse_id(project_id)
        row = None
        if parsed is not None:
            row = self._execute(
                "SELECT * FROM projects WHERE id = %s", (parsed,), fetch="one"
            )
        if row is None:
            raise ProjectNotFound(f"Project {project_id} not found")
        return ProjectRecord.from_row(row)

    def list(self, limit: Optional[int] = None) -> List[ProjectRecord]:
        query = "SELECT * FROM projects ORDER BY created_at DESC"
        params: tuple = ()
        if limit is not None:
            query += " LIMIT %s"
            params = (limit,)
        return [ProjectRecord.from_row(row) for row in self._execute(query, params)]

    def related(self, project_id: str, limit: int = 2) -> List[ProjectRecord]:
        """
        현재 프로젝트를 제외한 대표(featured) 프로젝트를 조회합니다.

        Args:
            project_id: 제외할 프로젝트 ID
            limit: 최대 개수

        Returns:
            id, title, slug, featured_image만 채워진 레코드 리스트
        """
        if limit <= 0:
            return []

        query = sql.SQL(
            "SELECT {columns} FROM projects "
            "WHERE featured AND id <> %s ORDER BY created_at DESC LIMIT %s"
        ).format(columns=sql.SQL(", ").join(map(sql.Identifier, RELATED_COLUMNS)))
        rows = self._execute(query, (_parse_id(project_id), limit))
        return [ProjectRecord.from_row(row) for row in rows]

    def create(self, fields: Dict[str, Any]) -> ProjectRecord:
        """
        프로젝트를 생성합니다.

        Raises:
            InvalidProjectData: 알 수 없는 필드나 필수 필드 누락
        """
        _validate_fields(fields, required=REQUIRED_FIELDS)
        names = list(fields)

        query = sql.SQL("INSERT INTO projects ({columns}) VALUES ({values}) RETURNING *").format(
            columns=sql.SQL(", ").join(map(sql.Identifier, names)),
            values=sql.SQL(", ").join(sql.Placeholder() * len(names)),
        )
        row = self._execute(query, tuple(fields[name] for name in names), fetch="one")
        logger.info(f"프로젝트 생성: {row['slug']}")
        return ProjectRecord.from_row(row)

    def update(self, project_id: str, fields: Dict[str, Any]) -> List[ProjectRecord]:
        """
        프로젝트를 수정합니다.

        Args:
            project_id: 프로젝트 ID
            fields: 수정할 필드

        Returns:
            수정된 레코드 리스트 (비어 있으면 프로젝트 없음)

        Raises:
            InvalidProjectData: 알 수 없는 필드이거나 본문이 비어 있는 경우
        """
        _validate_fields(fields)
        parsed = _parse_id(project_id)
        if parsed is None:
            return []

        names = list(fields)
        query = sql.SQL("UPDATE projects SET {assignments} WHERE id = %s RETURNING *").format(
            assignments=sql.SQL(", ").join(
                sql.SQL("{} = %s").format(sql.Identifier(name)) for name in names
            )
        )
        rows = self._execute(query, tuple(fields[name] for name in names) + (parsed,))
        logger.info(f"프로젝트 수정: id={project_id}, {len(rows)}건")
        return [ProjectRecord.from_row(row) for row in rows]

    def delete(self, project_id: str) -> bool:
        """
        프로젝트를 삭제합니다.

        Returns:
            삭제 여부
        """
        parsed = _parse_id(project_id)
        if parsed is None:
            return False

        deleted = self._execute(
            "DELETE FROM projects WHERE id = %s", (parsed,), fetch="count"
        )
        logger.info(f"프로젝트 삭제: id={project_id}, {deleted}건")
        return deleted > 0

    def seed(self, records: List[Dict[str, Any]]) -> int:
        """
        여러 프로젝트를 한 번에 저장합니다. 같은 slug가 있으면 덮어씁니다.

        Args:
            records: 프로젝트 필드 딕셔너리 리스트

        Returns:
            저장된 프로젝트 수
        """
        if not records:
            logger.warning("저장할 프로젝트가 없습니다.")
            return 0

        for record in records:
            _validate_fields(record, required=REQUIRED_FIELDS)

        logger.info(f"{len(records)}개의 프로젝트를 데이터베이스에 저장하는 중...")

        try:
            with self._connect(self.connection_string) as conn:
                with conn.cursor() as cursor:
                    for record in tqdm(records, desc="프로젝트 저장"):
                        names = list(record)
                        updates = [name for name in names if name != "slug"]
                        query = sql.SQL(
                            "INSERT INTO projects ({columns}) VALUES ({values}) "
                            "ON CONFLICT (slug) DO UPDATE SET {assignments}"
                        ).format(
                            columns=sql.SQL(", ").join(map(sql.Identifier, names)),
                            values=sql.SQL(", ").join(sql.Placeholder() * len(names)),
                            assignments=sql.SQL(", ").join(
                                sql.SQL("{0} = EXCLUDED.{0}").format(sql.Identifier(name))
                                for name in updates
                            ),
                        )
                        cursor.execute(query, tuple(record[name] for name in names))
        except psycopg.Error as e:
            logger.error(f"프로젝트 저장 중 오류 발생: {e}")
            raise StoreError(str(e)) from e

        logger.info("모든 프로젝트가 성공적으로 저장되었습니다.")
        return len(records)
