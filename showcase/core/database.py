"""
PostgreSQL 데이터베이스 스키마 설정 모듈
projects 테이블과 인덱스, updated_at 트리거를 생성합니다.
"""

import psycopg
import logging

# 로깅 설정
logger = logging.getLogger(__name__)


def setup_database(connection_string="postgresql://user@localhost:5432/postgres"):
    """
    데이터베이스 스키마를 설정합니다.

    Args:
        connection_string (str): PostgreSQL 연결 문자열
    """
    try:
        # 데이터베이스 연결
        conn = psycopg.connect(connection_string)
        conn.autocommit = True
        cursor = conn.cursor()

        logger.info("데이터베이스에 연결되었습니다.")

        # gen_random_uuid() 사용 (PostgreSQL 13 미만 대비)
        cursor.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto;")
        logger.info("pgcrypto 확장 기능이 활성화되었습니다.")

        # projects 테이블 생성
        logger.info("projects 테이블을 생성하는 중...")

        create_table_query = """
        CREATE TABLE IF NOT EXISTS projects (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            title TEXT NOT NULL,
            slug TEXT NOT NULL UNIQUE,
            short_description TEXT NOT NULL DEFAULT '',
            long_description TEXT NOT NULL DEFAULT '',
            featured_image TEXT,
            featured BOOLEAN NOT NULL DEFAULT FALSE,
            created_at TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP
        );
        """

        cursor.execute(create_table_query)
        logger.info("projects 테이블이 생성되었습니다.")

        # 관련 프로젝트 조회를 위한 부분 인덱스
        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_projects_featured
            ON projects (created_at DESC) WHERE featured;
        """)
        logger.info("featured 인덱스가 생성되었습니다.")

        # 업데이트 트리거 함수 생성
        cursor.execute("""
            CREATE OR REPLACE FUNCTION update_updated_at_column()
            RETURNS TRIGGER AS $$
            BEGIN
               NEW.updated_at = CURRENT_TIMESTAMP;
               RETURN NEW;
            END;
            $$ language 'plpgsql';
        """)

        # 트리거가 이미 존재하는지 확인
        cursor.execute("""
            SELECT EXISTS (
                SELECT 1 FROM pg_trigger
                WHERE tgname = 'update_projects_updated_at'
            );
        """)

        trigger_exists = cursor.fetchone()[0]
        if not trigger_exists:
            cursor.execute("""
                CREATE TRIGGER update_projects_updated_at
                BEFORE UPDATE ON projects
                FOR EACH ROW EXECUTE FUNCTION update_updated_at_column();
            """)
            logger.info("업데이트 트리거가 생성되었습니다.")
        else:
            logger.info("업데이트 트리거가 이미 존재합니다.")

        logger.info("데이터베이스 스키마 설정이 완료되었습니다.")

        # 연결 종료
        cursor.close()
        conn.close()

    except Exception as e:
        logger.error(f"데이터베이스 설정 중 오류가 발생했습니다: {e}")
        raise


def check_database_status(
    connection_string="postgresql://user@localhost:5432/postgres",
):
    """
    데이터베이스 상태를 확인합니다.

    Args:
        connection_string (str): PostgreSQL 연결 문자열

    Returns:
        상태 정보 딕셔너리 (테이블, 인덱스, 프로젝트 수)
    """
    try:
        conn = psycopg.connect(connection_string)
        cursor = conn.cursor()

        # 테이블 존재 확인
        cursor.execute("""
            SELECT table_name FROM information_schema.tables
            WHERE table_schema = 'public' AND table_name = 'projects';
        """)
        tables = [table[0] for table in cursor.fetchall()]
        logger.info(f"존재하는 테이블: {tables}")

        # 인덱스 확인
        cursor.execute("""
            SELECT indexname FROM pg_indexes
            WHERE tablename = 'projects';
        """)
        indexes = [idx[0] for idx in cursor.fetchall()]
        logger.info(f"projects 테이블의 인덱스: {indexes}")

        project_count = 0
        if tables:
            cursor.execute("SELECT COUNT(*) FROM projects;")
            project_count = cursor.fetchone()[0]
            logger.info(f"저장된 프로젝트 수: {project_count}")

        cursor.close()
        conn.close()

        return {"tables": tables, "indexes": indexes, "project_count": project_count}

    except Exception as e:
        logger.error(f"데이터베이스 상태 확인 중 오류가 발생했습니다: {e}")
        raise
