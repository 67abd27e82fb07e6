"""Project record data models."""

from typing import Dict, Any, Optional
from dataclasses import dataclass, fields
from datetime import datetime


@dataclass
class ProjectRecord:
    """포트폴리오 프로젝트 레코드"""

    id: str
    title: str
    slug: str
    short_description: str = ""
    long_description: str = ""
    featured_image: Optional[str] = None
    featured: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "ProjectRecord":
        """
        데이터베이스 행에서 레코드를 생성합니다.

        Args:
            row: 컬럼 이름을 키로 가지는 행

        Returns:
            ProjectRecord 인스턴스
        """
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in row.items() if key in known}
        values["id"] = str(values["id"])
        for key in ("short_description", "long_description"):
            if values.get(key) is None:
                values[key] = ""
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """JSON 응답용 딕셔너리로 변환합니다."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, datetime):
                value = value.isoformat()
            data[f.name] = value
        return data
