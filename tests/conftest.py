import uuid
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from showcase.core.config import Config
from showcase.core.store import (
    EDITABLE_FIELDS,
    REQUIRED_FIELDS,
    InvalidProjectData,
    ProjectNotFound,
)
from showcase.models.project import ProjectRecord
from showcase.web import create_app

ADMIN_TOKEN = "s3cret-token"

BODY = """
# Ignored title

Intro paragraph with a [link](https://example.com).

## Intro

### Background

## Results
"""


class StubConfig(Config):
    ADMIN_API_TOKEN = ADMIN_TOKEN
    SITE_NAME = "zg0ul's Projects"
    SITE_URL = "https://example.test/"
    RELATED_PROJECTS_LIMIT = 2


class InMemoryStore:
    """ProjectStore와 같은 인터페이스의 메모리 저장소"""

    def __init__(self, projects=()):
        self.projects = {p.id: p for p in projects}
        self.fail_with = None

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def _validate(self, fields, required=()):
        if not isinstance(fields, dict) or not fields:
            raise InvalidProjectData("empty body")
        unknown = set(fields) - set(EDITABLE_FIELDS)
        if unknown:
            raise InvalidProjectData(f"unknown fields: {sorted(unknown)}")
        if any(not fields.get(name) for name in required):
            raise InvalidProjectData("missing fields")

    def fetch_by_slug(self, slug):
        self._check()
        for project in self.projects.values():
            if project.slug == slug:
                return project
        return None

    def get(self, project_id):
        self._check()
        if project_id not in self.projects:
            raise ProjectNotFound(f"Project {project_id} not found")
        return self.projects[project_id]

    def list(self, limit=None):
        self._check()
        return list(self.projects.values())[:limit]

    def related(self, project_id, limit=2):
        self._check()
        others = [
            p for p in self.projects.values() if p.featured and p.id != project_id
        ]
        return others[:limit]

    def create(self, fields):
        self._check()
        self._validate(fields, REQUIRED_FIELDS)
        project = ProjectRecord(id=str(uuid.uuid4()), **fields)
        self.projects[project.id] = project
        return project

    def update(self, project_id, fields):
        self._check()
        self._validate(fields)
        if project_id not in self.projects:
            return []
        project = self.projects[project_id]
        for key, value in fields.items():
            setattr(project, key, value)
        return [project]

    def delete(self, project_id):
        self._check()
        return self.projects.pop(project_id, None) is not None


def make_project(slug, featured=False, **overrides):
    values = {
        "id": str(uuid.uuid5(uuid.NAMESPACE_URL, slug)),
        "title": slug.replace("-", " ").title(),
        "slug": slug,
        "short_description": f"About {slug}",
        "long_description": BODY,
        "featured_image": f"https://cdn.example.test/{slug}.png",
        "featured": featured,
        "created_at": datetime(2024, 5, 1, tzinfo=timezone.utc),
    }
    values.update(overrides)
    return ProjectRecord(**values)


@pytest.fixture
def store():
    return InMemoryStore(
        [
            make_project("portfolio-site", featured=True),
            make_project("robot-arm", featured=True),
            make_project("chess-engine", featured=True),
            make_project("old-blog"),
        ]
    )


@pytest.fixture
def client(store):
    app = create_app(config=StubConfig(), store=store)
    return TestClient(app)


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
