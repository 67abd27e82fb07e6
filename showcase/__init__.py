"""
showcase - 포트폴리오 프로젝트 페이지 및 관리자 API

프로젝트 본문(Markdown)을 렌더링하고 h2/h3 헤딩으로 목차를 만들어
서버 렌더링 페이지로 제공하며, 관리자용 프로젝트 CRUD API를 제공합니다.
"""

__version__ = "0.1.0"

# Core classes and functions
from .core.config import Config, validate_config
from .core.database import setup_database, check_database_status
from .core.headings import slugify, extract_headings, apply_anchors
from .core.renderer import MarkdownRenderer, RenderedContent
from .core.store import ProjectStore, StoreError, ProjectNotFound, InvalidProjectData
from .core.toc import TableOfContents, TocState, Presentation, build_outline
from .core.viewport import Viewport, StaticViewport

# Data models
from .models.toc import HeadingEntry, OutlineNode
from .models.project import ProjectRecord

# Utilities
from .utils.format import format_outline, variant_url

__all__ = [
    # Version info
    "__version__",
    # Core classes
    "Config",
    "MarkdownRenderer",
    "RenderedContent",
    "ProjectStore",
    "TableOfContents",
    "TocState",
    "Presentation",
    "Viewport",
    "StaticViewport",
    # Errors
    "StoreError",
    "ProjectNotFound",
    "InvalidProjectData",
    # Data models
    "HeadingEntry",
    "OutlineNode",
    "ProjectRecord",
    # Functions
    "validate_config",
    "setup_database",
    "check_database_status",
    "slugify",
    "extract_headings",
    "apply_anchors",
    "build_outline",
    # Utilities
    "format_outline",
    "variant_url",
]
