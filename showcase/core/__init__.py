"""Core functionality for showcase package."""

from .config import Config, validate_config
from .database import setup_database, check_database_status
from .headings import slugify, extract_headings, apply_anchors
from .renderer import MarkdownRenderer, RenderedContent
from .store import (
    ProjectStore,
    StoreError,
    ProjectNotFound,
    InvalidProjectData,
)
from .toc import (
    TableOfContents,
    TocState,
    Presentation,
    build_outline,
    find_active,
)
from .viewport import Viewport, StaticViewport, FrameThrottle

__all__ = [
    "Config",
    "validate_config",
    "setup_database",
    "check_database_status",
    "slugify",
    "extract_headings",
    "apply_anchors",
    "MarkdownRenderer",
    "RenderedContent",
    "ProjectStore",
    "StoreError",
    "ProjectNotFound",
    "InvalidProjectData",
    "TableOfContents",
    "TocState",
    "Presentation",
    "build_outline",
    "find_active",
    "Viewport",
    "StaticViewport",
    "FrameThrottle",
]
