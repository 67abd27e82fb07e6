"""Data models for showcase package."""

from .toc import HeadingEntry, OutlineNode
from .project import ProjectRecord

__all__ = ["HeadingEntry", "OutlineNode", "ProjectRecord"]
