"""Utility functions for showcase package."""

from .format import format_outline, variant_url

__all__ = ["format_outline", "variant_url"]
