"""Vendor configuration renderers."""

from .base import SECTION_ORDER, RenderContext, VendorRenderer
from .registry import RendererRegistry, build_default_registry, get_registry

__all__ = [
    "SECTION_ORDER",
    "RenderContext",
    "VendorRenderer",
    "RendererRegistry",
    "build_default_registry",
    "get_registry",
]
