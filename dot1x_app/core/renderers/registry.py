"""Lookup table from (vendor, platform) to a renderer."""

import logging
from functools import lru_cache
from typing import Optional

from dot1x_app.core.renderers.aruba_aos_cx import ArubaAosCxRenderer
from dot1x_app.core.renderers.base import VendorRenderer
from dot1x_app.core.renderers.cisco_ios_xe import CiscoIosXeRenderer
from dot1x_app.core.renderers.cisco_nx_os import CiscoNxOsRenderer
from dot1x_app.core.renderers.generic import GenericRenderer
from dot1x_app.core.server_pool import ServerPool
from dot1x_app.schemas.deployment import DeploymentParameters
from dot1x_app.schemas.targets import VendorTarget

logger = logging.getLogger(__name__)


class RendererRegistry:
    """Exact-match renderer lookup with a generic fallback.

    A miss is never an error: unknown targets get a ``GenericRenderer``
    labelled with the requested vendor and platform.
    """

    def __init__(self):
        self._renderers: dict[tuple[str, str], VendorRenderer] = {}

    def register(
        self,
        renderer_cls: type[VendorRenderer],
        vendor: Optional[str] = None,
        platform: Optional[str] = None,
    ) -> VendorRenderer:
        """Register a renderer class under its own key or an alias."""
        renderer = renderer_cls(vendor, platform)
        key = (renderer.vendor, renderer.platform)
        if key in self._renderers:
            logger.warning(f"Replacing renderer for {key[0]}/{key[1]}")
        self._renderers[key] = renderer
        logger.debug(f"Registered {renderer!r}")
        return renderer

    def has(self, vendor: str, platform: str) -> bool:
        return (vendor, platform) in self._renderers

    def get(self, vendor: str, platform: str) -> VendorRenderer:
        renderer = self._renderers.get((vendor, platform))
        if renderer is None:
            logger.info(f"No renderer for {vendor}/{platform}, using generic template")
            return GenericRenderer(vendor, platform)
        return renderer

    def list_registered(self) -> list[VendorTarget]:
        """Registered targets in registration order."""
        return [
            VendorTarget(vendor=vendor, platform=platform)
            for vendor, platform in self._renderers
        ]

    def render(
        self,
        vendor: str,
        platform: str,
        params: DeploymentParameters,
        pool: ServerPool,
    ) -> str:
        return self.get(vendor, platform).render(params, pool)


def build_default_registry() -> RendererRegistry:
    registry = RendererRegistry()
    registry.register(CiscoIosXeRenderer)
    registry.register(CiscoIosXeRenderer, platform="ios")
    registry.register(CiscoNxOsRenderer)
    registry.register(ArubaAosCxRenderer)
    return registry


@lru_cache(maxsize=1)
def get_registry() -> RendererRegistry:
    """Process-wide registry of the built-in renderers."""
    return build_default_registry()
