"""Multi-vendor rendering into one combined document."""

import logging
from typing import Iterable, Optional

from dot1x_app.core.augmentations import generate_config, render_banner
from dot1x_app.core.renderers.registry import RendererRegistry
from dot1x_app.core.server_pool import ServerPool
from dot1x_app.schemas.config import RenderResult
from dot1x_app.schemas.deployment import DeploymentParameters
from dot1x_app.schemas.targets import ProjectMetadata, VendorTarget

logger = logging.getLogger(__name__)

NO_TARGETS_MESSAGE = "No vendors selected for multi-vendor configuration."


def render_all(
    targets: Iterable[VendorTarget],
    params: DeploymentParameters,
    pool: ServerPool,
    project: Optional[ProjectMetadata] = None,
    registry: Optional[RendererRegistry] = None,
) -> RenderResult:
    """Render every target in order, each preceded by a banner.

    An empty target list is reported in the result rather than raised.
    """
    targets = list(targets)
    if not targets:
        logger.warning("Multi-vendor render requested with no targets")
        return RenderResult(success=False, config="", error=NO_TARGETS_MESSAGE)

    parts = []
    for target in targets:
        parts.append(render_banner(target))
        parts.append(generate_config(target, params, pool, project=project, registry=registry))

    logger.info(f"Rendered {len(targets)} target(s)")
    return RenderResult(success=True, config="".join(parts), targets=targets)
