"""Single-target generation: the renderer output plus fixed augmentations.

``generate_config`` is the only place augmentations are applied, in this
order: project header, vendor render, TACACS+ block, best-practices
footer.
"""

import logging
import re
from typing import Optional

from dot1x_app.core.renderers.base import get_template_environment
from dot1x_app.core.renderers.registry import RendererRegistry, get_registry
from dot1x_app.core.server_pool import ServerPool
from dot1x_app.schemas.deployment import DeploymentParameters
from dot1x_app.schemas.servers import ServerKind
from dot1x_app.schemas.targets import ProjectMetadata, VendorTarget

logger = logging.getLogger(__name__)

AUGMENTATION_TEMPLATE = "augmentations.j2"


def _macros():
    return get_template_environment().get_template(AUGMENTATION_TEMPLATE).module


def tacacs_dialect(vendor: str, platform: str) -> str:
    """Name of the TACACS+ macro used for a target."""
    if vendor == "cisco" and platform in ("ios", "ios-xe"):
        return "tacacs_cisco_ios"
    if vendor == "cisco" and platform == "nx-os":
        return "tacacs_cisco_nx_os"
    if vendor == "aruba" and platform == "aos-cx":
        return "tacacs_aruba_aos_cx"
    if vendor == "juniper":
        return "tacacs_juniper"
    return "tacacs_generic"


def render_project_header(project: ProjectMetadata) -> str:
    return str(_macros().project_header(project))


def render_tacacs_block(target: VendorTarget, pool: ServerPool) -> str:
    """TACACS+ block for the target's dialect, empty without configured servers."""
    servers = list(pool.list_configured(ServerKind.TACACS))
    if not servers:
        return ""
    macro = getattr(_macros(), tacacs_dialect(target.vendor, target.platform))
    return str(macro(servers))


def render_best_practices() -> str:
    return str(_macros().best_practices())


def render_banner(target: VendorTarget) -> str:
    return str(_macros().banner(target))


def generate_config(
    target: VendorTarget,
    params: DeploymentParameters,
    pool: ServerPool,
    project: Optional[ProjectMetadata] = None,
    registry: Optional[RendererRegistry] = None,
) -> str:
    """Render one target with its header, TACACS+ block and footer."""
    registry = registry or get_registry()
    blocks = []
    if project is not None:
        blocks.append(render_project_header(project))
    blocks.append(registry.render(target.vendor, target.platform, params, pool))
    tacacs = render_tacacs_block(target, pool)
    if tacacs:
        blocks.append(tacacs)
    blocks.append(render_best_practices())
    logger.info(f"Generated configuration for {target}")
    return "\n".join(blocks)


def download_filename(target: VendorTarget, project: Optional[ProjectMetadata] = None) -> str:
    """File name offered for a downloaded configuration.

    The company name, when present, is sanitized to ``[A-Za-z0-9_]`` and
    used as a prefix. Vendor and platform keep ``.`` and ``-`` so that
    identifiers such as ``ios-xe`` are unchanged.
    """
    prefix = ""
    if project is not None and project.company_name:
        prefix = re.sub(r"[^a-zA-Z0-9]", "_", project.company_name) + "_"
    vendor = re.sub(r"[^a-zA-Z0-9.-]", "_", target.vendor)
    platform = re.sub(r"[^a-zA-Z0-9.-]", "_", target.platform)
    return f"{prefix}{vendor}_{platform}_802.1x_config.txt"
