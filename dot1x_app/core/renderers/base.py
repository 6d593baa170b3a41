"""Base class for vendor configuration renderers.

A renderer is an ordered list of named sections. Each section is a Jinja2
macro in the renderer's template file; sections a dialect does not
override come from ``common.j2``. Section output is joined with blank
lines, and empty sections are dropped.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, Template

from dot1x_app.config import get_settings
from dot1x_app.core.server_pool import ServerPool
from dot1x_app.schemas.deployment import DeploymentParameters, VlanAssignment
from dot1x_app.schemas.servers import RadiusServer, RadSecServer, ServerKind

logger = logging.getLogger(__name__)

# Canonical section order. Renderers may skip sections but never reorder.
SECTION_ORDER: tuple[str, ...] = (
    "aaa_enable",
    "radius_servers",
    "radius_group",
    "radsec_servers",
    "aaa_methods",
    "dot1x_global",
    "vlans",
    "access_policy",
    "interface",
    "device_tracking",
    "coa",
)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
COMMON_TEMPLATE = "common.j2"


@lru_cache(maxsize=1)
def get_template_environment() -> Environment:
    """Shared Jinja2 environment for all configuration templates."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


@dataclass(frozen=True)
class PolicyBranch:
    """One class of an identity policy's authentication-failure event."""

    sequence: int
    class_name: str
    matches: tuple[str, ...]
    actions: tuple[str, ...]


@dataclass(frozen=True)
class RenderContext:
    """Everything a section macro reads, resolved once per render."""

    vendor: str
    platform: str
    generator: str
    interface: str
    params: DeploymentParameters
    radius: list[RadiusServer] = field(default_factory=list)
    radsec: list[RadSecServer] = field(default_factory=list)
    vlans: list[VlanAssignment] = field(default_factory=list)
    failure_branches: list[PolicyBranch] = field(default_factory=list)

    @property
    def use_dot1x(self) -> bool:
        return self.params.dot1x_enabled

    @property
    def use_mab(self) -> bool:
        return self.params.mab_enabled

    @property
    def open_mode(self) -> bool:
        return self.params.is_open

    @property
    def host_mode(self) -> str:
        return self.params.host_mode.value

    @property
    def local_suffix(self) -> str:
        return " local" if self.params.use_local_fallback else ""

    @property
    def coa_server(self) -> Optional[RadiusServer]:
        """Dynamic-authorization client: the first configured RADIUS server."""
        if not self.params.use_coa or not self.radius:
            return None
        return self.radius[0]

    def coa_port_enabled(self, server: RadiusServer) -> bool:
        return self.params.use_coa and server.coa_enabled


def build_failure_branches(params: DeploymentParameters) -> list[PolicyBranch]:
    """Authentication-failure handling for identity-policy dialects.

    Branches without an action are left out, so an unset VLAN never
    produces an empty class.
    """
    branches = []
    if params.critical_vlan:
        branches.append(PolicyBranch(
            sequence=10,
            class_name="AAA_SVR_DOWN_UNAUTHD_HOST",
            matches=("match result-type aaa-timeout", "match authorization-status unauthorized"),
            actions=(f"authorize using vlan {params.critical_vlan}",),
        ))
    if params.dot1x_enabled and params.auth_fail_vlan:
        branches.append(PolicyBranch(
            sequence=20,
            class_name="DOT1X_FAILED",
            matches=("match method dot1x", "match result-type method dot1x authoritative"),
            actions=(f"authorize using vlan {params.auth_fail_vlan}",),
        ))
    if params.mab_enabled and params.guest_vlan:
        branches.append(PolicyBranch(
            sequence=30,
            class_name="MAB_FAILED",
            matches=("match method mab", "match result-type method mab authoritative"),
            actions=(f"authorize using vlan {params.guest_vlan}",),
        ))
    if params.dot1x_enabled:
        actions = ["terminate dot1x"]
        if params.mab_enabled:
            actions.append("authenticate using mab priority 20")
        branches.append(PolicyBranch(
            sequence=40,
            class_name="DOT1X_NO_RESP",
            matches=("match method dot1x", "match result-type method dot1x agent-not-found"),
            actions=tuple(actions),
        ))
    return branches


class VendorRenderer:
    """Renders one vendor dialect from deployment parameters and a server pool."""

    vendor: str = ""
    platform: str = ""
    template_name: str = COMMON_TEMPLATE
    interface_setting: str = "generic_interface"
    sections: tuple[str, ...] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        unknown = [name for name in cls.sections if name not in SECTION_ORDER]
        if unknown:
            raise TypeError(f"{cls.__name__} declares unknown sections: {unknown}")
        positions = [SECTION_ORDER.index(name) for name in cls.sections]
        if positions != sorted(positions):
            raise TypeError(f"{cls.__name__} sections are out of canonical order")

    def __init__(self, vendor: Optional[str] = None, platform: Optional[str] = None):
        self.vendor = vendor if vendor is not None else self.vendor
        self.platform = platform if platform is not None else self.platform
        env = get_template_environment()
        self._template: Template = env.get_template(self.template_name)
        self._common: Template = env.get_template(COMMON_TEMPLATE)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.vendor!r}, {self.platform!r})"

    def build_context(self, params: DeploymentParameters, pool: ServerPool) -> RenderContext:
        settings = get_settings()
        generator = settings.generator_name
        if settings.generator_url:
            generator = f"{generator} ({settings.generator_url})"
        return RenderContext(
            vendor=self.vendor,
            platform=self.platform,
            generator=generator,
            interface=getattr(settings, self.interface_setting),
            params=params,
            radius=list(pool.list_configured(ServerKind.RADIUS)),
            radsec=list(pool.list_configured(ServerKind.RADSEC)),
            vlans=params.configured_vlans(),
            failure_branches=build_failure_branches(params),
        )

    def _macro(self, name: str):
        macro = getattr(self._template.module, name, None)
        if macro is None:
            macro = getattr(self._common.module, name)
        return macro

    def _render_block(self, name: str, context: RenderContext) -> str:
        return str(self._macro(name)(context))

    def render_section(self, name: str, params: DeploymentParameters, pool: ServerPool) -> str:
        """Render a single named section, for inspection and tests."""
        if name != "preamble" and name not in self.sections:
            raise KeyError(f"{type(self).__name__} has no section {name!r}")
        return self._render_block(name, self.build_context(params, pool))

    def render(self, params: DeploymentParameters, pool: ServerPool) -> str:
        """Render the full configuration text for this dialect."""
        context = self.build_context(params, pool)
        blocks = [self._render_block("preamble", context)]
        for name in self.sections:
            block = self._render_block(name, context)
            if block.strip():
                blocks.append(block)
        logger.debug(
            f"Rendered {self.vendor}/{self.platform}: "
            f"{len(context.radius)} RADIUS, {len(context.radsec)} RadSec server(s)"
        )
        return "\n".join(blocks)
