"""Preconditions checked before any text is rendered."""

from dot1x_app.core.exceptions import EmptyServerPoolError, MissingRequiredFieldError
from dot1x_app.core.server_pool import ServerPool
from dot1x_app.schemas.deployment import DeploymentParameters
from dot1x_app.schemas.targets import VendorTarget


def check_target(target: VendorTarget) -> None:
    if not target.vendor.strip():
        raise MissingRequiredFieldError("vendor", "Please select a vendor.")
    if not target.platform.strip():
        raise MissingRequiredFieldError("platform", "Please select a platform.")


def check_render_preconditions(
    target: VendorTarget,
    params: DeploymentParameters,
    pool: ServerPool,
) -> None:
    """Raise if the inputs cannot produce a usable configuration.

    Renderers themselves are permissive and will emit degenerate text for
    these inputs; callers that want to refuse them check here first.

    Raises:
        MissingRequiredFieldError: Vendor, platform or data VLAN is empty
        EmptyServerPoolError: No configured RADIUS or RadSec server
    """
    check_target(target)
    if not params.data_vlan:
        raise MissingRequiredFieldError("data_vlan", "Data VLAN is required.")
    if not pool.has_auth_servers():
        raise EmptyServerPoolError()
