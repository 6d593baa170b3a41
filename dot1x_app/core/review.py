"""Configuration review pass.

Reports configuration-quality observations as findings. Nothing here
raises and nothing blocks rendering.
"""

import logging
from typing import Optional

from dot1x_app.core.server_pool import ServerPool
from dot1x_app.schemas.config import FindingSeverity, ReviewFinding
from dot1x_app.schemas.deployment import AuthMethod, DeploymentParameters
from dot1x_app.schemas.servers import ServerKind
from dot1x_app.schemas.targets import VendorTarget

logger = logging.getLogger(__name__)


def _finding(severity: FindingSeverity, code: str, message: str) -> ReviewFinding:
    return ReviewFinding(severity=severity, code=code, message=message)


def _review_servers(pool: ServerPool) -> list[ReviewFinding]:
    radius_count = len(pool.list_configured(ServerKind.RADIUS))
    radsec_count = len(pool.list_configured(ServerKind.RADSEC))

    if radius_count == 0 and radsec_count == 0:
        return [_finding(
            FindingSeverity.ERROR, "no_radius_servers",
            "No RADIUS servers configured. At least one RADIUS server is required.",
        )]

    findings = []
    if radius_count == 1:
        findings.append(_finding(
            FindingSeverity.WARNING, "single_radius_server",
            "Only one RADIUS server configured. Consider adding a secondary server for redundancy.",
        ))
    elif radius_count > 1:
        findings.append(_finding(
            FindingSeverity.SUCCESS, "redundant_radius_servers",
            f"{radius_count} RADIUS servers configured for redundancy.",
        ))
    if radsec_count:
        findings.append(_finding(
            FindingSeverity.SUCCESS, "radsec_configured",
            "RadSec is configured; RADIUS traffic to those servers is encrypted.",
        ))
    return findings


def _review_parameters(params: DeploymentParameters) -> list[ReviewFinding]:
    findings = []

    if params.mab_enabled and not params.use_mab:
        findings.append(_finding(
            FindingSeverity.WARNING, "mab_checkbox_mismatch",
            "MAB selected in authentication method but MAB checkbox is not enabled",
        ))

    if params.use_coa:
        findings.append(_finding(
            FindingSeverity.SUCCESS, "coa_enabled",
            "Change of Authorization (CoA) is enabled for dynamic policy updates.",
        ))
    else:
        findings.append(_finding(
            FindingSeverity.WARNING, "coa_disabled",
            "CoA is not enabled. Policy changes will only apply after reauthentication.",
        ))

    if not params.data_vlan:
        findings.append(_finding(
            FindingSeverity.ERROR, "data_vlan_missing",
            "Data VLAN is required.",
        ))

    if params.auth_method != AuthMethod.DOT1X_ONLY and not params.guest_vlan:
        findings.append(_finding(
            FindingSeverity.WARNING, "guest_vlan_missing",
            "A guest VLAN is recommended when MAB is part of the authentication method.",
        ))

    if not params.critical_vlan:
        findings.append(_finding(
            FindingSeverity.WARNING, "critical_vlan_missing",
            "No critical VLAN configured. Endpoints will be denied while RADIUS is unreachable.",
        ))

    if params.is_open:
        findings.append(_finding(
            FindingSeverity.SUCCESS, "monitor_mode",
            "Open mode lets you monitor authentication results before enforcing access.",
        ))
    else:
        findings.append(_finding(
            FindingSeverity.WARNING, "closed_mode",
            "Closed mode blocks unauthenticated endpoints. Validate in open mode before enforcing.",
        ))
    return findings


def review_configuration(
    params: DeploymentParameters,
    pool: ServerPool,
    target: Optional[VendorTarget] = None,
) -> list[ReviewFinding]:
    """Review parameters and servers, optionally for a specific target."""
    findings = _review_servers(pool) + _review_parameters(params)

    if target is not None and target.vendor == "cisco" and target.platform in ("ios", "ios-xe"):
        findings.append(_finding(
            FindingSeverity.SUCCESS, "ibns_policy",
            "Cisco IBNS 2.0 identity policy will be generated for this platform.",
        ))

    logger.debug(
        f"Review produced {len(findings)} finding(s), "
        f"{sum(1 for f in findings if f.severity == FindingSeverity.ERROR)} error(s)"
    )
    return findings
