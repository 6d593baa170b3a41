"""Pydantic schemas for the 802.1X deployment parameter set."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class AuthMethod(str, Enum):
    """Port authentication method."""
    DOT1X_ONLY = "dot1x-only"
    MAB_ONLY = "mab-only"
    DOT1X_MAB = "dot1x-mab"


class PortControlMode(str, Enum):
    """Closed mode blocks traffic until authorized; open mode admits it."""
    CLOSED = "closed"
    OPEN = "open"


class HostMode(str, Enum):
    """How many endpoints a single authenticated port admits."""
    SINGLE_HOST = "single-host"
    MULTI_HOST = "multi-host"
    MULTI_DOMAIN = "multi-domain"
    MULTI_AUTH = "multi-auth"


class VlanAssignment(BaseModel):
    """A VLAN emitted by the VLAN section."""

    role: str = Field(..., description="Parameter the VLAN came from (data, voice, guest, critical, auth_fail)")
    vlan_id: str = Field(..., description="VLAN identifier, emitted verbatim")
    name: str = Field(..., description="VLAN name, e.g. Data_VLAN")


# Display names for each VLAN role in emission order
VLAN_NAMES: dict[str, str] = {
    "data": "Data_VLAN",
    "voice": "Voice_VLAN",
    "guest": "Guest_VLAN",
    "critical": "Critical_VLAN",
    "auth_fail": "Auth_Fail_VLAN",
}


class DeploymentParameters(BaseModel):
    """Authentication, VLAN and timer settings for one deployment.

    ``auth_method`` decides which of 802.1X and MAB are rendered.
    ``use_mab`` is advisory: it only feeds the review pass, which warns
    when it disagrees with the method.
    """

    auth_method: AuthMethod = Field(default=AuthMethod.DOT1X_MAB, description="Authentication method")
    port_control_mode: PortControlMode = Field(default=PortControlMode.CLOSED, description="Port control mode")
    host_mode: HostMode = Field(default=HostMode.MULTI_AUTH, description="Host mode")

    data_vlan: str = Field(..., description="Access VLAN for authorized endpoints")
    voice_vlan: Optional[str] = Field(None, description="Voice VLAN")
    guest_vlan: Optional[str] = Field(None, description="VLAN for endpoints that fail MAB")
    critical_vlan: Optional[str] = Field(None, description="VLAN used while RADIUS is unreachable")
    auth_fail_vlan: Optional[str] = Field(None, description="VLAN for endpoints that fail 802.1X")

    use_mab: bool = Field(default=True, description="MAC Authentication Bypass checkbox")
    use_coa: bool = Field(default=True, description="Enable Change of Authorization")
    use_local_fallback: bool = Field(default=False, description="Fall back to local authentication")

    # Timers are emitted verbatim, no range checks
    reauth_period_seconds: int = Field(default=3600, description="Reauthentication period")
    server_timeout_seconds: int = Field(default=5, description="RADIUS server timeout")
    tx_period_seconds: int = Field(default=30, description="EAPOL transmit period")
    quiet_period_seconds: int = Field(default=60, description="Quiet period after a failure")

    @field_validator(
        "data_vlan", "voice_vlan", "guest_vlan", "critical_vlan", "auth_fail_vlan",
        mode="before",
    )
    @classmethod
    def coerce_vlan(cls, value: Any) -> Any:
        """Accept numeric VLAN ids and strip surrounding whitespace."""
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return str(value)
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def dot1x_enabled(self) -> bool:
        return self.auth_method in (AuthMethod.DOT1X_ONLY, AuthMethod.DOT1X_MAB)

    @property
    def mab_enabled(self) -> bool:
        return self.auth_method in (AuthMethod.MAB_ONLY, AuthMethod.DOT1X_MAB)

    @property
    def is_open(self) -> bool:
        return self.port_control_mode == PortControlMode.OPEN

    def configured_vlans(self) -> list[VlanAssignment]:
        """VLANs to declare, data VLAN first and always present."""
        vlans = [VlanAssignment(role="data", vlan_id=self.data_vlan, name=VLAN_NAMES["data"])]
        optional = (
            ("voice", self.voice_vlan),
            ("guest", self.guest_vlan),
            ("critical", self.critical_vlan),
            ("auth_fail", self.auth_fail_vlan),
        )
        for role, vlan_id in optional:
            if vlan_id:
                vlans.append(VlanAssignment(role=role, vlan_id=vlan_id, name=VLAN_NAMES[role]))
        return vlans
