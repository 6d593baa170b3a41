"""Vendors and platforms offered for selection."""

from pydantic import BaseModel, Field


class PlatformInfo(BaseModel):
    id: str = Field(..., description="Platform identifier")
    name: str = Field(..., description="Display name")


class VendorInfo(BaseModel):
    id: str = Field(..., description="Vendor identifier")
    name: str = Field(..., description="Display name")
    platforms: list[PlatformInfo] = Field(default_factory=list, description="Platforms for this vendor")


def _vendor(vendor_id: str, name: str, *platforms: tuple[str, str]) -> VendorInfo:
    return VendorInfo(
        id=vendor_id,
        name=name,
        platforms=[PlatformInfo(id=pid, name=pname) for pid, pname in platforms],
    )


VENDOR_CATALOG: list[VendorInfo] = [
    _vendor("cisco", "Cisco",
            ("ios-xe", "IOS-XE"), ("ios", "IOS"), ("nx-os", "NX-OS"), ("wlc", "Wireless LAN Controller")),
    _vendor("aruba", "Aruba", ("aos-cx", "AOS-CX"), ("aos-switch", "AOS-Switch")),
    _vendor("juniper", "Juniper", ("ex", "EX Series"), ("qfx", "QFX Series"), ("srx", "SRX Series")),
    _vendor("fortinet", "Fortinet", ("fortiswitch", "FortiSwitch"), ("fortigate", "FortiGate")),
    _vendor("arista", "Arista", ("eos", "EOS"), ("cloudvision", "CloudVision")),
    _vendor("extreme", "Extreme Networks", ("exos", "EXOS"), ("voss", "VOSS")),
    _vendor("huawei", "Huawei", ("vrp", "VRP")),
    _vendor("alcatel", "Alcatel-Lucent", ("omniswitch", "OmniSwitch")),
    _vendor("ubiquiti", "Ubiquiti", ("unifi", "UniFi")),
    _vendor("hp", "HP", ("procurve", "ProCurve")),
    _vendor("dell", "Dell", ("os10", "OS10")),
    _vendor("netgear", "Netgear", ("managed", "Managed Switches")),
    _vendor("ruckus", "Ruckus", ("icx", "ICX")),
    _vendor("brocade", "Brocade", ("fastiron", "FastIron")),
    _vendor("paloalto", "Palo Alto Networks", ("pan-os", "PAN-OS")),
    _vendor("checkpoint", "Check Point", ("gaia", "Gaia")),
    _vendor("sonicwall", "SonicWall", ("sonicos", "SonicOS")),
    _vendor("portnox", "Portnox", ("cloud", "Portnox Cloud")),
]


def get_vendor(vendor_id: str) -> VendorInfo | None:
    for vendor in VENDOR_CATALOG:
        if vendor.id == vendor_id:
            return vendor
    return None
