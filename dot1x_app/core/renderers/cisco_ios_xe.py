"""Cisco IOS-XE renderer (also used for classic IOS)."""

from dot1x_app.core.renderers.base import VendorRenderer


class CiscoIosXeRenderer(VendorRenderer):
    """IBNS 2.0 identity-based networking with named RADIUS servers."""

    vendor = "cisco"
    platform = "ios-xe"
    template_name = "cisco_ios_xe.j2"
    interface_setting = "ios_xe_interface"
    sections = (
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
