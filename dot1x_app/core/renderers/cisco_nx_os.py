"""Cisco NX-OS renderer."""

from dot1x_app.core.renderers.base import VendorRenderer


class CiscoNxOsRenderer(VendorRenderer):
    """Data-center switches; RADIUS hosts are referenced by address."""

    vendor = "cisco"
    platform = "nx-os"
    template_name = "cisco_nx_os.j2"
    interface_setting = "nx_os_interface"
    sections = (
        "aaa_enable",
        "radius_servers",
        "radius_group",
        "aaa_methods",
        "dot1x_global",
        "vlans",
        "interface",
        "coa",
    )
