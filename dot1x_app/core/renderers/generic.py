"""Vendor-neutral fallback renderer."""

from dot1x_app.core.renderers.base import VendorRenderer


class GenericRenderer(VendorRenderer):
    """Baseline RADIUS, VLAN and interface blocks for any vendor.

    Built per lookup with the requested vendor and platform so the
    output is labelled with exactly what the caller asked for.
    """

    vendor = "generic"
    platform = "generic"
    template_name = "generic.j2"
    interface_setting = "generic_interface"
    sections = (
        "radius_servers",
        "aaa_methods",
        "dot1x_global",
        "vlans",
        "interface",
    )
