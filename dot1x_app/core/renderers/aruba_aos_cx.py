"""Aruba AOS-CX renderer."""

from dot1x_app.core.renderers.base import VendorRenderer


class ArubaAosCxRenderer(VendorRenderer):
    vendor = "aruba"
    platform = "aos-cx"
    template_name = "aruba_aos_cx.j2"
    interface_setting = "aos_cx_interface"
    sections = (
        "aaa_enable",
        "radius_servers",
        "vlans",
        "interface",
    )
