"""Unit tests for the Cisco IOS-XE renderer."""

import pytest

from dot1x_app.core.renderers.base import build_failure_branches
from dot1x_app.core.renderers.cisco_ios_xe import CiscoIosXeRenderer
from dot1x_app.core.server_pool import ServerPool
from dot1x_app.schemas.deployment import AuthMethod, DeploymentParameters, PortControlMode
from dot1x_app.schemas.servers import RadiusServer, RadSecServer


@pytest.fixture
def renderer() -> CiscoIosXeRenderer:
    return CiscoIosXeRenderer()


@pytest.fixture
def access_pool() -> ServerPool:
    return ServerPool(radius=[RadiusServer(address="10.1.1.100", shared_secret="secret1")])


@pytest.fixture
def access_params() -> DeploymentParameters:
    return DeploymentParameters(
        data_vlan="10",
        voice_vlan="",
        auth_method=AuthMethod.DOT1X_MAB,
        use_mab=True,
        host_mode="multi-auth",
        port_control_mode=PortControlMode.CLOSED,
    )


def interface_block(config: str) -> str:
    """Lines of the access interface block."""
    start = config.index("interface GigabitEthernet1/0/1\n description")
    end = config.index("service-policy type control subscriber DOT1X_POLICY", start)
    return config[start:end]


@pytest.mark.unit
class TestCiscoIosXeRenderer:
    """Test IOS-XE configuration output."""

    def test_basic_dot1x_with_mab(self, renderer, access_params, access_pool):
        """Test single-server 802.1X with MAB fallback."""
        config = renderer.render(access_params, access_pool)

        assert config.startswith("! 802.1X Configuration for CISCO IOS-XE\n")
        assert "aaa new-model" in config
        assert "vlan 10\n name Data_VLAN" in config
        assert "radius server RADIUS-SRV-1\n address ipv4 10.1.1.100 auth-port 1812 acct-port 1813" in config
        assert " key secret1" in config
        assert "authentication host-mode multi-auth" in config
        assert "\n mab\n" in interface_block(config)
        assert " switchport voice vlan" not in config

    def test_radius_group_references_server_names(self, renderer, access_params):
        """Test the server group lists every generated server name."""
        pool = ServerPool(radius=[
            RadiusServer(address="10.1.1.100", shared_secret="secret1"),
            RadiusServer(address="10.1.1.101", shared_secret="secret2"),
        ])
        group = renderer.render_section("radius_group", access_params, pool)
        assert group == (
            "! RADIUS Server Group\n"
            "aaa group server radius RADIUS-SERVERS\n"
            " server name RADIUS-SRV-1\n"
            " server name RADIUS-SRV-2\n"
        )

    def test_coa_uses_first_server_only(self, renderer, access_params):
        """Test the dynamic-author client is the first configured server."""
        params = access_params.model_copy(update={"use_coa": True})
        pool = ServerPool(radius=[
            RadiusServer(address="10.1.1.100", shared_secret="secret1"),
            RadiusServer(address="10.1.1.200", shared_secret="secret2"),
        ])
        config = renderer.render(params, pool)

        assert "aaa server radius dynamic-author" in config
        assert " client 10.1.1.100 server-key secret1" in config
        assert "client 10.1.1.200" not in config
        assert "server-key secret2" not in config

    def test_coa_omitted_when_disabled(self, renderer, access_params, access_pool):
        """Test no dynamic-author block without CoA."""
        params = access_params.model_copy(update={"use_coa": False})
        config = renderer.render(params, access_pool)
        assert "dynamic-author" not in config

    def test_local_fallback_suffix(self, renderer, access_params, access_pool):
        """Test local fallback is appended to AAA method lists."""
        params = access_params.model_copy(update={"use_local_fallback": True})
        methods = renderer.render_section("aaa_methods", params, access_pool)
        assert "aaa authentication dot1x default group RADIUS-SERVERS local\n" in methods
        assert "aaa authorization network default group RADIUS-SERVERS local\n" in methods
        assert "aaa accounting dot1x default start-stop group RADIUS-SERVERS\n" in methods

    def test_no_local_fallback_by_default(self, renderer, access_params, access_pool):
        """Test AAA method lines end at the group name."""
        methods = renderer.render_section("aaa_methods", access_params, access_pool)
        assert "aaa authentication dot1x default group RADIUS-SERVERS\n" in methods

    def test_open_mode_adds_open_directive(self, renderer, access_params, access_pool):
        """Test open mode keeps auto port control and adds authentication open."""
        params = access_params.model_copy(update={"port_control_mode": PortControlMode.OPEN})
        interface = renderer.render_section("interface", params, access_pool)
        assert " authentication port-control auto\n authentication open\n" in interface

    def test_closed_mode_has_no_open_directive(self, renderer, access_params, access_pool):
        """Test closed mode omits authentication open."""
        interface = renderer.render_section("interface", access_params, access_pool)
        assert "authentication open" not in interface

    def test_unconfigured_servers_are_not_rendered(self, renderer, access_params):
        """Test entries missing a secret leave no trace in the output."""
        pool = ServerPool(radius=[
            RadiusServer(address="10.1.1.100", shared_secret="secret1"),
            RadiusServer(address="10.9.9.9", auth_port=1999, acct_port=1998),
        ])
        config = renderer.render(access_params, pool)
        assert "10.9.9.9" not in config
        assert "1999" not in config
        assert "RADIUS-SRV-2" not in config

    def test_radsec_section(self, renderer, access_params, access_pool):
        """Test RadSec servers get transport and identity check lines."""
        access_pool.radsec.append(RadSecServer(address="10.3.3.3", shared_secret="radsec"))
        section = renderer.render_section("radsec_servers", access_params, access_pool)

        assert "radius server RADSEC-SRV-1" in section
        assert " address ipv4 10.3.3.3 auth-port 2083 acct-port 2083" in section
        assert " transport tls" in section
        assert " server-identity check" in section
        assert " server name RADSEC-SRV-1" in section

    def test_radsec_section_empty_without_servers(self, renderer, access_params, access_pool):
        """Test the RadSec section renders nothing without RadSec servers."""
        assert renderer.render_section("radsec_servers", access_params, access_pool) == ""
        assert "RadSec" not in renderer.render(access_params, access_pool)

    def test_access_policy_failure_branches(self, renderer, access_params, access_pool):
        """Test failure branches for critical, auth-fail and guest VLANs."""
        params = access_params.model_copy(update={
            "critical_vlan": "99",
            "auth_fail_vlan": "98",
            "guest_vlan": "97",
        })
        policy = renderer.render_section("access_policy", params, access_pool)

        assert "policy-map type control subscriber DOT1X_POLICY" in policy
        assert "   10 authenticate using dot1x priority 10" in policy
        assert "   20 authenticate using mab priority 20" in policy
        assert "  10 class AAA_SVR_DOWN_UNAUTHD_HOST do-until-failure\n   10 authorize using vlan 99" in policy
        assert "  20 class DOT1X_FAILED do-until-failure\n   10 authorize using vlan 98" in policy
        assert "  30 class MAB_FAILED do-until-failure\n   10 authorize using vlan 97" in policy
        assert (
            "  40 class DOT1X_NO_RESP do-until-failure\n"
            "   10 terminate dot1x\n"
            "   20 authenticate using mab priority 20"
        ) in policy
        assert "class-map type control subscriber match-all AAA_SVR_DOWN_UNAUTHD_HOST" in policy

    def test_access_policy_skips_unset_vlan_branches(self, renderer, access_params, access_pool):
        """Test branches without a VLAN are left out."""
        policy = renderer.render_section("access_policy", access_params, access_pool)
        assert "AAA_SVR_DOWN_UNAUTHD_HOST" not in policy
        assert "DOT1X_FAILED" not in policy
        assert "MAB_FAILED" not in policy
        assert "DOT1X_NO_RESP" in policy

    def test_dot1x_only_policy(self, renderer, access_params, access_pool):
        """Test 802.1X-only skips MAB everywhere."""
        params = access_params.model_copy(update={"auth_method": AuthMethod.DOT1X_ONLY})
        config = renderer.render(params, access_pool)
        assert "authenticate using mab" not in config
        assert "\n mab\n" not in config
        assert " dot1x pae authenticator" in config

    def test_section_order(self, renderer, access_params, access_pool):
        """Test sections appear in canonical order."""
        params = access_params.model_copy(update={"use_coa": True})
        config = renderer.render(params, access_pool)
        markers = [
            "aaa new-model",
            "radius server RADIUS-SRV-1",
            "aaa group server radius RADIUS-SERVERS",
            "aaa authentication dot1x default",
            "dot1x system-auth-control",
            "vlan 10",
            "policy-map type control subscriber DOT1X_POLICY",
            " description 802.1X Enabled Port",
            "device-tracking policy DOT1X_POLICY",
            "aaa server radius dynamic-author",
        ]
        positions = [config.index(marker) for marker in markers]
        assert positions == sorted(positions)

    def test_timers_emitted_verbatim(self, renderer, access_params, access_pool):
        """Test timer values are not range checked."""
        params = access_params.model_copy(update={"reauth_period_seconds": 0, "tx_period_seconds": 999999})
        interface = renderer.render_section("interface", params, access_pool)
        assert " authentication timer reauthenticate 0" in interface
        assert " dot1x timeout tx-period 999999" in interface

    def test_render_is_idempotent(self, renderer, access_params, access_pool):
        """Test identical inputs produce identical output."""
        assert renderer.render(access_params, access_pool) == renderer.render(access_params, access_pool)

    def test_unknown_section_rejected(self, renderer, access_params, access_pool):
        """Test asking for a section the dialect lacks raises."""
        with pytest.raises(KeyError):
            renderer.render_section("banner", access_params, access_pool)


@pytest.mark.unit
class TestFailureBranches:
    """Test identity policy failure branch selection."""

    def test_mab_only_without_vlans_has_no_branches(self):
        """Test MAB-only without failure VLANs needs no failure handling."""
        params = DeploymentParameters(data_vlan="10", auth_method=AuthMethod.MAB_ONLY)
        assert build_failure_branches(params) == []

    def test_no_response_without_mab(self):
        """Test no-response branch only terminates 802.1X without MAB."""
        params = DeploymentParameters(data_vlan="10", auth_method=AuthMethod.DOT1X_ONLY)
        branches = build_failure_branches(params)
        assert [b.class_name for b in branches] == ["DOT1X_NO_RESP"]
        assert branches[0].actions == ("terminate dot1x",)

    def test_auth_fail_ignored_for_mab_only(self):
        """Test the 802.1X failure branch needs 802.1X."""
        params = DeploymentParameters(
            data_vlan="10", auth_method=AuthMethod.MAB_ONLY, auth_fail_vlan="98", guest_vlan="97",
        )
        assert [b.class_name for b in build_failure_branches(params)] == ["MAB_FAILED"]

    def test_global_dot1x_enables_reauthentication(self, renderer, access_params, access_pool):
        section = renderer.render_section("dot1x_global", access_params, access_pool)
        assert section.strip().splitlines()[-2:] == ["dot1x system-auth-control", "dot1x re-authentication"]
