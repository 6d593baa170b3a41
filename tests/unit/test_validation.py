"""Unit tests for render preconditions and the target list."""

import pytest

from dot1x_app.core.exceptions import (
    Dot1xConfigError,
    DuplicateTargetError,
    EmptyServerPoolError,
    MissingRequiredFieldError,
    TargetNotFoundError,
)
from dot1x_app.core.server_pool import ServerPool
from dot1x_app.core.targets import TargetList
from dot1x_app.core.validation import check_render_preconditions
from dot1x_app.schemas.deployment import DeploymentParameters
from dot1x_app.schemas.targets import VendorTarget


@pytest.mark.unit
class TestRenderPreconditions:
    """Test checks run before rendering."""

    def test_valid_inputs(self, ios_xe_target, closed_mode_params, single_server_pool):
        check_render_preconditions(ios_xe_target, closed_mode_params, single_server_pool)

    def test_missing_vendor(self, closed_mode_params, single_server_pool):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            check_render_preconditions(VendorTarget(vendor="", platform="ios-xe"), closed_mode_params, single_server_pool)
        assert exc_info.value.field == "vendor"

    def test_missing_platform(self, closed_mode_params, single_server_pool):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            check_render_preconditions(VendorTarget(vendor="cisco", platform=" "), closed_mode_params, single_server_pool)
        assert exc_info.value.field == "platform"

    def test_missing_data_vlan(self, ios_xe_target, single_server_pool):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            check_render_preconditions(ios_xe_target, DeploymentParameters(data_vlan=""), single_server_pool)
        assert exc_info.value.field == "data_vlan"

    def test_empty_pool(self, ios_xe_target, closed_mode_params):
        """Test a pool with only incomplete entries is rejected."""
        with pytest.raises(EmptyServerPoolError):
            check_render_preconditions(ios_xe_target, closed_mode_params, ServerPool.with_primary())

    def test_errors_share_base(self):
        assert issubclass(EmptyServerPoolError, Dot1xConfigError)
        assert issubclass(DuplicateTargetError, Dot1xConfigError)


@pytest.mark.unit
class TestTargetList:
    """Test the multi-vendor target list."""

    def test_duplicate_rejected(self):
        """Test adding the same pair twice raises."""
        targets = TargetList()
        targets.add(VendorTarget(vendor="cisco", platform="ios-xe"))
        with pytest.raises(DuplicateTargetError) as exc_info:
            targets.add(VendorTarget(vendor="cisco", platform="ios-xe"))
        assert str(exc_info.value) == "This vendor and platform combination is already in the list."
        assert len(targets) == 1

    def test_same_vendor_other_platform(self):
        targets = TargetList([
            VendorTarget(vendor="cisco", platform="ios-xe"),
            VendorTarget(vendor="cisco", platform="nx-os"),
        ])
        assert len(targets) == 2

    def test_remove(self):
        target = VendorTarget(vendor="aruba", platform="aos-cx")
        targets = TargetList([target])
        targets.remove(target)
        assert target not in targets
        with pytest.raises(TargetNotFoundError):
            targets.remove(target)

    def test_order_preserved(self):
        order = [
            VendorTarget(vendor="aruba", platform="aos-cx"),
            VendorTarget(vendor="cisco", platform="ios-xe"),
        ]
        assert list(TargetList(order)) == order
