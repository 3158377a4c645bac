"""
Unit tests for query parameter construction.
"""
from services.query_params import add_params_list, make_params


def test_make_params_only_action():
    """Test a fresh parameter set holds only the Action."""
    assert make_params("DescribeVpcs") == {"Action": "DescribeVpcs"}


def test_add_params_list_numbers_from_one():
    """Test identifiers are written as label.1, label.2, ..."""
    params = {}
    add_params_list(params, "InstanceId", ["i-1", "i-2"])
    assert params == {"InstanceId.1": "i-1", "InstanceId.2": "i-2"}


def test_add_params_list_empty_is_noop():
    """Test empty and missing lists add nothing."""
    params = make_params("DescribeSubnets")
    add_params_list(params, "SubnetId", [])
    add_params_list(params, "SubnetId", None)
    assert params == {"Action": "DescribeSubnets"}


def test_add_params_list_overwrites_existing_keys():
    params = {"VpcId.1": "old"}
    add_params_list(params, "VpcId", ["vpc-new"])
    assert params == {"VpcId.1": "vpc-new"}
