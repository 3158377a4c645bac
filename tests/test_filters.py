"""
Unit tests for the Filter helper.
"""
from services.filters import Filter, add_filter_params


class TestFilter:
    """Tests for Filter serialization."""

    def test_names_sorted_regardless_of_insertion_order(self):
        """Test filter indexes follow sorted names, values keep their order."""
        f = Filter()
        f.add("b", "2")
        f.add("a", "1", "3")
        params = {}
        f.add_params(params)

        assert params == {
            "Filter.1.Name": "a",
            "Filter.1.Value.1": "1",
            "Filter.1.Value.2": "3",
            "Filter.2.Name": "b",
            "Filter.2.Value.1": "2",
        }

    def test_add_accumulates(self):
        """Test repeated add calls append instead of overwriting."""
        f = Filter()
        f.add("state", "available")
        f.add("state", "pending", "available")
        params = {}
        f.add_params(params)

        assert params == {
            "Filter.1.Name": "state",
            "Filter.1.Value.1": "available",
            "Filter.1.Value.2": "pending",
            "Filter.1.Value.3": "available",
        }

    def test_empty_filter_adds_nothing(self):
        params = {"Action": "DescribeVpcs"}
        Filter().add_params(params)
        assert params == {"Action": "DescribeVpcs"}

    def test_same_filter_serializes_identically(self):
        """Test serialization is stable across runs."""
        f = Filter()
        for name in ["zone", "cidr", "state", "vpc-id"]:
            f.add(name, name + "-value")
        first, second = {}, {}
        f.add_params(first)
        f.add_params(second)
        assert first == second
        assert first["Filter.1.Name"] == "cidr"
        assert first["Filter.4.Name"] == "zone"

    def test_from_dict(self):
        """Test building a filter from a plain mapping."""
        f = Filter.from_dict({"state": "available", "cidr": ["10.0.0.0/16", "10.1.0.0/16"]})
        params = {}
        f.add_params(params)

        assert len(f) == 2
        assert params["Filter.1.Name"] == "cidr"
        assert params["Filter.1.Value.2"] == "10.1.0.0/16"
        assert params["Filter.2.Name"] == "state"
        assert params["Filter.2.Value.1"] == "available"


def test_add_filter_params_none_is_noop():
    """Test a missing filter leaves the parameter set untouched."""
    params = {"Action": "DescribeSubnets"}
    add_filter_params(params, None)
    assert params == {"Action": "DescribeSubnets"}


def test_add_filter_params_applies_filter():
    f = Filter()
    f.add("vpc-id", "vpc-1")
    params = {}
    add_filter_params(params, f)
    assert params == {"Filter.1.Name": "vpc-id", "Filter.1.Value.1": "vpc-1"}
