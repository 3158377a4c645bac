"""
Typed response shapes decoded from query API XML bodies.
"""
from .ec2 import DescribeSubnetsResponse, DescribeVpcsResponse, Subnet, Vpc
from .rds import (
    DBInstance,
    DescribeDBInstancesResponse,
    DescribeDBParameterGroupsResponse,
    DescribeDBParametersResponse,
    Parameter,
    ParameterGroup,
)

__all__ = [
    "DBInstance",
    "DescribeDBInstancesResponse",
    "DescribeDBParameterGroupsResponse",
    "DescribeDBParametersResponse",
    "DescribeSubnetsResponse",
    "DescribeVpcsResponse",
    "Parameter",
    "ParameterGroup",
    "Subnet",
    "Vpc",
]
