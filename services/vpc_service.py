"""
EC2 VPC query API service.
"""
from typing import Optional, Sequence

from models.ec2 import DescribeSubnetsResponse, DescribeVpcsResponse
from services.filters import Filter
from services.query_api import QueryService


class VPCService(QueryService):
    """Service for VPC and subnet describe operations in one region."""

    API_VERSION = "2013-10-01"
    ENDPOINT_ATTR = "ec2_endpoint"

    def describe_vpcs(
        self,
        vpc_ids: Optional[Sequence[str]] = None,
        filter_: Optional[Filter] = None
    ) -> DescribeVpcsResponse:
        """
        Describe VPCs.

        Args:
            vpc_ids: VPC ids to restrict the result to
            filter_: Optional filter, e.g. ``state=available``

        Returns:
            DescribeVpcsResponse with the matching VPCs
        """
        return self._describe(
            "DescribeVpcs", "VpcId", vpc_ids, filter_, DescribeVpcsResponse
        )

    def describe_subnets(
        self,
        subnet_ids: Optional[Sequence[str]] = None,
        filter_: Optional[Filter] = None
    ) -> DescribeSubnetsResponse:
        """
        Describe subnets.

        Args:
            subnet_ids: Subnet ids to restrict the result to
            filter_: Optional filter, e.g. ``vpc-id=vpc-1a2b3c4d``

        Returns:
            DescribeSubnetsResponse with the matching subnets
        """
        return self._describe(
            "DescribeSubnets", "SubnetId", subnet_ids, filter_, DescribeSubnetsResponse
        )
