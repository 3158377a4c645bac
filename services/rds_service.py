"""
RDS query API service.
"""
from typing import Optional, Sequence

from models.rds import (
    DescribeDBInstancesResponse,
    DescribeDBParameterGroupsResponse,
    DescribeDBParametersResponse,
)
from services.filters import Filter
from services.query_api import QueryService


class RDSService(QueryService):
    """Service for RDS describe operations in one region."""

    API_VERSION = "2013-05-15"
    ENDPOINT_ATTR = "rds_endpoint"

    def describe_db_instances(
        self,
        instance_ids: Optional[Sequence[str]] = None,
        filter_: Optional[Filter] = None
    ) -> DescribeDBInstancesResponse:
        """
        Describe database instances.

        Args:
            instance_ids: Instance identifiers to restrict the result to
            filter_: Optional filter

        Returns:
            DescribeDBInstancesResponse with the matching instances
        """
        return self._describe(
            "DescribeDBInstances", "InstanceId", instance_ids, filter_,
            DescribeDBInstancesResponse,
        )

    def describe_db_parameter_groups(
        self,
        group_names: Optional[Sequence[str]] = None,
        filter_: Optional[Filter] = None
    ) -> DescribeDBParameterGroupsResponse:
        """Describe DB parameter groups, optionally by name."""
        return self._describe(
            "DescribeDBParameterGroups", "DBParameterGroupName", group_names, filter_,
            DescribeDBParameterGroupsResponse,
        )

    def describe_db_parameters(
        self,
        group_names: Optional[Sequence[str]] = None,
        filter_: Optional[Filter] = None
    ) -> DescribeDBParametersResponse:
        """Describe the parameters of DB parameter groups."""
        return self._describe(
            "DescribeDBParameters", "DBParameterGroupName", group_names, filter_,
            DescribeDBParametersResponse,
        )
