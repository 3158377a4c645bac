"""
Response shapes for the RDS query API (version 2013-05-15).
"""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from dateutil.parser import isoparse

from .shapes import xml_field, xml_list


def _timestamp(value: str) -> Optional[datetime]:
    return isoparse(value) if value else None


@dataclass
class DBInstance:
    """A database instance from DescribeDBInstances."""

    instance_identifier: str = xml_field("DBInstanceIdentifier")
    db_instance_class: str = xml_field("DBInstanceClass")
    engine: str = xml_field("Engine")
    engine_version: str = xml_field("EngineVersion")
    db_instance_status: str = xml_field("DBInstanceStatus")
    master_username: str = xml_field("MasterUsername")
    endpoint_address: str = xml_field("Endpoint>Address")
    endpoint_port: str = xml_field("Endpoint>Port")
    allocated_storage: str = xml_field("AllocatedStorage")
    instance_create_time: str = xml_field("InstanceCreateTime")
    latest_restorable_time: str = xml_field("LatestRestorableTime")
    preferred_backup_window: str = xml_field("PreferredBackupWindow")
    preferred_maintenance_window: str = xml_field("PreferredMaintenanceWindow")
    backup_retention_period: str = xml_field("BackupRetentionPeriod")
    security_group_name: str = xml_field("DBSecurityGroups>DBSecurityGroup>DBSecurityGroupName")
    security_group_status: str = xml_field("DBSecurityGroups>DBSecurityGroup>Status")
    availability_zone: str = xml_field("AvailabilityZone")
    multi_az: str = xml_field("MultiAZ")
    auto_minor_version_upgrade: str = xml_field("AutoMinorVersionUpgrade")
    license_model: str = xml_field("LicenseModel")
    pending_modified_values: str = xml_field("PendingModifiedValues")

    @property
    def created_at(self) -> Optional[datetime]:
        """InstanceCreateTime as a datetime, None when absent."""
        return _timestamp(self.instance_create_time)

    @property
    def latest_restorable_at(self) -> Optional[datetime]:
        return _timestamp(self.latest_restorable_time)


@dataclass
class DescribeDBInstancesResponse:
    instances: List[DBInstance] = xml_list(
        "DescribeDBInstancesResult>DBInstances>DBInstance", DBInstance
    )


@dataclass
class ParameterGroup:
    """A DB parameter group summary."""

    name: str = xml_field("DBParameterGroupName")
    family: str = xml_field("DBParameterGroupFamily")
    description: str = xml_field("Description")


@dataclass
class DescribeDBParameterGroupsResponse:
    parameter_groups: List[ParameterGroup] = xml_list(
        "DescribeDBParameterGroupsResult>DBParameterGroups>DBParameterGroup",
        ParameterGroup,
    )


@dataclass
class Parameter:
    """A single engine parameter of a DB parameter group."""

    parameter_name: str = xml_field("ParameterName")
    parameter_value: str = xml_field("ParameterValue")
    description: str = xml_field("Description")
    source: str = xml_field("Source")
    apply_type: str = xml_field("ApplyType")
    data_type: str = xml_field("DataType")
    allowed_values: str = xml_field("AllowedValues")
    is_modifiable: str = xml_field("IsModifiable")

    @property
    def modifiable(self) -> bool:
        return self.is_modifiable.lower() == "true"


@dataclass
class DescribeDBParametersResponse:
    parameters: List[Parameter] = xml_list(
        "DescribeDBParametersResult>Parameters>Parameter", Parameter
    )
