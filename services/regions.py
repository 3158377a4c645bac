"""
Region catalog mapping region names to query API endpoints.
"""
from dataclasses import dataclass
from typing import Optional

import boto3

from logger_config import get_logger
from utils.exceptions import ConfigurationError

logger = get_logger(__name__)

PARTITION_DOMAINS = {
    "aws": "amazonaws.com",
    "aws-cn": "amazonaws.com.cn",
    "aws-us-gov": "amazonaws.com",
}


@dataclass(frozen=True)
class Region:
    """Endpoints of one AWS region."""

    name: str
    rds_endpoint: str
    ec2_endpoint: str


def _partition_domain(region_name: str) -> Optional[str]:
    session = boto3.session.Session()
    for partition in session.get_available_partitions():
        if region_name in session.get_available_regions("ec2", partition_name=partition):
            return PARTITION_DOMAINS.get(partition, "amazonaws.com")
    return None


def get_region(
    name: str,
    rds_endpoint: Optional[str] = None,
    ec2_endpoint: Optional[str] = None
) -> Region:
    """
    Resolve the endpoints for a region.

    Args:
        name: Region name, e.g. "us-east-1"
        rds_endpoint: Explicit RDS endpoint URL overriding the catalog
        ec2_endpoint: Explicit EC2 endpoint URL overriding the catalog

    Returns:
        Region with both endpoints set

    Raises:
        ConfigurationError: If the region is unknown and no overrides cover it
    """
    if rds_endpoint and ec2_endpoint:
        return Region(name, rds_endpoint, ec2_endpoint)

    domain = _partition_domain(name)
    if domain is None:
        raise ConfigurationError(f"Unknown AWS region: {name}")

    logger.debug(f'Resolved region {name} in domain {domain}')
    return Region(
        name=name,
        rds_endpoint=rds_endpoint or f"https://rds.{name}.{domain}",
        ec2_endpoint=ec2_endpoint or f"https://ec2.{name}.{domain}",
    )
