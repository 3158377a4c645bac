"""
Lambda handler functions for the RDS and VPC describe operations.

Each handler accepts an event of the form

    {"ids": ["vpc-1", "vpc-2"], "filters": {"state": ["available"]}}

(both keys optional) and returns the decoded result as plain dicts.
"""
from dataclasses import asdict
from typing import Any, Dict, Optional, Tuple

from config import get_config
from logger_config import get_logger, set_level
from services.credentials_service import get_aws_credentials
from services.filters import Filter
from services.rds_service import RDSService
from services.regions import get_region
from services.vpc_service import VPCService
from utils.decorators import lambda_handler

logger = get_logger(__name__)


def parse_event(event: Dict[str, Any]) -> Tuple[list, Optional[Filter]]:
    """
    Extract the identifier list and filter from a handler event.

    Raises:
        ValueError: If ids or filters have the wrong type.
    """
    ids = event.get("ids") or []
    if isinstance(ids, str):
        ids = [ids]
    if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
        raise ValueError("ids must be a string or a list of strings")

    filters = event.get("filters")
    if filters is None:
        return ids, None
    if not isinstance(filters, dict):
        raise ValueError("filters must be an object of name -> values")
    for name, values in filters.items():
        if isinstance(values, str):
            continue
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ValueError(f"filter {name!r} must be a string or a list of strings")
    return ids, Filter.from_dict(filters)


def build_services() -> Tuple[RDSService, VPCService]:
    """Create both services from the environment configuration."""
    config = get_config()
    set_level(config.log_level)
    credentials = get_aws_credentials(config)
    region = get_region(
        config.aws_region,
        rds_endpoint=config.rds_endpoint,
        ec2_endpoint=config.ec2_endpoint,
    )
    return (
        RDSService.new(credentials, region, timeout=config.request_timeout),
        VPCService.new(credentials, region, timeout=config.request_timeout),
    )


@lambda_handler
def describe_db_instances(event, context):
    """Describe RDS database instances."""
    ids, filter_ = parse_event(event)
    rds_service, _ = build_services()
    response = rds_service.describe_db_instances(ids, filter_)
    logger.info(f'Described {len(response.instances)} DB instances')
    return asdict(response)


@lambda_handler
def describe_db_parameter_groups(event, context):
    ids, filter_ = parse_event(event)
    rds_service, _ = build_services()
    return asdict(rds_service.describe_db_parameter_groups(ids, filter_))


@lambda_handler
def describe_db_parameters(event, context):
    ids, filter_ = parse_event(event)
    rds_service, _ = build_services()
    return asdict(rds_service.describe_db_parameters(ids, filter_))


@lambda_handler
def describe_vpcs(event, context):
    """Describe VPCs."""
    ids, filter_ = parse_event(event)
    _, vpc_service = build_services()
    response = vpc_service.describe_vpcs(ids, filter_)
    logger.info(f'Described {len(response.vpcs)} VPCs')
    return asdict(response)


@lambda_handler
def describe_subnets(event, context):
    """Describe subnets."""
    ids, filter_ = parse_event(event)
    _, vpc_service = build_services()
    response = vpc_service.describe_subnets(ids, filter_)
    logger.info(f'Described {len(response.subnets)} subnets')
    return asdict(response)
