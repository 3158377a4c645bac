"""
Response shapes for the EC2 VPC query API (version 2013-10-01).
"""
from dataclasses import dataclass
from typing import List

from .shapes import xml_field, xml_list


@dataclass
class Vpc:
    vpc_id: str = xml_field("vpcId")
    state: str = xml_field("state")
    cidr_block: str = xml_field("cidrBlock")
    dhcp_options_id: str = xml_field("dhcpOptionsId")
    instance_tenancy: str = xml_field("instanceTenancy")
    is_default: str = xml_field("isDefault")


@dataclass
class DescribeVpcsResponse:
    vpcs: List[Vpc] = xml_list("vpcSet>item", Vpc)


@dataclass
class Subnet:
    subnet_id: str = xml_field("subnetId")
    state: str = xml_field("state")
    vpc_id: str = xml_field("vpcId")
    cidr_block: str = xml_field("cidrBlock")
    available_ip_address_count: str = xml_field("availableIpAddressCount")
    availability_zone: str = xml_field("availabilityZone")
    default_for_az: str = xml_field("defaultForAz")
    map_public_ip_on_launch: str = xml_field("mapPublicIpOnLaunch")

    @property
    def available_ip_addresses(self) -> int:
        """availableIpAddressCount as an int (0 when absent)."""
        return int(self.available_ip_address_count or 0)


@dataclass
class DescribeSubnetsResponse:
    subnets: List[Subnet] = xml_list("subnetSet>item", Subnet)
