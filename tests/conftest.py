"""
Shared fixtures for the query API tests.
"""
from datetime import datetime, timezone
from unittest.mock import Mock

import pytest
from botocore.credentials import Credentials

import config
from services.regions import Region

FROZEN_TIME = datetime(2013, 5, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_config():
    """Drop the cached configuration between tests."""
    config._config = None
    yield
    config._config = None


@pytest.fixture
def credentials():
    return Credentials("AKIDEXAMPLE", "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY")


@pytest.fixture
def frozen_clock():
    return lambda: FROZEN_TIME


@pytest.fixture
def region():
    return Region(
        name="us-east-1",
        rds_endpoint="https://rds.us-east-1.amazonaws.com",
        ec2_endpoint="https://ec2.us-east-1.amazonaws.com",
    )


def make_response(status_code=200, body=b"", reason="OK"):
    """Build a stand-in for requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    response.content = body
    return response
