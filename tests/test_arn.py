"""
Unit tests for ARN formatting.
"""
import pytest

from utils.arn import build_rds_arn


def test_build_rds_arn():
    assert build_rds_arn("mydb", 661095214357) == "arn:aws:rds:us-east-1:661095214357:db:mydb"


def test_build_rds_arn_strips_dashes():
    assert build_rds_arn("mydb", "6610-9521-4357", region="eu-west-1", resource_type="pg") == (
        "arn:aws:rds:eu-west-1:661095214357:pg:mydb"
    )


def test_build_rds_arn_invalid_account():
    with pytest.raises(ValueError):
        build_rds_arn("mydb", "not-an-account")
