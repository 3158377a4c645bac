"""
Service layer for the AWS query APIs.

This package builds, signs and dispatches query API requests and
exposes one service class per API (RDS, EC2 VPC).
"""
