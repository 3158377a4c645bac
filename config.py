"""
Configuration module for environment variable validation and type-safe config.

Values are read from the environment once and cached by get_config().
"""
import os
from dataclasses import dataclass
from typing import Optional

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    """Type-safe configuration object with validated environment variables."""

    aws_region: str = "us-east-1"
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    aws_session_token: Optional[str] = None
    credentials_secret_name: Optional[str] = None
    rds_endpoint: Optional[str] = None
    ec2_endpoint: Optional[str] = None
    request_timeout: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config instance from environment variables.

        Raises:
            ValueError: If an environment variable holds an invalid value.
        """
        aws_region = os.environ.get("AWS_REGION", "us-east-1").strip()
        if not aws_region:
            raise ValueError("AWS_REGION must not be empty")

        access_key = os.environ.get("AWS_ACCESS_KEY_ID") or None
        secret_key = os.environ.get("AWS_SECRET_ACCESS_KEY") or None
        if bool(access_key) != bool(secret_key):
            raise ValueError(
                "AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY must be set together"
            )

        raw_timeout = os.environ.get("REQUEST_TIMEOUT", "30")
        try:
            request_timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"REQUEST_TIMEOUT must be a number, got: {raw_timeout}"
            ) from None
        if request_timeout <= 0:
            raise ValueError(
                f"REQUEST_TIMEOUT must be positive, got: {raw_timeout}"
            )

        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
        if log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got: {log_level}"
            )

        return cls(
            aws_region=aws_region,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            aws_session_token=os.environ.get("AWS_SESSION_TOKEN") or None,
            credentials_secret_name=os.environ.get("AWS_CREDENTIALS_SECRET_NAME") or None,
            rds_endpoint=os.environ.get("RDS_ENDPOINT") or None,
            ec2_endpoint=os.environ.get("EC2_ENDPOINT") or None,
            request_timeout=request_timeout,
            log_level=log_level,
        )


_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config: The validated configuration object

    Raises:
        ValueError: If an environment variable holds an invalid value.
    """
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config
