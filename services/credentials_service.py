"""
Credential resolution for signing query API requests.
"""
import json
from typing import Optional

import boto3
from botocore.credentials import Credentials
from botocore.exceptions import BotoCoreError, ClientError

from config import Config, get_config
from logger_config import get_logger

logger = get_logger(__name__)


def _credentials_from_secret(config: Config) -> Optional[Credentials]:
    secrets_client = boto3.client('secretsmanager', region_name=config.aws_region)
    response = secrets_client.get_secret_value(SecretId=config.credentials_secret_name)
    secret_data = json.loads(response['SecretString'])

    access_key = secret_data.get('access_key_id')
    secret_key = secret_data.get('secret_access_key')
    if not (access_key and secret_key):
        logger.warning(
            f'Secrets Manager secret {config.credentials_secret_name} exists but '
            f'misses access_key_id/secret_access_key, falling back'
        )
        return None
    return Credentials(access_key, secret_key, secret_data.get('session_token'))


def get_aws_credentials(config: Optional[Config] = None) -> Credentials:
    """
    Resolve the credentials used to sign requests.

    Order: Secrets Manager secret (AWS_CREDENTIALS_SECRET_NAME), explicit
    keys from the configuration, then the boto3 default credential chain.

    Returns:
        botocore Credentials

    Raises:
        ValueError: If no credentials are available.
    """
    config = config or get_config()

    if config.credentials_secret_name:
        try:
            credentials = _credentials_from_secret(config)
            if credentials:
                logger.info(
                    f'Using credentials from Secrets Manager: {config.credentials_secret_name}'
                )
                return credentials
        except (ClientError, BotoCoreError, ValueError, KeyError) as e:
            logger.warning(
                f'Failed to read credentials from Secrets Manager '
                f'({config.credentials_secret_name}): {str(e)}. Falling back.'
            )

    if config.aws_access_key_id and config.aws_secret_access_key:
        logger.info('Using credentials from configuration')
        return Credentials(
            config.aws_access_key_id,
            config.aws_secret_access_key,
            config.aws_session_token,
        )

    session_credentials = boto3.session.Session(region_name=config.aws_region).get_credentials()
    if session_credentials is not None:
        logger.info('Using credentials from the boto3 default chain')
        frozen = session_credentials.get_frozen_credentials()
        return Credentials(frozen.access_key, frozen.secret_key, frozen.token)

    error_msg = 'AWS credentials not found in Secrets Manager, configuration or the default chain'
    logger.error(error_msg)
    raise ValueError(error_msg)
