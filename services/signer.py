"""
Request signing for query API GET requests.

The HMAC computation is botocore's signature version 2 implementation.
The Timestamp already present in the parameter set is signed as-is so a
frozen clock yields a reproducible signature.
"""
from typing import Dict

from botocore.auth import SigV2Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials
from botocore.exceptions import NoCredentialsError

from logger_config import get_logger

logger = get_logger(__name__)

SIGNATURE_VERSION = "2"
SIGNATURE_METHOD = "HmacSHA256"


class RequestSigner:
    """Adds signature version 2 parameters to a query parameter set."""

    def __init__(self, credentials: Credentials) -> None:
        """
        Initialize request signer.

        Args:
            credentials: botocore credentials used for signing
        """
        self.credentials = credentials
        self._auth = SigV2Auth(credentials)

    def sign(
        self,
        method: str,
        path: str,
        params: Dict[str, str],
        host: str
    ) -> None:
        """
        Sign params in place.

        Args:
            method: HTTP method ("GET")
            path: Request path, "/" at minimum
            params: Parameter set; receives the signature parameters
            host: Endpoint host (with port when not the default)

        Raises:
            NoCredentialsError: If no credentials were configured
        """
        if self.credentials is None:
            raise NoCredentialsError()

        params["AWSAccessKeyId"] = self.credentials.access_key
        params["SignatureVersion"] = SIGNATURE_VERSION
        params["SignatureMethod"] = SIGNATURE_METHOD
        if self.credentials.token:
            params["SecurityToken"] = self.credentials.token
        params.pop("Signature", None)

        request = AWSRequest(method=method, url=f"https://{host}{path or '/'}")
        _, signature = self._auth.calc_signature(request, params)
        params["Signature"] = signature
        logger.debug(f'Signed {params.get("Action")} request for {host}')
