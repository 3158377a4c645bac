"""
Request dispatching shared by the query API services.

QueryAPIClient sends one signed GET per call and decodes the XML reply.
QueryService is the base of the per-service clients; each subclass pins
an API version and picks its endpoint from the Region.
"""
from datetime import datetime, timezone
from typing import Callable, Dict, Optional, Sequence, Tuple, Type, TypeVar
from urllib.parse import urlsplit
from xml.etree import ElementTree as ET

import requests
from botocore.credentials import Credentials

from logger_config import get_logger
from models.shapes import decode, parse_xml
from services.filters import Filter, add_filter_params
from services.query_params import add_params_list, make_params
from services.regions import Region
from services.signer import RequestSigner
from utils.exceptions import ConfigurationError, ServiceError, TransportError

logger = get_logger(__name__)

T = TypeVar("T")

Clock = Callable[[], datetime]

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """RFC 3339 UTC timestamp; naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def split_endpoint(endpoint: str) -> Tuple[str, str, str]:
    """
    Split an endpoint URL into (scheme, host, path).

    Raises:
        ConfigurationError: If the URL has no http(s) scheme or no host
    """
    try:
        parts = urlsplit(endpoint)
        # Touching .port validates it
        parts.port
    except ValueError as e:
        raise ConfigurationError(f"Invalid endpoint {endpoint!r}: {e}", endpoint=endpoint) from e
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigurationError(f"Invalid endpoint {endpoint!r}", endpoint=endpoint)
    return parts.scheme, parts.netloc, parts.path or "/"


def build_error(response: requests.Response) -> ServiceError:
    """
    Build a ServiceError from a non-200 response.

    Only the first <Error> of the envelope is used. An unreadable body
    still produces an error carrying the HTTP status.
    """
    code = ""
    message = ""
    request_id = ""
    try:
        root = parse_xml(response.content)
    except ET.ParseError as e:
        logger.warning(f'Could not decode error body for HTTP {response.status_code}: {e}')
    else:
        # EC2 wraps errors in <Errors>; RDS puts a single <Error> at the top
        errors = root.findall("Errors/Error") or root.findall("Error")
        if errors:
            code = errors[0].findtext("Code", "")
            message = errors[0].findtext("Message", "")
        request_id = root.findtext("RequestID") or root.findtext("RequestId") or ""

    if not message:
        message = f"{response.status_code} {response.reason or ''}".strip()

    return ServiceError(
        message,
        status_code=response.status_code,
        code=code,
        request_id=request_id,
    )


class QueryAPIClient:
    """Signs and sends query API requests against one endpoint."""

    def __init__(
        self,
        endpoint: str,
        api_version: str,
        signer: RequestSigner,
        clock: Optional[Clock] = None,
        timeout: Optional[float] = 30.0
    ) -> None:
        """
        Initialize query API client.

        Args:
            endpoint: Endpoint URL, e.g. "https://ec2.us-east-1.amazonaws.com"
            api_version: Value sent as the Version parameter
            signer: Signer adding the signature parameters
            clock: Returns the current time; defaults to the UTC system clock
            timeout: Seconds before the HTTP transport gives up
        """
        self.endpoint = endpoint
        self.api_version = api_version
        self.signer = signer
        self.clock: Clock = clock or utc_now
        self.timeout = timeout

    def query(self, params: Dict[str, str], shape: Type[T]) -> T:
        """
        Send params as a signed GET request and decode the reply into shape.

        Args:
            params: Parameter set built for one request; modified in place
            shape: Response dataclass to decode a 200 body into

        Returns:
            Decoded shape instance

        Raises:
            ConfigurationError: If the endpoint URL is unusable
            TransportError: If the request could not be sent
            ServiceError: If the service answered with a non-200 status
            DecodeError: If a 200 body is not valid XML
        """
        params["Version"] = self.api_version
        params["Timestamp"] = format_timestamp(self.clock())

        scheme, host, path = split_endpoint(self.endpoint)
        self.signer.sign("GET", path, params, host)

        url = f"{scheme}://{host}{path}"
        logger.debug(f'GET {url} Action={params.get("Action")}')
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f'{params.get("Action")} request to {url} failed: {str(e)}')
            raise TransportError(str(e), url=url) from e

        try:
            logger.debug(f'{params.get("Action")} response: HTTP {response.status_code}')
            if response.status_code != 200:
                error = build_error(response)
                logger.warning(
                    f'{params.get("Action")} failed with HTTP {error.status_code}: {error} '
                    f'(request id: {error.request_id or "n/a"})'
                )
                raise error
            return decode(shape, response.content)
        finally:
            response.close()


_FACTORY_TOKEN = object()


class QueryService:
    """
    Base class of the query API services.

    Subclasses set API_VERSION and ENDPOINT_ATTR (the Region attribute
    holding their endpoint). Instances are built with ``new()``.
    """

    API_VERSION = ""
    ENDPOINT_ATTR = ""

    def __init__(self, client: QueryAPIClient, _token: object = None) -> None:
        if _token is not _FACTORY_TOKEN:
            raise TypeError(
                f"{type(self).__name__} instances are created with {type(self).__name__}.new()"
            )
        self.client = client

    @classmethod
    def new(
        cls,
        credentials: Credentials,
        region: Region,
        clock: Optional[Clock] = None,
        timeout: Optional[float] = 30.0
    ):
        """
        Create a service client for a region.

        Args:
            credentials: botocore credentials used to sign requests
            region: Region whose endpoint the service talks to
            clock: Optional time source, mainly for tests
            timeout: HTTP timeout in seconds
        """
        client = QueryAPIClient(
            endpoint=getattr(region, cls.ENDPOINT_ATTR),
            api_version=cls.API_VERSION,
            signer=RequestSigner(credentials),
            clock=clock,
            timeout=timeout,
        )
        return cls(client, _token=_FACTORY_TOKEN)

    def _describe(
        self,
        action: str,
        label: str,
        ids: Optional[Sequence[str]],
        filter_: Optional[Filter],
        shape: Type[T]
    ) -> T:
        params = make_params(action)
        add_params_list(params, label, ids)
        add_filter_params(params, filter_)
        return self.client.query(params, shape)
