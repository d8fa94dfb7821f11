"""HTTP request and decoding for the coin feed."""
import logging
from typing import Optional, TypeVar

import requests
from pydantic import TypeAdapter, ValidationError

from crypto_list.core.exceptions import (
    DecodingError,
    InvalidUrlError,
    NoDataError,
    ServerError,
)

logger = logging.getLogger('api')

T = TypeVar("T")


class NetworkManager:
    """Makes GET requests and decodes JSON bodies into pydantic types.

    One instance is built per application and injected where needed.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        """Initialize the network manager.

        Args:
            session: HTTP session to send requests with (a new one if omitted)
            timeout: Request timeout in seconds (None keeps the transport default)
        """
        self.session = session or requests.Session()
        self.timeout = timeout

    def build_request(self, url: str) -> requests.PreparedRequest:
        """Build a GET request for ``url`` with the session's headers, auth and cookies.

        Raises:
            InvalidUrlError: If the URL cannot be turned into a request
        """
        request = requests.Request("GET", url, headers={"accept": "application/json"})
        try:
            return self.session.prepare_request(request)
        except (requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL) as e:
            logger.error(f"Invalid request URL {url!r}: {e}")
            raise InvalidUrlError() from e

    def request(self, url: str, adapter: TypeAdapter[T]) -> T:
        """Send a GET request and decode the response body.

        Args:
            url: Endpoint URL
            adapter: Pydantic adapter for the expected response shape

        Returns:
            The decoded response

        Raises:
            InvalidUrlError: If the request cannot be built
            NoDataError: On transport failure
            ServerError: If the status code is outside 200-299
            DecodingError: If the body does not match the expected shape
        """
        prepared = self.build_request(url)
        logger.debug(f"GET {prepared.url}")

        # proxies, verify and cert from the session and the environment
        send_kwargs = self.session.merge_environment_settings(prepared.url, {}, None, None, None)

        try:
            response = self.session.send(prepared, timeout=self.timeout, **send_kwargs)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {prepared.url} failed: {e}")
            raise NoDataError() from e

        logger.debug(f"Response status: {response.status_code}")

        if not 200 <= response.status_code <= 299:
            try:
                message = response.content.decode("utf-8")
            except UnicodeDecodeError:
                message = "Unknown error"
            logger.error(f"Server error {response.status_code}: {message}")
            raise ServerError(message)

        try:
            return adapter.validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Could not decode response from {prepared.url}: {e.error_count()} errors")
            raise DecodingError() from e
