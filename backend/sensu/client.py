"""
Thin httpx wrapper around the Sensu backend API.

Only the silenced endpoint is used. TLS trusts the system store plus an
optional extra CA bundle, or nothing at all when verification is disabled.
"""

import logging
import ssl
from typing import Optional, Union

import httpx

from models.silenced import Silenced
from sensu.config import SensuConfig
from sensu.errors import HandlerConfigError, SensuAPIError

logger = logging.getLogger(__name__)


def load_ssl_context(trusted_ca_file: str) -> ssl.SSLContext:
    """System trust store, extended with `trusted_ca_file` when given."""
    context = ssl.create_default_context()
    if trusted_ca_file:
        try:
            context.load_verify_locations(cafile=trusted_ca_file)
        except (OSError, ssl.SSLError) as exc:
            raise HandlerConfigError(
                f"failed to read CA file ({trusted_ca_file}): {exc}"
            ) from exc
    return context


class SensuClient:
    def __init__(self, config: SensuConfig, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        verify: Union[bool, ssl.SSLContext]
        if config.insecure_skip_tls_verify:
            logger.warning("TLS certificate verification disabled for %s", config.api_url)
            verify = False
        else:
            verify = load_ssl_context(config.trusted_ca_file)
        self._http = httpx.Client(
            base_url=config.api_url,
            timeout=config.timeout,
            verify=verify,
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "SensuClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def create_silenced(self, namespace: str, silenced: Silenced, auth_header: str) -> httpx.Response:
        path = f"/api/core/v2/namespaces/{namespace}/silenced"
        try:
            return self._http.post(
                path,
                content=silenced.model_dump_json(),
                headers={
                    "Authorization": auth_header,
                    "Content-Type": "application/json",
                },
            )
        except httpx.HTTPError as exc:
            raise SensuAPIError(f"request to {self.config.api_url}{path} failed: {exc}") from exc
