"""
Sensu backend connection settings for the silence-entity handler.

Every option is read from the environment (a .env file is loaded by main.py):

  SENSU_API_URL                   default http://127.0.0.1:8080
  SENSU_API_KEY / SENSU_ACCESS_TOKEN   one of the two is required
  SENSU_NAMESPACE                 falls back to the event entity's namespace
  SENSU_TRUSTED_CA_FILE           extra PEM bundle on top of the system store
  SENSU_INSECURE_SKIP_TLS_VERIFY  "true" to disable certificate checks
  SENSU_SILENCE_EXPIRE            silence period, seconds (default 1800)
  SENSU_SILENCE_REASON            default "sensu-silence-entity-handler"
  SENSU_API_TIMEOUT               request timeout, seconds (default 10)
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, SecretStr

from sensu.errors import HandlerConfigError

DEFAULT_API_URL = "http://127.0.0.1:8080"
DEFAULT_EXPIRE = 1800
DEFAULT_REASON = "sensu-silence-entity-handler"

_TRUE = {"1", "true", "yes", "on"}


class SensuConfig(BaseModel):
    api_url: str = DEFAULT_API_URL
    api_key: SecretStr = SecretStr("")
    access_token: SecretStr = SecretStr("")
    namespace: str = ""
    trusted_ca_file: str = ""
    insecure_skip_tls_verify: bool = False
    expire: int = Field(default=DEFAULT_EXPIRE, ge=-1)
    reason: str = DEFAULT_REASON
    timeout: float = Field(default=10.0, gt=0)


def load_config(environ: Optional[Mapping[str, str]] = None) -> SensuConfig:
    """Build a SensuConfig from environment variables (os.environ by default)."""
    env = os.environ if environ is None else environ
    try:
        return SensuConfig(
            api_url=env.get("SENSU_API_URL", DEFAULT_API_URL).rstrip("/"),
            api_key=env.get("SENSU_API_KEY", ""),
            access_token=env.get("SENSU_ACCESS_TOKEN", ""),
            namespace=env.get("SENSU_NAMESPACE", ""),
            trusted_ca_file=env.get("SENSU_TRUSTED_CA_FILE", ""),
            insecure_skip_tls_verify=env.get("SENSU_INSECURE_SKIP_TLS_VERIFY", "").lower() in _TRUE,
            expire=int(env.get("SENSU_SILENCE_EXPIRE", DEFAULT_EXPIRE)),
            reason=env.get("SENSU_SILENCE_REASON", DEFAULT_REASON),
            timeout=float(env.get("SENSU_API_TIMEOUT", 10)),
        )
    except ValueError as exc:
        raise HandlerConfigError(f"invalid Sensu handler configuration: {exc}") from exc
