"""
Silence-entity handler.

Consumes a Sensu event and silences the entity it references by creating an
`entity:<name>:*` silencing entry through the backend API. No validation of
the event beyond what is needed to address the entity.

Entry point: execute_handler(config, event, client=None) -> SilenceResult
"""

import logging
import time
from dataclasses import dataclass
from http import HTTPStatus
from typing import Optional

from models.event import ObjectMeta, SensuEvent
from models.silenced import Silenced, SilenceResult
from sensu.client import SensuClient
from sensu.config import SensuConfig
from sensu.errors import (
    HandlerConfigError,
    SensuAPIError,
    SilenceConflictError,
    SilencedValidationError,
)

logger = logging.getLogger(__name__)


@dataclass
class HandlerContext:
    entity: str
    namespace: str
    auth_header: str


def check_args(config: SensuConfig, event: SensuEvent) -> HandlerContext:
    api_key = config.api_key.get_secret_value()
    access_token = config.access_token.get_secret_value()
    if not api_key and not access_token:
        raise HandlerConfigError(
            "SENSU_API_KEY or SENSU_ACCESS_TOKEN must be set"
        )

    if event.entity is None or not event.entity.metadata.name:
        raise HandlerConfigError("event does not reference an entity")
    entity = event.entity.metadata

    namespace = config.namespace or entity.namespace

    # API key takes precedence when both are configured
    if api_key:
        auth_header = f"Key {api_key}"
    else:
        auth_header = f"Bearer {access_token}"

    return HandlerContext(entity=entity.name, namespace=namespace, auth_header=auth_header)


def build_silenced(ctx: HandlerContext, config: SensuConfig, now: Optional[int] = None) -> Silenced:
    silenced = Silenced(
        metadata=ObjectMeta(name=f"entity:{ctx.entity}:*", namespace=ctx.namespace),
        subscription=f"entity:{ctx.entity}",
        check="*",
        reason=config.reason,
        expire=config.expire,
        begin=int(time.time()) if now is None else now,
        expire_on_resolve=False,
    )
    _validate(silenced)
    return silenced


def _validate(silenced: Silenced) -> None:
    if not silenced.subscription and not silenced.check:
        raise SilencedValidationError("must provide a subscription or a check")
    if silenced.metadata.name != f"{silenced.subscription}:{silenced.check}":
        raise SilencedValidationError(f"name {silenced.metadata.name!r} does not match subscription and check")
    if not silenced.metadata.namespace:
        raise SilencedValidationError("namespace must be set")
    if silenced.expire == 0:
        raise SilencedValidationError("expire must be positive, or -1 for no expiry")


def execute_handler(
    config: SensuConfig,
    event: SensuEvent,
    client: Optional[SensuClient] = None,
) -> SilenceResult:
    ctx = check_args(config, event)
    silenced = build_silenced(ctx, config)

    owns_client = client is None
    if owns_client:
        client = SensuClient(config)
    try:
        resp = client.create_silenced(ctx.namespace, silenced, ctx.auth_header)
    finally:
        if owns_client:
            client.close()

    status = resp.status_code
    reason = _status_text(status)

    if status == 409:
        raise SilenceConflictError(
            f"{status} {reason} ({resp.request.url}/{silenced.metadata.name})",
            status_code=status,
        )
    if status == 400:
        raise SensuAPIError(
            f"{status} {reason}",
            status_code=status,
            payload=silenced.model_dump_json(),
        )
    if status >= 300:
        raise SensuAPIError(f"{status} {reason}", status_code=status)

    result = SilenceResult(
        entity=ctx.entity,
        namespace=ctx.namespace,
        silenced=silenced.metadata.name,
        status_code=status,
    )
    if status == 201:
        logger.info('Successfully silenced entity "%s" from namespace "%s"', ctx.entity, ctx.namespace)
    else:
        result.body = resp.text
        logger.info("Sensu API answered %s: %s", status, resp.text)
    return result


def _status_text(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""
