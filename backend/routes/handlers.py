import logging
from typing import Iterator

from fastapi import APIRouter, Depends, HTTPException

from handlers.silence import execute_handler
from models.event import SensuEvent
from models.silenced import SilenceResult
from sensu.client import SensuClient
from sensu.config import SensuConfig, load_config
from sensu.errors import (
    HandlerConfigError,
    SensuAPIError,
    SilenceConflictError,
    SilencedValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["handlers"])


# ---------- Dependencies ----------

def get_config() -> SensuConfig:
    try:
        return load_config()
    except HandlerConfigError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


def get_sensu_client(config: SensuConfig = Depends(get_config)) -> Iterator[SensuClient]:
    try:
        client = SensuClient(config)
    except HandlerConfigError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    with client:
        yield client


# ---------- Endpoint ----------

@router.post("/handlers/silence-entity", response_model=SilenceResult)
def silence_entity(
    event: SensuEvent,
    config: SensuConfig = Depends(get_config),
    client: SensuClient = Depends(get_sensu_client),
):
    """
    Silences the entity referenced by the event (entity:<name>:*).
    Runs synchronously; FastAPI dispatches it to the threadpool.
    """
    try:
        return execute_handler(config, event, client=client)
    except (HandlerConfigError, SilencedValidationError) as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except SilenceConflictError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    except SensuAPIError as exc:
        logger.warning("Silence handler failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc))
