from typing import Any, Optional

from fastapi import APIRouter, Body, HTTPException, Query
from pydantic import BaseModel

from filters import FILTERS, UnknownFilterError, get_filter

router = APIRouter(tags=["filters"])


# ---------- Response schema ----------

class FilterResult(BaseModel):
    filter: str
    match: bool


# ---------- Endpoints ----------

@router.get("/filters", response_model=list[str])
async def list_filters():
    return sorted(FILTERS)


@router.post("/filters/{name}", response_model=FilterResult)
async def evaluate_filter(
    name: str,
    event: Any = Body(default=None),
    seconds: Optional[int] = Query(default=None),
):
    """
    Evaluates a named filter against the raw event body.
    The body is passed through untouched so filters see exactly what Sensu sent.
    """
    try:
        predicate = get_filter(name)
    except UnknownFilterError:
        raise HTTPException(status_code=404, detail=f"Unknown filter: {name}")

    return FilterResult(filter=name, match=predicate(event, seconds))
