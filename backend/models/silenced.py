from typing import Optional
from pydantic import BaseModel

from models.event import ObjectMeta


class Silenced(BaseModel):
    metadata: ObjectMeta
    subscription: Optional[str] = None
    check: Optional[str] = None
    reason: str = ""
    expire: int = -1                    # seconds; -1 never expires
    begin: int                          # Unix timestamp in seconds
    expire_on_resolve: bool = False


class SilenceResult(BaseModel):
    entity: str
    namespace: str
    silenced: str                       # "entity:<name>:*"
    status_code: int
    body: Optional[str] = None
