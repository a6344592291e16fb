from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class ObjectMeta(BaseModel):
    name: str = ""
    namespace: str = "default"
    labels: Optional[dict[str, str]] = None
    annotations: Optional[dict[str, str]] = None


class Entity(BaseModel):
    model_config = ConfigDict(extra="allow")

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    entity_class: Optional[str] = None
    subscriptions: list[str] = Field(default_factory=list)


class SensuEvent(BaseModel):
    model_config = ConfigDict(extra="allow")

    entity: Optional[Entity] = None
    check: Optional[dict[str, Any]] = None
    timestamp: Optional[int] = None     # Unix timestamp in seconds
