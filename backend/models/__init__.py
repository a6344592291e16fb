from models.event import Entity, ObjectMeta, SensuEvent
from models.silenced import Silenced, SilenceResult

__all__ = ["Entity", "ObjectMeta", "SensuEvent", "Silenced", "SilenceResult"]
