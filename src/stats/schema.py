from datetime import datetime

from pydantic import BaseModel, Field, field_serializer

STATS_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class EndpointHit(BaseModel):
    app: str
    uri: str
    ip: str
    timestamp: datetime

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        """The stats server expects a naive ``yyyy-MM-dd HH:mm:ss`` string."""
        return value.strftime(STATS_DATETIME_FORMAT)


class ViewStats(BaseModel):
    app: str = ""
    uri: str
    hits: int = Field(default=0, ge=0)
