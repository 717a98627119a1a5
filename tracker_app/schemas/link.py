from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime


class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase JSON"""

    # Pydantic V2 style configuration
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class LinkCreate(CamelModel):
    name: Optional[str] = Field(None, description="Label shown in the dashboard")
    tracking_id: Optional[str] = Field(None, description="Correlation key, searchable by substring")


class LocationResponse(CamelModel):
    id: int
    link_id: int
    ip_address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    accuracy: Optional[float] = None
    timestamp: Optional[datetime] = None


class LinkResponse(CamelModel):
    """Serializes a TrackingLink row (ORM mode via from_attributes)"""
    id: int
    token: str
    name: Optional[str] = None
    tracking_id: Optional[str] = None
    created_at: Optional[datetime] = None
    clicks: int = 0


class LinkCreated(LinkResponse):
    url: str = Field(..., description="Public visit URL for the link")


class LinkDetail(LinkResponse):
    locations: List[LocationResponse] = []


class MessageResponse(BaseModel):
    message: str
