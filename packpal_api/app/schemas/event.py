"""
Pydantic models for event data.

The wire format uses camelCase names (``startDate``, ``ownerEmail``);
Python code uses the snake_case attribute names.  ``EventCreate``
accepts ``ownerEmail`` and ``status`` so existing clients that send
them keep working, but the service ignores both.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EventCreate(BaseModel):
    """Schema for creating an event."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, examples=["Weekend hike"])
    description: Optional[str] = Field(None, examples=["Two days in the hills"])
    source: Optional[str] = Field(None, examples=["Pune"])
    destination: Optional[str] = Field(None, examples=["Lonavala"])
    purpose: Optional[str] = Field(None, examples=["Trekking"])
    start_date: Optional[datetime] = Field(None, alias="startDate", examples=["2025-09-01T06:00:00"])
    end_date: Optional[datetime] = Field(None, alias="endDate", examples=["2025-09-02T20:00:00"])
    owner_email: Optional[str] = Field(None, alias="ownerEmail", description="Ignored; set from the session")
    status: Optional[str] = Field(None, description="Ignored; new events are always ONGOING")
