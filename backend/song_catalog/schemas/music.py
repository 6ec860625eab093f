"""Response shapes for the OpenAPI document.

These models describe the payloads; handlers return the songs exactly as
they are stored, so nothing here is used to validate file contents.
"""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Literal, Optional


class Song(BaseModel):
    id: int = Field(description="Unique song id")
    title: str = Field(description="Song title")
    artist: str = Field(description="Performing artist")
    coverPath: str = Field(description="Relative path to the cover image")
    songPath: str = Field(description="Relative path to the audio file")
    createdAt: Optional[datetime] = Field(None, description="Creation time")
    updatedAt: Optional[datetime] = Field(None, description="Time of last update")


class SongsOut(BaseModel):
    success: bool = True
    count: int
    songs: list[Song]


class ErrorOut(BaseModel):
    success: bool = False
    message: str


class HealthOut(BaseModel):
    status: Literal["OK", "ERROR"]
    message: str
    timestamp: str
    database: Literal["connected", "disconnected", "error"]
