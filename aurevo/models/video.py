from __future__ import annotations
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, field_validator


class Video(BaseModel):
    """A published video. Field names match the JSON the front end reads."""

    id: str
    title: str
    publisher: str = ""
    producer: str = ""
    genre: str = ""
    age: str = ""
    playbackUrl: str
    external: bool = False
    createdAt: datetime


class CreateVideoRequest(BaseModel):
    """Request body for publishing a video.

    Title and playback URL accept any JSON value so that a missing or empty
    one is reported as a 400 by the handler instead of a 422 from validation.
    """

    title: Any = None
    publisher: Optional[str] = None
    producer: Optional[str] = None
    genre: Optional[str] = None
    age: Optional[str] = None
    playbackUrl: Any = None
    external: bool = False

    @classmethod
    def from_body(cls, body: Any) -> CreateVideoRequest:
        """Parse a raw JSON body. Anything but an object counts as empty."""
        if not isinstance(body, dict):
            return cls()
        return cls.model_validate(body)

    @field_validator("age", mode="before")
    @classmethod
    def _age_as_string(cls, value: object) -> object:
        # Age ratings come in as "13+" or as a bare number.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("external", mode="before")
    @classmethod
    def _external_as_bool(cls, value: object) -> bool:
        return bool(value)

    @property
    def has_required_fields(self) -> bool:
        return bool(self.title) and bool(self.playbackUrl)

    @property
    def title_text(self) -> str:
        return str(self.title) if self.title else ""

    @property
    def playback_url_text(self) -> str:
        return str(self.playbackUrl) if self.playbackUrl else ""


class CreateVideoResponse(BaseModel):
    ok: bool = True
    id: str
