from typing import Optional
from pydantic import BaseModel, Field


class SessionData(BaseModel):
    is_logged_in: bool = False
    name: Optional[str] = None


class Session(BaseModel):
    session_id: str
    data: SessionData = Field(default_factory=SessionData)
