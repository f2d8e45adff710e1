"""Chat transcript models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class ChatMessage(BaseModel):
    id: str
    role: Literal["user", "model"]
    text: str
