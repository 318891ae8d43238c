from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PostMessageRequestDTO(BaseModel):
    model_config = ConfigDict(strict=True)

    sender: str = Field(min_length=1, max_length=64)
    content: str = Field(min_length=1, max_length=4096)
