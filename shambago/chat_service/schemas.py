from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    is_from_user: bool
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
