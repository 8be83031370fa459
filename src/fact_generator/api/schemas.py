from pydantic import BaseModel, ConfigDict, Field


class TopicRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    topic: str | None = Field(default=None, description="Optional subject for the fact; null or empty means any topic.")
