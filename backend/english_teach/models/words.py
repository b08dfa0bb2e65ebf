from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys in the JSON files."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class WordList(CamelModel):
    id: int = Field(gt=0)
    name: str
    created_at: datetime = Field(default_factory=utcnow)


class Word(CamelModel):
    id: int = Field(gt=0)
    english: str
    # Empty until translated
    hebrew: str = ""
    list_id: int
