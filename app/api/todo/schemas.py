from typing import Optional

from pydantic import AliasChoices, BaseModel, Field, StrictBool, StrictStr, field_validator


def _require_text(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Text must not be empty")
    return value


class TodoCreate(BaseModel):
    text: StrictStr

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        return _require_text(value)


class TodoUpdate(BaseModel):
    text: Optional[StrictStr] = None
    completed: Optional[StrictBool] = None

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return _require_text(value)


class TodoOut(BaseModel):
    id: str = Field(validation_alias=AliasChoices("id", "_id"), serialization_alias="_id")
    text: str
    completed: bool
    completed_at: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("completed_at", "completedAt"),
        serialization_alias="completedAt",
    )
    creator_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("creator_id", "creator"),
        serialization_alias="creator",
    )

    model_config = {
        "from_attributes": True
    }


class TodoEnvelope(BaseModel):
    todo: TodoOut


class TodoList(BaseModel):
    todos: list[TodoOut]
