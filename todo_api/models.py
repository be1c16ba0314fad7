"""
Todo record and the request payload schemas.
"""

from datetime import datetime, timezone
from typing import Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from .errors import ValidationError


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2026-10-18T09:30:00.123Z"""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


class Todo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(gt=0)
    title: str
    completed: bool = False
    create_time: str = Field(alias="createTime")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class TodoCreate(BaseModel):
    """Body of POST /todo."""

    title: StrictStr
    completed: bool = False

    @field_validator("title")
    @classmethod
    def strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be empty")
        return value


class TodoUpdate(BaseModel):
    """
    Body of PUT /todo/<id>.

    Only fields present in the body change the todo. An explicit
    `"completed": null` clears the flag.
    """

    title: Optional[StrictStr] = None
    completed: Optional[bool] = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, value: Optional[str]) -> Optional[str]:
        # Blank titles are ignored rather than stored
        if value is None:
            return None
        return value.strip() or None

    def apply(self, todo: Todo) -> Todo:
        changes = {}
        if self.title is not None:
            changes["title"] = self.title
        if "completed" in self.model_fields_set:
            changes["completed"] = bool(self.completed)
        return todo.model_copy(update=changes)


def parse_payload(model, data):
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "body"
        if model is TodoCreate and field == "title":
            raise ValidationError("title is required and must be a non-empty string") from e
        raise ValidationError(f"Invalid {field}: {first['msg']}") from e
