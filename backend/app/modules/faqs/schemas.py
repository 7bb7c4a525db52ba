from __future__ import annotations

import html
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints

Question = Annotated[str, StringConstraints(strip_whitespace=True, min_length=10, max_length=255)]
# Answers are rendered as HTML by clients, so they are stored escaped
Answer = Annotated[str, StringConstraints(strip_whitespace=True, min_length=10), AfterValidator(html.escape)]


class FaqCreate(BaseModel):
    # Older clients send camelCase "isPublished"
    model_config = ConfigDict(populate_by_name=True)

    question: Question
    answer: Answer
    is_published: bool = Field(default=False, alias="isPublished")


class FaqUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question: Question | None = None
    answer: Answer | None = None
    is_published: bool | None = Field(default=None, alias="isPublished")


class FaqRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    question: str
    answer: str
    is_published: bool
    created_at: datetime
    updated_at: datetime | None = None
