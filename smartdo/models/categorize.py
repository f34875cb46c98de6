from pydantic import BaseModel, Field, field_validator

from smartdo.models.common import require_text


class CategorizeTaskInput(BaseModel):
    title: str = Field(description="The title of the task.")
    description: str = Field(default="", description="A detailed description of the task.")

    @field_validator("title")
    @classmethod
    def _title_required(cls, value: str) -> str:
        return require_text(value, "Title is required")


class CategorizeTaskOutput(BaseModel):
    categories: list[str] = Field(description="An array of suggested categories for the task.")
