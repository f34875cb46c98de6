from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire. Accepts either on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    error_code: str
    message: str


def require_text(value: str, message: str) -> str:
    if not value or not value.strip():
        raise PydanticCustomError("required", message)
    return value
