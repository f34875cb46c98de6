import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from google.genai import types
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from smartdo.exceptions import ValidationError
from smartdo.prompts import render_prompt
from smartdo.services import gemini as gemini_service

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)


class Flow(Generic[InputT, OutputT]):
    """One request -> prompt -> Gemini call -> validated response unit."""

    def __init__(
        self,
        name: str,
        input_model: type[InputT],
        output_model: type[OutputT],
        template: str,
        safety_settings: list[types.SafetySetting] | None = None,
    ):
        self.name = name
        self.input_model = input_model
        self.output_model = output_model
        self.template = template
        self.safety_settings = safety_settings

    def validate_input(self, payload: InputT | Mapping[str, Any]) -> InputT:
        if isinstance(payload, self.input_model):
            return payload
        try:
            return self.input_model.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(f"{self.name}: invalid input: {e}") from e

    def render(self, data: InputT) -> str:
        return render_prompt(self.template, **data.model_dump())

    def __call__(self, payload: InputT | Mapping[str, Any]) -> OutputT:
        data = self.validate_input(payload)
        logger.info("Running %s", self.name)
        return gemini_service.generate_structured(
            self.render(data),
            self.output_model,
            safety_settings=self.safety_settings,
        )
