"""Category suggestion flow: suggests free-text categories from a task's title and description."""

from collections.abc import Mapping
from typing import Any

from smartdo.flows.base import Flow
from smartdo.models.categorize import CategorizeTaskInput, CategorizeTaskOutput
from smartdo.prompts import CATEGORIZE_TASK_PROMPT

categorize_task_flow = Flow(
    name="categorizeTaskFlow",
    input_model=CategorizeTaskInput,
    output_model=CategorizeTaskOutput,
    template=CATEGORIZE_TASK_PROMPT,
)


def categorize_task(payload: CategorizeTaskInput | Mapping[str, Any]) -> CategorizeTaskOutput:
    """Return suggested categories, most relevant first. The list may be empty."""
    return categorize_task_flow(payload)
