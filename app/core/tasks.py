"""Task registry consumed by the dispatcher.

Architectural role:
    Maps each wire task name to its parameter model and handler. The dispatcher
    only ever looks tasks up here, so adding a task means adding one entry.

Exhaustiveness:
    The registry keys must match `TaskName` exactly. This is checked at import
    time so a missing or stray entry fails on startup, not on first request.
"""

from dataclasses import dataclass
from typing import Callable, get_args

from app.core.task_types import (
    ApplyDesignParams,
    GenerateAltTextParams,
    GenerateImageParams,
    GenerateSeoParams,
    RemoveBackgroundParams,
    TaskName,
    TaskParams,
)
from app.image.service import apply_design, generate_image, remove_background
from app.llm.service import generate_alt_text, generate_seo


@dataclass(frozen=True)
class TaskSpec:
    """One dispatchable task: validated params in, result dict out."""

    name: str
    params_model: type[TaskParams]
    handler: Callable


TASKS: dict[str, TaskSpec] = {
    spec.name: spec
    for spec in (
        TaskSpec("generateImage", GenerateImageParams, generate_image),
        TaskSpec("removeBackground", RemoveBackgroundParams, remove_background),
        TaskSpec("applyDesign", ApplyDesignParams, apply_design),
        TaskSpec("generateSeo", GenerateSeoParams, generate_seo),
        TaskSpec("generateAltText", GenerateAltTextParams, generate_alt_text),
    )
}

TASK_NAMES = get_args(TaskName)

if set(TASKS) != set(TASK_NAMES):
    raise RuntimeError(
        f"Task registry out of sync: registered={sorted(TASKS)} declared={sorted(TASK_NAMES)}"
    )


def get_task(name) -> TaskSpec | None:
    """Return the registered task for an exact name match, else `None`."""
    if not isinstance(name, str):
        return None
    return TASKS.get(name)
