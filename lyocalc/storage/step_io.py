"""Import and export of drying programs as JSON documents."""

from __future__ import annotations

import json
from typing import Any, List, Mapping, Sequence

from lyocalc.logger import get_logger
from lyocalc.models.constants import DRYING_LIMITS
from lyocalc.models.drying_step import DryingStep

LOGGER = get_logger(__name__)


class StepImportError(ValueError):
    """The document could not be turned into a drying program."""


def export_steps(steps: Sequence[DryingStep]) -> str:
    """Serialise ``steps`` to an indented JSON array."""
    return json.dumps([s.to_dict() for s in steps], indent=2)


def import_steps(text: str) -> List[DryingStep]:
    """Parse a JSON array of steps.

    Unit fields outside C/F and mBar/Torr default to C and mBar; numeric
    fields are coerced; missing ids are generated.

    Raises:
        StepImportError: on malformed JSON, a document that is not a list of
            objects, a non-numeric or non-finite temperature/pressure/duration,
            a negative duration, or more steps than a program can hold.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise StepImportError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise StepImportError("Expected a JSON array of steps")
    if len(data) > DRYING_LIMITS.max_steps:
        raise StepImportError(
            f"A drying program holds at most {DRYING_LIMITS.max_steps} steps, got {len(data)}"
        )

    steps = []
    for index, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise StepImportError(f"Step {index + 1} is not an object")
        try:
            steps.append(DryingStep.from_dict(item))
        except ValueError as exc:
            raise StepImportError(f"Step {index + 1}: {exc}") from exc

    LOGGER.info("Imported %d drying steps", len(steps))
    return steps
