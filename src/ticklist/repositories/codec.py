"""Serialization of the canonical task list."""

import logging

import yaml
from pydantic import ValidationError

from ..errors import DeserializationFailure
from ..models import Task

logger = logging.getLogger(__name__)

HEADER = "# Auto-generated - do not edit manually\n"


def dump_tasks(tasks: list[Task]) -> str:
    """Serialize tasks to a YAML document, preserving order."""
    records = [task.to_record() for task in tasks]
    return HEADER + yaml.safe_dump(records, default_flow_style=False, sort_keys=False)


def load_tasks(text: str) -> list[Task]:
    """
    Parse a serialized task list.

    YAML is a superset of JSON, so arrays written by the browser version of
    the app (camelCase ``dueDate``, no ``id``) load as well.

    Raises:
        DeserializationFailure: If the text is not a list of valid task records.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DeserializationFailure(f"Invalid YAML: {e}") from e

    if data is None:
        return []

    if not isinstance(data, list):
        raise DeserializationFailure(f"Expected a list of tasks, got {type(data).__name__}")

    tasks: list[Task] = []
    for position, record in enumerate(data):
        if not isinstance(record, dict):
            raise DeserializationFailure(f"Task {position} is not a mapping")
        try:
            tasks.append(Task.model_validate(record))
        except ValidationError as e:
            raise DeserializationFailure(f"Task {position} is invalid: {e}") from e

    logger.debug("Decoded %d tasks", len(tasks))
    return tasks
