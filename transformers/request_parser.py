"""
Validation of incoming import requests

Converts the untrusted JSON document (`projectName`, `tasks`) into an
ImportRequest. Anything malformed raises ValidationError before a single
remote call is made.
"""
from typing import Any, Dict

from errors import ValidationError
from models import ImportRequest, Task
from transformers.task_mapper import estimate_minutes


def _is_number(value: Any) -> bool:
    # bool is an int subclass, but "hours": true is not an estimate
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_task(raw: Any, index: int) -> Task:
    """Validate one entry of the `tasks` array"""
    if not isinstance(raw, dict):
        raise ValidationError(f"tasks[{index}] must be an object")

    name = raw.get('name')
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(f"tasks[{index}].name must be a non-empty string")

    hours = raw.get('hours')
    if hours is None:
        hours = 0
    if not _is_number(hours) or hours != hours or hours < 0:
        raise ValidationError(f"tasks[{index}].hours must be a number >= 0")
    try:
        estimate_minutes(hours)
    except ValueError:
        raise ValidationError(f"tasks[{index}].hours must be a finite number of hours")

    is_section = raw.get('isSection', False)
    if is_section is None:
        is_section = False
    if not isinstance(is_section, bool):
        raise ValidationError(f"tasks[{index}].isSection must be a boolean")

    parent_section = raw.get('parentSection')
    if parent_section is not None and not isinstance(parent_section, str):
        raise ValidationError(f"tasks[{index}].parentSection must be a string")

    return Task(
        name=name,
        hours=hours,
        is_section=is_section,
        parent_section=parent_section or None,
    )


def parse_import_request(payload: Dict[str, Any]) -> ImportRequest:
    """
    Build an ImportRequest from a decoded JSON body

    Raises:
        ValidationError: projectName or tasks missing, empty or malformed
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    project_name = payload.get('projectName')
    tasks = payload.get('tasks')

    if not isinstance(project_name, str) or not project_name.strip():
        raise ValidationError("projectName is required")
    if not isinstance(tasks, list) or not tasks:
        raise ValidationError("tasks must be a non-empty array")

    return ImportRequest(
        project_name=project_name,
        tasks=[parse_task(raw, index) for index, raw in enumerate(tasks)],
    )
