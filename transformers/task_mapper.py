"""
Mapping functions for turning work-breakdown rows into GanttPRO task payloads
"""
import math
from typing import Any, Dict, Optional

from config import TASK_DURATION_FIELD, SECTION_TASK_TYPE
from models import RemoteId, Task, TaskSpec

MINUTES_PER_HOUR = 60
MIN_LEAF_DURATION = 1


def should_skip(task: Task) -> bool:
    """Leaf tasks without effort are not sent. Sections always are."""
    return not task.is_section and task.hours == 0


def estimate_minutes(hours) -> float:
    """Hours as unrounded minutes. Raises ValueError if that is not a finite number."""
    try:
        minutes = float(hours) * MINUTES_PER_HOUR
    except OverflowError:
        minutes = math.inf
    if not math.isfinite(minutes):
        raise ValueError(f"hours estimate {hours!r} is out of range")
    return minutes


def hours_to_duration(task: Task) -> int:
    """
    Convert an hour estimate to GanttPRO minutes

    Rounds half up (2.5h -> 150, 0.008h -> 0), then applies a floor of one
    minute to leaves. Sections are containers and always get 0.

    Raises:
        ValueError: the estimate does not fit in a finite number of minutes
    """
    if task.is_section:
        return 0
    minutes = int(math.floor(estimate_minutes(task.hours) + 0.5))
    return max(MIN_LEAF_DURATION, minutes)


def build_task_spec(task: Task, project_id: RemoteId, parent_id: Optional[RemoteId] = None) -> TaskSpec:
    return TaskSpec(
        project_id=project_id,
        name=task.name,
        duration=hours_to_duration(task),
        parent_id=parent_id,
        is_group=task.is_section,
    )


def task_spec_to_payload(spec: TaskSpec, duration_field: str = TASK_DURATION_FIELD) -> Dict[str, Any]:
    """Render a TaskSpec as the JSON body for POST /tasks"""
    payload = {
        'projectId': spec.project_id,
        'name': spec.name,
        duration_field: spec.duration,
    }
    if spec.parent_id is not None:
        payload['parent'] = spec.parent_id
    if spec.is_group:
        payload['type'] = SECTION_TASK_TYPE
    return payload
