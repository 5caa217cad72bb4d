"""
Identifier extraction for GanttPRO responses

GanttPRO returns the id of a created entity in different places depending on
the API version. Each entity has an ordered list of dotted paths; the first
path holding a non-null value wins. Add new shapes to the lists, not to the
code.
"""
from typing import Any, Iterable, Optional

from errors import NormalizationFailure
from models import RemoteId

PROJECT_ID_PATHS = (
    'data.ganttId',
    'data.id',
    'item.projectId',
    'item.id',
    'projectId',
    'id',
    'ganttId',
)

TASK_ID_PATHS = (
    'data.id',
    'data.ganttId',
    'item.id',
    'item.taskId',
    'id',
    'taskId',
)

_MISSING = object()


def _lookup(payload: Any, path: str) -> Any:
    node = payload
    for key in path.split('.'):
        if not isinstance(node, dict) or key not in node:
            return _MISSING
        node = node[key]
    return node


def extract_id(payload: Any, paths: Iterable[str]) -> Optional[RemoteId]:
    """
    Return the first non-null value found along `paths`, or None

    Args:
        payload: Decoded JSON response, of any shape
        paths: Ordered dotted field paths, e.g. PROJECT_ID_PATHS
    """
    for path in paths:
        value = _lookup(payload, path)
        if value is not _MISSING and value is not None:
            return value
    return None


def require_id(payload: Any, paths: Iterable[str], entity: str) -> RemoteId:
    """Like extract_id, but raise NormalizationFailure when nothing matches"""
    value = extract_id(payload, paths)
    if value is None:
        raise NormalizationFailure(f"GanttPRO did not return a {entity} ID", body=payload)
    return value
