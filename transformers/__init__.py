"""
Data transformation modules for converting work breakdowns to GanttPRO format
"""
from .response_normalizer import (
    PROJECT_ID_PATHS,
    TASK_ID_PATHS,
    extract_id,
    require_id
)
from .task_mapper import (
    should_skip,
    hours_to_duration,
    build_task_spec,
    task_spec_to_payload
)
from .request_parser import parse_import_request

__all__ = [
    'PROJECT_ID_PATHS',
    'TASK_ID_PATHS',
    'extract_id',
    'require_id',
    'should_skip',
    'hours_to_duration',
    'build_task_spec',
    'task_spec_to_payload',
    'parse_import_request'
]
