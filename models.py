"""
Data models for work-breakdown imports
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from utils import logger

RemoteId = Union[str, int]


@dataclass
class Task:
    """One row of the work breakdown, either a section or a leaf task"""
    name: str
    hours: float = 0
    is_section: bool = False
    parent_section: Optional[str] = None


@dataclass
class ImportRequest:
    project_name: str
    tasks: List[Task]


@dataclass
class RemoteProject:
    id: RemoteId
    raw: Any = None


@dataclass
class RemoteTaskRef:
    id: Optional[RemoteId]
    raw: Any = None


@dataclass
class TaskSpec:
    """Outgoing task creation payload, before it is rendered for the wire"""
    project_id: RemoteId
    name: str
    duration: int
    parent_id: Optional[RemoteId] = None
    is_group: bool = False


@dataclass
class TaskOutcome:
    task_name: str


@dataclass
class Created(TaskOutcome):
    remote_id: Optional[RemoteId] = None


@dataclass
class Skipped(TaskOutcome):
    reason: str = ''


@dataclass
class Failed(TaskOutcome):
    error: str = ''


@dataclass
class ImportSummary:
    """Track import statistics for one project"""
    project_id: RemoteId
    project_name: str
    tasks_created: int = 0
    tasks_skipped: int = 0
    tasks_failed: int = 0
    outcomes: List[TaskOutcome] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        # Project creation succeeded if we have a summary at all
        return True

    @property
    def message(self) -> str:
        return f'Project "{self.project_name}" created with {self.tasks_created} tasks'

    def to_response(self) -> Dict[str, Any]:
        """Summary document returned to API callers"""
        return {
            'success': self.success,
            'projectId': self.project_id,
            'tasksCreated': self.tasks_created,
            'tasksFailed': self.tasks_failed,
            'tasksSkipped': self.tasks_skipped,
            'message': self.message,
        }

    def print_summary(self):
        """Print import summary report"""
        logger.info("\n" + "="*60)
        logger.info("IMPORT SUMMARY")
        logger.info("="*60)
        logger.info(f"Project: {self.project_name} (ID: {self.project_id})")
        logger.info(f"Tasks Attempted: {len(self.outcomes)}")
        logger.info(f"Created: {self.tasks_created}")
        logger.info(f"Skipped: {self.tasks_skipped}")
        logger.info(f"Failed: {self.tasks_failed}")
        if self.errors:
            logger.info(f"\nErrors ({len(self.errors)}):")
            for i, error in enumerate(self.errors, 1):
                logger.info(f"  {i}. {error}")
        logger.info("="*60 + "\n")
