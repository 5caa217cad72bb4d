"""
Import functionality for creating a work breakdown in GanttPRO
"""
from typing import List, Optional

import requests

from clients.ganttpro_client import GanttProClient
from config import ZERO_EFFORT_REASON
from errors import RemoteError
from importers.section_registry import SectionRegistry
from models import (
    Created, Failed, ImportRequest, ImportSummary, RemoteProject, Skipped, Task, TaskOutcome
)
from transformers.task_mapper import build_task_spec, should_skip
from utils import logger


def aggregate_outcomes(project: RemoteProject, project_name: str,
                       outcomes: List[TaskOutcome]) -> ImportSummary:
    """
    Fold per-task outcomes into an ImportSummary

    The summary always reports success: by the time outcomes exist the project
    was created, and task failures are counted rather than treated as fatal.
    """
    summary = ImportSummary(project_id=project.id, project_name=project_name)
    for outcome in outcomes:
        summary.outcomes.append(outcome)
        if isinstance(outcome, Created):
            summary.tasks_created += 1
        elif isinstance(outcome, Skipped):
            summary.tasks_skipped += 1
        elif isinstance(outcome, Failed):
            summary.tasks_failed += 1
            summary.errors.append(f"{outcome.task_name}: {outcome.error}")
    return summary


def import_task(client: GanttProClient, task: Task, project: RemoteProject,
                registry: SectionRegistry) -> TaskOutcome:
    """
    Create a single task, linking it to an earlier section when possible

    Never raises for remote failures or unusable estimates; they come back as
    a Failed outcome.
    """
    if should_skip(task):
        logger.info(f"  - Skipping '{task.name}': no hours estimated")
        return Skipped(task.name, reason=ZERO_EFFORT_REASON)

    parent_id = registry.resolve(task.parent_section)
    if task.parent_section and parent_id is None:
        logger.warning(f"  Section '{task.parent_section}' is not registered yet, "
                       f"creating '{task.name}' as a top-level task")

    try:
        spec = build_task_spec(task, project.id, parent_id=parent_id)
    except ValueError as e:
        logger.error(f"  ✗ Cannot build task \"{task.name}\": {e}")
        return Failed(task.name, error=str(e))

    try:
        ref = client.create_task(spec)
    except (RemoteError, requests.exceptions.RequestException) as e:
        logger.error(f"  ✗ Error creating task \"{task.name}\": {e}")
        return Failed(task.name, error=str(e))

    if task.is_section:
        if ref.id is None:
            logger.warning(f"  Section '{task.name}' has no usable ID, its children will be top-level")
        elif not registry.register(task.name, ref.id):
            logger.warning(f"  Duplicate section name '{task.name}', keeping the first registration")

    logger.info(f"  ✓ Created {'section' if task.is_section else 'task'} \"{task.name}\"")
    return Created(task.name, remote_id=ref.id)


def import_to_ganttpro(client: GanttProClient, import_request: ImportRequest,
                       registry: Optional[SectionRegistry] = None) -> ImportSummary:
    """
    Create the project and all of its tasks in GanttPRO

    Tasks are created strictly in input order, one at a time: a child can only
    be linked to a section that appears before it. Individual task failures
    are recorded and the import moves on. Nothing is rolled back.

    Args:
        client: Initialized GanttProClient instance
        import_request: Validated request
        registry: Section registry for this import. A fresh one is created if None.

    Returns:
        ImportSummary for the created project

    Raises:
        ProjectCreationError: the project could not be created; no task was attempted
    """
    logger.info("="*60)
    logger.info(f"Starting import to GanttPRO: {import_request.project_name}")
    logger.info("="*60)

    logger.info("Creating project in GanttPRO...")
    project = client.create_project(import_request.project_name)
    logger.info(f"✓ Project created, ID: {project.id}")

    if registry is None:
        registry = SectionRegistry()

    total = len(import_request.tasks)
    logger.info(f"Creating {total} task(s)...")
    outcomes = []
    for index, task in enumerate(import_request.tasks, 1):
        logger.debug(f"Task {index}/{total}: {task.name}")
        outcomes.append(import_task(client, task, project, registry))

    summary = aggregate_outcomes(project, import_request.project_name, outcomes)
    logger.info(f"✓ Import completed: {summary.tasks_created} created, "
                f"{summary.tasks_skipped} skipped, {summary.tasks_failed} failed")
    return summary
