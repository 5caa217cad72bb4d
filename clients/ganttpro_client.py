"""
GanttPRO API client for creating projects and tasks
"""
import os
from typing import Any, Dict, Optional

import requests

from config import ENV_GANTTPRO_API_KEY, GANTTPRO_BASE_URL, REQUEST_TIMEOUT, TASK_DURATION_FIELD
from errors import ConfigurationError, NormalizationFailure, ProjectCreationError, TaskCreationError
from models import RemoteProject, RemoteTaskRef, TaskSpec
from transformers.response_normalizer import PROJECT_ID_PATHS, TASK_ID_PATHS, extract_id, require_id
from transformers.task_mapper import task_spec_to_payload
from utils import logger, retry_with_backoff, rate_limit, truncate


def _response_body(response: Optional[requests.Response]) -> Any:
    """Best-effort decode of an error response for reporting"""
    if response is None:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class GanttProClient:
    """Handle GanttPRO API interactions"""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 timeout: float = REQUEST_TIMEOUT, duration_field: str = TASK_DURATION_FIELD):
        """
        Initialize GanttPRO client

        Args:
            api_key: GanttPRO API key. If None, reads from GANTTPRO_API_KEY env var
            base_url: API root, e.g. https://api.ganttpro.com/v1.0
            timeout: Per-request timeout in seconds
            duration_field: Task body field that carries the duration in minutes
        """
        self.api_key = api_key or os.getenv(ENV_GANTTPRO_API_KEY)
        if not self.api_key:
            raise ConfigurationError(f"{ENV_GANTTPRO_API_KEY} is not configured")

        self.base_url = (base_url or GANTTPRO_BASE_URL).rstrip('/')
        self.timeout = timeout
        self.duration_field = duration_field
        self.headers = {
            'Content-Type': 'application/json',
            'X-API-KEY': self.api_key
        }
        logger.info(f"GanttPRO client initialized for {self.base_url}")

    @retry_with_backoff()
    @rate_limit
    def _post(self, endpoint: str, body: Dict) -> requests.Response:
        response = requests.post(
            f'{self.base_url}/{endpoint}',
            headers=self.headers,
            json=body,
            timeout=self.timeout
        )
        response.raise_for_status()
        return response

    def create_project(self, name: str) -> RemoteProject:
        """
        Create a project in GanttPRO

        Args:
            name: Project name

        Returns:
            RemoteProject with the normalized project ID

        Raises:
            ProjectCreationError: non-success status, transport fault, or no ID in the response
        """
        try:
            response = self._post('projects', {'name': name})
            result = response.json()
        except requests.exceptions.RequestException as e:
            response = getattr(e, 'response', None)
            status = response.status_code if response is not None else None
            logger.error(f"Error creating GanttPRO project '{name}': {e}")
            if response is not None:
                logger.error(f"Response: {truncate(response.text)}")
            raise ProjectCreationError("Failed to create project", status=status,
                                       body=_response_body(response)) from e

        logger.debug(f"GanttPRO create project response: {truncate(result)}")

        try:
            project_id = require_id(result, PROJECT_ID_PATHS, 'project')
        except NormalizationFailure as e:
            logger.error(f"✗ {e.message}: {truncate(result)}")
            raise ProjectCreationError(e.message, body=result) from e

        logger.info(f"Created GanttPRO project: {name} (ID: {project_id})")
        return RemoteProject(id=project_id, raw=result)

    def create_task(self, spec: TaskSpec) -> RemoteTaskRef:
        """
        Create a task (or grouping section) in GanttPRO

        Args:
            spec: Outgoing task description

        Returns:
            RemoteTaskRef. Its id is None when the response carried no recognizable ID.

        Raises:
            TaskCreationError: non-success status or transport fault
        """
        body = task_spec_to_payload(spec, self.duration_field)
        try:
            response = self._post('tasks', body)
            result = response.json()
        except requests.exceptions.RequestException as e:
            response = getattr(e, 'response', None)
            status = response.status_code if response is not None else None
            logger.error(f"Error creating GanttPRO task '{spec.name}': {e}")
            if response is not None:
                logger.error(f"Response: {truncate(response.text)}")
            raise TaskCreationError(f"Failed to create task '{spec.name}': {e}", status=status,
                                    body=_response_body(response)) from e

        logger.debug(f"Task \"{spec.name}\": {truncate(result)}")

        task_id = extract_id(result, TASK_ID_PATHS)
        if task_id is None:
            logger.warning(f"GanttPRO returned no ID for task '{spec.name}'")
        else:
            logger.info(f"Created GanttPRO task: {spec.name} (ID: {task_id})")
        return RemoteTaskRef(id=task_id, raw=result)
