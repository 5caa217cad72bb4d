"""
Shared fixtures: a fake GanttPRO client that records every call
"""
import json

import pytest
import requests

from errors import ProjectCreationError, TaskCreationError
from models import RemoteProject, RemoteTaskRef


class FakeGanttProClient:
    """
    Stand-in for GanttProClient

    Task IDs are handed out as 'task-1', 'task-2', ... in call order.
    Names listed in `failing_tasks` raise TaskCreationError, names in
    `idless_tasks` come back without an ID.
    """

    def __init__(self, project_id='proj-1', project_error=None, failing_tasks=(), idless_tasks=()):
        self.project_id = project_id
        self.project_error = project_error
        self.failing_tasks = set(failing_tasks)
        self.idless_tasks = set(idless_tasks)
        self.projects = []
        self.task_specs = []

    def create_project(self, name):
        self.projects.append(name)
        if self.project_error is not None:
            raise self.project_error
        return RemoteProject(id=self.project_id, raw={'data': {'ganttId': self.project_id}})

    def create_task(self, spec):
        self.task_specs.append(spec)
        if spec.name in self.failing_tasks:
            raise TaskCreationError(f"Failed to create task '{spec.name}'", status=500, body={'error': 'boom'})
        if spec.name in self.idless_tasks:
            return RemoteTaskRef(id=None, raw={'ok': True})
        task_id = f'task-{len(self.task_specs)}'
        return RemoteTaskRef(id=task_id, raw={'data': {'id': task_id}})

    def spec_for(self, name):
        return next(spec for spec in self.task_specs if spec.name == name)


def make_response(status_code=200, payload=None, text=None):
    """Build a real requests.Response for patched requests.post calls"""
    response = requests.Response()
    response.status_code = status_code
    response.url = 'https://api.ganttpro.test/v1.0'
    if text is not None:
        response._content = text.encode('utf-8')
    else:
        response._content = json.dumps(payload if payload is not None else {}).encode('utf-8')
    return response


@pytest.fixture
def fake_client():
    return FakeGanttProClient()


@pytest.fixture
def failing_project_client():
    return FakeGanttProClient(
        project_error=ProjectCreationError("Failed to create project", status=401, body={'error': 'unauthorized'})
    )


@pytest.fixture
def no_sleep(monkeypatch):
    """Skip rate limit and retry delays"""
    import utils
    monkeypatch.setattr(utils.time, 'sleep', lambda seconds: None)


@pytest.fixture
def site_launch_payload():
    return {
        'projectName': 'Site Launch',
        'tasks': [
            {'name': 'Design', 'isSection': True},
            {'name': 'Wireframe', 'hours': 4, 'parentSection': 'Design'},
            {'name': 'Dev', 'isSection': True},
            {'name': 'API', 'hours': 0},
        ],
    }
