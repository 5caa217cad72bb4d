"""Tests for the hierarchy importer and outcome aggregation."""

import pytest
import requests

from conftest import FakeGanttProClient
from errors import ProjectCreationError
from importers import SectionRegistry, aggregate_outcomes, import_to_ganttpro
from models import Created, Failed, ImportRequest, RemoteProject, Skipped, Task
from transformers import parse_import_request


def _request(*tasks: Task) -> ImportRequest:
    return ImportRequest(project_name='Demo', tasks=list(tasks))


def test_site_launch_end_to_end(fake_client, site_launch_payload) -> None:
    summary = import_to_ganttpro(fake_client, parse_import_request(site_launch_payload))

    assert fake_client.projects == ['Site Launch']
    assert [spec.name for spec in fake_client.task_specs] == ['Design', 'Wireframe', 'Dev']

    design = fake_client.spec_for('Design')
    wireframe = fake_client.spec_for('Wireframe')
    assert design.is_group and design.duration == 0
    assert wireframe.parent_id == 'task-1'
    assert wireframe.duration == 240
    assert fake_client.spec_for('Dev').is_group

    assert summary.outcomes[3] == Skipped('API', reason='zero-effort')
    response = summary.to_response()
    assert response['success'] is True
    assert response['projectId'] == 'proj-1'
    assert response['tasksCreated'] == 3
    assert response['tasksFailed'] == 0
    assert response['tasksSkipped'] == 1
    assert response['message'] == 'Project "Site Launch" created with 3 tasks'


def test_project_failure_aborts_before_any_task(failing_project_client, site_launch_payload) -> None:
    with pytest.raises(ProjectCreationError) as excinfo:
        import_to_ganttpro(failing_project_client, parse_import_request(site_launch_payload))
    assert excinfo.value.status == 401
    assert failing_project_client.task_specs == []


def test_zero_hour_leaf_is_never_submitted(fake_client) -> None:
    summary = import_to_ganttpro(fake_client, _request(
        Task('Empty', hours=0),
        Task('Group', hours=0, is_section=True),
    ))
    assert [spec.name for spec in fake_client.task_specs] == ['Group']
    assert isinstance(summary.outcomes[0], Skipped)
    assert isinstance(summary.outcomes[1], Created)


def test_forward_reference_is_never_linked(fake_client) -> None:
    import_to_ganttpro(fake_client, _request(
        Task('Early child', hours=1, parent_section='Later'),
        Task('Later', is_section=True),
        Task('Late child', hours=1, parent_section='Later'),
    ))
    assert fake_client.spec_for('Early child').parent_id is None
    assert fake_client.spec_for('Late child').parent_id == 'task-2'


def test_unknown_parent_degrades_to_top_level(fake_client) -> None:
    summary = import_to_ganttpro(fake_client, _request(Task('Orphan', hours=2, parent_section='Typo')))
    assert fake_client.spec_for('Orphan').parent_id is None
    assert summary.tasks_created == 1


def test_failure_does_not_stop_later_tasks() -> None:
    client = FakeGanttProClient(failing_tasks={'Broken'})
    summary = import_to_ganttpro(client, _request(
        Task('First', hours=1),
        Task('Broken', hours=1),
        Task('Third', hours=1),
        Task('Fourth', hours=1),
    ))
    assert [spec.name for spec in client.task_specs] == ['First', 'Broken', 'Third', 'Fourth']
    assert isinstance(summary.outcomes[1], Failed)
    assert summary.tasks_created == 3
    assert summary.tasks_failed == 1
    assert summary.to_response()['success'] is True
    assert summary.errors and 'Broken' in summary.errors[0]


@pytest.mark.parametrize('hours', [1e308, 10**400, float('inf')])
def test_out_of_range_estimate_does_not_stop_later_tasks(fake_client, hours) -> None:
    summary = import_to_ganttpro(fake_client, _request(
        Task('Huge', hours=hours),
        Task('Next', hours=1),
    ))
    assert [spec.name for spec in fake_client.task_specs] == ['Next']
    assert isinstance(summary.outcomes[0], Failed)
    assert 'out of range' in summary.outcomes[0].error
    assert summary.outcomes[1] == Created('Next', remote_id='task-1')
    assert summary.tasks_failed == 1
    assert summary.tasks_created == 1


def test_failed_section_leaves_children_top_level() -> None:
    client = FakeGanttProClient(failing_tasks={'Design'})
    import_to_ganttpro(client, _request(
        Task('Design', is_section=True),
        Task('Mockup', hours=3, parent_section='Design'),
    ))
    assert client.spec_for('Mockup').parent_id is None


def test_section_without_id_is_created_but_not_registered() -> None:
    client = FakeGanttProClient(idless_tasks={'Design'})
    summary = import_to_ganttpro(client, _request(
        Task('Design', is_section=True),
        Task('Mockup', hours=3, parent_section='Design'),
    ))
    assert summary.outcomes[0] == Created('Design', remote_id=None)
    assert client.spec_for('Mockup').parent_id is None
    assert summary.tasks_created == 2


def test_duplicate_section_first_registration_wins(fake_client) -> None:
    import_to_ganttpro(fake_client, _request(
        Task('Phase', is_section=True),
        Task('Phase', is_section=True),
        Task('Work', hours=1, parent_section='Phase'),
    ))
    assert len(fake_client.task_specs) == 3
    assert fake_client.spec_for('Work').parent_id == 'task-1'


def test_nested_sections_are_linked(fake_client) -> None:
    import_to_ganttpro(fake_client, _request(
        Task('Dev', is_section=True),
        Task('Backend', is_section=True, parent_section='Dev'),
        Task('API', hours=2.5, parent_section='Backend'),
    ))
    assert fake_client.spec_for('Backend').parent_id == 'task-1'
    api = fake_client.spec_for('API')
    assert api.parent_id == 'task-2'
    assert api.duration == 150


def test_transport_error_is_recorded_as_failure() -> None:
    class FlakyClient(FakeGanttProClient):
        def create_task(self, spec):
            if spec.name == 'Flaky':
                self.task_specs.append(spec)
                raise requests.exceptions.ConnectionError('connection reset')
            return super().create_task(spec)

    client = FlakyClient()
    summary = import_to_ganttpro(client, _request(Task('Flaky', hours=1), Task('Fine', hours=1)))
    assert isinstance(summary.outcomes[0], Failed)
    assert 'connection reset' in summary.outcomes[0].error
    assert summary.tasks_created == 1


def test_each_import_gets_its_own_registry() -> None:
    first = FakeGanttProClient()
    import_to_ganttpro(first, _request(Task('Shared', is_section=True)))

    second = FakeGanttProClient()
    import_to_ganttpro(second, _request(Task('Child', hours=1, parent_section='Shared')))
    assert second.spec_for('Child').parent_id is None


def test_explicit_registry_is_filled(fake_client) -> None:
    registry = SectionRegistry()
    import_to_ganttpro(fake_client, _request(Task('Design', is_section=True)), registry=registry)
    assert 'Design' in registry
    assert registry.resolve('Design') == 'task-1'


def test_registry_first_writer_wins() -> None:
    registry = SectionRegistry()
    assert registry.register('A', 1)
    assert not registry.register('A', 2)
    assert registry.resolve('A') == 1
    assert registry.resolve(None) is None
    assert len(registry) == 1


def test_aggregate_outcomes_counts() -> None:
    summary = aggregate_outcomes(RemoteProject(id=5), 'P', [
        Created('a', remote_id=1),
        Skipped('b', reason='zero-effort'),
        Failed('c', error='boom'),
        Created('d'),
    ])
    assert summary.to_response() == {
        'success': True,
        'projectId': 5,
        'tasksCreated': 2,
        'tasksFailed': 1,
        'tasksSkipped': 1,
        'message': 'Project "P" created with 2 tasks',
    }
    assert summary.errors == ['c: boom']
