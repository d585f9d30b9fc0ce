"""Tests for ProjectService."""

import pytest

from outpace.errors import Forbidden, NotFound, ValidationFailed
from outpace.models.project import Project
from outpace.models.task import Task
from outpace.schemas.project import CreateProjectRequest, UpdateProjectRequest
from outpace.schemas.task import CreateTaskRequest
from outpace.services.project_service import ProjectService
from outpace.services.task_service import TaskService


def test_create_and_get(session, make_user):
    ada = make_user()
    service = ProjectService(session)
    project = service.create_project(CreateProjectRequest(title="Launch", description="Q3"), ada.id)

    fetched = service.get_project(project.id, ada.id)
    assert fetched.title == "Launch"
    assert fetched.description == "Q3"
    assert fetched.is_archived is False
    assert fetched.created_by == ada.id


def test_list_scoped_to_owner(session, make_user):
    ada = make_user()
    bob = make_user(email="bob@y.com", name="Bob")
    service = ProjectService(session)
    a1 = service.create_project(CreateProjectRequest(title="A1"), ada.id)
    a2 = service.create_project(CreateProjectRequest(title="A2"), ada.id)
    service.create_project(CreateProjectRequest(title="B1"), bob.id)

    assert [p.id for p in service.list_projects(ada.id)] == [a2.id, a1.id]


def test_missing_and_foreign_projects(session, make_user):
    ada = make_user()
    bob = make_user(email="bob@y.com", name="Bob")
    service = ProjectService(session)
    project = service.create_project(CreateProjectRequest(title="Mine"), ada.id)

    with pytest.raises(NotFound):
        service.get_project(project.id + 100, ada.id)
    with pytest.raises(Forbidden):
        service.get_project(project.id, bob.id)
    with pytest.raises(Forbidden):
        service.update_project(project.id, bob.id, UpdateProjectRequest(title="Theirs"))
    with pytest.raises(Forbidden):
        service.delete_project(project.id, bob.id)

    session.expire_all()
    assert session.get(Project, project.id).title == "Mine"


def test_update_archives_project(session, make_user):
    ada = make_user()
    service = ProjectService(session)
    project = service.create_project(CreateProjectRequest(title="Old"), ada.id)

    updated = service.update_project(project.id, ada.id, UpdateProjectRequest(isArchived=True))
    assert updated.is_archived is True
    assert updated.title == "Old"


def test_unknown_team_is_validation_error(session, make_user):
    ada = make_user()
    with pytest.raises(ValidationFailed, match="teamId"):
        ProjectService(session).create_project(CreateProjectRequest(title="X", teamId=77), ada.id)


def test_delete_detaches_tasks(session, make_user):
    ada = make_user()
    projects = ProjectService(session)
    tasks = TaskService(session)
    project = projects.create_project(CreateProjectRequest(title="Doomed"), ada.id)
    task = tasks.create_task(CreateTaskRequest(title="Survivor", projectId=project.id), ada.id)

    projects.delete_project(project.id, ada.id)

    session.expire_all()
    assert session.get(Project, project.id) is None
    survivor = session.get(Task, task.id)
    assert survivor is not None
    assert survivor.project_id is None
