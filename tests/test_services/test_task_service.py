"""Tests for TaskService: ownership scoping, assignments, stats, due dates."""

from datetime import datetime, timezone

import pytest
from sqlmodel import select

from outpace.errors import Forbidden, NotFound, ValidationFailed
from outpace.models.task import Task, TaskAssignment
from outpace.schemas.task import CreateTaskRequest, TaskRead, UpdateTaskRequest
from outpace.services.task_service import TaskService


def _create(service, user_id, **fields):
    fields.setdefault("title", "Write report")
    return service.create_task(CreateTaskRequest(**fields), user_id)


def test_create_applies_defaults(session, make_user):
    ada = make_user()
    task = _create(TaskService(session), ada.id)
    assert task.id is not None
    assert task.status == 0
    assert task.priority == 1
    assert task.created_by == ada.id
    assert task.due_date is None


def test_due_date_round_trip_is_midnight_utc(session, make_user):
    ada = make_user()
    service = TaskService(session)
    created = _create(service, ada.id, title="A", priority=2, dueDate="2025-01-01")

    session.expire_all()
    fetched = TaskRead.model_validate(service.get_task(created.id, ada.id))
    assert fetched.title == "A"
    assert fetched.priority == 2
    assert fetched.due_date == datetime(2025, 1, 1, tzinfo=timezone.utc)


def test_list_only_returns_own_tasks_newest_first(session, make_user):
    ada = make_user()
    bob = make_user(email="bob@y.com", name="Bob")
    service = TaskService(session)
    first = _create(service, ada.id, title="first")
    second = _create(service, ada.id, title="second")
    _create(service, bob.id, title="bob's")

    rows = service.list_tasks(ada.id)
    assert [t.id for t, _ in rows] == [second.id, first.id]
    assert all(name == "Ada" for _, name in rows)


def test_get_missing_task_is_not_found(session, make_user):
    ada = make_user()
    with pytest.raises(NotFound):
        TaskService(session).get_task(999, ada.id)


def test_other_user_cannot_update_or_delete(session, make_user):
    ada = make_user()
    bob = make_user(email="bob@y.com", name="Bob")
    service = TaskService(session)
    task = _create(service, ada.id, title="Original")

    with pytest.raises(Forbidden):
        service.update_task(task.id, bob.id, UpdateTaskRequest(title="Hijacked"))
    with pytest.raises(Forbidden):
        service.delete_task(task.id, bob.id)

    session.expire_all()
    unchanged = session.get(Task, task.id)
    assert unchanged is not None
    assert unchanged.title == "Original"


def test_update_applies_only_supplied_fields(session, make_user):
    ada = make_user()
    service = TaskService(session)
    task = _create(service, ada.id, title="Keep", description="old", priority=3)
    before = task.updated_at

    updated = service.update_task(task.id, ada.id, UpdateTaskRequest(status=1))
    assert updated.status == 1
    assert updated.title == "Keep"
    assert updated.description == "old"
    assert updated.priority == 3
    assert updated.updated_at >= before


def test_assignment_created_and_removed_with_task(session, make_user):
    ada = make_user()
    bob = make_user(email="bob@y.com", name="Bob")
    service = TaskService(session)
    task = _create(service, ada.id, assignedTo=bob.id)

    assignments = session.exec(select(TaskAssignment).where(TaskAssignment.task_id == task.id)).all()
    assert len(assignments) == 1
    assert assignments[0].user_id == bob.id
    assert assignments[0].assigned_by == ada.id

    service.delete_task(task.id, ada.id)
    assert session.get(Task, task.id) is None
    assert session.exec(select(TaskAssignment)).all() == []


def test_unknown_assignee_or_project_is_validation_error(session, make_user):
    ada = make_user()
    service = TaskService(session)
    with pytest.raises(ValidationFailed, match="assignedTo"):
        _create(service, ada.id, assignedTo=12345)
    with pytest.raises(ValidationFailed, match="projectId"):
        _create(service, ada.id, projectId=12345)
    assert service.list_tasks(ada.id) == []


def test_stats_partition_tasks_by_status(session, make_user):
    ada = make_user()
    bob = make_user(email="bob@y.com", name="Bob")
    service = TaskService(session)
    for status in (0, 0, 1, 2, 2, 2):
        _create(service, ada.id, status=status)
    _create(service, bob.id, status=1)

    stats = service.get_task_stats(ada.id)
    assert stats.total == 6
    assert (stats.todo, stats.in_progress, stats.completed) == (2, 1, 3)
    assert stats.total == stats.todo + stats.in_progress + stats.completed


def test_stats_empty(session, make_user):
    ada = make_user()
    stats = TaskService(session).get_task_stats(ada.id)
    assert stats.model_dump() == {"total": 0, "completed": 0, "in_progress": 0, "todo": 0}
