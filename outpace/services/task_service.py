"""Task CRUD scoped to the authenticated owner."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlmodel import Session, col, select

from outpace.config import COMPLETED_STATUS, TaskStatus
from outpace.errors import Forbidden, NotFound, ValidationFailed
from outpace.models.project import Project
from outpace.models.task import Task, TaskAssignment
from outpace.models.user import User
from outpace.schemas.task import CreateTaskRequest, TaskStats, UpdateTaskRequest

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create_task(self, data: CreateTaskRequest, user_id: int) -> Task:
        """Insert a task owned by ``user_id``, plus its assignment when one is requested."""
        if data.project_id is not None and self.session.get(Project, data.project_id) is None:
            raise ValidationFailed("projectId: project not found")
        if data.assigned_to is not None and self.session.get(User, data.assigned_to) is None:
            raise ValidationFailed("assignedTo: user not found")

        task = Task(
            title=data.title,
            description=data.description,
            status=data.status,
            priority=data.priority,
            due_date=data.due_date,
            project_id=data.project_id,
            created_by=user_id,
        )
        self.session.add(task)
        self.session.flush()

        if data.assigned_to is not None:
            self.session.add(
                TaskAssignment(task_id=task.id, user_id=data.assigned_to, assigned_by=user_id)
            )

        self.session.commit()
        self.session.refresh(task)
        logger.info("Task created: %s", task.id)
        return task

    def list_tasks(self, user_id: int) -> list[tuple[Task, str | None]]:
        """Tasks created by ``user_id``, newest first, each with its creator's name."""
        stmt = (
            select(Task, User.name)
            .join(User, col(Task.created_by) == col(User.id), isouter=True)
            .where(Task.created_by == user_id)
            .order_by(col(Task.created_at).desc(), col(Task.id).desc())
        )
        return [(task, name) for task, name in self.session.exec(stmt).all()]

    def get_task(self, task_id: int, user_id: int) -> Task:
        task = self.session.get(Task, task_id)
        if task is None:
            raise NotFound("Task not found")
        if task.created_by != user_id:
            raise Forbidden("Not allowed to access this task")
        return task

    def update_task(self, task_id: int, user_id: int, updates: UpdateTaskRequest) -> Task:
        task = self.get_task(task_id, user_id)

        for key, value in updates.model_dump(exclude_unset=True).items():
            setattr(task, key, value)
        task.updated_at = datetime.now(timezone.utc)

        self.session.add(task)
        self.session.commit()
        self.session.refresh(task)
        logger.info("Task updated: %s", task_id)
        return task

    def delete_task(self, task_id: int, user_id: int) -> None:
        task = self.get_task(task_id, user_id)

        # Assignments reference the task, so they go first
        assignments = self.session.exec(
            select(TaskAssignment).where(TaskAssignment.task_id == task_id)
        ).all()
        for assignment in assignments:
            self.session.delete(assignment)
        self.session.flush()
        self.session.delete(task)
        self.session.commit()
        logger.info("Task deleted: %s", task_id)

    def get_task_stats(self, user_id: int) -> TaskStats:
        """Counts over the owner's task list, computed in memory."""
        tasks = [task for task, _ in self.list_tasks(user_id)]
        return TaskStats(
            total=len(tasks),
            completed=sum(1 for t in tasks if t.status == COMPLETED_STATUS),
            in_progress=sum(1 for t in tasks if t.status == TaskStatus.IN_PROGRESS),
            todo=sum(1 for t in tasks if t.status == TaskStatus.TODO),
        )
