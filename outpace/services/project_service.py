"""Project CRUD scoped to the authenticated owner."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlmodel import Session, col, select

from outpace.errors import Forbidden, NotFound, ValidationFailed
from outpace.models.project import Project
from outpace.models.task import Task
from outpace.models.team import Team
from outpace.schemas.project import CreateProjectRequest, UpdateProjectRequest

logger = logging.getLogger(__name__)


class ProjectService:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create_project(self, data: CreateProjectRequest, user_id: int) -> Project:
        if data.team_id is not None and self.session.get(Team, data.team_id) is None:
            raise ValidationFailed("teamId: team not found")

        project = Project(
            title=data.title,
            description=data.description,
            team_id=data.team_id,
            created_by=user_id,
        )
        self.session.add(project)
        self.session.commit()
        self.session.refresh(project)
        logger.info("Project created: %s", project.id)
        return project

    def list_projects(self, user_id: int) -> list[Project]:
        stmt = (
            select(Project)
            .where(Project.created_by == user_id)
            .order_by(col(Project.created_at).desc(), col(Project.id).desc())
        )
        return list(self.session.exec(stmt).all())

    def get_project(self, project_id: int, user_id: int) -> Project:
        project = self.session.get(Project, project_id)
        if project is None:
            raise NotFound("Project not found")
        if project.created_by != user_id:
            raise Forbidden("Not allowed to access this project")
        return project

    def update_project(self, project_id: int, user_id: int, updates: UpdateProjectRequest) -> Project:
        project = self.get_project(project_id, user_id)

        for key, value in updates.model_dump(exclude_unset=True).items():
            setattr(project, key, value)
        project.updated_at = datetime.now(timezone.utc)

        self.session.add(project)
        self.session.commit()
        self.session.refresh(project)
        logger.info("Project updated: %s", project_id)
        return project

    def delete_project(self, project_id: int, user_id: int) -> None:
        project = self.get_project(project_id, user_id)

        # Tasks outlive their project; detach them before the row goes
        tasks = self.session.exec(select(Task).where(Task.project_id == project_id)).all()
        for task in tasks:
            task.project_id = None
            self.session.add(task)
        self.session.flush()
        self.session.delete(project)
        self.session.commit()
        logger.info("Project deleted: %s (%d tasks detached)", project_id, len(tasks))
