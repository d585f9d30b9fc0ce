"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from fastapi import Depends, Request
from sqlmodel import Session

from outpace.config import Settings
from outpace.db.database import get_session
from outpace.services.auth_service import AuthService
from outpace.services.project_service import ProjectService
from outpace.services.task_service import TaskService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_service(
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(session, settings)


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    return TaskService(session)


def get_project_service(session: Session = Depends(get_session)) -> ProjectService:
    return ProjectService(session)
