"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from lending_platform.config import settings
from lending_platform.domain.models import LendingCriteria
from lending_platform.infrastructure.repositories import ApplicationRepository


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_application_repository(request: Request) -> ApplicationRepository:
    """Provide the application store owned by this app instance"""
    return request.app.state.application_repository


def get_lending_criteria() -> LendingCriteria:
    """Provide underwriting thresholds from settings"""
    return settings.lending_criteria()
