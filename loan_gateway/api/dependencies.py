"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from loan_gateway.config import settings
from loan_gateway.domain.engine import DecisionEngine
from loan_gateway.domain.personal_code import EstonianPersonalCodeValidator


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_decision_engine() -> DecisionEngine:
    """Provide decision engine configured from settings"""
    return DecisionEngine(
        policy=settings.loan_policy(),
        validator=EstonianPersonalCodeValidator(),
    )
