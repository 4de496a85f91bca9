"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from loan_gateway.api.main import create_app
from loan_gateway.domain.engine import DecisionEngine
from loan_gateway.domain.models import LoanPolicy
from loan_gateway.domain.personal_code import EstonianPersonalCodeValidator


# Valid Estonian personal codes (born 1990-01-01) whose last four digits
# fall into each credit segment
DEBT_CODE = "39001011008"  # segment 1008
SEGMENT_1_CODE = "39001013002"  # segment 3002
SEGMENT_2_CODE = "39001016004"  # segment 6004
SEGMENT_3_CODE = "39001018009"  # segment 8009


class AcceptAllValidator:
    """Treats every code as structurally valid"""

    def is_valid(self, code: str) -> bool:
        return True


@pytest.fixture
def policy() -> LoanPolicy:
    """Default loan policy: 2000-10000 euros, 12-60 months"""
    return LoanPolicy(
        min_amount=2000,
        max_amount=10000,
        min_period=12,
        max_period=60,
        score_threshold=0.1,
        segment_1_modifier=100,
        segment_2_modifier=300,
        segment_3_modifier=1000,
    )


@pytest.fixture
def engine(policy: LoanPolicy) -> DecisionEngine:
    """Engine with the real Estonian personal code validator"""
    return DecisionEngine(policy=policy, validator=EstonianPersonalCodeValidator())


@pytest.fixture
def permissive_engine(policy: LoanPolicy) -> DecisionEngine:
    """Engine that skips identity code validation"""
    return DecisionEngine(policy=policy, validator=AcceptAllValidator())


@pytest.fixture
def app():
    app = create_app()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """Create FastAPI test client"""
    return TestClient(app)
