"""Unit tests for settings validation"""

import pytest
from pydantic import ValidationError
from loan_gateway.config import Settings
from loan_gateway.domain.models import LoanPolicy


def test_default_loan_policy():
    policy = Settings().loan_policy()

    assert policy == LoanPolicy(
        min_amount=2000,
        max_amount=10000,
        min_period=12,
        max_period=60,
        score_threshold=0.1,
        segment_1_modifier=100,
        segment_2_modifier=300,
        segment_3_modifier=1000,
    )


def test_loan_policy_from_environment(monkeypatch):
    monkeypatch.setenv("MAX_LOAN_PERIOD", "48")
    monkeypatch.setenv("SEGMENT_2_CREDIT_MODIFIER", "500")

    policy = Settings().loan_policy()

    assert policy.max_period == 48
    assert policy.segment_2_modifier == 500


def test_loan_policy_is_immutable():
    policy = Settings().loan_policy()
    with pytest.raises(AttributeError):
        policy.max_amount = 1


def test_inverted_amount_bounds_rejected():
    with pytest.raises(ValidationError):
        Settings(min_loan_amount=5000, max_loan_amount=1000)


def test_inverted_period_bounds_rejected():
    with pytest.raises(ValidationError):
        Settings(min_loan_period=60, max_loan_period=12)


def test_non_positive_modifier_rejected():
    with pytest.raises(ValidationError):
        Settings(segment_3_credit_modifier=0)
