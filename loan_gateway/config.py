"""Configuration management using Pydantic Settings"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from loan_gateway.domain.models import LoanPolicy


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-gateway"
    log_level: str = "INFO"

    # Loan bounds (amount in euros, period in months)
    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12
    max_loan_period: int = 60

    # Scoring
    credit_score_threshold: float = 0.1
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000

    @model_validator(mode="after")
    def check_loan_bounds(self) -> "Settings":
        if self.min_loan_amount > self.max_loan_amount:
            raise ValueError("min_loan_amount must not exceed max_loan_amount")
        if self.min_loan_period > self.max_loan_period:
            raise ValueError("min_loan_period must not exceed max_loan_period")
        modifiers = (
            self.segment_1_credit_modifier,
            self.segment_2_credit_modifier,
            self.segment_3_credit_modifier,
        )
        if any(m <= 0 for m in modifiers):
            raise ValueError("segment credit modifiers must be positive")
        return self

    def loan_policy(self) -> LoanPolicy:
        """Snapshot the loan constants into an immutable policy"""
        return LoanPolicy(
            min_amount=self.min_loan_amount,
            max_amount=self.max_loan_amount,
            min_period=self.min_loan_period,
            max_period=self.max_loan_period,
            score_threshold=self.credit_score_threshold,
            segment_1_modifier=self.segment_1_credit_modifier,
            segment_2_modifier=self.segment_2_credit_modifier,
            segment_3_modifier=self.segment_3_credit_modifier,
        )


settings = Settings()
