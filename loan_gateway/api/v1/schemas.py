"""Pydantic schemas for API request/response validation"""

from pydantic import AliasChoices, BaseModel, Field
from typing import Optional


class DecisionRequest(BaseModel):
    """Request body for POST /v1/loan/decision"""

    personal_code: str = Field(
        ...,
        validation_alias=AliasChoices("personal_code", "personalCode"),
        description="Estonian personal identification code",
    )
    loan_amount: int = Field(
        ...,
        validation_alias=AliasChoices("loan_amount", "loanAmount"),
        description="Requested loan amount in euros",
    )
    loan_period: int = Field(
        ...,
        validation_alias=AliasChoices("loan_period", "loanPeriod"),
        description="Requested loan period in months",
    )


class DecisionResponse(BaseModel):
    """Response for POST /v1/loan/decision"""

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error_message: Optional[str] = None
