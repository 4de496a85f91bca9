"""Domain models - pure Python dataclasses representing loan decisions"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from loan_gateway.domain.exceptions import DecisionRejected


@dataclass(frozen=True)
class LoanPolicy:
    """Immutable loan bounds and scoring constants"""

    min_amount: int
    max_amount: int
    min_period: int
    max_period: int
    score_threshold: float
    segment_1_modifier: int
    segment_2_modifier: int
    segment_3_modifier: int


@dataclass(frozen=True)
class LoanRequest:
    """Loan application as submitted by the caller"""

    personal_code: str
    requested_amount: int
    requested_period: int


@dataclass(frozen=True)
class Decision:
    """Approved loan offer"""

    approved_amount: int
    approved_period: int


class DecisionErrorKind(str, Enum):
    INVALID_IDENTITY_CODE = "invalid_identity_code"
    INVALID_LOAN_AMOUNT = "invalid_loan_amount"
    INVALID_LOAN_PERIOD = "invalid_loan_period"
    NO_VALID_LOAN = "no_valid_loan"


@dataclass(frozen=True)
class DecisionError:
    """Why a loan request did not produce an offer"""

    kind: DecisionErrorKind
    message: str


@dataclass(frozen=True)
class DecisionResult:
    """
    Outcome of a single decision call: exactly one of decision or error is set.

    Usage:
        result = engine.decide(code, 4000, 12)
        if result:
            offer = result.decision
        else:
            print(result.error.kind, result.error.message)
    """

    decision: Optional[Decision] = None
    error: Optional[DecisionError] = None

    @classmethod
    def ok(cls, amount: int, period: int) -> "DecisionResult":
        return cls(decision=Decision(approved_amount=amount, approved_period=period))

    @classmethod
    def fail(cls, kind: DecisionErrorKind, message: str) -> "DecisionResult":
        return cls(error=DecisionError(kind=kind, message=message))

    def __bool__(self) -> bool:
        return self.decision is not None

    def unwrap(self) -> Decision:
        """Return the offer or raise DecisionRejected with the error attached"""
        if self.decision is None:
            raise DecisionRejected(self.error)
        return self.decision
