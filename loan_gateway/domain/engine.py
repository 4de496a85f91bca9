"""Loan decision engine - core business logic for loan offers"""

from typing import Optional

from loan_gateway.domain.models import DecisionErrorKind, DecisionResult, LoanPolicy, LoanRequest
from loan_gateway.domain.personal_code import IdentityCodeValidator
from loan_gateway.domain.scoring import DEBT_MODIFIER, find_best_offer, get_credit_modifier


class DecisionEngine:
    """
    Decides the best loan offer for an applicant.

    Stateless: holds only the immutable policy and the identity code
    validator, so a single instance can serve concurrent requests.
    """

    def __init__(self, policy: LoanPolicy, validator: IdentityCodeValidator):
        self.policy = policy
        self.validator = validator

    def decide(self, personal_code: str, requested_amount: int, requested_period: int) -> DecisionResult:
        """
        Main entry point: validate the request and search for the best offer.

        Flow:
        1. Verify personal code, then amount, then period
        2. Reject immediately if the applicant has debt
        3. Return the first qualifying offer of the period/amount search
        """
        failure = self._verify_inputs(personal_code, requested_amount, requested_period)
        if failure is not None:
            return failure

        credit_modifier = get_credit_modifier(personal_code, self.policy)
        if credit_modifier == DEBT_MODIFIER:
            return DecisionResult.fail(
                DecisionErrorKind.NO_VALID_LOAN,
                "Loan rejected due to existing debt.",
            )

        offer = find_best_offer(credit_modifier, requested_period, self.policy)
        if offer is None:
            return DecisionResult.fail(
                DecisionErrorKind.NO_VALID_LOAN,
                "No suitable loan found within the allowed period and amount constraints.",
            )

        amount, period = offer
        return DecisionResult.ok(amount, period)

    def decide_request(self, request: LoanRequest) -> DecisionResult:
        return self.decide(request.personal_code, request.requested_amount, request.requested_period)

    def _verify_inputs(
        self, personal_code: str, loan_amount: int, loan_period: int
    ) -> Optional[DecisionResult]:
        policy = self.policy

        if not self.validator.is_valid(personal_code):
            return DecisionResult.fail(DecisionErrorKind.INVALID_IDENTITY_CODE, "Invalid personal ID code!")

        if not policy.min_amount <= loan_amount <= policy.max_amount:
            return DecisionResult.fail(
                DecisionErrorKind.INVALID_LOAN_AMOUNT,
                f"Requested loan amount must be between {policy.min_amount}€ and {policy.max_amount}€!",
            )

        if not policy.min_period <= loan_period <= policy.max_period:
            return DecisionResult.fail(
                DecisionErrorKind.INVALID_LOAN_PERIOD,
                f"Requested loan period must be between {policy.min_period} and {policy.max_period} months!",
            )

        return None
