"""Credit scoring - modifier lookup, score formula and best-offer search"""

from typing import Optional, Tuple

from loan_gateway.domain.models import LoanPolicy

DEBT_MODIFIER = 0


def get_credit_modifier(personal_code: str, policy: LoanPolicy) -> int:
    """
    Derive the credit modifier from the last four digits of the personal code.

    Segments:
    - 0000-2499: debt (modifier 0, never eligible)
    - 2500-4999: segment 1
    - 5000-7499: segment 2
    - 7500-9999: segment 3
    """
    segment = int(personal_code[-4:])

    if segment < 2500:
        return DEBT_MODIFIER
    elif segment < 5000:
        return policy.segment_1_modifier
    elif segment < 7500:
        return policy.segment_2_modifier
    else:
        return policy.segment_3_modifier


def calculate_credit_score(credit_modifier: int, loan_amount: int, loan_period: int) -> float:
    """
    credit score = ((credit modifier / loan amount) * loan period) / 10

    Non-positive amounts score 0.0.
    """
    if loan_amount <= 0:
        return 0.0
    return ((credit_modifier / loan_amount) * loan_period) / 10


def find_best_offer(
    credit_modifier: int,
    requested_period: int,
    policy: LoanPolicy,
) -> Optional[Tuple[int, int]]:
    """
    Search for the first qualifying (amount, period) pair.

    Periods are tried from requested_period upwards; within each period,
    amounts from max_amount downwards. The result is therefore the shortest
    qualifying period and the largest qualifying amount for it.

    Returns None when no pair reaches the score threshold.
    """
    for period in range(requested_period, policy.max_period + 1):
        for amount in range(policy.max_amount, policy.min_amount - 1, -1):
            score = calculate_credit_score(credit_modifier, amount, period)
            if score >= policy.score_threshold:
                return amount, period

    return None
