"""Estonian personal identification code (isikukood) validation"""

from datetime import date
from typing import Optional, Protocol

from loan_gateway.utils.date_utils import century_start, safe_date

CODE_LENGTH = 11
PRIMARY_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
SECONDARY_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)


class IdentityCodeValidator(Protocol):
    """Anything that can tell whether a personal code is structurally valid"""

    def is_valid(self, code: str) -> bool:
        ...


def calculate_check_digit(code: str) -> int:
    """
    Compute the modulo-11 check digit from the first ten digits.

    Algorithm:
    - Multiply digits by weights 1,2,3,4,5,6,7,8,9,1 and take sum % 11
    - If the remainder is 10, repeat with weights 3,4,5,6,7,8,9,1,2,3
    - If the remainder is still 10, the check digit is 0
    """
    digits = [int(c) for c in code[:10]]

    remainder = sum(d * w for d, w in zip(digits, PRIMARY_WEIGHTS)) % 11
    if remainder < 10:
        return remainder

    remainder = sum(d * w for d, w in zip(digits, SECONDARY_WEIGHTS)) % 11
    return remainder if remainder < 10 else 0


class EstonianPersonalCodeValidator:
    """
    Validates Estonian personal codes.

    Format: GYYMMDDSSSC (11 digits)
    - G: century and sex (1-2 = 1800s, 3-4 = 1900s, 5-6 = 2000s, 7-8 = 2100s)
    - YYMMDD: date of birth
    - SSS: serial number
    - C: check digit
    """

    def birth_date(self, code: str) -> Optional[date]:
        """Decode the date of birth, or None if the code does not encode a real date"""
        if len(code) != CODE_LENGTH or not (code.isascii() and code.isdigit()):
            return None

        start = century_start(int(code[0]))
        if start is None:
            return None

        return safe_date(start + int(code[1:3]), int(code[3:5]), int(code[5:7]))

    def is_valid(self, code: str) -> bool:
        if not isinstance(code, str):
            return False

        if self.birth_date(code) is None:
            return False

        return calculate_check_digit(code) == int(code[10])
