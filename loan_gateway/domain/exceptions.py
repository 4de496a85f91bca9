"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class DecisionRejected(DomainException):
    """Raised by DecisionResult.unwrap() when no offer was made"""

    def __init__(self, error):
        super().__init__(error.message)
        self.error = error
