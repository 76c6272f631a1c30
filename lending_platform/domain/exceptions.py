"""Domain-specific exceptions"""

from typing import List


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidApplicationError(DomainException):
    """Application inputs cannot be assessed (non-positive or non-finite values)"""

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__("; ".join(problems))


class DecisionAlreadyMadeError(DomainException):
    """Application already carries a decision and cannot be decided again"""

    pass


class ApplicationNotFoundError(DomainException):
    """No application with the requested identifier"""

    pass
