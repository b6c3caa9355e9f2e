"""Custom domain exceptions for the library."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from problem_details.domain.problem import Problem

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
VALIDATION_ERROR = "VALIDATION_ERROR"
UNKNOWN_STATUS_CODE = "UNKNOWN_STATUS_CODE"
RESERVED_KEY = "RESERVED_KEY"
INVALID_STATUS_WIRE_VALUE = "INVALID_STATUS_WIRE_VALUE"
INVALID_PROBLEM_DOCUMENT = "INVALID_PROBLEM_DOCUMENT"


class DomainError(Exception):
    """Base exception for problem construction and (de)serialization errors."""

    code = VALIDATION_ERROR


class NotFoundError(DomainError, LookupError):
    """Raised when a requested entry does not exist."""

    code = NOT_FOUND


class UnknownStatusCodeError(NotFoundError):
    """Raised when a status code has no entry in the registry."""

    code = UNKNOWN_STATUS_CODE

    def __init__(self, status_code: int):
        super().__init__(f"'{status_code}' is not a registered status code")
        self.status_code = status_code


class DomainValidationError(DomainError, ValueError):
    """Raised when a value breaks a construction or wire-format rule."""

    code = VALIDATION_ERROR


class ReservedKeyError(DomainValidationError):
    """Raised when an extension attribute uses a reserved member name."""

    code = RESERVED_KEY

    def __init__(self, key: str):
        super().__init__(f"Property {key} is reserved")
        self.key = key


class InvalidStatusWireValueError(DomainValidationError):
    """Raised when the wire ``status`` member is null or not an integer."""

    code = INVALID_STATUS_WIRE_VALUE

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class UnknownWireStatusError(UnknownStatusCodeError, InvalidStatusWireValueError):
    """Raised when a received document carries an unregistered code under strict resolution."""

    code = UNKNOWN_STATUS_CODE

    def __init__(self, status_code: int):
        UnknownStatusCodeError.__init__(self, status_code)
        self.value = status_code


class InvalidProblemDocumentError(DomainValidationError):
    """Raised when a wire document cannot be read as a problem."""

    code = INVALID_PROBLEM_DOCUMENT


class ProblemException(Exception):
    """Raisable carrier for a :class:`Problem`.

    The message joins the problem's title and detail. When the problem has a
    cause, ``__cause__`` is a ``ProblemException`` wrapping it, so tracebacks
    show the causal chain.
    """

    def __init__(self, problem: Problem):
        parts = [part for part in (problem.title, problem.detail) if part]
        super().__init__(": ".join(parts))
        self.problem = problem
        if problem.cause is not None:
            self.__cause__ = ProblemException(problem.cause)
