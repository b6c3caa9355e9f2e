"""RFC 7807 problem details: status registry, problem values and their JSON codec."""

from problem_details.domain.builder import ProblemBuilder
from problem_details.domain.problem import ABOUT_BLANK, RESERVED_NAMES, Problem
from problem_details.domain.status import (
    Family,
    StatusCode,
    all_status_codes,
    lookup,
    resolve,
    try_lookup,
)
from problem_details.errors import (
    DomainError,
    DomainValidationError,
    InvalidProblemDocumentError,
    InvalidStatusWireValueError,
    NotFoundError,
    ProblemException,
    ReservedKeyError,
    UnknownStatusCodeError,
    UnknownWireStatusError,
)
from problem_details.services.codec import decode, dumps, encode, loads

__all__ = [
    "ABOUT_BLANK",
    "RESERVED_NAMES",
    "DomainError",
    "DomainValidationError",
    "Family",
    "InvalidProblemDocumentError",
    "InvalidStatusWireValueError",
    "NotFoundError",
    "Problem",
    "ProblemBuilder",
    "ProblemException",
    "ReservedKeyError",
    "StatusCode",
    "UnknownStatusCodeError",
    "UnknownWireStatusError",
    "all_status_codes",
    "decode",
    "dumps",
    "encode",
    "loads",
    "lookup",
    "resolve",
    "try_lookup",
]
