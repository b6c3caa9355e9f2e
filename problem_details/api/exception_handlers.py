"""Exception handlers that render problems as application/problem+json responses."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from problem_details.core.config import settings
from problem_details.domain.builder import ProblemBuilder
from problem_details.domain.problem import Problem
from problem_details.domain.status import INTERNAL_SERVER_ERROR, lookup, resolve
from problem_details.errors import (
    DomainError,
    InvalidProblemDocumentError,
    InvalidStatusWireValueError,
    ProblemException,
)
from problem_details.services.codec import encode

logger = logging.getLogger(__name__)


class ProblemResponse(JSONResponse):
    """Response whose HTTP status follows the problem's status.

    Problems without a status, or whose code is not a final HTTP response
    code (200-599), are sent as 500; the body keeps the original status.
    """

    media_type = "application/problem+json"

    def __init__(self, problem: Problem, **kwargs):
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        if problem.status is not None and 200 <= problem.status.code <= 599:
            status_code = problem.status.code
        kwargs.setdefault("media_type", settings.media_type)
        super().__init__(content=encode(problem), status_code=status_code, **kwargs)


def _problem_response(problem: Problem, headers: dict[str, str] | None = None) -> ProblemResponse:
    """Log and wrap a problem."""
    response = ProblemResponse(problem, headers=headers)
    if response.status_code >= 500:
        logger.error("Responding with problem %s", problem)
    else:
        logger.info("Responding with problem %s", problem)
    return response


def problem_exception_handler(_request: Request, exc: ProblemException) -> ProblemResponse:
    return _problem_response(exc.problem)


def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> ProblemResponse:
    detail = exc.detail if isinstance(exc.detail, str) else None
    problem = Problem.value_of(resolve(exc.status_code, strict=False), detail=detail)
    return _problem_response(problem, headers=getattr(exc, "headers", None))


def invalid_document_error_handler(
    _request: Request, exc: InvalidStatusWireValueError | InvalidProblemDocumentError
) -> ProblemResponse:
    """A problem document received from a client did not decode."""
    problem = (
        ProblemBuilder.create(lookup(status.HTTP_400_BAD_REQUEST))
        .with_detail(str(exc))
        .with_("code", exc.code)
        .build()
    )
    return _problem_response(problem)


def domain_error_handler(_request: Request, exc: DomainError) -> ProblemResponse:
    """Any other library error is a server-side fault; its message stays in the log."""
    logger.error("Unhandled %s: %s", type(exc).__name__, exc, exc_info=exc)
    return ProblemResponse(Problem.value_of(INTERNAL_SERVER_ERROR))


def register_exception_handlers(app):
    """Register problem exception handlers on the FastAPI app."""
    app.add_exception_handler(ProblemException, problem_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(InvalidStatusWireValueError, invalid_document_error_handler)
    app.add_exception_handler(InvalidProblemDocumentError, invalid_document_error_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
