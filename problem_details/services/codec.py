import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from problem_details.core.config import settings
from problem_details.domain.builder import ProblemBuilder
from problem_details.domain.problem import Problem
from problem_details.errors import (
    InvalidProblemDocumentError,
    InvalidStatusWireValueError,
)
from problem_details.schemas.problem import ProblemDocument

logger = logging.getLogger(__name__)

_NAMED_MEMBERS = ("title", "status", "detail", "instance")


def to_document(problem: Problem, *, include_cause: bool | None = None) -> ProblemDocument:
    """
    Map a Problem onto its wire schema.

    ``type`` is always present (``about:blank`` when it was never set); the
    other named members only when set. Extension attributes follow the named
    members in insertion order. The cause is nested under ``cause`` only when
    ``include_cause`` (default: ``settings.include_cause``) is true.

    Raises:
        InvalidProblemDocumentError: If a named member has the wrong type,
            e.g. a non-string title on a directly constructed Problem.
    """
    if include_cause is None:
        include_cause = settings.include_cause

    data: dict[str, Any] = {"type": problem.type}
    for name in _NAMED_MEMBERS:
        value = getattr(problem, name)
        if value is not None:
            data[name] = value
    if include_cause and problem.cause is not None:
        data["cause"] = to_document(problem.cause, include_cause=True)
    data.update(problem.parameters)
    try:
        return ProblemDocument.model_validate(data)
    except ValidationError as exc:
        raise _translate_validation_error(exc) from exc


def from_document(document: ProblemDocument) -> Problem:
    builder = (
        ProblemBuilder()
        .with_type(document.type)
        .with_title(document.title)
        .with_status(document.status)
        .with_detail(document.detail)
        .with_instance(document.instance)
    )
    if document.cause is not None:
        builder.with_cause(from_document(document.cause))
    builder.with_parameters(document.model_extra or {})
    return builder.build()


def encode(problem: Problem, *, include_cause: bool | None = None) -> dict[str, Any]:
    """Encode a Problem as a JSON-compatible flat dict."""
    document = to_document(problem, include_cause=include_cause)
    return document.model_dump(mode="json", by_alias=True, exclude_unset=True)


def dumps(
    problem: Problem,
    *,
    indent: int | None = None,
    include_cause: bool | None = None,
) -> str:
    """Encode a Problem as JSON text."""
    document = to_document(problem, include_cause=include_cause)
    return document.model_dump_json(
        by_alias=True,
        exclude_unset=True,
        indent=indent if indent is not None else settings.json_indent,
    )


def _translate_validation_error(exc: ValidationError) -> Exception:
    """Surface status failures as the codec's own error, everything else as a bad document."""
    for error in exc.errors():
        if error["loc"] and error["loc"][-1] == "status":
            original = (error.get("ctx") or {}).get("error")
            if isinstance(original, InvalidStatusWireValueError):
                return original
    messages = "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
        for error in exc.errors()
    )
    return InvalidProblemDocumentError(f"Invalid problem document: {messages}")


def decode(data: Mapping[str, Any]) -> Problem:
    """
    Decode a flat problem document.

    Members other than type, title, status, detail, instance and cause become
    extension attributes. Absent members stay unset.

    Raises:
        InvalidStatusWireValueError: If ``status`` is null or not an integer.
        UnknownWireStatusError: If ``status`` is unknown and resolution is strict.
        InvalidProblemDocumentError: If the document is not an object or a
            named member has the wrong type.
    """
    if not isinstance(data, Mapping):
        raise InvalidProblemDocumentError(
            f"Problem document must be an object, got {type(data).__name__}"
        )
    try:
        document = ProblemDocument.model_validate(dict(data))
    except ValidationError as exc:
        raise _translate_validation_error(exc) from exc
    return from_document(document)


def loads(text: str | bytes) -> Problem:
    """Decode a Problem from JSON text. See :func:`decode`."""
    try:
        document = ProblemDocument.model_validate_json(text)
    except ValidationError as exc:
        logger.debug("Rejected problem document: %s", exc)
        raise _translate_validation_error(exc) from exc
    return from_document(document)
