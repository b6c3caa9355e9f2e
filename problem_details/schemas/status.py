"""Wire converter for the ``status`` member: a bare integer on the wire."""

import logging
import numbers
from decimal import Decimal
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from problem_details.domain.status import StatusCode, resolve
from problem_details.errors import (
    InvalidStatusWireValueError,
    UnknownStatusCodeError,
    UnknownWireStatusError,
)

logger = logging.getLogger(__name__)


def encode_status(status: StatusCode) -> int:
    """Only the code goes on the wire; the reason phrase is never sent."""
    return status.code


def _to_code(value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidStatusWireValueError(
            f"Unsupported status representation {type(value).__name__} '{value}'", value
        )
    if isinstance(value, int):
        return value
    if isinstance(value, (numbers.Real, Decimal)):
        try:
            code = int(value)
        except (ValueError, OverflowError):
            code = None
        if code is None or code != value:
            raise InvalidStatusWireValueError(
                f"Unsupported status representation {type(value).__name__} '{value}'", value
            )
        return code
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise InvalidStatusWireValueError(
                f"Unsupported status representation str '{value}'", value
            ) from None
    raise InvalidStatusWireValueError(
        f"Unsupported status representation {type(value).__name__} '{value}'", value
    )


def decode_status(value: Any) -> StatusCode:
    """
    Resolve a wire status value into a StatusCode.

    Accepts StatusCode instances, integers, integral floats/decimals and
    numeric strings. Codes missing from the registry become ad hoc entries
    with an empty reason phrase, unless strict status resolution is enabled.

    Raises:
        InvalidStatusWireValueError: If the value is null, not convertible to
            an integer, or not a positive integer.
        UnknownWireStatusError: If the code is unknown and resolution is strict.
            It is both an ``UnknownStatusCodeError`` and an
            ``InvalidStatusWireValueError``.
    """
    if value is None:
        raise InvalidStatusWireValueError("Cannot accept no value for status", value)
    if isinstance(value, StatusCode):
        return value

    code = _to_code(value)
    if code <= 0:
        raise InvalidStatusWireValueError(
            f"Status code must be a positive integer, got {code}", value
        )

    try:
        status = resolve(code)
    except UnknownStatusCodeError:
        raise UnknownWireStatusError(code) from None
    if not status.is_registered:
        logger.debug("Status code %s is not registered, using an ad hoc entry", code)
    return status


StatusField = Annotated[
    StatusCode,
    PlainValidator(decode_status),
    PlainSerializer(encode_status, return_type=int, when_used="unless-none"),
    WithJsonSchema({"type": "integer", "exclusiveMinimum": 0}),
]
